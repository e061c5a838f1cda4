"""Dynamically typed runtime objects with manual reference counting."""

from __future__ import annotations

import enum
import operator
import struct
from typing import Iterator, Optional


class Kind(enum.Enum):
    """The kind of value an object carries."""

    INTEGER = 0
    FLOAT = 1
    STRING = 2
    VECTOR3 = 3
    ARRAY = 4


_F32 = struct.Struct("<f")


def _to_f32(value: float) -> float:
    """Round a number to single precision."""
    return _F32.unpack(_F32.pack(float(value)))[0]


class SnekObject:
    """Base class of all runtime objects; starts with a reference count of one."""

    kind: Kind

    def __init__(self) -> None:
        self._refcount = 1
        self._released = False

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def released(self) -> bool:
        return self._released

    def _check_alive(self) -> None:
        if self._released:
            raise RuntimeError(f"{self.kind.name} object has already been released")

    def incref(self) -> None:
        """Take one more reference to this object."""
        self._check_alive()
        self._refcount += 1

    def decref(self) -> None:
        """Drop one reference; the object is released when none remain."""
        self._check_alive()
        self._refcount -= 1
        if self._refcount == 0:
            self.release()

    def release(self) -> None:
        """Release the object and drop the references it holds to others."""
        self._check_alive()
        self._released = True
        self._refcount = 0
        self._drop_references()

    def _drop_references(self) -> None:
        pass

    def _add(self, other: "SnekObject") -> "SnekObject":
        return NotImplemented

    def __add__(self, other: object) -> "SnekObject":
        if not isinstance(other, SnekObject):
            return NotImplemented
        return self._add(other)

    def __len__(self) -> int:
        raise TypeError(f"{self.kind.name} object has no length")


class SnekInteger(SnekObject):
    """An integer value."""

    kind = Kind.INTEGER

    def __init__(self, value: int) -> None:
        super().__init__()
        self.value = operator.index(value)

    def _add(self, other: SnekObject) -> SnekObject:
        if isinstance(other, SnekInteger):
            return SnekInteger(self.value + other.value)
        if isinstance(other, SnekFloat):
            return SnekFloat(self.value + other.value)
        return NotImplemented

    def __len__(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"SnekInteger({self.value!r})"


class SnekFloat(SnekObject):
    """A single-precision floating point value."""

    kind = Kind.FLOAT

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = _to_f32(value)

    def _add(self, other: SnekObject) -> SnekObject:
        if isinstance(other, (SnekInteger, SnekFloat)):
            return SnekFloat(self.value + other.value)
        return NotImplemented

    def __len__(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"SnekFloat({self.value!r})"


class SnekString(SnekObject):
    """A string value."""

    kind = Kind.STRING

    def __init__(self, value: str) -> None:
        super().__init__()
        if not isinstance(value, str):
            raise TypeError("string value must be a str")
        self.value = value

    def _add(self, other: SnekObject) -> SnekObject:
        if isinstance(other, SnekString):
            return SnekString(self.value + other.value)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        return f"SnekString({self.value!r})"


class SnekVector3(SnekObject):
    """Three objects held together; each component gains a reference."""

    kind = Kind.VECTOR3

    def __init__(self, x: SnekObject, y: SnekObject, z: SnekObject) -> None:
        components = (x, y, z)
        if not all(isinstance(c, SnekObject) for c in components):
            raise TypeError("vector components must be snek objects")
        super().__init__()
        self.x, self.y, self.z = components
        for component in components:
            component.incref()

    def __iter__(self) -> Iterator[SnekObject]:
        return iter((self.x, self.y, self.z))

    def _drop_references(self) -> None:
        for component in self:
            component.decref()

    def _add(self, other: SnekObject) -> SnekObject:
        if not isinstance(other, SnekVector3):
            return NotImplemented
        return SnekVector3(
            snek_add(self.x, other.x),
            snek_add(self.y, other.y),
            snek_add(self.z, other.z),
        )

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        return f"SnekVector3({self.x!r}, {self.y!r}, {self.z!r})"


class SnekArray(SnekObject):
    """A fixed-size array of object slots, initially empty."""

    kind = Kind.ARRAY

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError("array size must not be negative")
        super().__init__()
        self.elements: list[Optional[SnekObject]] = [None] * size

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self.elements):
            raise IndexError("array index out of range")
        return index

    def __getitem__(self, index: int) -> Optional[SnekObject]:
        return self.elements[self._check_index(index)]

    def __setitem__(self, index: int, value: SnekObject) -> None:
        if not isinstance(value, SnekObject):
            raise TypeError("array elements must be snek objects")
        self.elements[self._check_index(index)] = value

    def __iter__(self) -> Iterator[Optional[SnekObject]]:
        return iter(self.elements)

    def _drop_references(self) -> None:
        self.elements = []

    def _add(self, other: SnekObject) -> SnekObject:
        if not isinstance(other, SnekArray):
            return NotImplemented
        result = SnekArray(len(self.elements) + len(other.elements))
        result.elements = self.elements + other.elements
        return result

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"SnekArray({self.elements!r})"


def snek_add(a: SnekObject, b: SnekObject) -> SnekObject:
    """Add two objects, raising TypeError when their kinds do not combine."""
    if not isinstance(a, SnekObject) or not isinstance(b, SnekObject):
        raise TypeError("both operands must be snek objects")
    result = a._add(b)
    if result is NotImplemented:
        raise TypeError(f"cannot add {a.kind.name} and {b.kind.name}")
    return result


def snek_length(obj: SnekObject) -> int:
    """Return the length of an object: 1 for numbers, 3 for vectors."""
    if not isinstance(obj, SnekObject):
        raise TypeError("length is only defined for snek objects")
    return len(obj)