import pytest

from snekobj.objects import (
    Kind,
    SnekArray,
    SnekFloat,
    SnekInteger,
    SnekString,
    SnekVector3,
    snek_add,
    snek_length,
)


def test_kinds():
    assert SnekInteger(1).kind is Kind.INTEGER
    assert SnekFloat(1.0).kind is Kind.FLOAT
    assert SnekString("s").kind is Kind.STRING
    assert SnekArray(0).kind is Kind.ARRAY


def test_integer_addition():
    a, b = SnekInteger(1337), SnekInteger(1024)
    result = snek_add(a, b)
    assert isinstance(result, SnekInteger)
    assert result.value == a.value + b.value


def test_integer_plus_float_is_float():
    result = SnekInteger(1) + SnekFloat(0.5)
    assert isinstance(result, SnekFloat)
    assert result.value == 1.5


def test_float_plus_integer_is_float():
    result = SnekFloat(0.5) + SnekInteger(2)
    assert isinstance(result, SnekFloat)
    assert result.value == 2.5


def test_float_is_single_precision():
    f = SnekFloat(3.14)
    assert f.value == pytest.approx(3.14, rel=1e-6)
    assert f.value != 3.14


def test_string_concatenation():
    result = SnekString("store this ") + SnekString("string in stack")
    assert result.value == "store this string in stack"
    assert snek_length(result) == len("store this string in stack")


def test_mismatched_kinds_raise():
    with pytest.raises(TypeError):
        snek_add(SnekString("a"), SnekInteger(1))
    with pytest.raises(TypeError):
        SnekInteger(1) + SnekString("a")
    with pytest.raises(TypeError):
        snek_add(None, SnekInteger(1))


def test_lengths():
    assert snek_length(SnekInteger(5)) == 1
    assert snek_length(SnekFloat(5.0)) == 1
    v = SnekVector3(SnekInteger(1), SnekInteger(2), SnekInteger(3))
    assert snek_length(v) == 3
    assert snek_length(SnekArray(4)) == 4
    with pytest.raises(TypeError):
        snek_length(None)


def test_vector_addition_is_componentwise():
    a = SnekVector3(SnekInteger(1), SnekFloat(0.5), SnekString("x"))
    b = SnekVector3(SnekInteger(2), SnekInteger(1), SnekString("y"))
    result = a + b
    assert result.x.value == a.x.value + b.x.value
    assert result.y.value == a.y.value + b.y.value
    assert result.z.value == "xy"


def test_vector_addition_with_bad_component_raises():
    a = SnekVector3(SnekInteger(1), SnekInteger(1), SnekInteger(1))
    b = SnekVector3(SnekInteger(1), SnekString("s"), SnekInteger(1))
    with pytest.raises(TypeError):
        snek_add(a, b)


def test_vector_requires_objects():
    with pytest.raises(TypeError):
        SnekVector3(SnekInteger(1), None, SnekInteger(2))


def test_array_set_and_get():
    arr = SnekArray(2)
    assert arr[0] is None
    item = SnekInteger(1337)
    arr[1] = item
    assert arr[1] is item


def test_array_bounds_and_types():
    arr = SnekArray(2)
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[-1] = SnekInteger(1)
    with pytest.raises(TypeError):
        arr[0] = None


def test_array_concatenation_shares_elements():
    a, b = SnekArray(1), SnekArray(2)
    first, second = SnekInteger(1), SnekString("two")
    a[0] = first
    b[1] = second
    result = a + b
    assert len(result) == len(a) + len(b)
    assert result[0] is first
    assert result[1] is None
    assert result[2] is second


def test_new_objects_have_one_reference():
    assert SnekInteger(1).refcount == 1
    assert SnekString("s").refcount == 1


def test_incref_decref_round_trip():
    obj = SnekInteger(1)
    obj.incref()
    assert obj.refcount == 2
    obj.decref()
    assert obj.refcount == 1
    assert not obj.released


def test_decref_to_zero_releases():
    obj = SnekString("bye")
    obj.decref()
    assert obj.released
    with pytest.raises(RuntimeError):
        obj.decref()
    with pytest.raises(RuntimeError):
        obj.incref()


def test_vector_holds_references_to_components():
    x, y, z = SnekInteger(1), SnekInteger(2), SnekInteger(3)
    vec = SnekVector3(x, y, z)
    assert [c.refcount for c in (x, y, z)] == [2, 2, 2]
    vec.decref()
    assert vec.released
    assert [c.refcount for c in (x, y, z)] == [1, 1, 1]
    assert not x.released


def test_release_vector_frees_sole_owned_components():
    x, y, z = SnekInteger(1), SnekInteger(2), SnekInteger(3)
    vec = SnekVector3(x, y, z)
    for c in (x, y, z):
        c.decref()
    assert not x.released
    vec.release()
    assert all(c.released for c in (x, y, z))