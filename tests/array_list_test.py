import gc
import random
import weakref

import pytest

from seqlist import ArrayList, IndexOutOfBoundsError
from seqlist.conformance import ReferenceList

N = 100


def assert_same_contents(expected, lst):
    assert lst.size() == len(expected)
    for i, element in enumerate(expected):
        assert lst.get(i) is element, f"get({i})"


# ----------------------------
# Literal scenarios
# ----------------------------

@pytest.mark.core
def test_add_three_then_get(new_list):
    lst = new_list()
    assert lst.add("a") is True
    lst.add("b")
    lst.add("c")
    assert lst.size() == 3
    assert lst.get(1) == "b"


@pytest.mark.basic
def test_set_returns_previous_then_remove_front(new_list):
    lst = new_list()
    for v in ("a", "b", "c"):
        lst.add(v)

    assert lst.set(1, "x") == "b"
    assert lst.get(1) == "x"

    assert lst.remove(0) == "a"
    assert lst.size() == 2
    assert lst.get(0) == "x"


@pytest.mark.basic
def test_insert_at_front_twice(new_list):
    lst = new_list()
    lst.insert(0, "a")
    lst.insert(0, "b")
    assert lst.to_py() == ["b", "a"]


@pytest.mark.exception
def test_empty_list_rejects_everything(new_list):
    lst = new_list()
    with pytest.raises(IndexError):
        lst.get(0)
    with pytest.raises(IndexError):
        lst.remove(0)
    it = lst.list_iterator()
    assert not it.has_next()
    assert not it.has_previous()
    assert it.next_index() == 0
    assert it.previous_index() == -1


# ----------------------------
# Bounds
# ----------------------------

@pytest.mark.exception
def test_insert_bounds_allow_appending_at_size(new_list, items):
    lst = new_list()
    a, b = items(2)
    with pytest.raises(IndexError):
        lst.insert(-1, a)
    with pytest.raises(IndexError):
        lst.insert(1, a)
    lst.insert(0, a)
    with pytest.raises(IndexError):
        lst.insert(2, b)
    lst.insert(1, b)
    assert_same_contents([a, b], lst)


@pytest.mark.exception
@pytest.mark.parametrize("op", ["get", "set", "remove"])
def test_element_ops_reject_size_and_negative(new_list, items, op):
    lst = new_list()
    elements = items(3)
    for e in elements:
        lst.add(e)
    call = {
        "get": lambda i: lst.get(i),
        "set": lambda i: lst.set(i, object()),
        "remove": lambda i: lst.remove(i),
    }[op]
    for bad in (-1, 3, 4):
        with pytest.raises(IndexError):
            call(bad)
    # rejected calls changed nothing
    assert_same_contents(elements, lst)


@pytest.mark.exception
def test_list_iterator_bounds(new_list, items):
    lst = new_list()
    for e in items(3):
        lst.add(e)
    assert lst.list_iterator(3).next_index() == 3
    with pytest.raises(IndexError):
        lst.list_iterator(4)
    with pytest.raises(IndexError):
        lst.list_iterator(-1)


def test_out_of_bounds_error_reports_index_and_size():
    lst = ArrayList(["a"])
    with pytest.raises(IndexOutOfBoundsError) as excinfo:
        lst.get(5)
    assert excinfo.value.index == 5
    assert excinfo.value.size == 1
    assert "out of range" in str(excinfo.value)


def test_non_integer_index_is_a_type_error():
    lst = ArrayList(["a"])
    with pytest.raises(TypeError):
        lst.get("0")
    with pytest.raises(TypeError):
        lst.insert(0.0, "b")
    assert lst.to_py() == ["a"]


class Position:
    """Integer-like object usable as an index."""

    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value


def test_index_like_objects_are_accepted():
    lst = ArrayList(["a", "c"])
    lst.insert(Position(1), "b")
    assert lst.get(Position(1)) == "b"
    assert lst.set(Position(2), "z") == "c"
    assert lst.remove(Position(0)) == "a"
    assert lst.list_iterator(Position(1)).next() == "z"
    assert lst.to_py() == ["b", "z"]
    with pytest.raises(IndexOutOfBoundsError):
        lst.get(Position(2))


def test_reference_list_accepts_index_like_objects():
    ref = ReferenceList(["a", "b"])
    assert ref.get(Position(1)) == "b"
    ref.insert(Position(2), "c")
    assert ref.to_py() == ["a", "b", "c"]


# ----------------------------
# Randomized, checked against the built-in list
# ----------------------------

@pytest.mark.core
def test_add_get_multiple(new_list, items):
    lst = new_list()
    expected = []
    for e in items(N):
        expected.append(e)
        lst.add(e)
        assert_same_contents(expected, lst)


@pytest.mark.basic
def test_insert_random_positions(new_list, items):
    lst = new_list()
    expected = []
    rng = random.Random(0x2E7884B5E1776931)
    for i, e in enumerate(items(N), 1):
        index = rng.randrange(i)
        expected.insert(index, e)
        lst.insert(index, e)
    assert_same_contents(expected, lst)


@pytest.mark.basic
def test_insert_at_start_and_end(new_list, items):
    lst = new_list()
    expected = []
    pool = items(N)
    for i in range(N // 2):
        for index, e in ((2 * i, pool[2 * i]), (0, pool[2 * i + 1])):
            expected.insert(index, e)
            lst.insert(index, e)
    assert_same_contents(expected, lst)


@pytest.mark.basic
def test_remove_random_positions(new_list, items):
    expected = items(N)
    lst = new_list()
    for e in expected:
        lst.add(e)
    rng = random.Random(0x2874C9B483185737)
    while expected:
        index = rng.randrange(len(expected))
        assert lst.remove(index) is expected.pop(index)
        assert_same_contents(expected, lst)


@pytest.mark.basic
def test_set_random_positions(new_list, items):
    expected = items(N)
    lst = new_list()
    for e in expected:
        lst.add(e)
    rng = random.Random(0xB890175A7859835)
    for replacement in items(N):
        index = rng.randrange(N)
        assert lst.set(index, replacement) is expected[index]
        expected[index] = replacement
        assert lst.get(index) is replacement
        assert_same_contents(expected, lst)


@pytest.mark.basic
def test_size_tracks_adds_minus_removes(new_list, items):
    lst = new_list()
    rng = random.Random(7)
    adds = removes = 0
    for e in items(500):
        if lst.size() and rng.random() < 0.4:
            lst.remove(rng.randrange(lst.size()))
            removes += 1
        else:
            lst.insert(rng.randrange(lst.size() + 1), e)
            adds += 1
        assert lst.size() == adds - removes


@pytest.mark.basic
def test_remove_then_insert_restores_with_replacement(new_list, items):
    elements = items(6)
    lst = new_list()
    for e in elements:
        lst.add(e)
    for index in range(len(elements)):
        replacement = object()
        before = lst.to_py()
        lst.remove(index)
        lst.insert(index, replacement)
        before[index] = replacement
        assert_same_contents(before, lst)


# ----------------------------
# ArrayList specifics
# ----------------------------

def test_capacity_only_grows():
    lst = ArrayList()
    assert lst.capacity == 10
    for i in range(100):
        lst.add(i)
    grown = lst.capacity
    assert grown >= 100
    while lst.size():
        lst.remove(lst.size() - 1)
    assert lst.capacity == grown


def test_construct_from_iterable_and_python_protocol():
    lst = ArrayList(range(5))
    assert len(lst) == 5
    assert lst[2] == 2
    lst[2] = "two"
    del lst[0]
    assert list(lst) == [1, "two", 3, 4]
    assert bool(lst)
    assert not ArrayList()


def test_negative_index_is_not_normalized():
    lst = ArrayList(["a", "b"])
    with pytest.raises(IndexError):
        lst[-1]


def test_remove_releases_the_element(items):
    lst = ArrayList()
    keep, gone = items(2)
    lst.add(gone)
    lst.add(keep)
    ref = weakref.ref(gone)
    del gone

    lst.remove(0)
    gc.collect()
    assert ref() is None
    assert lst.get(0) is keep
