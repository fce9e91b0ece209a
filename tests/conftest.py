import pytest

from seqlist.conformance import factory_for


@pytest.fixture
def new_list():
    """Factory for the implementation under test.

    Honours CLASS_UNDER_TEST (e.g. ``CLASS_UNDER_TEST=pkg.mod.MyList pytest``)
    and falls back to the built-in ArrayList.
    """
    return factory_for()


class Item:
    """Distinct element with identity semantics; supports weak references."""

    _counter = 0

    def __init__(self):
        Item._counter += 1
        self.ref = Item._counter

    def __repr__(self):
        return f"@{self.ref}"


@pytest.fixture
def items():
    return lambda n: [Item() for _ in range(n)]
