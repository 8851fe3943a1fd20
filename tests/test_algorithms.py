"""
Tests for cursor-driven traversal helpers.

copy / fill / for_each / distance drive begin()/end() pairs the way
generic algorithms do, so they exercise views from the consumer side.
"""

import pytest
from strideview import algorithms
from strideview.adaptor import stride
from strideview.errors import ReadOnlyCursorError
from strideview.view import StrideView


@pytest.fixture
def data():
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


class TestCopy:
    """Test copying elements out of a view."""

    def test_copy_into_new_list(self, data):
        """copy() without a destination returns a new list."""
        assert algorithms.copy(StrideView(data, 3)) == [1, 4, 7, 10]

    def test_copy_appends_to_destination(self, data):
        """copy() appends after whatever out already holds."""
        out = [0]
        result = algorithms.copy(StrideView(data, 5), out)
        assert result is out
        assert out == [0, 1, 6]

    def test_copy_plain_sequence(self):
        """Plain sequences are adapted automatically."""
        assert algorithms.copy((1, 2, 3)) == [1, 2, 3]


class TestFill:
    """Test writing through a view."""

    def test_fill_selected_positions(self, data):
        """fill() overwrites only the positions the view reaches."""
        algorithms.fill(StrideView(data, 4), 0)
        assert data == [0, 2, 3, 4, 0, 6, 7, 8, 0, 10]

    def test_fill_composed_view(self, data):
        """fill() through a composed view writes into the base list."""
        algorithms.fill(data | stride(3) | stride(3), None)
        assert data == [None, 2, 3, 4, 5, 6, 7, 8, 9, None]

    def test_fill_generator_is_read_only(self):
        """Generators cannot be written through."""
        with pytest.raises(ReadOnlyCursorError):
            algorithms.fill(StrideView(iter([1, 2]), 1), 0)


class TestForEach:
    """Test in-place transformation through a view."""

    def test_multiply_every_second(self, data):
        """Only every second element is multiplied, in the original list."""
        algorithms.for_each(StrideView(data, 2), lambda x: x * 10)
        assert data == [10, 2, 30, 4, 50, 6, 70, 8, 90, 10]


class TestDistance:
    """Test step counting."""

    @pytest.mark.parametrize("n, expected", [(1, 10), (2, 5), (3, 4), (4, 3), (10, 1), (11, 1)])
    def test_distance_matches_ceil(self, data, n, expected):
        """distance() counts ceil(L / N) steps."""
        assert algorithms.distance(StrideView(data, n)) == expected

    def test_distance_empty(self):
        """An empty view has distance zero."""
        assert algorithms.distance(StrideView([], 3)) == 0
