"""
Tests for input-sequence adapters.
"""

import pytest
from strideview.sources import IterableSource, SequenceSource, Traversable, as_source
from strideview.view import StrideView


class TestAsSource:
    """Test adapting Python objects into traversables."""

    def test_list_becomes_sequence_source(self):
        """Lists are multi-pass sequence sources."""
        source = as_source([1, 2, 3])
        assert isinstance(source, SequenceSource)
        assert source.multi_pass

    def test_generator_becomes_iterable_source(self):
        """Generators are single-pass iterable sources."""
        source = as_source(x for x in range(3))
        assert isinstance(source, IterableSource)
        assert not source.multi_pass

    def test_set_becomes_multi_pass_iterable_source(self):
        """Re-iterable containers keep their multi-pass guarantee."""
        source = as_source({1, 2, 3})
        assert isinstance(source, IterableSource)
        assert source.multi_pass

    def test_dict_keys_are_multi_pass(self):
        """Dict views can be iterated again, so their source is multi-pass."""
        assert as_source({"a": 1, "b": 2}.keys()).multi_pass

    def test_explicit_iterator_is_single_pass(self):
        """iter() of a container is an iterator, so it is single-pass."""
        assert not as_source(iter([1, 2, 3])).multi_pass

    def test_view_is_used_unchanged(self):
        """A StrideView is already traversable."""
        view = StrideView([1, 2, 3], 2)
        assert isinstance(view, Traversable)
        assert as_source(view) is view

    def test_not_iterable(self):
        """Non-iterables are rejected."""
        with pytest.raises(TypeError):
            as_source(3.5)


class TestSequenceSource:
    """Test begin/end of sequence sources."""

    def test_begin_and_end(self):
        """begin() starts at 0 and end() sits at len."""
        data = [1, 2, 3]
        source = SequenceSource(data)
        assert source.begin().index == 0
        assert source.end().index == 3
        assert source.end().exhausted

    def test_empty(self):
        """For an empty sequence begin() equals end()."""
        source = SequenceSource([])
        assert source.begin() == source.end()


class TestIterableSource:
    """Test begin/end of iterable sources."""

    def test_begin_resumes(self):
        """A second begin() continues where the first traversal stopped."""
        source = IterableSource(iter([1, 2, 3]))
        cursor = source.begin()
        cursor.advance()
        assert source.begin().get() == 2

    def test_end_is_sentinel(self):
        """end() is the sentinel cursor."""
        source = IterableSource(iter([1]))
        assert source.end().sentinel
        assert source.begin() != source.end()

    def test_reiterable_begin_starts_over(self):
        """Each begin() over a re-iterable container starts from the first element."""
        source = IterableSource(frozenset([7]))
        cursor = source.begin()
        cursor.advance()
        assert cursor == source.end()
        assert source.begin().get() == 7

    def test_reiterable_begin_cursors_are_independent(self):
        """Cursors from separate begin() calls do not share progress."""
        source = IterableSource({"a": 1, "b": 2}.keys())
        first, second = source.begin(), source.begin()
        first.advance()
        assert second.get() == "a"
        assert first.get() == "b"
