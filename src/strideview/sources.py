"""
Input-sequence adapters.

A stride view only needs four things from what it wraps: a begin cursor,
an end marker, the ability to advance the cursor, and equality between
the cursor and the end marker. Anything that offers begin() / end() and a
multi_pass flag is a Traversable; as_source() adapts plain Python
sequences and iterables into one.

    Sequence (list, tuple, str, range, ...) -> SequenceSource (multi-pass)
    iterator (generator, iter(...))         -> IterableSource (single-pass)
    other iterable (set, dict view, ...)    -> IterableSource (multi-pass)
    Traversable (including StrideView)      -> used unchanged
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol, runtime_checkable

from strideview.cursor import Cursor, IndexCursor, IteratorCursor, _IteratorState


@runtime_checkable
class Traversable(Protocol):
    """Anything a StrideView can wrap directly."""

    multi_pass: bool

    def begin(self) -> Cursor:
        ...

    def end(self) -> Cursor:
        ...


class SequenceSource:
    """
    Borrowed view of an indexable sequence.

    The end marker is len(sequence), read each time begin() or end() is
    called, so cursors made from one begin()/end() pair always agree.
    """

    multi_pass = True

    def __init__(self, sequence: Sequence):
        self.sequence = sequence

    def begin(self) -> IndexCursor:
        return IndexCursor(self.sequence, 0, len(self.sequence))

    def end(self) -> IndexCursor:
        limit = len(self.sequence)
        return IndexCursor(self.sequence, limit, limit)

    def __repr__(self) -> str:
        return f"SequenceSource({type(self.sequence).__name__}, len={len(self.sequence)})"


class IterableSource:
    """
    Source over an iterable that cannot be indexed.

    The source keeps the traversal guarantee of what it wraps:
        - An iterator (generator, iter(...)) is single-pass. Every begin()
          resumes where the previous traversal stopped, so a second pass
          over a consumed source yields nothing.
        - Any other iterable (set, dict view, custom container) is
          multi-pass. Every begin() calls iter() again and starts over.
    """

    def __init__(self, iterable: Iterable[Any]):
        self.iterable = iterable
        self.multi_pass = not isinstance(iterable, Iterator)
        self._shared = None if self.multi_pass else _IteratorState(iterable)

    def begin(self) -> IteratorCursor:
        if self.multi_pass:
            return IteratorCursor(_IteratorState(self.iterable))
        return IteratorCursor(self._shared)

    def end(self) -> IteratorCursor:
        return IteratorCursor(self._shared, sentinel=True)

    def __repr__(self) -> str:
        return f"IterableSource({type(self.iterable).__name__})"


def as_source(obj: Any) -> Traversable:
    """
    Adapt obj into a Traversable.

    Raises:
        TypeError: obj is neither traversable nor iterable
    """
    if isinstance(obj, Traversable):
        return obj
    if isinstance(obj, Sequence):
        return SequenceSource(obj)
    if not isinstance(obj, Iterable):
        raise TypeError(f"Cannot build a stride view over {type(obj).__name__}: not iterable")
    return IterableSource(obj)
