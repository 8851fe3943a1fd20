"""
Cursor types for strideview.

A cursor is a position marker into a sequence. It can be advanced,
dereferenced, written through, and compared against another cursor
(usually the end marker of the same sequence).

ARCHITECTURAL RULE:
    Cursors do not alias elements.
    Element access is always a method call against the owning storage
    (get / set), so a write through a cursor lands in the owner.

State machine:
    LIVE       -> dereferenceable, may be advanced
    EXHAUSTED  -> equal to the end marker, terminal

    Calling get / set / advance on an EXHAUSTED cursor raises
    ExhaustedCursorError.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from strideview.errors import ExhaustedCursorError, ReadOnlyCursorError


class CursorState(Enum):
    """The two states a cursor can be in."""

    LIVE = "live"
    EXHAUSTED = "exhausted"


class Cursor(ABC):
    """
    Base class for every cursor.

    Subclasses define what a position is. Equality must compare positions
    only; anything else a cursor carries (stride, owner metadata) is not
    part of its identity.
    """

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        """True once the cursor equals its end marker."""

    @abstractmethod
    def advance(self) -> None:
        """Move one logical step forward, in place."""

    @abstractmethod
    def get(self) -> Any:
        """Return the element at the current position."""

    @abstractmethod
    def set(self, value: Any) -> None:
        """Replace the element at the current position in the owner."""

    @abstractmethod
    def copy(self) -> "Cursor":
        """Return a cursor at the same position that advances independently."""

    @property
    def state(self) -> CursorState:
        return CursorState.EXHAUSTED if self.exhausted else CursorState.LIVE

    def _require_live(self, action: str) -> None:
        if self.exhausted:
            raise ExhaustedCursorError(f"Cannot {action} an exhausted {type(self).__name__}")


@dataclass(eq=False)
class IndexCursor(Cursor):
    """
    Position into an indexable sequence.

    Properties:
        owner: The sequence being traversed (list, tuple, str, ...)
        index: Current position
        limit: End marker; the length of owner when the cursor was made

    Writes need a MutableSequence owner. Two IndexCursors are equal when
    they point into the same owner at the same index.
    """

    owner: Sequence = field(repr=False)
    index: int
    limit: int

    @property
    def exhausted(self) -> bool:
        return self.index >= self.limit

    def advance(self) -> None:
        self._require_live("advance")
        self.index += 1

    def get(self) -> Any:
        self._require_live("dereference")
        return self.owner[self.index]

    def set(self, value: Any) -> None:
        self._require_live("write through")
        if not isinstance(self.owner, MutableSequence):
            raise ReadOnlyCursorError(
                f"{type(self.owner).__name__} does not support item assignment"
            )
        self.owner[self.index] = value

    def copy(self) -> "IndexCursor":
        return IndexCursor(self.owner, self.index, self.limit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexCursor):
            return NotImplemented
        return self.owner is other.owner and self.index == other.index


class _IteratorState:
    """Progress of one iterator, shared by every cursor made from it."""

    def __init__(self, iterable: Iterable[Any]):
        self._iterator = iter(iterable)
        self._started = False
        self._current: Any = None
        self._done = False
        self.count = 0

    def _start(self) -> None:
        # The first element is pulled on first use, not at construction.
        if not self._started:
            self._started = True
            self._pull()

    def _pull(self) -> None:
        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = None
            self._done = True

    @property
    def done(self) -> bool:
        self._start()
        return self._done

    @property
    def current(self) -> Any:
        self._start()
        return self._current

    def step(self) -> None:
        self._start()
        self.count += 1
        self._pull()


@dataclass(eq=False)
class IteratorCursor(Cursor):
    """
    Position into a non-indexable iterable.

    All copies share one iterator, so advancing any copy advances them
    all. Only the current element is held in memory. The end marker is an
    IteratorCursor with sentinel=True; it needs no shared state and equals
    any cursor that has run out of elements.
    """

    shared: Optional[_IteratorState] = field(default=None, repr=False)
    sentinel: bool = False

    @property
    def exhausted(self) -> bool:
        return self.sentinel or self.shared.done

    @property
    def position(self) -> Optional[int]:
        return None if self.shared is None else self.shared.count

    def advance(self) -> None:
        self._require_live("advance")
        self.shared.step()

    def get(self) -> Any:
        self._require_live("dereference")
        return self.shared.current

    def set(self, value: Any) -> None:
        self._require_live("write through")
        raise ReadOnlyCursorError("Non-indexable iterables cannot be written through")

    def copy(self) -> "IteratorCursor":
        return IteratorCursor(self.shared, self.sentinel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IteratorCursor):
            return NotImplemented
        if self.sentinel or other.sentinel:
            return self.exhausted == other.exhausted
        if self.shared is not other.shared:
            return False
        # Live copies of one shared state are always at the same position.
        return self.exhausted == other.exhausted


@dataclass(eq=False)
class StrideCursor(Cursor):
    """
    Cursor that moves through another cursor N steps at a time.

    Properties:
        inner: Cursor into the underlying sequence
        limit: End marker of the underlying sequence (shared, never advanced)
        stride: Number of underlying steps per logical step

    IMPORTANT:
        advance() stops as soon as inner reaches limit, so the final,
        shorter group of a sequence still yields its first element and
        the cursor never steps past the end.

        Equality compares inner positions only. Stride is ignored.
    """

    inner: Cursor
    limit: Cursor = field(repr=False)
    stride: int

    @property
    def exhausted(self) -> bool:
        return self.inner == self.limit

    def advance(self) -> None:
        self._require_live("advance")
        for _ in range(self.stride):
            self.inner.advance()
            if self.inner == self.limit:
                break

    def get(self) -> Any:
        self._require_live("dereference")
        return self.inner.get()

    def set(self, value: Any) -> None:
        self._require_live("write through")
        self.inner.set(value)

    def copy(self) -> "StrideCursor":
        return StrideCursor(self.inner.copy(), self.limit, self.stride)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrideCursor):
            return NotImplemented
        return self.inner == other.inner


@dataclass
class ElementRef:
    """
    Mutable borrow of one element reached through a cursor.

    Example:
        for ref in view.refs():
            ref.value *= 10

    For non-indexable sources a ref is only valid until the traversal
    moves on.
    """

    cursor: Cursor

    @property
    def value(self) -> Any:
        return self.cursor.get()

    @value.setter
    def value(self, new_value: Any) -> None:
        self.cursor.set(new_value)

