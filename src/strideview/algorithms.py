"""
Cursor-driven traversal helpers.

These drive any Traversable (a StrideView, or anything as_source accepts)
through its begin()/end() pair one logical step at a time, the way a
generic copy / fill / for-each algorithm does. fill() and for_each()
write through the cursor, so the underlying storage sees the change.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

from strideview.cursor import Cursor
from strideview.sources import as_source


def _walk(source: Any) -> Iterator[Cursor]:
    traversable = as_source(source)
    cursor = traversable.begin()
    last = traversable.end()
    while cursor != last:
        yield cursor
        cursor.advance()


def copy(source: Any, out: Optional[List[Any]] = None) -> List[Any]:
    """
    Append every element of source to out.

    Args:
        source: Anything as_source accepts
        out: Destination with an append() method; a new list if omitted

    Returns:
        out
    """
    if out is None:
        out = []
    for cursor in _walk(source):
        out.append(cursor.get())
    return out


def fill(source: Any, value: Any) -> None:
    """Overwrite every element reached by source with value."""
    for cursor in _walk(source):
        cursor.set(value)


def for_each(source: Any, func: Callable[[Any], Any]) -> None:
    """Replace every element x reached by source with func(x)."""
    for cursor in _walk(source):
        cursor.set(func(cursor.get()))


def distance(source: Any) -> int:
    """Number of logical steps from begin() to end()."""
    count = 0
    for _ in _walk(source):
        count += 1
    return count
