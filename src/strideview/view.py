"""
StrideView: a lazy view over every Nth element of a sequence.

    data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    list(StrideView(data, 3))          -> [1, 4, 7, 10]

The view never copies elements. It hands out StrideCursors that walk the
underlying sequence N steps at a time, so:
    - nothing is computed until traversal asks for it
    - writes through refs() land in the underlying sequence
    - a view over another view multiplies strides (2 then 2 == 4)

OWNERSHIP:
    By default the view borrows what it is given. With owned=True the
    input is copied once into a private list that only the view holds.
    The choice is made at construction and never changes.

TRAVERSAL GUARANTEES:
    The view is multi-pass exactly when its underlying sequence is.
    A view over a generator can be walked once.
"""
from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Iterator, List

from strideview.cursor import ElementRef, StrideCursor
from strideview.errors import InvalidStrideError
from strideview.sources import as_source

logger = logging.getLogger(__name__)


def check_stride(n: Any) -> int:
    """
    Validate a stride count.

    Returns:
        n as a plain int

    Raises:
        InvalidStrideError: n is not an integer, is a bool, or is < 1
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidStrideError(f"Stride must be an integer, got {type(n).__name__}")
    if n < 1:
        raise InvalidStrideError(f"Stride must be >= 1, got {n}")
    return int(n)


class StrideView:
    """
    Lazy every-Nth-element view.

    Properties:
        underlying: The wrapped sequence (or the private copy when owned)
        stride: N, fixed for the lifetime of the view
        owns_underlying: True when constructed with owned=True
        multi_pass: Whether the view can be traversed more than once
    """

    def __init__(self, sequence: Any, n: int, *, owned: bool = False):
        self._stride = check_stride(n)
        self._owned = owned
        if owned:
            sequence = list(sequence)
        self._underlying = sequence
        self._source = as_source(sequence)
        logger.debug(
            "Created stride view: stride=%d owned=%s source=%r",
            self._stride, owned, self._source,
        )

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def underlying(self) -> Any:
        return self._underlying

    @property
    def owns_underlying(self) -> bool:
        return self._owned

    @property
    def multi_pass(self) -> bool:
        return self._source.multi_pass

    def begin(self) -> StrideCursor:
        """Cursor at the first element, sharing the end marker with end()."""
        return StrideCursor(self._source.begin(), self._source.end(), self._stride)

    def end(self) -> StrideCursor:
        """Cursor at the end marker of the underlying sequence."""
        limit = self._source.end()
        return StrideCursor(limit, limit, self._stride)

    def __iter__(self) -> Iterator[Any]:
        cursor = self.begin()
        last = self.end()
        while cursor != last:
            yield cursor.get()
            cursor.advance()

    def refs(self) -> Iterator[ElementRef]:
        """
        Yield a writable handle per selected element.

        Example:
            for ref in StrideView(data, 2).refs():
                ref.value *= 10
        """
        cursor = self.begin()
        last = self.end()
        while cursor != last:
            yield ElementRef(cursor.copy())
            cursor.advance()

    def then(self, adaptor: Any) -> Any:
        """Apply an adaptor (or pipeline) to this view: view.then(stride(2))."""
        return adaptor(self)

    # =========================================================================
    # Composition introspection
    # =========================================================================

    @property
    def layers(self) -> List["StrideView"]:
        """Stacked stride views, outermost first."""
        views = [self]
        while isinstance(views[-1].underlying, StrideView):
            views.append(views[-1].underlying)
        return views

    @property
    def strides(self) -> List[int]:
        """Strides of each layer, innermost (first applied) first."""
        return [view.stride for view in reversed(self.layers)]

    @property
    def depth(self) -> int:
        return len(self.layers)

    @property
    def effective_stride(self) -> int:
        """Stride of the single view over base that yields the same elements."""
        product = 1
        for n in self.strides:
            product *= n
        return product

    @property
    def base(self) -> Any:
        """Innermost sequence that is not itself a stride view."""
        return self.layers[-1].underlying

    def __repr__(self) -> str:
        mode = "owned" if self._owned else "borrowed"
        return f"StrideView({type(self._underlying).__name__}, stride={self._stride}, {mode})"


def stride_view(sequence: Any, n: int, *, owned: bool = False) -> StrideView:
    """Build a StrideView over sequence with stride n."""
    return StrideView(sequence, n, owned=owned)
