"""
strideview: lazy, composable every-Nth-element views.

    from strideview import stride, stride_view

    data = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    list(stride_view(data, 3))            -> [1, 4, 7, 10]
    list(data | stride(2) | stride(2))    -> [1, 5, 9]

    for ref in stride_view(data, 2).refs():
        ref.value *= 10                   # data is modified in place

ARCHITECTURAL GUARANTEE:
------------------------
A view is a projection, never a copy.
Elements are produced on demand during traversal.
Writes through a view reach the underlying storage.
Composing strides multiplies them.
"""

from strideview.adaptor import Pipeline, StrideAdaptor, compose, pipe, stride
from strideview.cursor import (
    Cursor,
    CursorState,
    ElementRef,
    IndexCursor,
    IteratorCursor,
    StrideCursor,
)
from strideview.errors import (
    ExhaustedCursorError,
    InvalidStrideError,
    PipelineParseError,
    ReadOnlyCursorError,
    StrideError,
)
from strideview.sources import IterableSource, SequenceSource, Traversable, as_source
from strideview.view import StrideView, check_stride, stride_view

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "CursorState",
    "ElementRef",
    "ExhaustedCursorError",
    "IndexCursor",
    "InvalidStrideError",
    "IterableSource",
    "IteratorCursor",
    "Pipeline",
    "PipelineParseError",
    "ReadOnlyCursorError",
    "SequenceSource",
    "StrideAdaptor",
    "StrideCursor",
    "StrideError",
    "StrideView",
    "Traversable",
    "as_source",
    "check_stride",
    "compose",
    "pipe",
    "stride",
    "stride_view",
]
