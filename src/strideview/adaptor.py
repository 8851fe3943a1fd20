"""
Adaptor closures and pipelines.

A StrideAdaptor is "wrap with stride N" with the sequence left out. It can
be applied later, either by calling it or with the pipe operator:

    stride(2)(data)
    data | stride(2)
    data | stride(2) | stride(2)        -> every 4th element
    data | compose(stride(2), stride(3))

Pipelines are ordered, immutable chains of adaptors. They are the unit of
configuration in strideview (see strideview.serialization).

IMPORTANT:
    Applying stride M on top of stride N multiplies the strides.
    Nothing here adds them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from strideview.view import StrideView, check_stride

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrideAdaptor:
    """
    Deferred stride application.

    Properties:
        n: Stride applied to whatever sequence the adaptor meets
    """

    n: int

    def __post_init__(self) -> None:
        check_stride(self.n)

    def __call__(self, sequence: Any) -> StrideView:
        logger.debug("Applying stride(%d) to %s", self.n, type(sequence).__name__)
        return StrideView(sequence, self.n)

    def __ror__(self, sequence: Any) -> StrideView:
        return self(sequence)

    def then(self, other: "Step") -> "Pipeline":
        return Pipeline((self,)).then(other)

    def __or__(self, other: Any) -> "Pipeline":
        if not isinstance(other, (StrideAdaptor, Pipeline)):
            return NotImplemented
        return self.then(other)

    @property
    def effective_stride(self) -> int:
        return self.n


@dataclass(frozen=True)
class Pipeline:
    """
    Ordered chain of adaptors, applied left to right.

    An empty pipeline returns its input unchanged.
    """

    adaptors: Tuple[StrideAdaptor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for adaptor in self.adaptors:
            if not isinstance(adaptor, StrideAdaptor):
                raise TypeError(f"Pipeline steps must be StrideAdaptor, got {type(adaptor).__name__}")

    def __call__(self, sequence: Any) -> Any:
        result = sequence
        for adaptor in self.adaptors:
            result = adaptor(result)
        return result

    def __ror__(self, sequence: Any) -> Any:
        return self(sequence)

    def then(self, other: "Step") -> "Pipeline":
        if isinstance(other, Pipeline):
            return Pipeline(self.adaptors + other.adaptors)
        if isinstance(other, StrideAdaptor):
            return Pipeline(self.adaptors + (other,))
        raise TypeError(f"Cannot chain {type(other).__name__} onto a pipeline")

    def __or__(self, other: Any) -> "Pipeline":
        if not isinstance(other, (StrideAdaptor, Pipeline)):
            return NotImplemented
        return self.then(other)

    def __len__(self) -> int:
        return len(self.adaptors)

    @property
    def effective_stride(self) -> int:
        product = 1
        for adaptor in self.adaptors:
            product *= adaptor.n
        return product


Step = Union[StrideAdaptor, Pipeline]


def stride(n: int) -> StrideAdaptor:
    """One-argument form: a closure to apply to a sequence later."""
    return StrideAdaptor(n)


def compose(*steps: Step) -> Pipeline:
    """Chain adaptors and pipelines into one pipeline."""
    pipeline = Pipeline()
    for step in steps:
        pipeline = pipeline.then(step)
    return pipeline


def pipe(sequence: Any, *steps: Step) -> Any:
    """Apply steps to sequence left to right: pipe(data, stride(2), stride(2))."""
    return compose(*steps)(sequence)
