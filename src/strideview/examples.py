"""
Example views over the sequence 1..10.

Used by the demo script and as a quick reference for how strides and
composition behave on a small, easy-to-read input.
"""
from typing import Dict, List

from strideview.adaptor import stride
from strideview.view import StrideView


def build_example_sequence(length: int = 10) -> List[int]:
    return list(range(1, length + 1))


def build_example_views(data: List[int]) -> Dict[str, StrideView]:
    views = {}

    # Single strides, including the ones past half the length
    for n in (1, 2, 3, 4, 5, 9, 10):
        views[f"stride_{n}"] = StrideView(data, n)

    # Composition: 2 then 2 behaves as a single stride of 4
    views["stride_2_twice"] = data | stride(2) | stride(2)

    return views
