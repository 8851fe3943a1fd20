"""
View Analyzer: read-only diagnostics for stride views.

Reports how a (possibly composed) view relates to its base sequence:
    - Stride of each layer and the effective stride
    - Traversal guarantees (multi-pass, ownership)
    - Expected element count, when the base length is known
    - Warning flags for likely surprises

IMPORTANT: The analyzer never traverses the view. Analysing a view over a
generator leaves the generator untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sized
from dataclasses import dataclass, field
from typing import List, Optional

from strideview.view import StrideView, check_stride

logger = logging.getLogger(__name__)


def expected_count(length: int, n: int) -> int:
    """Number of elements a stride-n view over length elements yields: ceil(length / n)."""
    check_stride(n)
    if length < 0:
        raise ValueError(f"Length must be >= 0, got {length}")
    return -(-length // n)


@dataclass
class ViewReport:
    """Analysis report for one view."""

    strides: List[int] = field(default_factory=list)  # innermost first
    depth: int = 0
    effective_stride: int = 1
    multi_pass: bool = True
    owns_underlying: bool = False
    base_type: str = ""

    base_length: Optional[int] = None
    expected_count: Optional[int] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_view(view: StrideView, base_length: Optional[int] = None) -> ViewReport:
    """
    Describe a view without traversing it.

    Args:
        view: View to analyse
        base_length: Length of the base sequence, for bases that are not
            Sized (generators). Ignored when the base has a len().

    Returns a ViewReport with metrics and warnings.
    """
    base = view.base
    report = ViewReport(
        strides=view.strides,
        depth=view.depth,
        effective_stride=view.effective_stride,
        multi_pass=view.multi_pass,
        owns_underlying=view.owns_underlying,
        base_type=type(base).__name__,
    )

    if isinstance(base, Sized):
        report.base_length = len(base)
    else:
        report.base_length = base_length

    if report.base_length is not None:
        report.expected_count = expected_count(report.base_length, report.effective_stride)

        if report.base_length == 0:
            report.add_warning("Base sequence is empty; the view yields nothing")
        elif report.effective_stride >= report.base_length and report.base_length > 1:
            report.add_warning(
                f"Effective stride {report.effective_stride} >= base length "
                f"{report.base_length}; the view yields only the first element"
            )

    if not report.multi_pass:
        report.add_warning("Underlying sequence is single-pass; the view can be traversed once")

    for msg in report.warnings:
        logger.debug("View analysis warning: %s", msg)

    return report
