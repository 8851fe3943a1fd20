"""
Text form of pipelines.

Parses the same chaining syntax used in code into a Pipeline:

    "stride(2) | stride(3)"   -> Pipeline((StrideAdaptor(2), StrideAdaptor(3)))
    "each_nth(4)"             -> Pipeline((StrideAdaptor(4),))
    ""                        -> Pipeline()

Grammar:
    pipeline := step ( "|" step )*
    step     := NAME "(" INTEGER ")"
"""

import re
from typing import List, Tuple

from strideview.adaptor import Pipeline, StrideAdaptor
from strideview.errors import InvalidStrideError, PipelineParseError

ADAPTOR_NAMES = {"stride", "each_nth"}


def _tokenize(text: str) -> List[str]:
    """Tokenize pipeline text."""
    pattern = r'\s*(\(|\)|\||[a-zA-Z_][a-zA-Z0-9_]*|-?\d+|\S)'
    tokens = re.findall(pattern, text)
    if not tokens:
        raise PipelineParseError(f"No valid tokens in pipeline: {text!r}")
    return tokens


def _expect(tokens: List[str], pos: int, expected: str) -> int:
    if pos >= len(tokens):
        raise PipelineParseError(f"Unexpected end of pipeline, expected '{expected}'")
    if tokens[pos] != expected:
        raise PipelineParseError(f"Expected '{expected}', got '{tokens[pos]}'")
    return pos + 1


def _parse_step(tokens: List[str], pos: int) -> Tuple[StrideAdaptor, int]:
    """Parse NAME ( INTEGER )."""
    if pos >= len(tokens):
        raise PipelineParseError("Unexpected end of pipeline")

    name = tokens[pos]
    if name not in ADAPTOR_NAMES:
        raise PipelineParseError(f"Unknown adaptor: {name}")
    pos = _expect(tokens, pos + 1, "(")

    if pos >= len(tokens) or not re.match(r'^-?\d+$', tokens[pos]):
        found = tokens[pos] if pos < len(tokens) else "end of pipeline"
        raise PipelineParseError(f"Expected integer stride for {name}, got '{found}'")
    try:
        adaptor = StrideAdaptor(int(tokens[pos]))
    except InvalidStrideError as e:
        raise PipelineParseError(f"Invalid stride for {name}: {e}") from e

    pos = _expect(tokens, pos + 1, ")")
    return adaptor, pos


def parse_pipeline(text: str) -> Pipeline:
    """
    Parse pipeline text.

    Args:
        text: e.g. "stride(2) | stride(2)"

    Returns:
        Pipeline (empty for blank text)

    Raises:
        PipelineParseError: If syntax is invalid
    """
    if not text or text.strip() == "":
        return Pipeline()

    tokens = _tokenize(text.strip())
    steps = []
    adaptor, pos = _parse_step(tokens, 0)
    steps.append(adaptor)

    while pos < len(tokens):
        pos = _expect(tokens, pos, "|")
        adaptor, pos = _parse_step(tokens, pos)
        steps.append(adaptor)

    return Pipeline(tuple(steps))


def format_pipeline(pipeline: Pipeline) -> str:
    """Render a pipeline in the text form parse_pipeline() reads."""
    return " | ".join(f"stride({a.n})" for a in pipeline.adaptors)
