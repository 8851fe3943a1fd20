"""
Serialization helpers for adaptors and pipelines.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Pipelines are how strideview is configured from files, so this module keeps
the document shape stable and explicit:

    adaptors:
      - type: stride
        n: 2
      - type: stride
        n: 3
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from strideview.adaptor import Pipeline, StrideAdaptor

logger = logging.getLogger(__name__)


def adaptor_to_dict(a: StrideAdaptor) -> Dict[str, Any]:
    if isinstance(a, StrideAdaptor):
        return {"type": "stride", "n": a.n}
    raise TypeError(f"Unsupported adaptor type: {type(a)}")


def adaptor_from_dict(d: Dict[str, Any]) -> StrideAdaptor:
    if not isinstance(d, dict):
        raise TypeError(f"Adaptor entry must be a mapping, got {type(d).__name__}")
    t = d.get("type")
    if t == "stride":
        if "n" not in d:
            raise TypeError("Stride adaptor dict is missing 'n'")
        return StrideAdaptor(d["n"])
    raise TypeError(f"Unsupported adaptor dict type: {t}")


def pipeline_to_dict(p: Pipeline) -> Dict[str, Any]:
    return {"adaptors": [adaptor_to_dict(a) for a in p.adaptors]}


def pipeline_from_dict(d: Dict[str, Any] | None) -> Pipeline:
    if not d:
        return Pipeline()
    if not isinstance(d, dict):
        raise TypeError(f"Pipeline document must be a mapping, got {type(d).__name__}")
    adaptors = d.get("adaptors") or []
    if not isinstance(adaptors, list):
        raise TypeError(f"'adaptors' must be a list, got {type(adaptors).__name__}")
    return Pipeline(tuple(adaptor_from_dict(a) for a in adaptors))


def pipeline_to_json(p: Pipeline) -> str:
    return json.dumps(pipeline_to_dict(p), sort_keys=True)


def pipeline_from_json(s: str) -> Pipeline:
    d = json.loads(s)
    return pipeline_from_dict(d)


def pipeline_to_yaml(p: Pipeline) -> str:
    return yaml.safe_dump(pipeline_to_dict(p))


def pipeline_from_yaml(s: str) -> Pipeline:
    d = yaml.safe_load(s)
    return pipeline_from_dict(d)


def load_pipeline(filepath: Union[str, Path]) -> Pipeline:
    """
    Load a pipeline from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the suffix is not recognised
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Pipeline file not found: {filepath}")

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".json":
        pipeline = pipeline_from_json(text)
    elif suffix in (".yaml", ".yml"):
        pipeline = pipeline_from_yaml(text)
    else:
        raise ValueError(f"Unsupported pipeline file type: {path.suffix or '(none)'}")

    logger.debug("Loaded pipeline from %s: %d adaptor(s)", path, len(pipeline))
    return pipeline
