"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents.  No random values.
Three tiers sized in graph nodes: ~100, ~1,000 and ~5,000, the last being
above the "low thousands" a single keystroke must handle within one frame.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_records(num_records: int, fields_per_record: int) -> dict[str, Any]:
    """A typical API payload: an array of flat objects plus a metadata block."""
    records = [
        {f"field_{j}": f"value_{i}_{j}" if j % 2 else i * j for j in range(fields_per_record)}
        for i in range(num_records)
    ]
    return {"meta": {"count": num_records, "ok": True, "cursor": None}, "records": records}


def generate_deep(depth: int, fanout: int) -> dict[str, Any]:
    """A narrow, deep document: ``fanout`` scalar leaves at every level."""
    doc: dict[str, Any] = {f"leaf_{k}": k for k in range(fanout)}
    for level in range(depth):
        doc = {"level": level, "child": doc, **{f"leaf_{k}": k for k in range(fanout)}}
    return doc


@pytest.fixture
def doc_100() -> str:
    """~100 nodes."""
    return json.dumps(generate_records(10, 8))


@pytest.fixture
def doc_1000() -> str:
    """~1,000 nodes."""
    return json.dumps(generate_records(100, 9))


@pytest.fixture
def doc_5000() -> str:
    """~5,000 nodes."""
    return json.dumps(generate_records(500, 9))


@pytest.fixture
def doc_deep() -> str:
    """~1,800 nodes over 300 levels."""
    return json.dumps(generate_deep(300, 4))
