"""Centralized JSON serialization.

Two encodings are used everywhere: canonical compact JSON for stats
output and non-string extension values, and pretty JSON for written
specification documents.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 (no ASCII escaping)
    - Sorted keys
    - Stable separators (",", ":")
    - No trailing whitespace

    Args:
        obj: Python object to serialize

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def pretty_dumps(obj: Any, indent: int = 2) -> str:
    """Human-readable JSON that keeps document key order."""
    return json.dumps(obj, indent=indent, ensure_ascii=False)
