"""
Canonical JSON

Deterministic JSON used to turn structured function-call arguments into
bytes. Object keys are sorted and no whitespace is emitted, so the same
arguments always produce the same transaction bytes and hash.
"""

import json
from typing import Any


def dumps_canonical(obj: Any) -> str:
    """
    Encode object as canonical JSON string.

    Args:
        obj: Object to encode (dict, list, tuple, str, int, float, bool, None)

    Returns:
        Canonical JSON string with sorted keys and no extra whitespace

    Raises:
        TypeError: If obj contains a value JSON cannot represent
        ValueError: If obj contains NaN or infinity
    """
    return json.dumps(_canonicalize(obj), separators=(',', ':'), ensure_ascii=False, sort_keys=True,
                      allow_nan=False)


def dumps_canonical_bytes(obj: Any) -> bytes:
    """Canonical JSON of obj as UTF-8 bytes."""
    return dumps_canonical(obj).encode('utf-8')


def _canonicalize(v: Any) -> Any:
    """
    Recursively canonicalize a value.

    - Maps: keys stringified, values canonicalized
    - Lists and tuples: elements canonicalized, order preserved
    - Primitives: passed through unchanged
    """
    if isinstance(v, dict):
        return {str(k): _canonicalize(item) for k, item in v.items()}
    elif isinstance(v, (list, tuple)):
        return [_canonicalize(item) for item in v]
    else:
        return v
