"""
Deterministic hashing of rasterization results.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- result_digest: Stable fingerprint of a RasterResult (points + trace)

Used to check that repeated invocations with identical inputs produce
identical output. No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any

from .types import RasterResult


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    - Canonical JSON serialization (sorted keys, no whitespace)
    - First 8 bytes of the digest as a big-endian unsigned integer

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    return int.from_bytes(sha.digest()[:8], byteorder="big", signed=False)


def result_digest(result: RasterResult) -> int:
    """Fingerprint of a result; equal results always hash equal."""
    return hash64({
        "algorithm": result.algorithm,
        "points": [[p.x, p.y] for p in result.points],
        "trace": list(result.trace),
    })


__all__ = ["hash64", "result_digest"]
