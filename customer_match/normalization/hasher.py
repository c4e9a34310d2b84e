"""SHA-256 digest helper.

Digests are unsalted: the matching API deduplicates on the plain SHA-256
of the canonical value, so identical inputs must hash identically.
"""
from __future__ import annotations

import hashlib

from customer_match.core.errors import HashingError

HASH_ALGORITHM = "sha256"


def sha256_hex(value: str) -> str:
    """Return the lowercase hex SHA-256 digest of *value* encoded as UTF-8."""
    try:
        digest = hashlib.new(HASH_ALGORITHM)
    except ValueError as exc:
        raise HashingError(f"Hash algorithm unavailable: {HASH_ALGORITHM}") from exc
    digest.update(value.encode("utf-8"))
    return digest.hexdigest()


def hashing_available() -> bool:
    """Return True if :data:`HASH_ALGORITHM` can be instantiated in this runtime."""
    try:
        sha256_hex("")
    except HashingError:
        return False
    return True
