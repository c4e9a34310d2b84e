"""Free-text canonicalizer used for email, names and street addresses."""
from __future__ import annotations


def canonicalize_text(raw: str | None) -> str | None:
    """Return *raw* trimmed and lowercased; ``None`` passes through."""
    if raw is None:
        return None
    return raw.strip().lower()
