"""Email validator and canonicalizer.

An email is hashed only when the raw value matches :data:`EMAIL_RE` in
full.  The canonical form is the trimmed, lowercased address; no
provider-specific rewriting (Gmail dots, ``+tag`` stripping) is applied
because the matching API hashes addresses exactly as given.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

from customer_match.normalization.text_normalizer import canonicalize_text

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}$")


def is_valid_email(raw: str | None) -> bool:
    return raw is not None and EMAIL_RE.fullmatch(raw) is not None


def canonicalize_email(raw: str | None) -> str | None:
    """Return the canonical email for *raw*, or ``None`` when it is invalid."""
    if not is_valid_email(raw):
        if raw is not None:
            logger.debug("canonicalize_email: rejected value (length=%d)", len(raw))
        return None
    return canonicalize_text(raw)
