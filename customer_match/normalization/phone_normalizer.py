"""Phone number canonicalizer.

Reduces a raw phone string to an E.164-shaped value:

1. Drop every non-digit character.
2. More than 10 digits means a country code is present: prefix ``+``.
3. Accept only values that start with ``+`` and are at most 15
   characters long (``+`` included).

Ten-digit national numbers carry no country code and are rejected; no
default region is assumed.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")

NATIONAL_NUMBER_DIGITS = 10
E164_MAX_LENGTH = 15


def canonicalize_phone(raw: str | None) -> str | None:
    """Return *raw* in ``+<digits>`` form, or ``None`` if it is not valid."""
    if raw is None:
        return None

    digits = _NON_DIGIT_RE.sub("", raw)
    if len(digits) > NATIONAL_NUMBER_DIGITS:
        digits = f"+{digits}"

    if not digits.startswith("+") or len(digits) > E164_MAX_LENGTH:
        # SAFETY: do not log raw value
        logger.debug("canonicalize_phone: rejected value (digits=%d)", len(digits))
        return None
    return digits
