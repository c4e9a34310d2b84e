"""JSON boundary helpers shared by every stage.

Inputs arrive as a single JSON string whose top level must be an array;
outputs leave as pretty-printed JSON.
"""
from __future__ import annotations

import json
import logging

from customer_match.core.errors import ValidationError

logger = logging.getLogger(__name__)

_NOT_AN_ARRAY = "input is not a JSON array"


def ensure_array(value: object) -> list:
    """Return *value* if it is a list, otherwise raise ``ValidationError``."""
    if not isinstance(value, list):
        raise ValidationError(_NOT_AN_ARRAY)
    return value


def load_array(text: str | bytes | None) -> list:
    """Parse *text* and return its top-level JSON array.

    Raises ``ValidationError`` for malformed JSON, a missing payload or a
    non-array top level.  The payload itself is never echoed.
    """
    if text is None:
        raise ValidationError(_NOT_AN_ARRAY)
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        # SAFETY: position only, never the document
        logger.debug("load_array: malformed JSON at pos=%d", getattr(exc, "pos", -1))
        raise ValidationError(_NOT_AN_ARRAY) from exc
    return ensure_array(parsed)


def dump(value: object) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def as_text(value: object) -> str | None:
    """Return the textual form of a JSON scalar, or ``None``.

    Strings are returned unchanged; numbers and booleans are rendered as
    their JSON text.  ``null``, objects and arrays have no textual form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return None
