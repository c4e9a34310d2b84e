"""Address field-name resolution.

Input records name the same address component many ways (``zip``,
``First Name``, ``LASTNAME`` …).  Resolution is data-driven: a lowercase
input key is looked up in :data:`ADDRESS_SYNONYMS` first, then compared
case-insensitively against the canonical keys themselves.
"""
from __future__ import annotations

from typing import Callable

from customer_match.core.constants import ADDRESS_FIELDS

# Lowercased synonym -> canonical address key
ADDRESS_SYNONYMS: dict[str, str] = {
    "first_name": "firstName",
    "first name": "firstName",
    "last_name": "lastName",
    "last name": "lastName",
    "zip": "postalCode",
    "country": "countryCode",
}

# Canonical key -> predicate the value must satisfy when reached via a synonym.
# ``country`` is only an ISO-3166 alpha-2 code when it is exactly two
# characters; full country names are dropped.
SYNONYM_VALUE_RULES: dict[str, Callable[[str], bool]] = {
    "country": lambda value: len(value) == 2,
}

_CANONICAL_BY_LOWER: dict[str, str] = {name.lower(): name for name in ADDRESS_FIELDS}


def resolve_address_field(name: str, value: str) -> tuple[str, bool] | None:
    """Map an input key to its canonical address key.

    Returns ``(canonical_key, via_synonym)`` or ``None`` when *name* is not
    an address component (or its synonym rule rejects *value*).
    """
    lowered = name.lower()

    target = ADDRESS_SYNONYMS.get(lowered)
    if target is not None:
        rule = SYNONYM_VALUE_RULES.get(lowered)
        if rule is not None and not rule(value):
            return None
        return target, True

    target = _CANONICAL_BY_LOWER.get(lowered)
    if target is not None:
        return target, False

    return None
