"""Identifier hasher — stage 2 of the pipeline.

Replaces raw identifier values with SHA-256 digests of their canonical
form:

================  ====================  ===================
Raw key           Hashed key            Canonicalizer
================  ====================  ===================
email             hashedEmail           canonicalize_email
phoneNumber       hashedPhoneNumber     canonicalize_phone
firstName *       hashedFirstName       canonicalize_text
lastName *        hashedLastName        canonicalize_text
streetAddress *   hashedStreetAddress   canonicalize_text
================  ====================  ===================

``*`` keys live inside the ``addressInfo`` object; its other keys pass
through unchanged.

Rules per key:

* If the hashed key is already present, nothing is reprocessed.
* On success the hashed key is written and the raw key removed.
* On failure (missing, non-text or invalid value) the record is untouched.

Input records are never mutated; every call returns fresh objects in the
same order.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping, MutableMapping, Sequence

from customer_match.core.constants import (
    ADDRESS_INFO,
    EMAIL,
    HASHED_ADDRESS_FIELDS,
    HASHED_EMAIL,
    HASHED_PHONE_NUMBER,
    OPERATION_ACTIONS,
    PHONE_NUMBER,
    USER_IDENTIFIERS,
)
from customer_match.core.payload import as_text, dump, ensure_array, load_array
from customer_match.normalization.email_normalizer import canonicalize_email
from customer_match.normalization.hasher import sha256_hex
from customer_match.normalization.phone_normalizer import canonicalize_phone
from customer_match.normalization.text_normalizer import canonicalize_text
from customer_match.projection.allow_list import project

logger = logging.getLogger(__name__)

Canonicalizer = Callable[[str | None], str | None]


# (raw key, hashed key, canonicalizer) for the top level of a record
RECORD_RULES: tuple[tuple[str, str, Canonicalizer], ...] = (
    (EMAIL, HASHED_EMAIL, canonicalize_email),
    (PHONE_NUMBER, HASHED_PHONE_NUMBER, canonicalize_phone),
)

# Same, scoped to the addressInfo object
ADDRESS_RULES: tuple[tuple[str, str, Canonicalizer], ...] = tuple(
    (raw_key, hashed_key, canonicalize_text)
    for raw_key, hashed_key in HASHED_ADDRESS_FIELDS.items()
)


def _apply_rules(
    node: MutableMapping[str, object],
    rules: Sequence[tuple[str, str, Canonicalizer]],
) -> int:
    """Hash every applicable key of *node* in place; return the count hashed."""
    hashed = 0
    for raw_key, hashed_key, canonicalize in rules:
        if hashed_key in node:
            continue
        canonical = canonicalize(as_text(node.get(raw_key)))
        if canonical is None:
            continue
        node[hashed_key] = sha256_hex(canonical)
        del node[raw_key]
        hashed += 1
    return hashed


def hash_record(record: Mapping[str, object]) -> dict[str, object]:
    """Return a hashed copy of a single identifier record."""
    result = copy.deepcopy(dict(record))
    _apply_rules(result, RECORD_RULES)

    address = result.get(ADDRESS_INFO)
    if isinstance(address, MutableMapping):
        _apply_rules(address, ADDRESS_RULES)
    return result


def normalize_and_hash(records: object) -> list:
    """Hash the identifiers of every record in *records*.

    Raises ``ValidationError`` when *records* is not a list.  Non-object
    elements are passed through unchanged.
    """
    ensure_array(records)
    hashed = [hash_record(r) if isinstance(r, Mapping) else copy.deepcopy(r) for r in records]
    logger.debug("normalize_and_hash: records=%d", len(hashed))
    return hashed


def _action_key(operation: Mapping[str, object]) -> str | None:
    for key in OPERATION_ACTIONS:
        if key in operation:
            return key
    return None


def normalize_operations(envelope: object) -> list:
    """Hash and project the ``userIdentifiers`` of each operation in *envelope*.

    Each element is expected to look like ``{"create": UserData}`` or
    ``{"remove": UserData}``; the first action key present is processed.  A
    present but non-object action (``{"create": null}``) skips the element.
    Everything outside ``userIdentifiers`` is returned unchanged.
    """
    ensure_array(envelope)
    result = copy.deepcopy(envelope)

    processed = 0
    for operation in result:
        if not isinstance(operation, MutableMapping):
            continue
        action = _action_key(operation)
        if action is None:
            continue
        user_data = operation[action]
        if not isinstance(user_data, MutableMapping):
            continue
        identifiers = user_data.get(USER_IDENTIFIERS)
        if not isinstance(identifiers, list):
            continue
        user_data[USER_IDENTIFIERS] = project(normalize_and_hash(identifiers))
        processed += 1

    logger.info("normalize_operations: operations=%d processed=%d", len(result), processed)
    return result


def normalize_json(json_payload: str) -> str:
    """String boundary for :func:`normalize_and_hash`."""
    return dump(normalize_and_hash(load_array(json_payload)))


def normalize_operations_json(json_payload: str) -> str:
    """String boundary for :func:`normalize_operations`."""
    return dump(normalize_operations(load_array(json_payload)))
