"""Field extractor — stage 1 of the pipeline.

For every input record:

1. Scan keys case-insensitively.  Keys starting with ``email`` become
   ``{"email": ...}`` entries, keys starting with ``phone`` become
   ``{"phoneNumber": ...}`` entries, in key order.  Empty values are
   skipped.
2. Build an address block from the record's ``addressInfo`` object when
   present, otherwise from the record's own top-level keys.  A non-empty
   block becomes an ``{"addressInfo": {...}}`` entry.

Every entry is tagged with ``userIdentifierSource`` unless the source is
``UNSPECIFIED``.  Records are read, never mutated.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from customer_match.core.constants import (
    ADDRESS_FIELDS,
    ADDRESS_INFO,
    EMAIL,
    OPTIONAL_ATTRIBUTES,
    PHONE_NUMBER,
    USER_IDENTIFIER_SOURCE,
)
from customer_match.core.models import UserData, UserIdentifierSource
from customer_match.core.payload import as_text, dump, load_array
from customer_match.extraction.synonyms import resolve_address_field

logger = logging.getLogger(__name__)

# Lowercase key prefix -> identifier entry key
IDENTIFIER_PREFIXES: tuple[tuple[str, str], ...] = (
    ("email", EMAIL),
    ("phone", PHONE_NUMBER),
)


def _identifier_entry(key: str, value: object, source: str) -> dict[str, object]:
    entry: dict[str, object] = {key: value}
    if source != UserIdentifierSource.UNSPECIFIED:
        entry[USER_IDENTIFIER_SOURCE] = str(source)
    return entry


def extract_identifiers(record: Mapping[str, object], source: str) -> list[dict[str, object]]:
    """Return email and phone entries for *record* in key order."""
    entries: list[dict[str, object]] = []
    for name, raw in record.items():
        lowered = name.lower()
        for prefix, key in IDENTIFIER_PREFIXES:
            if lowered.startswith(prefix):
                text = as_text(raw)
                if text:
                    entries.append(_identifier_entry(key, text, source))
                break
    return entries


def build_address_block(node: object) -> dict[str, str]:
    """Return the canonical address block found in *node*.

    Empty values are skipped.  Synonyms win over literal canonical keys
    when both are present.  The
    result is ordered by :data:`ADDRESS_FIELDS` and may be empty.
    """
    if not isinstance(node, Mapping):
        return {}

    literal: dict[str, str] = {}
    synonym: dict[str, str] = {}
    for name, raw in node.items():
        text = as_text(raw)
        if not text:
            continue
        resolved = resolve_address_field(name, text)
        if resolved is None:
            continue
        target, via_synonym = resolved
        (synonym if via_synonym else literal)[target] = text

    merged = {**literal, **synonym}
    return {name: merged[name] for name in ADDRESS_FIELDS if name in merged}


def extract_address(record: Mapping[str, object], source: str) -> dict[str, object] | None:
    """Return the address entry for *record*, or ``None`` when there is none."""
    if ADDRESS_INFO in record:
        block = build_address_block(record[ADDRESS_INFO])
    else:
        block = build_address_block(record)

    if not block:
        return None
    return _identifier_entry(ADDRESS_INFO, block, source)


def extract(
    records: Sequence[object],
    identifier_source: str = UserIdentifierSource.UNSPECIFIED,
    *,
    transaction_attributes: str | None = None,
    user_attributes: str | None = None,
    consent: str | None = None,
) -> UserData:
    """Extract canonical identifier entries from *records*.

    Parameters
    ----------
    records:
        Parsed JSON array of loosely-keyed records.  Non-object elements
        contribute nothing.
    identifier_source:
        Provenance tag attached to every entry; ``"UNSPECIFIED"`` omits it.
    transaction_attributes, user_attributes, consent:
        Copied onto the result verbatim when non-empty.

    Returns
    -------
    UserData
        Entries in record order; per record, emails and phones in key
        order followed by at most one address entry.
    """
    user_data = UserData()
    for record in records:
        if not isinstance(record, Mapping):
            continue
        user_data.user_identifiers.extend(extract_identifiers(record, identifier_source))
        address = extract_address(record, identifier_source)
        if address is not None:
            user_data.user_identifiers.append(address)

    supplied = dict(zip(OPTIONAL_ATTRIBUTES, (transaction_attributes, user_attributes, consent)))
    for key, value in supplied.items():
        if value:
            user_data.attributes[key] = value

    logger.debug(
        "extract: records=%d identifiers=%d",
        len(records),
        len(user_data.user_identifiers),
    )
    return user_data


def extract_json(
    json_array_content: str,
    operation_type: str,
    identifier_source: str = UserIdentifierSource.UNSPECIFIED,
    *,
    transaction_attributes: str | None = None,
    user_attributes: str | None = None,
    consent: str | None = None,
) -> str:
    """Parse *json_array_content*, extract, and return the operations payload.

    The result is a pretty-printed JSON array holding a single
    ``{operation_type: UserData}`` object.  Raises ``ValidationError`` when
    the input is malformed or not an array.
    """
    records = load_array(json_array_content)
    user_data = extract(
        records,
        identifier_source,
        transaction_attributes=transaction_attributes,
        user_attributes=user_attributes,
        consent=consent,
    )
    return dump([user_data.to_operation(operation_type)])
