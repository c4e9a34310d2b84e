"""Schema projector — stage 3 of the pipeline.

Keeps only allow-listed keys whose values have the required JSON kind,
at two levels:

* record:      :data:`~customer_match.core.constants.RECORD_ALLOW_LIST`
* addressInfo: :data:`~customer_match.core.constants.ADDRESS_ALLOW_LIST`

Empty strings and empty objects are then dropped, an emptied
``addressInfo`` is removed, and records left empty are omitted.  The
projection is idempotent.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from customer_match.core.constants import (
    ADDRESS_ALLOW_LIST,
    ADDRESS_INFO,
    OBJECT,
    RECORD_ALLOW_LIST,
    TEXT,
)
from customer_match.core.payload import dump, ensure_array, load_array

logger = logging.getLogger(__name__)

_KIND_CHECKS = {
    TEXT: lambda value: isinstance(value, str),
    OBJECT: lambda value: isinstance(value, Mapping),
}


def is_allowed_field(name: str, value: object, allow_list: Mapping[str, str]) -> bool:
    """Return True if *name* is allow-listed and *value* has its required kind."""
    kind = allow_list.get(name)
    if kind is None:
        return False
    return _KIND_CHECKS[kind](value)


def is_non_empty_value(value: object) -> bool:
    """Return False for ``""`` and ``{}``; everything else counts as content."""
    if isinstance(value, str):
        return value != ""
    if isinstance(value, Mapping):
        return len(value) > 0
    return True


def _filter_fields(node: Mapping[str, object], allow_list: Mapping[str, str]) -> dict[str, object]:
    return {
        name: value
        for name, value in node.items()
        if is_allowed_field(name, value, allow_list) and is_non_empty_value(value)
    }


def project_record(record: Mapping[str, object]) -> dict[str, object]:
    """Return the compliant form of *record*; may be empty."""
    projected = {}
    for name, value in record.items():
        if not is_allowed_field(name, value, RECORD_ALLOW_LIST):
            continue
        if name == ADDRESS_INFO:
            value = _filter_fields(value, ADDRESS_ALLOW_LIST)
        if is_non_empty_value(value):
            projected[name] = value
    return projected


def project(records: object) -> list[dict[str, object]]:
    """Project every object in *records*, dropping records that end up empty.

    Raises ``ValidationError`` when *records* is not a list.
    """
    ensure_array(records)

    compliant: list[dict[str, object]] = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        projected = project_record(record)
        if projected:
            compliant.append(projected)

    dropped = len(records) - len(compliant)
    if dropped:
        logger.debug("project: dropped %d of %d records", dropped, len(records))
    return compliant


def project_json(json_payload: str) -> str:
    """String boundary for :func:`project`."""
    return dump(project(load_array(json_payload)))
