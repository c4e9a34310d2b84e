"""Safety test suite — raw PII must never reach the transmitted payload.

Asserts, across a mixed batch run through every stage:
1. No record carries both a raw field and its hashed counterpart
2. No raw identifier key survives projection at any level
3. Raw values never appear in log output or exception messages
"""
from __future__ import annotations

import json
import logging

import pytest

from customer_match.core.constants import HASHED_ADDRESS_FIELDS
from customer_match.core.errors import ValidationError
from customer_match.extraction.field_extractor import extract_json
from customer_match.normalization.identifier_hasher import normalize_operations_json
from customer_match.projection.allow_list import project

RAW_EMAIL = "jane.doe@example.com"

RAW_HASHED_PAIRS = [("email", "hashedEmail"), ("phoneNumber", "hashedPhoneNumber")]

BATCH = [
    {"email": RAW_EMAIL, "phone": "+1 415 555 2671", "first_name": "Jane", "zip": "94107"},
    {"EMAIL": "bad-address", "Phone": "555-2671", "country": "US"},
    {"emailAlt": "", "addressInfo": {"lastName": "Doe", "streetAddress": "1 Main St"}},
    {"unrelated": "value"},
]


def _run_pipeline(records: list, source: str = "FIRST_PARTY") -> list:
    preprocessed = extract_json(json.dumps(records), "create", source)
    return json.loads(normalize_operations_json(preprocessed))


def test_raw_and_hashed_never_coexist():
    identifiers = _run_pipeline(BATCH)[0]["create"]["userIdentifiers"]
    for entry in identifiers:
        for raw, hashed in RAW_HASHED_PAIRS:
            assert not (raw in entry and hashed in entry)
        address = entry.get("addressInfo", {})
        for raw, hashed in HASHED_ADDRESS_FIELDS.items():
            assert not (raw in address and hashed in address)


def test_no_raw_identifier_keys_survive():
    identifiers = _run_pipeline(BATCH)[0]["create"]["userIdentifiers"]
    for entry in identifiers:
        assert "email" not in entry
        assert "phoneNumber" not in entry
        assert not set(HASHED_ADDRESS_FIELDS) & set(entry.get("addressInfo", {}))


def test_raw_email_never_in_payload():
    payload = normalize_operations_json(extract_json(json.dumps(BATCH), "create", "UNSPECIFIED"))
    assert RAW_EMAIL not in payload


def test_prepopulated_conflict_is_resolved_by_projection():
    # A caller supplying both forms keeps its own hash; the raw value is projected away.
    records = [{"email": RAW_EMAIL, "hashedEmail": "caller-hash"}]
    assert project(records) == [{"hashedEmail": "caller-hash"}]


def test_raw_values_are_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="customer_match"):
        _run_pipeline(BATCH)

    assert RAW_EMAIL not in caplog.text
    assert "Jane" not in caplog.text


def test_validation_error_does_not_echo_payload():
    with pytest.raises(ValidationError) as exc_info:
        extract_json(f'{{"email": "{RAW_EMAIL}"}}', "create")

    assert RAW_EMAIL not in str(exc_info.value)
