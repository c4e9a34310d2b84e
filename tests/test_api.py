"""Tests for the pipeline routes.

Covers:
- POST /preprocess — extraction into the preprocessed-parameters property
- POST /normalize — hashing and projection into the normalized-parameters property
- error properties on invalid input
"""
from __future__ import annotations

import json

from customer_match.normalization.hasher import sha256_hex


def test_preprocess_returns_context_properties(client):
    response = client.post(
        "/preprocess",
        json={
            "records": [{"email": "a@b.com", "city": "SF"}],
            "operationType": "create",
            "userIdentifierSource": "FIRST_PARTY",
            "consent": "GRANTED",
        },
    )

    assert response.status_code == 200
    payload = json.loads(response.json()["preprocessed.parameters"])
    assert payload == [
        {
            "create": {
                "userIdentifiers": [
                    {"email": "a@b.com", "userIdentifierSource": "FIRST_PARTY"},
                    {"addressInfo": {"city": "SF"}, "userIdentifierSource": "FIRST_PARTY"},
                ],
                "consent": "GRANTED",
            }
        }
    ]


def test_preprocess_uses_configured_defaults(client):
    response = client.post("/preprocess", json={"records": [{"phone": "14155552671"}]})

    assert response.status_code == 200
    payload = json.loads(response.json()["preprocessed.parameters"])
    assert payload == [{"create": {"userIdentifiers": [{"phoneNumber": "14155552671"}]}}]


def test_preprocess_rejects_unknown_source(client):
    response = client.post(
        "/preprocess",
        json={"records": [], "userIdentifierSource": "NOT_A_SOURCE"},
    )

    assert response.status_code == 422
    assert response.json()["ERROR_CODE"] == "VALIDATION_ERROR"


def test_normalize_returns_hashed_payload(client):
    envelope = [
        {
            "remove": {
                "userIdentifiers": [
                    {"email": "A@B.COM"},
                    {"addressInfo": {"lastName": "Doe", "nickname": "JD"}},
                ]
            }
        }
    ]

    response = client.post("/normalize", json={"parameters": envelope})

    assert response.status_code == 200
    payload = json.loads(response.json()["normalized.parameters"])
    assert payload == [
        {
            "remove": {
                "userIdentifiers": [
                    {"hashedEmail": sha256_hex("a@b.com")},
                    {"addressInfo": {"hashedLastName": sha256_hex("doe")}},
                ]
            }
        }
    ]


def test_normalize_rejects_non_array_body(client):
    response = client.post("/normalize", json={"parameters": {"create": {}}})

    assert response.status_code == 422
