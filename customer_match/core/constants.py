"""Canonical field names and allow-lists for the customer match schema.

Raw identifier keys are replaced by their hashed counterparts during
normalization:

    email         -> hashedEmail
    phoneNumber   -> hashedPhoneNumber
    firstName     -> hashedFirstName        (inside addressInfo)
    lastName      -> hashedLastName         (inside addressInfo)
    streetAddress -> hashedStreetAddress    (inside addressInfo)

Only the allow-listed keys below survive projection.  A key on an
allow-list must additionally carry a value of the listed JSON kind.
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Identifier entry keys
# ---------------------------------------------------------------------------

EMAIL = "email"
PHONE_NUMBER = "phoneNumber"
ADDRESS_INFO = "addressInfo"
USER_IDENTIFIER_SOURCE = "userIdentifierSource"
USER_IDENTIFIERS = "userIdentifiers"

HASHED_EMAIL = "hashedEmail"
HASHED_PHONE_NUMBER = "hashedPhoneNumber"

# ---------------------------------------------------------------------------
# Address block keys, in output order
# ---------------------------------------------------------------------------

ADDRESS_FIELDS: tuple[str, ...] = (
    "firstName",
    "lastName",
    "city",
    "state",
    "streetAddress",
    "postalCode",
    "countryCode",
)

# Raw address key -> hashed address key
HASHED_ADDRESS_FIELDS: dict[str, str] = {
    "firstName": "hashedFirstName",
    "lastName": "hashedLastName",
    "streetAddress": "hashedStreetAddress",
}

# ---------------------------------------------------------------------------
# UserData optional attributes
# ---------------------------------------------------------------------------

OPTIONAL_ATTRIBUTES: tuple[str, ...] = ("transactionAttributes", "userAttributes", "consent")

# Action keys recognised inside an operations envelope, in lookup order
OPERATION_ACTIONS: tuple[str, ...] = ("create", "remove")

# ---------------------------------------------------------------------------
# Allow-lists: field name -> required JSON kind ("text" or "object")
# ---------------------------------------------------------------------------

TEXT = "text"
OBJECT = "object"

RECORD_ALLOW_LIST: dict[str, str] = {
    USER_IDENTIFIER_SOURCE: TEXT,
    HASHED_EMAIL: TEXT,
    HASHED_PHONE_NUMBER: TEXT,
    "mobileId": TEXT,
    "thirdPartyUserId": TEXT,
    ADDRESS_INFO: OBJECT,
}

ADDRESS_ALLOW_LIST: dict[str, str] = {
    "hashedFirstName": TEXT,
    "hashedLastName": TEXT,
    "city": TEXT,
    "state": TEXT,
    "countryCode": TEXT,
    "postalCode": TEXT,
    "hashedStreetAddress": TEXT,
}
