"""Pipeline routes.

POST /preprocess  -- extract identifiers from raw records
POST /normalize   -- hash and project an operations envelope

Both routes answer with the message-context properties the matching
connector step produced.  Failures answer with the ``ERROR_CODE`` /
``ERROR_MESSAGE`` properties instead.
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from customer_match.connector import NormalizeConnector, PreprocessConnector
from customer_match.core.errors import CustomerMatchError, ErrorCode

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pipeline"])


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PreprocessBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    records: list = Field(default_factory=list)
    operation_type: str | None = Field(default=None, alias="operationType")
    user_identifier_source: str | None = Field(default=None, alias="userIdentifierSource")
    transaction_attributes: str | None = Field(default=None, alias="transactionAttributes")
    user_attributes: str | None = Field(default=None, alias="userAttributes")
    consent: str | None = None


class NormalizeBody(BaseModel):
    parameters: list = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def _error_response(context: dict[str, object], error: CustomerMatchError) -> JSONResponse:
    status_code = 500 if error.code == ErrorCode.HASHING_ERROR else 422
    return JSONResponse(status_code=status_code, content=context)


@router.post("/preprocess", summary="Extract identifiers from raw contact records")
def preprocess(body: PreprocessBody):
    context: dict[str, object] = {}
    connector = PreprocessConnector(
        json_array_content=json.dumps(body.records),
        operation_type=body.operation_type,
        user_identifier_source=body.user_identifier_source,
        transaction_attributes=body.transaction_attributes,
        user_attributes=body.user_attributes,
        consent=body.consent,
    )
    try:
        connector.connect(context)
    except CustomerMatchError as exc:
        return _error_response(context, exc)
    return context


@router.post("/normalize", summary="Hash and project an operations envelope")
def normalize(body: NormalizeBody):
    context: dict[str, object] = {}
    try:
        NormalizeConnector(parameters=json.dumps(body.parameters)).connect(context)
    except CustomerMatchError as exc:
        return _error_response(context, exc)
    return context
