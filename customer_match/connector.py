"""Host adapters: run a pipeline step against a message context.

The hosting integration flow hands each step a mutable mapping of
properties (its message context).  A step reads its inputs from its own
attributes, writes its JSON result under a configured property name, and
on failure records ``ERROR_CODE`` / ``ERROR_MESSAGE`` before re-raising so
the host can apply its own fault handling.

Two steps exist, run in order by the host:

* :class:`PreprocessConnector`: extraction, result under
  ``settings.preprocessed_parameters_key``.
* :class:`NormalizeConnector`: hashing and projection of an operations
  envelope, result under ``settings.normalized_parameters_key``.
"""
from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass

from customer_match.core.errors import CustomerMatchError, ErrorCode
from customer_match.core.models import parse_identifier_source
from customer_match.core.settings import get_settings
from customer_match.extraction.field_extractor import extract_json
from customer_match.normalization.identifier_hasher import normalize_operations_json

logger = logging.getLogger(__name__)

ERROR_CODE = "ERROR_CODE"
ERROR_MESSAGE = "ERROR_MESSAGE"

MessageContext = MutableMapping[str, object]


def set_error_properties(context: MessageContext, error: Exception) -> None:
    """Record *error* on *context* in the host's error-property convention."""
    code = error.code if isinstance(error, CustomerMatchError) else ErrorCode.GENERAL_ERROR
    context[ERROR_CODE] = str(code)
    context[ERROR_MESSAGE] = str(error)


@dataclass(slots=True)
class PreprocessConnector:
    json_array_content: str
    operation_type: str | None = None
    user_identifier_source: str | None = None
    transaction_attributes: str | None = None
    user_attributes: str | None = None
    consent: str | None = None

    def connect(self, context: MessageContext) -> str:
        settings = get_settings()
        try:
            result = extract_json(
                self.json_array_content,
                self.operation_type or settings.operation_type,
                parse_identifier_source(self.user_identifier_source or settings.user_identifier_source),
                transaction_attributes=self.transaction_attributes,
                user_attributes=self.user_attributes,
                consent=self.consent,
            )
        except CustomerMatchError as exc:
            logger.warning("PreprocessConnector: step failed (%s)", type(exc).__name__)
            set_error_properties(context, exc)
            raise

        context[settings.preprocessed_parameters_key] = result
        return result


@dataclass(slots=True)
class NormalizeConnector:
    parameters: str

    def connect(self, context: MessageContext) -> str:
        settings = get_settings()
        try:
            result = normalize_operations_json(self.parameters)
        except CustomerMatchError as exc:
            logger.warning("NormalizeConnector: step failed (%s)", type(exc).__name__)
            set_error_properties(context, exc)
            raise

        context[settings.normalized_parameters_key] = result
        return result
