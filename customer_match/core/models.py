from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from customer_match.core.constants import USER_IDENTIFIERS
from customer_match.core.errors import ValidationError


class UserIdentifierSource(StrEnum):
    UNSPECIFIED = "UNSPECIFIED"
    UNKNOWN = "UNKNOWN"
    FIRST_PARTY = "FIRST_PARTY"
    THIRD_PARTY = "THIRD_PARTY"


@dataclass(slots=True)
class UserData:
    """One operation's worth of identifiers plus optional list attributes."""

    user_identifiers: list[dict[str, object]] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {USER_IDENTIFIERS: list(self.user_identifiers)}
        payload.update(self.attributes)
        return payload

    def to_operation(self, operation_type: str) -> dict[str, object]:
        return {operation_type: self.to_dict()}


def parse_identifier_source(value: str | None) -> UserIdentifierSource:
    """Return the enum member for *value*; ``None`` or ``""`` mean UNSPECIFIED."""
    if not value:
        return UserIdentifierSource.UNSPECIFIED
    try:
        return UserIdentifierSource(value.upper())
    except ValueError as exc:
        raise ValidationError(f"Unknown userIdentifierSource: {value}") from exc
