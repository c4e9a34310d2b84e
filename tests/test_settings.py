import pytest

from customer_match.core.settings import get_settings


def test_defaults():
    settings = get_settings()

    assert settings.operation_type == "create"
    assert settings.user_identifier_source == "UNSPECIFIED"
    assert settings.preprocessed_parameters_key == "preprocessed.parameters"
    assert settings.normalized_parameters_key == "normalized.parameters"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("USER_IDENTIFIER_SOURCE", "FIRST_PARTY")
    monkeypatch.setenv("NORMALIZED_PARAMETERS_KEY", "hashed.payload")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.user_identifier_source == "FIRST_PARTY"
    assert settings.normalized_parameters_key == "hashed.payload"
