import logging

from customer_match.core.logging import PIISafeFilter


def test_pii_filter_redacts_email_and_phone(caplog):
    logger = logging.getLogger("test.pii")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.pii"):
        logger.info("Contact john.doe@example.com phone 415-555-2671 alt +14155552671")

    assert "john.doe@example.com" not in caplog.text
    assert "415-555-2671" not in caplog.text
    assert "+14155552671" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_pii_filter_redacts_raw_field_assignment(caplog):
    logger = logging.getLogger("test.raw")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.raw"):
        logger.info("processing firstName=Jane for hashing")

    assert "Jane" not in caplog.text
    assert "firstName=[REDACTED]" in caplog.text


def test_pii_filter_redacts_args(caplog):
    logger = logging.getLogger("test.args")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("lookup %s (%d records)", "jane@example.com", 3)

    assert "jane@example.com" not in caplog.text
    assert "3 records" in caplog.text


def test_setup_logging_installs_filter():
    from customer_match.core.logging import setup_logging

    setup_logging()

    root = logging.getLogger()
    console = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert any(isinstance(f, PIISafeFilter) for h in console for f in h.filters)


def test_logging_config_carries_service_name_and_level(monkeypatch):
    from customer_match.core.logging import PACKAGE_LOGGER, build_logging_config
    from customer_match.core.settings import get_settings

    monkeypatch.setenv("APP_NAME", "Match 100%")
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()

    config = build_logging_config(get_settings())

    assert "[Match 100%%/staging]" in config["formatters"]["default"]["format"]
    assert config["loggers"][PACKAGE_LOGGER]["level"] == "DEBUG"
    assert config["handlers"]["console"]["filters"] == ["pii_safe"]


def test_setup_logging_applies_package_level(monkeypatch):
    from customer_match.core.logging import PACKAGE_LOGGER, setup_logging
    from customer_match.core.settings import get_settings

    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()

    setup_logging()

    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
