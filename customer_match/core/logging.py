import logging
import logging.config
import re

PII_PATTERNS = [
    re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"),
    re.compile(r"\b(?:\+1[-.\s]?)?(?:\(?\d{3}\)?[-.\s]?)\d{3}[-.\s]?\d{4}\b"),
    re.compile(r"\+?\b\d{10,15}\b"),
    re.compile(
        r"(?i)((?:email|phone_?number|first_?name|last_?name|street_?address)\s*[=:]\s*)([^,\s]+)"
    ),
]


class PIISafeFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in PII_PATTERNS:
            if pattern.groups:
                redacted = pattern.sub(r"\1[REDACTED]", redacted)
            else:
                redacted = pattern.sub("[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self._sanitize(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(self._sanitize(item) for item in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: self._sanitize(value) for key, value in record.args.items()}

        return True


PACKAGE_LOGGER = "customer_match"


def build_logging_config(settings) -> dict:
    """Return the ``dictConfig`` mapping for *settings*.

    Every line carries the service name and environment so pipeline logs
    can be told apart inside the host's aggregated output.
    """
    service = f"{settings.app_name}/{settings.app_env}".replace("%", "%%")
    level = settings.log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "pii_safe": {
                "()": "customer_match.core.logging.PIISafeFilter",
            }
        },
        "formatters": {
            "default": {
                "format": f"%(asctime)s %(levelname)s [{service}] %(name)s %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "filters": ["pii_safe"],
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": "WARNING",
            },
            PACKAGE_LOGGER: {
                "level": level,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def setup_logging() -> None:
    from customer_match.core.settings import get_settings

    logging.config.dictConfig(build_logging_config(get_settings()))
