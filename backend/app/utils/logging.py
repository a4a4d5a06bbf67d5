"""Logging setup and structured logging for contract validation."""

import logging
from typing import Any

from pydantic import ValidationError

from backend.app.config import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, defaulting to the configured log level."""
    logging.basicConfig(level=(level or get_settings().log_level).upper(), format=LOG_FORMAT)


def error_field_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path, e.g. ``data.0.price.grandTotal``."""
    return ".".join(str(part) for part in loc)


def describe_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten a ValidationError into field / constraint / message entries."""
    return [
        {
            "field": error_field_path(err["loc"]),
            "constraint": err["type"],
            "message": err["msg"],
        }
        for err in exc.errors()
    ]


class StructuredValidationLogger:
    """Structured logger for contract validation outcomes."""

    def log_success(self, contract: str) -> None:
        logger.debug(f"Contract validated: {contract}")

    def log_failure(self, contract: str, exc: ValidationError) -> None:
        """Log a validation failure with the offending field paths."""
        errors = describe_errors(exc)
        log_data: dict[str, Any] = {
            "contract": contract,
            "error_count": exc.error_count(),
            "fields": [e["field"] for e in errors],
            "constraints": [e["constraint"] for e in errors],
        }

        logger.warning(
            f"Contract validation failed: {contract} ({exc.error_count()} error(s))",
            extra={"structured": log_data},
        )
