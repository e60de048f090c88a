"""Structured logging helpers."""
import json
import logging
import traceback
from typing import Any


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def log_event(logger: logging.Logger, level: int, msg: str, **fields: Any) -> None:
    """Emit one JSON object per log line."""
    logger.log(level, json.dumps({"msg": msg, **fields}, default=str))


def error_fields(exc: BaseException, stack_lines: int = 3) -> dict[str, Any]:
    """Name, message and a truncated stack for a failure log line."""
    stack = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return {
        "name": type(exc).__name__,
        "message": str(exc),
        "stack": "".join(stack).splitlines()[-stack_lines:],
    }
