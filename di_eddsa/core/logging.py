"""
Structured logging for the EdDSA suites, built on structlog.

The library only obtains loggers; embedding applications opt in to output
by calling :func:`configure_logging`. Key material and signature values are
scrubbed from every event before rendering.
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import Processor

from di_eddsa.core.config import get_settings

PACKAGE_LOGGER = "di_eddsa"

REDACTED = "[redacted]"

# Event keys that may carry secrets or signature bytes.
SENSITIVE_KEYS = frozenset(
    {
        "d",
        "private_key",
        "secret_key",
        "secretKeyMultibase",
        "secretKeyJwk",
        "seed",
        "signature",
        "proofValue",
        "proof_value",
    }
)


def redact_key_material(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor replacing sensitive values with a marker."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_logging(*, log_level: str | None = None, json_output: bool | None = None) -> None:
    """
    Route di_eddsa events through structlog and the stdlib ``logging`` module.

    Defaults come from settings: ``log_level`` and a console renderer in the
    ``development`` environment, JSON everywhere else.
    """
    settings = get_settings()
    level = log_level or settings.log_level
    if json_output is None:
        json_output = settings.environment != "development"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_key_material,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if json_output:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger writing through the stdlib logger ``name``.

    Until the host configures logging, events are subject to stdlib levels and
    handlers, so an unconfigured library stays silent.
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(
            logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
        ),
    )


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
