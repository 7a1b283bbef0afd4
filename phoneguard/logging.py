"""Structured logging for the content layer (structlog, with stdlib routed through it).

Fallback events (`contentstack_not_configured`, `content_fetch_failed`,
`request_served_mock_content`) are the main operational signal of this
package. Use the JSON format to ship them to a log store.
"""

from __future__ import annotations

import logging
import sys

import structlog

# httpx logs every request at INFO; the delivery client reports its own queries
_QUIET_LOGGERS = ("httpx", "httpcore")


def _processors(log_format: str) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_format == "json":
        # tracebacks as structured data so log shippers can index them
        processors.append(structlog.processors.dict_tracebacks)
    else:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog and stdlib logging to write to stderr.

    stdout stays free for CLI output. Unknown level names fall back to INFO.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_format: "console" for human-readable output, "json" for one JSON
            object per line.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
    processors = _processors(log_format)
    renderer = _renderer(log_format)

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
