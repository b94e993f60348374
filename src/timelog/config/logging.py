"""structlog configuration for timelog.

Log lines always go to stderr so stdout stays reserved for command output.
Two renderers:
- Human (default): console renderer, colored only on a TTY
- JSON (--log-json): one JSON object per line

Records from stdlib ``logging.getLogger(__name__)`` loggers pass through
the same processor chain, so domain modules never import structlog.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "timelog"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler rendering through structlog.

    Safe to call repeatedly: the root handler list is replaced, not
    appended to.

    Args:
        verbose: DEBUG for ``timelog.*`` loggers; WARNING otherwise.
        log_json: Render JSON lines instead of console text.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_command(kind: str) -> None:
    """Tag every log line of this invocation with the command kind."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(command=kind)
