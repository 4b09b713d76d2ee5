"""structlog configuration for applications embedding the client."""

import logging

import structlog


def setup_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog with console or JSON output.

    Args:
        json_logs: If True, render events as JSON lines. Otherwise, console output.
        log_level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    """Return a structlog logger, applying Settings.log_level / json_logs if nothing configured structlog yet."""
    if not structlog.is_configured():
        from todoapiclient.config import get_settings

        settings = get_settings()
        setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    return structlog.get_logger(name)
