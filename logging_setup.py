"""Structured JSON logging with structlog, routed through stdlib logging."""
import logging
import sys
import structlog


def configure_structlog() -> None:
    """
    Send structlog events through the standard logging module.

    Levels and handlers are then decided by stdlib logging, so a library
    call with no handlers configured prints nothing to stdout.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module-level loggers must pick up a later reconfiguration
        cache_logger_on_first_use=False,
    )


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured logging with structlog."""
    configure_structlog()
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Logs go to stderr so generated URLs on stdout stay clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    # basicConfig is a no-op when the root logger already has handlers
    logging.getLogger().setLevel(level)


def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance."""
    return structlog.get_logger(name)


# Keep structlog's stdout printer out of library use; leave a host's own setup alone
if not structlog.is_configured():
    configure_structlog()
