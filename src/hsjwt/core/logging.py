import logging
import os

PACKAGE_LOGGER = "hsjwt"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_CONFIGURED = False

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _resolve_log_level() -> int:
    raw = os.getenv("HSJWT_LOG_LEVEL", "WARNING").strip().upper()
    if raw in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        return getattr(logging, raw, logging.WARNING)
    return logging.WARNING


def configure_logging(handler: logging.Handler | None = None) -> logging.Logger:
    """Set the ``hsjwt`` logger level and optionally attach a formatted handler.

    Only the package logger is touched; the root logger is left to the host
    application. Repeated calls are no-ops.
    """
    global _CONFIGURED
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _CONFIGURED:
        return package_logger

    package_logger.setLevel(_resolve_log_level())
    if handler is not None:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    _CONFIGURED = True
    return package_logger
