import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    # resolved per call so redirected stderr streams are honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "INFO") -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        timestamper,
        structlog.processors.add_log_level,
    ]

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=_stderr_logger,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
    )

    logging.basicConfig(level=level.upper(), stream=sys.stderr)


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
