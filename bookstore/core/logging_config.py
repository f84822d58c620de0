# /bookstore/core/logging_config.py

import logging
import sys
from pathlib import Path

from loguru import logger

from . import config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard `logging` records (uvicorn, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # depth=2 makes loguru report the original caller, not this handler.
        logger.opt(depth=2, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = config.LOG_LEVEL, log_file: str = config.LOG_FILE) -> None:
    """
    Resets loguru to the catalog's sinks and funnels stdlib logging through it.
    Safe to call more than once; every call starts from a clean slate.
    """
    logger.remove()

    # Tracebacks with local variables are useful locally, but must not end up
    # in production log files.
    verbose_tracebacks = config.APP_ENVIRONMENT != "production"

    logger.add(
        sys.stderr,
        level=level,
        format=LOG_FORMAT,
        colorize=True,
        backtrace=verbose_tracebacks,
        diagnose=verbose_tracebacks,
    )

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention=5,
            enqueue=True,
            backtrace=verbose_tracebacks,
            diagnose=verbose_tracebacks,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "sqlalchemy.engine.Engine"):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    # Statement echo is controlled by SQL_ECHO, not by the log level.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if config.SQL_ECHO else logging.WARNING)

    logger.info("Logging configured (level={}, file={}, environment={})", level, log_file, config.APP_ENVIRONMENT)
