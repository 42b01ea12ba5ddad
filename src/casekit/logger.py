from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Union

import colorlog
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL_ENV = "LOG_LEVEL"


class AppLogger(logging.Logger):
    def error_raise(
        self,
        message: str,
        *,
        exc: Optional[Union[BaseException, type[BaseException]]] = None,
    ) -> NoReturn:
        """
        Emit an error message and raise an exception afterwards.
        If ``exc`` is an exception class it is instantiated with ``message``;
        an instance is raised as-is. Without ``exc`` a RuntimeError is raised.
        """
        self.error(message)
        if exc is None:
            raise RuntimeError(message)
        if isinstance(exc, type):
            raise exc(message)
        raise exc


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        record.classname = record.module
        record.funcname = record.funcName
        return True


def _determine_level() -> int:
    raw_level = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    return {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }.get(raw_level, logging.INFO)


def _build_formatter() -> logging.Formatter:
    base_format = "[%(levelname)s] %(asctime)s - %(classname)s:%(lineno)d %(funcname)s(): %(message)s"
    return colorlog.ColoredFormatter(
        fmt="%(log_color)s" + base_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )


def setup_logger(name: str) -> AppLogger:
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)
    if getattr(logger, "_logger_initialized", False):  # type: ignore[attr-defined]
        return logger  # type: ignore[return-value]

    logger.setLevel(_determine_level())
    logger.propagate = False

    formatter = _build_formatter()

    # stdout carries converted text in the CLI, so diagnostics go to stderr
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.NOTSET)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stderr_handler)
    logger.addFilter(ContextFilter())
    logger._logger_initialized = True  # type: ignore[attr-defined]
    return logger  # type: ignore[return-value]


logger: AppLogger = setup_logger("casekit")

__all__ = ["logger", "setup_logger", "AppLogger"]
