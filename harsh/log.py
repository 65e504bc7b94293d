"""
Route stdlib logging records into loguru for command line use.
"""
import logging
import sys

from loguru import logger as loguru_logger

LOGURU_LOG_FORMAT = (
    "<level>{level:1.1s}</level> "
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
    "<cyan>{name}:{line:<4d}</cyan> <level>{message}</level>"
)


class InterceptHandler(logging.Handler):

    def emit(self, record):
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1
        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage())


def configure_logging(level="WARNING"):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)
    loguru_logger.configure(handlers=[{
        "sink": sys.stderr,
        "level": level,
        "format": LOGURU_LOG_FORMAT,
        "colorize": False,
        "diagnose": False,
        "backtrace": False,
    }])


__all__ = ["InterceptHandler", "configure_logging"]
