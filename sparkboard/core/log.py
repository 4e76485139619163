"""
Logging Configuration

Process-wide loguru setup. Modules import ``logger`` from here.
"""
import sys
from typing import Optional

from loguru import logger

from sparkboard.core.config import settings


class LogConfig:
    LOGGING_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level}</level> | {name} | <level>{message}</level>"

    @staticmethod
    def configure_global_logging(level: Optional[str] = None) -> None:
        logger.remove()  # Drop loguru's default handler
        logger.add(
            sys.stderr,
            format=LogConfig.LOGGING_FORMAT,
            level=(level or settings.LOG_LEVEL).upper(),
        )


__all__ = ["LogConfig", "logger"]
