# release_tools/utils/logger.py

"""
Логирование релизных скриптов на Loguru.

Скрипт пишет только в консоль: единственный файл, который он трогает, это
обновляемый модуль. Уровень задаётся через LOG_LEVEL (см. core/config.py).

    from release_tools.utils.logger import logger
    logger.info("Version updated")
"""

import sys

from loguru import logger as _logger

from release_tools.core.config import get_release_settings


def setup_logger():
    _logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<magenta>{extra}</magenta> | "
        "<level>{message}</level>"
    )

    _logger.add(
        sys.stdout,
        format=console_format,
        level=get_release_settings().LOG_LEVEL.upper(),
        backtrace=False,
        diagnose=False,
    )

    return _logger


logger = setup_logger()
