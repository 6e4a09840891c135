# release_tools/core/config.py

"""
Настройки релизных скриптов.

Все значения берутся из окружения или из `.env` в текущей рабочей директории
(скрипты запускаются из корня дистрибутива, относительные пути считаются от неё же).

    RELEASE_MODULE_PATH — Perl-модуль с объявлением `our $VERSION = '...';`
    LOG_LEVEL           — уровень логирования для консоли

Использование:
    from release_tools.core.config import get_release_settings
    path = get_release_settings().RELEASE_MODULE_PATH
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_MODULE_PATH = Path("lib/Google/GeoCoder/Smart.pm")


class Settings(BaseSettings):
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class ReleaseSettings(Settings):
    RELEASE_MODULE_PATH: Path = DEFAULT_MODULE_PATH
    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_release_settings() -> ReleaseSettings:
    return ReleaseSettings()
