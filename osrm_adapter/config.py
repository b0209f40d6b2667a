from logging.config import dictConfig
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

type LogLevel = Literal['DEBUG', 'INFO', 'WARNING']


class Settings(BaseSettings):
    """Settings overridable by environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    # -------------------- System Configuration --------------------

    ENV: Literal['dev', 'test', 'prod'] = 'prod'
    LOG_LEVEL: LogLevel | None = None

    # -------------------- Route Response Parsing --------------------

    # Decimal digits of the encoded polyline scale: 5 for polyline, 6 for polyline6.
    # Must match the `geometries` parameter the backend was queried with.
    OSRM_POLYLINE_PRECISION: int = Field(6, ge=1, le=10)

    @property
    def log_level(self) -> LogLevel:
        if self.LOG_LEVEL is not None:
            return self.LOG_LEVEL
        return 'INFO' if self.ENV == 'prod' else 'DEBUG'


SETTINGS = Settings()

ENV = SETTINGS.ENV
LOG_LEVEL = SETTINGS.log_level
OSRM_POLYLINE_PRECISION = SETTINGS.OSRM_POLYLINE_PRECISION


def configure_logging(level: LogLevel | None = None) -> None:
    """
    Install the stderr log handler on the root logger.

    Opt-in for applications: importing the library never touches logging.
    """
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'default': {
                'formatter': 'default',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            'root': {'handlers': ['default'], 'level': level or LOG_LEVEL},
        },
    })
