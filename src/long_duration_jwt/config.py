import logging

import sentry_sdk
from pydantic_settings import BaseSettings, SettingsConfigDict
from sentry_sdk.integrations.logging import LoggingIntegration

LOG_FORMAT = '%(asctime)s [%(levelname)8s] %(message)s (%(filename)s:%(lineno)s)'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = logging.getLevelName(logging.INFO)
    AUTH_SERVICE_URL: str | None = None
    ENV: str | None = None
    SENTRY_DSN: str | None = None

    def init_sentry(self) -> None:
        if self.SENTRY_DSN and self.ENV:
            sentry_sdk.init(
                dsn=self.SENTRY_DSN,
                environment=self.ENV,
                traces_sample_rate=1.0,
                integrations=[
                    LoggingIntegration(level=logging.INFO, event_level=logging.WARNING),
                ],
            )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


# noinspection PyArgumentList
settings = Settings()
