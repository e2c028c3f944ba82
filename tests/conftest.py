import pytest

from long_duration_jwt.config import Settings


@pytest.fixture
def settings():
    return Settings(
        LOG_LEVEL="DEBUG",
        AUTH_SERVICE_URL=None,
        ENV=None,
        SENTRY_DSN=None,
    )


@pytest.fixture
def secrets() -> dict:
    return {
        "OPERATOR_ACCESS_TOKEN": "test_access_token",
        "OPERATOR_REFRESH_TOKEN": "test_refresh_token",
    }
