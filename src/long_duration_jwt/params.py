import logging
import os
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from .exchange.errors import MissingCredential
from .exchange.schemas import TimeUnit

logger = logging.getLogger(__name__)

CREATE_JWT_PATH = "/v1/create-new-jwt"
DEFAULT_ACCESS_TOKEN_ENV = "OPERATOR_ACCESS_TOKEN"
DEFAULT_REFRESH_TOKEN_ENV = "OPERATOR_REFRESH_TOKEN"
DEFAULT_OUTPUT = "long_duration_jwt.json"

SecretProvider = Callable[[str], Optional[str]]


class RequestParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Base URL of the account authentication service")
    value: int = 1
    unit: TimeUnit = TimeUnit.HOURS
    access_token_env_name: str = DEFAULT_ACCESS_TOKEN_ENV
    refresh_token_env_name: str = DEFAULT_REFRESH_TOKEN_ENV
    output: str = DEFAULT_OUTPUT

    @property
    def endpoint_url(self) -> str:
        # No trailing slash handling: the base URL is used as given.
        return f"{self.url}{CREATE_JWT_PATH}"


class ResolvedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    params: RequestParameters
    access_token: SecretStr
    refresh_token: SecretStr


def _read_secret(secrets: SecretProvider, env_name: str) -> SecretStr:
    value = secrets(env_name)
    if value is None:
        raise MissingCredential(env_name)
    return SecretStr(value)


def resolve_request(params: RequestParameters, secrets: SecretProvider = os.environ.get) -> ResolvedRequest:
    """Read both operator tokens through ``secrets``.

    Raises MissingCredential for the first variable that is not set, access
    token first.
    """
    access_token = _read_secret(secrets, params.access_token_env_name)
    refresh_token = _read_secret(secrets, params.refresh_token_env_name)
    resolved = ResolvedRequest(params=params, access_token=access_token, refresh_token=refresh_token)
    logger.debug(f"Resolved request: {resolved!r}")
    return resolved
