import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import httpx
from pydantic import ValidationError

from ..params import ResolvedRequest
from .errors import MalformedResponse, ServerError, TransportFailure
from .schemas import ExchangeErrorResponse, ExchangeRequest, ExchangeSuccessResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeResult:
    status_code: int
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class TokenExchangeClient:
    def __init__(self, client: Optional[httpx.Client] = None):
        self._client = client

    def exchange(
            self,
            url: str,
            refresh_token: str,
            access_token: str,
            unit: str,
            value: int,
    ) -> ExchangeResult:
        body = ExchangeRequest(refresh_token=refresh_token, unit=unit, value=value)
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        logger.info(f"Requesting long duration JWT from {url}")
        try:
            if self._client is not None:
                response = self._client.post(url, json=body.model_dump(by_alias=True), headers=headers)
            else:
                with httpx.Client() as client:
                    response = client.post(url, json=body.model_dump(by_alias=True), headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Error communicating with {url}: {str(e)}")
            raise TransportFailure(url, e) from e

        logger.debug(f"Response status: {response.status_code}")
        return ExchangeResult(status_code=response.status_code, content=response.content)

    @staticmethod
    def classify(result: ExchangeResult) -> ExchangeSuccessResponse:
        """Parse the body against the schema its status class calls for.

        A 2xx body becomes an ExchangeSuccessResponse; anything else is parsed
        as an error body and raised as ServerError.
        """
        if not result.is_success:
            try:
                error = ExchangeErrorResponse.model_validate_json(result.content)
            except ValidationError as e:
                raise MalformedResponse(result.status_code, result.text, "Failed to parse error response") from e
            raise ServerError(result.status_code, error)

        try:
            jwt_response = ExchangeSuccessResponse.model_validate_json(result.content)
        except ValidationError as e:
            raise MalformedResponse(result.status_code, result.text, "Failed to parse JWT response") from e
        logger.debug(f"JWT response for person {jwt_response.person_id}")
        return jwt_response

    def request_long_duration_jwt(
            self, resolved: ResolvedRequest
    ) -> Tuple[ExchangeResult, ExchangeSuccessResponse]:
        params = resolved.params
        result = self.exchange(
            params.endpoint_url,
            resolved.refresh_token.get_secret_value(),
            resolved.access_token.get_secret_value(),
            params.unit.wire_label,
            params.value,
        )
        return result, self.classify(result)
