"""Failures that end a token exchange run.

Every error maps to exit code 1; nothing here is retried.
"""
from pathlib import Path

from .schemas import ExchangeErrorResponse


class ExchangeError(Exception):
    exit_code = 1


class MissingCredential(ExchangeError):
    def __init__(self, env_name: str):
        self.env_name = env_name
        super().__init__(f"environment variable '{env_name}' is not set")


class TransportFailure(ExchangeError):
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to send request to {url}: {cause}")


class ServerError(ExchangeError):
    def __init__(self, status_code: int, error: ExchangeErrorResponse):
        self.status_code = status_code
        self.error = error
        super().__init__(
            f"Server responded with {status_code}: errorId={error.error_id} "
            f"errorCode={error.error_code} type={error.error_type} class={error.error_class}"
        )


class MalformedResponse(ExchangeError):
    def __init__(self, status_code: int, body: str, reason: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to parse response with status {status_code}: {reason}; body: {body!r}")


class OutputWriteFailure(ExchangeError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write output file {path}: {cause}")
