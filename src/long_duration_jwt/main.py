import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import configure_logging, settings
from .exchange.errors import ExchangeError
from .exchange.service import TokenExchangeClient
from .exchange.schemas import TimeUnit
from .output import write_output
from .params import (
    DEFAULT_ACCESS_TOKEN_ENV,
    DEFAULT_OUTPUT,
    DEFAULT_REFRESH_TOKEN_ENV,
    RequestParameters,
    SecretProvider,
    resolve_request,
)

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def _parse_unit(raw: str) -> TimeUnit:
    try:
        return TimeUnit.parse(raw)
    except ValueError:
        choices = ", ".join(unit.value for unit in TimeUnit)
        raise argparse.ArgumentTypeError(f"invalid unit '{raw}' (choose from {choices})")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-long-duration-jwt",
        description="Generates a long duration JWT",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-l", "--url",
        metavar="URL",
        default=settings.AUTH_SERVICE_URL,
        help="Base URL of account authentication service (default: $AUTH_SERVICE_URL)",
    )
    parser.add_argument(
        "-v", "--value",
        metavar="TIME-VALUE",
        type=int,
        default=1,
        help="how long should the access token be valid for",
    )
    parser.add_argument(
        "-u", "--unit",
        metavar="TIME-UNIT",
        type=_parse_unit,
        default=TimeUnit.HOURS,
        help="unit of time for the value: seconds, minutes, hours or days (default: hours)",
    )
    parser.add_argument(
        "-a", "--access-token",
        metavar="ENVIRONMENT_VARIABLE_NAME",
        dest="access_token_env_name",
        default=DEFAULT_ACCESS_TOKEN_ENV,
        help="Environment variable name for the access token, this needs to be present "
             "in the environment else the program will exit",
    )
    parser.add_argument(
        "-r", "--refresh-token",
        metavar="ENVIRONMENT_VARIABLE_NAME",
        dest="refresh_token_env_name",
        default=DEFAULT_REFRESH_TOKEN_ENV,
        help="Environment variable name for the refresh token, this needs to be present "
             "in the environment else the program will exit",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="OUTPUT-FILE",
        default=DEFAULT_OUTPUT,
        help="Output file or directory for the success response JSON",
    )
    return parser


def _parse_args(argv: List[str]) -> RequestParameters:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.url:
        parser.error("the following arguments are required: -l/--url")
    logger.debug(f"all input arguments: {args}")
    return RequestParameters(
        url=args.url,
        value=args.value,
        unit=args.unit,
        access_token_env_name=args.access_token_env_name,
        refresh_token_env_name=args.refresh_token_env_name,
        output=args.output,
    )


def main(
        argv: Optional[List[str]] = None,
        secrets: SecretProvider = os.environ.get,
        client: Optional[TokenExchangeClient] = None,
) -> int:
    configure_logging(settings)
    settings.init_sentry()

    params = _parse_args(sys.argv[1:] if argv is None else argv)
    client = client or TokenExchangeClient()

    try:
        resolved = resolve_request(params, secrets)
        result, _ = client.request_long_duration_jwt(resolved)
        output_path = write_output(params.output, result.content)
    except ExchangeError as e:
        logger.error(str(e))
        return e.exit_code

    print(f"Output written to {output_path}")
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
