import logging
from pathlib import Path
from typing import Union

from .exchange.errors import OutputWriteFailure

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "long_duration_jwt.json"


def resolve_output_path(target: Union[str, Path]) -> Path:
    path = Path(target)
    if path.is_dir():
        return path / DEFAULT_FILENAME
    return path


def write_output(target: Union[str, Path], raw_body: Union[bytes, str]) -> Path:
    """Write the server response exactly as received and return its absolute path."""
    path = resolve_output_path(target)
    data = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body
    try:
        path.write_bytes(data)
        absolute_path = path.resolve(strict=True)
    except OSError as e:
        raise OutputWriteFailure(path, e) from e

    logger.info(f"wrote {absolute_path}")
    return absolute_path
