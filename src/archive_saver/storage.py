"""Transport encoding of saves as JSON bytes.

Binary containers have no JSON form, so they travel as base64 text wrapped in
a `{"$container": "..."}` marker object and are turned back into bytes on
load.
"""

import base64
import logging
from pathlib import Path
from typing import Any, Dict, Union

import orjson

from .container import is_container
from .errors import SaveFormatError

logger = logging.getLogger(__name__)

CONTAINER_MARKER = '$container'

# Save fields that may hold a binary container
CONTAINER_FIELDS = ('tweets', 'dms', 'ad_archive')


def _encode_container(value: Any) -> Dict[str, str]:
    if is_container(value):
        return {CONTAINER_MARKER: base64.b64encode(bytes(value)).decode('ascii')}
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def _decode_container(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {CONTAINER_MARKER}:
        return base64.b64decode(value[CONTAINER_MARKER])
    return value


def dumps_save(save: Dict[str, Any], indent: bool = False) -> bytes:
    """Encode a save as JSON bytes."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(save, default=_encode_container, option=option)


def loads_save(data: Union[bytes, str]) -> Dict[str, Any]:
    """Decode JSON produced by `dumps_save` back into a save."""
    try:
        save = orjson.loads(data)
    except orjson.JSONDecodeError as e:
        logger.error(f"Save payload is not valid JSON: {e}")
        raise SaveFormatError(f"Save payload is not valid JSON: {e}") from e

    if not isinstance(save, dict) or not isinstance(save.get('info'), dict):
        logger.error("Save payload has no info block")
        raise SaveFormatError("Save payload has no info block")

    for key in CONTAINER_FIELDS:
        if key in save:
            save[key] = _decode_container(save[key])
    return save


def write_save(save: Dict[str, Any], path: Path) -> None:
    """Write a save to `path` as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps_save(save))
    logger.info(f"Wrote save version {save['info'].get('version')} to {path}")


def read_save(path: Path) -> Dict[str, Any]:
    """Read a save written by `write_save`."""
    return loads_save(Path(path).read_bytes())
