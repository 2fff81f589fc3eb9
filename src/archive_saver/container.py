"""Zip containers used by legacy saves to package a single JSON document."""

import asyncio
import io
import logging
import zipfile
import zlib
from typing import Any, Optional

import orjson

from .common import clean_json_string
from .errors import MalformedContainerError

logger = logging.getLogger(__name__)

TWEET_DOCUMENT = 'tweet.json'
DM_DOCUMENT = 'dm.json'
ADS_DOCUMENT = 'ads.json'

CONTAINER_TYPES = (bytes, bytearray, memoryview)


def is_container(value: Any) -> bool:
    return isinstance(value, CONTAINER_TYPES)


def pack_document(name: str, data: Any) -> bytes:
    """Package `data` as JSON document `name` inside a new zip container."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as zipped:
        zipped.writestr(name, orjson.dumps(data))
    return buffer.getvalue()


def read_document_sync(container: Any, name: str, expected: Optional[type] = None) -> Any:
    """Open a container and parse its document `name`.

    With `expected`, the parsed document must be an instance of that type.
    """
    try:
        with zipfile.ZipFile(io.BytesIO(bytes(container))) as zipped:
            raw = zipped.read(name)
    except zipfile.BadZipFile as e:
        logger.error(f"Container for {name} is not a readable zip archive: {e}")
        raise MalformedContainerError(name, "not a zip archive") from e
    except KeyError as e:
        logger.error(f"Container does not hold {name}")
        raise MalformedContainerError(name, "document missing") from e
    except (zlib.error, EOFError) as e:
        logger.error(f"Container member {name} is corrupt: {e}")
        raise MalformedContainerError(name, f"corrupt data ({e})") from e
    except (NotImplementedError, RuntimeError) as e:
        # Unsupported compression method or encrypted member
        logger.error(f"Container member {name} cannot be extracted: {e}")
        raise MalformedContainerError(name, f"cannot extract ({e})") from e

    try:
        document = orjson.loads(clean_json_string(raw.decode('utf-8')))
    except (UnicodeDecodeError, orjson.JSONDecodeError) as e:
        logger.error(f"Failed to parse {name} from container: {e}")
        raise MalformedContainerError(name, f"invalid JSON ({e})") from e

    if expected is not None and not isinstance(document, expected):
        logger.error(f"{name} holds a {type(document).__name__}, expected a {expected.__name__}")
        raise MalformedContainerError(name, "unexpected document shape")
    return document


async def read_document(container: Any, name: str, expected: Optional[type] = None) -> Any:
    """Parse document `name` from a container without blocking the event loop."""
    return await asyncio.to_thread(read_document_sync, container, name, expected)
