"""
Image ingestion

Pictures for products and the shop logo are embedded as data URIs rather
than referenced externally. There is no size or type limit.
"""

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path

from meatshop.infrastructure.utilities.exceptions import ImageReadError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def encode_data_uri(content: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(content).decode('ascii')}"


async def file_to_data_uri(path: str | Path) -> str:
    """Read a file to completion and return it as an inline data URI"""
    path = Path(path)
    try:
        content = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        logger.error("Image read failed for %s: %s", path, e)
        raise ImageReadError(str(path), str(e)) from e

    mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
    logger.debug("Embedded %s (%d bytes, %s)", path.name, len(content), mime_type)
    return encode_data_uri(content, mime_type)
