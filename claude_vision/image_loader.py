"""Image loading — local file to base64 text plus its declared media type."""
import base64
import logging
import mimetypes
from pathlib import Path

from claude_vision.constants import (
    DEFAULT_IMAGE_MEDIA_TYPE,
    IMAGE_MEDIA_PREFIX,
    MSG_IMAGE_LOAD_FAILED,
)

logger = logging.getLogger(__name__)


def load_image_as_base64(path: str | Path) -> str:
    """Read the file's raw bytes and return them as standard base64 text.

    Read errors are logged and re-raised unchanged.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error(MSG_IMAGE_LOAD_FAILED, e)
        raise
    return base64.standard_b64encode(data).decode("ascii")


def guess_media_type(path: str | Path) -> str:
    """Return the image mime type for *path*, defaulting to PNG."""
    media_type, _ = mimetypes.guess_type(str(path))
    match media_type:
        case str() as m if m.startswith(IMAGE_MEDIA_PREFIX):
            return m
        case _:
            return DEFAULT_IMAGE_MEDIA_TYPE
