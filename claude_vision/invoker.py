"""invoke_claude — load an image, run it through a vision backend, return the completion."""
import logging
import time
from pathlib import Path

from claude_vision.constants import MSG_ACCESS_DENIED, MSG_INVOKE_DONE, MSG_INVOKING
from claude_vision.image_loader import guess_media_type, load_image_as_base64
from claude_vision.vision.client import AccessDenied, Completion, VisionClient

logger = logging.getLogger(__name__)


async def invoke_claude(prompt: str, image_path: str | Path, vision: VisionClient) -> str | None:
    """Return the model's completion for *prompt* about the image at *image_path*.

    Access denied is reported as a warning and yields None. Read errors and
    every other backend failure propagate to the caller.
    """
    image_data = load_image_as_base64(image_path)
    media_type = guess_media_type(image_path)

    logger.info(MSG_INVOKING, vision.model_id, media_type)
    started = time.monotonic()
    result = await vision.invoke(prompt, image_data, media_type)

    match result:
        case Completion(text=text):
            logger.info(MSG_INVOKE_DONE, time.monotonic() - started)
            return text
        case AccessDenied(model_id=model_id):
            logger.warning(MSG_ACCESS_DENIED, model_id)
            return None
