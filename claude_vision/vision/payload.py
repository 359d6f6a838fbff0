"""Request/response shapes for Claude multimodal messages."""
import json
from typing import Any

from claude_vision.constants import (
    ANTHROPIC_VERSION,
    BLOCK_TYPE_IMAGE,
    BLOCK_TYPE_TEXT,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    IMAGE_SOURCE_BASE64,
    MESSAGE_ROLE_USER,
    MSG_ERR_MALFORMED_JSON,
    MSG_ERR_NO_CONTENT,
    MSG_ERR_NO_TEXT,
    RESPONSE_ENCODING,
    STOP_SEQUENCES,
)
from claude_vision.vision.client import MalformedResponseError


def build_messages(prompt: str, image_data: str, media_type: str) -> list[dict[str, Any]]:
    """One user message: image block first, prompt text second."""
    return [
        {
            "role": MESSAGE_ROLE_USER,
            "content": [
                {
                    "type": BLOCK_TYPE_IMAGE,
                    "source": {
                        "type": IMAGE_SOURCE_BASE64,
                        "media_type": media_type,
                        "data": image_data,
                    },
                },
                {"type": BLOCK_TYPE_TEXT, "text": prompt},
            ],
        }
    ]


def build_payload(
    prompt: str,
    image_data: str,
    media_type: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> dict[str, Any]:
    return {
        "messages": build_messages(prompt, image_data, media_type),
        "max_tokens": max_tokens,
        "temperature": temperature,
        "anthropic_version": ANTHROPIC_VERSION,
        "stop_sequences": list(STOP_SEQUENCES),
    }


def extract_text(body: Any) -> str:
    """Return content[0].text from a decoded response body."""
    match body:
        case {"content": [{"text": str() as text}, *_]}:
            return text
        case {"content": [_, *_]}:
            raise MalformedResponseError(MSG_ERR_NO_TEXT)
        case _:
            raise MalformedResponseError(MSG_ERR_NO_CONTENT)


def parse_response_body(raw: bytes) -> str:
    try:
        body = json.loads(raw.decode(RESPONSE_ENCODING))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedResponseError(MSG_ERR_MALFORMED_JSON) from e
    return extract_text(body)
