"""ClaudeVisionClient — Claude via the Anthropic Messages API."""
from anthropic import AsyncAnthropic, PermissionDeniedError

from claude_vision.constants import (
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    MSG_ERR_NO_CONTENT,
    MSG_ERR_NO_TEXT,
    STOP_SEQUENCES,
)
from claude_vision.vision.client import (
    AccessDenied,
    Completion,
    InvocationResult,
    MalformedResponseError,
    VisionClient,
)
from claude_vision.vision.payload import build_messages


class ClaudeVisionClient(VisionClient):

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_ANTHROPIC_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def model_id(self) -> str:
        return self._model

    async def invoke(self, prompt: str, image_data: str, media_type: str) -> InvocationResult:
        client = AsyncAnthropic(api_key=self._api_key)
        try:
            message = await client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                stop_sequences=list(STOP_SEQUENCES),
                messages=build_messages(prompt, image_data, media_type),
            )
        except PermissionDeniedError as e:
            return AccessDenied(model_id=self._model, message=str(e))

        match message.content:
            case [first, *_]:
                text = getattr(first, "text", None)
                if not isinstance(text, str):
                    raise MalformedResponseError(MSG_ERR_NO_TEXT)
                return Completion(text)
            case _:
                raise MalformedResponseError(MSG_ERR_NO_CONTENT)
