"""BedrockVisionClient — Claude 3 on Amazon Bedrock via boto3."""
import asyncio
import json
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from claude_vision.constants import (
    ACCESS_DENIED_CODE,
    BEDROCK_ACCEPT,
    BEDROCK_CONTENT_TYPE,
    BEDROCK_SERVICE_NAME,
    DEFAULT_AWS_REGION,
    DEFAULT_BEDROCK_MODEL_ID,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    MSG_BEDROCK_REQUEST_ID,
)
from claude_vision.vision.client import AccessDenied, Completion, InvocationResult, VisionClient
from claude_vision.vision.payload import build_payload, parse_response_body

logger = logging.getLogger(__name__)


def _error_code(err: ClientError) -> str | None:
    return err.response.get("Error", {}).get("Code")


class BedrockVisionClient(VisionClient):

    def __init__(
        self,
        region: str = DEFAULT_AWS_REGION,
        model_id: str = DEFAULT_BEDROCK_MODEL_ID,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._region = region
        self._model_id = model_id
        self._max_tokens = max_tokens
        self._temperature = temperature

    @property
    def model_id(self) -> str:
        return self._model_id

    async def invoke(self, prompt: str, image_data: str, media_type: str) -> InvocationResult:
        payload = build_payload(
            prompt,
            image_data,
            media_type,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        try:
            raw = await asyncio.to_thread(self._invoke_model, payload)
        except ClientError as e:
            match _error_code(e):
                case code if code == ACCESS_DENIED_CODE:
                    return AccessDenied(model_id=self._model_id, message=str(e))
                case _:
                    raise
        return Completion(parse_response_body(raw))

    def _invoke_model(self, payload: dict[str, Any]) -> bytes:
        client = boto3.client(BEDROCK_SERVICE_NAME, region_name=self._region)
        response = client.invoke_model(
            modelId=self._model_id,
            contentType=BEDROCK_CONTENT_TYPE,
            accept=BEDROCK_ACCEPT,
            body=json.dumps(payload),
        )
        logger.debug(MSG_BEDROCK_REQUEST_ID, response.get("ResponseMetadata", {}).get("RequestId"))
        return response["body"].read()
