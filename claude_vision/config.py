from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from claude_vision.constants import (
    BACKEND_ANTHROPIC,
    BACKEND_BEDROCK,
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_AWS_REGION,
    DEFAULT_BEDROCK_MODEL_ID,
    DEFAULT_IMAGE_PATH,
    DEFAULT_MAX_TOKENS,
    DEFAULT_PROMPT,
    DEFAULT_TEMPERATURE,
    VISION_BACKENDS,
)


@dataclass(frozen=True)
class Config:
    vision_backend: str
    aws_region: str
    model_id: str
    anthropic_api_key: Optional[str]
    anthropic_model: str
    max_tokens: int
    temperature: float
    prompt: str
    image_path: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        backend = os.getenv("VISION_BACKEND", BACKEND_BEDROCK)
        region = os.getenv("AWS_REGION", DEFAULT_AWS_REGION)
        model_id = os.getenv("BEDROCK_MODEL_ID", DEFAULT_BEDROCK_MODEL_ID)
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        anthropic_model = os.getenv("ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL)
        max_tokens = os.getenv("MAX_TOKENS", str(DEFAULT_MAX_TOKENS))
        temperature = os.getenv("TEMPERATURE", str(DEFAULT_TEMPERATURE))
        prompt = os.getenv("PROMPT", DEFAULT_PROMPT)
        image_path = os.getenv("IMAGE_PATH", DEFAULT_IMAGE_PATH)
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            vision_backend=backend.strip().lower(),
            aws_region=region,
            model_id=model_id,
            anthropic_api_key=anthropic_api_key,
            anthropic_model=anthropic_model,
            max_tokens=int(max_tokens),
            temperature=float(temperature),
            prompt=prompt,
            image_path=image_path,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        vision_backend: str,
        aws_region: str,
        model_id: str,
        anthropic_api_key: Optional[str],
        anthropic_model: str,
        max_tokens: int,
        temperature: float,
        prompt: str,
        image_path: str,
        log_level: str,
    ) -> "Config":
        match vision_backend:
            case b if b not in VISION_BACKENDS:
                raise ValueError(
                    f"VISION_BACKEND must be one of {', '.join(VISION_BACKENDS)}, got {b!r}"
                )
            case "anthropic" if not anthropic_api_key:
                raise ValueError(f"ANTHROPIC_API_KEY must be set when VISION_BACKEND={BACKEND_ANTHROPIC}")
            case _:
                pass

        match max_tokens:
            case n if n < 1:
                raise ValueError("MAX_TOKENS must be a positive integer")
            case _:
                pass

        match temperature:
            case t if not 0.0 <= t <= 1.0:
                raise ValueError("TEMPERATURE must be between 0 and 1")
            case _:
                pass

        return Config(
            vision_backend=vision_backend,
            aws_region=aws_region,
            model_id=model_id,
            anthropic_api_key=anthropic_api_key,
            anthropic_model=anthropic_model,
            max_tokens=max_tokens,
            temperature=temperature,
            prompt=prompt,
            image_path=image_path,
            log_level=log_level,
        )
