"""Entry point — wires Config → VisionClient → invoke_claude and prints the completion."""
import asyncio
import logging

from rich.console import Console
from rich.logging import RichHandler

from claude_vision.config import Config
from claude_vision.constants import (
    BACKEND_ANTHROPIC,
    DEMO_MODEL_LABEL,
    MSG_OUT_COMPLETION,
    MSG_OUT_MODEL,
    MSG_OUT_PROMPT,
)
from claude_vision.invoker import invoke_claude
from claude_vision.vision.bedrock import BedrockVisionClient
from claude_vision.vision.claude import ClaudeVisionClient
from claude_vision.vision.client import VisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True))


def build_vision_client(config: Config) -> VisionClient:
    match config.vision_backend:
        case backend if backend == BACKEND_ANTHROPIC:
            return ClaudeVisionClient(
                config.anthropic_api_key,
                model=config.anthropic_model,
                max_tokens=config.max_tokens,
                temperature=config.temperature,
            )
        case _:
            return BedrockVisionClient(
                region=config.aws_region,
                model_id=config.model_id,
                max_tokens=config.max_tokens,
                temperature=config.temperature,
            )


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    print(MSG_OUT_MODEL % DEMO_MODEL_LABEL)
    print(MSG_OUT_PROMPT % config.prompt)

    vision = build_vision_client(config)
    completion = asyncio.run(invoke_claude(config.prompt, config.image_path, vision))
    if completion is None:
        return

    print(MSG_OUT_COMPLETION)
    print(completion)
    print()


if __name__ == "__main__":
    main()
