import pytest

ENV_VARS = (
    "VISION_BACKEND",
    "AWS_REGION",
    "BEDROCK_MODEL_ID",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "MAX_TOKENS",
    "TEMPERATURE",
    "PROMPT",
    "IMAGE_PATH",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's shell and .env out of the tests."""
    monkeypatch.setattr("claude_vision.config.load_dotenv", lambda **_: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "shot.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + bytes(range(256)))
    return path
