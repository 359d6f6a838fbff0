"""TDD: Config tests written FIRST"""
import pytest

from claude_vision.config import Config


def test_config_defaults():
    """No env vars at all: Bedrock with the Claude 3 Haiku demo settings."""
    config = Config.from_env()

    assert config.vision_backend == "bedrock"
    assert config.aws_region == "us-east-1"
    assert config.model_id == "anthropic.claude-3-haiku-20240307-v1:0"
    assert config.max_tokens == 500
    assert config.temperature == 0.5
    assert config.prompt == "Provide me more details about this image"
    assert config.image_path == "S3Permissions.png"
    assert config.log_level == "INFO"
    assert config.anthropic_api_key is None


def test_config_overrides_from_env(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-west-3")
    monkeypatch.setenv("BEDROCK_MODEL_ID", "anthropic.claude-3-sonnet-20240229-v1:0")
    monkeypatch.setenv("MAX_TOKENS", "1024")
    monkeypatch.setenv("TEMPERATURE", "0.1")
    monkeypatch.setenv("PROMPT", "What is in the diagram?")
    monkeypatch.setenv("IMAGE_PATH", "/tmp/diagram.jpg")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.aws_region == "eu-west-3"
    assert config.model_id == "anthropic.claude-3-sonnet-20240229-v1:0"
    assert config.max_tokens == 1024
    assert config.temperature == 0.1
    assert config.prompt == "What is in the diagram?"
    assert config.image_path == "/tmp/diagram.jpg"
    assert config.log_level == "DEBUG"


def test_config_backend_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("VISION_BACKEND", " Bedrock ")

    assert Config.from_env().vision_backend == "bedrock"


def test_config_unknown_backend_fails(monkeypatch):
    monkeypatch.setenv("VISION_BACKEND", "sagemaker")

    with pytest.raises(ValueError, match="VISION_BACKEND"):
        Config.from_env()


def test_config_anthropic_backend_requires_key(monkeypatch):
    monkeypatch.setenv("VISION_BACKEND", "anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")

    with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
        Config.from_env()


def test_config_anthropic_backend_with_key(monkeypatch):
    monkeypatch.setenv("VISION_BACKEND", "anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-3-opus-20240229")

    config = Config.from_env()

    assert config.vision_backend == "anthropic"
    assert config.anthropic_api_key == "sk-ant-test"
    assert config.anthropic_model == "claude-3-opus-20240229"


@pytest.mark.parametrize("value", ["0", "-5"])
def test_config_rejects_non_positive_max_tokens(monkeypatch, value):
    monkeypatch.setenv("MAX_TOKENS", value)

    with pytest.raises(ValueError, match="MAX_TOKENS"):
        Config.from_env()


@pytest.mark.parametrize("value", ["-0.1", "1.5"])
def test_config_rejects_out_of_range_temperature(monkeypatch, value):
    monkeypatch.setenv("TEMPERATURE", value)

    with pytest.raises(ValueError, match="TEMPERATURE"):
        Config.from_env()


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config.from_env()

    with pytest.raises(Exception):
        config.model_id = "other"
