"""All magic values live here — no inline literals anywhere else."""

# Backends
BACKEND_BEDROCK = "bedrock"
BACKEND_ANTHROPIC = "anthropic"
VISION_BACKENDS = (BACKEND_BEDROCK, BACKEND_ANTHROPIC)

# Bedrock runtime
BEDROCK_SERVICE_NAME = "bedrock-runtime"
DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_BEDROCK_MODEL_ID = "anthropic.claude-3-haiku-20240307-v1:0"
BEDROCK_CONTENT_TYPE = "application/json"
BEDROCK_ACCEPT = "application/json"
ACCESS_DENIED_CODE = "AccessDeniedException"

# Anthropic Messages API
DEFAULT_ANTHROPIC_MODEL = "claude-3-haiku-20240307"

# Request payload.
# Format and ranges for Claude on Bedrock:
# https://docs.aws.amazon.com/bedrock/latest/userguide/model-parameters-claude.html
ANTHROPIC_VERSION = "bedrock-2023-05-31"
DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.5
STOP_SEQUENCES = ("\n\nHuman:",)
MESSAGE_ROLE_USER = "user"
BLOCK_TYPE_IMAGE = "image"
BLOCK_TYPE_TEXT = "text"
IMAGE_SOURCE_BASE64 = "base64"
RESPONSE_ENCODING = "utf-8"

# Image loading
DEFAULT_IMAGE_MEDIA_TYPE = "image/png"
IMAGE_MEDIA_PREFIX = "image/"

# Demo invocation
DEFAULT_PROMPT = "Provide me more details about this image"
DEFAULT_IMAGE_PATH = "S3Permissions.png"
DEMO_MODEL_LABEL = "Anthropic Claude v3"

# Log / user-facing messages
MSG_IMAGE_LOAD_FAILED = "Error loading the image: %s"
MSG_INVOKING = "→ %s (%s)"
MSG_INVOKE_DONE = "✓ Completion received (%.1fs)"
MSG_BEDROCK_REQUEST_ID = "Bedrock request id: %s"
MSG_ACCESS_DENIED = "Access denied. Ensure you have the correct permissions to invoke %s."
MSG_ERR_MALFORMED_JSON = "Response body is not valid JSON"
MSG_ERR_NO_CONTENT = "Response has no content blocks"
MSG_ERR_NO_TEXT = "First content block has no text field"
MSG_OUT_MODEL = "\nModel: %s"
MSG_OUT_PROMPT = "Prompt: %s"
MSG_OUT_COMPLETION = "Completion:"
