"""VisionClient — abstract base for image + prompt inference backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


class MalformedResponseError(ValueError):
    """The model response did not carry a text completion where expected."""


@dataclass(frozen=True)
class Completion:
    text: str


@dataclass(frozen=True)
class AccessDenied:
    model_id: str
    message: str = ""


InvocationResult = Completion | AccessDenied


class VisionClient(ABC):
    @property
    @abstractmethod
    def model_id(self) -> str:
        ...

    @abstractmethod
    async def invoke(self, prompt: str, image_data: str, media_type: str) -> InvocationResult:
        """Send a base64 image and a prompt to the model.

        Returns Completion on success and AccessDenied when the caller lacks
        permission for the model. Raises on any other failure.
        """
        ...
