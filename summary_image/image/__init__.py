"""Summary-image generation package.

Scope:
    Turns free text into one generated image by prompting an OpenAI-compatible
    chat-completions image model and extracting the returned data URI.

Non-goals:
    - No queueing, retries or streaming.
    - No image validation or Base64 decoding beyond pattern extraction.
"""

from summary_image.image.errors import (
    ConfigurationError,
    ImageGenerationError,
    NoImageFoundError,
    RemoteApiError,
    ResponseFormatError,
)
from summary_image.image.service import (
    ImageGenerationResult,
    generate_image,
    generate_image_sync,
)

__all__ = [
    "ConfigurationError",
    "ImageGenerationError",
    "ImageGenerationResult",
    "NoImageFoundError",
    "RemoteApiError",
    "ResponseFormatError",
    "generate_image",
    "generate_image_sync",
]
