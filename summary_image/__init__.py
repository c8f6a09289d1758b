"""summary-image: turn a block of text into one generated summary image.

Package split:
    - `config`: environment-driven endpoint/model defaults and key loading.
    - `image`: request building, transport, response parsing, error taxonomy.
    - `utils`: provider URL normalization and localized messages.
    - `api`: HTTP (FastAPI) and CLI adapters.
"""

from summary_image.config import ImageApiConfig
from summary_image.image import (
    ConfigurationError,
    ImageGenerationError,
    ImageGenerationResult,
    NoImageFoundError,
    RemoteApiError,
    ResponseFormatError,
    generate_image,
    generate_image_sync,
)

__all__ = [
    "ConfigurationError",
    "ImageApiConfig",
    "ImageGenerationError",
    "ImageGenerationResult",
    "NoImageFoundError",
    "RemoteApiError",
    "ResponseFormatError",
    "generate_image",
    "generate_image_sync",
]
