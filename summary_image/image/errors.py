"""Error taxonomy for image generation.

All errors are terminal: nothing here is retried, and every kind is raised
straight to the caller of `summary_image.image.service.generate_image`.
"""


class ImageGenerationError(RuntimeError):
    """Base class for all image-generation failures."""


class ConfigurationError(ImageGenerationError):
    """Base URL or API key missing after normalization. Raised before any I/O."""


class RemoteApiError(ImageGenerationError):
    """Provider answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the provider.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NoImageFoundError(ImageGenerationError):
    """Provider answered successfully but the content holds no image data URI."""


class ResponseFormatError(ImageGenerationError):
    """Provider answered successfully with a body that is not valid JSON."""
