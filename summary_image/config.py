"""Runtime configuration for the image-summary layer.

Architectural role:
    Centralizes endpoint/model defaults and credential lookup for
    `summary_image.image.service` and the API adapters.

Call flow integration:
    - `ImageApiConfig.from_env` feeds adapters when callers omit explicit config.
    - `IMAGE_TIMEOUT_SECONDS` bounds the default transport client in `image.client`.
    - `DEFAULT_LANGUAGE` seeds the active language in `utils.i18n`.

Determinism:
    Deterministic for a fixed process environment and key files. Values are resolved
    at import time (plus runtime key-file reads in `load_key`). An `IMAGE_API_KEY`
    value always takes precedence over the key file.

Failure behavior:
    Missing values are represented as empty strings / `None`; completeness is
    validated by the service layer, not here.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping

from dotenv import load_dotenv

load_dotenv()

# Fallback model used when no model name is configured or supplied.
DEFAULT_MODEL_NAME = "gemini-2.0-flash-preview-image-generation"

IMAGE_API_BASE_URL = os.getenv("IMAGE_API_BASE_URL", "")
IMAGE_API_KEY = os.getenv("IMAGE_API_KEY") or None
IMAGE_API_KEY_FILE = os.getenv("IMAGE_API_KEY_FILE", "config/image.key")
IMAGE_MODEL_NAME = os.getenv("IMAGE_MODEL_NAME") or None
IMAGE_TIMEOUT_SECONDS = float(os.getenv("IMAGE_TIMEOUT_SECONDS", "120"))

DEFAULT_LANGUAGE = os.getenv("SUMMARY_IMAGE_LANGUAGE", "en")

# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def load_key(path):
    """Read the image API key from a key file.

    Returns the stripped file contents, or `None` when `path` is unset, the file
    does not exist, or it holds only whitespace.
    """
    if not path or not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip() or None


def resolve_api_key():
    """Return the image API key: `IMAGE_API_KEY` first, then `IMAGE_API_KEY_FILE`."""
    return IMAGE_API_KEY or load_key(IMAGE_API_KEY_FILE)


@dataclass(frozen=True)
class ImageApiConfig:
    """Endpoint, credential and model selection for one generation call.

    Attributes:
        base_url: Raw provider URL; normalized to a chat-completions endpoint later.
        api_key: Bearer credential.
        model_name: Optional model override; `None` selects `DEFAULT_MODEL_NAME`.
    """

    base_url: str = ""
    api_key: str = ""
    model_name: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ImageApiConfig":
        """Build config from a JSON-style mapping.

        Accepts both camelCase (`baseUrl`, `apiKey`, `modelName`) and snake_case
        keys. Missing keys become empty values.
        """
        data = data or {}

        def pick(*keys):
            for key in keys:
                value = data.get(key)
                if value is not None:
                    return str(value)
            return None

        return cls(
            base_url=pick("baseUrl", "base_url") or "",
            api_key=pick("apiKey", "api_key") or "",
            model_name=pick("modelName", "model_name") or None,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ImageApiConfig":
        """Build config from environment defaults, letting non-empty overrides win."""
        values = {
            "base_url": IMAGE_API_BASE_URL,
            "api_key": resolve_api_key() or "",
            "model_name": IMAGE_MODEL_NAME,
        }
        for key, value in overrides.items():
            if value:
                values[key] = value
        return cls(**values)
