"""Text-to-summary-image service.

Role in pipeline:
    - Receives raw content plus provider config from adapters or library callers.
    - Validates configuration, builds the chat-completion payload, delegates
      transport to `summary_image.image.client`.
    - Extracts the embedded image data URI from the assistant message.

Control flow:
    Validate -> Send -> Interpret. No branch loops back; terminal states are a
    returned `ImageGenerationResult` or a raised `ImageGenerationError`
    (transport errors from httpx propagate unchanged).

Side effects:
    - Exactly one outbound HTTP request per successful validation.
    - No caching, no retries. Two identical calls send two requests.

Concurrency:
    Stateless and reentrant. Safe to run many calls concurrently on one loop.
"""

import asyncio
import logging
from dataclasses import dataclass

import httpx

from summary_image.config import DEFAULT_MODEL_NAME, ImageApiConfig
from summary_image.image.client import send_chat_request
from summary_image.image.errors import ConfigurationError, NoImageFoundError
from summary_image.image.extract import find_data_uri, get_message_content
from summary_image.utils.api_url import normalize_chat_completions_url
from summary_image.utils.i18n import t

logger = logging.getLogger(__name__)

# "Summarize the following content into an exquisite picture"
PROMPT_TEMPLATE = "将以下内容总结成一张精美的图片:\n\n{content}"


@dataclass(frozen=True)
class ImageGenerationResult:
    """Generated image as a `data:image/<subtype>;base64,<payload>` string."""

    base64_data: str

    def to_dict(self) -> dict:
        return {"base64Data": self.base64_data}


def build_prompt(content) -> str:
    return PROMPT_TEMPLATE.format(content="" if content is None else content)


def build_payload(content, model_name: str | None = None) -> dict:
    """Build the fixed-shape, non-streaming chat-completion request body."""
    return {
        "model": model_name or DEFAULT_MODEL_NAME,
        "stream": False,
        "messages": [
            {"role": "user", "content": build_prompt(content)}
        ],
    }


def _coerce_config(image_api_config) -> ImageApiConfig:
    if isinstance(image_api_config, ImageApiConfig):
        return image_api_config
    return ImageApiConfig.from_mapping(image_api_config)


async def generate_image(
    content: str,
    image_api_config,
    *,
    client: httpx.AsyncClient | None = None,
) -> ImageGenerationResult:
    """Generate one summary image for `content`.

    Args:
        content: Arbitrary text to summarize into an image. Not length-checked.
        image_api_config: `ImageApiConfig` or mapping with `baseUrl`, `apiKey`,
            optional `modelName` (snake_case keys are accepted too).
        client: Optional shared `httpx.AsyncClient`.

    Returns:
        `ImageGenerationResult` holding the first data URI found in the reply.

    Error handling:
        - Empty normalized URL or API key -> `ConfigurationError` (no I/O).
        - Non-success HTTP status -> `RemoteApiError`.
        - Non-JSON success body -> `ResponseFormatError`.
        - No data URI in `choices[0].message.content` -> `NoImageFoundError`.
    """
    config = _coerce_config(image_api_config)

    url = normalize_chat_completions_url(config.base_url)
    if not url or not config.api_key:
        raise ConfigurationError(t("error_image_api_config_incomplete"))

    payload = build_payload(content, config.model_name)
    logger.debug("Requesting summary image from %s with model %s", url, payload["model"])

    data = await send_chat_request(url, config.api_key, payload, client=client)

    base64_data = find_data_uri(get_message_content(data))
    if not base64_data:
        logger.warning("Image response from %s contained no image data URI", url)
        raise NoImageFoundError(t("error_image_generation_no_image"))

    return ImageGenerationResult(base64_data=base64_data)


def generate_image_sync(content: str, image_api_config, **kwargs) -> ImageGenerationResult:
    """Execute `generate_image` synchronously with `asyncio.run`.

    Calling from an already running event loop propagates `asyncio.run` limitations.
    """
    return asyncio.run(generate_image(content, image_api_config, **kwargs))
