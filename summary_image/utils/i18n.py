"""Localized message lookup.

Resolution order for `t(key)`:
    1. Catalog of the active language.
    2. English catalog.
    3. The key itself.

The active language starts from `SUMMARY_IMAGE_LANGUAGE` and can be switched at
runtime with `set_language`. Regional tags such as `zh-CN` collapse to `zh`.
"""

import logging

from summary_image.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

MESSAGES = {

    "en": {
        "error_image_api_config_incomplete": (
            "Image API configuration is incomplete. "
            "Please provide both the API URL and the API key."
        ),
        "error_image_generation_no_image": (
            "No image was found in the image generation response."
        ),
        "error_image_generation_invalid_response": (
            "The image generation service returned an unreadable response."
        ),
    },

    "zh": {
        "error_image_api_config_incomplete": "图片 API 配置不完整,请填写接口地址和 API Key。",
        "error_image_generation_no_image": "图片生成响应中未找到图片。",
        "error_image_generation_invalid_response": "图片生成服务返回了无法解析的响应。",
    },

}


def _base_language(lang):
    if not lang:
        return FALLBACK_LANGUAGE
    return str(lang).strip().lower().replace("_", "-").split("-")[0] or FALLBACK_LANGUAGE


_active_language = _base_language(DEFAULT_LANGUAGE)


def get_language() -> str:
    """Return the active base language code."""
    return _active_language


def set_language(lang: str) -> str:
    """Switch the active language and return the resolved base code.

    Unknown languages are accepted; lookups then fall back to English.
    """
    global _active_language
    _active_language = _base_language(lang)
    if _active_language not in MESSAGES:
        logger.warning("No message catalog for language %r, using %s fallback",
                       _active_language, FALLBACK_LANGUAGE)
    return _active_language


def t(key: str, **params) -> str:
    """Look up `key` in the active catalog and format `{name}` placeholders."""
    catalog = MESSAGES.get(_active_language, {})
    text = catalog.get(key)
    if text is None:
        text = MESSAGES[FALLBACK_LANGUAGE].get(key, key)
    if params:
        try:
            text = text.format(**params)
        except (KeyError, IndexError):
            logger.warning("Missing format parameter for message %r", key)
    return text
