"""Chat-completions HTTP client for image providers.

Processing flow:
    1. Attach JSON content type and Bearer authorization headers.
    2. POST the JSON payload to the already-normalized endpoint.
    3. Return parsed JSON on success, or raise on non-success status.

Base64 handling:
    - This module does not look at or decode image content.

Error handling strategy:
    - Non-success status -> `RemoteApiError` carrying the upstream body text,
      else the reason phrase, else `HTTP <status>`.
    - Success status with a non-JSON body -> `ResponseFormatError`.
    - Transport failures (`httpx.RequestError`) propagate unchanged.

Resource handling:
    - A caller-supplied `httpx.AsyncClient` is used as-is and left open.
    - Otherwise a short-lived client is created per request and closed.

Security considerations:
    - The API key is sent only in the Authorization header and never logged.
    - Exceptions may include upstream provider response bodies.
"""

import logging

import httpx

from summary_image.config import IMAGE_TIMEOUT_SECONDS
from summary_image.image.errors import RemoteApiError, ResponseFormatError
from summary_image.utils.i18n import t

logger = logging.getLogger(__name__)


def build_headers(api_key: str) -> dict:
    """Return request headers for a Bearer-authenticated JSON request."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


async def _read_error_text(response: httpx.Response) -> str:
    """Best-effort read of an error body; any failure yields `""`."""
    try:
        await response.aread()
        return response.text
    except Exception:
        return ""


async def _post(client: httpx.AsyncClient, url: str, payload: dict, headers: dict):
    async with client.stream("POST", url, json=payload, headers=headers) as response:
        if response.is_success:
            await response.aread()
            return response, ""
        return response, await _read_error_text(response)


async def send_chat_request(
    url: str,
    api_key: str,
    payload: dict,
    client: httpx.AsyncClient | None = None,
) -> dict:
    """Send one chat-completion request and return the parsed JSON body.

    Args:
        url: Normalized chat-completions endpoint.
        api_key: Bearer credential.
        payload: JSON request body.
        client: Optional shared client (connection reuse, custom transport).

    Returns:
        Parsed JSON response. Non-object JSON values are returned as-is.

    Raises:
        RemoteApiError: Non-success HTTP status.
        ResponseFormatError: Success status with an unparseable body.
        httpx.RequestError: Network/transport failure.
    """
    headers = build_headers(api_key)

    if client is None:
        async with httpx.AsyncClient(timeout=IMAGE_TIMEOUT_SECONDS) as own_client:
            response, error_text = await _post(own_client, url, payload, headers)
    else:
        response, error_text = await _post(client, url, payload, headers)

    if not response.is_success:
        logger.warning("Image request failed with status %s", response.status_code)
        message = error_text or response.reason_phrase or f"HTTP {response.status_code}"
        raise RemoteApiError(message, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as err:
        logger.warning("Image provider returned a non-JSON body (status %s)",
                       response.status_code)
        raise ResponseFormatError(t("error_image_generation_invalid_response")) from err
