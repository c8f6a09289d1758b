"""
HTTP API adapter for summary-image generation.

Architectural role:
- Expose the generation operation over HTTP.
- Enforce adapter-level input validation.
- Delegate generation work to `summary_image.image.service.generate_image`.
- Map the error taxonomy to HTTP status codes.

Endpoint responsibilities:
- `GET /health`: liveness probe.
- `POST /v1/images/summary`: validate input, resolve provider config, generate.

API request lifecycle (`POST /v1/images/summary`):
1. Parse request JSON (`content`, optional `imageApiConfig`).
2. Validate `content`.
3. Resolve provider config: explicit `imageApiConfig`, else environment defaults.
4. Invoke the service and return `{"base64Data": ...}`.

Error mapping:
- Missing/non-string `content` or non-object body -> HTTP 400.
- `ConfigurationError` -> HTTP 400.
- `RemoteApiError` / `NoImageFoundError` / `ResponseFormatError` -> HTTP 502.
- `httpx.RequestError` (provider unreachable/timeout) -> HTTP 504.

Side effects:
- Emits request debug logs only when `DEBUG == "true"`; keys and image data
  are never logged.
"""

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from summary_image.config import DEBUG, ImageApiConfig
from summary_image.image.errors import (
    ConfigurationError,
    ImageGenerationError,
    RemoteApiError,
)
from summary_image.image.service import generate_image

logger = logging.getLogger(__name__)

app = FastAPI(title="summary-image")


# ============================================================
# Request Schema
# ============================================================

class ImageApiConfigBody(BaseModel):
    """Provider config as sent by clients (camelCase wire names)."""
    baseUrl: str = ""
    apiKey: str = ""
    modelName: str | None = None


class SummaryImageRequest(BaseModel):
    content: str
    imageApiConfig: ImageApiConfigBody | None = None


def resolve_config(body: SummaryImageRequest) -> ImageApiConfig:
    """Use the caller's config when given, otherwise environment defaults."""
    if body.imageApiConfig is not None:
        return ImageApiConfig.from_mapping(body.imageApiConfig.model_dump())
    return ImageApiConfig.from_env()


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/v1/images/summary")
async def summary_image(request: Request):
    """
    Generate one summary image for the posted content.

    Input validation behavior:
    - Returns HTTP 400 for an unparseable body.
    - Returns HTTP 400 when the body does not match `SummaryImageRequest`
      (missing/non-string `content`, non-object `imageApiConfig`).

    Error handling strategy:
    - Service errors are mapped to structured JSON errors.
    - Unexpected exceptions follow FastAPI default exception handling.
    """
    try:
        raw_body = await request.json()
    except ValueError:
        return error_response(400, "Request body must be JSON")

    try:
        body = SummaryImageRequest.model_validate(raw_body)
    except ValidationError as err:
        fields = sorted({".".join(str(p) for p in e["loc"]) or "body" for e in err.errors()})
        return error_response(400, "Invalid request: " + ", ".join(fields))

    content = body.content
    config = resolve_config(body)

    if DEBUG:
        logger.debug("Summary image request: content_chars=%d model=%s",
                     len(content), config.model_name)

    try:
        result = await generate_image(content, config)
    except ConfigurationError as err:
        return error_response(400, str(err))
    except RemoteApiError as err:
        return error_response(502, str(err), upstream_status=err.status_code)
    except ImageGenerationError as err:
        return error_response(502, str(err))
    except httpx.RequestError as err:
        logger.warning("Image provider unreachable: %s", err.__class__.__name__)
        return error_response(504, "Image provider unreachable")

    return result.to_dict()
