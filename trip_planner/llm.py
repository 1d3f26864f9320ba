"""Thin Gemini client for the generateContent endpoint."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

import httpx

from .config import Settings, get_settings
from .errors import BackendError, MalformedResponseError, TransportError, ValidationError
from .models import DEFAULT_GENERATION_CONFIG, GenerationConfig
from .utils import mask_secret


logger = logging.getLogger(__name__)

API_KEY_PARAM = "key"
API_KEY_HEADER = "x-goog-api-key"

_KEY_PARAM_RE = re.compile(r"""([?&]key=)([^&\s'"]+)""")


class RedactApiKeyFilter(logging.Filter):
    """Masks the ``key`` query parameter in records emitted by the HTTP stack."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "key=" in message:
            record.msg = _KEY_PARAM_RE.sub(lambda m: m.group(1) + mask_secret(m.group(2)), message)
            record.args = None
        return True


def install_log_redaction() -> None:
    # httpx logs every request URL at INFO, query string included.
    target = logging.getLogger("httpx")
    if not any(isinstance(f, RedactApiKeyFilter) for f in target.filters):
        target.addFilter(RedactApiKeyFilter())


install_log_redaction()


def build_generate_url(settings: Settings) -> str:
    return f"{settings.gemini_base_url}/{settings.gemini_model}:generateContent"


def build_generation_payload(
    prompt: str, generation_config: GenerationConfig = DEFAULT_GENERATION_CONFIG
) -> Dict[str, Any]:
    """Single-turn request body with the prompt as the only content part."""

    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": generation_config.to_payload(),
    }


def extract_text(data: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponseError(payload=data) from exc
    if not isinstance(text, str):
        raise MalformedResponseError(payload=data)
    return text


def _error_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.reason_phrase


async def generate_content(
    prompt: str,
    api_key: str,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
    generation_config: GenerationConfig = DEFAULT_GENERATION_CONFIG,
) -> str:
    """POST the prompt to Gemini once and return the generated text verbatim."""

    settings = settings or get_settings()
    url = build_generate_url(settings)
    payload = build_generation_payload(prompt, generation_config)
    headers = {"Content-Type": "application/json"}
    params: Dict[str, str] = {}
    if settings.gemini_auth_header:
        if not api_key.isascii():
            raise ValidationError(["api_key"], "API key must contain only ASCII characters.")
        headers[API_KEY_HEADER] = api_key
    else:
        params[API_KEY_PARAM] = api_key

    logger.debug(
        "Requesting %s (key=%s, prompt_chars=%d)", url, mask_secret(api_key), len(prompt)
    )

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.request_timeout) as own_client:
                response = await own_client.post(url, json=payload, headers=headers, params=params)
        else:
            response = await client.post(url, json=payload, headers=headers, params=params)
    except httpx.RequestError as exc:
        # The request URL can carry the key, so only the exception type is logged.
        logger.warning("Gemini request failed: %s", type(exc).__name__)
        raise TransportError(f"Gemini request failed: {type(exc).__name__}") from exc

    if not response.is_success:
        error_payload = _error_payload(response)
        logger.warning("Gemini API error %s: %s", response.status_code, error_payload)
        raise BackendError(response.status_code, error_payload)

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning("Gemini API returned a non-JSON body (status %s)", response.status_code)
        raise MalformedResponseError("Gemini API returned a non-JSON body") from exc

    try:
        return extract_text(data)
    except MalformedResponseError:
        logger.warning("Invalid response format from Gemini API: %s", data)
        raise
