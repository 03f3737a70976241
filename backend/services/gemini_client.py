"""Google Gemini API wrapper with error handling."""

import json
import logging
import re

from google import genai
from google.genai import types

from config import settings
from models.errors import GenerationError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

_FENCE_OPEN_RE = re.compile(r"^```[a-zA-Z]*")


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        http_options = None
        if settings.gemini_base_url:
            # integration proxies serve model paths without the /v1beta prefix
            http_options = types.HttpOptions(base_url=settings.gemini_base_url, api_version="")
        _client = genai.Client(api_key=settings.gemini_api_key, http_options=http_options)
    return _client


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapping the reply, if present."""
    text = text.strip()
    if text.startswith("```"):
        text = _FENCE_OPEN_RE.sub("", text, count=1)
        if text.endswith("```"):
            text = text[:-3]
    return text.strip()


async def generate_text(prompt: str) -> str:
    """Send a prompt to Gemini once and return the raw text reply."""
    client = get_client()
    if client is None:
        raise GenerationError()

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise GenerationError() from e

    text = response.text
    if not text:
        logger.error("Gemini returned an empty response")
        raise GenerationError()
    return text


async def generate_json(prompt: str) -> dict:
    """Send a prompt to Gemini and parse the JSON object in its reply."""
    text = strip_code_fences(await generate_text(prompt))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        raise GenerationError() from e

    if not isinstance(data, dict):
        logger.error("Gemini response is %s, expected a JSON object", type(data).__name__)
        raise GenerationError()
    return data
