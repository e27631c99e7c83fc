"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


class GeminiError(Exception):
    """Raised when Gemini is not configured or the API call fails."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_json(text: str) -> dict | None:
    """Parse a Gemini reply as a JSON object. Returns None if it isn't one."""
    try:
        data = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    if not isinstance(data, dict):
        logger.error("Gemini response is JSON but not an object: %s", type(data).__name__)
        return None
    return data


async def generate_text(prompt: str) -> str:
    """Send a prompt to Gemini asking for a JSON reply and return the raw text."""
    client = get_client()
    if client is None:
        raise GeminiError("Missing GEMINI_API_KEY")

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=0.3,
                max_output_tokens=4096,
                response_mime_type="application/json",
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise GeminiError("Gemini API error") from e

    return (response.text or "").strip()
