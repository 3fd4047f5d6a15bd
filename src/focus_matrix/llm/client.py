# src/focus_matrix/llm/client.py

"""
Single-shot chat-completion client for the strategic summary.

One request per call: no retries (max_retries=0), no caching, no timeout
override. SDK and transport failures are mapped onto the SummaryError
taxonomy in llm/errors.py.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from .errors import (
    DecodingFailure,
    InvalidEndpoint,
    InvalidResponse,
    MissingCredential,
    NoContent,
    TransportFailure,
)
from .prompt import SummaryRequest

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"


def validate_endpoint(endpoint: str) -> str:
    """Return the endpoint unchanged, or raise InvalidEndpoint."""
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError):
        raise InvalidEndpoint(endpoint) from None
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidEndpoint(endpoint)
    return endpoint


def extract_summary_text(payload: Any) -> str:
    """
    Pull `choices[0].message.content` out of a decoded chat-completion body.

    Empty `choices` -> NoContent; anything missing or of the wrong type ->
    DecodingFailure. The text is returned verbatim.
    """
    if not isinstance(payload, dict):
        raise DecodingFailure("top-level JSON value is not an object")

    choices = payload.get("choices")
    if not isinstance(choices, list):
        raise DecodingFailure("missing 'choices' array")
    if not choices:
        raise NoContent()

    try:
        content = choices[0]["message"]["content"]
    except (KeyError, TypeError, IndexError) as e:
        raise DecodingFailure(e) from e

    if not isinstance(content, str):
        raise DecodingFailure("'message.content' is not a string")
    return content


class SummaryClient:
    """
    OpenAI-compatible summary client.

    The API key is injected by the caller (see cli/bootstrap.py) so tests can
    pass a fake key and a mocked `http_client`.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        model: str = DEFAULT_MODEL,
        temperature: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.model = model
        self.temperature = temperature
        self._http_client = http_client
        self._client: AsyncOpenAI | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def _get_client(self) -> AsyncOpenAI:
        """Lazily create and cache the SDK client. Requires a key."""
        if self._client is not None:
            return self._client

        if not self.is_configured:
            raise MissingCredential()

        base_url = validate_endpoint(self.endpoint)

        kwargs: dict[str, Any] = {
            "api_key": str(self.api_key).strip(),
            "base_url": base_url,
            "max_retries": 0,
        }
        if self._http_client is not None:
            kwargs["http_client"] = self._http_client

        self._client = AsyncOpenAI(**kwargs)
        return self._client

    async def request_summary(self, request: SummaryRequest) -> str:
        client = self._get_client()
        body = request.to_wire()

        logger.info("LLM: requesting summary model=%s messages=%d", body["model"], len(body["messages"]))
        t0 = time.monotonic()

        try:
            raw = await client.chat.completions.with_raw_response.create(**body)
        except openai.APIConnectionError as e:
            # Includes APITimeoutError.
            logger.info("LLM: transport failure (%s)", e.__class__.__name__)
            raise TransportFailure(e.__cause__ or e) from e
        except openai.APIStatusError as e:
            logger.info("LLM: HTTP %s from endpoint", e.status_code)
            raise InvalidResponse(e.status_code) from e

        response: httpx.Response = raw.http_response
        if not response.is_success:
            raise InvalidResponse(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodingFailure(e) from e

        text = extract_summary_text(payload)
        logger.info("LLM: summary received len=%d (%.2fs)", len(text), time.monotonic() - t0)
        return text

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
