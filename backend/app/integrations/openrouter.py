"""OpenRouter integration: one chat-completion call per website request.

The client posts a system + user conversation to the OpenRouter
chat-completions endpoint and returns the text of the first choice. Every
failure (non-2xx status, transport error, timeout, malformed body) is raised
as ProviderFailure. There are no retries.
"""

import asyncio
import json

import httpx
import structlog

from app.core.config import Settings
from app.core.exceptions import ProviderFailure

logger = structlog.get_logger(__name__)


class OpenRouterClient:
    """Client for the OpenRouter chat-completions API."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize the client.

        Args:
            settings: Application settings (API key, model, limits, timeout)
            transport: Optional httpx transport, used by tests to fake the provider
        """
        self.settings = settings
        self._transport = transport

    @property
    def model(self) -> str:
        return self.settings.llm_model

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.openrouter_api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.http_referer,
            "X-Title": self.settings.x_title,
        }

    def _payload(self, system: str, user: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    async def complete(self, system: str, user: str) -> str:
        """Send one completion request and return the model's text reply.

        The whole call is bounded by settings.provider_timeout_seconds.

        Raises:
            ProviderFailure: on non-2xx status, network error, timeout, or a
                response without choices[0].message.content.
        """
        timeout = self.settings.provider_timeout_seconds
        try:
            return await asyncio.wait_for(self._post(system, user), timeout=timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("provider_call_timed_out", model=self.model, timeout_seconds=timeout)
            raise ProviderFailure(f"DeepSeek API request timed out after {timeout:g}s") from exc
        except httpx.HTTPError as exc:
            logger.warning("provider_call_failed", model=self.model, error=str(exc), error_type=type(exc).__name__)
            raise ProviderFailure(f"DeepSeek API request failed: {exc}") from exc

    async def _post(self, system: str, user: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.settings.provider_timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.settings.openrouter_api_url,
                headers=self._headers(),
                json=self._payload(system, user),
            )

        if not response.is_success:
            try:
                error_data = json.dumps(response.json())
            except ValueError:
                error_data = response.text
            logger.warning("provider_error_status", model=self.model, status_code=response.status_code)
            raise ProviderFailure(
                f"DeepSeek API error ({response.status_code}): {error_data}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ProviderFailure(f"DeepSeek API returned a malformed response: {exc!r}") from exc

        if not isinstance(content, str):
            raise ProviderFailure("DeepSeek API returned a malformed response: content is not text")

        logger.info("provider_call_completed", model=self.model, content_length=len(content))
        return content
