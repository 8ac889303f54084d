"""
Generative-text provider client.

The provider is constructed once at application startup and injected into
ContentGenerator, so tests can pass a fake without patching module state.
Every failure surfaces as ProviderUnavailableError.
"""

from typing import Optional, Protocol, Union

import logfire
from openai import AsyncOpenAI
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from config.settings import Settings
from generation.exceptions import ProviderUnavailableError
from generation.prompts import SYSTEM_PROMPT
from utils.llm_agent import run_agent


class ContentProvider(Protocol):
    """Anything that can turn a provider prompt into completion text."""

    @property
    def is_configured(self) -> bool: ...

    async def complete(self, prompt: str, temperature: float) -> str: ...

    async def aclose(self) -> None: ...


class AgentContentProvider:
    """
    Provider backed by a pydantic-ai agent on an OpenAI-compatible API.

    Usage:
        provider = AgentContentProvider.from_settings(settings)
        html = await provider.complete(prompt, temperature=0.5)
    """

    def __init__(
        self,
        model: Union[str, Model],
        max_tokens: int = 2000,
        timeout: Optional[float] = None,
        system_prompt: str = SYSTEM_PROMPT,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.system_prompt = system_prompt
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentProvider":
        """
        Build the provider from application settings.

        Returns an UnconfiguredContentProvider when no API key is set so
        startup never fails on missing credentials.
        """
        if not settings.provider_api_key:
            logfire.warning(
                "Provider API key not configured - all requests will use fallback content",
                base_url=settings.provider_base_url,
            )
            return UnconfiguredContentProvider()

        # Single attempt per request; failures go straight to the fallback path
        client = AsyncOpenAI(
            api_key=settings.provider_api_key,
            base_url=settings.provider_base_url,
            timeout=settings.provider_timeout,
            max_retries=0,
        )
        model = OpenAIChatModel(
            settings.provider_model,
            provider=OpenAIProvider(openai_client=client),
        )

        logfire.info(
            "Content provider initialized",
            model=settings.provider_model,
            base_url=settings.provider_base_url,
        )

        return cls(
            model=model,
            max_tokens=settings.provider_max_tokens,
            timeout=settings.provider_timeout,
            client=client,
        )

    @property
    def is_configured(self) -> bool:
        return True

    async def complete(self, prompt: str, temperature: float) -> str:
        """
        Run one completion.

        Raises:
            ProviderUnavailableError: On any provider error or empty output
        """
        try:
            output = await run_agent(
                prompt=prompt,
                model=self.model,
                system_prompt=self.system_prompt,
                temperature=temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
            )
        except Exception as e:
            raise ProviderUnavailableError(
                f"Provider call failed: {type(e).__name__}: {str(e)}"
            ) from e

        if not isinstance(output, str) or not output.strip():
            raise ProviderUnavailableError("Provider returned an empty completion")

        return output

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if this provider owns one."""
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        logfire.info("Content provider client closed")


class UnconfiguredContentProvider:
    """Stand-in used when no API key is configured; every call fails."""

    @property
    def is_configured(self) -> bool:
        return False

    async def complete(self, prompt: str, temperature: float) -> str:
        raise ProviderUnavailableError("Provider API key not configured")

    async def aclose(self) -> None:
        """Nothing to release."""
