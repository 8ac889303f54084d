"""Content generation service: live provider with deterministic fallback."""

import logfire

from generation.classifier import is_template_request
from generation.cleaning import clean_response, ensure_html, substitute_user_name
from generation.exceptions import (
    InternalGenerationError,
    InvalidArgumentError,
    ProviderUnavailableError,
)
from generation.fallback import generate_fallback_content
from generation.models import GenerationRequest, GenerationResult, GenerationSource
from generation.prompts import create_provider_prompt, temperature_for
from generation.provider import ContentProvider

FALLBACK_WARNING = "Content provider call failed. Using fallback content."


class ContentGenerator:
    """
    Turns a free-text prompt into an HTML document.

    Flow:
    1. Validate the prompt (InvalidArgumentError on empty input)
    2. Classify it as a template request or a direct question
    3. Call the provider once with the matching prompt and temperature
    4. Clean the provider output, substitute the user name, ensure HTML
    5. On any provider failure, serve keyword-matched fallback content

    Provider failures never reach the caller; only invalid input and a
    broken fallback path raise.
    """

    def __init__(self, provider: ContentProvider):
        self.provider = provider

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate content for a request.

        Args:
            request: Prompt and optional user name

        Returns:
            GenerationResult tagged with its source

        Raises:
            InvalidArgumentError: If the prompt is empty or whitespace
            InternalGenerationError: If fallback content could not be built
        """
        prompt = request.prompt or ""
        if not prompt.strip():
            logfire.warning("Rejected generation request with empty prompt")
            raise InvalidArgumentError("Prompt is required")

        template_request = is_template_request(prompt)

        with logfire.span(
            "content_generation.generate",
            is_template_request=template_request,
            prompt_length=len(prompt),
            has_user_name=bool(request.user_name),
        ):
            try:
                content = await self._generate_with_provider(
                    prompt, template_request, request.user_name
                )
                return GenerationResult(content=content, source=GenerationSource.PROVIDER)

            except ProviderUnavailableError as e:
                logfire.error(
                    "Provider call failed, using fallback content",
                    error=str(e),
                    error_type=type(e.__cause__ or e).__name__,
                )

            content = self._generate_fallback(prompt, template_request, request.user_name)
            return GenerationResult(
                content=content,
                source=GenerationSource.FALLBACK,
                warning=FALLBACK_WARNING,
            )

    async def _generate_with_provider(
        self,
        prompt: str,
        template_request: bool,
        user_name: str | None
    ) -> str:
        """Call the provider and post-process its output."""
        provider_prompt = create_provider_prompt(prompt, template_request)
        temperature = temperature_for(template_request)

        with logfire.span("content_generation.provider_call", temperature=temperature):
            try:
                raw = await self.provider.complete(provider_prompt, temperature=temperature)
            except ProviderUnavailableError:
                raise
            except Exception as e:
                raise ProviderUnavailableError(
                    f"Provider call failed: {type(e).__name__}: {str(e)}"
                ) from e
            logfire.info("Provider response received", length=len(raw))

        cleaned = clean_response(raw)
        content = substitute_user_name(cleaned, user_name)
        content = ensure_html(content, prompt if template_request else "Response")

        logfire.info(
            "Provider content cleaned",
            raw_length=len(raw),
            cleaned_length=len(content),
        )
        return content

    def _generate_fallback(
        self,
        prompt: str,
        template_request: bool,
        user_name: str | None
    ) -> str:
        """Build fallback content, converting any failure to InternalGenerationError."""
        try:
            content = generate_fallback_content(prompt, template_request, user_name)
            # Holds for the static library; guards the result invariant
            return ensure_html(content, prompt if template_request else "Response")
        except Exception as e:
            logfire.error(
                "Fallback content generation failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=True,
            )
            raise InternalGenerationError(e) from e
