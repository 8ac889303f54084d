"""
Test suite for ContentGenerator.

Covers validation, provider prompt/temperature selection, cleaning of live
output and every fallback path. The provider is a FakeContentProvider from
the root conftest.

Run with:
    pytest tests/test_content_generator.py -v
"""

import pytest
from unittest.mock import patch

from generation.exceptions import (
    InternalGenerationError,
    InvalidArgumentError,
    ProviderUnavailableError,
)
from generation.models import GenerationRequest, GenerationSource
from generation.prompts import DIRECT_TEMPERATURE, TEMPLATE_TEMPERATURE
from services.content_generator import FALLBACK_WARNING, ContentGenerator


# ===================================================================
# TESTS - Input Validation
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
async def test_empty_prompt_is_rejected_without_provider_call(fake_provider, prompt):
    provider = fake_provider(response="<h1>never</h1>")
    generator = ContentGenerator(provider)

    with pytest.raises(InvalidArgumentError, match="Prompt is required"):
        await generator.generate(GenerationRequest(prompt=prompt))

    assert provider.calls == []


# ===================================================================
# TESTS - Provider path
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
async def test_template_request_uses_template_prompt_and_temperature(fake_provider):
    provider = fake_provider(response="<h1>Pets</h1><p>[Your Name]</p>")
    generator = ContentGenerator(provider)

    result = await generator.generate(
        GenerationRequest(prompt="Give me a template for my pets", user_name="Jane")
    )

    sent_prompt, temperature = provider.calls[0]
    assert temperature == TEMPLATE_TEMPERATURE
    assert "structured as a template" in sent_prompt
    assert '"Give me a template for my pets"' in sent_prompt

    assert result.source == GenerationSource.PROVIDER
    assert result.warning is None
    assert result.content == "<h1>Pets</h1><p>Jane</p>"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_direct_request_uses_direct_prompt_and_temperature(fake_provider):
    provider = fake_provider(response="<h1>Answer</h1>")
    generator = ContentGenerator(provider)

    await generator.generate(GenerationRequest(prompt="How do I write a goodbye letter?"))

    sent_prompt, temperature = provider.calls[0]
    assert temperature == DIRECT_TEMPERATURE
    assert "Avoid template-like placeholders" in sent_prompt


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_output_is_cleaned(fake_provider):
    raw = "```html\n<html><body><h3>Funeral Planning: steps</h3><script>x()</script></body></html>\n```"
    generator = ContentGenerator(fake_provider(response=raw))

    result = await generator.generate(GenerationRequest(prompt="Plan my funeral"))

    assert result.content == "<h1>Funeral Planning</h1>\n<h3>Funeral Planning: steps</h3>"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_placeholder_kept_without_user_name(fake_provider):
    generator = ContentGenerator(fake_provider(response="<h1>Note</h1><p>[Your Name]</p>"))

    result = await generator.generate(GenerationRequest(prompt="write my note", user_name="  "))

    assert "[Your Name]" in result.content


@pytest.mark.asyncio
@pytest.mark.unit
async def test_plain_text_direct_answer_is_wrapped(fake_provider):
    text = "You should keep your will in a fireproof safe and tell your executor where it is."
    generator = ContentGenerator(fake_provider(response=text))

    result = await generator.generate(GenerationRequest(prompt="Where do I keep documents?"))

    assert result.content == f"<h1>Response</h1><p>{text}</p>"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_plain_text_template_answer_uses_prompt_heading(fake_provider):
    text = "Fill in the blanks below with your wishes, then share the document with your executor."
    generator = ContentGenerator(fake_provider(response=text))

    result = await generator.generate(GenerationRequest(prompt="example of <wishes>"))

    assert result.content.startswith("<h1>example of &lt;wishes&gt;</h1><p>")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_output_that_cleans_to_nothing_is_still_html(fake_provider):
    generator = ContentGenerator(fake_provider(response="<script>x()</script>"))

    result = await generator.generate(GenerationRequest(prompt="anything"))

    assert result.source == GenerationSource.PROVIDER
    assert result.content == "<h1>Response</h1><p></p>"


# ===================================================================
# TESTS - Fallback path
# ===================================================================

@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_failure_on_goodbye_uses_direct_fallback(fake_provider):
    generator = ContentGenerator(fake_provider(error=ProviderUnavailableError("down")))

    result = await generator.generate(GenerationRequest(prompt="goodbye"))

    assert result.source == GenerationSource.FALLBACK
    assert result.warning == FALLBACK_WARNING
    assert "<h1>Writing a Meaningful Goodbye Letter</h1>" in result.content


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_failure_on_pet_template_request(fake_provider):
    generator = ContentGenerator(fake_provider(error=ProviderUnavailableError("down")))

    result = await generator.generate(
        GenerationRequest(prompt="Give me a template for handling my pets", user_name="Jane Doe")
    )

    assert result.source == GenerationSource.FALLBACK
    assert result.content.startswith("<h1>Care Instructions for My Beloved Pets</h1>")
    assert "Prepared by: Jane Doe" in result.content


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_failure_without_name_keeps_placeholder(fake_provider):
    generator = ContentGenerator(fake_provider(error=ProviderUnavailableError("down")))

    result = await generator.generate(
        GenerationRequest(prompt="Give me a template for handling my pets")
    )

    assert "Prepared by: [Your Name]" in result.content


@pytest.mark.asyncio
@pytest.mark.unit
async def test_unexpected_provider_exception_is_absorbed(fake_provider):
    generator = ContentGenerator(fake_provider(error=ConnectionError("reset by peer")))

    result = await generator.generate(GenerationRequest(prompt="funeral template"))

    assert result.source == GenerationSource.FALLBACK
    assert result.content.startswith("<h1>My Funeral and Memorial Wishes</h1>")


@pytest.mark.asyncio
@pytest.mark.unit
async def test_fallback_failure_raises_internal_error(fake_provider):
    generator = ContentGenerator(fake_provider(error=ProviderUnavailableError("down")))

    with patch(
        "services.content_generator.generate_fallback_content",
        side_effect=RuntimeError("catalog broken"),
    ):
        with pytest.raises(InternalGenerationError) as exc_info:
            await generator.generate(GenerationRequest(prompt="goodbye"))

    assert isinstance(exc_info.value.original_error, RuntimeError)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provider_is_called_once_per_request(fake_provider):
    provider = fake_provider(error=ProviderUnavailableError("down"))
    generator = ContentGenerator(provider)

    await generator.generate(GenerationRequest(prompt="goodbye"))

    assert len(provider.calls) == 1
