"""Utilities for creating instrumented pydantic-ai agents."""

import logging
from typing import Optional, Union

from pydantic_ai import Agent
from pydantic_ai.models import Model

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = "You are a helpful AI assistant."


def _model_name(model: Union[str, Model]) -> str:
    if isinstance(model, str):
        return model
    return getattr(model, "model_name", type(model).__name__)


def create_agent(
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    retries: int = 1,
    timeout: Optional[float] = None,
) -> Agent[None, str]:
    """Create a text-output pydantic-ai Agent."""
    model_settings = {
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=model,
        output_type=str,
        system_prompt=system_prompt or DEFAULT_SYSTEM_PROMPT,
        retries=retries,
        model_settings=model_settings,
    )

    logger.debug(
        "Created agent: model=%s, temperature=%s, max_tokens=%s, retries=%s, timeout=%s",
        _model_name(model),
        temperature,
        max_tokens,
        retries,
        timeout,
    )

    return agent


async def run_agent(
    prompt: str,
    model: Union[str, Model],
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    retries: int = 1,
    timeout: Optional[float] = None,
) -> str:
    """Create an agent, invoke it with prompt, and return the text output."""
    agent = create_agent(
        model=model,
        system_prompt=system_prompt,
        temperature=temperature,
        max_tokens=max_tokens,
        retries=retries,
        timeout=timeout,
    )

    result = await agent.run(prompt)
    return result.output
