"""
Prompts for the content generation service.

All provider prompts are defined here for easy modification and A/B testing.
"""

SYSTEM_PROMPT = """You help people write end-of-life documents: farewell letters, final wishes, and practical instructions for the people they leave behind.

Write with warmth and clarity. Output HTML fragments only."""


TEMPLATE_PROMPT = """Write a detailed death note or final instructions letter based on this topic: "{prompt}"

The letter should be in valid HTML format with proper tags.
Use <h1> for main headings/titles, <h3> for subheadings, <p> for paragraphs, <ul> and <li> for lists.
Use <strong> for emphasis where appropriate.

Include placeholders where the person would need to fill in personal information.
Make the content specific to the topic requested and structured as a template that can be filled in.

The response should ONLY contain the HTML content, nothing else."""


DIRECT_PROMPT = """Based on this request: "{prompt}"

Provide a detailed, accurate, and thoughtful response in the context of a final instructions document or letter.
Use professional language, be precise, and respond directly to the specific query.
Use your deep knowledge to provide high-quality information, practical advice, and clear instructions.
Avoid template-like placeholders unless specifically requested.

Format the response in valid HTML:
- Use <h1> for main headings/titles
- Use <h3> for subheadings
- Use <p> for paragraphs
- Use <ul> and <li> for lists
- Use <strong> for emphasis

Focus on providing accurate, specific content that directly addresses the query.
The response should ONLY contain the HTML content, nothing else."""


# Sampling temperature per request kind
TEMPLATE_TEMPERATURE = 0.7
DIRECT_TEMPERATURE = 0.5


def create_provider_prompt(prompt: str, is_template_request: bool) -> str:
    """
    Build the prompt sent to the provider.

    Args:
        prompt: User's original prompt
        is_template_request: Whether the user asked for a fill-in template

    Returns:
        Formatted provider prompt
    """
    if is_template_request:
        return TEMPLATE_PROMPT.format(prompt=prompt)
    return DIRECT_PROMPT.format(prompt=prompt)


def temperature_for(is_template_request: bool) -> float:
    """Templates sample more freely; direct answers stay precise."""
    return TEMPLATE_TEMPERATURE if is_template_request else DIRECT_TEMPERATURE
