"""
Fallback Content

Deterministic replacement for provider output. Direct questions get a
hand-written advisory document; template requests get a catalog template.
The two branches use different keyword lists and never cross over.
"""

from typing import Optional

import logfire

from generation.classifier import select_direct_response_id, select_template_id
from generation.direct_responses import get_direct_response, render_generic_direct_response
from generation.templates import get_template, render_generic_template, render_template


def generate_fallback_content(
    prompt: str,
    is_template_request: bool,
    user_name: Optional[str] = None
) -> str:
    """
    Produce fallback HTML for a prompt.

    Args:
        prompt: User's original prompt
        is_template_request: Result of is_template_request(prompt)
        user_name: Name for [Your Name] placeholders (template branch only)

    Returns:
        Complete HTML document
    """
    if not is_template_request:
        response_id = select_direct_response_id(prompt)
        logfire.info("Selected direct fallback response", response_id=response_id or "generic")
        if response_id is None:
            return render_generic_direct_response(prompt)
        return get_direct_response(response_id).html_body

    template_id = select_template_id(prompt)
    logfire.info("Selected fallback template", template_id=template_id or "generic")
    if template_id is None:
        return render_generic_template(prompt, user_name)
    return render_template(get_template(template_id), user_name)
