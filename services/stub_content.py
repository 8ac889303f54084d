"""
Simulated content for the draft and extraction endpoints.

Neither endpoint calls an external service; both return fixed HTML built
around the request input.
"""

import html
from typing import Optional

from generation.cleaning import substitute_user_name

DRAFT_TEMPLATE = """<h1>My Final Message</h1>
<p>Dear loved ones,</p>
<p>{prompt}</p>
<p>I want you to know that you've made my life extraordinary. The memories we've created together are the greatest treasure I could ever hope for. Please take care of each other and remember to live fully, love deeply, and laugh often.</p>
<p>With all my love,</p>
<p>[Your Name]</p>"""

EXTRACTED_TEMPLATE = """<h1>Content from {url}</h1>
<p>This is simulated content that would be extracted from the provided URL.</p>
<h3>Sample Article Title</h3>
<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit. Nullam eget magna auctor, feugiat nisl eget, ultricies nunc. Nulla facilisi. Sed euismod, nunc ac ultricies tincidunt, nisl nunc tincidunt nunc, eget aliquam nunc nunc eget magna.</p>
<h3>Important Points</h3>
<ul>
  <li>Point one about the article</li>
  <li>Point two about the article</li>
  <li>Point three about the article</li>
</ul>
<p>Thank you for reading.</p>"""


def build_draft(prompt: str, user_name: Optional[str] = None) -> str:
    """Wrap the prompt in a fixed farewell letter."""
    body = DRAFT_TEMPLATE.format(prompt=html.escape(prompt.strip(), quote=False))
    return substitute_user_name(body, user_name)


def build_extracted_content(url: str) -> str:
    """Return placeholder extraction output for a URL. Nothing is fetched."""
    return EXTRACTED_TEMPLATE.format(url=html.escape(url.strip(), quote=False))
