"""
Provider Response Cleaning

Ordered pipeline of pure string transforms applied to live provider output.
Each step is idempotent on its own output; order matters across steps
(wrapper tags must be gone before headings are normalized, headings must be
normalized before the title-line check).
"""

import html
import re
from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup, Comment

PLACEHOLDER_NAME = "[Your Name]"

_CODE_FENCE = re.compile(r"```(?:html|markdown|md)?")
_DOCUMENT_WRAPPER = re.compile(r"</?(?:html|head|body)\b[^>]*>|<!DOCTYPE[^>]*>", re.IGNORECASE)
_PREAMBLE = re.compile(
    r"^(?:(?:Response|Content|Here(?:'s| is)(?: the)?(?: response| content)?|Request Summary):\s*)+",
    re.IGNORECASE,
)
_H1_OPEN = re.compile(r"<h1\b", re.IGNORECASE)
_H2 = re.compile(r"<h2\b[^>]*>(.*?)</h2>", re.IGNORECASE | re.DOTALL)
_H3 = re.compile(r"<h3\b[^>]*>(.*?)</h3>", re.IGNORECASE | re.DOTALL)
_TITLE_LINE = re.compile(
    r"^(?:<p>(?P<para>\w[^<>\r\n]{4,59})</p>|(?P<bare>\w[^<>\r\n]{4,59})(?=<|\r?\n|$))(?:\r?\n)?"
)
_BOLD_SECTION_TITLE = re.compile(
    r"<p><strong>([^<:]{10,50}"
    r"(?:Instructions|Overview|Guide|Information|Wishes|Note|Affairs|Plan|Arrangements))"
    r"</strong></p>",
    re.IGNORECASE,
)
_BLANK_LINES = re.compile(r"(?:\r?\n){3,}")
_UNSAFE_HINT = re.compile(r"script|style|<!--", re.IGNORECASE)
_UNSAFE_ELEMENTS = ["script", "style"]
_TAG_NAME = re.compile(r"[a-z][a-z0-9:-]*")
_PLACEHOLDER = re.compile(re.escape(PLACEHOLDER_NAME), re.IGNORECASE)


def strip_code_fences(content: str) -> str:
    """Remove ``` markers along with an html/markdown/md language hint."""
    return _CODE_FENCE.sub("", content)


def strip_document_wrappers(content: str) -> str:
    """Remove <html>, <head>, <body> tags and doctype declarations."""
    return _DOCUMENT_WRAPPER.sub("", content)


def strip_preamble(content: str) -> str:
    """
    Remove leading narration such as "Response:" or "Here's the content:".

    Stacked narration ("Response: Content: ...") goes in a single pass.
    Leading whitespace left behind by earlier steps is dropped first.
    """
    return _PREAMBLE.sub("", content.lstrip(), count=1)


def has_h1(content: str) -> bool:
    return bool(_H1_OPEN.search(content))


def demote_h2_headings(content: str) -> str:
    """Turn every <h2> into <h1>; the editor only knows one title level."""
    return _H2.sub(r"<h1>\1</h1>", content)


def promote_first_h3(content: str) -> str:
    """
    Synthesize an <h1> from the first <h3> when no <h1> exists.

    The text before the first colon becomes the title; the <h3> stays.

    Example:
        >>> promote_first_h3("<h3>Funeral Planning: steps</h3>")
        '<h1>Funeral Planning</h1>\\n<h3>Funeral Planning: steps</h3>'
    """
    if has_h1(content):
        return content

    match = _H3.search(content)
    if not match:
        return content

    title = match.group(1).split(":", 1)[0].strip()
    if not title:
        return content

    return f"<h1>{title}</h1>\n{content}"


def wrap_title_line(content: str) -> str:
    """
    Wrap a short untagged first line in <h1> when no <h1> exists.

    The line must be 5-60 characters, start with a word character and
    contain no markup; a surrounding <p> is replaced.
    """
    if has_h1(content):
        return content

    def _replace(match: "re.Match[str]") -> str:
        title = match.group("para") or match.group("bare")
        return f"<h1>{title}</h1>\n"

    return _TITLE_LINE.sub(_replace, content, count=1)


def promote_bold_section_titles(content: str) -> str:
    """Turn bold-only paragraphs that read like section titles into <h1>."""
    return _BOLD_SECTION_TITLE.sub(r"<h1>\1</h1>", content)


def collapse_blank_lines(content: str) -> str:
    """Collapse runs of 3+ newlines to a single blank line."""
    return _BLANK_LINES.sub("\n\n", content)


def strip_unsafe_markup(content: str) -> str:
    """
    Remove <script> and <style> elements and HTML comments.

    The fragment is parsed with BeautifulSoup, so split or nested markup
    cannot reassemble into a live element. Tags with malformed names
    (e.g. "scr<script") are unwrapped, keeping their text. The fragment is
    re-serialized only when something was removed; clean input comes back
    unchanged.
    """
    if not _UNSAFE_HINT.search(content):
        return content

    soup = BeautifulSoup(content, "html.parser")
    removed = False

    for element in soup(_UNSAFE_ELEMENTS):
        element.decompose()
        removed = True

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
        removed = True

    for tag in soup.find_all(lambda tag: not _TAG_NAME.fullmatch(tag.name)):
        tag.unwrap()
        removed = True

    return str(soup) if removed else content


def trim_whitespace(content: str) -> str:
    return content.strip()


CleaningStep = Callable[[str], str]

CLEANING_STEPS: Tuple[Tuple[str, CleaningStep], ...] = (
    ("strip_code_fences", strip_code_fences),
    ("strip_document_wrappers", strip_document_wrappers),
    ("strip_preamble", strip_preamble),
    ("demote_h2_headings", demote_h2_headings),
    ("promote_first_h3", promote_first_h3),
    ("wrap_title_line", wrap_title_line),
    ("promote_bold_section_titles", promote_bold_section_titles),
    ("collapse_blank_lines", collapse_blank_lines),
    ("strip_unsafe_markup", strip_unsafe_markup),
    ("trim_whitespace", trim_whitespace),
)


def clean_response(content: str, steps: Optional[List[Tuple[str, CleaningStep]]] = None) -> str:
    """
    Run provider output through the cleaning pipeline.

    Args:
        content: Raw completion text
        steps: Override the default step list (testing only)

    Returns:
        Cleaned HTML fragment (may be empty)
    """
    for _name, step in steps or CLEANING_STEPS:
        content = step(content)
    return content


def substitute_user_name(content: str, user_name: Optional[str]) -> str:
    """
    Replace every [Your Name] (any case) with the escaped user name.

    Content is returned unchanged when no name is available.
    """
    if not user_name:
        return content

    safe_name = html.escape(user_name, quote=False)
    return _PLACEHOLDER.sub(lambda _match: safe_name, content)


def ensure_html(content: str, heading: str) -> str:
    """
    Wrap content that does not start with a tag in a minimal <h1>/<p> shell.

    Args:
        content: Cleaned content
        heading: Plain-text heading (escaped here)
    """
    if content.lstrip().startswith("<"):
        return content

    return f"<h1>{html.escape(heading, quote=False)}</h1><p>{content}</p>"
