"""
Editor Templates

Starter documents the editor offers in its template picker. These are
separate from the fallback catalog: they are chosen by the user, never by
keyword matching. The first entry is the editor's default document.
"""

from typing import Optional, Tuple

from generation.cleaning import substitute_user_name
from generation.models import EditorTemplate

GOODBYE_NOTE = EditorTemplate(
    value="goodbye-note",
    label="Goodbye Note",
    description="A heartfelt goodbye message for loved ones",
    content="""<h1>Goodbye Note</h1>
<p>Dear family and friends,</p>
<p>&nbsp;</p>
<p>If you're reading this, it means I'm no longer with you. I wanted to take this opportunity to share some final thoughts and wishes.</p>
<p>First and foremost, thank you for being part of my life journey. Each of you has contributed to making my life meaningful and full of joy.</p>
<p>Please remember me not with sadness, but with the happy memories we've shared together. Celebrate the life we shared, the laughter we enjoyed, and the love that connected us.</p>
<p>Know that you made my life better simply by being in it. I am grateful for every moment we shared.</p>
<p>&nbsp;</p>
<p>All my love,</p>
<p>[Your Name]</p>
<p>❤️</p>""",
)

FINAL_WISHES = EditorTemplate(
    value="final-wishes",
    label="Final Wishes",
    description="Outline your funeral preferences and final messages",
    content="""<h1>My Final Wishes</h1>
<p>Dear family,</p>
<p>&nbsp;</p>
<p>I've created this document to outline my final wishes and arrangements. I hope this guidance provides clarity and reduces any burden during a difficult time.</p>
<h2>Funeral & Memorial Preferences</h2>
<ul>
  <li>I would like a [simple ceremony/celebration of life/private family gathering]</li>
  <li>Please play the following music: [music selections]</li>
  <li>I would prefer [burial/cremation/donation to science]</li>
</ul>
<h2>Important Messages</h2>
<p>To my family: Thank you for your unconditional love and support throughout my life.</p>
<p>To my friends: The memories we created together have been the greatest gift.</p>
<p>&nbsp;</p>
<p>With love and gratitude,</p>
<p>[Your Name]</p>""",
)

DIGITAL_LEGACY = EditorTemplate(
    value="digital-legacy",
    label="Digital Legacy",
    description="Instructions for handling your digital accounts and assets",
    content="""<h1>My Digital Legacy</h1>
<p>Dear trusted contact,</p>
<p>&nbsp;</p>
<p>This document contains information about my digital accounts and assets. Please use it to manage my online presence after I'm gone.</p>
<h2>Important Accounts</h2>
<ul>
  <li><strong>Email:</strong> Access information stored in my password manager</li>
  <li><strong>Social Media:</strong> Please [delete/memorialize] my accounts</li>
  <li><strong>Photo Storage:</strong> Please save and share with family</li>
</ul>
<h2>Digital Assets</h2>
<ul>
  <li><strong>Cryptocurrency:</strong> Recovery phrases stored in [location]</li>
  <li><strong>Digital Purchases:</strong> Some digital content may be transferable</li>
</ul>
<p>&nbsp;</p>
<p>Thank you for handling this important responsibility.</p>
<p>[Your Name]</p>""",
)

PERSONAL_INVENTORY = EditorTemplate(
    value="personal-inventory",
    label="Personal Inventory",
    description="Catalog of personal belongings and distribution wishes",
    content="""<h1>Personal Inventory & Wishes</h1>
<p>This document outlines my personal belongings and how I'd like them distributed.</p>
<p>&nbsp;</p>
<h2>Special Items</h2>
<ul>
  <li><strong>[Item]:</strong> I'd like this to go to [person]</li>
  <li><strong>[Collection]:</strong> Please give to [person] who will appreciate it</li>
  <li><strong>[Heirloom]:</strong> This should stay in the family with [person]</li>
</ul>
<h2>General Belongings</h2>
<p>For items not specifically mentioned, please [distribute among family/donate to charity/sell].</p>
<h2>Important Documents</h2>
<p>Legal documents, deeds, and certificates are located [location].</p>
<p>&nbsp;</p>
<p>Thank you for respecting my wishes.</p>
<p>[Your Name]</p>""",
)

LEGACY_LETTER = EditorTemplate(
    value="legacy-letter",
    label="Legacy Letter",
    description="Share your values, wisdom, and hopes for future generations",
    content="""<h1>My Legacy Letter</h1>
<p>Dear loved ones,</p>
<p>&nbsp;</p>
<p>As I reflect on my life, I want to share some thoughts on what has mattered most to me and the values I hope to pass on.</p>
<h2>Life Lessons I've Learned</h2>
<ul>
  <li>Cherish your relationships; they are life's greatest treasure</li>
  <li>Be kind, even when it's difficult</li>
  <li>Find joy in small moments</li>
</ul>
<h2>My Hopes for You</h2>
<p>I hope you'll live fully, love deeply, and find purpose in whatever path you choose. Remember that you carry my love with you always.</p>
<p>&nbsp;</p>
<p>With eternal love,</p>
<p>[Your Name]</p>""",
)

EDITOR_TEMPLATES: Tuple[EditorTemplate, ...] = (
    GOODBYE_NOTE,
    FINAL_WISHES,
    DIGITAL_LEGACY,
    PERSONAL_INVENTORY,
    LEGACY_LETTER,
)


def list_editor_templates() -> Tuple[EditorTemplate, ...]:
    return EDITOR_TEMPLATES


def get_default_editor_template() -> EditorTemplate:
    """The document a new editor session starts with."""
    return EDITOR_TEMPLATES[0]


def find_editor_template(value: str) -> Optional[EditorTemplate]:
    """Look up an editor template by its picker value."""
    for template in EDITOR_TEMPLATES:
        if template.value == value:
            return template
    return None


def render_editor_template(template: EditorTemplate, user_name: Optional[str] = None) -> str:
    """Fill [Your Name]; other bracketed prompts are left for the user."""
    return substitute_user_name(template.content, user_name)
