"""
Direct Fallback Answers

Advisory documents returned when the provider fails on a direct question
(not a template request). Matched in order; unmatched prompts get a generic
advisory document.
"""

import html
from typing import Optional, Tuple

from generation.models import DirectResponse

DISTRIBUTION = DirectResponse(
    id="distribution",
    keywords=("distribut", "belongings", "possessions"),
    html_body="""<h1>Distribution of Personal Belongings</h1>
<p>It's advisable to be specific about how you want your personal belongings distributed. Consider creating an inventory of valuable or sentimental items and clearly stating who should receive each item.</p>
<p>For items not specifically mentioned, you can designate a trusted person to make decisions about distribution, or you can specify that remaining items should be sold, with proceeds distributed according to your will.</p>
<p>Remember that verbal promises are not legally binding. Important bequests should be documented in your will or as an addendum to your will, depending on your jurisdiction's laws.</p>
<h3>Legal Considerations</h3>
<p>In most jurisdictions, personal property memoranda or letters of instruction can be referenced in your will but may not be legally binding on their own. Consult with an estate attorney about the proper way to document your wishes for personal belongings in your location.</p>""",
)

GOODBYE_LETTER = DirectResponse(
    id="goodbye-letter",
    keywords=("goodbye", "farewell", "letter"),
    html_body="""<h1>Writing a Meaningful Goodbye Letter</h1>
<p>A final letter to loved ones can provide comfort and closure. Consider including these elements:</p>
<ul>
  <li><strong>Personal reflections</strong> on what your relationships have meant to you</li>
  <li><strong>Life lessons or wisdom</strong> you want to share</li>
  <li><strong>Hopes</strong> for their future</li>
  <li><strong>Requests or wishes</strong> that are important to you</li>
  <li><strong>Expressions of love</strong> and what you want them to remember</li>
</ul>
<p>Write in your authentic voice and don't feel pressured to resolve every issue or say everything perfectly. Focus on the messages that will provide the most meaning and comfort to your recipients.</p>
<p>Consider writing individual letters to different people, as this allows for more personal and specific messages tailored to each relationship.</p>""",
)

DIGITAL_ASSETS = DirectResponse(
    id="digital-assets",
    keywords=("digital", "password", "account"),
    html_body="""<h1>Managing Digital Assets and Passwords</h1>
<p>Digital assets and accounts require special planning, as executors may face legal and technical barriers to access. Consider these approaches:</p>
<ul>
  <li><strong>Create a secure inventory</strong> of all digital accounts, assets, and passwords</li>
  <li><strong>Use a password manager</strong> and share master access information with a trusted person</li>
  <li><strong>Explore built-in legacy tools</strong> like Google's Inactive Account Manager or Facebook's Legacy Contact</li>
  <li><strong>Include digital assets in your will</strong> but keep passwords in a separate, secure document</li>
  <li><strong>Specify your wishes</strong> for each account (preserve, memorialize, or delete)</li>
</ul>
<p>Be aware that terms of service for many online platforms prohibit account transfer, so your executor may need to work with each company individually using your death certificate.</p>
<p>Consider consulting with an attorney who specializes in digital assets to ensure your plan complies with relevant laws like the Revised Uniform Fiduciary Access to Digital Assets Act (if applicable in your jurisdiction).</p>""",
)

DIRECT_RESPONSES: Tuple[DirectResponse, ...] = (
    DISTRIBUTION,
    GOODBYE_LETTER,
    DIGITAL_ASSETS,
)

GENERIC_DIRECT_RESPONSE = """<h1>Response to: {prompt}</h1>
<p>When preparing end-of-life documents and instructions, it's important to be clear, specific, and comprehensive. Consider consulting with qualified professionals such as estate attorneys, financial advisors, or grief counselors depending on the specific aspects of your planning.</p>
<p>Documents should be stored securely but accessibly by your executor or trusted individuals. Many people keep copies with their attorney, in a fireproof safe, and with a trusted family member.</p>
<p>Regularly review and update your instructions as your circumstances, relationships, and wishes change over time.</p>"""


def get_direct_response(response_id: str) -> Optional[DirectResponse]:
    """Look up a hand-written answer by id."""
    for response in DIRECT_RESPONSES:
        if response.id == response_id:
            return response
    return None


def render_generic_direct_response(prompt: str) -> str:
    return GENERIC_DIRECT_RESPONSE.format(prompt=html.escape(prompt, quote=False))
