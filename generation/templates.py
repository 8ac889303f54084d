"""
Fallback Template Catalog

Hand-authored fill-in-the-blank documents served when the provider is
unavailable and the user asked for a template. Entries are matched in
declaration order; the first entry whose keywords appear in the prompt wins.
"""

import html
from typing import Optional, Tuple

from generation.cleaning import PLACEHOLDER_NAME, substitute_user_name
from generation.models import TemplateEntry

GOODBYE_NOTE = TemplateEntry(
    id="goodbye-note",
    title="My Farewell Note",
    keywords=("goodbye", "farewell"),
    html_body="""<h1>My Farewell Note</h1>
<p>Dear loved ones,</p>
<p>If you're reading this, I've moved on from this world. Please know that I lived a life filled with joy, purpose, and love, largely because of the wonderful people like you who were part of my journey.</p>
<p>I have no regrets and hope you'll celebrate the good times we shared rather than mourn my passing. Remember me through the stories we created together, the lessons we learned, and the laughter we shared.</p>
<p>To my family: Your love has been my greatest treasure. Continue to support each other and find happiness in the small moments.</p>
<p>To my friends: Thank you for the adventures, the deep conversations, and for accepting me exactly as I am.</p>
<p>Remember that death is just another part of life's journey. I'm at peace, and I hope you will find peace too.</p>
<p>With all my love and gratitude,</p>
<p>[Your Name]</p>""",
)

DIGITAL_ACCOUNTS = TemplateEntry(
    id="digital-accounts",
    title="My Digital Accounts & Passwords",
    keywords=("password", "account", "digital"),
    html_body="""<h1>My Digital Accounts & Passwords</h1>
<p>This document contains sensitive information about my digital accounts. Please protect this information and only share it with those who need it to properly manage my affairs.</p>

<h3>Email Accounts</h3>
<ul>
  <li><strong>Personal Email:</strong> [email@example.com] - Password: [password] - This is my primary email account for personal correspondence.</li>
  <li><strong>Work Email:</strong> [work@example.com] - Password: [password] - Please notify my employer of my passing.</li>
</ul>

<h3>Financial Accounts</h3>
<ul>
  <li><strong>Online Banking:</strong> [bank name] - Username: [username] - Password: [password] - You'll need my phone for 2FA.</li>
  <li><strong>Investment Account:</strong> [institution] - Access details in my secure password manager.</li>
  <li><strong>Password Manager:</strong> [LastPass/1Password/etc.] - Master password: [master password] - This contains passwords to most of my other accounts.</li>
</ul>

<h3>Social Media & Other Accounts</h3>
<ul>
  <li><strong>Facebook:</strong> Username: [username] - Password: [password] - Please post a final message and either memorialize or delete the account.</li>
  <li><strong>Google/YouTube:</strong> Email: [email] - Password: [password] - Contains my photos, documents, and videos.</li>
  <li><strong>Subscription Services:</strong> See my password manager for Netflix, Spotify, etc. Please cancel these services.</li>
</ul>

<p>The executor of my estate should consult with my attorney before accessing financial accounts. For additional assistance with digital accounts, contact [trusted tech-savvy person] at [phone/email].</p>
<p>Prepared by: [Your Name]</p>""",
)

PET_CARE = TemplateEntry(
    id="pet-care",
    title="Care Instructions for My Beloved Pets",
    keywords=("pet", "animal", "dog", "cat"),
    html_body="""<h1>Care Instructions for My Beloved Pets</h1>

<h3>About [Pet Name] (Dog/Cat/Type of Pet)</h3>
<p><strong>Age:</strong> [age] years old</p>
<p><strong>Breed/Description:</strong> [description]</p>
<p><strong>Temperament:</strong> [friendly/shy/energetic/etc.]</p>

<h3>Daily Care</h3>
<ul>
  <li><strong>Food:</strong> [Brand name] [amount] [frequency]. Stored in [location]. [Special instructions, allergies, etc.]</li>
  <li><strong>Medication:</strong> [medication name] [dosage] [frequency] for [condition]. Stored in [location].</li>
  <li><strong>Exercise:</strong> [walks/playtime/requirements]</li>
  <li><strong>Behavior notes:</strong> [likes/dislikes/quirks/training commands]</li>
</ul>

<h3>Veterinary Care</h3>
<p><strong>Veterinarian:</strong> Dr. [Name] at [Clinic Name]</p>
<p><strong>Address:</strong> [address]</p>
<p><strong>Phone:</strong> [phone number]</p>
<p><strong>Medical history:</strong> Records located in [location/file]</p>

<h3>Future Care Arrangements</h3>
<p>I would like [designated person] to adopt and care for my pet(s). I have discussed this with them, and they have agreed to this responsibility.</p>
<p>If that arrangement isn't possible, please contact [alternative person/rescue organization] at [contact information].</p>
<p>I have set aside [amount] in my will/trust for the ongoing care of my pet(s). Contact [attorney/executor] regarding these funds.</p>

<p>Thank you for ensuring my beloved companions continue to receive the love and care they deserve.</p>
<p>Prepared by: [Your Name]</p>""",
)

FINANCIAL = TemplateEntry(
    id="financial",
    title="My Financial Information & Instructions",
    keywords=("financial", "money", "bank", "asset"),
    html_body="""<h1>My Financial Information & Instructions</h1>

<h3>Banking Accounts</h3>
<ul>
  <li><strong>Primary Checking:</strong> [Bank Name], Account #[XXXX] - For daily expenses and bill payments</li>
  <li><strong>Savings Account:</strong> [Bank Name], Account #[XXXX] - Emergency fund and short-term savings</li>
  <li><strong>Additional Account:</strong> [Bank Name], Account #[XXXX] - [Purpose of account]</li>
</ul>

<h3>Credit Cards & Debts</h3>
<ul>
  <li><strong>[Card Provider]:</strong> Account #[XXXX] - Automatic payments set up from checking account</li>
  <li><strong>[Card Provider]:</strong> Account #[XXXX] - Please pay off and close this account</li>
  <li><strong>Mortgage:</strong> [Lender], Account #[XXXX] - Monthly payment: $[Amount] - [Details about the property]</li>
  <li><strong>Auto Loan:</strong> [Lender], Account #[XXXX] - For [vehicle description]</li>
</ul>

<h3>Investments & Retirement</h3>
<ul>
  <li><strong>Brokerage Account:</strong> [Firm], Account #[XXXX] - Contact my financial advisor: [Name] at [contact info]</li>
  <li><strong>401(k):</strong> [Provider], Account #[XXXX] - Beneficiary designation on file</li>
  <li><strong>IRA:</strong> [Provider], Account #[XXXX] - [Traditional/Roth] - Beneficiary designation on file</li>
</ul>

<h3>Insurance Policies</h3>
<ul>
  <li><strong>Life Insurance:</strong> [Company], Policy #[XXXX] - Death benefit: $[Amount] - Beneficiary: [Name(s)]</li>
  <li><strong>Health Insurance:</strong> [Provider], Policy #[XXXX] - Cancel after my passing</li>
  <li><strong>Home/Auto Insurance:</strong> [Provider], Policy #[XXXX] - Contact agent: [Name] at [contact info]</li>
</ul>

<h3>Important Contacts</h3>
<ul>
  <li><strong>Financial Advisor:</strong> [Name], [Company], [Phone], [Email]</li>
  <li><strong>Accountant:</strong> [Name], [Company], [Phone], [Email]</li>
  <li><strong>Attorney:</strong> [Name], [Firm], [Phone], [Email]</li>
</ul>

<p>My will, trust documents, property deeds, and other important papers can be found [location]. The executor of my estate is [Name], who can be reached at [contact information].</p>

<p>Please ensure all final expenses are paid from my estate before distributing assets according to my will.</p>
<p>Prepared by: [Your Name]</p>""",
)

SOCIAL_MEDIA = TemplateEntry(
    id="social-media",
    title="My Social Media Accounts & Digital Presence",
    keywords=("social media", "facebook", "twitter", "instagram"),
    html_body="""<h1>My Social Media Accounts & Digital Presence</h1>
<p>Here are my instructions for handling my social media accounts and online presence after I'm gone:</p>

<h3>Major Social Media Accounts</h3>
<ul>
  <li><strong>Facebook:</strong> I would like my account to be [memorialized/deleted]. If memorialized, please post a final message announcing my passing. If deleted, please download any photos or posts that might be meaningful to family members first.</li>
  <li><strong>Instagram:</strong> Please [keep as a memorial/delete] my account. Important photos should be saved before deletion.</li>
  <li><strong>Twitter/X:</strong> Please delete this account after downloading any meaningful content.</li>
  <li><strong>LinkedIn:</strong> Please have someone post a final update about my passing and then close the account.</li>
  <li><strong>YouTube:</strong> [Keep videos public/Set videos to private/Delete channel]. My content there is [personal/professional/creative].</li>
</ul>

<h3>Other Digital Accounts</h3>
<ul>
  <li><strong>Google/Gmail:</strong> Use Google's Inactive Account Manager or contact support with my death certificate to access important emails and documents.</li>
  <li><strong>Apple/iCloud:</strong> Contact Apple Support with my death certificate to access photos and other important data.</li>
  <li><strong>Dropbox/Cloud Storage:</strong> Contains important documents at [folder path]. Please download before closing.</li>
</ul>

<h3>Digital Subscriptions</h3>
<ul>
  <li><strong>Streaming Services:</strong> (Netflix, Spotify, etc.) Please cancel all subscriptions.</li>
  <li><strong>Recurring Memberships:</strong> Cancel any memberships or subscriptions to avoid ongoing charges.</li>
</ul>

<h3>Personal Website/Blog</h3>
<p>My website [URL] is hosted with [hosting provider]. I would like it to [remain online as a memorial/be archived and then shut down/be deleted]. The renewal fees are paid until [date].</p>

<h3>Digital Legacy Contact</h3>
<p>I've designated [Name] as my digital executor. They have [some/all] of my passwords and understand my wishes for my digital presence.</p>

<p>For accounts not listed here, please use your best judgment to either memorialize or delete them as appropriate, always prioritizing privacy and dignity.</p>
<p>Prepared by: [Your Name]</p>""",
)

BELONGINGS = TemplateEntry(
    id="belongings",
    title="Instructions for My Personal Belongings",
    keywords=("belongings", "possessions", "stuff", "property"),
    html_body="""<h1>Instructions for My Personal Belongings</h1>
<p>This document provides guidance on how I'd like my personal belongings handled after I'm gone. While my will covers legal aspects of asset distribution, these notes offer more specific instructions and context.</p>

<h3>Sentimental Items</h3>
<ul>
  <li><strong>Family Heirlooms:</strong> The antique [item] that belonged to my [relative] should go to [person], as they will appreciate its history and significance.</li>
  <li><strong>Jewelry:</strong> My [specific pieces] should go to [specific people]. The remainder can be divided among family members or sold as needed.</li>
  <li><strong>Photographs:</strong> Digital photos are backed up to [cloud service]. Physical photo albums should be shared among family members, with [person] coordinating the division.</li>
</ul>

<h3>Household Items</h3>
<ul>
  <li><strong>Furniture:</strong> Family members should take pieces they want for their homes. Remaining items can be donated to [preferred charity/organization].</li>
  <li><strong>Kitchen Items:</strong> [Person] has expressed interest in my [specific cookware/dishes]. Other items can be donated or distributed as needed.</li>
  <li><strong>Appliances:</strong> These can be sold or given to those who need them.</li>
</ul>

<h3>Collections & Valuables</h3>
<ul>
  <li><strong>Book Collection:</strong> [Person] should have first choice of books. Consider donating remaining books to [local library/school/organization].</li>
  <li><strong>Art Collection:</strong> The pieces by [artist] should go to [person]. Other pieces can be distributed among those who appreciate them or sold.</li>
  <li><strong>Collectibles:</strong> My collection of [items] should be [kept together/divided/sold by someone knowledgeable about their value].</li>
</ul>

<h3>Electronics & Digital Assets</h3>
<ul>
  <li><strong>Computer/Phone:</strong> Please ensure these are securely wiped of personal data after transferring important files to [person/storage location].</li>
  <li><strong>Digital Media:</strong> My purchased music, movies, and books may not be transferable due to licensing. Check account terms for each service.</li>
</ul>

<h3>Vehicles</h3>
<ul>
  <li><strong>Car/Motorcycle:</strong> My [vehicle] should go to [person] or be sold, with proceeds added to my estate.</li>
</ul>

<h3>Items for Donation</h3>
<p>I would like my [clothing/specific items] to be donated to [specific organization] that supports [cause I care about].</p>

<h3>Disposal Requests</h3>
<p>Please discreetly dispose of [any items in specific location] without examining them.</p>

<p>For items not specifically mentioned, please distribute them fairly among family members who would value them, with preference given to those who express a meaningful connection to particular items.</p>
<p>Prepared by: [Your Name]</p>""",
)

MEDICAL = TemplateEntry(
    id="medical",
    title="My Medical Care Instructions",
    keywords=("medical", "health", "care", "treatment"),
    html_body="""<h1>My Medical Care Instructions</h1>

<h3>Medical Information</h3>
<p><strong>Primary Physician:</strong> Dr. [Name] at [Practice/Hospital]</p>
<p><strong>Contact:</strong> [Phone Number] / [Email]</p>
<p><strong>Medical Conditions:</strong> [List your ongoing medical conditions]</p>
<p><strong>Allergies:</strong> [List medications, foods, or substances you're allergic to]</p>
<p><strong>Blood Type:</strong> [Your blood type]</p>
<p><strong>Medications:</strong> [Current medications, dosages, and schedules]</p>

<h3>Advance Care Directives</h3>
<p>My advance directive documents are located [where documents are stored]. The person I've designated to make decisions on my behalf is:</p>
<p><strong>Healthcare Proxy:</strong> [Name], [Relationship]</p>
<p><strong>Contact:</strong> [Phone Number] / [Email]</p>

<h3>End-of-Life Care Preferences</h3>
<ul>
  <li><strong>Life Support:</strong> I [do/do not] wish to receive life-sustaining treatment if I have a terminal condition or am in a persistent vegetative state.</li>
  <li><strong>Resuscitation:</strong> I [do/do not] wish to be resuscitated if my heart stops.</li>
  <li><strong>Artificial Nutrition/Hydration:</strong> I [do/do not] want feeding tubes or IV hydration if I cannot eat or drink on my own.</li>
  <li><strong>Pain Management:</strong> I wish to receive adequate pain management, even if it may hasten my death.</li>
</ul>

<h3>Organ and Tissue Donation</h3>
<p>I [am/am not] registered as an organ donor. My wishes regarding organ and tissue donation are: [specific wishes]</p>

<h3>Important Medical Records</h3>
<p>My complete medical records can be accessed through [portal/healthcare system] or by contacting my primary physician.</p>
<p>Access information: [username/account number] - My executor has access to the password.</p>

<p>This document should be shared with my healthcare proxy, family members, and medical providers. Please respect my wishes as outlined here and in my formal advance directive documents.</p>

<p>Created by: [Your Name]</p>""",
)

FUNERAL = TemplateEntry(
    id="funeral",
    title="My Funeral and Memorial Wishes",
    keywords=("funeral", "memorial", "burial", "ceremony"),
    html_body="""<h1>My Funeral and Memorial Wishes</h1>

<h3>General Preferences</h3>
<p>I would like my final arrangements to be [religious/secular/spiritual] in nature and to reflect my values of [personal values].</p>
<p>My preference is for [burial/cremation/green burial/donation to medical science].</p>

<h3>Service Details</h3>
<ul>
  <li><strong>Type of Service:</strong> [funeral/memorial/celebration of life/no service]</li>
  <li><strong>Location:</strong> [preferred venue]</li>
  <li><strong>Officiant:</strong> [name or type of officiant]</li>
  <li><strong>Speakers:</strong> I would like [names] to speak if they are willing</li>
  <li><strong>Music:</strong> [specific songs or types of music]</li>
  <li><strong>Readings/Poems:</strong> [specific texts you'd like included]</li>
  <li><strong>Flowers:</strong> [preferences about flowers or alternatives like donations]</li>
</ul>

<h3>Burial/Cremation Instructions</h3>
<p><strong>If Burial:</strong> I would like to be buried at [cemetery/location] in [type of casket]. I [do/do not] want a viewing or open casket.</p>
<p><strong>If Cremation:</strong> I would like my ashes to be [scattered at/kept in/divided among] [location/container/people].</p>

<h3>Other Considerations</h3>
<ul>
  <li><strong>Attire:</strong> I would prefer attendees wear [formal black/colorful clothes/casual attire]</li>
  <li><strong>Memorial Donations:</strong> In lieu of flowers, I request donations to [charity/organization]</li>
  <li><strong>Reception:</strong> [wishes for any gathering after the service]</li>
  <li><strong>Obituary:</strong> [preferences for what should be included or excluded]</li>
</ul>

<p>Written by: [Your Name]</p>""",
)

LEGAL = TemplateEntry(
    id="legal",
    title="My Legal Affairs Overview",
    keywords=("legal", "will", "testament", "executor"),
    html_body="""<h1>My Legal Affairs Overview</h1>

<h3>Last Will and Testament</h3>
<p>My most recent will is dated [date] and is located [physical location and/or digital location].</p>
<p><strong>Executor:</strong> [Name], [Relationship]</p>
<p><strong>Contact:</strong> [Phone Number] / [Email]</p>
<p><strong>Alternate Executor:</strong> [Name], [Relationship]</p>
<p>My will outlines the distribution of my assets, guardianship for minor children, and other final wishes.</p>

<h3>Trust Information</h3>
<p>I [have/have not] established trusts as part of my estate plan.</p>
<ul>
  <li><strong>[Trust Name]:</strong> Established on [date] for the benefit of [beneficiaries]</li>
  <li><strong>Trustee:</strong> [Name], [Contact Information]</li>
  <li><strong>Purpose:</strong> [Brief description of trust purpose]</li>
</ul>

<h3>Power of Attorney Documents</h3>
<p><strong>Financial Power of Attorney:</strong> [Name], [Contact Information]</p>
<p><strong>Healthcare Power of Attorney:</strong> [Name], [Contact Information]</p>
<p>These documents are stored [location of documents] and have been provided to the named individuals.</p>

<h3>Important Legal Documents</h3>
<ul>
  <li><strong>Birth Certificate:</strong> Located [where stored]</li>
  <li><strong>Marriage Certificate:</strong> Located [where stored]</li>
  <li><strong>Deeds & Property Titles:</strong> Located [where stored]</li>
  <li><strong>Vehicle Titles:</strong> Located [where stored]</li>
</ul>

<p>Prepared by: [Your Name]</p>""",
)

# Declaration order is match order
TEMPLATE_CATALOG: Tuple[TemplateEntry, ...] = (
    GOODBYE_NOTE,
    DIGITAL_ACCOUNTS,
    PET_CARE,
    FINANCIAL,
    SOCIAL_MEDIA,
    BELONGINGS,
    MEDICAL,
    FUNERAL,
    LEGAL,
)

GENERIC_TEMPLATE = """<h1>Final Instructions: {prompt}</h1>
<p>Here are my thoughts and instructions regarding {prompt}:</p>
<p>I want to ensure that my wishes are clear and that this information helps guide those handling my affairs when I'm no longer able to do so.</p>
<p>Please consider these instructions carefully and consult with appropriate professionals if needed.</p>
<p>If you have any questions about these instructions, please contact [trusted person/executor] for clarification.</p>
<p>Sincerely,<br>{name}</p>"""


def list_templates() -> Tuple[TemplateEntry, ...]:
    """Return the catalog in match order."""
    return TEMPLATE_CATALOG


def get_template(template_id: str) -> Optional[TemplateEntry]:
    """Look up a catalog entry by id."""
    for entry in TEMPLATE_CATALOG:
        if entry.id == template_id:
            return entry
    return None


def render_template(entry: TemplateEntry, user_name: Optional[str] = None) -> str:
    """Fill the [Your Name] placeholder; left untouched without a name."""
    return substitute_user_name(entry.html_body, user_name)


def render_generic_template(prompt: str, user_name: Optional[str] = None) -> str:
    """
    Build the catch-all instructions document for an unmatched template request.

    Args:
        prompt: User's prompt, shown in the heading and first paragraph
        user_name: Signature name; [Your Name] when missing
    """
    body = GENERIC_TEMPLATE.format(
        prompt=html.escape(prompt, quote=False),
        name=PLACEHOLDER_NAME,
    )
    return substitute_user_name(body, user_name)
