"""
Built-in content for clubsite.

The default homepage sections keep the site presentable when the CMS has no
homepage for the tenant or cannot be reached.
"""

from typing import Any, Dict, List, Optional, Union
import copy
import logging

from ..models import FormDefinition, FormSubmissionResult, Homepage, Page, Post, PostList, Tenant
from .base import ContentSource


_MEDIA = "https://hebbkx1anhila5yf.public.blob.vercel-storage.com"
_READ_MORE = "Διαβάστε περισσότερα"
_LEARN_MORE = "Μάθετε Περισσότερα"


def default_homepage_sections(tenant_code: str = "kallitechnia") -> List[Dict[str, Any]]:
    """
    The fallback homepage blocks, namespaced for the given tenant.
    
    A fresh copy is returned on every call.
    """
    sections = copy.deepcopy(DEFAULT_HOMEPAGE_SECTIONS)
    for section in sections:
        section["blockType"] = f"{tenant_code}.{section['blockType']}"
    return sections


DEFAULT_HOMEPAGE_SECTIONS: List[Dict[str, Any]] = [
    {
        "blockType": "hero",
        "title": "Η Γυμναστική είναι δύναμη, χαρά, δημιουργία.",
        "subtitle": "Ανακαλύψτε τη μαγεία της γυμναστικής στον σύλλογό μας.",
        "backgroundImage": f"{_MEDIA}/4E61F67B-0337-4478-8A77-8114550D1239%20%281%29-hJCE20zQfhEIr0Zo1h6Mk1Zl1U47lS.jpeg",
        "ctaLabel": "Δες τα Τμήματά μας",
        "ctaUrl": "/programs",
    },
    {
        "blockType": "welcome",
        "image": f"{_MEDIA}/IMG_6321-EPivdvbOD9wX1IPMd2dA4e3aZlVtiE.jpeg",
        "title": "Καλώς ήρθατε στην Καλλιτεχνία!",
        "paragraphs": [
            "Είμαι η Ελένη Δαρδαμάνη, ιδρύτρια του συλλόγου μας. Με πάθος και αφοσίωση, δημιουργήσαμε έναν "
            "χώρο όπου κάθε παιδί μπορεί να εκφραστεί, να αναπτυχθεί και να λάμψει μέσα από τη γυμναστική.",
            "Η Καλλιτεχνία δεν είναι απλώς ένας σύλλογος - είναι μια οικογένεια που υποστηρίζει κάθε αθλητή "
            "στο ταξίδι του προς την αριστεία.",
            "Ελάτε να γνωρίσετε τον κόσμο της γυμναστικής μαζί μας!",
        ],
    },
    {
        "blockType": "programsGrid",
        "title": "Τα Τμήματά μας",
        "subtitle": "Προσφέρουμε προγράμματα για όλες τις ηλικίες και τα επίπεδα",
        "programs": [
            {
                "image": f"{_MEDIA}/IMG_6341-lYd2EHQV08gx6DxJdWhs3MXKIhJs8l.jpeg",
                "title": "Καλλιτεχνική",
                "description": "Αναπτύξτε δύναμη, ευλυγισία και χάρη μέσα από την καλλιτεχνική γυμναστική",
                "buttonLabel": _LEARN_MORE,
                "buttonUrl": "/programs#kallitexniki",
            },
            {
                "image": f"{_MEDIA}/IMG_6340%20%281%29-6T0A1KQPyDVi8Gr7ev3c5o4qGRiEuW.jpeg",
                "title": "Ρυθμική",
                "description": "Συνδυάστε χορό, μουσική και γυμναστική με όργανα όπως κορδέλα και μπάλα",
                "buttonLabel": _LEARN_MORE,
                "buttonUrl": "/programs#rythmiki",
            },
            {
                "image": f"{_MEDIA}/IMG_6320-Pb93nEudabKTDpdQwN5hOwhW0tlBou.jpeg",
                "title": "Προαγωνιστικά",
                "description": "Εντατική προετοιμασία για αθλητές που στοχεύουν σε αγώνες και διακρίσεις",
                "buttonLabel": _LEARN_MORE,
                "buttonUrl": "/programs#proagonistika",
            },
            {
                "image": f"{_MEDIA}/IMG_6323-LZ8D1nFb8q5atienRmdoRw14ABglt6.jpeg",
                "title": "Παιδικά",
                "description": "Εισαγωγή στη γυμναστική για παιδιά 4-7 ετών με παιχνίδι και διασκέδαση",
                "buttonLabel": _LEARN_MORE,
                "buttonUrl": "/programs#paidika",
            },
        ],
    },
    {
        "blockType": "imageGallery",
        "title": "Οι Στιγμές μας",
        "subtitle": "Ζήστε τη μαγεία των παραστάσεων και των προπονήσεών μας",
        "images": [
            {
                "image": f"{_MEDIA}/IMG_6064-dtKNW2y3nWi4kjmvriBpP8rrQpz5wE.jpeg",
                "title": "UV Παράσταση",
                "description": "Μοναδικές στιγμές στη σκηνή",
            },
            {
                "image": f"{_MEDIA}/IMG_6068%20%281%29-Vk2nWKd2qSVzRl2ldqmb919zO5TCf9.jpeg",
                "title": "Ομαδική Παράσταση",
                "description": "Συγχρονισμός και αρμονία",
            },
            {
                "image": f"{_MEDIA}/4E61F67B-0337-4478-8A77-8114550D1239%20%281%29-hJCE20zQfhEIr0Zo1h6Mk1Zl1U47lS.jpeg",
                "title": "Νεαρές Αθλήτριες",
                "description": "Το μέλλον της γυμναστικής",
            },
        ],
    },
    {
        "blockType": "newsGrid",
        "title": "Νέα & Ανακοινώσεις",
        "subtitle": "Μείνετε ενημερωμένοι με τα τελευταία μας νέα",
        "buttonLabel": "Όλα τα Νέα",
        "buttonUrl": "/news",
        "newsItems": [
            {
                "image": f"{_MEDIA}/IMG_6064-dtKNW2y3nWi4kjmvriBpP8rrQpz5wE.jpeg",
                "date": "15 Ιανουαρίου 2025",
                "title": "Επιτυχημένη Συμμετοχή στους Πανελλήνιους Αγώνες",
                "excerpt": "Οι αθλήτριές μας διακρίθηκαν στους πρόσφατους αγώνες, κερδίζοντας 5 μετάλλια "
                           "και κάνοντας υπερήφανο τον σύλλογο.",
                "readMoreLabel": _READ_MORE,
                "readMoreUrl": "/news",
            },
            {
                "image": f"{_MEDIA}/IMG_6341-lYd2EHQV08gx6DxJdWhs3MXKIhJs8l.jpeg",
                "date": "8 Ιανουαρίου 2025",
                "title": "Ανοίγουν Νέα Τμήματα για τη Σεζόν 2025",
                "excerpt": "Ξεκινούν οι εγγραφές για τα νέα τμήματα! Προσφέρουμε δωρεάν δοκιμαστικό μάθημα "
                           "για όλους τους νέους αθλητές.",
                "readMoreLabel": _READ_MORE,
                "readMoreUrl": "/news",
            },
            {
                "image": f"{_MEDIA}/IMG_6320-Pb93nEudabKTDpdQwN5hOwhW0tlBou.jpeg",
                "date": "20 Δεκεμβρίου 2024",
                "title": "Μαγική Ετήσια Παράσταση 2024",
                "excerpt": "Η ετήσια παράστασή μας ήταν μια απόλυτη επιτυχία! Ευχαριστούμε όλους όσους μας "
                           "τίμησαν με την παρουσία τους.",
                "readMoreLabel": _READ_MORE,
                "readMoreUrl": "/news",
            },
        ],
    },
    {
        "blockType": "sponsors",
        "title": "Οι Υποστηρικτές μας",
        "subtitle": "Ευχαριστούμε θερμά τους υποστηρικτές μας",
        "sponsors": [{"logo": None, "name": f"Χορηγός {number}"} for number in range(1, 7)],
    },
    {
        "blockType": "ctaBanner",
        "title": "Έλα κι εσύ στην οικογένεια της Καλλιτεχνίας!",
        "description": "Ξεκινήστε το ταξίδι σας στον κόσμο της γυμναστικής. Προσφέρουμε δωρεάν δοκιμαστικό μάθημα!",
        "buttonLabel": "Επικοινώνησε μαζί μας",
        "buttonUrl": "/contact",
    },
]


class DefaultContentSource(ContentSource):
    """
    Serves the built-in homepage and nothing else.
    """
    
    def __init__(self, tenant_code: str = "kallitechnia", tenant_name: str = "Καλλιτεχνία"):
        self.tenant = Tenant(id=tenant_code, code=tenant_code, name=tenant_name)

    def get_tenant(self, code: str) -> Optional[Tenant]:
        return self.tenant if code == self.tenant.code else None

    def get_homepage(self, tenant_id: str) -> Optional[Homepage]:
        return Homepage(id="default", sections=default_homepage_sections(self.tenant.code))

    def get_page_by_slug(self, slug: str, tenant_id: str) -> Optional[Page]:
        return None

    def get_posts(self, tenant_id: str, limit: int = 10, page: int = 1) -> PostList:
        return PostList.empty(limit=limit, page=page)

    def get_post_by_slug(self, slug: str, tenant_id: str) -> Optional[Post]:
        return None

    def get_form(self, slug_or_id: Union[str, int]) -> Optional[FormDefinition]:
        return None

    def submit_form(self, form_slug: str, values: Dict[str, Any]) -> FormSubmissionResult:
        return FormSubmissionResult(success=False, message="Form submission is not available")


class FallbackContentSource(ContentSource):
    """
    Delegates to a primary source and falls back to the built-in content.
    
    The tenant falls back when the primary cannot resolve it, and the homepage
    falls back when the primary has none or it holds no sections.
    """
    
    def __init__(self, primary: ContentSource, fallback: Optional[DefaultContentSource] = None):
        self.primary = primary
        self.fallback = fallback or DefaultContentSource()

    def get_tenant(self, code: str) -> Optional[Tenant]:
        tenant = self.primary.get_tenant(code)
        if tenant is None:
            logging.warning(f"Tenant '{code}' unavailable, using built-in tenant")
            return self.fallback.get_tenant(code)
        return tenant

    def get_homepage(self, tenant_id: str) -> Optional[Homepage]:
        homepage = self.primary.get_homepage(tenant_id)
        if homepage is None or not homepage.sections:
            logging.info("Using default homepage sections")
            return self.fallback.get_homepage(tenant_id)
        return homepage

    def get_page_by_slug(self, slug: str, tenant_id: str) -> Optional[Page]:
        return self.primary.get_page_by_slug(slug, tenant_id)

    def get_posts(self, tenant_id: str, limit: int = 10, page: int = 1) -> PostList:
        return self.primary.get_posts(tenant_id, limit=limit, page=page)

    def get_post_by_slug(self, slug: str, tenant_id: str) -> Optional[Post]:
        return self.primary.get_post_by_slug(slug, tenant_id)

    def get_form(self, slug_or_id: Union[str, int]) -> Optional[FormDefinition]:
        return self.primary.get_form(slug_or_id)

    def submit_form(self, form_slug: str, values: Dict[str, Any]) -> FormSubmissionResult:
        return self.primary.submit_form(form_slug, values)
