"""
clubsite: A server-rendered club website backed by a headless CMS.

Pages are assembled from content blocks fetched from the CMS and rendered
through a fixed registry of block renderers.
"""

__version__ = "0.1.0"
__author__ = "clubsite Project"

# Import main components
from .models import RichTextDocument, Tenant, Page, Homepage, Post, FormDefinition
from .richtext import normalize_document, render_document, extract_text, extract_paragraphs
from .sections import SectionRenderer, BlockRegistry, block_registry
from .content import ContentSource, CMSClient, DefaultContentSource, FallbackContentSource

__all__ = [
    "RichTextDocument",
    "Tenant",
    "Page",
    "Homepage",
    "Post",
    "FormDefinition",
    "normalize_document",
    "render_document",
    "extract_text",
    "extract_paragraphs",
    "SectionRenderer",
    "BlockRegistry",
    "block_registry",
    "ContentSource",
    "CMSClient",
    "DefaultContentSource",
    "FallbackContentSource",
]
