"""Content sources: the CMS client and the built-in fallback content."""

from .base import ContentSource
from .cms_client import CMSClient, CMSError
from .defaults import DefaultContentSource, FallbackContentSource, default_homepage_sections

__all__ = [
    "ContentSource",
    "CMSClient",
    "CMSError",
    "DefaultContentSource",
    "FallbackContentSource",
    "default_homepage_sections",
]
