"""
Media and file reference helpers.

CMS media references come as bare filenames, relative paths, absolute URLs or
media objects carrying ``url``/``filename``/``id``. These helpers turn any of
them into one fetchable absolute URL (or a download-proxy URL), returning None
when nothing usable is present so renderers can simply omit the image.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlparse
import logging

from .config import config


MEDIA_FILE_PATH = "/api/media/file/"
DOWNLOAD_PROXY_PATH = "/api/download/"

# Containers that may hold a media object one level down
NESTED_MEDIA_KEYS = ["image", "media", "backgroundImage", "logo", "photo"]


def _base(base_url: Optional[str]) -> str:
    return (base_url or config.cms_url).rstrip('/')


def _reference_id(value: Mapping[str, Any]) -> Optional[str]:
    for key in ("id", "_id", "_ref"):
        candidate = value.get(key)
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            return str(candidate)
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return None


def normalize_image_url(value: Any, base_url: Optional[str] = None) -> Optional[str]:
    """
    Normalize an image reference to an absolute URL.
    
    Args:
        value: Filename, relative path, absolute URL or media object
        base_url: Origin to prefix relative references with (defaults to the CMS URL)
        
    Returns:
        The absolute URL, or None when nothing resolvable is present
    """
    if not value:
        return None

    if isinstance(value, Mapping):
        for key in ("url", "filename"):
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return normalize_image_url(candidate, base_url)
        # Filename-like ids and opaque document ids share the file endpoint
        reference = _reference_id(value)
        if reference:
            return f"{_base(base_url)}{MEDIA_FILE_PATH}{reference}"
        return None

    if not isinstance(value, str):
        logging.debug(f"Unsupported image reference type: {type(value).__name__}")
        return None

    url = value.strip()
    if not url:
        return None
    if url.startswith("http://") or url.startswith("https://"):
        return url
    if url.startswith("/"):
        return f"{_base(base_url)}{url}"
    return f"{_base(base_url)}{MEDIA_FILE_PATH}{url}"


def extract_image_url(value: Any, base_url: Optional[str] = None) -> Optional[str]:
    """
    Extract an absolute image URL from any media shape, including nested ones.
    
    Direct references are tried first, then media objects nested under the
    usual container keys (image, media, backgroundImage, logo, photo).
    """
    direct = normalize_image_url(value, base_url)
    if direct or not isinstance(value, Mapping):
        return direct

    for key in NESTED_MEDIA_KEYS:
        nested = value.get(key)
        if nested and nested is not value:
            result = extract_image_url(nested, base_url)
            if result:
                return result
    return None


def get_proxy_download_url(value: Any) -> Optional[str]:
    """
    Convert a CMS file reference into a URL served by the site's download proxy.
    
    Examples:
        "/api/media/file/doc.pdf"                      -> "/api/download/doc.pdf"
        "https://cms.example/api/media/file/doc.pdf"   -> "/api/download/doc.pdf"
        "doc.pdf"                                      -> "/api/download/doc.pdf"
    """
    if not value:
        return None

    if isinstance(value, Mapping):
        for key in ("url", "filename"):
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return get_proxy_download_url(candidate)
        return None

    if not isinstance(value, str):
        return None

    filename = value.strip()
    if not filename:
        return None

    if filename.startswith("http://") or filename.startswith("https://"):
        filename = urlparse(filename).path or filename

    if MEDIA_FILE_PATH in filename:
        filename = filename.split(MEDIA_FILE_PATH, 1)[1]
    elif "media/file/" in filename:
        filename = filename.split("media/file/", 1)[1]
    elif filename.startswith("/api/"):
        filename = filename[len("/api/"):]
    elif filename.startswith("/"):
        filename = filename[1:]

    filename = filename.split("?", 1)[0]
    if not filename:
        return None
    return f"{DOWNLOAD_PROXY_PATH}{filename}"


def sanitize_link(url: Any, fallback: str = "") -> str:
    """Accept only absolute http(s) or site-relative link targets."""
    if isinstance(url, str):
        url = url.strip()
        if url.startswith("http") or url.startswith("/"):
            return url
    return fallback
