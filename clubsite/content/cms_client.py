"""
CMS client for clubsite.

This module handles communication with the headless CMS REST API. Every public
method absorbs network errors, non-2xx answers and malformed JSON, logging them
and returning None or an empty result so pages can fall back gracefully.
"""

import httpx
import posixpath
import re
import time
from typing import Any, Dict, Optional, Union
from urllib.parse import unquote
import logging

from pydantic import ValidationError

from ..config import config
from ..media import MEDIA_FILE_PATH
from ..models import FormDefinition, FormSubmissionResult, Homepage, Page, Post, PostList, Tenant
from .base import ContentSource


class CMSError(Exception):
    """Raised internally when a CMS request cannot produce a usable answer."""


def media_file_location(path: str) -> str:
    """
    Map a download path onto the CMS media file endpoint.
    
    Paths already under 'media/file/' keep that prefix, anything else is
    placed below it.
    
    Raises:
        ValueError: If the path would leave the media file endpoint
    """
    decoded = unquote(path).replace("\\", "/")
    if ".." in decoded.split("/") or decoded.startswith("/"):
        raise ValueError(f"Invalid media file path: {path}")

    relative = path[len("media/file/"):] if path.startswith("media/file/") else path
    location = posixpath.normpath(f"{MEDIA_FILE_PATH}{relative}")
    if not location.startswith(MEDIA_FILE_PATH):
        raise ValueError(f"Invalid media file path: {path}")
    return location


class CMSClient(ContentSource):
    """
    Reads tenant, page, post and form content from the CMS.
    """
    
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the CMS client.
        
        Args:
            base_url: The CMS origin (defaults to config value)
            timeout: Request timeout in seconds (defaults to config value)
            transport: Optional httpx transport, used by tests to fake the CMS
        """
        self.base_url = (base_url or config.cms_url).rstrip('/')
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else config.cms_timeout,
            transport=transport,
        )
        
    def __enter__(self):
        """Context manager entry."""
        return self
        
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()
        
    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a GET request and decode the JSON body.
        
        Raises:
            CMSError: If the request fails or the body is not JSON
        """
        try:
            response = self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise CMSError(f"CMS request {path} failed with status {e.response.status_code}")
        except httpx.RequestError as e:
            raise CMSError(f"Failed to connect to CMS for {path}: {e}")
        except ValueError as e:
            raise CMSError(f"CMS returned malformed JSON for {path}: {e}")

    def _first_doc(self, path: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the first document of a paginated CMS answer, or None."""
        data = self._get_json(path, params)
        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list) or not docs or not isinstance(docs[0], dict):
            return None
        return docs[0]

    def get_tenant(self, code: str) -> Optional[Tenant]:
        try:
            doc = self._first_doc("/api/tenants", {
                "where[code][equals]": code,
                "limit": 1,
                "depth": 0,
            })
            return Tenant.model_validate(doc) if doc else None
        except (CMSError, ValidationError) as e:
            logging.error(f"Failed to fetch tenant '{code}': {e}")
            return None

    def get_homepage(self, tenant_id: str) -> Optional[Homepage]:
        # Published-only filtering is left to the CMS access rules
        try:
            doc = self._first_doc("/api/homepages", {
                "where[tenant][equals]": tenant_id,
                "limit": 1,
                "depth": 2,
            })
            return Homepage.model_validate(doc) if doc else None
        except (CMSError, ValidationError) as e:
            logging.warning(f"Failed to fetch homepage for tenant {tenant_id}: {e}")
            return None

    def get_page_by_slug(self, slug: str, tenant_id: str) -> Optional[Page]:
        try:
            doc = self._first_doc("/api/pages", {
                "where[and][0][slug][equals]": slug,
                "where[and][1][tenant][equals]": str(tenant_id),
                "limit": 1,
                "depth": 2,
            })
            if not doc:
                logging.warning(f"Page with slug '{slug}' not found for tenant {tenant_id}")
                return None
            return Page.model_validate(doc)
        except (CMSError, ValidationError) as e:
            logging.error(f"Failed to fetch page '{slug}': {e}")
            return None

    def get_posts(self, tenant_id: str, limit: int = 10, page: int = 1) -> PostList:
        try:
            data = self._get_json("/api/posts", {
                "where[tenant][equals]": tenant_id,
                "limit": limit,
                "page": page,
                "sort": "-publishedAt",
                "depth": 2,
            })
            if not isinstance(data, dict):
                raise CMSError("Posts response is not an object")
            return PostList.model_validate(data)
        except (CMSError, ValidationError) as e:
            logging.warning(f"Failed to fetch posts for tenant {tenant_id}: {e}")
            return PostList.empty(limit=limit, page=page)

    def get_post_by_slug(self, slug: str, tenant_id: str) -> Optional[Post]:
        try:
            doc = self._first_doc("/api/posts", {
                "where[and][0][slug][equals]": slug,
                "where[and][1][tenant][equals]": tenant_id,
                "limit": 1,
                "depth": 2,
            })
            return Post.model_validate(doc) if doc else None
        except (CMSError, ValidationError) as e:
            logging.warning(f"Failed to fetch post '{slug}': {e}")
            return None

    def get_form(self, slug_or_id: Union[str, int]) -> Optional[FormDefinition]:
        """
        Fetch a form definition.
        
        Numeric references are fetched by id directly; anything else is looked
        up by slug first and then tried as an id.
        """
        reference = str(slug_or_id)
        # Cache-busting stamp, forms must reflect edits immediately
        stamp = int(time.time() * 1000)
        try:
            if not re.fullmatch(r"\d+", reference):
                try:
                    doc = self._first_doc("/api/forms", {
                        "where[slug][equals]": reference,
                        "limit": 1,
                        "depth": 2,
                        "_t": stamp,
                    })
                    if doc:
                        return FormDefinition.model_validate(doc)
                except CMSError as e:
                    logging.warning(f"Form lookup by slug '{reference}' failed: {e}")
                logging.info(f"Form not found by slug, trying by id: {reference}")

            data = self._get_json(f"/api/forms/{reference}", {"depth": 2, "_t": stamp})
            if not isinstance(data, dict):
                return None
            form = FormDefinition.model_validate(data)
            logging.info(f"Fetched form {form.name or form.slug} with {len(form.fields)} fields")
            return form
        except (CMSError, ValidationError) as e:
            logging.error(f"Failed to fetch form '{reference}': {e}")
            return None

    def submit_form(self, form_slug: str, values: Dict[str, Any]) -> FormSubmissionResult:
        try:
            response = self.client.post("/api/forms/submit", json={"formSlug": form_slug, "data": values})
            result = response.json()
            if not isinstance(result, dict):
                result = {}
        except (httpx.RequestError, ValueError) as e:
            logging.error(f"Error submitting form '{form_slug}': {e}")
            return FormSubmissionResult(
                success=False,
                message="An error occurred while submitting the form. Please try again.",
            )

        if response.is_error:
            logging.warning(f"Form '{form_slug}' submission rejected ({response.status_code}): {result}")
            errors = result.get("errors")
            return FormSubmissionResult(
                success=False,
                message=result.get("error") or "Failed to submit form",
                errors=errors if isinstance(errors, dict) else None,
            )

        logging.info(f"Form '{form_slug}' submitted")
        return FormSubmissionResult(
            success=True,
            message=result.get("message"),
            redirect_url=result.get("redirectUrl"),
        )

    def fetch_file(self, path: str) -> httpx.Response:
        """
        Fetch a media file for the download proxy.
        
        Paths already under 'media/file/' are served from /api/<path>, anything
        else from /api/media/file/<path>.
        
        Raises:
            ValueError: If the path would leave the media file endpoint
            httpx.RequestError: If the CMS cannot be reached
        """
        upstream = media_file_location(path)
        logging.info(f"Fetching file from CMS: {self.base_url}{upstream}")
        return self.client.get(upstream, headers={"Accept": "*/*"})
