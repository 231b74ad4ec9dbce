"""
Web application for clubsite.

Serves the CMS-driven pages, the form submission endpoint and the file
download proxy. Content is read through a ContentSource; upstream failures
degrade to the built-in homepage or to empty listings.
"""

import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import quote

from fastapi import FastAPI, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ..config import config
from ..content import CMSClient, ContentSource, FallbackContentSource, default_homepage_sections
from ..forms import coerce_values, validate_submission
from ..models import Tenant
from ..sections import PageContext, SectionRenderer
from .pages import PageBuilder


FILENAME_PATTERN = re.compile(r"""filename[^;=\n]*=((['"]).*?\2|[^;\n]*)""")


def filename_from_disposition(header: Optional[str]) -> Optional[str]:
    """Pull the filename out of a Content-Disposition header."""
    if not header:
        return None
    match = FILENAME_PATTERN.search(header)
    if not match or not match.group(1):
        return None
    return match.group(1).replace('"', '').replace("'", '') or None


def attachment_disposition(filename: str) -> str:
    try:
        filename.encode("latin-1")
    except UnicodeEncodeError:
        return f"attachment; filename*=UTF-8''{quote(filename)}"
    return f'attachment; filename="{filename}"'


async def read_submission(request: Request) -> Dict[str, Any]:
    """Read submitted values from a JSON body or an HTML form post."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        payload = await request.json()
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            return payload["data"]
        return payload if isinstance(payload, dict) else {}
    form = await request.form()
    return dict(form)


def create_app(source: Optional[ContentSource] = None, cms: Optional[CMSClient] = None,
               renderer: Optional[SectionRenderer] = None,
               pages: Optional[PageBuilder] = None) -> FastAPI:
    """
    Build the site application.
    
    Args:
        source: Where page content comes from (defaults to the CMS with built-in fallbacks)
        cms: Client used by the download proxy (defaults to a new CMSClient)
        renderer: Section renderer (defaults to one bound to the content source)
        pages: Page template builder
        
    Returns:
        The FastAPI application
    """
    cms = cms or CMSClient()
    source = source or FallbackContentSource(cms)
    renderer = renderer or SectionRenderer(content_source=source)
    pages = pages or PageBuilder()
    tenant_code = config.tenant_code

    app = FastAPI(
        title="Club Site",
        description="Server-rendered club website backed by a headless CMS",
        version="1.0.0",
    )

    def current_tenant() -> Tenant:
        tenant = source.get_tenant(tenant_code)
        if tenant is None:
            logging.warning(f"Tenant '{tenant_code}' could not be resolved, rendering with its code only")
            tenant = Tenant(id=tenant_code, code=tenant_code)
        return tenant

    def not_found(message: Optional[str] = None) -> HTMLResponse:
        content = pages.not_found(message) if message else pages.not_found()
        return HTMLResponse(content, status_code=404)

    @app.get("/", response_class=HTMLResponse)
    def homepage():
        tenant = current_tenant()
        homepage = source.get_homepage(tenant.id)
        sections = homepage.sections if homepage and homepage.sections else default_homepage_sections(tenant.code)
        body = renderer.render_html(sections, tenant.code, PageContext(page_slug="home", is_homepage=True))
        return HTMLResponse(pages.sections_page(tenant.name, body, "/"))

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    @app.get("/news", response_class=HTMLResponse)
    def news(page: int = Query(1, ge=1)):
        tenant = current_tenant()
        posts = source.get_posts(tenant.id, limit=config.posts_per_page, page=page)
        return HTMLResponse(pages.news_list(posts))

    @app.get("/news/{slug}", response_class=HTMLResponse)
    def news_post(slug: str):
        tenant = current_tenant()
        post = source.get_post_by_slug(slug, tenant.id)
        if post is None:
            return not_found()
        return HTMLResponse(pages.news_post(post))

    @app.get("/api/download/{path:path}")
    def download(path: str):
        if not path:
            return JSONResponse({"error": "Filename is required"}, status_code=400)
        try:
            upstream = cms.fetch_file(path)
            if not upstream.is_success:
                logging.error(f"Download proxy: CMS returned {upstream.status_code} for {path}")
                return JSONResponse({"error": "File not found"}, status_code=upstream.status_code)

            content_type = upstream.headers.get("content-type") or "application/octet-stream"
            filename = filename_from_disposition(upstream.headers.get("content-disposition")) or path
            logging.info(f"Download proxy: serving {filename} ({content_type})")
            return Response(
                content=upstream.content,
                media_type=content_type,
                headers={
                    "Content-Disposition": attachment_disposition(filename),
                    "Cache-Control": config.download_cache_control,
                },
            )
        except ValueError as e:
            logging.warning(f"Download proxy: {e}")
            return JSONResponse({"error": "Invalid file path"}, status_code=400)
        except Exception as e:
            logging.error(f"Download proxy error for {path}: {e}")
            return JSONResponse({"error": "Failed to download file"}, status_code=500)

    @app.post("/api/forms/{slug}")
    async def submit_form(slug: str, request: Request):
        try:
            values = await read_submission(request)
        except ValueError:
            return JSONResponse({"success": False, "message": "Invalid submission body"}, status_code=400)

        form = await run_in_threadpool(source.get_form, slug)
        if form is None or not form.is_active:
            return JSONResponse({"success": False, "message": "Form not found"}, status_code=404)

        values = coerce_values(form, values)
        errors = validate_submission(form, values)
        if errors:
            return JSONResponse({"success": False, "errors": errors}, status_code=422)

        result = await run_in_threadpool(source.submit_form, form.slug or slug, values)
        if result.success and not result.message:
            result.message = form.success_message
        if result.success and not result.redirect_url:
            result.redirect_url = form.redirect_url
        return JSONResponse(
            result.model_dump(by_alias=True, exclude_none=True),
            status_code=200 if result.success else 400,
        )

    # Declared last so fixed routes take precedence
    @app.get("/{slug}", response_class=HTMLResponse)
    def content_page(slug: str):
        tenant = current_tenant()
        page = source.get_page_by_slug(slug, tenant.id)
        if page is None:
            return not_found()
        body = renderer.render_html(page.sections, tenant.code, PageContext(page_slug=slug))
        return HTMLResponse(pages.sections_page(page.title or tenant.name, body, f"/{slug}"))

    return app
