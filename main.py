#!/usr/bin/env python3
"""
clubsite - Club website renderer

Main entry point. Serves the site with uvicorn, or renders a single page's
sections to stdout for checking CMS content without a browser.
"""

import logging
import os
import sys
import argparse
from pathlib import Path

import uvicorn

from clubsite.config import config
from clubsite.content import CMSClient, FallbackContentSource, default_homepage_sections
from clubsite.models import Tenant
from clubsite.sections import PageContext, SectionRenderer


def setup_logging(level_override: str = None):
    """Configure logging for the application."""
    level_name = level_override or config.get("logging.level", "INFO")
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename
    
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    
    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=handlers,
        force=True
    )


def run_server(host: str = None, port: int = None, reload: bool = False):
    """Serve the site with uvicorn."""
    host = host or config.server_host
    port = port or config.server_port
    logging.info(f"Serving club site for tenant '{config.tenant_code}' on http://{host}:{port}")
    
    uvicorn.run(
        "clubsite.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload
    )


def render_page(slug: str = None) -> str:
    """
    Render a page's sections to HTML.
    
    Args:
        slug: Page slug, or None for the homepage
        
    Returns:
        The rendered sections
    """
    with CMSClient() as client:
        source = FallbackContentSource(client)
        tenant = source.get_tenant(config.tenant_code) or Tenant(id=config.tenant_code, code=config.tenant_code)
        renderer = SectionRenderer(content_source=source)
        
        if slug is None:
            homepage = source.get_homepage(tenant.id)
            sections = homepage.sections if homepage else default_homepage_sections(tenant.code)
            return renderer.render_html(sections, tenant.code, PageContext(page_slug="home", is_homepage=True))
        
        page = source.get_page_by_slug(slug, tenant.id)
        if page is None:
            raise LookupError(f"Page '{slug}' not found")
        return renderer.render_html(page.sections, tenant.code, PageContext(page_slug=slug))


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="clubsite - Club website renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py serve                          # Serve the site on the configured host/port
  python main.py serve --port 3000 --reload     # Development server
  python main.py render                         # Print the homepage sections
  python main.py render --slug about            # Print the sections of /about
        """
    )
    
    parser.add_argument(
        "--config",
        type=str,
        help="Path to the configuration file (default: $CLUBSITE_CONFIG or config.yaml)"
    )
    
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )
    
    parser.add_argument(
        "--version",
        action="version",
        version="clubsite 0.1.0"
    )
    
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    serve = subparsers.add_parser("serve", help="Run the web server")
    serve.add_argument("--host", type=str, help="Interface to bind (default from config)")
    serve.add_argument("--port", type=int, help="Port to listen on (default from config)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    
    render = subparsers.add_parser("render", help="Render a page's sections to stdout")
    render.add_argument("--slug", type=str, help="Page slug (default: the homepage)")
    
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    
    if args.config:
        config_path = Path(args.config).resolve()
        # Reload workers import the app afresh and read the path from the environment
        os.environ["CLUBSITE_CONFIG"] = str(config_path)
        config.config_path = config_path
        config.reload()
    setup_logging(args.log_level)
    
    if args.command == "serve":
        try:
            run_server(args.host, args.port, args.reload)
        except KeyboardInterrupt:
            logging.info("Server stopped by user")
        return
    
    try:
        print(render_page(args.slug))
    except LookupError as e:
        logging.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
