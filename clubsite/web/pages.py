"""
Page assembly for clubsite.

Rendered sections and post bodies are placed into the site shell (navigation,
footer) with Jinja2. The shell carries no logic of its own; section HTML is
produced by the section renderer and inserted as-is.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader

from ..media import extract_image_url
from ..models import Post, PostList
from ..richtext import extract_text, render_document


SITE_NAME = "Καλλιτεχνία"

NAVIGATION = [
    {"label": "Αρχική", "url": "/"},
    {"label": "Σχετικά", "url": "/about"},
    {"label": "Τμήματα", "url": "/programs"},
    {"label": "Νέα", "url": "/news"},
    {"label": "Εγγραφές", "url": "/registration"},
    {"label": "Επικοινωνία", "url": "/contact"},
]


def post_summary(post: Post) -> Dict[str, Any]:
    """Flatten a post into the values the news templates show."""
    return {
        "title": post.title,
        "url": f"/news/{post.slug}",
        "date": (post.published_at or "")[:10],
        "excerpt": extract_text(post.excerpt),
        "image": extract_image_url(post.featured_image),
    }


class PageBuilder:
    """Render site pages from the shared Jinja templates."""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(site_name=SITE_NAME, navigation=NAVIGATION)

    def render(self, template: str, **context: Any) -> str:
        return self.env.get_template(template).render(**context)

    def sections_page(self, title: str, body: str, current_path: str = "/") -> str:
        """A page whose body is a run of rendered sections."""
        return self.render("sections.html", title=title, body=body, current_path=current_path)

    def news_list(self, posts: PostList) -> str:
        summaries: List[Dict[str, Any]] = [post_summary(post) for post in posts.docs]
        return self.render("news_list.html", title="Νέα", posts=summaries, pagination=posts, current_path="/news")

    def news_post(self, post: Post) -> str:
        summary = post_summary(post)
        return self.render(
            "news_post.html",
            title=post.title,
            post=summary,
            content=render_document(post.content),
            current_path="/news",
        )

    def not_found(self, message: str = "Η σελίδα δεν βρέθηκε") -> str:
        return self.render("not_found.html", title="404", message=message, current_path="")
