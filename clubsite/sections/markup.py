"""
Small HTML helpers shared by the block renderers.
"""

from html import escape
from typing import Optional


def esc(value: Optional[str]) -> str:
    """Escape text for use in element content or a quoted attribute."""
    return escape(value or "", quote=True)


def image(src: str, alt: str = "", css_class: str = "object-cover", lazy: bool = True) -> str:
    loading = ' loading="lazy"' if lazy else ""
    return f'<img src="{esc(src)}" alt="{esc(alt)}" class="{css_class}"{loading}>'


def link_button(label: str, url: str, css_class: str = "btn") -> str:
    return f'<a href="{esc(url)}" class="{css_class}">{esc(label)}</a>'


def heading(level: int, text: str, css_class: str = "") -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return f"<h{level}{class_attr}>{esc(text)}</h{level}>"


def paragraph(text: str, css_class: str = "") -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return f"<p{class_attr}>{esc(text)}</p>"


def section(body: str, css_class: str, block_name: str) -> str:
    return f'<section class="{css_class}" data-block="{esc(block_name)}">{body}</section>'
