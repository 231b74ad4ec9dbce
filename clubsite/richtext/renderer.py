"""
Structured document renderer.

Renders a canonical document (or any shape the normalizer accepts) to HTML.
Element nodes whose children all render to nothing produce no output at all,
so the CMS editor's empty paragraphs never leave empty tags behind.
"""

import html
import re
from typing import Any, List, Mapping, Optional

from ..models.richtext import (
    ElementNode,
    FORMAT_BOLD,
    FORMAT_CODE,
    FORMAT_ITALIC,
    FORMAT_STRIKETHROUGH,
    FORMAT_UNDERLINE,
    Node,
    TextNode,
)
from .normalizer import normalize_document


# Innermost first: bold wraps the text, code wraps everything else
FORMAT_TAGS = [
    (FORMAT_BOLD, "strong"),
    (FORMAT_ITALIC, "em"),
    (FORMAT_STRIKETHROUGH, "del"),
    (FORMAT_UNDERLINE, "u"),
    (FORMAT_CODE, "code"),
]

ORDERED_LIST_TYPES = {"number", "ordered"}
LIST_ITEM_TYPES = {"listitem", "list-item"}
SAFE_SCHEMES = {"http", "https", "mailto", "tel"}

_SCHEME_PATTERN = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")


def apply_formatting(text: str, flags: int) -> str:
    """Escape text and wrap it in one tag per active format flag."""
    rendered = html.escape(text, quote=False)
    for flag, tag in FORMAT_TAGS:
        if flags & flag:
            rendered = f"<{tag}>{rendered}</{tag}>"
    return rendered


def heading_level(attributes: Mapping[str, Any]) -> int:
    """Resolve a heading level from 'tag' ('h2' or 2) or 'level', clamped to 1..6."""
    raw = attributes.get("tag") or attributes.get("level") or 1
    if isinstance(raw, str):
        digits = raw.lower().lstrip("h")
        raw = int(digits) if digits.isdigit() else 1
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raw = 1
    return min(max(int(raw), 1), 6)


def resolve_link_url(attributes: Mapping[str, Any]) -> str:
    """Find a link target in the known locations, falling back to '#'."""
    fields = attributes.get("fields")
    fields = fields if isinstance(fields, Mapping) else {}
    for candidate in (
        attributes.get("url"),
        attributes.get("href"),
        fields.get("url"),
        fields.get("href"),
    ):
        if isinstance(candidate, str) and candidate.strip():
            url = candidate.strip()
            match = _SCHEME_PATTERN.match(url)
            if match and match.group(1).lower() not in SAFE_SCHEMES:
                return "#"
            return url
    return "#"


def is_external_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def _render_link(url: str, inner: str) -> str:
    href = html.escape(url, quote=True)
    if is_external_url(url):
        return f'<a href="{href}" target="_blank" rel="noopener noreferrer" class="rt-link">{inner}</a>'
    return f'<a href="{href}" class="rt-link">{inner}</a>'


def render_node(node: Node) -> Optional[str]:
    """
    Render a single node.
    
    Args:
        node: A canonical text or element node
        
    Returns:
        The HTML for the node, or None when it renders to nothing
    """
    if isinstance(node, TextNode):
        if not node.text:
            return None
        return apply_formatting(node.text, node.format)

    parts = [part for part in (render_node(child) for child in node.children) if part]
    if not parts:
        return None
    inner = "".join(parts)
    attributes = node.attributes

    if node.type == "paragraph":
        return f"<p>{inner}</p>"
    if node.type == "heading":
        level = heading_level(attributes)
        return f"<h{level}>{inner}</h{level}>"
    if node.type == "list":
        ordered = attributes.get("listType") in ORDERED_LIST_TYPES or attributes.get("tag") == "ol"
        tag = "ol" if ordered else "ul"
        return f"<{tag}>{inner}</{tag}>"
    if node.type in LIST_ITEM_TYPES:
        return f"<li>{inner}</li>"
    if node.type == "link":
        return _render_link(resolve_link_url(attributes), inner)
    return f"<div>{inner}</div>"


def render_nodes(nodes: List[Node]) -> List[str]:
    """Render a list of nodes, dropping those that produce nothing."""
    return [part for part in (render_node(node) for node in nodes) if part]


def render_document(value: Any) -> str:
    """
    Render rich text of any accepted shape to an HTML fragment.
    
    Args:
        value: Rich text in any shape accepted by normalize_document
        
    Returns:
        The HTML fragment ('' for empty documents)
    """
    document = normalize_document(value)
    return "".join(render_nodes(document.root.children))
