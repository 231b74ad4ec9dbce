"""Rich text normalization, rendering and plain-text extraction."""

from .normalizer import normalize_document, parse_node
from .renderer import render_document, render_node, apply_formatting
from .extract import extract_text, extract_paragraphs

__all__ = [
    "normalize_document",
    "parse_node",
    "render_document",
    "render_node",
    "apply_formatting",
    "extract_text",
    "extract_paragraphs",
]
