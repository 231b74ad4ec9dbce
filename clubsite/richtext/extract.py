"""
Plain-text views of structured documents.

Used by block renderers for fields that are shown without formatting, such as
a quote or a hero subtitle. Both functions accept every rich-text shape the
normalizer accepts and give the same result for equivalent shapes.
"""

from typing import Any, List

from ..models.richtext import ElementNode, Node, TextNode
from .normalizer import normalize_document


def node_text(node: Node) -> str:
    """Concatenate the text of a node and all of its descendants."""
    if isinstance(node, TextNode):
        return node.text
    return "".join(node_text(child) for child in node.children)


def extract_text(value: Any) -> str:
    """
    Flatten rich text into a single string.
    
    Top-level nodes are joined with a space; text inside a node is
    concatenated as-is.
    """
    document = normalize_document(value)
    return " ".join(node_text(node) for node in document.root.children)


def extract_paragraphs(value: Any) -> List[str]:
    """
    Flatten rich text into one string per top-level node.
    
    Paragraph text is trimmed and empty entries are dropped.
    """
    document = normalize_document(value)
    paragraphs = []
    for node in document.root.children:
        text = node_text(node)
        if isinstance(node, ElementNode) and node.type == "paragraph":
            text = text.strip()
        if text:
            paragraphs.append(text)
    return paragraphs
