"""
Structured document models for clubsite.

This module defines the canonical rich-text tree that every normalizer output
conforms to. Renderers and extractors only ever see these types.
"""

from typing import Any, Dict, List, Union
from pydantic import BaseModel, Field


# Inline formatting bit flags carried by text nodes
FORMAT_BOLD = 1
FORMAT_ITALIC = 2
FORMAT_STRIKETHROUGH = 4
FORMAT_UNDERLINE = 8
FORMAT_CODE = 16


class TextNode(BaseModel):
    """
    A run of literal text with inline formatting flags.
    """
    
    text: str = Field(
        default="",
        description="The literal text of the run"
    )
    
    format: int = Field(
        default=0,
        description="Bitmask of inline formats (bold=1, italic=2, strike=4, underline=8, code=16)"
    )

    def has_format(self, flag: int) -> bool:
        """Check whether a formatting flag is set on this node."""
        return bool(self.format & flag)


class ElementNode(BaseModel):
    """
    A block or inline element (paragraph, heading, list, link, ...) holding child nodes.
    """
    
    type: str = Field(
        default="",
        description="The element kind discriminator (e.g. 'paragraph', 'heading', 'link')"
    )
    
    children: List['Node'] = Field(
        default_factory=list,
        description="Ordered child nodes, text or element"
    )
    
    attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Every other key of the source node (tag, level, listType, url, fields, ...)"
    )


Node = Union[TextNode, ElementNode]


class RootNode(BaseModel):
    """
    The root of a structured document.
    """
    
    children: List[Node] = Field(
        default_factory=list,
        description="Top-level nodes of the document in order"
    )


class RichTextDocument(BaseModel):
    """
    The canonical structured document: a root holding an ordered list of nodes.
    """
    
    root: RootNode = Field(
        default_factory=RootNode,
        description="The document root"
    )

    @property
    def is_empty(self) -> bool:
        """True when the document has no top-level nodes."""
        return not self.root.children


# Enable forward references for the self-referencing element model
ElementNode.model_rebuild()
