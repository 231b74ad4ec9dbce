"""
Structured document normalizer.

Rich-text fields arrive from the CMS in four shapes: a bare string, a list of
strings, a list of nodes, or a full document with a root. ``normalize_document``
turns any of them into one ``RichTextDocument`` and never raises; input it
cannot recognise becomes an empty document.
"""

from typing import Any, List, Mapping, Optional

from ..models.richtext import ElementNode, Node, RichTextDocument, RootNode, TextNode


def _paragraph(text: str) -> ElementNode:
    return ElementNode(type="paragraph", children=[TextNode(text=text)])


def _is_text_mapping(value: Mapping[str, Any]) -> bool:
    return "text" in value or value.get("type") == "text"


def _looks_like_node(value: Mapping[str, Any]) -> bool:
    return _is_text_mapping(value) or "type" in value or isinstance(value.get("children"), list)


def _format_flags(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def parse_node(value: Any) -> Optional[Node]:
    """
    Convert one raw node into a canonical node.
    
    Args:
        value: A raw node mapping (or a bare string, treated as plain text)
        
    Returns:
        The canonical node, or None when the value is not a node
    """
    if isinstance(value, str):
        return TextNode(text=value)
    if not isinstance(value, Mapping):
        return None

    if _is_text_mapping(value):
        text = value.get("text")
        return TextNode(
            text=text if isinstance(text, str) else "",
            format=_format_flags(value.get("format")),
        )

    raw_children = value.get("children")
    children: List[Node] = []
    if isinstance(raw_children, list):
        for child in raw_children:
            node = parse_node(child)
            if node is not None:
                children.append(node)

    node_type = value.get("type")
    attributes = {key: item for key, item in value.items() if key not in ("type", "children")}
    return ElementNode(
        type=node_type if isinstance(node_type, str) else "",
        children=children,
        attributes=attributes,
    )


def _parse_top_level(items: List[Any]) -> List[Node]:
    nodes: List[Node] = []
    for item in items:
        if isinstance(item, str):
            nodes.append(_paragraph(item))
            continue
        node = parse_node(item)
        if node is not None:
            nodes.append(node)
    return nodes


def normalize_document(value: Any) -> RichTextDocument:
    """
    Normalize any accepted rich-text shape into a canonical document.
    
    Args:
        value: A string, list of strings, list of nodes, single node or
            full document (anything else yields an empty document)
            
    Returns:
        The canonical RichTextDocument
    """
    if isinstance(value, RichTextDocument):
        return value

    if isinstance(value, str):
        return RichTextDocument(root=RootNode(children=[_paragraph(value)] if value else []))

    if isinstance(value, list):
        return RichTextDocument(root=RootNode(children=_parse_top_level(value)))

    if isinstance(value, Mapping):
        root = value.get("root")
        if isinstance(root, Mapping):
            children = root.get("children")
            return RichTextDocument(
                root=RootNode(children=_parse_top_level(children) if isinstance(children, list) else [])
            )
        if _looks_like_node(value):
            node = parse_node(value)
            return RichTextDocument(root=RootNode(children=[node] if node is not None else []))

    return RichTextDocument()
