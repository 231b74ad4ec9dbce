"""
Unit tests for the rich text engine.

Covers normalization of every accepted input shape, HTML rendering of text
formats and element kinds, and plain-text extraction.
"""

import unittest

from clubsite.models import ElementNode, RichTextDocument, TextNode
from clubsite.richtext import (
    apply_formatting,
    extract_paragraphs,
    extract_text,
    normalize_document,
    render_document,
)
from clubsite.richtext.renderer import FORMAT_TAGS, heading_level, resolve_link_url


def paragraph(*children):
    return {"type": "paragraph", "children": list(children)}


def document(*children):
    return {"root": {"type": "root", "children": list(children)}}


class TestNormalizeDocument(unittest.TestCase):
    """Test normalization of the accepted input shapes."""

    def test_string_becomes_single_paragraph(self):
        doc = normalize_document("hello")

        self.assertEqual(len(doc.root.children), 1)
        node = doc.root.children[0]
        self.assertIsInstance(node, ElementNode)
        self.assertEqual(node.type, "paragraph")
        self.assertEqual(node.children[0].text, "hello")

    def test_string_list_becomes_paragraphs_in_order(self):
        doc = normalize_document(["one", "two", "three"])

        self.assertEqual([n.type for n in doc.root.children], ["paragraph"] * 3)
        self.assertEqual([n.children[0].text for n in doc.root.children], ["one", "two", "three"])

    def test_node_list_is_wrapped_in_root(self):
        nodes = [paragraph({"text": "a"}), {"type": "heading", "tag": "h2", "children": [{"text": "b"}]}]
        doc = normalize_document(nodes)

        self.assertEqual([n.type for n in doc.root.children], ["paragraph", "heading"])
        self.assertEqual(doc.root.children[1].attributes["tag"], "h2")

    def test_full_document_is_parsed(self):
        doc = normalize_document(document(paragraph({"text": "x", "format": 1})))

        text = doc.root.children[0].children[0]
        self.assertIsInstance(text, TextNode)
        self.assertEqual(text.format, 1)

    def test_single_node_becomes_sole_child(self):
        doc = normalize_document(paragraph({"text": "only"}))

        self.assertEqual(len(doc.root.children), 1)
        self.assertEqual(doc.root.children[0].type, "paragraph")

    def test_unrecognized_input_yields_empty_document(self):
        for value in (None, 42, 3.5, True, {"foo": "bar"}, {"root": "nope"}, ""):
            with self.subTest(value=value):
                self.assertTrue(normalize_document(value).is_empty)

    def test_mixed_list_drops_non_node_items(self):
        doc = normalize_document(["a", 7, None, paragraph({"text": "b"})])

        self.assertEqual(len(doc.root.children), 2)

    def test_canonical_document_passes_through(self):
        doc = RichTextDocument()
        self.assertIs(normalize_document(doc), doc)

    def test_invalid_format_is_ignored(self):
        doc = normalize_document([paragraph({"text": "x", "format": "bold"})])
        self.assertEqual(doc.root.children[0].children[0].format, 0)


class TestFormatting(unittest.TestCase):
    """Test inline formatting of text nodes."""

    def test_bold_italic_nests_bold_innermost(self):
        self.assertEqual(apply_formatting("hi", 3), "<em><strong>hi</strong></em>")

    def test_all_flag_combinations_nest_in_fixed_order(self):
        for combo in range(32):
            with self.subTest(flags=combo):
                expected = "t"
                for flag, tag in FORMAT_TAGS:
                    if combo & flag:
                        expected = f"<{tag}>{expected}</{tag}>"
                self.assertEqual(apply_formatting("t", combo), expected)

                rendered = render_document([paragraph({"text": "t", "format": combo})])
                self.assertEqual(rendered, f"<p>{expected}</p>")
                # Rendering again after re-normalizing gives the same output
                self.assertEqual(render_document(normalize_document([paragraph({"text": "t", "format": combo})])), rendered)

    def test_text_is_escaped(self):
        self.assertEqual(render_document("<b>&"), "<p>&lt;b&gt;&amp;</p>")


class TestRenderDocument(unittest.TestCase):
    """Test HTML rendering of element nodes."""

    def test_heading_level_is_clamped(self):
        low = {"type": "heading", "level": 0, "children": [{"text": "x"}]}
        high = {"type": "heading", "level": 9, "children": [{"text": "x"}]}

        self.assertEqual(render_document([low]), "<h1>x</h1>")
        self.assertEqual(render_document([high]), "<h6>x</h6>")

    def test_heading_level_from_tag(self):
        self.assertEqual(heading_level({"tag": "h3"}), 3)
        self.assertEqual(heading_level({"tag": 2}), 2)
        self.assertEqual(heading_level({"tag": "h12"}), 6)
        self.assertEqual(heading_level({}), 1)

    def test_lists(self):
        item = {"type": "listitem", "children": [{"text": "a"}]}
        legacy_item = {"type": "list-item", "children": [{"text": "b"}]}

        self.assertEqual(
            render_document([{"type": "list", "listType": "number", "children": [item, legacy_item]}]),
            "<ol><li>a</li><li>b</li></ol>",
        )
        self.assertEqual(
            render_document([{"type": "list", "listType": "bullet", "children": [item]}]),
            "<ul><li>a</li></ul>",
        )
        self.assertEqual(
            render_document([{"type": "list", "tag": "ol", "children": [item]}]),
            "<ol><li>a</li></ol>",
        )

    def test_external_link_opens_new_tab(self):
        link = {"type": "link", "url": "https://x.com", "children": [{"text": "x"}]}
        html = render_document([paragraph(link)])

        self.assertIn('href="https://x.com"', html)
        self.assertIn('target="_blank"', html)
        self.assertIn('rel="noopener noreferrer"', html)

    def test_relative_link_stays_in_tab(self):
        link = {"type": "link", "fields": {"url": "/about"}, "children": [{"text": "about"}]}
        html = render_document([paragraph(link)])

        self.assertIn('href="/about"', html)
        self.assertNotIn("target=", html)

    def test_link_without_target_falls_back_to_hash(self):
        link = {"type": "link", "children": [{"text": "nowhere"}]}
        self.assertIn('href="#"', render_document([paragraph(link)]))

    def test_link_url_resolution_order(self):
        self.assertEqual(resolve_link_url({"href": "/b", "fields": {"url": "/c"}}), "/b")
        self.assertEqual(resolve_link_url({"fields": {"href": "/d"}}), "/d")
        self.assertEqual(resolve_link_url({"url": "javascript:alert(1)"}), "#")
        self.assertEqual(resolve_link_url({"url": "mailto:info@example.com"}), "mailto:info@example.com")

    def test_empty_elements_render_nothing(self):
        self.assertEqual(render_document([paragraph()]), "")
        self.assertEqual(render_document([paragraph({"text": ""})]), "")
        self.assertEqual(render_document([{"type": "list", "children": [{"type": "listitem", "children": []}]}]), "")

    def test_unknown_element_is_wrapped_in_div(self):
        self.assertEqual(render_document([{"type": "callout", "children": [{"text": "note"}]}]), "<div>note</div>")

    def test_empty_input_renders_empty_string(self):
        self.assertEqual(render_document(None), "")


class TestExtraction(unittest.TestCase):
    """Test plain-text and paragraph extraction."""

    def test_extract_text_is_shape_invariant(self):
        shapes = [
            "hello",
            ["hello"],
            [paragraph({"text": "hello"})],
            document(paragraph({"text": "hello"})),
            paragraph({"text": "hello"}),
        ]
        for shape in shapes:
            with self.subTest(shape=shape):
                self.assertEqual(extract_text(shape), "hello")

    def test_extract_text_joins_top_level_nodes_with_space(self):
        doc = document(
            paragraph({"text": "Hello, "}, {"text": "world", "format": 1}),
            paragraph({"text": "again"}),
        )
        self.assertEqual(extract_text(doc), "Hello, world again")

    def test_extract_paragraphs_is_shape_invariant(self):
        expected = ["one", "two"]
        shapes = [
            ["one", "two"],
            [paragraph({"text": "one"}), paragraph({"text": "two"})],
            document(paragraph({"text": "one"}), paragraph({"text": "two"})),
        ]
        for shape in shapes:
            with self.subTest(shape=shape):
                self.assertEqual(extract_paragraphs(shape), expected)

    def test_extract_paragraphs_trims_and_drops_empty(self):
        doc = document(paragraph({"text": "  padded  "}), paragraph(), paragraph({"text": "   "}))
        self.assertEqual(extract_paragraphs(doc), ["padded"])

    def test_extraction_of_unrecognized_input(self):
        self.assertEqual(extract_text(None), "")
        self.assertEqual(extract_paragraphs(12), [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
