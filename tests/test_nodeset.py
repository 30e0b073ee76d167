"""
Тесты Document и NodeSet.
"""

import pytest
from bs4 import NavigableString

from pseudo_select.errors import SelectorSyntaxError
from pseudo_select.query import Document, NodeSet, load


class TestDocument:
    """Тесты запросов к документу."""

    def test_query_in_context_is_sorted_and_unique(self, document):
        sections = document.query("section")
        nodes = document.query("p", [sections[1], sections[0], sections[1]])
        assert [n.get_text() for n in nodes] == [
            "section 1 - p 1",
            "section 1 - p 2",
            "section 2 - p 1",
        ]

    def test_query_wraps_nodes(self, document):
        node = document.soup.select_one("h3")
        wrapped = document.query(node)
        assert isinstance(wrapped, NodeSet)
        assert wrapped[0] is node

    def test_identical_markup_not_merged(self):
        doc = load("<ul><li>a</li><li>a</li></ul>")
        assert len(doc.query("li")) == 2
        assert len(doc.query("li").parent()) == 1

    def test_invalid_css(self, document):
        with pytest.raises(SelectorSyntaxError):
            document.query("p[")

    def test_document_context(self, document):
        assert len(document.query("section", document)) == 2

    def test_from_html_parser(self, sample_html):
        doc = Document.from_html(sample_html, "html.parser")
        assert len(doc.query("td")) == 12


class TestNodeSet:
    """Тесты операций NodeSet."""

    def test_parents_nearest_first(self, document):
        parents = document.query(".section_1-p_1").parents()
        assert [n.name for n in parents][:3] == ["section", "div", "body"]

    def test_parents_filtered(self, document):
        assert len(document.query("p").parents("section")) == 2

    def test_next_all_prev_all(self, document):
        p1 = document.query(".section_1-p_1")
        assert p1.next_all().text() == "section 1 - p 2"
        h3_siblings = document.query(".section_2-p_1").prev_all()
        assert [n.name for n in h3_siblings] == ["h3"]

    def test_contents_includes_text(self, document):
        contents = document.query(".section_1-p_1").contents()
        assert len(contents) == 1
        assert isinstance(contents[0], NavigableString)
        assert contents.text() == "section 1 - p 1"

    def test_eq_out_of_range(self, document):
        assert len(document.query("p").eq(10)) == 0
        assert len(document.query("p").eq(-10)) == 0

    def test_filter_callable(self, document):
        nodes = document.query("p").filter(lambda n: n.get_text().endswith("2"))
        assert nodes.text() == "section 1 - p 2"

    def test_filter_without_selector_is_empty(self, document):
        assert len(document.query("p").filter()) == 0

    def test_has_node(self, document):
        h3 = document.soup.select_one("h3")
        assert document.query("section").has(h3)[0]["id"] == "section-2"

    def test_map_drops_none(self, document):
        texts = document.query("p").map(
            lambda n: None if "2 - p" in n.get_text() else n.get_text()
        )
        assert texts == ["section 1 - p 1", "section 1 - p 2"]

    def test_closest_without_selector(self, document):
        assert len(document.query("p").closest()) == 0
