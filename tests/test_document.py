"""Tests for the BeautifulSoup document adapter."""

from unittest.mock import patch

from bs4 import BeautifulSoup

from document import build_document, empty_document


class TestBuildDocument:
    """Derived texts and query operations on parsed markup."""

    def test_texts_are_derived_from_body(self, rich_html):
        """Lowercase text, lowercase markup and original-case text come from one parse."""
        doc = build_document(rich_html, url="https://example.com/article")

        assert "written by dr. jane smith" in doc.text
        assert "Written by Dr. Jane Smith" in doc.plain_text
        assert "application/ld+json" in doc.markup
        assert doc.raw_length == len(rich_html)
        assert doc.title == "How Machine Learning Models Learn: A Practical Guide"

    def test_title_is_not_part_of_body_text(self, rich_html):
        doc = build_document(rich_html, url="https://example.com/article")
        assert "a practical guide" not in doc.text

    def test_count_selectors(self, rich_html):
        doc = build_document(rich_html)

        assert doc.count("h1, h2, h3, h4, h5, h6") == 3
        assert doc.count("ul, ol") == 2
        assert doc.count("p") == 5
        assert doc.count(".author") == 1
        assert doc.count('[class*="author"]') == 1
        assert doc.count("table") == 0

    def test_attribute_reads_first_match(self, rich_html):
        doc = build_document(rich_html)

        assert doc.attribute('meta[property="article:published_time"]', "content") == "2026-10-05T09:00:00Z"
        assert doc.attribute('meta[name="date"]', "content") is None
        assert doc.attribute("time", "datetime") is None

    def test_invalid_selector_counts_as_no_match(self, rich_html):
        doc = build_document(rich_html)
        assert doc.count("[[") == 0
        assert doc.attribute("[[", "content") is None

    def test_external_links_exclude_same_host_and_relative(self, rich_html):
        """Only absolute links to a different host are counted."""
        doc = build_document(rich_html, url="https://example.com/article")
        assert doc.external_link_count() == 5

    def test_external_link_host_comparison_ignores_case(self):
        html = '<body><a href="https://EXAMPLE.com/a">x</a><a href="http://other.org">y</a></body>'
        doc = build_document(html, url="https://example.com/")
        assert doc.external_link_count() == 1

    def test_markup_without_body_still_yields_text(self):
        doc = build_document("<p>Just a Fragment</p>")
        assert doc.text == "just a fragment"
        assert doc.plain_text == "Just a Fragment"


class TestDegradedDocuments:
    """Empty or unparseable input never raises."""

    def test_empty_markup_yields_empty_document(self):
        doc = build_document("")

        assert doc.text == ""
        assert doc.plain_text == ""
        assert doc.raw_length == 0
        assert doc.title == ""
        assert doc.count("p") == 0
        assert doc.external_link_count() == 0

    def test_none_markup_is_treated_as_empty(self):
        doc = build_document(None, url="https://example.com")
        assert doc.raw_length == 0
        assert doc.url == "https://example.com"

    def test_parser_failure_degrades_to_empty_document(self):
        """A parser exception is logged and replaced by an empty document."""
        real_soup = BeautifulSoup("", "html.parser")
        with patch("document.BeautifulSoup", side_effect=[RuntimeError("boom"), real_soup]):
            doc = build_document("<p>content</p>", url="https://example.com/x")

        assert doc.text == ""
        assert doc.raw_length == 0
        assert doc.url == "https://example.com/x"

    def test_empty_document_helper(self):
        doc = empty_document("https://example.com")
        assert doc.count("h1") == 0
        assert doc.attribute("meta", "content") is None
