"""
Tests for the Page Collector (HTML signal extraction).
"""

from agentic_maintainer.services.collectors.page_collector import PageCollector, PageSignals

URL = "https://example.com/blog/post"


def collect(html: str, url: str = URL) -> PageSignals:
    return PageCollector().collect(html, url)


# ─────────────────────────────────────────────
# Title & meta
# ─────────────────────────────────────────────

class TestTitleAndMeta:

    def test_title_is_trimmed(self):
        data = collect("<html><head><title>\n  My   Page \n</title></head></html>")
        assert data.title == "My Page"

    def test_first_title_wins(self):
        data = collect("<title>First</title><title>Second</title>")
        assert data.title == "First"

    def test_missing_title_is_empty_string(self):
        assert collect("<html><body><p>hi</p></body></html>").title == ""

    def test_meta_description_extracted(self):
        data = collect('<meta name="Description" content="  About us  ">')
        assert data.meta_description == "About us"

    def test_missing_meta_description_is_none(self):
        assert collect("<title>t</title>").meta_description is None

    def test_meta_without_content_is_none(self):
        assert collect('<meta name="description">').meta_description is None


# ─────────────────────────────────────────────
# Text, headings, images
# ─────────────────────────────────────────────

class TestContentSignals:

    def test_word_count_excludes_scripts_and_styles(self):
        html = (
            "<html><head><style>body { color: red }</style></head><body>"
            "<p>one two three</p><script>var a = 'not counted words';</script>"
            "<noscript>enable javascript please</noscript><p>four</p></body></html>"
        )
        assert collect(html).word_count == 4

    def test_word_count_without_body(self):
        assert collect("<div>alpha beta</div> gamma").word_count == 3

    def test_heading_counts_cover_all_levels(self):
        data = collect("<h1>a</h1><h2>b</h2><h2>c</h2><h6>d</h6>")
        assert data.headings == {"h1": 1, "h2": 2, "h3": 0, "h4": 0, "h5": 0, "h6": 1}

    def test_images_missing_alt(self):
        html = '<img src="a.png" alt="Logo"><img src="b.png"><img src="c.png" alt="  "><img src="d.png" alt="">'
        data = collect(html)
        assert data.image_count == 4
        assert data.images_missing_alt == 3


# ─────────────────────────────────────────────
# Links
# ─────────────────────────────────────────────

class TestLinks:

    def test_links_resolved_deduplicated_in_order(self):
        html = (
            '<a href="/about">About</a>'
            '<a href="https://other.org/x">Other</a>'
            '<a href="/about#team">Team</a>'
            '<a href="comments">Comments</a>'
            '<a href="https://other.org/x">Again</a>'
        )
        assert collect(html).links == [
            "https://example.com/about",
            "https://other.org/x",
            "https://example.com/blog/comments",
        ]

    def test_non_http_schemes_skipped(self):
        html = (
            '<a href="mailto:me@example.com">m</a><a href="javascript:void(0)">j</a>'
            '<a href="tel:123">t</a><a href="ftp://example.com/f">f</a><a href="#top">top</a>'
            '<a href="">empty</a><a>no href</a>'
        )
        data = collect(html)
        # "#top" resolves to the page itself
        assert data.links == [URL]

    def test_base_href_respected(self):
        html = '<head><base href="https://cdn.example.net/docs/"></head><a href="guide">g</a>'
        assert collect(html).links == ["https://cdn.example.net/docs/guide"]


# ─────────────────────────────────────────────
# Degradation
# ─────────────────────────────────────────────

class TestDegradation:

    def test_empty_body_gives_defaults(self):
        data = collect("")
        assert data == PageSignals()
        assert data.headings["h1"] == 0

    def test_malformed_html_does_not_raise(self):
        html = "<html><head><title>Broken</title><body><p>Unclosed <div><a href='/x'>x <img src=y"
        data = collect(html)
        assert data.title == "Broken"
        assert "https://example.com/x" in data.links

    def test_non_html_text(self):
        data = collect('{"json": "payload", "items": [1, 2, 3]}')
        assert data.title == ""
        assert data.image_count == 0
        assert sum(data.headings.values()) == 0
        assert data.links == []
