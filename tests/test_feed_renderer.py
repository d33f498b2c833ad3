"""Tests for pages_feed.feed_renderer."""

import json
import os

import pytest

from pages_feed.feed_renderer import FeedRenderer, format_pub_date
from pages_feed.page_extractor import PageRecord, extract_pages

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
SITE_URL = "https://shop.example.com"


def load_pages_fixture():
    with open(os.path.join(FIXTURES_DIR, "pages_response.json")) as f:
        raw = json.load(f)
    records, _ = extract_pages(raw["data"]["pages"])
    return records


@pytest.fixture
def renderer():
    return FeedRenderer(SITE_URL)


@pytest.fixture
def about_us():
    return PageRecord(
        id="gid://shopify/Page/1",
        title="About Us & Co.",
        handle="about-us",
        body="<p>Full body</p>",
        body_summary="<p>Hello &amp; welcome</p>",
        updated_at="2024-01-15T00:00:00Z",
    )


# ---------------------------------------------------------------------------
# format_pub_date
# ---------------------------------------------------------------------------

def test_format_pub_date_utc():
    assert format_pub_date("2024-01-15T00:00:00Z") == "Mon, 15 Jan 2024 00:00:00 GMT"


def test_format_pub_date_converts_offset_to_gmt():
    assert format_pub_date("2024-03-02T16:45:10-05:00") == "Sat, 02 Mar 2024 21:45:10 GMT"


def test_format_pub_date_naive_is_utc():
    assert format_pub_date("2024-01-15T08:05:00") == "Mon, 15 Jan 2024 08:05:00 GMT"


@pytest.mark.parametrize("value,expected", [
    ("2024-01-15T05:30:00+0530", "Mon, 15 Jan 2024 00:00:00 GMT"),
    ("2024-01-15T00:00:00.5Z", "Mon, 15 Jan 2024 00:00:00 GMT"),
    ("2024-01-15T00:00:00.123456789+00:00", "Mon, 15 Jan 2024 00:00:00 GMT"),
])
def test_format_pub_date_lenient_iso_forms(value, expected):
    assert format_pub_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "not-a-date"])
def test_format_pub_date_invalid(value):
    assert format_pub_date(value) is None


# ---------------------------------------------------------------------------
# Item rendering
# ---------------------------------------------------------------------------

def test_render_item_fields(renderer, about_us):
    item = renderer.render_item(about_us)
    assert "<g:id>page_about-us</g:id>" in item
    assert "<title>About Us &amp; Co.</title>" in item
    assert "<link>https://shop.example.com/pages/about-us</link>" in item
    assert "<description>Hello &amp; welcome</description>" in item
    assert "<g:type>cms_page</g:type>" in item
    assert "<pubDate>Mon, 15 Jan 2024 00:00:00 GMT</pubDate>" in item


def test_render_item_exact_layout(renderer, about_us):
    assert renderer.render_item(about_us) == (
        "    <item>\n"
        "      <g:id>page_about-us</g:id>\n"
        "      <title>About Us &amp; Co.</title>\n"
        "      <link>https://shop.example.com/pages/about-us</link>\n"
        "      <description>Hello &amp; welcome</description>\n"
        "      <g:type>cms_page</g:type>\n"
        "      <pubDate>Mon, 15 Jan 2024 00:00:00 GMT</pubDate>\n"
        "    </item>\n\n"
    )


def test_render_item_falls_back_to_body(renderer):
    page = PageRecord(id="1", title="T", handle="t", body="<p>Body text</p>", body_summary=None)
    assert "<description>Body text</description>" in renderer.render_item(page)


def test_render_item_empty_summary_falls_back_to_body(renderer):
    page = PageRecord(id="1", title="T", handle="t", body="<p>Body text</p>", body_summary="")
    assert "<description>Body text</description>" in renderer.render_item(page)


def test_render_item_without_updated_at_omits_pub_date(renderer):
    page = PageRecord(id="1", title="T", handle="t", body="b")
    assert "<pubDate>" not in renderer.render_item(page)


def test_render_item_unparseable_updated_at_omits_pub_date(renderer):
    page = PageRecord(id="1", title="T", handle="t", body="b", updated_at="yesterday")
    assert "<pubDate>" not in renderer.render_item(page)


# ---------------------------------------------------------------------------
# Document rendering
# ---------------------------------------------------------------------------

def test_render_empty_collection(renderer):
    assert renderer.render([]) == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0">\n'
        "  <channel>\n"
        "    <title>Latitudes Online Pages Feed</title>\n"
        "    <link>https://shop.example.com/pages</link>\n"
        "    <description>CMS pages for Doofinder</description>\n\n"
        "  </channel>\n"
        "</rss>"
    )


def test_render_fixture_document(renderer):
    xml = renderer.render(load_pages_fixture())

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    assert xml.endswith("    </item>\n\n  </channel>\n</rss>")
    assert xml.count("<item>") == 3
    assert xml.count("<pubDate>") == 2

    # Server order is preserved
    positions = [xml.index(f"<g:id>page_{h}</g:id>") for h in ("about-us", "shipping-returns", "contact")]
    assert positions == sorted(positions)

    assert "<description>Orders ship within 2 days. Free returns</description>" in xml
    assert "<pubDate>Sat, 02 Mar 2024 21:45:10 GMT</pubDate>" in xml


def test_render_items_separated_by_blank_line(renderer):
    pages = [
        PageRecord(id="1", title="A", handle="a", body="a"),
        PageRecord(id="2", title="B", handle="b", body="b"),
    ]
    assert "    </item>\n\n    <item>\n" in renderer.render(pages)


def test_renderer_strips_trailing_slash_from_site_url():
    renderer = FeedRenderer("https://shop.example.com/")
    page = PageRecord(id="1", title="A", handle="a", body="a")
    assert "<link>https://shop.example.com/pages/a</link>" in renderer.render([page])
