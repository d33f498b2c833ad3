"""
Feed Renderer — Builds the RSS 2.0 pages feed consumed by the search indexer.

The document layout is fixed and must stay byte-compatible with what the
indexer already ingests:

    <?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0" xmlns:g="http://base.google.com/ns/1.0">
      <channel>
        <title>Latitudes Online Pages Feed</title>
        <link>{site_url}/pages</link>
        <description>CMS pages for Doofinder</description>

        <item>
          <g:id>page_{handle}</g:id>
          <title>{title}</title>
          <link>{site_url}/pages/{handle}</link>
          <description>{bodySummary or body, stripped}</description>
          <g:type>cms_page</g:type>
          <pubDate>{updatedAt, RFC 1123}</pubDate>
        </item>

      </channel>
    </rss>

pubDate is emitted only when the page has an updatedAt timestamp. Every item
is followed by a blank line, and the document has no trailing newline.

Pipeline context:
    Used in Step 3 of the orchestrator pipeline. Input comes from
    StorefrontClient.fetch_all_pages(); the returned string is handed to
    OutputManager.write_feed() in Step 4.
"""

import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import List, Optional

from config import FEED_DESCRIPTION, FEED_TITLE, SITE_URL

from .page_extractor import PageRecord
from .sanitizer import clean_description, escape_for_xml

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
RSS_OPEN = '<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0">\n'
ITEM_TYPE = "cms_page"
ITEM_ID_PREFIX = "page_"

# fromisoformat before 3.11 needs "+HH:MM" offsets and 3- or 6-digit fractions
_OFFSET_PATTERN = re.compile(r"([+-]\d{2}):?(\d{2})$")
_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def format_pub_date(timestamp: Optional[str]) -> Optional[str]:
    """Render an ISO-8601 timestamp as an RSS date, e.g. "Mon, 15 Jan 2024 00:00:00 GMT".

    Timestamps without an offset are taken as UTC. Returns None when the
    value is empty or cannot be parsed.
    """
    if not timestamp:
        return None
    value = timestamp.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    if "T" in value or " " in value:
        value = _OFFSET_PATTERN.sub(r"\1:\2", value)
    value = _FRACTION_PATTERN.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return format_datetime(parsed.astimezone(timezone.utc), usegmt=True)


class FeedRenderer:
    """Renders PageRecords into the feed document.

    Attributes:
        site_url: Public site base URL (trailing slash stripped).
        debug: If True, print a warning for timestamps that cannot be parsed.
    """

    def __init__(self, site_url: str = SITE_URL, debug: bool = False):
        self.site_url = site_url.rstrip("/")
        self.debug = debug

    def render(self, pages: List[PageRecord]) -> str:
        """Render the complete feed document.

        Args:
            pages: The fetched page records, in the order they should appear.

        Returns:
            The XML document as a string.
        """
        parts = [
            XML_DECLARATION,
            RSS_OPEN,
            "  <channel>\n",
            f"    <title>{FEED_TITLE}</title>\n",
            f"    <link>{self.site_url}/pages</link>\n",
            f"    <description>{FEED_DESCRIPTION}</description>\n\n",
        ]
        for page in pages:
            parts.append(self.render_item(page))
        parts.append("  </channel>\n")
        parts.append("</rss>")
        return "".join(parts)

    def render_item(self, page: PageRecord) -> str:
        """Render one <item> block, including its trailing blank line."""
        url = f"{self.site_url}/pages/{page.handle}"

        lines = [
            "    <item>\n",
            f"      <g:id>{ITEM_ID_PREFIX}{page.handle}</g:id>\n",
            f"      <title>{escape_for_xml(page.title)}</title>\n",
            f"      <link>{escape_for_xml(url)}</link>\n",
            f"      <description>{clean_description(page.description_html)}</description>\n",
            f"      <g:type>{ITEM_TYPE}</g:type>\n",
        ]

        if page.updated_at:
            pub_date = format_pub_date(page.updated_at)
            if pub_date:
                lines.append(f"      <pubDate>{pub_date}</pubDate>\n")
            elif self.debug:
                print(f"  Warning: unparseable updatedAt {page.updated_at!r} on page {page.handle}")

        lines.append("    </item>\n\n")
        return "".join(lines)
