"""
Page Extractor — Parses a `pages` connection into PageRecord values.

This module sits between the raw API response (Step 2) and the feed renderer
(Step 3). It turns one GraphQL connection:

    {
      "pageInfo": { "hasNextPage": true, "endCursor": "eyJsYXN0X2lk..." },
      "edges": [
        { "node": { "id": "gid://shopify/Page/1", "title": "About Us",
                    "handle": "about-us", "body": "<p>...</p>",
                    "bodySummary": "...", "createdAt": "...", "updatedAt": "..." } }
      ]
    }

into a list of PageRecord values (server order preserved, no deduplication)
and a PageInfo describing where the next request should start.

Key behaviors:
  - Missing string fields become "" so the renderer never sees None for
    title, handle, or body.
  - bodySummary and the timestamps stay None when absent; the renderer
    decides on the fallback (body) and on omitting pubDate.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PageRecord:
    """A storefront page, as fetched. Immutable for the rest of the run."""

    id: str
    title: str
    handle: str
    body: str
    body_summary: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "PageRecord":
        return cls(
            id=node.get("id") or "",
            title=node.get("title") or "",
            handle=node.get("handle") or "",
            body=node.get("body") or "",
            body_summary=node.get("bodySummary"),
            created_at=node.get("createdAt"),
            updated_at=node.get("updatedAt"),
        )

    @property
    def description_html(self) -> str:
        """bodySummary when it has content, otherwise the full body."""
        return self.body_summary or self.body


@dataclass(frozen=True)
class PageInfo:
    has_next_page: bool
    end_cursor: Optional[str]


def extract_pages(connection: Dict[str, Any]) -> Tuple[List[PageRecord], PageInfo]:
    """Extract the page records and pagination state from one connection.

    Args:
        connection: The "pages" object from the GraphQL "data" member.

    Returns:
        A (records, page_info) tuple. records follows edge order.
    """
    edges = connection.get("edges") or []
    records = [PageRecord.from_node(edge.get("node") or {}) for edge in edges]

    info = connection.get("pageInfo") or {}
    page_info = PageInfo(
        has_next_page=bool(info.get("hasNextPage", False)),
        end_cursor=info.get("endCursor"),
    )
    return records, page_info
