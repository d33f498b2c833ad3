"""
Storefront API Client — Fetches every page record from the Storefront GraphQL API.

This module is responsible for all HTTP communication with the store. Every
request is a POST to:

    https://{SHOPIFY_STORE_DOMAIN}/api/{version}/graphql.json
    Headers: X-Shopify-Storefront-Access-Token: <token>
    Body:    {"query": PAGES_QUERY, "variables": {"first": 250, "cursor": ...}}

Pagination contract:
    The first request is sent with cursor=null. Each response carries
    pageInfo {hasNextPage, endCursor}; the next request resumes after
    endCursor. Fetching stops when hasNextPage is false.

    A server that keeps reporting hasNextPage=true without advancing the
    cursor (a null endCursor, or one already seen) is treated as a protocol
    violation rather than looped on forever.

Failure modes:
    TransportError  Non-success HTTP status, or the request never completed.
    ProtocolError   The body is not JSON, carries a GraphQL "errors" array
                    (even alongside "data"), lacks data.pages, or the cursor
                    stalls.

Pipeline context:
    Used in Step 2 (fetch) of the orchestrator pipeline. The resulting
    PageRecord list feeds FeedRenderer.render() in Step 3.
"""

from typing import Any, Dict, Iterator, List, Optional

import requests

from config import PAGE_SIZE

from .exceptions import ProtocolError, TransportError
from .feed_config import FeedConfig
from .graphql_queries import PAGES_QUERY
from .page_extractor import PageRecord, extract_pages


class StorefrontClient:
    """Client for the Storefront GraphQL API.

    Manages a requests.Session with the access token header attached. All API
    calls go through this single session, one request at a time.

    Attributes:
        graphql_url: Full URL of the GraphQL endpoint.
        page_size: Records requested per page.
        debug: If True, print verbose request details.
    """

    def __init__(self, config: FeedConfig, page_size: int = PAGE_SIZE):
        """Initialize the client.

        Args:
            config: The run configuration (domain, token, API version, debug).
            page_size: Records per request (default: the API maximum of 250).
        """
        self.graphql_url = config.graphql_url
        self.page_size = page_size
        self.debug = config.debug
        self._session = requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "X-Shopify-Storefront-Access-Token": config.access_token,
        })

    def execute_graphql(self, query: str, variables: Optional[Dict] = None) -> Dict[str, Any]:
        """Execute a GraphQL query against the Storefront API.

        Args:
            query: The GraphQL query string.
            variables: Optional dict of GraphQL variables.

        Returns:
            The "data" portion of the GraphQL response (a dict).

        Raises:
            TransportError: If the HTTP request fails or returns a non-2xx status.
            ProtocolError: If the body is not JSON or contains GraphQL errors.
        """
        payload = {"query": query, "variables": variables or {}}

        if self.debug:
            print(f"  POST {self.graphql_url}  variables={payload['variables']}")

        try:
            response = self._session.post(self.graphql_url, json=payload)
        except requests.RequestException as e:
            raise TransportError(f"Storefront API request failed: {e}") from e

        if not response.ok:
            raise TransportError(
                f"Storefront API error: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ProtocolError(f"Storefront API returned invalid JSON: {e}") from e

        if not isinstance(result, dict):
            raise ProtocolError("Storefront API returned a non-object JSON body")

        if result.get("errors"):
            error_messages = [
                e.get("message", str(e)) if isinstance(e, dict) else str(e)
                for e in result["errors"]
            ]
            raise ProtocolError(
                f"GraphQL errors: {'; '.join(error_messages)}", errors=error_messages
            )

        return result.get("data") or {}

    def iter_pages(self) -> Iterator[List[PageRecord]]:
        """Yield the records of each result page, one request per page.

        Yields:
            The PageRecords of one response, in server order.

        Raises:
            ProtocolError: If a response lacks data.pages or the cursor stalls.
        """
        cursor = None
        seen_cursors = set()
        has_next_page = True

        while has_next_page:
            data = self.execute_graphql(
                PAGES_QUERY, {"first": self.page_size, "cursor": cursor}
            )
            connection = data.get("pages")
            if connection is None:
                raise ProtocolError("Storefront API response is missing data.pages")

            records, page_info = extract_pages(connection)
            yield records

            has_next_page = page_info.has_next_page
            if has_next_page:
                if page_info.end_cursor is None or page_info.end_cursor in seen_cursors:
                    raise ProtocolError(
                        f"Pagination stalled: hasNextPage is true but endCursor "
                        f"{page_info.end_cursor!r} does not advance"
                    )
                seen_cursors.add(page_info.end_cursor)
            cursor = page_info.end_cursor

    def fetch_all_pages(self) -> List[PageRecord]:
        """Fetch every page record, following the cursor until exhausted.

        Returns:
            All PageRecords in server order.
        """
        pages = []
        print("  Fetching CMS pages...")

        for records in self.iter_pages():
            pages.extend(records)
            print(f"  Fetched {len(pages)} pages so far...")

        print(f"  Total pages fetched: {len(pages)}")
        return pages
