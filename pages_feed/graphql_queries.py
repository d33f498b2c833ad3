"""
GraphQL Query Definitions — The paginated query used to fetch storefront pages.

PAGES_QUERY ("GetPages") requests one page of the `pages` connection:

  - pageInfo.hasNextPage / endCursor: the cursor pagination contract. The
    client keeps requesting with `cursor = endCursor` until hasNextPage
    is false.
  - edges.node: exactly the fields the feed renderer needs, nothing more.

Variables:
  first   Page size (PAGE_SIZE, the Storefront API maximum of 250)
  cursor  endCursor of the previous page, or null for the first request

Pipeline context:
  Used by StorefrontClient.iter_pages() in Step 2 of the orchestrator
  pipeline. Each node is parsed into a PageRecord by page_extractor.
"""

PAGES_QUERY = """
query GetPages($first: Int!, $cursor: String) {
  pages(first: $first, after: $cursor) {
    pageInfo {
      hasNextPage
      endCursor
    }
    edges {
      node {
        id
        title
        handle
        body
        bodySummary
        createdAt
        updatedAt
      }
    }
  }
}
"""
