"""
pages_feed — Storefront pages feed generator.

This package contains the modules that implement the 4-step feed pipeline.
Each module handles one concern:

  orchestrator.py       Pipeline coordination (Steps 1-4)
  feed_config.py        FeedConfig, built once from .env / environment (Step 1)
  storefront_client.py  HTTP communication with the Storefront API (Step 2)
  graphql_queries.py    The paginated pages query (Step 2)
  page_extractor.py     Parse a pages connection into PageRecords (Step 2)
  sanitizer.py          HTML stripping and XML escaping (Step 3)
  feed_renderer.py      Build the RSS document (Step 3)
  output_manager.py     Write the feed file (Step 4)
  exceptions.py         Error kinds shared by all steps
"""

from .exceptions import (
    ConfigurationError,
    FeedError,
    FilesystemError,
    ProtocolError,
    TransportError,
)
from .feed_config import FeedConfig
from .feed_renderer import FeedRenderer, format_pub_date
from .graphql_queries import PAGES_QUERY
from .orchestrator import FeedOrchestrator
from .output_manager import OutputManager
from .page_extractor import PageInfo, PageRecord, extract_pages
from .sanitizer import clean_description, escape_for_xml, strip_markup
from .storefront_client import StorefrontClient
