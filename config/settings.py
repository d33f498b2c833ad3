"""
Settings — Default configuration values for the storefront pages feed generator.

This module provides the compiled-in constants and the DEFAULT_SETTINGS dict
that FeedConfig uses as fallback values when environment variables are not
set. The actual credentials are loaded from .env at runtime.

Configuration precedence (highest to lowest):
  1. Environment variables (from .env file or the process environment)
  2. DEFAULT_SETTINGS (this file)

Required environment variables:
  SHOPIFY_STORE_DOMAIN      Storefront API host (e.g., "pep-ecom-qa.myshopify.com")
  STOREFRONT_ACCESS_TOKEN   Storefront API access token

Settings reference:
  OUTPUT_PATH               Where to write the feed (default: ./doofinder-pages-feed.xml)
  STOREFRONT_API_VERSION    Storefront API version segment in the GraphQL URL
  DEBUG                     Whether to print verbose output (default: False)
"""

# Public site URL used to build item links. Not configurable from the environment.
SITE_URL = "https://pep-ecom-qa.myshopify.com"

API_VERSION = "2025-10"

# Maximum page size accepted by the Storefront API connection fields
PAGE_SIZE = 250

FEED_TITLE = "Latitudes Online Pages Feed"
FEED_DESCRIPTION = "CMS pages for Doofinder"

DEFAULT_SETTINGS = {
    "OUTPUT_PATH": "doofinder-pages-feed.xml",
    "STOREFRONT_API_VERSION": API_VERSION,
    "DEBUG": False,
}
