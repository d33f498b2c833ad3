#!/usr/bin/env python3
"""
Storefront Pages Feed Generator — Entry Point.

Fetches every CMS page from the Storefront GraphQL API and writes them as an
RSS 2.0 feed for the site search indexer. Takes no arguments: configuration
comes from a .env file in the working directory and the process environment.

Required environment variables:
    SHOPIFY_STORE_DOMAIN      e.g. "pep-ecom-qa.myshopify.com"
    STOREFRONT_ACCESS_TOKEN   Storefront API access token

The pipeline (managed by FeedOrchestrator) performs 4 steps:
  1. Validate configuration
  2. Fetch all pages, following the cursor until exhausted
  3. Render the XML feed
  4. Write it to OUTPUT_PATH (default: ./doofinder-pages-feed.xml)

Usage:
    python run.py

Exits 0 when the feed was written, 1 on any error.
"""

import sys

from pages_feed import FeedConfig, FeedOrchestrator


def main():
    """Build the configuration once and run the feed pipeline."""
    config = FeedConfig.from_env("./.env")

    print(f"\n{'='*60}")
    print("STOREFRONT PAGES FEED GENERATOR")
    print("="*60)

    orchestrator = FeedOrchestrator(config)
    results = orchestrator.run()
    orchestrator.print_summary(results)

    if not results.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
