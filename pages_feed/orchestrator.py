"""
Feed Orchestrator — Pipeline coordination for the storefront pages feed.

This module ties together the other modules (StorefrontClient, FeedRenderer,
OutputManager) into a sequential 4-step workflow:

  Step 1: CONFIGURATION
      Checks that SHOPIFY_STORE_DOMAIN and STOREFRONT_ACCESS_TOKEN are set.
      Nothing touches the network until this passes.

  Step 2: FETCH PAGES
      StorefrontClient follows the `pages` cursor until the server reports
      no further pages, accumulating every PageRecord in memory.

  Step 3: RENDER FEED
      FeedRenderer builds the complete XML document as a string.

  Step 4: SAVE OUTPUT
      OutputManager writes the document to OUTPUT_PATH (default:
      ./doofinder-pages-feed.xml).

Every step runs to completion before the next starts. There is no partial
success: any FeedError stops the pipeline, is reported, and leaves the
previous feed file untouched.

Typical usage:
    orchestrator = FeedOrchestrator(FeedConfig.from_env("./.env"))
    results = orchestrator.run()
    orchestrator.print_summary(results)
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError, FeedError
from .feed_config import FeedConfig
from .feed_renderer import FeedRenderer
from .output_manager import OutputManager
from .storefront_client import StorefrontClient


class FeedOrchestrator:
    """Orchestrates the fetch → render → write pipeline.

    Attributes:
        config: The run configuration.
        debug: Whether to enable verbose output.
        renderer: Builds the XML document.
        output_manager: Writes the document to disk.
    """

    def __init__(
        self,
        config: FeedConfig,
        client: Optional[StorefrontClient] = None,
        renderer: Optional[FeedRenderer] = None,
        output_manager: Optional[OutputManager] = None,
    ):
        """Initialize the orchestrator.

        Args:
            config: The run configuration, built once at process start.
            client: Storefront client to use. Built from config on first use
                    (after validation) when not given.
            renderer: Feed renderer. Defaults to one for config.site_url.
            output_manager: Output writer. Defaults to one for config.output_path.
        """
        self.config = config
        self.debug = config.debug
        self._client = client
        self.renderer = renderer or FeedRenderer(config.site_url, config.debug)
        self.output_manager = output_manager or OutputManager(config.output_path, config.debug)

    def validate_config(self) -> None:
        """Ensure all required configuration values are present.

        Raises:
            ConfigurationError: Naming every missing environment variable.
        """
        missing = self.config.missing_settings()
        if missing:
            raise ConfigurationError(missing)

    @property
    def client(self) -> StorefrontClient:
        if self._client is None:
            self._client = StorefrontClient(self.config)
        return self._client

    def run(self) -> Dict[str, Any]:
        """Execute the full 4-step pipeline.

        Returns:
            A dict containing:
                - started_at/completed_at: ISO timestamps
                - store_domain: The Storefront API host
                - success: True if the feed was written
                - summary: items, output_path, size_mb (on success)
                - error/error_type: Error message and kind (on failure)
        """
        results = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "store_domain": self.config.store_domain,
            "success": False,
        }

        try:
            # Step 1: Fail fast on missing settings, before any network call
            print(f"\n{'='*60}")
            print("STEP 1: CONFIGURATION")
            print("="*60)
            self.validate_config()
            print(f"  Store: {self.config.store_domain}")
            print(f"  Site URL: {self.config.site_url}")

            # Step 2: Follow the pages cursor until exhausted
            print(f"\n{'='*60}")
            print("STEP 2: FETCH PAGES")
            print("="*60)
            pages = self.client.fetch_all_pages()

            # Step 3: Build the whole document before touching the output file
            print(f"\n{'='*60}")
            print("STEP 3: RENDER FEED")
            print("="*60)
            xml = self.renderer.render(pages)
            print(f"  Rendered {len(pages)} items")

            # Step 4: Write it out
            print(f"\n{'='*60}")
            print("STEP 4: SAVE OUTPUT")
            print("="*60)
            output_path = self.output_manager.write_feed(xml)
            size_mb = self.output_manager.file_size_mb(output_path)
            print(f"  Saved feed: {output_path}")

            results["success"] = True
            results["summary"] = {
                "items": len(pages),
                "output_path": output_path,
                "size_mb": round(size_mb, 2),
            }

        except FeedError as e:
            results["error"] = str(e)
            results["error_type"] = type(e).__name__
            print(f"\n  ERROR: {e}")
            if self.debug:
                import traceback
                traceback.print_exc()

        results["completed_at"] = datetime.now(timezone.utc).isoformat()
        return results

    def print_summary(self, results: Dict):
        """Print a human-readable execution summary.

        Args:
            results: The dict returned by run().
        """
        print(f"\n{'='*60}")
        print("FEED GENERATION COMPLETE")
        print("="*60)
        print(f"Status: {'SUCCESS' if results.get('success') else 'FAILED'}")

        summary = results.get("summary", {})
        if summary:
            print(f"File: {summary.get('output_path', 'N/A')}")
            print(f"Items: {summary.get('items', 0)} pages")
            print(f"Size: {summary.get('size_mb', 0):.2f} MB")

        if results.get("error"):
            print(f"Error ({results.get('error_type', 'Error')}): {results['error']}")
