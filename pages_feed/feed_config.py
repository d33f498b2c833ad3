"""
Feed Config — The explicit configuration value for one generator run.

FeedConfig is constructed once at process start (see run.py) and passed to
the client, renderer, and orchestrator. Nothing else in the package reads the
process environment, so every component can be built in tests with an
injected config.

Typical usage:
    config = FeedConfig.from_env("./.env")
    orchestrator = FeedOrchestrator(config)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from config import DEFAULT_SETTINGS, SITE_URL


@dataclass(frozen=True)
class FeedConfig:
    """Settings for a single feed generation run.

    Attributes:
        store_domain: Storefront API host, without scheme (e.g., "shop.myshopify.com").
        access_token: Storefront API access token.
        site_url: Public site base URL used to build item links.
        api_version: Storefront API version segment (e.g., "2025-10").
        output_path: Path the rendered feed is written to.
        debug: Whether to print verbose output.
    """

    store_domain: str = ""
    access_token: str = ""
    site_url: str = SITE_URL
    api_version: str = DEFAULT_SETTINGS["STOREFRONT_API_VERSION"]
    output_path: str = DEFAULT_SETTINGS["OUTPUT_PATH"]
    debug: bool = DEFAULT_SETTINGS["DEBUG"]

    @classmethod
    def from_env(cls, env_file: str = "./.env") -> "FeedConfig":
        """Build a config from a .env file and the process environment.

        Args:
            env_file: Path to a .env file. If the file exists, it is loaded via
                      python-dotenv. Otherwise, falls back to system environment.

        Returns:
            A FeedConfig. Required values may be empty; call
            missing_settings() or FeedOrchestrator.validate_config() to check.
        """
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            print(f"Loaded configuration from: {env_file}")

        return cls(
            store_domain=os.getenv("SHOPIFY_STORE_DOMAIN", "").strip().rstrip("/"),
            access_token=os.getenv("STOREFRONT_ACCESS_TOKEN", "").strip(),
            api_version=os.getenv(
                "STOREFRONT_API_VERSION", DEFAULT_SETTINGS["STOREFRONT_API_VERSION"]
            ),
            output_path=os.getenv("OUTPUT_PATH", DEFAULT_SETTINGS["OUTPUT_PATH"]),
            debug=os.getenv("DEBUG", str(DEFAULT_SETTINGS["DEBUG"])).lower() == "true",
        )

    def missing_settings(self) -> List[str]:
        """Names of the required environment variables that are not set."""
        missing = []
        if not self.store_domain:
            missing.append("SHOPIFY_STORE_DOMAIN")
        if not self.access_token:
            missing.append("STOREFRONT_ACCESS_TOKEN")
        return missing

    @property
    def graphql_url(self) -> str:
        return f"https://{self.store_domain}/api/{self.api_version}/graphql.json"
