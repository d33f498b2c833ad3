"""Tests for pages_feed.feed_config.FeedConfig."""

import os
from unittest.mock import patch

from pages_feed.feed_config import FeedConfig

_BASE_ENV = {
    "SHOPIFY_STORE_DOMAIN": "shop.example.com",
    "STOREFRONT_ACCESS_TOKEN": "token-abc",
}


def _from_env(env, env_file="/nonexistent/.env"):
    with patch.dict(os.environ, env, clear=True):
        return FeedConfig.from_env(env_file)


def test_from_env_required_values():
    config = _from_env(_BASE_ENV)
    assert config.store_domain == "shop.example.com"
    assert config.access_token == "token-abc"
    assert config.missing_settings() == []


def test_from_env_defaults():
    config = _from_env(_BASE_ENV)
    assert config.output_path == "doofinder-pages-feed.xml"
    assert config.api_version == "2025-10"
    assert config.site_url == "https://pep-ecom-qa.myshopify.com"
    assert config.debug is False


def test_from_env_overrides():
    config = _from_env(dict(
        _BASE_ENV,
        OUTPUT_PATH="/tmp/feed.xml",
        STOREFRONT_API_VERSION="2024-07",
        DEBUG="true",
    ))
    assert config.output_path == "/tmp/feed.xml"
    assert config.api_version == "2024-07"
    assert config.debug is True


def test_from_env_loads_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "SHOPIFY_STORE_DOMAIN=dotenv.example.com\nSTOREFRONT_ACCESS_TOKEN=dotenv-token\n"
    )
    config = _from_env({}, env_file=str(env_file))
    assert config.store_domain == "dotenv.example.com"
    assert config.access_token == "dotenv-token"


def test_missing_settings_lists_both():
    config = _from_env({})
    assert config.missing_settings() == ["SHOPIFY_STORE_DOMAIN", "STOREFRONT_ACCESS_TOKEN"]


def test_missing_settings_blank_token():
    config = _from_env(dict(_BASE_ENV, STOREFRONT_ACCESS_TOKEN="   "))
    assert config.missing_settings() == ["STOREFRONT_ACCESS_TOKEN"]


def test_graphql_url():
    config = _from_env(dict(_BASE_ENV, SHOPIFY_STORE_DOMAIN="shop.example.com/"))
    assert config.graphql_url == "https://shop.example.com/api/2025-10/graphql.json"
