"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from price_registry.config import (
    AppConfig,
    PriceFeedConfig,
    PythConfig,
    RegistryConfig,
    StaticConfig,
)
from price_registry.feeds import StaticPriceFeed
from price_registry.registry import PriceRegistry

ADMIN = "0xADMIN"
OUTSIDER = "0xOUTSIDER"
ASSET_X = "0xASSET_X"
ASSET_Y = "0xASSET_Y"
FEED_1 = "0xFEED_1"
FEED_2 = "0xFEED_2"
FEED_3 = "0xFEED_3"


# ---------------------------------------------------------------------------
# Feed / registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def feeds() -> dict[str, StaticPriceFeed]:
    return {
        FEED_1: StaticPriceFeed(100, updated_at=1_700_000_000),
        FEED_2: StaticPriceFeed(200, updated_at=1_700_000_000),
        FEED_3: StaticPriceFeed(300, updated_at=1_700_000_000),
    }


@pytest.fixture()
def registry(feeds: dict[str, StaticPriceFeed]) -> PriceRegistry:
    return PriceRegistry(ADMIN, feeds.__getitem__)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_pyth_config() -> PythConfig:
    return PythConfig(
        hermes_url="https://hermes.example.com/v2/updates/price/latest",
        timeout=5,
    )


@pytest.fixture()
def static_app_config() -> AppConfig:
    return AppConfig(
        registry=RegistryConfig(admin=ADMIN, feeds={ASSET_X: FEED_1, ASSET_Y: FEED_2}),
        price_feed=PriceFeedConfig(
            provider="static",
            static=StaticConfig(prices={FEED_1: 100, FEED_2: -5}),
        ),
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    registry:
      admin: "0xADMIN"
      feeds:
        "0xASSET_X": "0xFEED_1"
        "0xASSET_Y": "0xFEED_2"
    price_feed:
      provider: static
      pyth:
        hermes_url: "https://hermes.example.com"
        timeout: 3
      static:
        prices: {"0xFEED_1": 100, "0xFEED_2": 250}
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
