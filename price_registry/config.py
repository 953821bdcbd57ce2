"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .models import ZERO_ID

logger = logging.getLogger(__name__)

PROVIDERS = ("pyth", "static")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RegistryConfig:
    admin: str = ""
    feeds: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PythConfig:
    hermes_url: str = "https://hermes.pyth.network/v2/updates/price/latest"
    timeout: int = 10


@dataclass(frozen=True)
class StaticConfig:
    prices: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PriceFeedConfig:
    provider: str = "pyth"
    pyth: PythConfig = field(default_factory=PythConfig)
    static: StaticConfig = field(default_factory=StaticConfig)


@dataclass(frozen=True)
class AppConfig:
    registry: RegistryConfig = field(default_factory=RegistryConfig)
    price_feed: PriceFeedConfig = field(default_factory=PriceFeedConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _require_str(value: Any, what: str) -> str:
    # YAML reads an unquoted 0x... scalar as an int; refuse rather than stringify.
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a quoted string in YAML, got {value!r}")
    return value


def _build_registry(raw: dict[str, Any]) -> RegistryConfig:
    feeds: dict[str, str] = {}
    for asset, feed in (raw.get("feeds") or {}).items():
        asset = _require_str(asset, f"Asset id {asset!r}")
        feeds[asset] = _require_str(feed, f"Feed id for asset '{asset}'")
    return RegistryConfig(
        admin=_require_str(raw.get("admin", ""), "Registry admin"),
        feeds=feeds,
    )


def _build_price_feed(raw: dict[str, Any]) -> PriceFeedConfig:
    pyth_raw = raw.get("pyth") or {}
    static_raw = raw.get("static") or {}
    return PriceFeedConfig(
        provider=raw.get("provider", "pyth"),
        pyth=PythConfig(
            hermes_url=pyth_raw.get("hermes_url", PythConfig.hermes_url),
            timeout=int(pyth_raw.get("timeout", PythConfig.timeout)),
        ),
        static=StaticConfig(
            prices={
                _require_str(k, f"Static price feed id {k!r}"): int(v)
                for k, v in (static_raw.get("prices") or {}).items()
            },
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        registry=_build_registry(raw.get("registry") or {}),
        price_feed=_build_price_feed(raw.get("price_feed") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.registry.admin:
        raise ValueError("Registry admin must be configured")

    for asset, feed in cfg.registry.feeds.items():
        if not feed or feed == ZERO_ID:
            raise ValueError(f"Asset '{asset}' has no feed id")

    provider = cfg.price_feed.provider
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown price feed provider '{provider}'")

    if provider == "static":
        for asset, feed in cfg.registry.feeds.items():
            if feed not in cfg.price_feed.static.prices:
                raise ValueError(
                    f"Asset '{asset}' references feed '{feed}' with no static price"
                )
