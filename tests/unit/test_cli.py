"""Unit tests for CLI argument parsing."""
from __future__ import annotations

import pytest

from price_registry.cli import build_parser


class TestBuildParser:
    def test_price_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["price", "0xASSET"])
        assert args.command == "price"
        assert args.asset == "0xASSET"

    def test_price_requires_asset(self) -> None:
        parser = build_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["price"])

    def test_prices_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["prices"])
        assert args.command == "prices"

    def test_feeds_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["feeds"])
        assert args.command == "feeds"

    def test_config_flag(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["--config", "/tmp/c.yaml", "feeds"])
        assert args.config == "/tmp/c.yaml"

    def test_log_level_flag(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["--log-level", "DEBUG", "feeds"])
        assert args.log_level == "DEBUG"

    def test_no_command(self) -> None:
        parser = build_parser()
        args = parser.parse_args([])
        assert args.command is None
