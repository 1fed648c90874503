"""Shared pytest fixtures and test helpers for argval tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from argval.config.settings import ArgvalSettings


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from real argval.toml files and ARGVAL_* env vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARGVAL_CONFIG", raising=False)
    for name in ("ARGVAL_JSON_OUTPUT", "ARGVAL_VERBOSE", "ARGVAL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ArgvalSettings:
    """Default settings with no TOML file in reach."""
    return ArgvalSettings.from_cli(start=tmp_path)


class FakeMxResolver:
    """Records the domains it was asked about; answers from a fixed set."""

    def __init__(self, domains_with_mx: set[str] | None = None) -> None:
        self.domains_with_mx = domains_with_mx or set()
        self.calls: list[str] = []

    def __call__(self, domain: str) -> bool:
        self.calls.append(domain)
        return domain in self.domains_with_mx


@pytest.fixture
def mx_resolver() -> FakeMxResolver:
    """MX resolver that knows only example.com."""
    return FakeMxResolver({"example.com"})


@pytest.fixture
def make_mx_resolver() -> Callable[..., FakeMxResolver]:
    return FakeMxResolver
