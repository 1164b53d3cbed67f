"""Shared pytest fixtures for tldserve tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tldserve.config import Settings, SiteConfig
from tldserve.main import create_app


def make_dirs(root: Path, *names: str) -> Path:
    """Create ``root`` and the given subdirectories inside it."""
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).mkdir()
    return root


@pytest.fixture
def sites_root(tmp_path: Path) -> Path:
    """A project root with a couple of sites."""
    root = make_dirs(tmp_path / "Sites", "Blog", "shop", "api.shop")
    (root / "Blog" / "index.html").write_text("<h1>Blog</h1>")
    (root / "Blog" / "style.css").write_text("body { color: red; }")
    (root / "shop" / "docs").mkdir()
    (root / "shop" / "docs" / "intro.txt").write_text("intro")
    return root


@pytest.fixture
def default_site(tmp_path: Path) -> Path:
    root = make_dirs(tmp_path / "default")
    (root / "index.html").write_text("<h1>Default</h1>")
    return root


@pytest.fixture
def site_config(sites_root: Path) -> SiteConfig:
    return SiteConfig(tld="test", paths=[str(sites_root)])


@pytest.fixture
def client(site_config: SiteConfig) -> TestClient:
    """Client for an app serving ``sites_root`` with directory listings on."""
    app = create_app(settings=Settings(directory_listing=True), site_config=site_config)
    return TestClient(app)
