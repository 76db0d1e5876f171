"""Shared fixtures: a small built asset tree on disk."""

import pytest


@pytest.fixture
def build_dir(tmp_path):
    """Create a static root resembling a front-end build output."""
    build = tmp_path / "build"
    build.mkdir()

    (build / "index.html").write_text("<h1>App</h1>")
    (build / "app.js").write_text("console.log('app');")
    (build / "style.css").write_text("body { margin: 0; }")
    (build / "data.bin").write_bytes(b"\x00\x01\x02\x03")
    (build / "my file.txt").write_text("spaced")

    assets = build / "assets"
    assets.mkdir()
    (assets / "logo.svg").write_text("<svg></svg>")

    docs = build / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")

    # Outside the sandbox
    (tmp_path / "secret.txt").write_text("top secret")

    return build
