from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "assets" / "img").mkdir(parents=True)
    (src / "empty").mkdir()
    (src / "index.html").write_text("<html></html>", encoding="utf-8")
    (src / "assets" / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (src / "assets" / "img" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    return src


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out
