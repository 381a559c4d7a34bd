"""全局 pytest 配置 -- 临时 specification 目录 fixture"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def specs_dir(tmp_path: Path) -> Path:
    """提供临时 specification 根目录（含 calendars/ 与 modules/）"""
    root = tmp_path / "specs"
    (root / "calendars").mkdir(parents=True, exist_ok=True)
    (root / "modules").mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def write_spec(specs_dir: Path) -> Callable[[str, dict[str, Any]], Path]:
    """将文档写入 specs_dir 下对应子目录，返回文件路径"""

    def _write(name: str, document: dict[str, Any]) -> Path:
        subdir = "calendars" if document.get("kind") == "calendar" else "modules"
        path = specs_dir / subdir / f"{name}.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
