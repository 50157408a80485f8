"""プロジェクトパスの解決ユーティリティ。"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable


_DEFAULT_MARKERS = ("pyproject.toml", ".git")


def get_project_root(markers: Iterable[str] = _DEFAULT_MARKERS) -> Path:
    """プロジェクトルートディレクトリを返す。

    凍結時は実行ファイルの親、それ以外は pyproject.toml などを上位に探す。
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    current = Path(__file__).resolve().parent
    for directory in [current, *current.parents]:
        if any((directory / marker).exists() for marker in markers):
            return directory

    # src/saih_hidrosur/utils からの相対位置
    return Path(__file__).resolve().parents[3]


def resolve_project_path(target: str | Path) -> Path:
    """相対パスならプロジェクトルート基準の絶対パスに変換する。"""
    path = Path(target)
    if not path.is_absolute():
        path = get_project_root() / path
    return path
