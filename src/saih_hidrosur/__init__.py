"""SAIH Hidrosur の貯水池状況テーブル抽出パッケージ。"""

from .version import __version__

__all__ = ["__version__"]
