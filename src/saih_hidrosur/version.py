"""バージョン情報管理モジュール"""

# バージョン情報
__version__ = "0.1.0"
__version_info__ = (0, 1, 0)

# アプリケーション情報
__app_name__ = "SAIH Hidrosur Scraper"
__description__ = "SAIH Hidrosur の貯水池状況を取得・構造化するツール"
__copyright__ = "2025"


def get_version_string():
    """詳細なバージョン情報文字列を取得する"""
    return f"{__app_name__} v{__version__} ({__copyright__})"
