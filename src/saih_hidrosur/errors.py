"""Exception hierarchy for saih_hidrosur."""


class SaihError(Exception):
    """パッケージ内で送出する例外の基底クラス"""
    pass


class ConfigError(SaihError):
    """設定エラー"""
    pass


class FetchError(SaihError):
    """ページ取得に失敗したときに投げる例外"""

    def __init__(self, url: str, message: str):
        super().__init__(f"{url} の取得に失敗しました: {message}")
        self.url = url
