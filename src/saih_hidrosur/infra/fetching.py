"""Page fetching for the reservoir summary table."""

from __future__ import annotations

from typing import Optional

import requests

from ..errors import FetchError
from ..logger.app_logger import get_logger
from ..utils.config_loader import get_source_url
from .http_client import ThrottledClient

logger = get_logger(__name__)


def fetch_document(url: Optional[str] = None, client: Optional[ThrottledClient] = None) -> str:
    """貯水池状況ページのHTMLを取得して返す。

    url を省略した場合は設定ファイルの source.url（既定は SAIH Hidrosur の
    resumen/embalses）を使用する。
    """
    target = url or get_source_url()
    client = client or ThrottledClient()
    logger.info("ページを取得します: %s", target)
    try:
        response = client.send(target)
    except requests.RequestException as exc:
        raise FetchError(target, str(exc)) from exc

    # サーバーが文字コードを宣言しない場合は本文から推定する
    if response.encoding is None or response.encoding.lower() == "iso-8859-1":
        response.encoding = response.apparent_encoding
    return response.text
