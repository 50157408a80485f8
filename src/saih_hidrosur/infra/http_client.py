"""HTTP client for the SAIH Hidrosur site."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

import requests

from ..telemetry import TelemetryEvent, TelemetryService

# ブラウザアクセスに見せるための固定ヘッダー
DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/129.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;"
        "q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "es-ES,es;q=0.9,en;q=0.8",
    "Connection": "close",
}

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass(frozen=True)
class RetryPolicy:
    min_delay: float = 1.0
    step: float = 0.2
    max_delay: float = 2.0
    max_retries: int = 5
    backoff_cap: float = 10.0
    retryable_status: frozenset[int] = field(default_factory=lambda: RETRYABLE_STATUS)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "RetryPolicy":
        """config_loader.get_http_settings() の結果からポリシーを組み立てる。"""
        return cls(
            min_delay=float(settings["min_delay"]),
            step=float(settings["delay_step"]),
            max_delay=float(settings["max_delay"]),
            max_retries=int(settings["max_retries"]),
            backoff_cap=float(settings["backoff_cap"]),
        )


class ThrottledClient:
    """待機・リトライ・テレメトリを一元管理するHTTPクライアント。"""

    def __init__(
        self,
        retry_policy: Optional[RetryPolicy] = None,
        telemetry: Optional[TelemetryService] = None,
        *,
        default_headers: Optional[Dict[str, str]] = None,
        request_timeout: int = 30,
        request_func: Optional[Callable[[str, Dict[str, str], int], requests.Response]] = None,
        sleep_func: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._headers = {**DEFAULT_HEADERS, **(default_headers or {})}
        self._policy = retry_policy or RetryPolicy()
        self._telemetry = telemetry or TelemetryService()
        self._timeout = request_timeout
        self._request = request_func or self._default_request
        self._sleep = sleep_func or time.sleep
        self._lock = threading.Lock()
        self._request_counter = 0

    def _default_request(self, url: str, headers: Dict[str, str], timeout: int) -> requests.Response:
        return requests.get(url, headers=headers, timeout=timeout)

    def _reserve_delay(self) -> float:
        """同じクライアントでの2回目以降の send 前に挟む待機秒数を返す。

        1回の実行では初回のみで待機は発生しないが、定期取得などでクライアントを
        使い回す場合やスレッド間で共有する場合に間隔を確保する。
        """
        with self._lock:
            index = self._request_counter
            self._request_counter += 1
        if index == 0:
            return 0.0
        delay = self._policy.min_delay + self._policy.step * (index - 1)
        return min(delay, self._policy.max_delay)

    def _emit(self, kind: str, **payload: object) -> None:
        self._telemetry.emit(TelemetryEvent(kind=kind, payload=payload))

    def send(self, url: str, headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """
        URLをGETし、一時的な失敗時にはバックオフを挟んで再試行する。

        :param url: アクセス先URL
        :param headers: 追加または上書きしたいヘッダー
        :raises requests.RequestException: 再試行上限まで失敗した場合
        """
        delay = self._reserve_delay()
        if delay:
            self._sleep(delay)

        merged_headers = {**self._headers, **(headers or {})}
        last_exc: Optional[Exception] = None
        for attempt in range(1, self._policy.max_retries + 1):
            self._emit("http.start", url=url, attempt=attempt)
            try:
                response = self._request(url, merged_headers, self._timeout)
            except requests.RequestException as exc:
                last_exc = exc
                if attempt < self._policy.max_retries:
                    self._handle_retry(attempt, "exception", str(exc))
                continue

            if response.status_code in self._policy.retryable_status and attempt < self._policy.max_retries:
                self._handle_retry(attempt, "status", response.status_code)
                continue

            try:
                response.raise_for_status()
            except requests.HTTPError as exc:
                self._emit("http.failure", url=url, error=str(exc))
                raise

            self._emit("http.success", url=url, status=response.status_code)
            return response

        self._emit("http.failure", url=url, error=str(last_exc))
        if last_exc:
            raise last_exc
        raise RuntimeError("HTTP request failed without response")

    def _handle_retry(self, attempt: int, reason: str, detail: object) -> None:
        self._emit("http.retry", reason=reason, detail=detail, attempt=attempt)
        backoff = min(self._policy.min_delay * (2 ** (attempt - 1)), self._policy.backoff_cap)
        self._sleep(backoff)
