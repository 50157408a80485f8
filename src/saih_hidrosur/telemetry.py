from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class TelemetryEvent:
    kind: str
    payload: dict[str, Any]


class TelemetryService:
    """HTTP取得や実行状況のイベントを登録済みのシンクへ配信する。"""

    def __init__(self) -> None:
        self._sinks: list[Callable[[TelemetryEvent], None]] = []

    def add_sink(self, sink: Callable[[TelemetryEvent], None]) -> None:
        self._sinks.append(sink)

    def emit(self, event: TelemetryEvent) -> None:
        for sink in list(self._sinks):
            sink(event)

    def emit_event(self, kind: str, **payload: Any) -> None:
        self.emit(TelemetryEvent(kind=kind, payload=payload))


_WARNING_KINDS = {"http.retry", "http.failure", "run.empty"}


def logging_sink(logger: logging.Logger) -> Callable[[TelemetryEvent], None]:
    """イベントをロガーへ書き出すシンクを返す。"""

    def _sink(event: TelemetryEvent) -> None:
        level = logging.WARNING if event.kind in _WARNING_KINDS else logging.DEBUG
        details = ", ".join(f"{key}={value}" for key, value in event.payload.items())
        logger.log(level, "%s %s", event.kind, details)

    return _sink
