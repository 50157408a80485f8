from __future__ import annotations

from functools import partial
from typing import Any, Dict, Optional

from .infra.fetching import fetch_document
from .infra.http_client import RetryPolicy, ThrottledClient
from .logger.app_logger import get_logger
from .service.usecase import ScrapeService
from .telemetry import TelemetryService, logging_sink
from .utils.config_loader import get_http_settings


def build_scrape_service(config: Optional[Dict[str, Any]] = None) -> ScrapeService:
    """設定から HTTP クライアントとテレメトリを組み立てた ScrapeService を返す。"""
    telemetry = TelemetryService()
    telemetry.add_sink(logging_sink(get_logger("saih_hidrosur.telemetry")))

    settings = get_http_settings(config)
    client = ThrottledClient(
        RetryPolicy.from_settings(settings),
        telemetry,
        request_timeout=int(settings["timeout"]),
    )
    return ScrapeService(fetcher=partial(fetch_document, client=client), telemetry=telemetry)
