from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from ..domain.models import ReservoirRecord
from ..exporter import export_csv, export_json
from ..parser import extract
from ..telemetry import TelemetryService
from .mapper import to_update_records

OUTPUT_FORMATS = {"json", "csv"}


@dataclass(frozen=True)
class ScrapeOptions:
    url: str
    output_path: Path
    output_format: str = "json"
    updates_only: bool = False
    run_date: Optional[date] = None

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_formatは{sorted(OUTPUT_FORMATS)}のいずれかを指定してください")


@dataclass(frozen=True)
class ScrapeResult:
    file_path: Path
    records: Sequence[ReservoirRecord]


class DocumentFetcher(Protocol):
    def __call__(self, url: str) -> str:
        ...


Extractor = Callable[[str], List[ReservoirRecord]]


class ScrapeService:
    """取得 → 抽出 → 変換 → 出力 を1回分実行する。"""

    def __init__(
        self,
        fetcher: DocumentFetcher,
        telemetry: TelemetryService,
        extractor: Extractor = extract,
    ) -> None:
        self._fetch = fetcher
        self._telemetry = telemetry
        self._extract = extractor

    def run(self, options: ScrapeOptions) -> ScrapeResult:
        self._telemetry.emit_event("run.start", url=options.url, format=options.output_format)
        html = self._fetch(options.url)
        records = self._extract(html)
        if not records:
            # 0件は正常な結果として出力する
            self._telemetry.emit_event("run.empty", url=options.url)

        if options.updates_only:
            items = to_update_records(records, options.run_date)
        else:
            items = records

        if options.output_format == "csv":
            file_path = export_csv(items, options.output_path, updates=options.updates_only)
        else:
            file_path = export_json(items, options.output_path)

        self._telemetry.emit_event("run.success", file_path=str(file_path), count=len(records))
        return ScrapeResult(file_path=file_path, records=records)
