import argparse
import sys
from datetime import date, datetime
from typing import Iterable, Optional

import requests

from .bootstrap import build_scrape_service
from .errors import SaihError
from .logger.app_logger import get_logger, setup_logging
from .service.usecase import OUTPUT_FORMATS, ScrapeOptions
from .utils.config_loader import get_output_path, get_source_url, load_config
from .version import get_version_string

logger = get_logger(__name__)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'日付の形式が正しくありません (YYYY-MM-DD): {value}') from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='saih-hidrosur',
        description='SAIH Hidrosur 貯水池状況の取得ツール (CLI)',
    )
    parser.add_argument('--url', help='取得元URL（省略時は設定ファイルの source.url）')
    parser.add_argument('--output', help='出力ファイルパス（省略時は設定ファイルの output.path）')
    parser.add_argument('--format', choices=sorted(OUTPUT_FORMATS), default=None, help='出力形式')
    parser.add_argument('--updates', action='store_true', help='id・名称・現在貯水量・計測日のみを出力する')
    parser.add_argument('--date', type=_parse_date, default=None, help='計測日 (YYYY-MM-DD、省略時は今日)')
    parser.add_argument('--config', help='設定ファイルのパス')
    parser.add_argument('--version', action='version', version=get_version_string())
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entry point shared by `python -m saih_hidrosur` and the console script."""
    args = _build_parser().parse_args(argv)

    try:
        if args.config:
            setup_logging(args.config)
        config = load_config(args.config)
        output_format = args.format or (config.get('output') or {}).get('format', 'json')
        options = ScrapeOptions(
            url=args.url or get_source_url(config),
            output_path=get_output_path(config, args.output),
            output_format=output_format,
            updates_only=args.updates,
            run_date=args.date,
        )
        result = build_scrape_service(config).run(options)
    except (SaihError, ValueError, OSError, requests.RequestException) as exc:
        logger.error('実行に失敗しました: %s', exc)
        return 1

    print(f'出力ファイル: {result.file_path} ({len(result.records)} 件)')
    return 0


if __name__ == '__main__':
    sys.exit(main())
