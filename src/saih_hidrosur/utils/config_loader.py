"""設定ファイル読み込みユーティリティ"""

from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigError
from ..logger.app_logger import get_logger
from .path_utils import resolve_project_path


logger = get_logger(__name__)

DEFAULT_SOURCE_URL = "https://www.redhidrosurmedioambiente.es/saih/resumen/embalses"
DEFAULT_OUTPUT_PATH = "outputs/embalsesAndalucia.json"

DEFAULT_HTTP_SETTINGS: Dict[str, float] = {
    "timeout": 30,
    "min_delay": 1.0,
    "delay_step": 0.2,
    "max_delay": 2.0,
    "max_retries": 5,
    "backoff_cap": 10.0,
}


def get_default_config_path() -> Path:
    """Return the canonical config file location."""

    return Path(__file__).resolve().parents[1] / "config.yml"


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load configuration data, tolerating missing files."""

    config_path = Path(config_path) if config_path is not None else get_default_config_path()

    try:
        with config_path.open("r", encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.warning("設定ファイルが見つかりません。デフォルト設定を使用します: %s", config_path)
        return {}
    except yaml.YAMLError as exc:
        logger.error("設定ファイルの解析エラー: %s", exc)
        raise ConfigError(f"設定ファイルの解析に失敗しました: {config_path}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"設定ファイルの形式が不正です: {config_path}")
    logger.info("設定ファイルを読み込みました: %s", config_path)
    return config


def _section(config: Dict[str, Any] | None, name: str) -> Dict[str, Any]:
    if not isinstance(config, dict):
        return {}
    return config.get(name) or {}


def get_source_url(config: Dict[str, Any] | None = None) -> str:
    """取得元ページのURLを返す。"""

    url = _section(config, "source").get("url") or DEFAULT_SOURCE_URL
    if not str(url).startswith(("http://", "https://")):
        raise ConfigError(f"source.url は http(s) のURLで指定してください: {url}")
    return str(url)


def get_http_settings(config: Dict[str, Any] | None = None) -> Dict[str, float]:
    """HTTPクライアントの待機・リトライ設定を返す。"""

    overrides = _section(config, "http")
    settings = dict(DEFAULT_HTTP_SETTINGS)
    for key, default in DEFAULT_HTTP_SETTINGS.items():
        if key not in overrides:
            continue
        try:
            settings[key] = type(default)(overrides[key])
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"http.{key} の値が不正です: {overrides[key]!r}") from exc

    if settings["max_retries"] < 1:
        raise ConfigError(f"http.max_retries は1以上で指定してください: {settings['max_retries']}")
    if settings["timeout"] <= 0:
        raise ConfigError(f"http.timeout は正の値で指定してください: {settings['timeout']}")
    for key in ("min_delay", "delay_step", "max_delay", "backoff_cap"):
        if settings[key] < 0:
            raise ConfigError(f"http.{key} に負の値は指定できません: {settings[key]}")
    return settings


def get_output_path(config: Dict[str, Any] | None = None, override: str | Path | None = None) -> Path:
    """Resolve the output file path with an optional override."""

    target = override if override is not None else _section(config, "output").get("path", DEFAULT_OUTPUT_PATH)
    return resolve_project_path(target)
