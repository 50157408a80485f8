import pytest

from saih_hidrosur.errors import ConfigError
from saih_hidrosur.utils import config_loader
from saih_hidrosur.utils.path_utils import get_project_root


def test_packaged_config_is_loaded():
    config = config_loader.load_config()

    assert config_loader.get_source_url(config) == config_loader.DEFAULT_SOURCE_URL
    assert config["output"]["format"] == "json"


def test_missing_file_returns_empty_config(tmp_path):
    assert config_loader.load_config(tmp_path / "missing.yml") == {}


def test_invalid_yaml_raises_config_error(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("source: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        config_loader.load_config(path)


def test_non_mapping_yaml_raises_config_error(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        config_loader.load_config(path)


def test_source_url_must_be_http():
    with pytest.raises(ConfigError):
        config_loader.get_source_url({"source": {"url": "ftp://example.com"}})


def test_http_settings_override_and_defaults():
    settings = config_loader.get_http_settings({"http": {"max_retries": "2", "timeout": 5}})

    assert settings["max_retries"] == 2
    assert settings["timeout"] == 5
    assert settings["backoff_cap"] == config_loader.DEFAULT_HTTP_SETTINGS["backoff_cap"]


def test_http_settings_reject_bad_values():
    with pytest.raises(ConfigError):
        config_loader.get_http_settings({"http": {"min_delay": "soon"}})


def test_output_path_resolution(tmp_path):
    relative = config_loader.get_output_path({"output": {"path": "outputs/x.json"}})
    assert relative == get_project_root() / "outputs" / "x.json"

    override = config_loader.get_output_path({}, tmp_path / "y.json")
    assert override == tmp_path / "y.json"


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_retries": 0},
        {"max_retries": -2},
        {"timeout": 0},
        {"min_delay": -1},
        {"backoff_cap": -0.5},
    ],
)
def test_http_settings_reject_out_of_range_values(overrides):
    with pytest.raises(ConfigError):
        config_loader.get_http_settings({"http": overrides})
