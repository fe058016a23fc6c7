import os

import pytest

from campuscoffee.config import APIConfig, CampusCoffeeConfig, get_config, load_config, validate_config
from campuscoffee.models import CampusType

ENV_VARS = (
    "CAMPUSCOFFEE_OSM_BASE_URL",
    "CAMPUSCOFFEE_CONNECT_TIMEOUT",
    "CAMPUSCOFFEE_READ_TIMEOUT",
    "CAMPUSCOFFEE_USER_AGENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep load_dotenv() from picking up a stray .env
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = get_config()
    assert config.api.osm_base_url == "https://www.openstreetmap.org/api/0.6"
    assert config.api.connect_timeout == 10.0
    assert config.api.read_timeout == 10.0
    assert config.importer.default_campus == CampusType.ALTSTADT
    assert config.importer.campus_by_postal_code[69120] == CampusType.INF


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("CAMPUSCOFFEE_OSM_BASE_URL", "http://osm.local/api/0.6/")
    monkeypatch.setenv("CAMPUSCOFFEE_CONNECT_TIMEOUT", "3")
    monkeypatch.setenv("CAMPUSCOFFEE_READ_TIMEOUT", "20.5")
    monkeypatch.setenv("CAMPUSCOFFEE_USER_AGENT", "test-agent")

    config = load_config()

    assert config.api.osm_base_url == "http://osm.local/api/0.6"
    assert config.api.connect_timeout == 3.0
    assert config.api.read_timeout == 20.5
    assert config.api.user_agent == "test-agent"


def test_load_config_reads_env_file(tmp_path):
    env_file = tmp_path / "settings.env"
    env_file.write_text("CAMPUSCOFFEE_READ_TIMEOUT=42\n", encoding="utf-8")

    try:
        config = load_config(str(env_file))
    finally:
        # load_dotenv writes straight to os.environ
        os.environ.pop("CAMPUSCOFFEE_READ_TIMEOUT", None)

    assert config.api.read_timeout == 42.0


def test_load_config_reports_non_numeric_timeouts(monkeypatch):
    monkeypatch.setenv("CAMPUSCOFFEE_CONNECT_TIMEOUT", "ten")
    monkeypatch.setenv("CAMPUSCOFFEE_READ_TIMEOUT", "-1")

    with pytest.raises(ValueError) as exc_info:
        load_config()

    message = str(exc_info.value)
    assert message.startswith("Configuration validation failed:")
    assert "CAMPUSCOFFEE_CONNECT_TIMEOUT must be a number of seconds, got 'ten'" in message
    assert "api.read_timeout must be positive" in message


def test_validate_config_lists_all_errors():
    config = CampusCoffeeConfig(api=APIConfig(osm_base_url="", connect_timeout=0, read_timeout=-1))

    with pytest.raises(ValueError) as exc_info:
        validate_config(config)

    message = str(exc_info.value)
    assert "osm_base_url" in message
    assert "connect_timeout" in message
    assert "read_timeout" in message
