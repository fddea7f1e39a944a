"""
Configuration loading tests.
"""

import pytest

from tmdb_catalog.config import Config

ENV_VARS = [
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "TMDB_REQUEST_TIMEOUT",
    "CATALOG_MAX_WORKERS",
    "CATALOG_CACHE_SIZE",
    "CATALOG_LOG_DIR",
    "ALLOWED_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return env_file


def test_missing_key_is_not_an_error(clean_env):
    config = Config.from_env(str(clean_env))

    assert config.api_key is None
    assert config.has_credential is False
    assert config.base_url == "https://api.themoviedb.org/3"


def test_values_from_env(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("TMDB_API_KEY", "abc")
    monkeypatch.setenv("TMDB_BASE_URL", "https://proxy.local/3/")
    monkeypatch.setenv("CATALOG_MAX_WORKERS", "8")
    monkeypatch.setenv("CATALOG_CACHE_SIZE", "64")
    monkeypatch.setenv("CATALOG_LOG_DIR", str(tmp_path / "l"))
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

    config = Config.from_env(str(clean_env))

    assert config.has_credential is True
    assert config.base_url == "https://proxy.local/3"
    assert config.max_workers == 8
    assert config.cache_max_entries == 64
    assert config.log_dir == tmp_path / "l"
    assert config.allowed_origins == ["http://a.test", "http://b.test"]
    assert config.get_headers() == {
        "Authorization": "Bearer abc",
        "accept": "application/json",
    }


def test_values_from_dotenv_file(clean_env):
    clean_env.write_text("TMDB_API_KEY=from-file\n")

    assert Config.from_env(str(clean_env)).api_key == "from-file"


def test_malformed_number(clean_env, monkeypatch):
    monkeypatch.setenv("CATALOG_MAX_WORKERS", "many")

    with pytest.raises(ValueError):
        Config.from_env(str(clean_env))


def test_cache_size_has_a_floor(clean_env, monkeypatch):
    monkeypatch.setenv("CATALOG_CACHE_SIZE", "0")

    assert Config.from_env(str(clean_env)).cache_max_entries == 1
