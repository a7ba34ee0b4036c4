"""Unit tests for config.py"""

import pytest

from mdimport.config import INTRO_TEXT, load_config


@pytest.fixture(autouse=True)
def isolate(tmp_path, monkeypatch):
    """Run from an empty directory with no MDIMPORT_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("DB_URL", "ASSET_ROOT", "DOMAIN", "DOMAIN_PASSWORD", "LOG_LEVEL"):
        monkeypatch.delenv(f"MDIMPORT_{name}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.db_url == "sqlite:///mdimport.db"
    assert settings.asset_root == "static"
    assert settings.domain is None
    assert settings.domain_password == "123"
    assert settings.intro_text == INTRO_TEXT


def test_load_config_uses_env_db_url(monkeypatch):
    """MDIMPORT_DB_URL env var is picked up by load_config."""
    monkeypatch.setenv("MDIMPORT_DB_URL", "sqlite:///env.db")
    assert load_config().db_url == "sqlite:///env.db"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDIMPORT_ASSET_ROOT takes precedence over config.yaml asset_root."""
    (tmp_path / "config.yaml").write_text("asset_root: 'site/static'\n")
    monkeypatch.setenv("MDIMPORT_ASSET_ROOT", "/srv/static")
    assert load_config().asset_root == "/srv/static"


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml are applied when no env var overrides them."""
    (tmp_path / "config.yaml").write_text("domain: travel\ndomain_password: s3cret\n")
    settings = load_config()
    assert settings.domain == "travel"
    assert settings.domain_password == "s3cret"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDIMPORT_DOMAIN", "env-domain")
    assert load_config(overrides={"domain": "cli-domain"}).domain == "cli-domain"
    assert load_config(overrides={"domain": None}).domain == "env-domain"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_unknown_log_level(monkeypatch):
    """log_level is restricted to standard level names."""
    monkeypatch.setenv("MDIMPORT_LOG_LEVEL", "CHATTY")
    with pytest.raises(ValueError):
        load_config()
