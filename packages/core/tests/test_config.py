"""Tests for configuration loading."""

import pytest

from codescope_core.config import api_key_env_var, load_config


@pytest.fixture(autouse=True)
def _clear_keys(monkeypatch):
    for var in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(var, raising=False)


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["provider"] == "gemini"
    assert config["model"] is None
    assert config["storage"] == "file"
    assert config["storage_path"] is None
    assert config["source_language"] == "typescript"


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".codescope.yml"
    cfg.write_text("provider: openai\nstorage: sqlite\nstorage_path: reviews.db\n")
    config = load_config(config_path=str(cfg))
    assert config["provider"] == "openai"
    assert config["storage"] == "sqlite"
    assert config["storage_path"] == "reviews.db"


def test_empty_config_file_uses_defaults(tmp_path):
    cfg = tmp_path / ".codescope.yml"
    cfg.write_text("")
    assert load_config(config_path=str(cfg))["provider"] == "gemini"


def test_non_mapping_config_file_rejected(tmp_path):
    cfg = tmp_path / ".codescope.yml"
    cfg.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(config_path=str(cfg))


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".codescope.yml"
    cfg.write_text("provider: openai\n")
    config = load_config(config_path=str(cfg), cli_overrides={"provider": "anthropic"})
    assert config["provider"] == "anthropic"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".codescope.yml"
    cfg.write_text("provider: openai\n")
    config = load_config(config_path=str(cfg), cli_overrides={"provider": None})
    assert config["provider"] == "openai"


def test_env_vars_loaded(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gem-key")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ant-key")
    monkeypatch.setenv("OPENAI_API_KEY", "oai-key")
    config = load_config(config_path="nonexistent.yml")
    assert config["gemini_api_key"] == "gem-key"
    assert config["anthropic_api_key"] == "ant-key"
    assert config["openai_api_key"] == "oai-key"


def test_gemini_key_fallback_order(monkeypatch):
    monkeypatch.setenv("API_KEY", "generic")
    assert load_config(config_path="nonexistent.yml")["gemini_api_key"] == "generic"
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert load_config(config_path="nonexistent.yml")["gemini_api_key"] == "google"
    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    assert load_config(config_path="nonexistent.yml")["gemini_api_key"] == "gemini"


def test_missing_keys_are_none():
    config = load_config(config_path="nonexistent.yml")
    assert config["gemini_api_key"] is None
    assert config["openai_api_key"] is None


def test_defaults_not_shared_between_loads(tmp_path):
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["provider"] = "openai"
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config_b["provider"] == "gemini"


def test_api_key_env_var():
    assert api_key_env_var("gemini") == "GEMINI_API_KEY"
    assert api_key_env_var("anthropic") == "ANTHROPIC_API_KEY"
