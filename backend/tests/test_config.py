"""Settings tests: defaults and environment overrides."""

from pathlib import Path

from fund_catalog.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATA_FILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.data_file == Path("data/funds_data.json")
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "x.json"))
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:4200"]')
    settings = Settings(_env_file=None)
    assert settings.data_file == tmp_path / "x.json"
    assert settings.cors_origins == ["http://localhost:4200"]


def test_data_file_expands_user(monkeypatch):
    monkeypatch.setenv("DATA_FILE", "~/funds.json")
    assert Settings(_env_file=None).data_file == Path.home() / "funds.json"
