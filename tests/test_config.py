from datetime import datetime, timezone
from pathlib import Path

from sheet_clicker.agent.schedule import is_weekend
from sheet_clicker.config import RunConfig, Settings


def test_missing_required_lists_empty_fields(monkeypatch):
    monkeypatch.delenv("SHEET_URL", raising=False)
    monkeypatch.delenv("USER_DATA_DIR", raising=False)
    monkeypatch.setenv("OBJECT_ALT", "  ")

    settings = Settings(_env_file=None)

    assert settings.missing_required() == ["SHEET_URL", "USER_DATA_DIR", "OBJECT_ALT"]


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SHEET_URL", "https://docs.google.com/spreadsheets/d/abc")
    monkeypatch.setenv("USER_DATA_DIR", "/tmp/profile")
    monkeypatch.setenv("OBJECT_ALT", "SheetBot")
    monkeypatch.setenv("CONFIRM_TIMEOUT_MS", "4000")

    settings = Settings(_env_file=None)

    assert settings.missing_required() == []
    assert settings.confirm_timeout_ms == 4000


def test_run_config_from_settings(tmp_path):
    settings = Settings(
        _env_file=None,
        sheet_url="https://example.com",
        user_data_dir=str(tmp_path),
        object_alt="  SheetBot ",
        confirm_timeout_ms=3000,
        screenshot_dir=str(tmp_path / "shots"),
    )

    config = RunConfig.from_settings(settings)

    assert config.object_alt == "SheetBot"
    assert config.confirm_timeout_ms == 3000
    assert config.screenshot_dir == Path(tmp_path / "shots").resolve()
    assert config.cancel_wait_ms == 3000


def test_cancel_wait_is_capped():
    assert RunConfig(object_alt="x", confirm_timeout_ms=15000).cancel_wait_ms == 5000


def test_weekend_uses_target_timezone():
    # Friday 20:00 UTC is already Saturday in Seoul.
    friday_evening = datetime(2026, 10, 16, 20, 0, tzinfo=timezone.utc)

    assert is_weekend("Asia/Seoul", friday_evening) is True
    assert is_weekend("UTC", friday_evening) is False
