from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

REQUIRED_FIELDS = ("sheet_url", "user_data_dir", "object_alt")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sheet_url: str = ""
    user_data_dir: str = ""
    object_alt: str = ""
    confirm_timeout_ms: int = 15000
    screenshot_dir: str = "screenshots"
    headless: bool = False
    browser_channel: str | None = "chrome"
    viewport_width: int = 1400
    viewport_height: int = 900
    default_timeout_ms: int = 20000
    navigation_timeout_ms: int = 180000
    post_load_wait_ms: int = 3000
    scope_max_wait_ms: int = 20000
    scope_poll_interval_ms: int = 500
    prompt_seconds: int = 10
    skip_weekends: bool = False
    weekend_timezone: str = "Asia/Seoul"

    def missing_required(self) -> list[str]:
        return [name.upper() for name in REQUIRED_FIELDS if not str(getattr(self, name)).strip()]


def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class RunConfig:
    """Read-only knobs for one click-and-confirm run.

    Built once from ``Settings`` and handed to every component so nothing below
    the entry point reads the environment or the working directory.
    """

    object_alt: str
    confirm_timeout_ms: int = 15000
    screenshot_dir: Path = Path("screenshots")
    scope_max_wait_ms: int = 20000
    scope_poll_interval_ms: int = 500
    cancel_timeout_ms: int = 5000
    click_timeout_ms: int = 2000
    detach_timeout_ms: int = 3000
    settle_ms: int = 300
    overlay_visible_timeout_ms: int = 10000
    click_delay_ms: int = 60
    post_outcome_wait_ms: int = 800

    @property
    def cancel_wait_ms(self) -> int:
        return min(self.cancel_timeout_ms, self.confirm_timeout_ms)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RunConfig":
        return cls(
            object_alt=settings.object_alt.strip(),
            confirm_timeout_ms=settings.confirm_timeout_ms,
            screenshot_dir=Path(settings.screenshot_dir).expanduser().resolve(),
            scope_max_wait_ms=settings.scope_max_wait_ms,
            scope_poll_interval_ms=settings.scope_poll_interval_ms,
        )
