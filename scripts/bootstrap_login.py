import asyncio
import sys

from sheet_clicker.agent.browser import BrowserSession
from sheet_clicker.config import Settings, get_settings

LOGIN_URL = "https://accounts.google.com/"


async def bootstrap(settings: Settings) -> None:
    async with BrowserSession(settings, create_profile=True) as browser:
        await browser.goto(LOGIN_URL, wait_ms=0)
        print("Browser is open. Sign in, then close the window to save the session.")
        await browser.wait_until_closed()


def main() -> int:
    settings = get_settings()
    if not settings.user_data_dir.strip():
        print("ERROR: USER_DATA_DIR is not set in .env", file=sys.stderr)
        return 1

    print("Launching Chrome with the persistent profile; sign in to your Google account.")
    try:
        asyncio.run(bootstrap(settings))
    except Exception as exc:  # noqa: BLE001
        print(f"Bootstrap login failed: {exc}", file=sys.stderr)
        return 1
    print(f"Session saved under {settings.user_data_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
