import argparse
import logging
import sys
from pathlib import Path

from sheet_clicker.agent.orchestrator import run_click_and_confirm_blocking
from sheet_clicker.agent.prompt import ask
from sheet_clicker.agent.schedule import is_weekend, local_now_string
from sheet_clicker.config import get_settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Click a labelled object in a Google Sheet and resolve its popup")
    parser.add_argument("--yes", action="store_true", help="Skip the countdown prompt before the run")
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics at DEBUG level")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    settings = get_settings()
    missing = settings.missing_required()
    if missing:
        print(f"ERROR: set {', '.join(missing)} in .env", file=sys.stderr)
        return 1

    if settings.skip_weekends and is_weekend(settings.weekend_timezone):
        print(f"[{local_now_string(settings.weekend_timezone)}] weekend detected, exiting without running")
        return 0

    if not Path(settings.user_data_dir).expanduser().exists():
        print(f"ERROR: USER_DATA_DIR does not exist: {settings.user_data_dir}", file=sys.stderr)
        print("Create the session first with scripts/bootstrap_login.py", file=sys.stderr)
        return 1

    if not args.yes:
        try:
            proceed = ask(seconds=settings.prompt_seconds)
        except KeyboardInterrupt:
            return 130
        if not proceed:
            print("Stopped at user request (Y).")
            return 0

    print("Running.")
    try:
        outcome = run_click_and_confirm_blocking(settings)
    except Exception as exc:  # noqa: BLE001
        print(f"Run failed: {exc}", file=sys.stderr)
        return 1

    print(f"Outcome: {outcome.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
