from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def local_now(timezone: str, now: Optional[datetime] = None) -> datetime:
    zone = ZoneInfo(timezone)
    if now is None:
        return datetime.now(zone)
    return now.astimezone(zone)


def is_weekend(timezone: str = "Asia/Seoul", now: Optional[datetime] = None) -> bool:
    return local_now(timezone, now).weekday() >= 5


def local_now_string(timezone: str = "Asia/Seoul", now: Optional[datetime] = None) -> str:
    return local_now(timezone, now).strftime("%Y-%m-%d (%a) %H:%M:%S %Z")
