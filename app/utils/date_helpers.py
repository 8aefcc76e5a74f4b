from datetime import datetime, date
from typing import Optional

import pytz


def today_in_timezone(timezone: str = "UTC", now: Optional[datetime] = None) -> date:
    """Date du jour dans le fuseau donné (les datetimes naïfs sont en UTC)"""
    tz = pytz.timezone(timezone)
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        now = pytz.utc.localize(now)
    return now.astimezone(tz).date()
