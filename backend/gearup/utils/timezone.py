"""
Timezone Utilities - Centralized local-calendar handling
"""
from datetime import datetime, date
import pytz

from gearup.core.config import settings
from gearup.core.constants import DATE_FORMAT, TIMESTAMP_FORMAT


# Application timezone
LOCAL_TZ = pytz.timezone(settings.TIMEZONE)


def get_local_tz():
    """
    Get the configured local timezone object

    Returns:
        pytz timezone for GEARUP_TIMEZONE
    """
    return LOCAL_TZ


def get_local_now() -> datetime:
    """
    Get current datetime in the local timezone

    Returns:
        Timezone-aware datetime object
    """
    return datetime.now(LOCAL_TZ)


def get_local_today_date() -> date:
    """Get today's date in the local timezone"""
    return get_local_now().date()


def today_key(now: datetime = None) -> str:
    """
    Canonical zero-padded YYYY-MM-DD key for the current local day.
    Keys sort and compare correctly as plain strings.
    """
    now = now or get_local_now()
    return now.strftime(DATE_FORMAT)


def minute_of_day(now: datetime = None) -> int:
    """Minutes since local midnight, 0..1439"""
    now = now or get_local_now()
    return now.hour * 60 + now.minute


def format_timestamp(now: datetime) -> str:
    """Format a datetime as the stored local timestamp (no zone suffix)"""
    return now.strftime(TIMESTAMP_FORMAT)
