from argparse import ArgumentTypeError
from datetime import datetime
from typing import TYPE_CHECKING

import pytz

if TYPE_CHECKING:
    from governor.ctl.settings import CtlSettings
    from typing import Optional

DATE_FORMAT = "%Y-%m-%d"


def argparse_validate_date(s):
    # type: (str) -> datetime
    """Parse a YYYY-MM-DD argument as midnight UTC, the way expiry columns are stored."""
    try:
        return datetime.strptime(s, DATE_FORMAT)
    except ValueError:
        raise ArgumentTypeError("not a valid date: '{}'".format(s))


def format_expiry(settings, expires_at):
    # type: (CtlSettings, Optional[datetime]) -> str
    if expires_at is None:
        return "never"
    if expires_at.tzinfo is None:
        expires_at = pytz.utc.localize(expires_at)
    return expires_at.astimezone(settings.timezone).strftime(settings.date_format)
