"""
Expiry helpers for decoded medication codes.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta


VALID = "Valid"
NEAR_EXPIRY = "Near Expiry"
EXPIRED = "Expired"
UNKNOWN = "Unknown"


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def expiry_status(expiry: Optional[str], near_months: int, today: Optional[date] = None) -> str:
    """
    Returns: Valid, Near Expiry, Expired, Unknown

    GS1 day 00 means "end of month" and is read as the month's last day.
    """
    if expiry and expiry.endswith("-00"):
        month_start = parse_iso_date(expiry[:-2] + "01")
        dt = month_start + relativedelta(day=31) if month_start else None
    else:
        dt = parse_iso_date(expiry)
    if not dt:
        return UNKNOWN
    today = today or date.today()
    if dt < today:
        return EXPIRED
    threshold = today + relativedelta(months=near_months)
    if dt <= threshold:
        return NEAR_EXPIRY
    return VALID
