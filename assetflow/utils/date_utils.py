"""Date manipulation utilities"""

import calendar
from datetime import date

from dateutil.relativedelta import relativedelta


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month"""
    return calendar.monthrange(year, month)[1]


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to the last day when the day does not exist"""
    return from_date + relativedelta(months=months)


def add_years(from_date: date, years: int) -> date:
    """Add calendar years (29 Feb lands on 28 Feb in non-leap years)"""
    return from_date + relativedelta(years=years)


def month_start(day: date) -> date:
    """First day of the month containing day"""
    return day.replace(day=1)


def format_month_label(day: date) -> str:
    """Short month label used by the forecast view, e.g. 'Mar 2025'"""
    return day.strftime("%b %Y")
