import re
from datetime import date, datetime

from bs4 import Tag

from mls_report.errors import FieldFormatError

DATE_FORMAT = "%m/%d/%Y"
INT_RE = re.compile(r"[+-]?[0-9]+")
DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def node_text(tag: Tag) -> str:
    """Text of tag with runs of whitespace collapsed, inline markup kept joined."""
    return " ".join(tag.get_text().split())


def parse_int(field: str, value: str) -> int:
    text = value.strip()
    if not INT_RE.fullmatch(text):
        raise FieldFormatError(field, value)
    return int(text)


def parse_date(field: str, value: str) -> date:
    """Parse a MM/DD/YYYY date as shown in the report."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError:
        raise FieldFormatError(field, value) from None


def parse_meters(field: str, value: str) -> float:
    text = value.strip()
    if not text:
        return 0.0
    if not DECIMAL_RE.fullmatch(text):
        raise FieldFormatError(field, value)
    return float(text)


def money_to_int(field: str, value: str) -> int:
    """'$1,234,567' -> 1234567"""
    digits = value.replace("$", "").replace(",", "").strip()
    if not INT_RE.fullmatch(digits):
        raise FieldFormatError(field, value)
    return int(digits)


def money_to_str(amount: int) -> str:
    """1234567 -> '$1,234,567', -5000 -> '-$5,000'"""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"
