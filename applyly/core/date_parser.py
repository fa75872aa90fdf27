"""
Date parsing for resume entries.

parse_month_year() reads one date expression ("Jan 2020", "06/2018", "2020-01",
"Fall 2019", "present"); extract_date_range() finds the first range in free
text and falls back to a lone year.
"""

import re
from typing import Tuple

from applyly.core.schemas import PRESENT, DateRange


MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MIN_YEAR = 1930
MAX_YEAR = 2040

PRESENT_WORDS = {"present", "current", "now", "ongoing", "today"}
PRESENT_ABBREV_RE = re.compile(r"^(?:p|c|now)\.?$")

MONTH_NAME_RE = re.compile(
    r"\b(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\b\.?",
    re.IGNORECASE,
)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
MM_YYYY_RE = re.compile(r"(\d{1,2})/(\d{4})")
YYYY_MM_RE = re.compile(r"(\d{4})-(\d{1,2})\b")

# Checked in order when no explicit month is present
SEASON_MONTHS = (
    ("spring", "March"),
    ("summer", "June"),
    ("fall", "September"),
    ("autumn", "September"),
    ("winter", "December"),
)

_SEP = r"\s*(?:[-–—]+|to)\s*"
_END = r"present|current|ongoing|today|now"

# Range patterns in priority order
DATE_RANGE_PATTERNS = (
    # Jan 2020 - Dec 2021, Fall 2019 - present
    re.compile(rf"([A-Za-z]{{3,}}\.?\s*\d{{4}}){_SEP}([A-Za-z]{{3,}}\.?\s*\d{{4}}|{_END})\b", re.IGNORECASE),
    # 06/2018 - 05/2020
    re.compile(rf"(\d{{1,2}}/\d{{4}}){_SEP}(\d{{1,2}}/\d{{4}}|{_END})\b", re.IGNORECASE),
    # 2019 - 2023
    re.compile(rf"\b(\d{{4}}){_SEP}(\d{{4}}|{_END})\b", re.IGNORECASE),
    # 2020-01 - 2021-06
    re.compile(rf"(\d{{4}}-\d{{1,2}}){_SEP}(\d{{4}}-\d{{1,2}}|{_END})\b", re.IGNORECASE),
)


def _in_year_bounds(year: str) -> bool:
    return MIN_YEAR <= int(year) <= MAX_YEAR


def _month_from_number(number: str) -> str:
    index = int(number) - 1
    return MONTHS[index] if 0 <= index < 12 else ""


def parse_month_year(text: str) -> Tuple[str, str]:
    """
    Parse a single date expression into (month, year).

    Examples:
        "Jan 2020" -> ("January", "2020")
        "06/2018" -> ("June", "2018")
        "2020-01" -> ("January", "2020")
        "Fall 2019" -> ("September", "2019")
        "present" -> ("", "Present")
    """
    s = (text or "").lower().strip()
    if s in PRESENT_WORDS or PRESENT_ABBREV_RE.match(s):
        return "", PRESENT

    month, year = "", ""

    m = MONTH_NAME_RE.search(text or "")
    if m:
        prefix = m.group(1)[:3].lower()
        month = next(name for name in MONTHS if name.lower().startswith(prefix))

    for candidate in YEAR_RE.findall(text or ""):
        if _in_year_bounds(candidate):
            year = candidate
            break

    m = MM_YYYY_RE.search(text or "")
    if m:
        month = _month_from_number(m.group(1)) or month
        if _in_year_bounds(m.group(2)):
            year = m.group(2)

    m = YYYY_MM_RE.search(text or "")
    if m:
        if not year and _in_year_bounds(m.group(1)):
            year = m.group(1)
        month = _month_from_number(m.group(2)) or month

    if not month:
        for season, season_month in SEASON_MONTHS:
            if re.search(rf"\b{season}\b", s):
                month = season_month
                break

    return month, year


def make_date_range(start: Tuple[str, str], end: Tuple[str, str]) -> DateRange:
    start_month, start_year = start
    end_month, end_year = end
    if end_year == PRESENT:
        end_month = ""
    return DateRange(start_month=start_month, start_year=start_year, end_month=end_month, end_year=end_year)


def extract_date_range(text: str) -> DateRange:
    """
    Find the first date range in free text.

    Falls back to the first in-bounds 4-digit year as end_year only, then to an
    empty range.
    """
    for pattern in DATE_RANGE_PATTERNS:
        m = pattern.search(text or "")
        if m:
            return make_date_range(parse_month_year(m.group(1)), parse_month_year(m.group(2)))

    for candidate in YEAR_RE.findall(text or ""):
        if _in_year_bounds(candidate):
            return DateRange(end_year=candidate)

    return DateRange()


def extract_point_date(text: str) -> str:
    """Single date for awards/publications/conferences: 'Month YYYY', 'YYYY', or ''."""
    month, year = parse_month_year(text)
    if year == PRESENT:
        return ""
    return " ".join(part for part in (month, year) if part) if year else ""


def format_date_range(dates: DateRange) -> str:
    """
    Display form of a range.

    Examples:
        January 2020 .. December 2021 -> "January 2020 — December 2021"
        2019 .. (no end) -> "2019 — Present"
    """
    start = f"{dates.start_month} {dates.start_year}" if dates.start_month and dates.start_year else dates.start_year
    if dates.end_month and dates.end_year:
        end = f"{dates.end_month} {dates.end_year}"
    else:
        end = dates.end_year or PRESENT
    return f"{start} — {end}" if start else end
