"""
Awards and conference presentations.

Both are single-date entities: dates come from extract_point_date(), never a
range.
"""

import logging
import re
from typing import List

from applyly.core.date_parser import extract_point_date
from applyly.core.heuristics import first_match, strip_bullet
from applyly.core.schemas import Award, Conference
from applyly.core.text_normalization import clean_field_value, normalize_text

logger = logging.getLogger(__name__)

AWARD_START_RE = re.compile(r"^[•\-–]|^\d{4}|\d{4}$")
ISSUER_RE = re.compile(r"(?:\bfrom\b|\bby\b|,)\s+(.+?)\s*(?:\d{4}|$)", re.IGNORECASE)
YEAR_WORD_RE = re.compile(r"\b\d{4}\b")

LOCATION_RE = re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z]{2})\b")
CONFERENCE_NAME_RE = re.compile(r"(?:\bat\b|,)\s+([A-Z][^\d,]+)")
MIN_CONFERENCE_LINE = 10


def _find_issuer(text: str) -> str:
    # "Scholarship, 2018" names no issuer
    return first_match((ISSUER_RE,), text, accept=lambda value: bool(re.search(r"[A-Za-z]", value)))


def parse_award(lines: List[str]) -> Award:
    """
    One award from its lines.

    The title is the first line up to the issuer phrase, without years.

    Examples:
        ["Best Paper Award from ACM 2021"] -> title "Best Paper Award", issuer "ACM", date "2021"
        ["Dean's List, Stanford University Fall 2019"] -> issuer "Stanford University Fall", date "September 2019"
    """
    full_text = " ".join(lines)

    first_line = lines[0]
    issuer = _find_issuer(first_line) or _find_issuer(full_text)
    issuer = clean_field_value(issuer.strip(" ,"), "text")

    heading = first_line
    heading_issuer = ISSUER_RE.search(first_line)
    if heading_issuer and heading_issuer.start() > 0:
        heading = first_line[: heading_issuer.start()]
    title = clean_field_value(YEAR_WORD_RE.sub("", heading).strip().rstrip(",-–").strip(), "text")

    return Award(
        title=title or "Award",
        issuer=issuer,
        date=extract_point_date(full_text),
        description=" ".join(normalize_text(line) for line in lines[1:]),
    )


def extract_awards(lines: List[str]) -> List[Award]:
    """
    Group award lines and parse each group.

    A line opens a new award when it starts with a bullet or a year, or ends
    with a year.
    """
    if not lines:
        return []

    groups: List[List[str]] = []
    current: List[str] = []
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if AWARD_START_RE.search(line):
            if current:
                groups.append(current)
            current = [strip_bullet(line)]
        else:
            current.append(line)
    if current:
        groups.append(current)

    awards = [parse_award(group) for group in groups if group[0]]
    logger.debug(f"Awards: {len(awards)} entries")
    return awards


def extract_conferences(lines: List[str]) -> List[Conference]:
    """Every line of at least ten characters is one presentation."""
    if not lines:
        return []

    conferences: List[Conference] = []
    for raw in lines:
        line = raw.strip()
        if len(line) < MIN_CONFERENCE_LINE:
            continue

        title = clean_field_value(strip_bullet(YEAR_WORD_RE.sub("", line)).strip(" ,"), "text")
        if not title:
            continue

        location_match = LOCATION_RE.search(line)
        name_match = CONFERENCE_NAME_RE.search(line)
        conferences.append(
            Conference(
                title=title,
                conference=clean_field_value(name_match.group(1), "text") if name_match else "",
                location=location_match.group(0) if location_match else "",
                date=extract_point_date(line),
            )
        )

    logger.debug(f"Conferences: {len(conferences)} entries")
    return conferences
