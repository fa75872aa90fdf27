"""
Education parsing module for detecting and extracting education entries from resumes.

Provides deterministic, rule-based grouping of the education section into
entries and extraction of school, degree, field of study, GPA, location and
dates for each entry.
"""

import logging
import re
from typing import List

from applyly.core.date_parser import extract_date_range
from applyly.core.heuristics import first_match
from applyly.core.schemas import Education
from applyly.core.text_normalization import clean_field_value, normalize_text

logger = logging.getLogger(__name__)


# ===== INSTITUTION KEYWORDS =====

SCHOOL_KEYWORDS = ("university", "college", "institute", "school", "academy", "polytechnic")

# Well-known schools often written without an institution keyword
FAMOUS_SCHOOLS = (
    "MIT", "UCLA", "USC", "NYU", "Stanford", "Harvard", "Yale", "Princeton",
    "Berkeley", "Columbia", "Cornell", "Duke", "Northwestern", "Caltech",
    "Georgia Tech", "Purdue", "Michigan", "Virginia Tech", "Texas A&M",
    "Oxford", "Cambridge", "Carnegie Mellon", "Brown", "Penn", "Dartmouth",
)

SCHOOL_HINT_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in SCHOOL_KEYWORDS + FAMOUS_SCHOOLS) + r")\b",
    re.IGNORECASE,
)

UNIVERSITY_OF_RE = re.compile(r"University\s+of\s+(?:the\s+)?[A-Z][\w&.'-]*(?:\s+[A-Z][\w&.'-]*)*")

# ===== DEGREE PATTERNS (priority order) =====
# Spelled-out degrees are case-insensitive; abbreviations are case-sensitive and
# whole-word so that "MA" in "Boston, MA" or "as" in prose does not count.

_OF_SUBJECT = r"(?:\s+of\s+[A-Z][a-z]+)?"
_NOT_STATE = r"(?<!, )"

DEGREE_PATTERNS = (
    re.compile(rf"\b(?i:doctor(?:ate)?){_OF_SUBJECT}"),
    re.compile(r"\b(?:Ph|PH)\.?\s?D\b\.?"),
    re.compile(rf"\b(?i:master(?:['’]?s)?){_OF_SUBJECT}"),
    re.compile(r"\bM\.?B\.?A\b\.?"),
    re.compile(rf"{_NOT_STATE}\bM\.?S\b\.?"),
    re.compile(rf"{_NOT_STATE}\bM\.?A\b\.?"),
    re.compile(rf"\b(?i:bachelor(?:['’]?s)?){_OF_SUBJECT}"),
    re.compile(r"\bB\.?S\b\.?"),
    re.compile(r"\bB\.?A\b\.?"),
    re.compile(rf"\b(?i:associate(?:['’]?s)?){_OF_SUBJECT}"),
    re.compile(rf"{_NOT_STATE}\bA\.?S\b\.?"),
    re.compile(rf"{_NOT_STATE}\bA\.?A\b\.?"),
)

# Up to five words of a subject name directly after the degree
_SUBJECT = r"[A-Z][a-z]+(?:\s+(?:[A-Z][A-Za-z&]*|and|of|&)){0,4}"
FIELD_AFTER_DEGREE_RE = re.compile(rf"^[,\s]*(?:in\s+)?({_SUBJECT})")
FIELD_FALLBACK_RE = re.compile(rf"(?:(?i:major(?:ing)?|concentration)(?:\s+in)?[:\s]+|\bin\s+)({_SUBJECT})")

GPA_PATTERNS = (
    re.compile(r"GPA[:\s]*([0-9]\.[0-9]{1,2})", re.IGNORECASE),
    re.compile(r"([0-9]\.[0-9]{1,2})\s*/\s*4\.0"),
)

LOCATION_RE = re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z]{2})\b")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

MIN_LINE_LENGTH = 3
MIN_DESCRIPTION_LINE = 15


def has_school_hint(text: str) -> bool:
    """
    Check if text names an institution (keyword or well-known school).

    Args:
        text: Line to check

    Returns:
        True if a school keyword or famous school name is present
    """
    return bool(SCHOOL_HINT_RE.search(text))


def has_degree(text: str) -> bool:
    return any(p.search(text) for p in DEGREE_PATTERNS)


def group_education_entries(lines: List[str]) -> List[List[str]]:
    """
    Split the education section into one list of lines per degree.

    A line opens a new entry when it mentions a school or a degree, the
    current entry is non-empty, and either the line carries a year or the
    current entry already has more than two lines.

    Args:
        lines: Lines of the education section

    Returns:
        List of entries, each a list of lines
    """
    entries: List[List[str]] = []
    current: List[str] = []

    for raw in lines:
        line = raw.strip()
        if len(line) < MIN_LINE_LENGTH:
            continue

        opens_entry = has_school_hint(line) or has_degree(line)
        if opens_entry and current and (YEAR_RE.search(line) or len(current) > 2):
            entries.append(current)
            current = [line]
        else:
            current.append(line)

    if current:
        entries.append(current)
    return entries


def _extended_school_name(text: str, anchor: str) -> str:
    """Widen a school hint to the full institution name found in text."""
    m = UNIVERSITY_OF_RE.search(text)
    if m and anchor in m.group(0):
        return clean_field_value(m.group(0), "text")
    m = re.search(rf"\b{re.escape(anchor)}(?:\s+[A-Z][\w&.'-]*)*", text)
    return clean_field_value(m.group(0), "text") if m else anchor


def extract_school(text: str) -> str:
    """
    Extract the institution name from an entry.

    Famous schools are checked first and widened to their full name
    ("Stanford" -> "Stanford University"); otherwise the first school keyword
    is expanded to its preceding capitalised words.

    Examples:
        "BS Computer Science, Stanford University 2016 - 2020" -> "Stanford University"
        "Massachusetts Institute of Technology" -> "Massachusetts Institute of Technology"
    """
    for school in FAMOUS_SCHOOLS:
        if re.search(rf"\b{re.escape(school)}\b", text):
            return _extended_school_name(text, school)

    for keyword in SCHOOL_KEYWORDS:
        if keyword not in text.lower():
            continue
        patterns = (
            UNIVERSITY_OF_RE,
            re.compile(
                rf"(?:[A-Z][\w&.'-]*\s+){{1,3}}(?i:{keyword})(?:\s+of\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)?"
            ),
        )
        for pattern in patterns:
            m = pattern.search(text)
            if m:
                return clean_field_value(m.group(0), "text")
    return ""


def extract_degree_and_field(text: str) -> tuple[str, str]:
    """
    Extract degree and field of study.

    Examples:
        "Bachelor of Science in Computer Science" -> ("Bachelor of Science", "Computer Science")
        "M.S. Data Science, 2022" -> ("M.S.", "Data Science")
        "PhD" -> ("PhD", "")

    Args:
        text: Entry text

    Returns:
        (degree, field); either may be empty
    """
    degree, field = "", ""
    for pattern in DEGREE_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        degree = clean_field_value(m.group(0), "text")
        field_match = FIELD_AFTER_DEGREE_RE.search(text[m.end():])
        if field_match and not has_school_hint(field_match.group(1)):
            field = clean_field_value(field_match.group(1), "text")
        break

    if not field:
        m = FIELD_FALLBACK_RE.search(text)
        if m and not has_school_hint(m.group(1)):
            field = clean_field_value(m.group(1), "text")

    return degree, field


def extract_gpa(text: str) -> str:
    return first_match(GPA_PATTERNS, text)


def parse_education_entry(lines: List[str]) -> Education:
    full_text = " ".join(lines)
    school = extract_school(full_text)
    degree, field = extract_degree_and_field(full_text)
    location_match = LOCATION_RE.search(full_text)

    description = "\n".join(
        normalize_text(line)
        for line in lines
        if len(line) > MIN_DESCRIPTION_LINE and line[:10] not in school
    )

    return Education(
        school=school or clean_field_value(lines[0], "text"),
        degree=degree,
        field=field,
        location=location_match.group(0) if location_match else "",
        dates=extract_date_range(full_text),
        gpa=extract_gpa(full_text),
        description=description,
    )


def extract_education(lines: List[str]) -> List[Education]:
    """
    Extract all education entries from the education section.

    Args:
        lines: Lines of the education section

    Returns:
        List of Education entries (empty for an empty section)
    """
    if not lines:
        return []

    entries = group_education_entries(lines)
    education = [parse_education_entry(entry) for entry in entries]
    logger.debug(f"Education: {len(education)} entries from {len(lines)} lines")
    return education
