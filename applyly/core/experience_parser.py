"""
Extraction of position-like entries: work experience, leadership, teaching and
grants.

All four share the same shape: group the section into entries, read a date
range from the whole entry, pick the role and the organisation from the
entry's leading lines, and keep the remaining lines as a bulleted description.
Entries with neither a role nor an organisation signal are dropped.
"""

import logging
import re
from typing import List, Optional, Tuple

from applyly.core.date_parser import extract_date_range
from applyly.core.entry_grouper import group_into_entries
from applyly.core.heuristics import first_match, first_result, strip_bullet
from applyly.core.schemas import Grant, LeadershipExperience, TeachingExperience, WorkExperience
from applyly.core.text_normalization import clean_field_value, normalize_text

logger = logging.getLogger(__name__)


# Legal-entity suffixes and organisation words, in priority order
COMPANY_KEYWORDS = (
    "inc", "incorporated", "corp", "corporation", "llc", "l.l.c", "ltd", "limited",
    "company", "co", "technologies", "tech", "solutions", "services", "consulting",
    "associates", "partners", "group", "labs", "laboratory", "laboratories", "systems",
    "software", "industries", "enterprises", "global", "international", "foundation",
    "institute", "center", "agency", "network", "networks", "studio", "studios", "media",
    "digital",
)

TITLE_KEYWORDS = (
    "engineer", "developer", "manager", "director", "analyst", "designer",
    "scientist", "consultant", "specialist", "coordinator", "administrator",
    "associate", "assistant", "executive", "lead", "senior", "junior", "staff",
    "principal", "architect", "intern", "fellow", "researcher", "professor",
    "instructor", "teacher", "officer", "president", "vice president", "vp",
    "head", "chief", "ceo", "cto", "cfo", "coo",
)

# A run of capitalised words, e.g. "Acme Widgets "
_CAPITALISED_RUN = r"(?:[A-Z][\w&.'-]*\s+)"

COMPANY_PATTERNS = tuple(
    re.compile(rf"\b({_CAPITALISED_RUN}*?(?i:{re.escape(kw)})\.?)(?!\w)")
    for kw in COMPANY_KEYWORDS
)
TITLE_PATTERNS = tuple(
    re.compile(rf"\b({_CAPITALISED_RUN}{{0,3}}(?i:{re.escape(kw)}))(?![A-Za-z])")
    for kw in TITLE_KEYWORDS
)

INSTITUTION_PATTERNS = (
    re.compile(r"University\s+of\s+(?:the\s+)?[A-Z][\w&.'-]*(?:\s+[A-Z][\w&.'-]*)*"),
    re.compile(r"(?:[A-Z][a-z]+\s+){1,3}University"),
    re.compile(r"(?:[A-Z][a-z]+\s+){1,3}College"),
    re.compile(r"(?:[A-Z][a-z]+\s+){1,3}Institute(?:\s+of\s+[A-Z][a-z]+)?"),
)

# Connectors splitting "Title at Company", "Title @ Company", "Title | Company", "Title, Company"
FIRST_LINE_SPLITTERS = (
    re.compile(r"\s+at\s+", re.IGNORECASE),
    re.compile(r"\s+@\s+"),
    re.compile(r"\s*[|–—]\s*"),
    re.compile(r",\s+(?=[A-Z])"),
)

LOCATION_RE = re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z]{2})\b")
DATE_TEXT_RE = re.compile(r"\d{4}\s*[-–—]\s*(?:\d{4}|present|current)|present|current", re.IGNORECASE)
MIN_DESCRIPTION_LINE = 15
MAX_TITLE_LENGTH = 60


def detect_company(text: str) -> str:
    """First organisation-like phrase: capitalised words ending in a company keyword."""
    for pattern in COMPANY_PATTERNS:
        m = pattern.search(text)
        if m:
            return clean_field_value(m.group(1), "text")
    return detect_institution(text)


def detect_title(text: str) -> str:
    """First job-title phrase: up to three capitalised words ending in a title keyword."""
    for pattern in TITLE_PATTERNS:
        for m in pattern.finditer(text):
            title = m.group(1).strip()
            if title[0].isupper() and 3 < len(title) < MAX_TITLE_LENGTH:
                return clean_field_value(title, "text")
    return ""


def detect_institution(text: str) -> str:
    return clean_field_value(first_match(INSTITUTION_PATTERNS, text, group=0), "text")


def detect_location(text: str) -> str:
    m = LOCATION_RE.search(text)
    return m.group(0) if m else ""


def split_first_line(line: str) -> Optional[Tuple[str, str]]:
    """Split "Title <connector> Organisation" on the first connector that applies."""
    for splitter in FIRST_LINE_SPLITTERS:
        parts = splitter.split(line)
        if len(parts) >= 2 and parts[0].strip() and parts[1].strip():
            return parts[0].strip(), parts[1].split(",")[0].strip()
    return None


def _header_line(entry_lines: List[str]) -> str:
    """First entry line without its date range."""
    return DATE_TEXT_RE.sub("", entry_lines[0]).strip(" ,|–—-")


def build_description(lines: List[str], *, skip=None) -> str:
    """Join description lines with the '• ' bullet convention."""
    kept = []
    for line in lines:
        if len(line) <= MIN_DESCRIPTION_LINE or re.match(r"^\d{4}", line):
            continue
        if skip is not None and skip(line):
            continue
        kept.append(normalize_text(strip_bullet(line)))
    return "• " + "\n• ".join(kept) if kept else ""


def _split_part(entry_lines: List[str], index: int) -> str:
    split = split_first_line(_header_line(entry_lines))
    return clean_field_value(split[index], "text") if split else ""


def _second_line(entry_lines: List[str]) -> str:
    if len(entry_lines) < 2:
        return ""
    second = re.sub(r"\d{4}.*$", "", entry_lines[1]).strip()
    if not 3 < len(second) < 80 or second.startswith(("•", "-", "–", "*")):
        return ""
    return clean_field_value(second.split(",")[0], "text")


def _heading_segment(entry_lines: List[str]) -> str:
    heading = _header_line(entry_lines)
    if len(heading) <= 3:
        return ""
    return clean_field_value(re.split(r"[,|–—]", heading)[0].strip(), "text")


def _company_outside_title(text: str) -> str:
    """Company phrase in text, skipping one that is part of the job title ("Software Engineer")."""
    company = detect_company(text)
    title = detect_title(text)
    if company and title and company in title:
        return detect_company(text.replace(title, " ", 1))
    return company


# Fallback order: keywords on the heading line, keywords anywhere in the
# entry, connector split of the heading line, then positional guesses
TITLE_STRATEGIES = (
    lambda entry: detect_title(_header_line(entry)),
    lambda entry: detect_title(" ".join(entry)),
    lambda entry: _split_part(entry, 0),
    _heading_segment,
)
ORGANISATION_STRATEGIES = (
    lambda entry: _company_outside_title(_header_line(entry)),
    lambda entry: _company_outside_title(" ".join(entry)),
    lambda entry: _split_part(entry, 1),
    _second_line,
)


def _role_and_organisation(entry_lines: List[str]) -> Tuple[str, str]:
    return first_result(TITLE_STRATEGIES, entry_lines), first_result(ORGANISATION_STRATEGIES, entry_lines)


def extract_work_experience(lines: List[str]) -> List[WorkExperience]:
    if not lines:
        return []

    experiences: List[WorkExperience] = []
    for entry_lines in group_into_entries(lines):
        full_text = " ".join(entry_lines)
        title, company = _role_and_organisation(entry_lines)
        if not (title or company):
            logger.debug(f"Dropping experience entry without title/company: {entry_lines[0]!r}")
            continue

        company_key = company[:10]

        def _is_metadata(line: str) -> bool:
            return bool(company_key and company_key in line) or bool(detect_title(line))

        experiences.append(
            WorkExperience(
                title=title or "Position",
                company=company or "Company",
                location=detect_location(full_text),
                dates=extract_date_range(full_text),
                description=build_description(entry_lines[1:], skip=_is_metadata),
            )
        )

    logger.debug(f"Work experience: {len(experiences)} entries")
    return experiences


def extract_leadership(lines: List[str]) -> List[LeadershipExperience]:
    if not lines:
        return []

    experiences: List[LeadershipExperience] = []
    for entry_lines in group_into_entries(lines):
        full_text = " ".join(entry_lines)
        role, organization = _role_and_organisation(entry_lines)
        if not (role or organization):
            continue

        experiences.append(
            LeadershipExperience(
                role=role or "Role",
                organization=organization or "Organization",
                location=detect_location(full_text),
                dates=extract_date_range(full_text),
                description=build_description(entry_lines[1:]),
            )
        )

    logger.debug(f"Leadership: {len(experiences)} entries")
    return experiences


TEACHING_ROLE_RE = re.compile(
    r"\b(teaching assistant|graduate assistant|instructor|lecturer|adjunct|professor|TA)\b",
    re.IGNORECASE,
)
COURSE_PATTERNS = (
    re.compile(r"[\"“]([^\"”]+)[\"”]"),
    re.compile(r"\b([A-Z]{2,4}\s*\d{3,4})\b"),
)


def extract_teaching(lines: List[str]) -> List[TeachingExperience]:
    if not lines:
        return []

    teaching: List[TeachingExperience] = []
    for entry_lines in group_into_entries(lines):
        full_text = " ".join(entry_lines)

        role_match = TEACHING_ROLE_RE.search(full_text)
        role = role_match.group(1) if role_match else ""

        course = first_match(COURSE_PATTERNS, full_text) or clean_field_value(
            re.sub(r"\d{4}.*$", "", entry_lines[0]).strip(" ,|–—-"), "text"
        )
        institution = detect_institution(full_text)
        if not (course or institution):
            continue

        teaching.append(
            TeachingExperience(
                course=course or "Course",
                institution=institution,
                role=role,
                dates=extract_date_range(full_text),
                description=build_description(entry_lines[1:]),
            )
        )

    logger.debug(f"Teaching: {len(teaching)} entries")
    return teaching


AMOUNT_RE = re.compile(r"\$[\d,]+(?:\.\d{2})?|\b\d+[kK]\b")
FUNDER_RE = re.compile(r"\b(?:funded by|from|by)\s+([^,\n\d$]+)", re.IGNORECASE)


def extract_grants(lines: List[str]) -> List[Grant]:
    if not lines:
        return []

    grants: List[Grant] = []
    for entry_lines in group_into_entries(lines):
        full_text = " ".join(entry_lines)

        amount_match = AMOUNT_RE.search(full_text)
        funder_match = FUNDER_RE.search(full_text)

        heading = AMOUNT_RE.sub("", entry_lines[0])
        heading = re.sub(r"\d{4}.*$", "", heading)
        heading_funder = FUNDER_RE.search(heading)
        if heading_funder:
            heading = heading[: heading_funder.start()]
        title = clean_field_value(heading.strip(" ,|–—-()"), "text")
        funder = clean_field_value(funder_match.group(1), "text") if funder_match else ""
        if not (title or funder):
            continue

        grants.append(
            Grant(
                title=title or "Grant",
                funder=funder,
                amount=amount_match.group(0) if amount_match else "",
                dates=extract_date_range(full_text),
                description=build_description(entry_lines[1:]),
            )
        )

    logger.debug(f"Grants: {len(grants)} entries")
    return grants
