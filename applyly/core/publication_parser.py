"""
Citation parsing for the publications section.

A publication entry is one citation in any common style (numbered, bulleted,
"Lastname, X." led). Authors are isolated from the front of the citation and
normalised into a "; "-separated display string plus a structured list.
"""

import logging
import re
from typing import List, Sequence

from applyly.core.date_parser import extract_point_date
from applyly.core.heuristics import first_match
from applyly.core.schemas import Author, Publication
from applyly.core.text_normalization import clean_field_value, normalize_text

logger = logging.getLogger(__name__)


# ===== ENTRY BOUNDARIES =====

NEW_ENTRY_PATTERNS = (
    re.compile(r"^\d+[.)]\s"),  # 1. or 1)
    re.compile(r"^\[\d+\]\s"),  # [1]
    re.compile(r"^[A-Z][a-z]+,\s+[A-Z]\."),  # Smith, J.
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+\s+and\s+", re.IGNORECASE),  # John Smith and
    re.compile(r"^•\s+"),
    re.compile(r"^\*\s+"),
)
ENTRY_PREFIX_RE = re.compile(r"^(?:\d+[.)]|\[\d+\]|[•*])\s+")

MIN_LINE_LENGTH = 5
MIN_ENTRY_LENGTH = 20

# ===== AUTHOR ISOLATION =====

# Boundaries between the author list and the rest of the citation
AUTHOR_END_SEPARATORS = (
    re.compile(r"\.\s*[\"'“‘]"),  # Author. "Title
    re.compile(r"\.\s*(?=[A-Z][a-z])"),  # Author. Title
    re.compile(r"\(\d{4}\)"),  # Author (2020)
)
LEADING_AUTHORS_RE = re.compile(
    r"^([A-Z][a-z]+(?:,?\s+[A-Z]\.?\s*)+(?:,?\s*(?:and|&)\s+[A-Z][a-z]+(?:,?\s+[A-Z]\.?\s*)+)*(?:\s*et\s+al\.?)?)"
)
PAREN_YEAR_RE = re.compile(r"\s*\(\d{4}\)\s*")
AUTHOR_SPLIT_RE = re.compile(r"\s*;\s*|\s+and\s+|\s*&\s*")
FULL_NAME_COMMA_RE = re.compile(r",[^,]*[A-Z][a-z]+\s+[A-Z][a-z]+")
FULL_NAME_SPLIT_RE = re.compile(r",\s*(?=[A-Z][a-z]+\s+[A-Z])")
# A trailing period that does not close an initial ("Doe, A." keeps it)
TRAILING_PERIOD_RE = re.compile(r"(?<![A-Z])\.$")

# "Lastname, Initials" or "Lastname, Firstname"
LAST_FIRST_PAIR_RE = re.compile(r"([^,;]+?)\s*,\s*([A-Z]\.?(?:\s*[A-Z]\.?)*|[A-Z][a-z]+)(?![a-z])")
LAST_FIRST_RE = re.compile(r"^([A-Za-z]+(?:-[A-Za-z]+)?)\s*,\s*(.+)$")

# ===== TITLE / VENUE =====

TITLE_PATTERNS = (
    re.compile(r"[\"“]([^\"”]{10,200})[\"”]"),
    re.compile(r"[‘']([^’']{10,200})[’']"),
    re.compile(r"\.\s+([A-Z][^.]{10,150})\."),
    re.compile(r"\(\d{4}\)\.\s*([^.]{10,150})\."),
)
JOURNAL_INDICATOR_RE = re.compile(r"\s+(?:in|In|Journal|Proceedings|Conference|Trans\.|IEEE|ACM)\s+")
FIRST_CHUNK_RE = re.compile(r"^[^.!?]{10,200}")

JOURNAL_PATTERNS = (
    re.compile(r"\b(?:In|in)\s+([A-Z][^,.\d]{5,80})"),
    re.compile(r"(?:IEEE|ACM)\s+([A-Z][a-zA-Z\s]{5,60})"),
    re.compile(r"\.\s+([A-Z][a-zA-Z\s&]+?)(?:\s*,\s*\d|\s*\d{4}|\.\s*$)"),
    re.compile(r"Journal\s+of\s+([A-Za-z\s&]+)", re.IGNORECASE),
    re.compile(r"Proceedings\s+of\s+(?:the\s+)?([A-Za-z\s&]+)", re.IGNORECASE),
)

URL_RE = re.compile(r"https?://[^\s\]]+|doi[:\s]+10\.[^\s]+", re.IGNORECASE)


def _split_raw_authors(cleaned: str) -> List[str]:
    if ";" in cleaned:
        raw = [s for s in re.split(r"\s*;\s*", cleaned) if len(s) > 1]
        logger.debug(f"Authors split by semicolon: {raw}")
        return raw

    if re.search(r"\band\b|\s&\s", cleaned):
        raw = [s for s in re.split(r"\s+and\s+|\s*&\s*", cleaned) if len(s) > 1]
        logger.debug(f"Authors split by and/&: {raw}")
        return raw

    pairs = [f"{m.group(1).strip()}, {m.group(2).strip()}" for m in LAST_FIRST_PAIR_RE.finditer(cleaned)]
    if pairs:
        logger.debug(f"Authors found via Lastname, Initials pattern: {pairs}")
        return pairs

    comma_parts = [s for s in re.split(r"\s*,\s*", cleaned) if len(s) > 1]
    if len(comma_parts) >= 2 and len(comma_parts) % 2 == 0:
        logger.debug("Authors paired by even comma count")
        return [f"{comma_parts[i]}, {comma_parts[i + 1]}" for i in range(0, len(comma_parts), 2)]

    logger.debug("Authors split on plain commas")
    return comma_parts


def _parse_author(raw: str) -> Author:
    m = LAST_FIRST_RE.match(raw)
    if m:
        last_name, first_name = m.group(1), m.group(2).strip(" ,")
    else:
        parts = raw.split()
        if len(parts) >= 2:
            last_name, first_name = parts[-1], " ".join(parts[:-1])
        else:
            last_name, first_name = raw, ""
    return Author(first_name=first_name, last_name=last_name[:1].upper() + last_name[1:])


def parse_authors_to_list(authors: str) -> List[Author]:
    """
    Structured author list from a display string.

    Tries, in order: semicolon split, "and"/"&" split, repeated
    "Lastname, Initials" groups, pairing of comma-separated parts when their
    count is even, plain comma split.

    Examples:
        "Smith, J.; Doe, A. B." -> [Author(J., Smith), Author(A. B., Doe)]
        "John Smith and Jane Doe" -> [Author(John, Smith), Author(Jane, Doe)]
    """
    if not authors or len(authors) < 2:
        return []

    logger.debug(f"Parsing authors: {authors!r}")

    cleaned = PAREN_YEAR_RE.sub(" ", authors)
    cleaned = re.sub(r"^[•\-–]\s*", "", cleaned)
    cleaned = re.sub(r"\s*;\s*$", "", cleaned)
    cleaned = " ".join(cleaned.split())
    # "Jimenez - Vergara" -> "Jimenez-Vergara"
    cleaned = re.sub(r"\s*-\s*", "-", cleaned)

    authors_list = []
    for raw in _split_raw_authors(cleaned):
        raw = TRAILING_PERIOD_RE.sub("", raw.strip().rstrip(",")).strip()
        if len(raw) < 2:
            continue
        author = _parse_author(raw)
        if author.first_name or author.last_name:
            authors_list.append(author)

    logger.debug(f"Parsed {len(authors_list)} authors: {authors_list}")
    return authors_list


def format_authors(authors_list: Sequence[Author]) -> str:
    """Display string for an author list: "Last, First; Last, First"."""
    return "; ".join(
        f"{a.last_name}, {a.first_name}" if a.first_name else a.last_name for a in authors_list
    )


def isolate_authors(cleaned: str) -> str:
    """
    Leading author list of a citation, normalised to "; "-separated names.

    The first separator whose first occurrence lies past the fifth character
    and before the middle of the citation ends the author list; otherwise a
    leading "Lastname, X." shaped run is used.
    """
    authors = ""
    for separator in AUTHOR_END_SEPARATORS:
        m = separator.search(cleaned)
        if m and 5 < m.start() < len(cleaned) / 2:
            authors = cleaned[: m.start()].strip()
            # keep the period closing a final initial
            if re.search(r"\b[A-Z]$", authors):
                authors += "."
            break
    else:
        m = LEADING_AUTHORS_RE.match(cleaned)
        if m:
            authors = m.group(1)

    authors = " ".join(PAREN_YEAR_RE.sub(" ", authors).split())
    if not authors:
        return ""

    names = []
    for chunk in AUTHOR_SPLIT_RE.split(authors):
        pieces = FULL_NAME_SPLIT_RE.split(chunk) if FULL_NAME_COMMA_RE.search(chunk) else [chunk]
        for name in pieces:
            name = TRAILING_PERIOD_RE.sub("", name.strip()).strip()
            if len(name) <= 2:
                continue
            if not re.match(r"^[A-Z][a-z]+,\s*[A-Z]", name):
                name = clean_field_value(name, "text")
            names.append(name)
    return "; ".join(names)


def extract_title(cleaned: str, authors: str) -> str:
    title = first_match(TITLE_PATTERNS, cleaned)
    if title:
        return clean_field_value(title, "text")

    remaining = cleaned.replace(authors, "") if authors else cleaned
    remaining = PAREN_YEAR_RE.sub(" ", remaining, count=1)
    remaining = re.sub(r"^\s*[.,]\s*", "", remaining).strip()

    m = JOURNAL_INDICATOR_RE.search(remaining)
    if m and m.start():
        title = remaining[: m.start()]
    else:
        chunk = FIRST_CHUNK_RE.match(remaining)
        title = chunk.group(0) if chunk else ""
    return clean_field_value(title or remaining[:100], "text")


def extract_journal(cleaned: str) -> str:
    journal = first_match(JOURNAL_PATTERNS, cleaned, accept=lambda name: 3 < len(name) < 100)
    return clean_field_value(journal, "text")


def parse_publication(text: str) -> Publication:
    cleaned = normalize_text(text)

    url_match = URL_RE.search(cleaned)
    url = url_match.group(0).rstrip(".,;") if url_match else ""

    authors = isolate_authors(cleaned)
    title = extract_title(cleaned, authors)

    return Publication(
        title=title or cleaned[:100],
        authors=authors,
        authors_list=parse_authors_to_list(authors),
        journal=extract_journal(cleaned),
        date=extract_point_date(cleaned),
        url=url,
    )


def _is_new_entry(line: str) -> bool:
    return any(p.search(line) for p in NEW_ENTRY_PATTERNS)


def extract_publications(lines: List[str]) -> List[Publication]:
    """
    Split the publications section into citations and parse each.

    Lines shorter than five characters are skipped; citations of twenty
    characters or fewer are discarded.
    """
    if not lines:
        return []

    entries: List[List[str]] = []
    current: List[str] = []
    for raw in lines:
        line = raw.strip()
        if len(line) < MIN_LINE_LENGTH:
            continue
        if _is_new_entry(line) and current:
            entries.append(current)
            current = []
        current.append(ENTRY_PREFIX_RE.sub("", line) if not current else line)
    if current:
        entries.append(current)

    publications = [
        parse_publication(" ".join(entry))
        for entry in entries
        if len(" ".join(entry)) > MIN_ENTRY_LENGTH
    ]
    logger.debug(f"Publications: {len(publications)} entries")
    return publications
