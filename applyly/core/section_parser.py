"""
Section segmentation: assigns every resume line to the section whose header
most recently preceded it.

Header classification is keyword based. Sections are checked in declaration
order and the first section with a matching keyword wins.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Buckets returned by split_into_sections(), in output order
SECTION_NAMES = (
    "header", "experience", "education", "skills", "leadership", "awards",
    "publications", "grants", "teaching", "conferences", "projects", "other",
)

# Priority order matters: earlier sections win on ambiguous headers
SECTION_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("experience", ("experience", "employment", "work history", "professional experience", "career", "job history")),
    ("education", ("education", "academic", "degrees", "qualifications", "schooling")),
    ("skills", ("skills", "competencies", "expertise", "technologies", "proficiencies", "technical skills", "core competencies")),
    ("leadership", ("leadership", "volunteer", "extracurricular", "activities", "organizations", "community")),
    ("awards", ("awards", "honors", "achievements", "recognition", "accomplishments", "scholarships", "fellowships")),
    ("publications", ("publications", "papers", "articles", "research publications", "journal", "published works")),
    ("grants", ("grants", "funding", "sponsored", "fellowship")),
    ("teaching", ("teaching", "instruction", "courses taught", "academic experience")),
    ("conferences", ("conferences", "presentations", "talks", "posters", "invited")),
    ("projects", ("projects", "portfolio", "personal projects")),
    # Recognised as headers, but content has no bucket and lands in "other"
    ("certifications", ("certifications", "licenses", "credentials", "training")),
    ("summary", ("summary", "objective", "profile", "about", "overview", "introduction")),
)

HEADER_LINE_CAPACITY = 10
MIN_HEADER_LENGTH = 3
MAX_HEADER_LENGTH = 50
MAX_SHORT_HEADER_WORDS = 4

HEADER_PUNCT_RE = re.compile(r"[:\-–—•·_|]")
LIST_PUNCT_RE = re.compile(r"[,;]")


def _clean_header_candidate(line: str) -> str:
    clean = HEADER_PUNCT_RE.sub(" ", line.lower())
    return " ".join(clean.split())


def _mentions_section_keyword(text: str) -> bool:
    clean = _clean_header_candidate(text)
    return any(keyword in clean for _, keywords in SECTION_KEYWORDS for keyword in keywords)


def _is_delimited_list(line: str) -> bool:
    """
    Check if a comma/semicolon separated line reads as a list of items.

    "Honors, Awards" (every part names a section) and short keyword-led
    headers like "Leadership, Service" are not lists; "Python, SQL, Leadership"
    is.
    """
    parts = [p for p in LIST_PUNCT_RE.split(line) if p.strip()]
    keyed = [_mentions_section_keyword(p) for p in parts]
    if all(keyed):
        return False
    return not (keyed[0] and len(line.split()) <= MAX_SHORT_HEADER_WORDS)


def detect_section_header(line: str) -> Optional[str]:
    """
    Classify a line as a section header.

    Returns the section name, or None when the line is ordinary content.
    Delimited item lists ("Python, SQL, Leadership") are never headers unless
    the whole line is upper case.
    """
    is_all_caps = line == line.upper() and bool(re.search(r"[A-Z]", line))
    if LIST_PUNCT_RE.search(line) and not is_all_caps and _is_delimited_list(line):
        return None

    clean = _clean_header_candidate(line)
    if not (MIN_HEADER_LENGTH <= len(clean) <= MAX_HEADER_LENGTH):
        return None

    is_short = len(clean.split()) <= MAX_SHORT_HEADER_WORDS

    for section, keywords in SECTION_KEYWORDS:
        for keyword in keywords:
            if clean == keyword:
                rule = "exact"
            elif clean.startswith(keyword + " ") or clean.endswith(" " + keyword):
                rule = "partial"
            elif is_all_caps and keyword in clean:
                rule = "caps"
            elif is_short and keyword in clean:
                rule = "short"
            else:
                continue
            logger.debug(f"Section header found ({rule}): '{line}' -> {section}")
            return section
    return None


def split_into_sections(lines: List[str]) -> Dict[str, List[str]]:
    """
    Walk lines in order and bucket them by section.

    Lines before the first header go to "header"; past HEADER_LINE_CAPACITY
    they fall through to the current section's bucket, which is still
    "header" until a header is seen. Header lines themselves are not stored.
    Content under a recognised header with no bucket goes to "other".
    """
    sections: Dict[str, List[str]] = {name: [] for name in SECTION_NAMES}
    current_section = "header"
    found_first_section = False

    logger.debug(f"Section splitting: {len(lines)} lines")

    for idx, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue

        section_type = detect_section_header(line)
        if section_type:
            found_first_section = True
            current_section = section_type
            logger.debug(f"Line {idx}: section header '{line}' -> {section_type}")
            continue

        if not found_first_section and len(sections["header"]) < HEADER_LINE_CAPACITY:
            sections["header"].append(line)
        elif current_section in sections:
            sections[current_section].append(line)
        else:
            sections["other"].append(line)

    logger.debug(f"Section counts: { {name: len(v) for name, v in sections.items()} }")
    return sections
