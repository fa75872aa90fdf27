import re
from typing import List

# A 4-digit year followed by a range separator: "2019 -", "2019–", "2019 to"
ENTRY_DATE_RE = re.compile(r"\d{4}\s*(?:[-–—]|to\b)", re.IGNORECASE)

# Lines opening with a seniority/role word usually start a new position
ENTRY_TITLE_RE = re.compile(
    r"^(?:senior|junior|lead|principal|staff|associate|intern|manager|director|engineer"
    r"|developer|analyst|professor|instructor|president|chair)\b",
    re.IGNORECASE,
)


def starts_new_entry(line: str, after_blank: bool) -> bool:
    return bool(ENTRY_DATE_RE.search(line)) or after_blank or bool(ENTRY_TITLE_RE.match(line))


def group_into_entries(lines: List[str]) -> List[List[str]]:
    """
    Split a section's lines into entries (one job, one degree, ...).

    A line opens a new entry when it carries a year-plus-separator date, follows
    a blank line, or starts with a title keyword, provided the current entry
    already has content. Blank lines are not kept.
    """
    entries: List[List[str]] = []
    current: List[str] = []
    after_blank = False

    for raw in lines:
        line = raw.strip()
        if not line:
            after_blank = True
            continue

        if current and starts_new_entry(line, after_blank):
            entries.append(current)
            current = [line]
        else:
            current.append(line)
        after_blank = False

    if current:
        entries.append(current)
    return entries
