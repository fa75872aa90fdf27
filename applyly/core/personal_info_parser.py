import re
from typing import List

from applyly.core.schemas import PersonalInfo
from applyly.core.text_normalization import clean_field_value


EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERNS = (
    re.compile(r"\+1[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),
    re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),
)
LINKEDIN_PATTERNS = (
    re.compile(r"https?://(?:www\.)?linkedin\.com/in/([a-zA-Z0-9_-]+)/?", re.IGNORECASE),
    re.compile(r"linkedin\.com/in/([a-zA-Z0-9_-]+)/?", re.IGNORECASE),
)
GITHUB_PATTERNS = (
    re.compile(r"https?://(?:www\.)?github\.com/([a-zA-Z0-9_-]+)/?", re.IGNORECASE),
    re.compile(r"github\.com/([a-zA-Z0-9_-]+)/?", re.IGNORECASE),
)
WEBSITE_RE = re.compile(r"https?://(?!(?:www\.)?(?:linkedin|github)\.com)[^\s,)\]]+", re.IGNORECASE)
# "City, ST" with optional ZIP
ADDRESS_RE = re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),?\s*([A-Z]{2})\b(?:\s+\d{5})?")


def extract_linkedin(text: str) -> str:
    for pattern in LINKEDIN_PATTERNS:
        m = pattern.search(text)
        if m:
            return clean_field_value(f"https://linkedin.com/in/{m.group(1)}", "url")
    return ""


def extract_github(text: str) -> str:
    for pattern in GITHUB_PATTERNS:
        m = pattern.search(text)
        if m:
            return clean_field_value(f"https://github.com/{m.group(1)}", "url")
    return ""


def extract_website(text: str) -> str:
    m = WEBSITE_RE.search(text)
    return clean_field_value(m.group(0), "url") if m else ""


def _split_name(name_line: str) -> tuple[str, str]:
    parts = [p for p in name_line.split() if len(p) > 1 and p[0].isalpha()]
    first = clean_field_value(parts[0] if parts else "", "name")
    last = clean_field_value(" ".join(parts[1:]), "name")
    return first, last


def extract_personal_info(header_lines: List[str], full_text: str) -> PersonalInfo:
    """
    Contact details from the header block, with the whole document as fallback.

    The name is read from the first header line after removing any email,
    phone and separator characters on it.
    """
    header_text = " ".join(header_lines)

    email_match = EMAIL_RE.search(full_text)
    raw_email = email_match.group(0) if email_match else ""
    email = clean_field_value(raw_email, "email") if raw_email else ""

    raw_phone = ""
    for pattern in PHONE_PATTERNS:
        m = pattern.search(header_text) or pattern.search(full_text)
        if m:
            raw_phone = m.group(0)
            break
    phone = clean_field_value(raw_phone, "phone") if raw_phone else ""

    address_match = ADDRESS_RE.search(header_text)
    address = address_match.group(0) if address_match else ""

    first_name, last_name = "", ""
    if header_lines:
        name_line = header_lines[0]
        for token in (raw_email, raw_phone):
            if token:
                name_line = name_line.replace(token, "")
        name_line = re.sub(r"[|•·,]", " ", name_line).strip()
        first_name, last_name = _split_name(name_line)

    return PersonalInfo(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        linkedin=extract_linkedin(full_text),
        website=extract_website(full_text),
        github=extract_github(full_text),
        address=address,
    )
