"""
Text normalization utilities for cleaning up PDF extraction artifacts.

Two levels:
- normalize_text(): document-wide repair of kerning splits and spacing
- clean_field_value(): per-field cleanup applied to extracted values
"""

import re
from typing import Literal


FieldType = Literal["name", "email", "phone", "url", "text", "date"]

# Resume vocabulary used to decide whether a split word should be re-joined
COMMON_WORDS = (
    "professional", "experience", "education", "university", "bachelor", "master",
    "development", "management", "engineering", "technology", "computer", "science",
    "business", "administration", "associate", "certificate", "leadership", "volunteer",
    "organization", "achievement", "accomplishment", "publication", "presentation",
    "conference", "responsible", "communication", "collaboration", "implementation",
    "international", "department", "foundation", "scholarship", "fellowship", "research",
    "analysis", "analytical", "strategic", "operations", "performance", "excellent",
    "expertise", "proficiency", "environment", "application", "architecture", "software",
)

SINGLE_LETTER_SPLIT_RE = re.compile(r"\b([A-Za-z])[ \t]+([a-z]{2,})\b")
SHORT_FRAGMENT_SPLIT_RE = re.compile(r"\b([A-Za-z]{2,3})[ \t]+([a-z]{3,})\b")
MULTI_SPACE_RE = re.compile(r"[ \t]{2,}")
SPACE_BEFORE_PUNCT_RE = re.compile(r"[ \t]+([.,;:!?])")
ISOLATED_CAPITAL_RE = re.compile(r"\b([A-Z])[ \t](?=[a-z]{4,})")

MONTH_WORD_RE = re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\w*", re.IGNORECASE)


def _join_if_prefix_of_known_word(match: re.Match) -> str:
    first, rest = match.group(1), match.group(2)
    combined = (first + rest).lower()
    if any(word == combined or word.startswith(combined) for word in COMMON_WORDS):
        return first + rest
    return match.group(0)


def _join_if_known_word(match: re.Match) -> str:
    first, rest = match.group(1), match.group(2)
    if (first + rest).lower() in COMMON_WORDS:
        return first + rest
    return match.group(0)


def normalize_line(line: str) -> str:
    """
    Repair one line of extracted text.

    Examples:
        "P rofessional Exp erience" -> "Professional Experience"
        "pro fessional" -> "professional"
        "Python ,  SQL" -> "Python, SQL"
        "S oftware" -> "Software"
    """
    result = SINGLE_LETTER_SPLIT_RE.sub(_join_if_prefix_of_known_word, line)
    result = SHORT_FRAGMENT_SPLIT_RE.sub(_join_if_known_word, result)
    result = MULTI_SPACE_RE.sub(" ", result)
    result = SPACE_BEFORE_PUNCT_RE.sub(r"\1", result)
    result = ISOLATED_CAPITAL_RE.sub(r"\1", result)
    return result


def normalize_text(text: str) -> str:
    """Apply normalize_line() to every line; line breaks are preserved."""
    if not text:
        return text
    return "\n".join(normalize_line(line) for line in text.split("\n"))


def _title_case_each_word(text: str) -> str:
    return " ".join(w[0].upper() + w[1:].lower() for w in text.split())


def clean_field_value(value: str, field_type: FieldType = "text") -> str:
    """
    Field-level cleanup for an extracted value.

    - name: drop non-name characters, title-case each word
    - email: strip whitespace, lowercase
    - phone: 10 digits -> (NNN) NNN-NNNN, 11 digits with leading 1 -> +1 (NNN) NNN-NNNN
    - url: bare domains get an https:// prefix
    - date: month names title-cased
    """
    cleaned = normalize_text(value or "").strip()

    if field_type == "name":
        cleaned = re.sub(r"[^A-Za-z\s\-']", "", cleaned).strip()
        cleaned = _title_case_each_word(cleaned)
    elif field_type == "email":
        cleaned = re.sub(r"\s", "", cleaned).lower()
    elif field_type == "phone":
        digits = re.sub(r"\D", "", cleaned)
        if len(digits) == 10:
            cleaned = f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
        elif len(digits) == 11 and digits.startswith("1"):
            cleaned = f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    elif field_type == "url":
        if cleaned and not cleaned.startswith("http"):
            cleaned = "https://" + cleaned
    elif field_type == "date":
        cleaned = MONTH_WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), cleaned)

    return cleaned
