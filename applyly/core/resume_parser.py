"""
End-to-end resume parsing: file -> text -> sections -> entries -> ResumeData.

Only PDF input is accepted. Decode errors raised by pdfplumber are not caught;
every other stage reports missing data as empty values, never as errors.
"""

import logging
from pathlib import PurePath

from applyly.core.education_parser import extract_education
from applyly.core.experience_parser import (
    extract_grants,
    extract_leadership,
    extract_teaching,
    extract_work_experience,
)
from applyly.core.honors_parser import extract_awards, extract_conferences
from applyly.core.pdf_extractor import extract_pdf_text
from applyly.core.personal_info_parser import extract_personal_info
from applyly.core.publication_parser import extract_publications
from applyly.core.schemas import ResumeData
from applyly.core.section_parser import split_into_sections
from applyly.core.skills_parser import extract_skills
from applyly.core.text_normalization import normalize_text

logger = logging.getLogger(__name__)

UNSUPPORTED_FORMAT_MESSAGE = "Only PDF files are supported. Please convert your document to PDF format."
SUPPORTED_EXTENSIONS = (".pdf",)


class UnsupportedFormatError(ValueError):
    """The uploaded file is not a PDF."""

    def __init__(self, filename: str):
        super().__init__(UNSUPPORTED_FORMAT_MESSAGE)
        self.filename = filename


def ensure_supported(filename: str) -> None:
    if PurePath(filename or "").suffix.lower() not in SUPPORTED_EXTENSIONS:
        logger.debug(f"Rejecting unsupported file: {filename!r}")
        raise UnsupportedFormatError(filename)


def default_profile_name(filename: str) -> str:
    """Profile name for a parsed upload: the file name without its extension."""
    return PurePath(filename or "").stem.strip() or "Resume"


def structure_resume_text(text: str) -> ResumeData:
    """
    Build a ResumeData from already-extracted resume text.

    The text is split on newlines and segmented into sections; each section
    goes to its extractor. Personal info reads the header block with the full
    text as fallback.
    """
    sections = split_into_sections(text.split("\n"))

    resume = ResumeData(
        personal_info=extract_personal_info(sections["header"], text),
        work_experience=extract_work_experience(sections["experience"]),
        education=extract_education(sections["education"]),
        leadership_experience=extract_leadership(sections["leadership"]),
        awards=extract_awards(sections["awards"]),
        publications=extract_publications(sections["publications"]),
        grants=extract_grants(sections["grants"]),
        teaching_experience=extract_teaching(sections["teaching"]),
        conferences=extract_conferences(sections["conferences"]),
        skills=extract_skills(sections["skills"]),
    )

    logger.debug(
        f"Parsed resume: {len(resume.work_experience)} jobs, {len(resume.education)} education, "
        f"{len(resume.publications)} publications, {len(resume.skills)} skills"
    )
    return resume


def parse_resume(filename: str, data: bytes) -> ResumeData:
    """
    Parse an uploaded resume file.

    Args:
        filename: Original file name, used for the format check
        data: Raw file bytes

    Returns:
        A fresh ResumeData for this upload

    Raises:
        UnsupportedFormatError: the file name does not end in .pdf (raised
            before any decoding is attempted)
        pdfplumber.utils.exceptions.PdfminerException: the PDF cannot be decoded
    """
    ensure_supported(filename)

    raw_text = extract_pdf_text(data)
    logger.debug(f"Extracted {len(raw_text)} characters from {filename!r}")

    return structure_resume_text(normalize_text(raw_text))
