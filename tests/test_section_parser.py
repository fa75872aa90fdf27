import logging

import pytest

from applyly.core.section_parser import (
    HEADER_LINE_CAPACITY,
    SECTION_NAMES,
    detect_section_header,
    split_into_sections,
)


class TestDetectSectionHeader:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("Education", "education"),
            ("EXPERIENCE", "experience"),
            ("Professional Experience", "experience"),
            ("Work History:", "experience"),
            ("Technical Skills", "skills"),
            ("Publications & Presentations", "publications"),
            ("HONORS & AWARDS", "awards"),
            ("Teaching", "teaching"),
            ("Grants", "grants"),
            ("Conferences", "conferences"),
            ("Projects", "projects"),
            ("LEADERSHIP, VOLUNTEERING", "leadership"),
            ("Honors, Awards", "awards"),
            ("Publications, Presentations", "publications"),
            ("Leadership, Service", "leadership"),
            ("Honors; Scholarships", "awards"),
            ("Certifications", "certifications"),
        ],
    )
    def test_headers(self, line, expected):
        assert detect_section_header(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "Blue Harbor Partners",
            "Python, SQL, Leadership",
            "San Francisco, CA",
            "Teaching Assistant, University of Michigan",
            "ab",
            "Designed and shipped the onboarding flow used by every new customer",
        ],
    )
    def test_content_lines(self, line):
        assert detect_section_header(line) is None

    def test_match_is_logged_with_rule(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="applyly.core.section_parser"):
            detect_section_header("Education")
        assert "Section header found (exact): 'Education' -> education" in caplog.text


class TestSplitIntoSections:
    def test_lines_follow_nearest_header(self):
        lines = [
            "Jane Doe",
            "jane@example.com",
            "",
            "Education",
            "Stanford University",
            "Skills",
            "Python",
        ]
        sections = split_into_sections(lines)

        assert set(sections) == set(SECTION_NAMES)
        assert sections["header"] == ["Jane Doe", "jane@example.com"]
        assert sections["education"] == ["Stanford University"]
        assert sections["skills"] == ["Python"]

    def test_sections_without_bucket_go_to_other(self):
        sections = split_into_sections(["Name", "Certifications", "AWS Certified Developer"])
        assert sections["other"] == ["AWS Certified Developer"]

    def test_header_overflow_stays_in_header(self):
        lines = [f"Line {i}" for i in range(HEADER_LINE_CAPACITY + 2)]
        sections = split_into_sections(lines)
        assert sections["header"] == lines
        assert sections["other"] == []

    def test_multi_keyword_header_collects_its_content(self):
        sections = split_into_sections(["Jane Doe", "Honors, Awards", "Dean's List 2019", "Skills", "Python"])
        assert sections["awards"] == ["Dean's List 2019"]
        assert sections["header"] == ["Jane Doe"]

    def test_header_lines_not_stored(self):
        sections = split_into_sections(["EXPERIENCE", "Engineer at Acme Inc"])
        assert sections["experience"] == ["Engineer at Acme Inc"]
        assert sections["header"] == []

    def test_section_counts_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="applyly.core.section_parser"):
            split_into_sections(["Skills", "Python"])
        assert "Section counts" in caplog.text
