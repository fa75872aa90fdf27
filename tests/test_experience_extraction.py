"""
Tests for work, leadership, teaching and grant extraction.
"""

from applyly.core.experience_parser import (
    detect_company,
    detect_title,
    extract_grants,
    extract_leadership,
    extract_teaching,
    extract_work_experience,
)
from applyly.core.schemas import PRESENT


class TestWorkExperience:
    def test_title_at_company_with_range(self):
        lines = [
            "Software Engineer at Acme Inc 2019 - 2021",
            "- Built data pipelines processing millions of records daily",
        ]
        [job] = extract_work_experience(lines)

        assert job.title == "Software Engineer"
        assert job.company == "Acme Inc"
        assert job.dates.start_year == "2019"
        assert job.dates.end_year == "2021"
        assert job.description == "• Built data pipelines processing millions of records daily"
        assert job.present is False

    def test_pipe_separated_heading_with_location(self):
        lines = [
            "Data Analyst | Beta Labs | Austin, TX | Jan 2018 - Present",
            "- Automated weekly reporting for leadership team",
        ]
        [job] = extract_work_experience(lines)

        assert job.title == "Data Analyst"
        assert job.company == "Beta Labs"
        assert job.location == "Austin, TX"
        assert job.dates.start_month == "January"
        assert job.dates.end_year == PRESENT
        assert job.dates.end_month == ""
        assert job.present is True

    def test_title_lines_are_not_description(self):
        lines = [
            "Acme Inc 2018 - 2020",
            "Software Engineer",
            "- Led migration of billing services to the cloud",
        ]
        [job] = extract_work_experience(lines)

        assert job.title == "Software Engineer"
        assert job.company == "Acme Inc"
        assert job.description == "• Led migration of billing services to the cloud"

    def test_multiple_entries(self):
        lines = [
            "Software Engineer at Acme Inc 2019 - 2021",
            "- Built data pipelines processing millions of records daily",
            "Data Analyst at Beta Labs 2017 - 2019",
            "- Automated weekly reporting for leadership team",
        ]
        jobs = extract_work_experience(lines)

        assert [j.company for j in jobs] == ["Acme Inc", "Beta Labs"]
        assert len({j.id for j in jobs}) == 2

    def test_title_keyword_is_not_taken_as_company(self):
        lines = [
            "Software Engineer 2019 - 2021",
            "Acme Inc",
            "- Shipped the payments platform to production",
        ]
        [job] = extract_work_experience(lines)

        assert job.title == "Software Engineer"
        assert job.company == "Acme Inc"
        assert job.description == "• Shipped the payments platform to production"

    def test_placeholder_company(self):
        [job] = extract_work_experience(["Freelance Work 2020 - 2021"])
        assert job.title == "Freelance Work"
        assert job.company == "Company"

    def test_entry_without_signals_dropped(self):
        assert extract_work_experience(["2019 - 2020"]) == []

    def test_empty_section(self):
        assert extract_work_experience([]) == []


class TestKeywordDetection:
    def test_company_suffix(self):
        assert detect_company("worked for Globex Corp. in Ohio") == "Globex Corp."

    def test_company_institution_fallback(self):
        assert detect_company("Research at Stanford University") == "Stanford University"

    def test_title_requires_capitalised_phrase(self):
        assert detect_title("Senior Product Manager") == "Senior Product Manager"
        assert detect_title("managed the team") == ""


def test_leadership_role_and_organization():
    lines = [
        "President, Chess Club 2019 - 2020",
        "- Organized weekly tournaments for forty members",
    ]
    [entry] = extract_leadership(lines)

    assert entry.role == "President"
    assert entry.organization == "Chess Club"
    assert entry.dates.end_year == "2020"
    assert entry.description == "• Organized weekly tournaments for forty members"


def test_teaching_role_course_and_institution():
    lines = ["Teaching Assistant, CS 101 Intro to Programming, Stanford University 2020 - 2021"]
    [entry] = extract_teaching(lines)

    assert entry.role == "Teaching Assistant"
    assert entry.course == "CS 101"
    assert entry.institution == "Stanford University"
    assert entry.dates.start_year == "2020"


def test_grant_amount_and_funder():
    lines = ["NSF Graduate Research Fellowship, $138,000 funded by National Science Foundation 2019 - 2022"]
    [grant] = extract_grants(lines)

    assert grant.title == "NSF Graduate Research Fellowship"
    assert grant.amount == "$138,000"
    assert grant.funder == "National Science Foundation"
    assert grant.dates.end_year == "2022"
