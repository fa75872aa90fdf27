import logging

from applyly.core.publication_parser import (
    extract_publications,
    format_authors,
    parse_authors_to_list,
    parse_publication,
)
from applyly.core.schemas import Author, Publication


class TestParseAuthorsToList:
    def test_semicolon_separated_initials(self):
        assert parse_authors_to_list("Smith, J.; Doe, A. B.") == [
            Author(first_name="J.", last_name="Smith"),
            Author(first_name="A. B.", last_name="Doe"),
        ]

    def test_round_trip_through_display_string(self):
        authors = "Smith, J.; Doe, A. B."
        assert format_authors(parse_authors_to_list(authors)) == authors

    def test_and_separated_full_names(self):
        assert parse_authors_to_list("John Smith and Jane Doe") == [
            Author(first_name="John", last_name="Smith"),
            Author(first_name="Jane", last_name="Doe"),
        ]

    def test_comma_separated_lastname_initials(self):
        assert parse_authors_to_list("Smith, J., Doe, A.") == [
            Author(first_name="J.", last_name="Smith"),
            Author(first_name="A.", last_name="Doe"),
        ]

    def test_year_and_hyphen_spacing_cleaned(self):
        [author] = parse_authors_to_list("Jimenez - Vergara, M. (2020)")
        assert author == Author(first_name="M.", last_name="Jimenez-Vergara")

    def test_empty(self):
        assert parse_authors_to_list("") == []

    def test_intermediate_state_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="applyly.core.publication_parser"):
            parse_authors_to_list("Smith, J.; Doe, A. B.")
        assert "Authors split by semicolon" in caplog.text


def test_parse_citation():
    pub = parse_publication(
        "Smith, J.; Doe, A. B. (2021). Parsing resumes with heuristics. Journal of Applied Computing, 5."
    )

    assert pub.authors == "Smith, J.; Doe, A. B."
    assert len(pub.authors_list) == 2
    assert pub.title == "Parsing resumes with heuristics"
    assert pub.journal == "Journal of Applied Computing"
    assert pub.date == "2021"
    assert pub.url == ""


def test_extract_numbered_publications():
    lines = [
        "1. Smith, J.; Doe, A. B. (2021). Parsing resumes with heuristics.",
        "Journal of Applied Computing, 5.",
        "2. Lee, K. (2019). Layout analysis for scanned documents. In Proceedings of Document Engineering, 12-20. https://doi.org/10.1000/xyz123",
    ]
    first, second = extract_publications(lines)

    assert first.authors == "Smith, J.; Doe, A. B."
    assert first.journal == "Journal of Applied Computing"

    assert second.authors == "Lee, K."
    assert second.title == "Layout analysis for scanned documents"
    assert second.journal == "Proceedings of Document Engineering"
    assert second.url == "https://doi.org/10.1000/xyz123"
    assert second.date == "2019"


def test_short_entries_discarded():
    assert extract_publications(["* tiny", "abc"]) == []


def test_with_authors_keeps_list_in_sync():
    pub = Publication(title="A Study")
    edited = pub.with_authors("Smith, J.; Doe, A. B.")

    assert edited.authors == "Smith, J.; Doe, A. B."
    assert [a.last_name for a in edited.authors_list] == ["Smith", "Doe"]
    assert pub.authors_list == ()
    assert edited.id == pub.id
