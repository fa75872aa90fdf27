import pytest
from pydantic import ValidationError

from applyly.core.date_parser import (
    extract_date_range,
    extract_point_date,
    format_date_range,
    parse_month_year,
)
from applyly.core.schemas import PRESENT, DateRange


class TestParseMonthYear:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Jan 2020", ("January", "2020")),
            ("Sept 2021", ("September", "2021")),
            ("06/2018", ("June", "2018")),
            ("2020-01", ("January", "2020")),
            ("Fall 2019", ("September", "2019")),
            ("Summer 2017", ("June", "2017")),
            ("October 2020", ("October", "2020")),
            ("present", ("", PRESENT)),
            ("Current", ("", PRESENT)),
            ("p.", ("", PRESENT)),
        ],
    )
    def test_formats(self, text, expected):
        assert parse_month_year(text) == expected

    def test_out_of_bounds_year_ignored(self):
        assert parse_month_year("1899") == ("", "")


class TestExtractDateRange:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Jan 2020 - Dec 2021", ("January", "2020", "December", "2021")),
            ("2019-2023", ("", "2019", "", "2023")),
            ("06/2018 - present", ("June", "2018", "", PRESENT)),
            ("2020-01 - 2021-06", ("January", "2020", "June", "2021")),
            ("October 2018 to March 2020", ("October", "2018", "March", "2020")),
            ("Fall 2019 – Present", ("September", "2019", "", PRESENT)),
        ],
    )
    def test_range_formats(self, text, expected):
        dates = extract_date_range(text)
        assert (dates.start_month, dates.start_year, dates.end_month, dates.end_year) == expected

    def test_range_inside_sentence(self):
        dates = extract_date_range("Software Engineer at Acme Inc 2019 - 2021")
        assert dates.start_year == "2019"
        assert dates.end_year == "2021"

    def test_lone_year_becomes_end_year(self):
        assert extract_date_range("Graduated 2020") == DateRange(end_year="2020")

    def test_no_date(self):
        assert extract_date_range("no dates here").is_empty

    def test_present_never_has_end_month(self):
        for text in ("May 2019 - Present", "01/2020 - current", "2018 to now"):
            dates = extract_date_range(text)
            assert dates.end_year == PRESENT
            assert dates.end_month == ""


class TestPointDate:
    def test_month_and_year(self):
        assert extract_point_date("Presented March 2020") == "March 2020"

    def test_year_only(self):
        assert extract_point_date("Best Paper 2021") == "2021"

    def test_nothing(self):
        assert extract_point_date("Best Paper") == ""


class TestFormatDateRange:
    def test_full_range(self):
        dates = DateRange(start_month="January", start_year="2020", end_month="December", end_year="2021")
        assert format_date_range(dates) == "January 2020 — December 2021"

    def test_open_range_shows_present(self):
        assert format_date_range(DateRange(start_year="2019")) == "2019 — Present"
        assert format_date_range(DateRange(start_year="2019", end_year=PRESENT)) == "2019 — Present"


def test_present_with_end_month_rejected():
    with pytest.raises(ValidationError):
        DateRange(end_month="May", end_year=PRESENT)
