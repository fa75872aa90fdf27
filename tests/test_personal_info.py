from applyly.core.personal_info_parser import (
    extract_github,
    extract_linkedin,
    extract_personal_info,
    extract_website,
)


def test_full_header_block():
    header = [
        "JANE DOE",
        "jane.doe@example.com | +1 555-123-4567",
        "Austin, TX 78701",
        "linkedin.com/in/janedoe | github.com/jdoe | https://janedoe.dev",
    ]
    info = extract_personal_info(header, "\n".join(header))

    assert info.first_name == "Jane"
    assert info.last_name == "Doe"
    assert info.email == "jane.doe@example.com"
    assert info.phone == "+1 (555) 123-4567"
    assert info.address == "Austin, TX 78701"
    assert info.linkedin == "https://linkedin.com/in/janedoe"
    assert info.github == "https://github.com/jdoe"
    assert info.website == "https://janedoe.dev"


def test_name_line_with_contact_details():
    header = ["Jane Doe | jane@example.com | (555) 123-4567"]
    info = extract_personal_info(header, header[0])

    assert (info.first_name, info.last_name) == ("Jane", "Doe")
    assert info.email == "jane@example.com"
    assert info.phone == "(555) 123-4567"


def test_phone_falls_back_to_full_text():
    info = extract_personal_info(["Jane Doe"], "Jane Doe\nContact: 555 123 4567")
    assert info.phone == "(555) 123-4567"


def test_multi_word_last_name():
    info = extract_personal_info(["Maria de la Cruz"], "Maria de la Cruz")
    assert info.first_name == "Maria"
    assert info.last_name == "De La Cruz"


def test_nothing_found():
    info = extract_personal_info([], "")
    assert info.model_dump() == {
        "first_name": "", "last_name": "", "email": "", "phone": "",
        "linkedin": "", "website": "", "github": "", "address": "",
    }


def test_profile_urls_canonicalised():
    assert extract_linkedin("https://www.linkedin.com/in/jane-doe/") == "https://linkedin.com/in/jane-doe"
    assert extract_github("see GitHub.com/jdoe") == "https://github.com/jdoe"


def test_website_skips_profile_links():
    text = "https://linkedin.com/in/jane https://github.com/jane http://jane.example.org"
    assert extract_website(text) == "http://jane.example.org"
