import pytest

from utils.text import SEARCH_NOTICE, normalize, sanitize_search


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("México", "mexico"),
        ("Côte d'Ivoire", "cote d'ivoire"),
        ("ÅLAND", "aland"),
        ("São Tomé and Príncipe", "sao tome and principe"),
        ("", ""),
    ],
)
def test_normalize_strips_accents_and_case(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["México", "İstanbul", "Ångström", "ﬁji", "Straße", "  Mixed Case  "])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_sanitize_keeps_letters_and_spaces():
    assert sanitize_search("  new zealand ") == ("new zealand", False)


def test_sanitize_strips_other_characters():
    value, changed = sanitize_search("Méx1co!")
    assert value == "Mxco"
    assert changed is True


def test_sanitize_empty_input():
    assert sanitize_search("") == ("", False)


def test_notice_text():
    assert SEARCH_NOTICE == "Please type in English only."
