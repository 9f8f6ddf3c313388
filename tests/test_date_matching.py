import pytest

from crackmatch.matching import (
    date_match,
    map_ints_to_dm,
    map_ints_to_dmy,
    two_to_four_digit_year,
)


def test_ambiguous_digits_prefer_year_near_reference():
    matches = date_match("1191", reference_year=1990)
    assert [(m.i, m.j) for m in matches] == [(0, 3)]
    date = matches[0].pattern
    assert (date.year, date.month, date.day) == (1991, 1, 1)
    assert date.separator == ""


def test_reference_year_changes_the_reading():
    date = date_match("1191", reference_year=2016)[0].pattern
    assert (date.year, date.month, date.day) == (2001, 9, 11)


def test_default_reference_year():
    date = date_match("1191")[0].pattern
    assert (date.year, date.month, date.day) == (1991, 1, 1)


def test_two_digit_year_beats_far_four_digit_year():
    matches = date_match("111504")
    assert [(m.i, m.j) for m in matches] == [(0, 5)]
    date = matches[0].pattern
    assert (date.year, date.month, date.day) == (2004, 11, 15)
    assert not date.has_full_year


def test_separator_date_prunes_submatches():
    matches = date_match("2015_06_04")
    assert [(m.i, m.j) for m in matches] == [(0, 9)]
    date = matches[0].pattern
    assert date.separator == "_"
    assert date.year == 2015
    assert date.has_full_year


@pytest.mark.parametrize("pw,separator", [
    ("1/1/91", "/"),
    ("1 1 91", " "),
    ("1\\1\\91", "\\"),
    ("1.1.91", "."),
    ("1-1-91", "-"),
    ("1_1_91", "_"),
])
def test_separators(pw, separator):
    matches = date_match(pw)
    assert [(m.i, m.j) for m in matches] == [(0, 5)]
    date = matches[0].pattern
    assert date.separator == separator
    assert (date.year, date.month, date.day) == (1991, 1, 1)


def test_mixed_separators_are_not_a_date():
    assert date_match("1/1-91") == []


def test_date_inside_password():
    matches = date_match("abc11/11/1991xyz")
    assert [(m.i, m.j) for m in matches] == [(3, 12)]
    assert matches[0].token == "11/11/1991"


@pytest.mark.parametrize("pw", ["", "123", "abcdefgh"])
def test_no_dates(pw):
    assert date_match(pw) == []


@pytest.mark.parametrize("ints", [
    (1, 0, 1991),     # middle zero
    (1, 32, 1991),    # middle over 31
    (1, 1, 500),      # neither a two- nor a four-digit year
    (1, 1, 2051),     # past the max year
    (50, 1, 32),      # two values over 31
    (13, 13, 13),     # no month
    (0, 1, 0),        # two zeroes
    (1991, 5, 0),     # four-digit year without a day and month
])
def test_map_ints_to_dmy_rejects(ints):
    assert map_ints_to_dmy(ints) is None


@pytest.mark.parametrize("ints,expected", [
    ((1, 1, 1991), (1991, 1, 1)),
    ((1991, 1, 12), (1991, 12, 1)),
    ((31, 12, 99), (1999, 12, 31)),
    ((12, 31, 15), (2015, 12, 31)),
    ((15, 6, 4), (2004, 6, 15)),
])
def test_map_ints_to_dmy(ints, expected):
    dmy = map_ints_to_dmy(ints)
    assert (dmy.year, dmy.month, dmy.day) == expected


def test_map_ints_to_dm():
    assert map_ints_to_dm((31, 12)) == (31, 12)
    assert map_ints_to_dm((12, 31)) == (31, 12)
    assert map_ints_to_dm((13, 13)) is None


@pytest.mark.parametrize("year,expected", [
    (15, 2015),
    (50, 2050),
    (51, 1951),
    (87, 1987),
    (1991, 1991),
])
def test_two_to_four_digit_year(year, expected):
    assert two_to_four_digit_year(year) == expected
