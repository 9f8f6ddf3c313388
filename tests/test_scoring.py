import pytest

from crackmatch import scoring
from crackmatch.matches import DateMatch, DictionaryMatch, Match, SequenceMatch
from crackmatch.matching import dictionary_match, omnimatch
from crackmatch.scoring import (
    estimate_guesses,
    l33t_variations,
    most_guessable_match_sequence,
    uppercase_variations,
)


def dict_match(token, rank=1, l33t=False, sub=None, reversed=False):
    return Match(0, len(token) - 1, token, DictionaryMatch(
        dictionary_name="d",
        matched_word=token.lower(),
        rank=rank,
        reversed=reversed,
        l33t=l33t,
        sub=sub or {},
    ))


def test_empty_password():
    result = most_guessable_match_sequence("", [])
    assert result.guesses == 1
    assert result.sequence == []


def test_bruteforce_only():
    result = most_guessable_match_sequence("abcdefghij", [])
    assert len(result.sequence) == 1
    assert result.sequence[0].pattern_name == "bruteforce"
    assert result.guesses == 1e10 + 1


def test_exclude_additive():
    result = most_guessable_match_sequence("abcdefghij", [], exclude_additive=True)
    assert result.guesses == 1e10


def test_dictionary_word_covers_password():
    matches = dictionary_match("password", {"d": {"password": 1}})
    result = most_guessable_match_sequence("password", matches)
    assert [m.pattern_name for m in result.sequence] == ["dictionary"]
    assert result.guesses == 2


def test_sequence_fills_gaps_with_bruteforce():
    password = "xxpasswordxx"
    matches = dictionary_match(password, {"d": {"password": 1}})
    result = most_guessable_match_sequence(password, matches)
    assert [m.pattern_name for m in result.sequence] == ["bruteforce", "dictionary", "bruteforce"]
    assert "".join(m.token for m in result.sequence) == password


def test_sequence_covers_password():
    password = "Tr0ub4dour&3"
    result = most_guessable_match_sequence(password, omnimatch(password))
    assert "".join(m.token for m in result.sequence) == password
    assert result.sequence[0].i == 0
    assert result.sequence[-1].j == len(password) - 1


def test_guesses_saturate_instead_of_overflowing():
    result = most_guessable_match_sequence("x" * 400, [])
    assert result.guesses == scoring.MAX_GUESSES


@pytest.mark.parametrize("word,expected", [
    ("password", 1),
    ("Password", 2),
    ("passworD", 2),
    ("PASSWORD", 2),
    ("PaSsWoRd", 162),
    ("123456", 1),
])
def test_uppercase_variations(word, expected):
    assert uppercase_variations(dict_match(word)) == expected


def test_l33t_variations():
    assert l33t_variations(dict_match("password")) == 1
    assert l33t_variations(dict_match("p4ssword", l33t=True, sub={"4": "a"})) == 2
    # aa44a: one or two of five positions substituted
    assert l33t_variations(dict_match("aa44a", l33t=True, sub={"4": "a"})) == 15


def test_dictionary_guesses():
    assert estimate_guesses(dict_match("Password", rank=32), "Password") == 64
    assert estimate_guesses(dict_match("drow", rank=10, reversed=True), "drow") == 20


def test_submatch_floor():
    match = dict_match("a", rank=1)
    assert estimate_guesses(match, "a") == 1
    assert estimate_guesses(match, "ab") == scoring.MIN_SUBMATCH_GUESSES_SINGLE_CHAR


def test_sequence_guesses():
    ascending = Match(0, 2, "abc", SequenceMatch("lower", 26, True))
    descending = Match(0, 2, "cba", SequenceMatch("lower", 26, False))
    assert estimate_guesses(ascending, "abc") == 4 * 3
    assert estimate_guesses(descending, "cba") == 26 * 2 * 3


def test_date_guesses():
    year = scoring.REFERENCE_YEAR + 100
    plain = Match(0, 3, "xxxx", DateMatch("", year, 1, 1))
    separated = Match(0, 5, "xxxxxx", DateMatch("/", year, 1, 1))
    assert estimate_guesses(plain, "xxxx") == 100 * 365
    assert estimate_guesses(separated, "xxxxxx") == 100 * 365 * 4


def test_unknown_pattern_is_rejected():
    match = Match(0, 0, "a", object())
    with pytest.raises(TypeError):
        estimate_guesses(match, "a")
