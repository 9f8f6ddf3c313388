import re
from typing import Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from .adjacency_graphs import GRAPHS, Graph
from .frequency_lists import RANKED_DICTIONARIES, build_ranked_dict
from .logger import get_logger
from .matches import (
    DateMatch,
    DictionaryMatch,
    Match,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)
from . import scoring

logger = get_logger(__name__)

RankedDicts = Mapping[str, Mapping[str, int]]
Scorer = Callable[[str, List[Match], bool], "scoring.ScoredSequence"]

L33T_TABLE = {
    'a': ['4', '@'],
    'b': ['8'],
    'c': ['(', '{', '[', '<'],
    'e': ['3'],
    'g': ['6', '9'],
    'i': ['1', '!', '|'],
    'l': ['1', '|', '7'],
    'o': ['0'],
    's': ['$', '5'],
    't': ['+', '7'],
    'x': ['%'],
    'z': ['2'],
}

REGEXEN = {
    'recent_year': re.compile(r'19\d\d|200\d|201\d'),
}

DATE_MAX_YEAR = 2050
DATE_MIN_YEAR = 1000
# (k, l): the groups are token[:k], token[k:l] and token[l:]
DATE_SPLITS = {
    4: [
        (1, 2),  # 1 1 91
        (2, 3),  # 91 1 1
    ],
    5: [
        (1, 3),  # 1 11 91
        (2, 3),  # 11 1 91
    ],
    6: [
        (1, 2),  # 1 1 1991
        (2, 4),  # 11 11 91
        (4, 5),  # 1991 1 1
    ],
    7: [
        (1, 3),  # 1 11 1991
        (2, 3),  # 11 1 1991
        (4, 5),  # 1991 1 11
        (4, 6),  # 1991 11 1
    ],
    8: [
        (2, 4),  # 11 11 1991
        (4, 6),  # 1991 11 11
    ],
}

MAX_DELTA = 5

SHIFTED_RX = re.compile(r'[~!@#$%^&*()_+QWERTYUIOP{}|ASDFGHJKL:"ZXCVBNM<>?]')

GREEDY_RX = re.compile(r'(.+)\1+')
LAZY_RX = re.compile(r'(.+?)\1+')

MAYBE_DATE_NO_SEPARATOR_RX = re.compile(r'\d{4,8}', re.ASCII)
MAYBE_DATE_WITH_SEPARATOR_RX = re.compile(r'(\d{1,4})([\s/\\_.-])(\d{1,2})\2(\d{1,4})', re.ASCII)

SEQUENCE_CLASSES = [
    ('lower', re.compile(r'[a-z]+'), 26),
    ('upper', re.compile(r'[A-Z]+'), 26),
    ('digits', re.compile(r'[0-9]+'), 10),
]

_ASCII_UPPER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def ascii_lower(string: str) -> str:
    # non-ascii characters pass through unfolded
    return string.translate(_ASCII_UPPER)


def translate(string: str, chr_map: Mapping[str, str]) -> str:
    return ''.join(chr_map.get(char, char) for char in string)


def _sorted(matches: List[Match]) -> List[Match]:
    return sorted(matches, key=lambda m: (m.i, m.j))


def omnimatch(password: str,
              user_inputs: Iterable[str] = (),
              ranked_dictionaries: Optional[RankedDicts] = None,
              graphs: Optional[Mapping[str, Graph]] = None,
              scorer: Optional[Scorer] = None) -> List[Match]:
    """
    Run every matcher over ``password`` and return all matches sorted by (i, j).

    ``user_inputs`` (username, email, ...) become an extra ranked dictionary
    for this call only. Dictionaries, graphs and the scorer default to the
    package's built-in ones.
    """
    if ranked_dictionaries is None:
        ranked_dictionaries = RANKED_DICTIONARIES
    if graphs is None:
        graphs = GRAPHS
    if scorer is None:
        scorer = scoring.most_guessable_match_sequence

    dictionaries = dict(ranked_dictionaries)
    dictionaries['user_inputs'] = build_ranked_dict(ascii_lower(str(word)) for word in user_inputs)

    matchers = [
        lambda pw: dictionary_match(pw, dictionaries),
        lambda pw: reverse_dictionary_match(pw, dictionaries),
        lambda pw: l33t_match(pw, dictionaries, L33T_TABLE),
        lambda pw: spatial_match(pw, graphs),
        lambda pw: repeat_match(pw, ranked_dictionaries, graphs, scorer),
        sequence_match,
        lambda pw: regex_match(pw, REGEXEN),
        date_match,
    ]
    matches = []
    for matcher in matchers:
        matches.extend(matcher(password))
    logger.debug("omnimatch found %d matches in a %d character password", len(matches), len(password))
    return _sorted(matches)


# ------------------------------------------------------------------------------
# dictionary match (common passwords, english, last names, etc) ----------------
# ------------------------------------------------------------------------------

def dictionary_match(password: str, ranked_dictionaries: RankedDicts) -> List[Match]:
    matches = []
    length = len(password)
    password_lower = ascii_lower(password)
    for dictionary_name, ranked_dict in ranked_dictionaries.items():
        for i in range(length):
            for j in range(i, length):
                word = password_lower[i:j + 1]
                if word in ranked_dict:
                    matches.append(Match(i, j, password[i:j + 1], DictionaryMatch(
                        dictionary_name=dictionary_name,
                        matched_word=word,
                        rank=ranked_dict[word],
                    )))
    return _sorted(matches)


def reverse_dictionary_match(password: str, ranked_dictionaries: RankedDicts) -> List[Match]:
    length = len(password)
    matches = dictionary_match(password[::-1], ranked_dictionaries)
    for match in matches:
        match.token = match.token[::-1]
        match.pattern.reversed = True
        # map coordinates back to the original string
        match.i, match.j = length - 1 - match.j, length - 1 - match.i
    return _sorted(matches)


# ------------------------------------------------------------------------------
# dictionary match with common l33t substitutions ------------------------------
# ------------------------------------------------------------------------------

def relevant_l33t_subtable(password: str, table: Mapping[str, List[str]]) -> Dict[str, List[str]]:
    """Prune ``table`` down to the substitutions that occur in ``password``"""
    subtable = {}
    for letter, subs in table.items():
        relevant_subs = [sub for sub in subs if sub in password]
        if relevant_subs:
            subtable[letter] = relevant_subs
    return subtable


def enumerate_l33t_subs(table: Mapping[str, List[str]]) -> List[Dict[str, str]]:
    """
    Return every consistent l33t decoding for the given subtable.

    A substituted character can stand for one letter at a time, so when two
    letters share a character ('1' for 'i' or 'l') both assignments are kept
    as separate alternatives.
    """
    subs = [[]]

    def dedup(subs):
        deduped = []
        members = set()
        for sub in subs:
            label = tuple(sorted(sub))
            if label not in members:
                members.add(label)
                deduped.append(sub)
        return deduped

    for letter, l33t_chrs in table.items():
        next_subs = []
        for l33t_chr in l33t_chrs:
            for sub in subs:
                dup_index = next((k for k, (chr_, _) in enumerate(sub) if chr_ == l33t_chr), None)
                if dup_index is None:
                    next_subs.append(sub + [(l33t_chr, letter)])
                else:
                    sub_alternative = sub[:dup_index] + sub[dup_index + 1:]
                    sub_alternative.append((l33t_chr, letter))
                    next_subs.append(sub)
                    next_subs.append(sub_alternative)
        subs = dedup(next_subs)

    return [dict(sub) for sub in subs]


def l33t_match(password: str,
               ranked_dictionaries: RankedDicts,
               l33t_table: Mapping[str, List[str]]) -> List[Match]:
    matches = []
    for sub in enumerate_l33t_subs(relevant_l33t_subtable(password, l33t_table)):
        if not sub:
            # no l33t characters in the password at all
            break
        subbed_password = translate(password, sub)
        for match in dictionary_match(subbed_password, ranked_dictionaries):
            token = password[match.i:match.j + 1]
            if ascii_lower(token) == match.pattern.matched_word:
                # only keep matches that contain an actual substitution
                continue
            # subset of mappings in sub that are in use for this match
            match_sub = {subbed_chr: chr_ for subbed_chr, chr_ in sub.items() if subbed_chr in token}
            match.token = token
            match.pattern.l33t = True
            match.pattern.sub = match_sub
            match.pattern.sub_display = ', '.join(
                f"{k} -> {v}" for k, v in match_sub.items()
            )
            matches.append(match)

    # single-character l33t matches are noise: '1' would match 'i', '4' 'a'.
    matches = [match for match in matches if len(match.token) > 1]
    return _sorted(matches)


# ------------------------------------------------------------------------------
# spatial match (qwerty/dvorak/keypad) -----------------------------------------
# ------------------------------------------------------------------------------

def spatial_match(password: str, graphs: Mapping[str, Graph]) -> List[Match]:
    matches = []
    for graph_name, graph in graphs.items():
        matches.extend(spatial_match_helper(password, graph, graph_name))
    return _sorted(matches)


def spatial_match_helper(password: str, graph: Graph, graph_name: str) -> List[Match]:
    matches = []
    i = 0
    while i < len(password) - 1:
        j = i + 1
        last_direction = None
        turns = 0
        if graph_name in ('qwerty', 'dvorak') and SHIFTED_RX.match(password[i]):
            # initial character is shifted
            shifted_count = 1
        else:
            shifted_count = 0

        while True:
            prev_char = password[j - 1]
            found = False
            adjacents = graph.get(prev_char) or []
            if j < len(password):
                cur_char = password[j]
                for direction, adj in enumerate(adjacents):
                    if adj and cur_char in adj:
                        found = True
                        if adj.index(cur_char) == 1:
                            # second char of a neighbor token is the shifted one: "2@"
                            shifted_count += 1
                        if last_direction != direction:
                            # the first step counts as a turn too
                            turns += 1
                            last_direction = direction
                        break

            if found:
                j += 1
            else:
                # one or two keys are not a pattern
                if j - i > 2:
                    matches.append(Match(i, j - 1, password[i:j], SpatialMatch(
                        graph=graph_name,
                        turns=turns,
                        shifted_count=shifted_count,
                    )))
                i = j
                break
    return matches


# ------------------------------------------------------------------------------
# repeats (aaa, abcabcabc) and sequences (abcdef) ------------------------------
# ------------------------------------------------------------------------------

def repeat_match(password: str,
                 ranked_dictionaries: Optional[RankedDicts] = None,
                 graphs: Optional[Mapping[str, Graph]] = None,
                 scorer: Optional[Scorer] = None) -> List[Match]:
    if scorer is None:
        scorer = scoring.most_guessable_match_sequence
    matches = []
    last_index = 0
    while last_index < len(password):
        greedy_match = GREEDY_RX.search(password, last_index)
        if not greedy_match:
            break
        lazy_match = LAZY_RX.search(password, last_index)

        if len(greedy_match.group(0)) > len(lazy_match.group(0)):
            # "aabaab": greedy takes it all, lazy only "aa"
            match = greedy_match
            # in "aabaabaabaab" greedy repeats "aabaab", itself made of "aab"
            anchored_match = LAZY_RX.fullmatch(match.group(0))
            assert anchored_match, match.group(0)
            base_token = anchored_match.group(1)
        else:
            # "aaaaa": lazy takes all five, greedy only four
            match = lazy_match
            base_token = match.group(1)

        i, j = match.start(), match.end() - 1
        # base_token is strictly shorter than password, so this terminates
        base_analysis = scorer(
            base_token,
            omnimatch(base_token, (), ranked_dictionaries, graphs, scorer),
            False,
        )
        matches.append(Match(i, j, match.group(0), RepeatMatch(
            base_token=base_token,
            base_guesses=base_analysis.guesses,
            base_matches=list(base_analysis.sequence),
            repeat_count=len(match.group(0)) // len(base_token),
        )))
        last_index = j + 1
    return matches


def sequence_match(password: str) -> List[Match]:
    """
    Find runs where each character is a fixed code point step from the last.

    Steps of up to MAX_DELTA are allowed, so 9753 counts, and so do runs in
    other alphabets. 'abcdb975zy' has steps 1 1 1 -2 -41 -2 -2 69 -1 and
    yields abcd, 975 and zy. Two-character runs count only for steps of one.
    """
    if len(password) == 1:
        return []

    result = []

    def update(i, j, delta):
        if j - i > 1 or abs(delta) == 1:
            if 0 < abs(delta) <= MAX_DELTA:
                token = password[i:j + 1]
                for sequence_name, regex, sequence_space in SEQUENCE_CLASSES:
                    if regex.fullmatch(token):
                        break
                else:
                    # conservative default for anything else
                    sequence_name, sequence_space = 'unicode', 26
                result.append(Match(i, j, token, SequenceMatch(
                    sequence_name=sequence_name,
                    sequence_space=sequence_space,
                    ascending=delta > 0,
                )))

    i = 0
    last_delta = None
    for k in range(1, len(password)):
        delta = ord(password[k]) - ord(password[k - 1])
        if last_delta is None:
            last_delta = delta
        if delta == last_delta:
            continue
        j = k - 1
        update(i, j, last_delta)
        i = j
        last_delta = delta
    if last_delta is not None:
        update(i, len(password) - 1, last_delta)

    return result


# ------------------------------------------------------------------------------
# regex matching ---------------------------------------------------------------
# ------------------------------------------------------------------------------

def regex_match(password: str, regexen: Mapping[str, "re.Pattern"]) -> List[Match]:
    matches = []
    for name, regex in regexen.items():
        for rx_match in regex.finditer(password):
            token = rx_match.group(0)
            matches.append(Match(rx_match.start(), rx_match.end() - 1, token, RegexMatch(
                regex_name=name,
                regex_match=(token,) + rx_match.groups(),
            )))
    return _sorted(matches)


# ------------------------------------------------------------------------------
# date matching ----------------------------------------------------------------
# ------------------------------------------------------------------------------

def date_match(password: str, reference_year: Optional[int] = None) -> List[Match]:
    """
    Find day-month-year dates, written as 1191, 1-1-91, 01.01.1991 and so on.

    Digit runs of 4 to 8 characters are split every plausible way and the
    reading whose year is nearest ``reference_year`` wins; with separators the
    grouping is fixed by the separators, which must both be the same. No
    calendar check is made, so Feb 31 passes. Dates lying inside a longer
    date are dropped.
    """
    if reference_year is None:
        reference_year = scoring.REFERENCE_YEAR
    matches = []
    length = len(password)

    # 1191 up to 11111991
    for i in range(length - 3):
        for j in range(i + 3, i + 8):
            if j >= length:
                break
            token = password[i:j + 1]
            if not MAYBE_DATE_NO_SEPARATOR_RX.fullmatch(token):
                continue
            candidates = []
            for k, l in DATE_SPLITS[len(token)]:
                dmy = map_ints_to_dmy((int(token[:k]), int(token[k:l]), int(token[l:])))
                if dmy:
                    candidates.append(dmy)
            if not candidates:
                continue
            # "111504" reads better as 11-15-04 than as 1-1-1504
            best = min(candidates, key=lambda candidate: abs(candidate.year - reference_year))
            matches.append(Match(i, j, token, DateMatch(
                separator='',
                year=best.year,
                month=best.month,
                day=best.day,
                has_full_year=best.has_full_year,
            )))

    # 1/1/91 up to 11/11/1991
    for i in range(length - 5):
        for j in range(i + 5, i + 10):
            if j >= length:
                break
            token = password[i:j + 1]
            rx_match = MAYBE_DATE_WITH_SEPARATOR_RX.fullmatch(token)
            if not rx_match:
                continue
            dmy = map_ints_to_dmy((int(rx_match.group(1)), int(rx_match.group(3)), int(rx_match.group(4))))
            if not dmy:
                continue
            matches.append(Match(i, j, token, DateMatch(
                separator=rx_match.group(2),
                year=dmy.year,
                month=dmy.month,
                day=dmy.day,
                has_full_year=dmy.has_full_year,
            )))

    # drop dates inside other dates: 15_06_04 inside 2015_06_04
    def is_submatch(match):
        for other in matches:
            if (other.i, other.j) == (match.i, match.j):
                continue
            if other.i <= match.i and other.j >= match.j:
                return True
        return False

    return _sorted([match for match in matches if not is_submatch(match)])


class DayMonthYear(NamedTuple):
    year: int
    month: int
    day: int
    has_full_year: bool


def map_ints_to_dmy(ints: Tuple[int, int, int]) -> Optional["DayMonthYear"]:
    """
    Read three integers as a (year, month, day), or return None.

    Years never sit in the middle, and no value may fall between two-digit
    and four-digit year ranges. A four-digit year at either end must leave a
    valid day and month; otherwise a two-digit year at either end is tried.
    """
    if ints[1] > 31 or ints[1] <= 0:
        return None
    over_12 = 0
    over_31 = 0
    under_1 = 0
    for value in ints:
        if 99 < value < DATE_MIN_YEAR or value > DATE_MAX_YEAR:
            return None
        if value > 31:
            over_31 += 1
        if value > 12:
            over_12 += 1
        if value <= 0:
            under_1 += 1
    if over_31 >= 2 or over_12 == 3 or under_1 >= 2:
        return None

    possible_year_splits = [
        (ints[2], ints[0:2]),  # year last
        (ints[0], ints[1:3]),  # year first
    ]
    for year, rest in possible_year_splits:
        if DATE_MIN_YEAR <= year <= DATE_MAX_YEAR:
            dm = map_ints_to_dm(rest)
            if dm:
                return DayMonthYear(year, dm[1], dm[0], True)
            return None

    for year, rest in possible_year_splits:
        dm = map_ints_to_dm(rest)
        if dm:
            return DayMonthYear(two_to_four_digit_year(year), dm[1], dm[0], False)

    return None


def map_ints_to_dm(ints: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    """Return (day, month) for either ordering of ``ints``, or None"""
    for day, month in (ints, ints[::-1]):
        if 1 <= day <= 31 and 1 <= month <= 12:
            return day, month
    return None


def two_to_four_digit_year(year: int) -> int:
    if year > 99:
        return year
    elif year > 50:
        return year + 1900
    else:
        return year + 2000
