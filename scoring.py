import math
import re
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .adjacency_graphs import GRAPHS, calc_average_degree
from .config import settings
from .matches import (
    BruteforceMatch,
    DateMatch,
    DictionaryMatch,
    Match,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)

BRUTEFORCE_CARDINALITY = 10
MIN_GUESSES_BEFORE_GROWING_SEQUENCE = 10000
MIN_SUBMATCH_GUESSES_SINGLE_CHAR = 10
MIN_SUBMATCH_GUESSES_MULTI_CHAR = 50
MIN_YEAR_SPACE = 20
REFERENCE_YEAR = settings.reference_year

KEYBOARD_AVERAGE_DEGREE = calc_average_degree(GRAPHS['qwerty'])
# slightly different for keypad/mac keypad, but close enough
KEYPAD_AVERAGE_DEGREE = calc_average_degree(GRAPHS['keypad'])

KEYBOARD_STARTING_POSITIONS = len(GRAPHS['qwerty'])
KEYPAD_STARTING_POSITIONS = len(GRAPHS['keypad'])

MAX_GUESSES = sys.float_info.max
_MAX_GUESSES_LOG10 = math.log10(MAX_GUESSES)

START_UPPER = re.compile(r'^[A-Z][^A-Z]+$')
END_UPPER = re.compile(r'^[^A-Z]+[A-Z]$')
ALL_UPPER = re.compile(r'^[^a-z]+$')
ALL_LOWER = re.compile(r'^[^A-Z]+$')


@dataclass
class ScoredSequence:
    """The least guessable-looking explanation of a whole password"""
    password: str
    guesses: float
    guesses_log10: float
    sequence: List[Match] = field(default_factory=list)


def binom(n, k):
    """
    Returns binomial coefficient (n choose k).
    """
    return math.comb(n, k)


def _product(*factors) -> float:
    """Multiply guess factors, saturating at MAX_GUESSES instead of overflowing"""
    if any(factor == 0 for factor in factors):
        return 0.0
    if sum(math.log10(factor) for factor in factors) >= _MAX_GUESSES_LOG10:
        return MAX_GUESSES
    result = 1.0
    for factor in factors:
        result *= factor
    return result


def _power(base, exponent) -> float:
    if exponent * math.log10(base) >= _MAX_GUESSES_LOG10:
        return MAX_GUESSES
    return float(base) ** exponent


# ------------------------------------------------------------------------------
# search --- most guessable match sequence -------------------------------------
# ------------------------------------------------------------------------------
#
# Picks the non-overlapping subsequence of candidate matches that explains the
# whole password with the fewest guesses. Gaps become bruteforce matches.
# A length-l sequence costs
#
#    g = l! * Product(guesses of each match) + D^(l - 1)
#
# l! counts the orderings of l patterns; D^(l - 1) charges for the shorter
# sequences an attacker tries first. Dynamic programming over the end index,
# O(l_max * (n + m)) for n characters and m candidates.
# ------------------------------------------------------------------------------

def most_guessable_match_sequence(password: str,
                                  matches: List[Match],
                                  exclude_additive: bool = False) -> ScoredSequence:
    n = len(password)

    matches_by_j = [[] for _ in range(n)]
    for match in matches:
        matches_by_j[match.j].append(match)
    for lst in matches_by_j:
        lst.sort(key=lambda m: m.i)

    # candidate matches stay alive for the whole search, so their ids are stable
    candidate_guesses = {id(match): estimate_guesses(match, password) for match in matches}

    # best[k][l] is (match, pi, g) for the best length-l sequence covering
    # password[:k + 1]: its last match, the guess product and the overall cost
    best = [{} for _ in range(n)]

    def update(m, l):
        k = m.j
        if isinstance(m.pattern, BruteforceMatch):
            pi = estimate_guesses(m, password)
        else:
            pi = candidate_guesses[id(m)]
        if l > 1:
            pi = _product(pi, best[m.i - 1][l - 1][1])
        g = _product(math.factorial(l), pi)
        if not exclude_additive:
            g += _power(MIN_GUESSES_BEFORE_GROWING_SEQUENCE, l - 1)
        # a sequence with l or fewer matches that is at least as cheap wins
        for competing_l, (_, _, competing_g) in best[k].items():
            if competing_l <= l and competing_g <= g:
                return
        best[k][l] = (m, pi, g)

    def bruteforce_update(k):
        update(make_bruteforce_match(0, k), 1)
        for i in range(1, k + 1):
            m = make_bruteforce_match(i, k)
            for l, (last_m, _, _) in list(best[i - 1].items()):
                # one bruteforce match always beats two adjacent ones
                if isinstance(last_m.pattern, BruteforceMatch):
                    continue
                update(m, l + 1)

    def make_bruteforce_match(i, j):
        return Match(i, j, password[i:j + 1], BruteforceMatch())

    def unwind():
        sequence = []
        k = n - 1
        l = min(best[k], key=lambda length: best[k][length][2])
        while k >= 0:
            m = best[k][l][0]
            sequence.insert(0, m)
            k = m.i - 1
            l -= 1
        return sequence

    for k in range(n):
        for m in matches_by_j[k]:
            if m.i > 0:
                for l in list(best[m.i - 1]):
                    update(m, l + 1)
            else:
                update(m, 1)
        bruteforce_update(k)

    if n == 0:
        guesses = 1.0
        sequence = []
    else:
        sequence = unwind()
        guesses = best[n - 1][len(sequence)][2]

    return ScoredSequence(
        password=password,
        guesses=guesses,
        guesses_log10=math.log10(guesses),
        sequence=sequence,
    )


# ------------------------------------------------------------------------------
# guess estimation -- one function per match pattern ---------------------------
# ------------------------------------------------------------------------------

def estimate_guesses(match: Match, password: str) -> float:
    min_guesses = 1
    if len(match.token) < len(password):
        if len(match.token) == 1:
            min_guesses = MIN_SUBMATCH_GUESSES_SINGLE_CHAR
        else:
            min_guesses = MIN_SUBMATCH_GUESSES_MULTI_CHAR
    estimate = ESTIMATION_FUNCTIONS.get(type(match.pattern))
    if estimate is None:
        raise TypeError(f"no guess estimate for {type(match.pattern).__name__}")
    return float(max(estimate(match), min_guesses))


def bruteforce_guesses(match: Match) -> float:
    guesses = _power(BRUTEFORCE_CARDINALITY, len(match.token))
    # one above the submatch floor, so a real pattern over the same span wins
    if len(match.token) == 1:
        min_guesses = MIN_SUBMATCH_GUESSES_SINGLE_CHAR + 1
    else:
        min_guesses = MIN_SUBMATCH_GUESSES_MULTI_CHAR + 1
    return max(guesses, min_guesses)


def repeat_guesses(match: Match) -> float:
    return _product(match.pattern.base_guesses, match.pattern.repeat_count)


def sequence_guesses(match: Match) -> float:
    first_chr = match.token[0]
    # obvious starting points
    if first_chr in ('a', 'A', 'z', 'Z', '0', '1', '9'):
        base_guesses = 4
    elif first_chr.isdigit():
        base_guesses = 10
    else:
        base_guesses = 26
    if not match.pattern.ascending:
        base_guesses *= 2
    return base_guesses * len(match.token)


def regex_guesses(match: Match) -> float:
    if match.pattern.regex_name == 'recent_year':
        year_space = abs(int(match.pattern.regex_match[0]) - REFERENCE_YEAR)
        return max(year_space, MIN_YEAR_SPACE)
    raise TypeError(f"no guess estimate for regex {match.pattern.regex_name!r}")


def date_guesses(match: Match) -> float:
    year_space = max(abs(match.pattern.year - REFERENCE_YEAR), MIN_YEAR_SPACE)
    guesses = year_space * 365
    # about four separators to choose from
    if match.pattern.separator:
        guesses *= 4
    return guesses


def spatial_guesses(match: Match) -> float:
    if match.pattern.graph in ('qwerty', 'dvorak'):
        s = KEYBOARD_STARTING_POSITIONS
        d = KEYBOARD_AVERAGE_DEGREE
    else:
        s = KEYPAD_STARTING_POSITIONS
        d = KEYPAD_AVERAGE_DEGREE
    guesses = 0.0
    length = len(match.token)
    t = match.pattern.turns
    # patterns of this length or shorter with this many turns or fewer
    for i in range(2, length + 1):
        possible_turns = min(t, i - 1)
        for j in range(1, possible_turns + 1):
            guesses += _product(binom(i - 1, j - 1), s, _power(d, j))
    shifted = match.pattern.shifted_count
    if shifted:
        unshifted = length - shifted
        if unshifted == 0:
            guesses *= 2
        else:
            variations = sum(binom(shifted + unshifted, i) for i in range(1, min(shifted, unshifted) + 1))
            guesses = _product(guesses, variations)
    return min(guesses, MAX_GUESSES)


def dictionary_guesses(match: Match) -> float:
    reversed_variations = 2 if match.pattern.reversed else 1
    return _product(
        match.pattern.rank,
        uppercase_variations(match),
        l33t_variations(match),
        reversed_variations,
    )


def uppercase_variations(match: Match) -> int:
    word = match.token
    if ALL_LOWER.match(word) or word.lower() == word:
        return 1
    # capitalized, end-capitalized and all caps only double the space
    for regex in (START_UPPER, END_UPPER, ALL_UPPER):
        if regex.match(word):
            return 2
    # ways to place up to min(U, L) of the rarer case among U + L letters
    upper = sum(1 for c in word if c.isupper())
    lower = sum(1 for c in word if c.islower())
    return sum(binom(upper + lower, i) for i in range(1, min(upper, lower) + 1))


def l33t_variations(match: Match) -> int:
    if not match.pattern.l33t:
        return 1
    variations = 1
    chrs = match.token.lower()
    for subbed, unsubbed in match.pattern.sub.items():
        subbed_count = chrs.count(subbed)
        unsubbed_count = chrs.count(unsubbed)
        if subbed_count == 0 or unsubbed_count == 0:
            # fully subbed (444) or fully unsubbed (aaa)
            variations *= 2
        else:
            # aa44a: unsubbed, one sub, two subs
            p = min(unsubbed_count, subbed_count)
            variations *= sum(binom(unsubbed_count + subbed_count, i) for i in range(1, p + 1))
    return variations


ESTIMATION_FUNCTIONS: Dict[type, Callable[[Match], float]] = {
    BruteforceMatch: bruteforce_guesses,
    DictionaryMatch: dictionary_guesses,
    SpatialMatch: spatial_guesses,
    RepeatMatch: repeat_guesses,
    SequenceMatch: sequence_guesses,
    RegexMatch: regex_guesses,
    DateMatch: date_guesses,
}
