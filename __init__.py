from .matching import (
    omnimatch,
    dictionary_match,
    reverse_dictionary_match,
    l33t_match,
    spatial_match,
    repeat_match,
    sequence_match,
    regex_match,
    date_match,
)
from .matches import Match
from .scoring import most_guessable_match_sequence
from .strength import password_strength

__all__ = [
    "omnimatch",
    "dictionary_match",
    "reverse_dictionary_match",
    "l33t_match",
    "spatial_match",
    "repeat_match",
    "sequence_match",
    "regex_match",
    "date_match",
    "Match",
    "most_guessable_match_sequence",
    "password_strength",
]
