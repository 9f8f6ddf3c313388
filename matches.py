"""
Match records produced by the matchers and consumed by the scorer.

Every match carries inclusive ``i``/``j`` offsets into the password, the
matched ``token`` (always ``password[i:j + 1]``) and one payload describing
the kind of pattern that was recognized.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Tuple, Union


@dataclass
class DictionaryMatch:
    name: ClassVar[str] = "dictionary"

    dictionary_name: str
    matched_word: str
    rank: int
    reversed: bool = False
    l33t: bool = False
    sub: Dict[str, str] = field(default_factory=dict)
    sub_display: str = ""


@dataclass
class SpatialMatch:
    name: ClassVar[str] = "spatial"

    graph: str
    turns: int
    shifted_count: int


@dataclass
class RepeatMatch:
    name: ClassVar[str] = "repeat"

    base_token: str
    base_guesses: float
    base_matches: List["Match"]
    repeat_count: int


@dataclass
class SequenceMatch:
    name: ClassVar[str] = "sequence"

    sequence_name: str
    sequence_space: int
    ascending: bool


@dataclass
class RegexMatch:
    name: ClassVar[str] = "regex"

    regex_name: str
    # whole match first, then the captured groups
    regex_match: Tuple[str, ...]


@dataclass
class DateMatch:
    name: ClassVar[str] = "date"

    separator: str
    year: int
    month: int
    day: int
    has_full_year: bool = False


@dataclass
class BruteforceMatch:
    name: ClassVar[str] = "bruteforce"


Pattern = Union[
    DictionaryMatch,
    SpatialMatch,
    RepeatMatch,
    SequenceMatch,
    RegexMatch,
    DateMatch,
    BruteforceMatch,
]


@dataclass
class Match:
    """A single recognized pattern occurrence within a password"""
    i: int
    j: int
    token: str
    pattern: Pattern

    @property
    def pattern_name(self) -> str:
        return self.pattern.name

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'pattern': self.pattern_name,
            'i': self.i,
            'j': self.j,
            'token': self.token,
        }
        for key, value in vars(self.pattern).items():
            if key == 'base_matches':
                value = [m.to_dict() for m in value]
            elif key == 'sub':
                value = dict(value)
            elif key == 'regex_match':
                value = list(value)
            result[key] = value
        return result
