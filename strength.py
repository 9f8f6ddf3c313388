import time
from typing import Iterable, Optional

from .breach import hibp_pwned_count
from .config import settings
from .logger import get_logger
from .matching import omnimatch
from .scoring import most_guessable_match_sequence

logger = get_logger(__name__)

# a guess count right at a threshold still lands in the lower class
DELTA = 5

LABELS = ["Very Weak", "Weak", "Moderate", "Strong", "Excellent"]


def guesses_to_score(guesses: float) -> int:
    if guesses < 1e3 + DELTA:
        return 0
    elif guesses < 1e6 + DELTA:
        return 1
    elif guesses < 1e8 + DELTA:
        return 2
    elif guesses < 1e10 + DELTA:
        # survives offline attacks on slow hashes
        return 3
    else:
        return 4


def password_strength(password: str,
                      user_inputs: Iterable[str] = (),
                      check_breach: Optional[bool] = None) -> dict:
    if len(password) > settings.max_password_length:
        raise ValueError(
            f"Password is longer than {settings.max_password_length} characters"
        )
    if check_breach is None:
        check_breach = settings.check_breach

    start = time.time()
    matches = omnimatch(password, user_inputs)
    result = most_guessable_match_sequence(password, matches)
    score = guesses_to_score(result.guesses)

    pwned = hibp_pwned_count(password) if check_breach else 0
    if pwned > 0:
        # breached passwords are in every attacker's first wordlist
        score = 0

    calc_time = time.time() - start
    logger.debug("Scored password of length %d in %.4fs", len(password), calc_time)

    return {
        "password": password,
        "guesses": result.guesses,
        "guesses_log10": result.guesses_log10,
        "score": score,
        "label": LABELS[score],
        "pwned_count": pwned,
        "sequence": [match.to_dict() for match in result.sequence],
        "calc_time": calc_time,
    }
