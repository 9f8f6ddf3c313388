import pytest

from crackmatch import strength
from crackmatch.config import Settings, settings
from crackmatch.strength import guesses_to_score, password_strength


def test_score_increases_with_length():
    short = password_strength("Ab1!", check_breach=False)["score"]
    longer = password_strength("Ab1!Ab1!Ab1!", check_breach=False)["score"]
    assert longer >= short


def test_common_password_is_very_weak():
    result = password_strength("password", check_breach=False)
    assert result["score"] == 0
    assert result["label"] == "Very Weak"
    assert result["pwned_count"] == 0
    assert [m["pattern"] for m in result["sequence"]] == ["dictionary"]


def test_random_password_is_excellent():
    result = password_strength("tK9#vQ2!mZ7$wL4x", check_breach=False)
    assert result["score"] == 4
    assert result["label"] == "Excellent"
    assert result["guesses_log10"] > 10


def test_user_inputs_weaken_password():
    plain = password_strength("zaphodbeeblebrox", check_breach=False)
    with_inputs = password_strength("zaphodbeeblebrox", ["ZaphodBeeblebrox"], check_breach=False)
    assert with_inputs["guesses"] < plain["guesses"]


def test_breached_password_scores_zero(monkeypatch):
    monkeypatch.setattr(strength, "hibp_pwned_count", lambda pw: 3)
    result = password_strength("tK9#vQ2!mZ7$wL4x", check_breach=True)
    assert result["pwned_count"] == 3
    assert result["score"] == 0


def test_breach_check_defaults_to_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(strength, "hibp_pwned_count", lambda pw: calls.append(pw) or 0)
    monkeypatch.setattr(settings, "check_breach", False)
    password_strength("hunter2")
    assert calls == []


def test_too_long_password_is_rejected():
    with pytest.raises(ValueError):
        password_strength("a" * (settings.max_password_length + 1), check_breach=False)


def test_sequence_is_serializable():
    result = password_strength("abcabc1991", check_breach=False)
    for item in result["sequence"]:
        assert {"pattern", "i", "j", "token"} <= set(item)
    assert "".join(item["token"] for item in result["sequence"]) == "abcabc1991"


@pytest.mark.parametrize("guesses,score", [
    (1, 0),
    (1e3 + 4, 0),
    (1e3 + 5, 1),
    (1e6 + 5, 2),
    (1e8 + 5, 3),
    (1e10 + 5, 4),
    (1e20, 4),
])
def test_guesses_to_score(guesses, score):
    assert guesses_to_score(guesses) == score


def test_default_length_limit():
    assert Settings().max_password_length == 100
    with pytest.raises(ValueError):
        password_strength("ab" * 128, check_breach=False)
