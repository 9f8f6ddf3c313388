import hashlib

import pytest
import requests

from crackmatch import breach
from crackmatch.breach import hibp_pwned_count


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


def sha1_parts(pw):
    digest = hashlib.sha1(pw.encode("utf-8")).hexdigest().upper()
    return digest[:5], digest[5:]


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response):
        def get(url, headers=None, timeout=None):
            calls.append({"url": url, "headers": headers, "timeout": timeout})
            if isinstance(response, Exception):
                raise response
            return response
        monkeypatch.setattr(breach.requests, "get", get)
        return calls

    return install


def test_pwned_count_found(fake_get):
    prefix, suffix = sha1_parts("password")
    calls = fake_get(FakeResponse(text=f"0000000000000000000000000000000000A:1\r\n{suffix}:3861493\r\n"))
    assert hibp_pwned_count("password") == 3861493
    assert calls[0]["url"].endswith("/" + prefix)
    assert suffix not in calls[0]["url"]
    assert "User-Agent" in calls[0]["headers"]


def test_pwned_count_not_found(fake_get):
    fake_get(FakeResponse(text="0000000000000000000000000000000000A:1"))
    assert hibp_pwned_count("correct horse battery staple") == 0


def test_pwned_count_http_error(fake_get):
    fake_get(FakeResponse(status_code=503))
    assert hibp_pwned_count("password") == 0


def test_pwned_count_network_error(fake_get):
    fake_get(requests.ConnectionError("offline"))
    assert hibp_pwned_count("password") == 0


def test_pwned_count_timeout_override(fake_get):
    calls = fake_get(FakeResponse(text=""))
    hibp_pwned_count("password", timeout=1.5)
    assert calls[0]["timeout"] == 1.5
