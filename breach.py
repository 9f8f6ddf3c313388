import hashlib
from typing import Optional

import requests

from .config import settings
from .logger import get_logger

logger = get_logger(__name__)


def hibp_pwned_count(password: str, timeout: Optional[float] = None) -> int:
    """
    k-anonymity: send only SHA1(prefix 5 chars), match suffix locally.
    Returns number of breaches the password hash appears in, else 0.
    """
    if timeout is None:
        timeout = settings.breach_timeout
    sha1 = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    prefix, suffix = sha1[:5], sha1[5:]
    url = f"{settings.breach_api_url}{prefix}"
    headers = {"User-Agent": settings.user_agent}
    try:
        r = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Breach lookup failed: %s", e)
        return 0
    if r.status_code != 200:
        logger.warning("Breach lookup returned HTTP %d", r.status_code)
        return 0
    for line in r.text.splitlines():
        parts = line.split(":")
        if len(parts) == 2 and parts[0].strip() == suffix:
            return int(parts[1].strip())
    return 0
