"""
Slug derivation for public invitation links.

A slug is slugify(title) + "-" + the last six base36 digits of a
millisecond timestamp, e.g. "my-event-k3x9z1".
"""

import re
import threading
import time
from typing import Callable, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

DEFAULT_SLUG_BASE = "evento"
SUFFIX_LENGTH = 6


def slugify(title: str) -> str:
    """Lower-case and collapse every run of non-alphanumerics into one hyphen."""
    return _NON_ALNUM.sub("-", title.lower()).strip("-")


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


class MonotonicMillisClock:
    """
    Millisecond clock that never returns the same value twice in a process.

    When two calls land in the same millisecond the second one is pushed
    forward by one, so suffixes derived from it stay distinct.
    """

    def __init__(self, source: Optional[Callable[[], float]] = None):
        self._source = source or time.time
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = int(self._source() * 1000)
            self._last = max(now, self._last + 1)
            return self._last


default_clock = MonotonicMillisClock()


def generate_slug(title: Optional[str], now_ms: Optional[int] = None) -> str:
    base = slugify(title or "") or DEFAULT_SLUG_BASE
    if now_ms is None:
        now_ms = default_clock()
    return f"{base}-{to_base36(now_ms)[-SUFFIX_LENGTH:]}"
