# /src/shared/utils/strings.py
"""
String utilities: slugs and duration strings.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Union

_NON_ALNUM = re.compile(r"[^0-9a-zA-Z]+")
_DURATION = re.compile(r"^\s*(\d+)\s*([dhms]?)\s*$", re.IGNORECASE)

_UNIT_SECONDS = {"d": 86400, "h": 3600, "m": 60, "s": 1, "": 1}


def slugify(s: str) -> str:
    """'Mobile Phones & Tablets' -> 'mobile-phones-tablets'"""
    return _NON_ALNUM.sub("-", s.strip()).strip("-").lower()


def parse_duration(value: Union[str, int]) -> timedelta:
    """
    Parse a token lifetime such as "7d", "12h", "30m", "45s" or a plain
    number of seconds.

    Raises:
        ValueError: for anything else, or a non-positive duration
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _DURATION.match(value)
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        amount, unit = match.groups()
        seconds = int(amount) * _UNIT_SECONDS[unit.lower()]
    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return timedelta(seconds=seconds)
