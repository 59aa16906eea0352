"""Wildcard patterns: the token stands for zero or more characters, everything else is literal."""
from __future__ import annotations

import re
from functools import lru_cache

WILDCARD = "*"


def is_wildcard(name: str, token: str = WILDCARD) -> bool:
    return token in name


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str, token: str = WILDCARD) -> re.Pattern[str]:
    """
    Compile pattern into a regex anchored at both ends.
    No escaping: a literal token character can never be matched literally.
    """
    return re.compile(".*".join(re.escape(part) for part in pattern.split(token)), re.DOTALL)


def matches(pattern: str, event_name: str, token: str = WILDCARD) -> bool:
    """True if event_name matches pattern in full (case-sensitive)."""
    return compile_pattern(pattern, token).fullmatch(event_name) is not None
