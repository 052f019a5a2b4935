"""
Regex complexity catalog.

Levels 1-4 map to fixed complexity patterns. Level 0 means the caller's
custom pattern is used verbatim. Patterns are matched against the whole
password.
"""

import re
from types import MappingProxyType
from typing import Mapping

from passcheck.errors import RegexPolicyError


CUSTOM_REGEX_LEVEL = 0

REGEX_POLICIES: Mapping[int, re.Pattern[str]] = MappingProxyType({
    # >= 8 chars, a letter or digit, no whitespace
    1: re.compile(r"^(?=.*[0-9a-zA-Z])(?=\S+$).{8,}$"),
    # >= 8 chars, a digit, a letter, no whitespace
    2: re.compile(r"^(?=.*[0-9])(?=.*[a-zA-Z])(?=\S+$).{8,}$"),
    # >= 8 chars, a digit, lower and upper case, no whitespace
    3: re.compile(r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=\S+$).{8,}$"),
    # level 3 plus a non-word symbol
    4: re.compile(r"^(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z])(?=.*\W)(?=\S+$).{8,}$"),
})


def resolve_pattern(level: int, custom_regex: str | None = None) -> re.Pattern[str]:
    """
    Return the compiled pattern for a regex policy level.

    Args:
        level: 0 for the custom pattern, 1-4 for a catalog entry
        custom_regex: Pattern used when level is 0

    Returns:
        Compiled regular expression

    Raises:
        RegexPolicyError: If the level is unsupported, or level 0 has no
            usable custom pattern
    """
    if level in REGEX_POLICIES:
        return REGEX_POLICIES[level]

    if level != CUSTOM_REGEX_LEVEL:
        raise RegexPolicyError(level=level, pattern=custom_regex, reason="level must be 0-4")

    if not custom_regex or not custom_regex.strip():
        raise RegexPolicyError(level=level, reason="custom_regex is empty")

    try:
        return re.compile(custom_regex)
    except re.error as e:
        raise RegexPolicyError(
            level=level,
            pattern=custom_regex,
            reason=f"custom_regex does not compile: {e}",
        ) from e
