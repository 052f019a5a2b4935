"""
Rule checkers for passcheck.

Every checker is a pure function of the password and its parameters and
returns True when the password passes the rule. Checkers never raise for a
weak password; they only raise PolicyConfigurationError subclasses when
their parameters are unusable (unknown layout, bad regex level).

Run semantics:
    - Sequential runs (numeric, alpha, symbol) and identical-character runs
      count characters. A run longer than ``limit`` fails, a run of exactly
      ``limit`` passes.
    - Keyboard runs count adjacency steps between keys. ``limit`` steps
      fail, so with a limit of 3 "asd" passes and "asdf" fails.
"""

from typing import Callable, Iterable

from passcheck.rules.keyboard import KeyboardLayout, letter_rows, symbol_rows
from passcheck.rules.patterns import resolve_pattern


# Effective ceiling when max_length is unset or below min_length
MAX_LENGTH_CEILING = 65535


def _is_symbol(char: str) -> bool:
    return not char.isalnum()


# =============================================================================
# Length
# =============================================================================


def effective_max_length(min_length: int, max_length: int) -> int:
    """
    Return the upper length bound actually enforced.

    A max_length of 0 means unbounded. A max_length below min_length is
    also treated as unbounded rather than rejecting every password.
    """
    if max_length <= 0 or min_length > max_length:
        return MAX_LENGTH_CEILING
    return max_length


def check_length(password: str, min_length: int, max_length: int = 0) -> bool:
    """Check that min_length <= len(password) <= effective max."""
    return min_length <= len(password) <= effective_max_length(min_length, max_length)


# =============================================================================
# Sequential runs ("123", "abc", "#$%")
# =============================================================================


def _within_sequential_limit(
    chars: str,
    limit: int,
    allow_reverse: bool,
    in_class: Callable[[str], bool],
) -> bool:
    count = 1
    for current, following in zip(chars, chars[1:]):
        step = ord(following) - ord(current)
        if in_class(current) and in_class(following) and (step == 1 or (allow_reverse and step == -1)):
            count += 1
            if count > limit:
                return False
        else:
            count = 1
    return True


def check_numeric_run(password: str, limit: int, allow_reverse: bool = False) -> bool:
    """
    Check that no run of ascending digits is longer than limit.

    Args:
        password: Password to scan
        limit: Longest allowed run
        allow_reverse: Also count descending runs ("321")

    Returns:
        True if the password passes
    """
    return _within_sequential_limit(password, limit, allow_reverse, str.isdecimal)


def check_alpha_run(password: str, limit: int, allow_reverse: bool = False) -> bool:
    """Check that no run of alphabetically consecutive letters is longer than limit."""
    return _within_sequential_limit(password.lower(), limit, allow_reverse, str.isalpha)


def check_symbol_run(password: str, limit: int, allow_reverse: bool = False) -> bool:
    """Check that no run of code-point consecutive symbols ("#$%") is longer than limit."""
    return _within_sequential_limit(password, limit, allow_reverse, _is_symbol)


# =============================================================================
# Identical-character runs ("111", "aaa", "!!!")
# =============================================================================


def _within_repeat_limit(chars: str, limit: int, in_class: Callable[[str], bool]) -> bool:
    count = 1
    for current, following in zip(chars, chars[1:]):
        # Pairs starting outside the class leave the counter as it is
        if not in_class(current):
            continue
        if following == current:
            count += 1
            if count > limit:
                return False
        else:
            count = 1
    return True


def check_same_digit(password: str, limit: int) -> bool:
    """Check that no digit repeats more than limit times in a row."""
    return _within_repeat_limit(password, limit, str.isdecimal)


def check_same_alpha(password: str, limit: int) -> bool:
    """Check that no letter repeats more than limit times in a row, ignoring case."""
    return _within_repeat_limit(password.lower(), limit, str.isalpha)


def check_same_symbol(password: str, limit: int) -> bool:
    """Check that no symbol repeats more than limit times in a row."""
    return _within_repeat_limit(password, limit, _is_symbol)


# =============================================================================
# Keyboard adjacency ("qwer", "lkjh", "!@#$")
# =============================================================================


def _within_row_limit(chars: str, rows: Iterable[str], limit: int, allow_reverse: bool) -> bool:
    for row in rows:
        forward = 0
        backward = 0
        for current, following in zip(chars, chars[1:]):
            current_index = row.find(current)
            next_index = row.find(following)

            if current_index != -1 and next_index == current_index + 1:
                forward += 1
            else:
                forward = 0

            if allow_reverse:
                if current_index > 0 and next_index == current_index - 1:
                    backward += 1
                else:
                    backward = 0

            if forward >= limit or backward >= limit:
                return False
    return True


def check_keyboard_linear(
    password: str,
    limit: int,
    allow_reverse: bool = False,
    layout: str | KeyboardLayout = KeyboardLayout.QWERTY,
) -> bool:
    """
    Check for runs of keys that sit next to each other on a keyboard row.

    Args:
        password: Password to scan (compared lower-cased)
        limit: Number of adjacency steps that fails the check
        allow_reverse: Also count right-to-left runs ("rewq")
        layout: Keyboard layout whose rows are scanned

    Returns:
        True if the password passes

    Raises:
        KeyboardLayoutError: If the layout is not supported
    """
    return _within_row_limit(password.lower(), letter_rows(layout), limit, allow_reverse)


def check_symbol_adjacency(
    password: str,
    limit: int,
    allow_reverse: bool = False,
    layout: str | KeyboardLayout = KeyboardLayout.QWERTY,
) -> bool:
    """
    Check for runs along the shifted number row ("!@#$").

    Raises:
        SymbolLayoutError: If the layout has no symbol row (anything but QWERTY)
    """
    return _within_row_limit(password, symbol_rows(layout), limit, allow_reverse)


# =============================================================================
# Deny substrings
# =============================================================================


def find_denied_substring(password: str, substrings: Iterable[str]) -> str | None:
    """Return the first entry of substrings contained in password, ignoring case."""
    lowered = password.lower()
    for substring in substrings:
        if substring and substring.lower() in lowered:
            return substring
    return None


def check_deny_substrings(password: str, substrings: Iterable[str]) -> bool:
    """Check that the password contains none of the forbidden substrings."""
    return find_denied_substring(password, substrings) is None


# =============================================================================
# Regex complexity
# =============================================================================


def check_regex(password: str, level: int, custom_regex: str | None = None) -> bool:
    """
    Check the password against a regex complexity level.

    Raises:
        RegexPolicyError: If the level is unsupported or the custom pattern
            is empty or invalid
    """
    return resolve_pattern(level, custom_regex).fullmatch(password) is not None
