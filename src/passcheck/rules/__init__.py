"""
Rule library for passcheck.

This package holds the building blocks the evaluator composes:
    - checkers: pure functions, one detection algorithm each
    - keyboard: keyboard layout rows used by the adjacency checkers
    - patterns: the regex complexity catalog
    - registry: named checks for ad-hoc invocation
"""

from passcheck.rules.checkers import (
    MAX_LENGTH_CEILING,
    check_alpha_run,
    check_deny_substrings,
    check_keyboard_linear,
    check_length,
    check_numeric_run,
    check_regex,
    check_same_alpha,
    check_same_digit,
    check_same_symbol,
    check_symbol_adjacency,
    check_symbol_run,
    effective_max_length,
    find_denied_substring,
)
from passcheck.rules.keyboard import KEYBOARD_ROWS, SYMBOL_ROWS, KeyboardLayout
from passcheck.rules.patterns import REGEX_POLICIES, resolve_pattern

__all__ = [
    "MAX_LENGTH_CEILING",
    "KEYBOARD_ROWS",
    "SYMBOL_ROWS",
    "REGEX_POLICIES",
    "KeyboardLayout",
    "check_alpha_run",
    "check_deny_substrings",
    "check_keyboard_linear",
    "check_length",
    "check_numeric_run",
    "check_regex",
    "check_same_alpha",
    "check_same_digit",
    "check_same_symbol",
    "check_symbol_adjacency",
    "check_symbol_run",
    "effective_max_length",
    "find_denied_substring",
    "resolve_pattern",
]
