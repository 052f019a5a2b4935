"""
Unit tests for the rule checkers.

Tests cover:
- Length bounds and the unbounded-max rules
- Sequential runs (numeric, alphabetic, symbol) with and without reverse
- Identical-character runs
- Keyboard adjacency across layouts
- Deny substrings and regex complexity
"""

import pytest

from passcheck.errors import KeyboardLayoutError, RegexPolicyError, SymbolLayoutError
from passcheck.rules import (
    MAX_LENGTH_CEILING,
    KeyboardLayout,
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


# =============================================================================
# Length
# =============================================================================


class TestLength:
    """Tests for check_length."""

    def test_too_short(self) -> None:
        """Passwords under min_length fail."""
        assert check_length("short", 8, 0) is False

    def test_within_bounds(self) -> None:
        """Bounds are inclusive on both ends."""
        assert check_length("abcde", 5, 5) is True
        assert check_length("abcdef", 2, 5) is False

    def test_zero_max_is_unbounded(self) -> None:
        """max_length 0 means no upper bound."""
        assert check_length("a" * 500, 8, 0) is True
        assert effective_max_length(8, 0) == MAX_LENGTH_CEILING

    def test_min_above_max_is_unbounded(self) -> None:
        """A max below min is treated as unbounded."""
        assert effective_max_length(8, 5) == MAX_LENGTH_CEILING
        assert check_length("abcdefghijk", 8, 5) is True

    def test_ceiling_still_applies(self) -> None:
        """The unbounded ceiling is 65535 characters."""
        assert check_length("a" * (MAX_LENGTH_CEILING + 1), 0, 0) is False

    def test_explicit_max(self) -> None:
        """A valid max is enforced."""
        assert effective_max_length(2, 10) == 10


# =============================================================================
# Sequential runs
# =============================================================================


class TestNumericRun:
    """Tests for check_numeric_run."""

    def test_run_over_limit_fails(self) -> None:
        """'1234' is four long, over a limit of 3."""
        assert check_numeric_run("ab1234cd", 3) is False

    def test_run_at_limit_passes(self) -> None:
        """A run exactly at the limit passes."""
        assert check_numeric_run("ab123cd", 3) is True

    def test_descending_ignored_by_default(self) -> None:
        """Descending runs only count when reverse is allowed."""
        assert check_numeric_run("4321", 3) is True
        assert check_numeric_run("4321", 3, allow_reverse=True) is False

    def test_letters_break_the_run(self) -> None:
        """Non-digits reset the counter."""
        assert check_numeric_run("12a34", 2) is True

    def test_gaps_are_not_runs(self) -> None:
        """Digits two apart never extend a run."""
        assert check_numeric_run("1357", 1) is True
        assert check_numeric_run("12", 1) is False

    def test_only_decimal_digits(self) -> None:
        """Superscripts and other non-decimal digits are not part of a run."""
        assert check_numeric_run("x\u00b2\u00b3y", 1) is True


class TestAlphaRun:
    """Tests for check_alpha_run."""

    def test_mixed_case_run(self) -> None:
        """Letters are compared case-insensitively."""
        assert check_alpha_run("xAbCdx", 3) is False

    def test_run_at_limit_passes(self) -> None:
        """'abc' at limit 3 passes."""
        assert check_alpha_run("abc1", 3) is True

    def test_reverse(self) -> None:
        """'dcba' only fails with reverse runs allowed."""
        assert check_alpha_run("dcba", 3) is True
        assert check_alpha_run("dcba", 3, allow_reverse=True) is False


class TestSymbolRun:
    """Tests for check_symbol_run."""

    def test_code_point_run(self) -> None:
        """'#$%&' are consecutive code points."""
        assert check_symbol_run("#$%&", 3) is False
        assert check_symbol_run("#$%", 3) is True

    def test_letters_are_not_symbols(self) -> None:
        """Alphabetic runs are ignored by the symbol check."""
        assert check_symbol_run("abcd", 3) is True


# =============================================================================
# Identical-character runs
# =============================================================================


class TestSameCharacters:
    """Tests for the identical-character run checkers."""

    def test_same_digit_over_limit(self) -> None:
        """Four identical digits fail a limit of 3."""
        assert check_same_digit("a1111b", 3) is False

    def test_same_digit_at_limit(self) -> None:
        """Three identical digits pass a limit of 3."""
        assert check_same_digit("a111b", 3) is True

    def test_same_digit_ignores_letters(self) -> None:
        """Repeated letters don't count toward the digit check."""
        assert check_same_digit("aaaa1", 3) is True

    def test_same_digit_split_runs(self) -> None:
        """Runs separated by another character are counted separately."""
        assert check_same_digit("11a11", 3) is True

    def test_same_digit_ignores_superscripts(self) -> None:
        """Only decimal digits are counted as repeated digits."""
        assert check_same_digit("x\u00b2\u00b2\u00b2\u00b2y", 3) is True

    def test_same_alpha_case_insensitive(self) -> None:
        """'AaAa' is four of the same letter."""
        assert check_same_alpha("xAaAa", 3) is False
        assert check_same_alpha("aaa1", 3) is True

    def test_same_symbol(self) -> None:
        """Repeated symbols are counted."""
        assert check_same_symbol("!!!!", 3) is False
        assert check_same_symbol("!!!a!", 3) is True


# =============================================================================
# Keyboard adjacency
# =============================================================================


class TestKeyboardLinear:
    """Tests for check_keyboard_linear."""

    def test_home_row_run(self) -> None:
        """'asdf' is three adjacency steps."""
        assert check_keyboard_linear("asdf123", 3) is False

    def test_short_run_passes(self) -> None:
        """'asd' is only two steps."""
        assert check_keyboard_linear("asd123", 3) is True

    def test_upper_case(self) -> None:
        """Keys are compared lower-cased."""
        assert check_keyboard_linear("QWER", 3) is False

    def test_reverse(self) -> None:
        """Right-to-left runs only count with reverse allowed."""
        assert check_keyboard_linear("fdsa", 3) is True
        assert check_keyboard_linear("fdsa", 3, allow_reverse=True) is False

    def test_off_row_character_is_not_a_reverse_step(self) -> None:
        """A key at the start of a row followed by an off-row key is no run."""
        assert check_keyboard_linear("a1a1a1", 1, allow_reverse=True) is True

    def test_layout_specific_rows(self) -> None:
        """'azer' is a row on AZERTY but not on QWERTY."""
        assert check_keyboard_linear("azer", 3, layout=KeyboardLayout.QWERTY) is True
        assert check_keyboard_linear("azer", 3, layout=KeyboardLayout.AZERTY) is False

    def test_layout_name_string(self) -> None:
        """Layouts may be given by name, any case."""
        assert check_keyboard_linear("aoeu", 3, layout="dvorak") is False

    def test_unsupported_layout(self) -> None:
        """Unknown layouts are configuration errors."""
        with pytest.raises(KeyboardLayoutError):
            check_keyboard_linear("asdf", 3, layout="FOO")


class TestSymbolAdjacency:
    """Tests for check_symbol_adjacency."""

    def test_shifted_number_row(self) -> None:
        """'!@#$' is three steps along the symbol row."""
        assert check_symbol_adjacency("a!@#$b", 3) is False
        assert check_symbol_adjacency("!@#", 3) is True

    def test_reverse(self) -> None:
        """'$#@!' counts when reverse runs are allowed."""
        assert check_symbol_adjacency("$#@!", 3) is True
        assert check_symbol_adjacency("$#@!", 3, allow_reverse=True) is False

    def test_non_qwerty_layout(self) -> None:
        """Only QWERTY has a symbol row."""
        with pytest.raises(SymbolLayoutError):
            check_symbol_adjacency("!@#$", 3, layout=KeyboardLayout.AZERTY)


# =============================================================================
# Deny substrings
# =============================================================================


class TestDenySubstrings:
    """Tests for the deny-substring checker."""

    def test_case_insensitive(self) -> None:
        """'Admin' matches 'admin'."""
        assert check_deny_substrings("MyAdminPass1", ["admin"]) is False

    def test_no_match(self) -> None:
        """Passwords without forbidden words pass."""
        assert check_deny_substrings("hello", ["admin"]) is True

    def test_find_reports_entry(self) -> None:
        """The matching entry is reported."""
        assert find_denied_substring("MySecretPassword99", ["root", "password"]) == "password"
        assert find_denied_substring("MySecret99", ["root", "password"]) is None

    def test_empty_entries_ignored(self) -> None:
        """An empty entry would match everything, so it is skipped."""
        assert check_deny_substrings("abc", [""]) is True


# =============================================================================
# Regex complexity
# =============================================================================


class TestRegex:
    """Tests for check_regex."""

    def test_level_4(self) -> None:
        """Level 4 needs upper, lower, digit and symbol."""
        assert check_regex("alllowercase1", 4) is False
        assert check_regex("Abcd123!", 4) is True
        assert check_regex("Sunshine1!", 4) is True

    def test_level_3(self) -> None:
        """Level 3 needs upper, lower and digit."""
        assert check_regex("abcdefg1", 3) is False
        assert check_regex("Abcdefg1", 3) is True

    def test_level_2(self) -> None:
        """Level 2 needs a letter and a digit."""
        assert check_regex("abcdefgh", 2) is False
        assert check_regex("abcdefg1", 2) is True

    def test_level_1_rejects_whitespace(self) -> None:
        """Whitespace anywhere fails every catalog level."""
        assert check_regex("abcdefgh", 1) is True
        assert check_regex("abc defgh", 1) is False

    def test_minimum_length(self) -> None:
        """Catalog patterns need at least 8 characters."""
        assert check_regex("short1", 1) is False

    def test_custom_pattern_full_match(self) -> None:
        """Level 0 uses the custom pattern against the whole password."""
        assert check_regex("abc", 0, r"[a-z]+") is True
        assert check_regex("abc1", 0, r"[a-z]+") is False

    def test_unsupported_level(self) -> None:
        """Levels outside 0-4 are configuration errors."""
        with pytest.raises(RegexPolicyError):
            check_regex("Abcd123!", 5)

    def test_empty_custom_pattern(self) -> None:
        """Level 0 without a pattern is a configuration error."""
        with pytest.raises(RegexPolicyError):
            check_regex("Abcd123!", 0, "")

    def test_invalid_custom_pattern(self) -> None:
        """Patterns that don't compile are configuration errors."""
        with pytest.raises(RegexPolicyError):
            check_regex("Abcd123!", 0, "(")
