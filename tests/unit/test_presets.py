"""
Unit tests for the policy presets.
"""

import pytest

from passcheck.errors import PresetNotFoundError
from passcheck.policy import evaluate
from passcheck.presets import (
    DEFAULT_DENY_SUBSTRINGS,
    MAXIMAL_LEVEL,
    PRESETS,
    get_preset,
    maximal,
    strength_1,
)
from passcheck.schema import MessageCode


class TestPresetTable:
    """Tests for preset levels and values."""

    def test_levels(self) -> None:
        """Levels 1-6 and the maximal level are defined."""
        assert sorted(PRESETS) == [1, 2, 3, 4, 5, 6, MAXIMAL_LEVEL]

    @pytest.mark.parametrize(
        ("level", "min_length", "regex_level"),
        [(1, 12, 4), (2, 10, 4), (3, 8, 3), (4, 8, 2), (5, 6, 1), (6, 6, 1)],
    )
    def test_length_and_regex(self, level: int, min_length: int, regex_level: int) -> None:
        """Each level sets its length floor and regex complexity."""
        policy = get_preset(level)
        assert policy.length_check is True
        assert policy.min_length == min_length
        assert policy.regex_policy_level == regex_level

    def test_lookup_on_strict_levels(self) -> None:
        """Levels 1-3 consult the compromised-password lookup."""
        assert [get_preset(level).check_compromised for level in range(1, 7)] == [
            True, True, True, False, False, False,
        ]

    def test_level_1_allows_reverse(self) -> None:
        """Only level 1 counts descending runs."""
        assert strength_1().allow_reverse_runs is True
        assert get_preset(2).allow_reverse_runs is False

    def test_maximal_adds_symbol_adjacency(self) -> None:
        """Maximal is level 1 plus symbol adjacency."""
        policy = maximal()
        assert policy.check_symbol_adjacency is True
        assert policy.model_copy(update={"check_symbol_adjacency": False}) == strength_1()

    def test_deny_list(self) -> None:
        """The default deny list is lower case."""
        assert "password" in DEFAULT_DENY_SUBSTRINGS
        assert all(word == word.lower() for word in DEFAULT_DENY_SUBSTRINGS)

    def test_unknown_level(self) -> None:
        """Unknown levels raise PresetNotFoundError."""
        with pytest.raises(PresetNotFoundError) as exc_info:
            get_preset(7)
        assert exc_info.value.level == 7

    def test_fresh_instances(self) -> None:
        """Presets compare equal across calls."""
        assert get_preset(3) == get_preset(3)


class TestPresetBehaviour:
    """Tests for how presets treat real passwords."""

    @pytest.mark.parametrize("level", sorted(PRESETS))
    def test_strong_password_passes(self, level: int, strong_password: str) -> None:
        """A strong password passes every preset."""
        verdict = evaluate(strong_password, get_preset(level), lookup=lambda candidate: False)
        assert verdict.passed, verdict

    def test_deny_word_in_strong_shape(self) -> None:
        """Default deny words are rejected even when the shape is strong."""
        verdict = evaluate("Xq7!Admin#Zk9", get_preset(2))
        # lookup runs before deny substrings; without one it reports LOOKUP_ERROR
        assert verdict.failed_reason is MessageCode.LOOKUP_ERROR

        verdict = evaluate("Xq7!Admin#Zk9", get_preset(4))
        assert verdict.failed_reason is MessageCode.AVOID_STR_FAIL

    def test_maximal_rejects_symbol_row(self) -> None:
        """Maximal rejects shifted number row runs level 1 accepts."""
        password = "Tr0ub!@#$3xZ"
        lookup = lambda candidate: False  # noqa: E731
        assert evaluate(password, strength_1(), lookup).passed is True
        verdict = evaluate(password, maximal(), lookup)
        assert verdict.failed_reason is MessageCode.LINEAR_FAIL
        assert verdict.check == "symbol_adjacency"
