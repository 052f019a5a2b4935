"""
Schema definitions for passcheck.

This module defines the Pydantic models and enums used throughout passcheck:
- Policy: Which checks are enabled and their parameters
- Verdict: The outcome of evaluating one password
- MessageCode/ReasonCode: The stable result taxonomy

Design Decisions:
    - Scalar fields are strict (no "8" -> 8 or 1 -> True coercion)
    - Models are immutable (frozen=True) so a Policy can be shared freely
    - Semantic invariants raise PolicyConfigurationError subclasses directly,
      so callers can tell a broken policy from a weak password
"""

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from passcheck.errors import RunLimitError
from passcheck.rules.keyboard import KeyboardLayout, symbol_rows
from passcheck.rules.patterns import resolve_pattern


# =============================================================================
# Enums
# =============================================================================


class MessageCode(str, Enum):
    """
    Result taxonomy shared by Verdict.message and Verdict.failed_reason.

    The value is the stable machine-readable code; ``text`` is the
    human-readable message.
    """

    OK = "OK"
    EMPTY = "EMPTY"
    LENGTH_FAIL = "LENGTH_FAIL"
    CONTINUES_FAIL = "CONTINUES_FAIL"
    REPEAT_FAIL = "REPEAT_FAIL"
    LINEAR_FAIL = "LINEAR_FAIL"
    REGEX_FAIL = "REGEX_FAIL"
    AVOID_STR_FAIL = "AVOID_STR_FAIL"
    LOOKUP_FAIL = "LOOKUP_FAIL"
    LOOKUP_ERROR = "LOOKUP_ERROR"

    @property
    def text(self) -> str:
        return _MESSAGE_TEXT[self]


# Failure reasons use the same taxonomy as messages
ReasonCode = MessageCode

_MESSAGE_TEXT = {
    MessageCode.OK: "OK",
    MessageCode.EMPTY: "Password is empty",
    MessageCode.LENGTH_FAIL: "Password length is not within the designated range",
    MessageCode.CONTINUES_FAIL: "Password contains continuous characters over designated limit",
    MessageCode.REPEAT_FAIL: "Password contains repeated characters over designated limit",
    MessageCode.LINEAR_FAIL: "Password contains linear keyboard characters over designated limit",
    MessageCode.REGEX_FAIL: "Password did not pass the regex test",
    MessageCode.AVOID_STR_FAIL: "Password contains a forbidden string",
    MessageCode.LOOKUP_FAIL: "Password is in the compromised password database",
    MessageCode.LOOKUP_ERROR: "Compromised password database could not be checked",
}


# =============================================================================
# Policy
# =============================================================================


class Policy(BaseModel):
    """
    Complete password policy configuration.

    Every check is off by default; a default Policy only rejects blank
    passwords. Build policies directly, from a preset (passcheck.presets),
    or from a mapping / YAML file (passcheck.config).

    Attributes:
        length_check: Enforce min_length/max_length
        min_length: Shortest allowed password
        max_length: Longest allowed password (0 or below min_length = unbounded)
        run_length_limit: Threshold shared by all run and adjacency checks
        check_numeric_run: Reject runs like "1234"
        check_alpha_run: Reject runs like "abcd"
        check_symbol_run: Reject code-point runs like "#$%&"
        check_same_digit: Reject repeats like "1111"
        check_same_alpha: Reject repeats like "aaaa"
        check_same_symbol: Reject repeats like "!!!!"
        check_keyboard_linear: Reject keyboard row runs like "qwer"
        keyboard_layout: Layout used by the keyboard checks
        check_symbol_adjacency: Reject shifted number row runs like "!@#$"
        allow_reverse_runs: Count descending / right-to-left runs too
        check_compromised: Consult the compromised-password lookup
        regex_policy_level: None disables, 0 = custom_regex, 1-4 = catalog
        custom_regex: Pattern used at level 0
        deny_substrings: Forbidden substrings (case-insensitive)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length_check: StrictBool = Field(default=False, description="Enforce length bounds")
    min_length: StrictInt = Field(default=0, ge=0, description="Shortest allowed password")
    max_length: StrictInt = Field(
        default=0,
        ge=0,
        description="Longest allowed password (0 = unbounded)",
    )

    run_length_limit: StrictInt = Field(
        default=3,
        ge=0,
        description="Threshold shared by all run and adjacency checks",
    )
    check_numeric_run: StrictBool = Field(default=False, description="Reject sequential digits")
    check_alpha_run: StrictBool = Field(default=False, description="Reject sequential letters")
    check_symbol_run: StrictBool = Field(default=False, description="Reject sequential symbols")
    check_same_digit: StrictBool = Field(default=False, description="Reject repeated digits")
    check_same_alpha: StrictBool = Field(default=False, description="Reject repeated letters")
    check_same_symbol: StrictBool = Field(default=False, description="Reject repeated symbols")

    check_keyboard_linear: StrictBool = Field(default=False, description="Reject keyboard row runs")
    keyboard_layout: KeyboardLayout = Field(
        default=KeyboardLayout.QWERTY,
        description="Layout used by the keyboard checks",
    )
    check_symbol_adjacency: StrictBool = Field(
        default=False,
        description="Reject shifted number row runs (QWERTY only)",
    )
    allow_reverse_runs: StrictBool = Field(
        default=False,
        description="Count descending and right-to-left runs too",
    )

    check_compromised: StrictBool = Field(
        default=False,
        description="Consult the compromised-password lookup",
    )

    regex_policy_level: StrictInt | None = Field(
        default=None,
        description="None disables, 0 uses custom_regex, 1-4 select a catalog pattern",
    )
    custom_regex: StrictStr | None = Field(default=None, description="Pattern used at level 0")

    deny_substrings: tuple[StrictStr, ...] = Field(
        default=(),
        description="Forbidden substrings, case-insensitive",
    )

    @field_validator("keyboard_layout", mode="before")
    @classmethod
    def parse_layout(cls, v: Any) -> KeyboardLayout:
        """Accept layout names case-insensitively."""
        return KeyboardLayout.parse(v)

    @model_validator(mode="after")
    def validate_invariants(self) -> "Policy":
        """Reject combinations the evaluator cannot run."""
        if self.run_checks_enabled and self.run_length_limit < 1:
            raise RunLimitError(limit=self.run_length_limit)

        if self.regex_policy_level is not None:
            resolve_pattern(self.regex_policy_level, self.custom_regex)

        if self.check_symbol_adjacency:
            symbol_rows(self.keyboard_layout)

        return self

    @property
    def run_checks_enabled(self) -> bool:
        """Whether any check using run_length_limit is on."""
        return any((
            self.check_numeric_run,
            self.check_alpha_run,
            self.check_symbol_run,
            self.check_same_digit,
            self.check_same_alpha,
            self.check_same_symbol,
            self.check_keyboard_linear,
            self.check_symbol_adjacency,
        ))


# =============================================================================
# Verdict
# =============================================================================


class Verdict(BaseModel):
    """
    Result of evaluating a password against a policy.

    Attributes:
        passed: Whether every enabled check passed
        message: Result code (OK on success)
        failed_reason: Failure code, set only when passed is False
        check: Name of the check that failed, if any
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    passed: bool = Field(..., description="Whether every enabled check passed")
    message: MessageCode = Field(..., description="Result code")
    failed_reason: ReasonCode | None = Field(
        default=None,
        description="Failure code, set only on failure",
    )
    check: str | None = Field(default=None, description="Name of the failing check")

    @classmethod
    def ok(cls) -> "Verdict":
        """Create a passing verdict."""
        return cls(passed=True, message=MessageCode.OK)

    @classmethod
    def fail(cls, code: MessageCode, check: str | None = None) -> "Verdict":
        """Create a failing verdict for the given code."""
        return cls(passed=False, message=code, failed_reason=code, check=check)

    @property
    def text(self) -> str:
        """Human-readable message."""
        return self.message.text
