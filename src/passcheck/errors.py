"""
Exception hierarchy for passcheck.

All passcheck exceptions inherit from PasscheckError, allowing callers to catch
all passcheck-specific exceptions with a single except clause.

Exception Categories:
    - PolicyConfigurationError: The policy itself is unusable
    - CheckError: A named check could not be invoked
    - LookupUnavailableError: The compromised-password lookup could not answer

Design Principles:
    - Validation failures are Verdicts, never exceptions
    - All errors have error codes for programmatic handling
    - All errors include context (field, layout, check name where applicable)
    - Errors are designed to be both human-readable and machine-parseable
"""

from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================

# Configuration errors: 1xxx
ERROR_POLICY_INVALID = 1001
ERROR_POLICY_REGEX = 1002
ERROR_POLICY_LAYOUT = 1003
ERROR_POLICY_SYMBOL_LAYOUT = 1004
ERROR_POLICY_MAP = 1005
ERROR_POLICY_RUN_LIMIT = 1006
ERROR_POLICY_PRESET = 1007

# Check invocation errors: 2xxx
ERROR_CHECK_NOT_FOUND = 2001
ERROR_CHECK_INVALID_ARGS = 2002

# Lookup errors: 3xxx
ERROR_LOOKUP_UNAVAILABLE = 3001


# =============================================================================
# Base Exception
# =============================================================================


@dataclass
class PasscheckError(Exception):
    """
    Base exception for all passcheck errors.

    Attributes:
        message: Human-readable error description
        code: Numeric error code for programmatic handling
        suggestion: Optional hint for how to resolve the error
        context: Optional dict with additional debugging info
    """

    message: str = ""
    code: int = 0
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        parts = [f"[E{self.code}] {self.message}"]
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def __repr__(self) -> str:
        """Format error for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


@dataclass
class PolicyConfigurationError(PasscheckError):
    """
    Raised when a policy cannot be used for evaluation.

    Configuration errors are fatal to the evaluation call and are never
    turned into a passing or failing Verdict.
    """

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = "Invalid password policy"
        if self.code == 0:
            self.code = ERROR_POLICY_INVALID


@dataclass
class RegexPolicyError(PolicyConfigurationError):
    """Raised for an unsupported regex level or an unusable custom pattern."""

    level: int | None = None
    pattern: str | None = None
    reason: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Unsupported regex policy {self.level}: {self.reason}"
        if self.code == 0:
            self.code = ERROR_POLICY_REGEX
        if not self.suggestion:
            self.suggestion = "Use regex_policy_level 1-4, or 0 with a valid custom_regex"
        super().__post_init__()
        self.context.update({
            "level": self.level,
            "pattern": self.pattern,
            "reason": self.reason,
        })


@dataclass
class KeyboardLayoutError(PolicyConfigurationError):
    """Raised when a keyboard layout name is not supported."""

    layout: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Unsupported keyboard layout: {self.layout}"
        if self.code == 0:
            self.code = ERROR_POLICY_LAYOUT
        if not self.suggestion:
            self.suggestion = "Use one of QWERTY, AZERTY, QWERTZ, DVORAK, COLEMAK"
        super().__post_init__()
        self.context["layout"] = self.layout


@dataclass
class SymbolLayoutError(KeyboardLayoutError):
    """Raised when symbol adjacency is requested for a layout without a symbol row."""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Symbol adjacency is not defined for layout: {self.layout}"
        if self.code == 0:
            self.code = ERROR_POLICY_SYMBOL_LAYOUT
        if not self.suggestion:
            self.suggestion = "Use keyboard_layout QWERTY or disable check_symbol_adjacency"
        super().__post_init__()


@dataclass
class PolicyMapError(PolicyConfigurationError):
    """
    Raised when a policy mapping is malformed.

    Attributes:
        missing_fields: Required keys that were absent
        invalid_fields: Keys whose values had the wrong type or range
        unknown_fields: Keys that are not policy fields
    """

    missing_fields: list[str] = field(default_factory=list)
    invalid_fields: list[str] = field(default_factory=list)
    unknown_fields: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            problems = []
            if self.missing_fields:
                problems.append(f"missing {', '.join(self.missing_fields)}")
            if self.invalid_fields:
                problems.append(f"invalid {', '.join(self.invalid_fields)}")
            if self.unknown_fields:
                problems.append(f"unknown {', '.join(self.unknown_fields)}")
            self.message = "Malformed policy map: " + ("; ".join(problems) or "not a mapping")
        if self.code == 0:
            self.code = ERROR_POLICY_MAP
        super().__post_init__()
        self.context.update({
            "missing_fields": self.missing_fields,
            "invalid_fields": self.invalid_fields,
            "unknown_fields": self.unknown_fields,
        })


@dataclass
class RunLimitError(PolicyConfigurationError):
    """Raised when run checks are enabled with a run limit below 1."""

    limit: int = 0

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"run_length_limit must be at least 1 when run checks are enabled, got {self.limit}"
        if self.code == 0:
            self.code = ERROR_POLICY_RUN_LIMIT
        super().__post_init__()
        self.context["limit"] = self.limit


@dataclass
class PresetNotFoundError(PolicyConfigurationError):
    """Raised when a preset level does not exist."""

    level: int = 0

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Unknown policy preset: {self.level}"
        if self.code == 0:
            self.code = ERROR_POLICY_PRESET
        if not self.suggestion:
            self.suggestion = "Run 'passcheck presets' to list available levels"
        super().__post_init__()
        self.context["level"] = self.level


# =============================================================================
# Check Invocation Errors
# =============================================================================


@dataclass
class CheckError(PasscheckError):
    """
    Base class for named-check invocation errors.

    Attributes:
        check: Name of the check being invoked
    """

    check: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        self.context["check"] = self.check


@dataclass
class CheckNotFoundError(CheckError):
    """Raised when a check is not registered."""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Check not found: {self.check}"
        if self.code == 0:
            self.code = ERROR_CHECK_NOT_FOUND
        if not self.suggestion:
            self.suggestion = "Run 'passcheck checks' to list registered checks"
        super().__post_init__()


@dataclass
class CheckInvalidArgsError(CheckError):
    """Raised when arguments for a named check are missing or malformed."""

    validation_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Invalid arguments for {self.check}: {self.validation_error}"
        if self.code == 0:
            self.code = ERROR_CHECK_INVALID_ARGS
        super().__post_init__()
        self.context["validation_error"] = self.validation_error


# =============================================================================
# Lookup Errors
# =============================================================================


@dataclass
class LookupUnavailableError(PasscheckError):
    """
    Raised by lookup adapters when the corpus cannot be consulted.

    The evaluator reports this as LOOKUP_ERROR, never as a pass.

    Attributes:
        source: Wordlist path or service URL that failed
        underlying_error: Description of the original failure
    """

    source: str = ""
    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Compromised-password lookup unavailable ({self.source}): {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_LOOKUP_UNAVAILABLE
        self.context.update({
            "source": self.source,
            "underlying_error": self.underlying_error,
        })
