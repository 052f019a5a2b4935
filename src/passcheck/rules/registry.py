"""
Check registry for passcheck.

The registry is an explicit lookup table of named checks. It backs the
``passcheck invoke`` command, where a single rule is run with arguments typed
at the terminal, e.g. ``invoke numeric_run ab1234 3 true``.

Design:
    - Closed set: only checks registered here can be invoked by name
    - Each check declares its parameters and their types
    - Raw string arguments are converted and validated before the call
    - Clear error messages for unknown checks and bad arguments

Usage:
    from passcheck.rules.registry import default_registry

    default_registry.invoke("same_digit", ["a1111b", "3"])  # False
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from passcheck.errors import CheckInvalidArgsError, CheckNotFoundError, KeyboardLayoutError
from passcheck.rules import checkers
from passcheck.rules.keyboard import KeyboardLayout


_TRUE_WORDS = frozenset({"true", "yes", "y", "1", "on"})
_FALSE_WORDS = frozenset({"false", "no", "n", "0", "off"})

_REQUIRED = object()


@dataclass(frozen=True)
class CheckParam:
    """
    One parameter of a named check, after the password.

    Attributes:
        name: Parameter name, as accepted by the checker function
        kind: One of "int", "bool", "layout", "optional_str", "list"
        default: Value used when the argument is omitted
        help: Short description shown by ``passcheck checks``
    """

    name: str
    kind: str
    default: Any = _REQUIRED
    help: str = ""

    @property
    def required(self) -> bool:
        return self.default is _REQUIRED

    def convert(self, raw: str) -> Any:
        """Convert a raw string argument to the parameter type."""
        text = raw.strip()
        if self.kind == "int":
            try:
                value = int(text)
            except ValueError:
                raise ValueError(f"{self.name} must be an integer, got {raw!r}") from None
            if value < 0:
                raise ValueError(f"{self.name} must not be negative, got {value}")
            return value
        if self.kind == "bool":
            lowered = text.lower()
            if lowered in _TRUE_WORDS:
                return True
            if lowered in _FALSE_WORDS:
                return False
            raise ValueError(f"{self.name} must be true or false, got {raw!r}")
        if self.kind == "layout":
            try:
                return KeyboardLayout.parse(text)
            except KeyboardLayoutError as e:
                raise ValueError(e.message) from None
        if self.kind == "optional_str":
            return raw if text else None
        return raw


@dataclass(frozen=True)
class NamedCheck:
    """
    A checker function registered under a stable name.

    Attributes:
        name: Unique identifier (e.g. "numeric_run")
        description: Human-readable summary
        func: Checker function; first argument is the password
        params: Parameters after the password, in positional order
    """

    name: str
    description: str
    func: Callable[..., bool]
    params: tuple[CheckParam, ...] = ()

    def bind(self, args: Sequence[str]) -> dict[str, Any]:
        """
        Convert raw arguments (excluding the password) to keyword arguments.

        A trailing parameter of kind "list" collects all remaining arguments.

        Raises:
            CheckInvalidArgsError: If arguments are missing, extra or malformed
        """
        bound: dict[str, Any] = {}
        remaining = list(args)

        for param in self.params:
            if param.kind == "list":
                bound[param.name] = tuple(remaining)
                remaining = []
                continue
            if remaining:
                raw = remaining.pop(0)
                try:
                    bound[param.name] = param.convert(raw)
                except ValueError as e:
                    raise CheckInvalidArgsError(check=self.name, validation_error=str(e)) from None
            elif param.required:
                raise CheckInvalidArgsError(
                    check=self.name,
                    validation_error=f"'{param.name}' is required",
                )
            else:
                bound[param.name] = param.default

        if remaining:
            raise CheckInvalidArgsError(
                check=self.name,
                validation_error=f"expected at most {len(self.params) + 1} arguments",
            )
        return bound

    def __call__(self, password: str, *args: str) -> bool:
        return self.func(password, **self.bind(args))

    @property
    def signature(self) -> str:
        """Usage string, e.g. ``password limit [allow_reverse]``."""
        parts = ["password"]
        for param in self.params:
            if param.kind == "list":
                parts.append(f"[{param.name}...]")
            elif param.required:
                parts.append(param.name)
            else:
                parts.append(f"[{param.name}]")
        return " ".join(parts)


class CheckRegistry:
    """
    Registry for looking up checks by name.

    Attributes:
        _checks: Internal mapping of check names to NamedCheck instances
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._checks: dict[str, NamedCheck] = {}

    def register(self, check: NamedCheck) -> None:
        """
        Register a check in the registry.

        Args:
            check: The check to register

        Raises:
            ValueError: If check is None or has an empty name
        """
        if check is None:
            msg = "Cannot register None as a check"
            raise ValueError(msg)

        if not check.name:
            msg = "Check must have a non-empty name"
            raise ValueError(msg)

        self._checks[check.name] = check

    def get(self, name: str) -> NamedCheck:
        """
        Look up a check by name.

        Raises:
            CheckNotFoundError: If no check with that name is registered
        """
        check = self._checks.get(name)
        if check is None:
            raise CheckNotFoundError(check=name)
        return check

    def invoke(self, name: str, args: Sequence[str]) -> bool:
        """
        Run a named check with raw string arguments.

        Args:
            name: Registered check name
            args: Password followed by the check's parameters

        Returns:
            True if the password passes the check

        Raises:
            CheckNotFoundError: If the check is not registered
            CheckInvalidArgsError: If the arguments do not fit the check
        """
        check = self.get(name)
        if not args:
            raise CheckInvalidArgsError(check=name, validation_error="'password' is required")
        return check(args[0], *args[1:])

    def list_checks(self) -> list[str]:
        """List all registered check names in sorted order."""
        return sorted(self._checks.keys())

    def __len__(self) -> int:
        return len(self._checks)

    def __iter__(self) -> Iterator[NamedCheck]:
        return iter(self._checks.values())

    def __contains__(self, name: str) -> bool:
        return name in self._checks

    def __repr__(self) -> str:
        checks = ", ".join(self.list_checks())
        return f"<CheckRegistry: [{checks}]>"


# =============================================================================
# Built-in checks
# =============================================================================

_LIMIT = CheckParam("limit", "int", help="longest allowed run")
_REVERSE = CheckParam("allow_reverse", "bool", False, "also count descending runs")
_LAYOUT = CheckParam("layout", "layout", KeyboardLayout.QWERTY, "keyboard layout")

BUILTIN_CHECKS: tuple[NamedCheck, ...] = (
    NamedCheck(
        "length",
        "Length within [min_length, max_length]; max 0 means unbounded",
        checkers.check_length,
        (
            CheckParam("min_length", "int", help="shortest allowed length"),
            CheckParam("max_length", "int", 0, "longest allowed length"),
        ),
    ),
    NamedCheck("numeric_run", "Sequential digits such as 1234", checkers.check_numeric_run, (_LIMIT, _REVERSE)),
    NamedCheck("alpha_run", "Sequential letters such as abcd", checkers.check_alpha_run, (_LIMIT, _REVERSE)),
    NamedCheck("symbol_run", "Code-point sequential symbols such as #$%", checkers.check_symbol_run, (_LIMIT, _REVERSE)),
    NamedCheck("same_digit", "Repeated digits such as 1111", checkers.check_same_digit, (_LIMIT,)),
    NamedCheck("same_alpha", "Repeated letters such as aaaa", checkers.check_same_alpha, (_LIMIT,)),
    NamedCheck("same_symbol", "Repeated symbols such as !!!!", checkers.check_same_symbol, (_LIMIT,)),
    NamedCheck(
        "keyboard_linear",
        "Adjacent keys on a keyboard row such as qwer",
        checkers.check_keyboard_linear,
        (CheckParam("limit", "int", help="adjacency steps that fail"), _REVERSE, _LAYOUT),
    ),
    NamedCheck(
        "symbol_adjacency",
        "Adjacent keys on the shifted number row such as !@#$",
        checkers.check_symbol_adjacency,
        (CheckParam("limit", "int", help="adjacency steps that fail"), _REVERSE, _LAYOUT),
    ),
    NamedCheck(
        "regex",
        "Full match against complexity level 1-4, or 0 with a custom pattern",
        checkers.check_regex,
        (
            CheckParam("level", "int", help="regex policy level"),
            CheckParam("custom_regex", "optional_str", None, "pattern for level 0"),
        ),
    ),
    NamedCheck(
        "deny_substrings",
        "Forbidden substrings, case-insensitive",
        checkers.check_deny_substrings,
        (CheckParam("substrings", "list", help="forbidden substrings"),),
    ),
)


def _build_default_registry() -> CheckRegistry:
    registry = CheckRegistry()
    for check in BUILTIN_CHECKS:
        registry.register(check)
    return registry


default_registry = _build_default_registry()


def get_check(name: str) -> NamedCheck:
    """
    Get a check from the default registry.

    Raises:
        CheckNotFoundError: If no check with that name is registered
    """
    return default_registry.get(name)
