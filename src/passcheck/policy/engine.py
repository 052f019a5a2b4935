"""
Password policy evaluator.

The evaluator runs the checks a Policy enables, in a fixed order, and stops
at the first failure.

Evaluation order:
    1. blank input (always on)
    2. length
    3. numeric run, alphabetic run, symbol run
    4. same digit, same letter, same symbol
    5. keyboard linear, symbol adjacency
    6. compromised-password lookup
    7. regex complexity
    8. deny substrings

Design Principles:
    - Predictable: Same inputs always produce the same Verdict (lookup aside)
    - Fail-closed: A lookup that cannot answer yields LOOKUP_ERROR, not a pass
    - Side-effect free: Nothing is stored; the only I/O is the lookup call
"""

from typing import Callable

from loguru import logger

from passcheck.lookup.base import LookupFn
from passcheck.rules import checkers
from passcheck.schema import MessageCode, Policy, Verdict


EMPTY_CHECK = "empty"

# A stage returns None when the password passes it
Stage = Callable[[str], Verdict | None]


class PasswordEvaluator:
    """
    Evaluates passwords against one Policy.

    Usage:
        evaluator = PasswordEvaluator(policy, lookup=WordlistLookup("rockyou.txt"))
        verdict = evaluator.evaluate("hunter2")
        if not verdict.passed:
            print(verdict.failed_reason)

    The evaluator holds no per-call state, so one instance can serve any
    number of evaluations, including concurrent ones.

    Attributes:
        policy: The Policy to enforce
        lookup: Compromised-password lookup, used when policy.check_compromised is on
    """

    def __init__(self, policy: Policy, lookup: LookupFn | None = None) -> None:
        """
        Initialize the evaluator.

        Args:
            policy: The policy to enforce
            lookup: Callable returning True for compromised passwords
        """
        self.policy = policy
        self.lookup = lookup
        self._stages = self._build_stages()

    def _build_stages(self) -> list[tuple[str, Stage]]:
        policy = self.policy
        stages: list[tuple[str, bool, Stage]] = [
            ("length", policy.length_check, self._check_length),
            ("numeric_run", policy.check_numeric_run, self._check_numeric_run),
            ("alpha_run", policy.check_alpha_run, self._check_alpha_run),
            ("symbol_run", policy.check_symbol_run, self._check_symbol_run),
            ("same_digit", policy.check_same_digit, self._check_same_digit),
            ("same_alpha", policy.check_same_alpha, self._check_same_alpha),
            ("same_symbol", policy.check_same_symbol, self._check_same_symbol),
            ("keyboard_linear", policy.check_keyboard_linear, self._check_keyboard_linear),
            ("symbol_adjacency", policy.check_symbol_adjacency, self._check_symbol_adjacency),
            ("compromised", policy.check_compromised, self._check_compromised),
            ("regex", policy.regex_policy_level is not None, self._check_regex),
            ("deny_substrings", bool(policy.deny_substrings), self._check_deny_substrings),
        ]
        return [(name, stage) for name, enabled, stage in stages if enabled]

    def enabled_checks(self) -> list[str]:
        """Names of the checks this policy runs, in evaluation order."""
        return [name for name, _ in self._stages]

    def evaluate(self, password: str | None) -> Verdict:
        """
        Evaluate a password against the policy.

        Args:
            password: The candidate password

        Returns:
            Verdict from the first failing check, or a passing Verdict
        """
        if password is None or not password.strip():
            logger.debug("Password rejected: blank input")
            return Verdict.fail(MessageCode.EMPTY, EMPTY_CHECK)

        for name, stage in self._stages:
            verdict = stage(password)
            if verdict is not None:
                logger.debug(f"Password rejected by {name}: {verdict.message.value}")
                return verdict

        return Verdict.ok()

    # =========================================================================
    # Stages
    # =========================================================================

    @staticmethod
    def _rule(passed: bool, code: MessageCode, check: str) -> Verdict | None:
        return None if passed else Verdict.fail(code, check)

    def _check_length(self, password: str) -> Verdict | None:
        passed = checkers.check_length(password, self.policy.min_length, self.policy.max_length)
        return self._rule(passed, MessageCode.LENGTH_FAIL, "length")

    def _check_numeric_run(self, password: str) -> Verdict | None:
        passed = checkers.check_numeric_run(
            password, self.policy.run_length_limit, self.policy.allow_reverse_runs
        )
        return self._rule(passed, MessageCode.CONTINUES_FAIL, "numeric_run")

    def _check_alpha_run(self, password: str) -> Verdict | None:
        passed = checkers.check_alpha_run(
            password, self.policy.run_length_limit, self.policy.allow_reverse_runs
        )
        return self._rule(passed, MessageCode.CONTINUES_FAIL, "alpha_run")

    def _check_symbol_run(self, password: str) -> Verdict | None:
        passed = checkers.check_symbol_run(
            password, self.policy.run_length_limit, self.policy.allow_reverse_runs
        )
        return self._rule(passed, MessageCode.CONTINUES_FAIL, "symbol_run")

    def _check_same_digit(self, password: str) -> Verdict | None:
        passed = checkers.check_same_digit(password, self.policy.run_length_limit)
        return self._rule(passed, MessageCode.REPEAT_FAIL, "same_digit")

    def _check_same_alpha(self, password: str) -> Verdict | None:
        passed = checkers.check_same_alpha(password, self.policy.run_length_limit)
        return self._rule(passed, MessageCode.REPEAT_FAIL, "same_alpha")

    def _check_same_symbol(self, password: str) -> Verdict | None:
        passed = checkers.check_same_symbol(password, self.policy.run_length_limit)
        return self._rule(passed, MessageCode.REPEAT_FAIL, "same_symbol")

    def _check_keyboard_linear(self, password: str) -> Verdict | None:
        passed = checkers.check_keyboard_linear(
            password,
            self.policy.run_length_limit,
            self.policy.allow_reverse_runs,
            self.policy.keyboard_layout,
        )
        return self._rule(passed, MessageCode.LINEAR_FAIL, "keyboard_linear")

    def _check_symbol_adjacency(self, password: str) -> Verdict | None:
        passed = checkers.check_symbol_adjacency(
            password,
            self.policy.run_length_limit,
            self.policy.allow_reverse_runs,
            self.policy.keyboard_layout,
        )
        return self._rule(passed, MessageCode.LINEAR_FAIL, "symbol_adjacency")

    def _check_compromised(self, password: str) -> Verdict | None:
        """
        Consult the lookup exactly once.

        Any exception from the lookup, or a missing lookup, means the
        password could not be checked and is reported as LOOKUP_ERROR.
        """
        if self.lookup is None:
            logger.warning("Compromised-password check enabled but no lookup configured")
            return Verdict.fail(MessageCode.LOOKUP_ERROR, "compromised")

        try:
            compromised = self.lookup(password)
        except Exception as e:
            logger.warning(f"Compromised-password lookup failed: {e}")
            return Verdict.fail(MessageCode.LOOKUP_ERROR, "compromised")

        return self._rule(not compromised, MessageCode.LOOKUP_FAIL, "compromised")

    def _check_regex(self, password: str) -> Verdict | None:
        passed = checkers.check_regex(
            password, self.policy.regex_policy_level, self.policy.custom_regex
        )
        return self._rule(passed, MessageCode.REGEX_FAIL, "regex")

    def _check_deny_substrings(self, password: str) -> Verdict | None:
        passed = checkers.check_deny_substrings(password, self.policy.deny_substrings)
        return self._rule(passed, MessageCode.AVOID_STR_FAIL, "deny_substrings")


def evaluate(password: str | None, policy: Policy, lookup: LookupFn | None = None) -> Verdict:
    """
    Evaluate a password against a policy.

    Args:
        password: The candidate password
        policy: The policy to enforce
        lookup: Callable returning True for compromised passwords

    Returns:
        Verdict from the first failing check, or a passing Verdict
    """
    return PasswordEvaluator(policy, lookup).evaluate(password)
