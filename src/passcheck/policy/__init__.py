"""
Policy evaluation module for passcheck.

This module implements the core of passcheck: ordered, short-circuiting
evaluation of a password against a Policy.

Key concepts:
    - Verdict: The result of evaluating a password (pass/fail + codes)
    - PasswordEvaluator: Runs the enabled checks in a fixed order
    - evaluate(): One-shot convenience wrapper
"""

from passcheck.policy.engine import PasswordEvaluator, evaluate

__all__ = [
    "PasswordEvaluator",
    "evaluate",
]
