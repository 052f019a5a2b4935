"""
passcheck - Configurable password policy evaluation.

passcheck validates a candidate password against a policy built from
independent, named rules:
- Length bounds
- Sequential and repeated character runs
- Keyboard adjacency runs
- Regex complexity classes
- Forbidden substrings and an optional compromised-password lookup

Example usage:
    $ passcheck check --preset 2
    $ passcheck check --policy policy.yaml --wordlist rockyou.txt
    $ passcheck invoke numeric_run ab1234cd 3
"""

from loguru import logger

from passcheck.policy import PasswordEvaluator, evaluate
from passcheck.schema import MessageCode, Policy, ReasonCode, Verdict

__version__ = "0.1.0"
__author__ = "passcheck Contributors"

# Silent unless the application enables it (see passcheck.log)
logger.disable("passcheck")

__all__ = [
    "__version__",
    "__author__",
    "MessageCode",
    "PasswordEvaluator",
    "Policy",
    "ReasonCode",
    "Verdict",
    "evaluate",
]
