"""
Named policy presets.

Presets are plain factory functions returning a fully populated Policy.
Level 1 is the strictest, level 6 the most lenient; MAXIMAL_LEVEL (65535)
adds symbol adjacency on top of level 1.

Usage:
    from passcheck.presets import get_preset

    policy = get_preset(2)
"""

from types import MappingProxyType
from typing import Callable, Mapping

from passcheck.errors import PresetNotFoundError
from passcheck.rules.keyboard import KeyboardLayout
from passcheck.schema import Policy


MAXIMAL_LEVEL = 65535

DEFAULT_DENY_SUBSTRINGS: tuple[str, ...] = (
    "password",
    "pwd",
    "admin",
    "root",
    "user",
    "linux",
    "unix",
    "ubuntu",
    "debian",
    "centos",
    "redhat",
    "fedora",
    "prod",
    "test",
    "dev",
    "login",
    "logout",
    "signin",
    "signout",
    "signup",
    "signoff",
    "register",
    "unregister",
    "azure",
    "aws",
    "google",
    "aliyun",
    "tencent",
    "baidu",
    "passw0rd",
    "master",
)


def strength_1() -> Policy:
    """Strictest everyday policy: 12+ chars, every run check, regex level 4."""
    return Policy(
        length_check=True,
        min_length=12,
        check_compromised=True,
        run_length_limit=3,
        check_numeric_run=True,
        check_alpha_run=True,
        check_symbol_run=True,
        check_same_digit=True,
        check_same_alpha=True,
        check_same_symbol=True,
        check_keyboard_linear=True,
        keyboard_layout=KeyboardLayout.QWERTY,
        allow_reverse_runs=True,
        regex_policy_level=4,
        deny_substrings=DEFAULT_DENY_SUBSTRINGS,
    )


def strength_2() -> Policy:
    """10+ chars, forward runs only, regex level 4."""
    return Policy(
        length_check=True,
        min_length=10,
        check_compromised=True,
        run_length_limit=3,
        check_numeric_run=True,
        check_alpha_run=True,
        check_same_digit=True,
        check_same_alpha=True,
        check_same_symbol=True,
        check_keyboard_linear=True,
        keyboard_layout=KeyboardLayout.QWERTY,
        regex_policy_level=4,
        deny_substrings=DEFAULT_DENY_SUBSTRINGS,
    )


def strength_3() -> Policy:
    """8+ chars, runs up to 4, regex level 3."""
    return Policy(
        length_check=True,
        min_length=8,
        check_compromised=True,
        run_length_limit=4,
        check_numeric_run=True,
        check_alpha_run=True,
        check_same_digit=True,
        check_same_alpha=True,
        check_keyboard_linear=True,
        keyboard_layout=KeyboardLayout.QWERTY,
        regex_policy_level=3,
        deny_substrings=DEFAULT_DENY_SUBSTRINGS,
    )


def strength_4() -> Policy:
    """8+ chars, runs up to 5, regex level 2, no lookup."""
    return Policy(
        length_check=True,
        min_length=8,
        run_length_limit=5,
        check_numeric_run=True,
        check_alpha_run=True,
        check_same_digit=True,
        check_same_alpha=True,
        check_keyboard_linear=True,
        keyboard_layout=KeyboardLayout.QWERTY,
        regex_policy_level=2,
        deny_substrings=DEFAULT_DENY_SUBSTRINGS,
    )


def strength_5() -> Policy:
    """6+ chars, digit checks only, regex level 1."""
    return Policy(
        length_check=True,
        min_length=6,
        run_length_limit=4,
        check_numeric_run=True,
        check_same_digit=True,
        keyboard_layout=KeyboardLayout.QWERTY,
        regex_policy_level=1,
    )


def strength_6() -> Policy:
    """6+ chars and regex level 1."""
    return Policy(
        length_check=True,
        min_length=6,
        run_length_limit=4,
        keyboard_layout=KeyboardLayout.QWERTY,
        regex_policy_level=1,
    )


def maximal() -> Policy:
    """Level 1 plus shifted number row adjacency."""
    return Policy.model_validate({**strength_1().model_dump(), "check_symbol_adjacency": True})


PRESETS: Mapping[int, Callable[[], Policy]] = MappingProxyType({
    1: strength_1,
    2: strength_2,
    3: strength_3,
    4: strength_4,
    5: strength_5,
    6: strength_6,
    MAXIMAL_LEVEL: maximal,
})


def get_preset(level: int) -> Policy:
    """
    Build the preset policy for a level.

    Args:
        level: 1-6, or MAXIMAL_LEVEL

    Raises:
        PresetNotFoundError: If the level has no preset
    """
    factory = PRESETS.get(level)
    if factory is None:
        raise PresetNotFoundError(level=level)
    return factory()
