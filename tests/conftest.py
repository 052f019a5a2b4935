"""
Pytest configuration and fixtures for passcheck tests.

This module provides shared fixtures used across unit and integration tests.
"""

from pathlib import Path
from typing import Generator

import pytest
from loguru import logger

from passcheck.config import policy_to_mapping
from passcheck.schema import Policy


# Passes every preset: no runs, no keyboard rows, no deny words, regex level 4
STRONG_PASSWORD = "Tr0ub4dor&3xZ"


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop sinks added by the CLI so later tests don't write to closed streams."""
    yield
    logger.remove()
    logger.disable("passcheck")


@pytest.fixture
def strong_password() -> str:
    """Return a password that passes every preset."""
    return STRONG_PASSWORD


@pytest.fixture
def full_policy_map() -> dict:
    """Return a complete policy mapping with every field present."""
    return policy_to_mapping(Policy())


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    """Create a small compromised-password wordlist."""
    path = tmp_path / "wordlist.txt"
    path.write_text("123456\npassword\nletmein\n\nTr0ub4dor&3xZ\n")
    return path


@pytest.fixture
def sample_policy_yaml() -> str:
    """Return a preset-based policy YAML."""
    return """
preset: 4
min_length: 10
deny_substrings:
  - acme
"""
