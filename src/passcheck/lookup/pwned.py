"""
k-anonymity range lookup over HTTP.

Only the first five hex characters of the password's SHA-1 digest leave the
machine. The service answers with every known suffix under that prefix, one
``SUFFIX:COUNT`` pair per line, and the match happens locally.

Failure Handling:
    Timeouts, connection errors and non-2xx responses raise
    LookupUnavailableError. The evaluator turns that into LOOKUP_ERROR, so
    an unreachable service never counts as "not compromised".
"""

import hashlib

import httpx

from passcheck.errors import LookupUnavailableError
from passcheck.lookup.base import CompromisedLookup


DEFAULT_RANGE_URL = "https://api.pwnedpasswords.com/range"
DEFAULT_TIMEOUT_SECONDS = 5.0
PREFIX_LENGTH = 5


def sha1_hex(password: str) -> str:
    """Upper-case SHA-1 hex digest of the UTF-8 password."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest().upper()


def suffix_in_range(body: str, suffix: str) -> bool:
    """
    Check whether a range response lists the suffix with a non-zero count.

    Padding entries carry a count of 0 and never match.
    """
    suffix = suffix.upper()
    for line in body.splitlines():
        candidate, _, count = line.strip().partition(":")
        if candidate.upper() != suffix:
            continue
        try:
            return int(count) > 0
        except ValueError:
            return True
    return False


class PwnedRangeLookup(CompromisedLookup):
    """
    Query a Pwned Passwords compatible range API.

    Attributes:
        base_url: Range endpoint; the prefix is appended as a path segment
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = DEFAULT_RANGE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def source(self) -> str:
        return self.base_url

    def is_known_compromised(self, password: str) -> bool:
        digest = sha1_hex(password)
        prefix, suffix = digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]
        url = f"{self.base_url}/{prefix}"

        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.timeout, headers={"Add-Padding": "true"})
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url, headers={"Add-Padding": "true"})
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise LookupUnavailableError(
                source=self.source,
                underlying_error=f"timed out after {self.timeout}s",
            ) from e
        except httpx.HTTPStatusError as e:
            raise LookupUnavailableError(
                source=self.source,
                underlying_error=f"HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            raise LookupUnavailableError(source=self.source, underlying_error=str(e)) from e

        return suffix_in_range(response.text, suffix)
