"""
Compromised-password lookup contract.

The evaluator only needs a callable ``(password) -> bool`` that returns True
when the password is known to be compromised and raises when the corpus
cannot be consulted. CompromisedLookup is the base class for the adapters
shipped with passcheck; plain functions work just as well.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from loguru import logger

from passcheck.errors import LookupUnavailableError


# Anything the evaluator can call
LookupFn = Callable[[str], bool]


class CompromisedLookup(ABC):
    """
    Abstract base class for compromised-password lookups.

    Subclasses must implement:
    - source property: Where the corpus lives (for error messages)
    - is_known_compromised(): The membership test
    """

    @property
    @abstractmethod
    def source(self) -> str:
        """Wordlist path or service URL."""
        ...

    @abstractmethod
    def is_known_compromised(self, password: str) -> bool:
        """
        Return True if the password is in the corpus.

        Raises:
            LookupUnavailableError: If the corpus cannot be consulted
        """
        ...

    def __call__(self, password: str) -> bool:
        return self.is_known_compromised(password)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.source}>"


class WordlistLookup(CompromisedLookup):
    """
    Lookup against a newline-separated wordlist such as rockyou.txt.

    The file is read on the first call and cached, so a missing or
    unreadable file is reported as LOOKUP_ERROR at evaluation time.

    Attributes:
        path: Wordlist location
        case_sensitive: Compare exactly (default) or case-folded
    """

    def __init__(self, path: Path | str, case_sensitive: bool = True, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.case_sensitive = case_sensitive
        self.encoding = encoding
        self._words: frozenset[str] | None = None

    @property
    def source(self) -> str:
        return str(self.path)

    def _normalize(self, word: str) -> str:
        return word if self.case_sensitive else word.casefold()

    def _load(self) -> frozenset[str]:
        if self._words is None:
            try:
                with self.path.open(encoding=self.encoding, errors="replace") as f:
                    words = frozenset(self._normalize(line.rstrip("\r\n")) for line in f)
            except OSError as e:
                raise LookupUnavailableError(source=self.source, underlying_error=str(e)) from e
            self._words = words - {""}
            logger.debug(f"Loaded {len(self._words)} entries from {self.source}")
        return self._words

    def is_known_compromised(self, password: str) -> bool:
        return self._normalize(password) in self._load()
