"""
Compromised-password lookups.

The evaluator consumes a lookup, it never implements one. Adapters:
    - WordlistLookup: local newline-separated corpus
    - PwnedRangeLookup: k-anonymity range API over HTTP
"""

from passcheck.lookup.base import CompromisedLookup, LookupFn, WordlistLookup
from passcheck.lookup.pwned import PwnedRangeLookup

__all__ = [
    "CompromisedLookup",
    "LookupFn",
    "PwnedRangeLookup",
    "WordlistLookup",
]
