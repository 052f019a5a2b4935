"""
JSON report for passcheck.

Structured output for programmatic consumption: the verdict codes, the
human-readable message, and the checks the policy ran.
"""

import json
from typing import Any

from passcheck import __version__
from passcheck.schema import Verdict


def build_report_dict(
    verdict: Verdict,
    checks: list[str] | None = None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    """
    Build a report dictionary for a verdict.

    Args:
        verdict: The evaluation result
        checks: Names of the checks the policy enables, in order
        warnings: Notices about checks that were adjusted or skipped

    Returns:
        Dictionary with the verdict and its context
    """
    report = {
        "report_version": "1.0",
        "passcheck_version": __version__,
        **verdict.model_dump(mode="json"),
        "text": verdict.text,
    }
    if checks is not None:
        report["checks"] = checks
    if warnings is not None:
        report["warnings"] = warnings
    return report


def generate_json_report(
    verdict: Verdict,
    checks: list[str] | None = None,
    warnings: list[str] | None = None,
    indent: int = 2,
) -> str:
    """Serialize a verdict report to a JSON string."""
    return json.dumps(build_report_dict(verdict, checks, warnings), indent=indent)
