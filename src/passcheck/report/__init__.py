"""
Reporting module for passcheck.

Output formats:
    - Console: Rich panel with the verdict and an optional check breakdown
    - JSON: Structured output for programmatic consumption

Example:
    from passcheck.report import generate_json_report, render_verdict

    render_verdict(verdict)
    print(generate_json_report(verdict))
"""

from passcheck.report.console import render_verdict
from passcheck.report.json import build_report_dict, generate_json_report

__all__ = [
    "render_verdict",
    "generate_json_report",
    "build_report_dict",
]
