"""
Console report for passcheck.

Renders a Verdict with Rich: a status panel, the failure reason, and
optionally the list of checks the policy ran. The password itself is never
printed.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from passcheck.schema import Verdict


# Status icons
ICON_PASS = "[green]✓[/green]"
ICON_FAIL = "[red]✗[/red]"
ICON_SKIPPED = "[dim]○[/dim]"


def render_verdict(
    verdict: Verdict,
    console: Console | None = None,
    checks: list[str] | None = None,
    verbose: bool = False,
) -> None:
    """
    Print a verdict to the console.

    Args:
        verdict: The evaluation result
        console: Rich Console instance (creates one if not provided)
        checks: Names of the checks the policy enables, in order
        verbose: Show the per-check breakdown
    """
    if console is None:
        console = Console()

    header = Text()
    header.append(" Password ", style="bold")
    if verdict.passed:
        header.append("PASSED", style="bold green")
    else:
        header.append("FAILED", style="bold red")
    console.print(Panel(header, expand=False))

    console.print(f"  [dim]Message:[/dim] {verdict.text}")
    if not verdict.passed and verdict.failed_reason is not None:
        console.print(f"  [dim]Failed reason:[/dim] [red]{verdict.failed_reason.value}[/red]")

    if verbose and checks is not None:
        console.print()
        _print_checks(console, verdict, checks)


def _print_checks(console: Console, verdict: Verdict, checks: list[str]) -> None:
    """Print which checks passed, failed, or were never reached."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("", width=2)
    table.add_column("Check", style="cyan")

    failed_at = checks.index(verdict.check) if verdict.check in checks else None
    for index, name in enumerate(checks):
        if failed_at is None:
            # Blank input fails before any policy check runs
            icon = ICON_PASS if verdict.passed else ICON_SKIPPED
        elif index < failed_at:
            icon = ICON_PASS
        elif index == failed_at:
            icon = ICON_FAIL
        else:
            icon = ICON_SKIPPED
        table.add_row(icon, name)

    console.print(table)
