"""
CLI entry point for passcheck.

This module provides the Typer-based command-line interface for passcheck.

Commands:
    check       Evaluate a password against a policy file or preset
    checks      List the named checks available to `invoke`
    invoke      Run a single named check with raw arguments
    presets     List presets, or print one as a YAML policy template

Architecture Note:
    The CLI is intentionally thin - it parses arguments, builds a Policy and
    a lookup, and delegates to the evaluator. Exit codes: 0 pass, 1 fail,
    2 configuration or usage error.
"""

import json
import traceback
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from passcheck import __version__
from passcheck.config import dump_policy, load_policy
from passcheck.errors import PasscheckError
from passcheck.log import configure_logging
from passcheck.lookup import PwnedRangeLookup, WordlistLookup
from passcheck.lookup.base import LookupFn
from passcheck.lookup.pwned import DEFAULT_RANGE_URL, DEFAULT_TIMEOUT_SECONDS
from passcheck.policy import PasswordEvaluator
from passcheck.presets import MAXIMAL_LEVEL, PRESETS, get_preset
from passcheck.report import generate_json_report, render_verdict
from passcheck.rules.registry import default_registry
from passcheck.schema import Policy

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2

DEFAULT_PRESET = 3

LOOKUP_SKIPPED_WARNING = "Compromised-password check skipped: pass --wordlist or --pwned to enable it"

# Initialize Typer app with metadata
app = typer.Typer(
    name="passcheck",
    help="Validate passwords against configurable policies.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]passcheck[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    passcheck - Password policy evaluation.

    Check passwords against length, run, keyboard, regex, deny-list and
    compromised-password rules.
    """
    pass


@app.command()
def check(
    password: Annotated[
        Optional[str],
        typer.Argument(help="Password to check. Prompted for (hidden) when omitted."),
    ] = None,
    policy_path: Annotated[
        Optional[Path],
        typer.Option(
            "--policy",
            "-p",
            help="Path to a policy YAML file.",
            exists=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    preset: Annotated[
        Optional[int],
        typer.Option(
            "--preset",
            help=f"Preset level (1-6, or {MAXIMAL_LEVEL}). Defaults to {DEFAULT_PRESET}.",
        ),
    ] = None,
    wordlist: Annotated[
        Optional[Path],
        typer.Option(
            "--wordlist",
            "-w",
            help="Newline-separated file of compromised passwords.",
            resolve_path=True,
        ),
    ] = None,
    pwned: Annotated[
        bool,
        typer.Option(
            "--pwned",
            help="Query a Pwned Passwords range API (k-anonymity).",
        ),
    ] = False,
    pwned_url: Annotated[
        str,
        typer.Option(
            "--pwned-url",
            help="Range API endpoint.",
        ),
    ] = DEFAULT_RANGE_URL,
    timeout: Annotated[
        float,
        typer.Option(
            "--timeout",
            help="Range API timeout in seconds.",
        ),
    ] = DEFAULT_TIMEOUT_SECONDS,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the verdict in JSON format.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show the checks that ran.",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug logging and full error tracebacks.",
        ),
    ] = False,
) -> None:
    """
    Evaluate a password against a policy.

    Exits 0 when the password passes, 1 when it fails, 2 when the policy
    or options are invalid.

    Example:
        $ passcheck check --preset 2 --wordlist rockyou.txt
    """
    configure_logging(verbose=verbose, debug=debug)

    if policy_path is not None and preset is not None:
        _fail_usage("Use either --policy or --preset, not both", json_output)

    try:
        if policy_path is not None:
            policy = load_policy(policy_path)
        else:
            policy = get_preset(DEFAULT_PRESET if preset is None else preset)
    except PasscheckError as e:
        _fail_config(e, json_output, debug)
    except (OSError, yaml.YAMLError) as e:
        _fail_usage(f"Error loading policy: {e}", json_output, debug)

    lookup = _build_lookup(wordlist, pwned, pwned_url, timeout)
    policy, warnings = _reconcile_lookup(policy, lookup)
    if not json_output:
        for warning in warnings:
            console.print(f"[yellow]{escape(warning)}[/yellow]")

    if password is None:
        password = typer.prompt("Password", hide_input=True)

    evaluator = PasswordEvaluator(policy, lookup)
    verdict = evaluator.evaluate(password)
    checks = evaluator.enabled_checks()

    if json_output:
        print(generate_json_report(verdict, checks, warnings=warnings))
    else:
        render_verdict(verdict, console, checks=checks, verbose=verbose)

    raise typer.Exit(code=EXIT_PASSED if verdict.passed else EXIT_FAILED)


def _build_lookup(
    wordlist: Path | None,
    pwned: bool,
    pwned_url: str,
    timeout: float,
) -> LookupFn | None:
    """Combine the requested lookups; a password is compromised if any says so."""
    lookups: list[LookupFn] = []
    if wordlist is not None:
        lookups.append(WordlistLookup(wordlist))
    if pwned:
        lookups.append(PwnedRangeLookup(base_url=pwned_url, timeout=timeout))

    if not lookups:
        return None
    if len(lookups) == 1:
        return lookups[0]
    return lambda candidate: any(lookup(candidate) for lookup in lookups)


def _reconcile_lookup(policy: Policy, lookup: LookupFn | None) -> tuple[Policy, list[str]]:
    """
    Turn the lookup check on or off to match the sources given.

    Returns:
        The adjusted policy and any warnings for the user
    """
    if lookup is not None and not policy.check_compromised:
        return policy.model_copy(update={"check_compromised": True}), []
    if lookup is None and policy.check_compromised:
        return policy.model_copy(update={"check_compromised": False}), [LOOKUP_SKIPPED_WARNING]
    return policy, []


def _fail_config(error: PasscheckError, json_output: bool, debug: bool = False) -> NoReturn:
    """Report a passcheck error and exit with the configuration error code."""
    if json_output:
        output = {"error": True, **error.to_dict()}
        if debug:
            output["traceback"] = traceback.format_exc()
        print(json.dumps(output, indent=2, default=str))
    else:
        console.print(f"[red]{escape(str(error))}[/red]")
        if debug:
            console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
    raise typer.Exit(code=EXIT_CONFIG_ERROR)


def _fail_usage(message: str, json_output: bool, debug: bool = False) -> NoReturn:
    """Report a usage problem and exit with the configuration error code."""
    if json_output:
        output = {"error": True, "error_type": "usage_error", "message": message}
        if debug:
            output["traceback"] = traceback.format_exc()
        print(json.dumps(output, indent=2))
    else:
        console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=EXIT_CONFIG_ERROR)


@app.command("checks")
def list_checks() -> None:
    """
    List the named checks available to `invoke`.

    Example:
        $ passcheck checks
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Check", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description")

    for name in default_registry.list_checks():
        named = default_registry.get(name)
        table.add_row(named.name, named.signature, named.description)

    console.print(table)


@app.command()
def invoke(
    name: Annotated[
        str,
        typer.Argument(help="Registered check name (see `passcheck checks`)."),
    ],
    args: Annotated[
        Optional[list[str]],
        typer.Argument(help="Password followed by the check's arguments."),
    ] = None,
) -> None:
    """
    Run one named check with raw arguments.

    Example:
        $ passcheck invoke keyboard_linear asdf123 3 false QWERTY
    """
    try:
        result = default_registry.invoke(name, args or [])
    except PasscheckError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    style = "green" if result else "red"
    console.print(f"Result: [{style}]{str(result).lower()}[/{style}]")


@app.command()
def presets(
    level: Annotated[
        Optional[int],
        typer.Option(
            "--level",
            "-l",
            help="Print this preset as a YAML policy file.",
        ),
    ] = None,
) -> None:
    """
    List the policy presets, or print one as YAML.

    Example:
        $ passcheck presets --level 2 > policy.yaml
    """
    if level is not None:
        try:
            policy = get_preset(level)
        except PasscheckError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
        print(dump_policy(policy), end="")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level", justify="right", style="cyan")
    table.add_column("Min length", justify="right")
    table.add_column("Run limit", justify="right")
    table.add_column("Regex", justify="right")
    table.add_column("Lookup")
    table.add_column("Checks")

    for preset_level in PRESETS:
        policy = get_preset(preset_level)
        checks = PasswordEvaluator(policy).enabled_checks()
        table.add_row(
            str(preset_level),
            str(policy.min_length),
            str(policy.run_length_limit),
            str(policy.regex_policy_level),
            "yes" if policy.check_compromised else "no",
            ", ".join(checks),
        )

    console.print(table)


if __name__ == "__main__":
    app()
