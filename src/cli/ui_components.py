"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CountryProfile, GeneratedIBAN, ValidationResult


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in plain/pipeline output)."""

    title = Text("fakeiban", style="bold cyan")
    subtitle = Text("Synthetic IBANs • MOD 97-10 • TEST USE ONLY", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_ibans_table(ibans: Iterable[GeneratedIBAN], *, masked: bool = False) -> Table:
    table = Table(title="Generated IBANs (test use only)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Country", style="cyan", no_wrap=True)
    table.add_column("IBAN", style="white", no_wrap=True)
    table.add_column("Length", justify="right")
    table.add_column("Checksum", no_wrap=True)

    for index, iban in enumerate(ibans, start=1):
        checksum = Text("valid", style="green") if iban.is_valid else Text("invalid", style="red")
        table.add_row(
            str(index),
            iban.country,
            iban.masked if masked else iban.pretty,
            str(iban.length),
            checksum,
        )
    return table


def build_countries_table(profiles: Iterable[CountryProfile]) -> Table:
    table = Table(title="Supported countries")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country", style="white")
    table.add_column("Length", justify="right")
    table.add_column("BBAN", style="dim")
    for profile in profiles:
        table.add_row(profile.code, profile.name, str(profile.length), profile.bban_description)
    return table


def build_country_panel(profile: CountryProfile) -> Panel:
    body = Text()
    body.append(f"{profile.name} ({profile.code})\n\n", style="bold")
    body.append(f"Length:  {profile.length}\n")
    body.append(f"BBAN:    {profile.bban_description}\n")
    body.append(f"Pattern: {profile.bban_pattern}\n")
    body.append(f"Example: {profile.example}")
    return Panel(body, title=Text("Country", style="bold yellow"), border_style="yellow")


def build_validation_panel(value: str, result: ValidationResult) -> Panel:
    body = Text()
    body.append(value.strip() + "\n\n", style="bold")
    if result.is_valid:
        body.append("VALID\n", style="bold green")
        body.append(f"Formatted: {result.formatted}\n")
    else:
        body.append("INVALID\n", style="bold red")
        for error in result.errors or []:
            body.append(f"- {error}\n", style="red")

    if result.details is not None:
        details = result.details
        body.append(
            f"\nCountry: {details.country}  Length: {details.length}  "
            f"Check digits: {details.check_digits}",
            style="dim",
        )

    border = "green" if result.is_valid else "red"
    return Panel(body, title=Text("Validation", style="bold"), border_style=border)
