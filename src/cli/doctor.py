"""Doctor command: registry self-check and persisted defaults."""

from __future__ import annotations

import random
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.table import Table

from core.config import write_user_env_vars
from core.domain.countries import DEFAULT_REGISTRY, CountryRegistry
from core.domain.models import (
    MAX_BATCH_QUANTITY,
    CountryProfile,
    GenerationMode,
    GenerationOptions,
)
from core.interfaces.random_source import RandomSource
from core.services.checksum import validate_checksum
from core.services.iban_service import build_generator, validate_iban

app = typer.Typer(no_args_is_help=True, help="Registry diagnostics and user defaults.")

_console = Console()


@dataclass
class ProfileCheck:
    code: str
    name: str
    ok: bool
    problems: list[str]


def check_profile(profile: CountryProfile, rng: RandomSource) -> ProfileCheck:
    """Run the registry invariants and a generation round-trip for one country."""

    problems: list[str] = []

    if profile.length != 4 + sum(segment.count for segment in profile.segments):
        problems.append("length does not match BBAN pattern")
    if not validate_checksum(profile.example):
        problems.append("example fails MOD 97-10")

    generator = build_generator(rng=rng)
    valid = generator.generate(profile.code, GenerationOptions(mode=GenerationMode.VALID))
    if len(valid.raw) != profile.length or not validate_iban(valid.raw).is_valid:
        problems.append(f"generated valid IBAN rejected: {valid.raw}")
    invalid = generator.generate(profile.code, GenerationOptions(mode=GenerationMode.INVALID))
    if validate_iban(invalid.raw).is_valid:
        problems.append(f"generated invalid IBAN accepted: {invalid.raw}")

    return ProfileCheck(code=profile.code, name=profile.name, ok=not problems, problems=problems)


def check_registry(
    registry: CountryRegistry | None = None,
    rng: RandomSource | None = None,
) -> list[ProfileCheck]:
    registry = registry if registry is not None else DEFAULT_REGISTRY
    rng = rng if rng is not None else random.Random()
    return [check_profile(profile, rng) for profile in registry.list()]


@app.command()
def run(
    seed: int = typer.Option(0, "--seed", help="Seed for the generation round-trip."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show passing countries too."),
) -> None:
    """Check every country profile and exit 1 on any failure."""

    results = check_registry(rng=random.Random(seed))
    failures = [result for result in results if not result.ok]

    table = Table(title="fakeiban doctor")
    table.add_column("Code", style="bright_green", no_wrap=True)
    table.add_column("Country", style="white")
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for result in results:
        if result.ok and not verbose:
            continue
        table.add_row(
            result.code,
            result.name,
            "OK" if result.ok else "FAIL",
            "; ".join(result.problems),
        )

    if failures or verbose:
        _console.print(table)
    _console.print(f"{len(results) - len(failures)}/{len(results)} country profiles OK")

    if failures:
        raise typer.Exit(code=1)


@app.command(name="set-defaults")
def set_defaults() -> None:
    """Interactively store generation defaults in the user config .env."""

    country = typer.prompt("Default country", default="DE", show_default=True).strip().upper()
    if DEFAULT_REGISTRY.lookup(country) is None:
        raise typer.BadParameter(f"Unsupported country code: {country}")

    raw_mode = typer.prompt("Default mode", default=GenerationMode.VALID.value, show_default=True)
    try:
        mode = GenerationMode(raw_mode.strip().lower())
    except ValueError as exc:
        raise typer.BadParameter("mode must be 'valid' or 'invalid'") from exc

    quantity = typer.prompt("Default quantity", default=5, type=int)
    if not 1 <= quantity <= MAX_BATCH_QUANTITY:
        raise typer.BadParameter(f"quantity must be between 1 and {MAX_BATCH_QUANTITY}")

    env_path = write_user_env_vars(
        {
            "FAKEIBAN_DEFAULT_COUNTRY": country,
            "FAKEIBAN_DEFAULT_MODE": mode.value,
            "FAKEIBAN_DEFAULT_QUANTITY": str(quantity),
        }
    )
    _console.print(f"[green]Saved defaults to:[/green] {env_path}")
