"""fakeiban command line interface (Typer + Rich)."""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.csv_exporter import export_batch_csv
from adapters.json_exporter import default_export_filename, export_batch_json
from cli.doctor import app as doctor_app
from cli.ui_components import (
    build_countries_table,
    build_country_panel,
    build_ibans_table,
    build_validation_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import UnsupportedCountryError
from core.domain.models import BatchRequest, FillPolicy, GenerationMode
from core.logger import setup_logging
from core.services.iban_service import (
    generate_batch,
    get_country_info,
    get_supported_countries,
    validate_iban,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Generate and validate synthetic IBANs. TEST USE ONLY: never for real payments.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _resolve_export_path(path: Path, extension: str) -> Path:
    """Directories get the default `fake-ibans-<date>.<ext>` file name."""

    if path.is_dir():
        return path / default_export_filename(extension)
    return path


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR). Defaults to FAKEIBAN_LOG_LEVEL.",
    ),
) -> None:
    settings = AppSettings()
    setup_logging(level=log_level or settings.log_level, log_file=settings.log_file)


@app.command()
def generate(
    country: Optional[str] = typer.Argument(None, help="Country code, e.g. DE or GB."),
    mode: Optional[GenerationMode] = typer.Option(None, "--mode", "-m", help="valid or invalid check digits."),
    quantity: Optional[int] = typer.Option(None, "--quantity", "-n", min=1, help="How many IBANs (max 1000)."),
    bank_code: Optional[str] = typer.Option(None, "--bank-code", help="Fixed bank code prefix (up to 8 chars)."),
    structural: bool = typer.Option(False, "--structural", help="Follow the per-position BBAN pattern."),
    masked: Optional[bool] = typer.Option(None, "--masked/--no-masked", help="Show masked IBANs."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    plain: bool = typer.Option(False, "--plain", help="One raw IBAN per line, no table."),
    export_json: Optional[Path] = typer.Option(None, "--export-json", help="Write the batch as JSON."),
    export_csv: Optional[Path] = typer.Option(None, "--export-csv", help="Write the batch as CSV."),
) -> None:
    """Generate test IBANs."""

    settings = AppSettings()
    request = BatchRequest(
        country=country or settings.default_country,
        mode=mode or settings.default_mode,
        quantity=quantity or settings.default_quantity,
        custom_bank_code=bank_code,
        fill_policy=FillPolicy.STRUCTURAL if structural else settings.fill_policy,
    )
    rng = random.Random(seed) if seed is not None else None

    try:
        batch = generate_batch(request, rng=rng, settings=settings)
    except UnsupportedCountryError as exc:
        raise typer.BadParameter(str(exc), param_hint="COUNTRY") from exc

    show_masked = settings.show_masked if masked is None else masked
    if plain:
        for iban in batch.ibans:
            typer.echo(iban.masked if show_masked else iban.raw)
    else:
        print_banner(_console)
        _console.print(build_ibans_table(batch.ibans, masked=show_masked))

    if export_json is not None:
        path = export_batch_json(batch=batch, output_path=_resolve_export_path(export_json, "json"))
        _console.print(f"[green]JSON written to:[/green] {path}", highlight=False)
    if export_csv is not None:
        path = export_batch_csv(batch=batch, output_path=_resolve_export_path(export_csv, "csv"))
        _console.print(f"[green]CSV written to:[/green] {path}", highlight=False)


@app.command()
def validate(
    values: List[str] = typer.Argument(..., help="IBANs to validate (quote values containing spaces)."),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON lines."),
) -> None:
    """Validate IBANs. Exit code 1 when any input is invalid."""

    all_valid = True
    for value in values:
        result = validate_iban(value)
        all_valid = all_valid and result.is_valid
        if as_json:
            typer.echo(result.model_dump_json(by_alias=True))
        else:
            _console.print(build_validation_panel(value, result))

    if not all_valid:
        raise typer.Exit(code=1)


@app.command()
def countries() -> None:
    """List supported countries, sorted by name."""

    _console.print(build_countries_table(get_supported_countries()))


@app.command()
def info(code: str = typer.Argument(..., help="Country code.")) -> None:
    """Show the IBAN format of one country."""

    profile = get_country_info(code)
    if profile is None:
        _console.print(f"[red]Unsupported country code:[/red] {code}", highlight=False)
        raise typer.Exit(code=1)
    _console.print(build_country_panel(profile))


def run() -> None:
    app()
