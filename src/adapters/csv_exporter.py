"""CSV export of a generated batch.

Two comment lines mark the file as test data, then one row per IBAN.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path

from adapters.json_exporter import DISCLAIMER
from core.domain.models import BatchResult

CSV_COLUMNS = ("country", "length", "iban", "pretty", "checksum_valid", "mode")


def render_batch_csv(batch: BatchResult) -> str:
    buffer = io.StringIO()
    buffer.write(f"# {DISCLAIMER}\n")
    buffer.write(f"# Generated: {batch.generated_at.isoformat()}\n")

    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    mode = batch.request.mode.value
    for iban in batch.ibans:
        writer.writerow(
            [
                iban.country,
                iban.length,
                iban.raw,
                iban.pretty,
                "true" if iban.is_valid else "false",
                mode,
            ]
        )
    return buffer.getvalue()


def export_batch_csv(*, batch: BatchResult, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_batch_csv(batch), encoding="utf-8")
    return output_path
