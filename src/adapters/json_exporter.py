"""JSON export of a generated batch.

Why JSON:
- Interoperability with test fixtures and other tooling.
- Keeps the full `GeneratedIBAN` values (camelCase, as consumers expect).
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from core.domain.models import BatchResult

DISCLAIMER = "TEST USE ONLY - FAKE IBANS FOR DEVELOPMENT/TESTING"


def default_export_filename(extension: str, *, now: datetime | None = None) -> str:
    day = (now or datetime.now()).date().isoformat()
    return f"fake-ibans-{day}.{extension.lstrip('.')}"


def batch_to_document(batch: BatchResult) -> dict[str, Any]:
    return {
        "disclaimer": DISCLAIMER,
        "generated_at": batch.generated_at.isoformat(),
        "config": {
            "country": batch.request.country,
            "mode": batch.request.mode.value,
            "quantity": batch.quantity,
        },
        "ibans": [iban.model_dump(mode="json", by_alias=True) for iban in batch.ibans],
    }


def render_batch_json(batch: BatchResult) -> str:
    return json.dumps(batch_to_document(batch), ensure_ascii=False, indent=2) + "\n"


def export_batch_json(*, batch: BatchResult, output_path: Path) -> Path:
    """Write the batch as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_batch_json(batch), encoding="utf-8")
    return output_path
