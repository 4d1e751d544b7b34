"""JSON export of a generated form."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from .mutation import FieldMutationStore
from .structures import FormModel


def build_form_report(
    model: FormModel, store: Optional[FieldMutationStore] = None
) -> Dict[str, Any]:
    fields = store.fields if store is not None else model.fields
    return {
        "subject": model.subject,
        "fields": [
            {
                "predicate": field.predicate,
                "label": field.label,
                "kind": field.kind,
                "value": field.value,
            }
            for field in fields.values()
        ],
        "types": [asdict(info) for info in model.types],
    }


def save_report(report: Dict[str, Any], path: Path) -> None:
    path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
