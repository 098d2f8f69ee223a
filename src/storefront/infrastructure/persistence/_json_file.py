"""Small helpers shared by the JSON-file-backed repositories."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any


def ensure_file(file_path: Path, empty: Any) -> None:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        write_json(file_path, empty)


def read_json(file_path: Path) -> Any:
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_json(file_path: Path, data: Any) -> None:
    file_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def decimal_or_none(raw: str | None) -> Decimal | None:
    return Decimal(raw) if raw is not None else None


def str_or_none(value: Any) -> str | None:
    return str(value) if value is not None else None
