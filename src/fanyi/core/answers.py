from __future__ import annotations

import csv
from pathlib import Path

REQUIRED_COLUMNS = ("reference", "candidate")


def read_answer_pairs(path: str) -> list[tuple[str, str]]:
    """Load (reference, candidate) pairs from a UTF-8 CSV with a header row.

    Blank lines are skipped; a blank candidate is kept and scores 0.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"Answers file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"Answers file is missing columns: {', '.join(missing)}")
        return [
            ((row.get("reference") or "").strip(), (row.get("candidate") or "").strip())
            for row in reader
            if any((v or "").strip() for v in row.values() if isinstance(v, str))
        ]
