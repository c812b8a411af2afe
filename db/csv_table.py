from __future__ import annotations

import csv
import os
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from db.schema import check_header


def read_table(path: str, required: Sequence[str]) -> Tuple[List[str], List[Dict[str, str]]]:
    """Read a whole CSV table; returns (header, rows).

    A missing or empty file is an empty table. Blank lines are skipped.
    """
    p = Path(path)
    if not p.exists() or p.stat().st_size == 0:
        return [], []
    with p.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        header = list(reader.fieldnames or [])
        check_header(path, header, required)
        rows = [row for row in reader if any((v or "").strip() for v in row.values() if isinstance(v, str))]
    return header, rows


def write_table(path: str, fieldnames: Sequence[str], rows: Iterable[Dict[str, str]]) -> None:
    """Replace the table at ``path`` atomically.

    Rows are written to a temp file in the same directory, flushed and fsynced,
    then moved over the target with os.replace. A failure mid-write leaves the
    previous table untouched.
    """
    target = Path(path)
    directory = target.parent if str(target.parent) else Path(".")
    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(directory))
    tmp: Optional[str] = tmp_path
    try:
        with os.fdopen(fd, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=list(fieldnames), quoting=csv.QUOTE_ALL, extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target)
        tmp = None
    finally:
        if tmp is not None and os.path.exists(tmp):
            os.remove(tmp)
