# cdjkit/report.py

from __future__ import annotations
import csv
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from .model import FileCheckResult, Outcome

COLUMNS = ("result", "file_name", "full_path")


def filter_results(results: Iterable[FileCheckResult], only_invalid: bool) -> List[FileCheckResult]:
    """Return the results to display, dropping Ok rows when `only_invalid` is set."""
    if not only_invalid:
        return list(results)
    return [r for r in results if not r.is_ok]


def summarize(results: Iterable[FileCheckResult]) -> Dict[str, int]:
    """Count results per outcome, listing every outcome even when zero."""
    counts = Counter(r.result for r in results)
    return {str(o): counts.get(o, 0) for o in Outcome}


def _cells(r: FileCheckResult) -> List[str]:
    return [str(r.result), r.file_name, r.full_path]


def format_table(rows: Sequence[FileCheckResult]) -> str:
    """Render rows as left-aligned columns under a header line."""
    body = [_cells(r) for r in rows]
    widths = [len(c) for c in COLUMNS]
    for cells in body:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]

    def line(cells: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    out = [line(COLUMNS), line(["-" * w for w in widths])]
    out.extend(line(cells) for cells in body)
    return "\n".join(out)


def format_list(rows: Sequence[FileCheckResult]) -> str:
    """Render one `result | file_name | full_path` line per row."""
    return "\n".join(" | ".join(_cells(r)) for r in rows)


def write_csv(out_path: Path, rows: Iterable[FileCheckResult]) -> None:
    """Write scan results to a CSV file.

    Args:
        out_path (Path): Destination CSV file path.
        rows (Iterable[FileCheckResult]): Sequence of scan results.

    Returns:
        None
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([*COLUMNS, "error"])
        for r in rows:
            writer.writerow([*_cells(r), r.error])
