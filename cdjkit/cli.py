# cdjkit/cli.py

"""
Command-line entry points: the WAV header scanner and the milestone date difference.
"""
from __future__ import annotations
import argparse
import importlib.util
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import effective_config
from .errors import ConfigError, InvalidInputError
from .model import FileCheckResult
from .report import filter_results, format_list, format_table, summarize, write_csv
from .walk import scan

FORMATS = ("table", "list")
DEFAULT_SCAN_CONFIG = "params.json"
DEFAULT_DATES_CONFIG = "milestones.json"
REQUIRED_DATE_MODULE = "dateutil"


# --- wav scanner ----------------------------------------------------------------


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse scanner CLI arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(
        description="Scan a folder for WAV files whose headers DJ players are likely to reject."
    )
    p.add_argument("--input", "-i", type=str, help="Folder to scan (recursive).")
    p.add_argument("--only-invalid", action="store_true", help="Only list files that failed a check.")
    p.add_argument("--format", choices=FORMATS, help="Output layout (default: table).")
    p.add_argument("--report", type=str, help="Optional path to a CSV report.")
    p.add_argument("--config", type=str, help=f"Optional JSON config (default: ./{DEFAULT_SCAN_CONFIG}; flags override).")
    return p.parse_args(argv)


def _resolve_options(
    args: argparse.Namespace, cfg: Dict[str, Any], config_path: Path
) -> Tuple[Path, bool, str, Optional[Path]]:
    """Merge CLI flags over config values and check required ones."""
    input_str = args.input or cfg.get("input", "")
    if not input_str:
        print(f"[ERR] --input is required (or set 'input' in {config_path.name}).", file=sys.stderr)
        raise SystemExit(2)

    only_invalid = bool(args.only_invalid or cfg.get("only_invalid", False))
    fmt = args.format or cfg.get("format", "table")
    if fmt not in FORMATS:
        print(f"[WARN] Unknown format {fmt!r} in {config_path.name}, using 'table'.", file=sys.stderr)
        fmt = "table"
    report = args.report or cfg.get("report")
    return Path(input_str), only_invalid, fmt, Path(report) if report else None


def _print_summary(results: List[FileCheckResult], shown: int) -> None:
    """Print summary information to stdout."""
    counts = summarize(results)
    invalid = len(results) - counts["Ok"]
    print(f"[INFO] Done. Total: {len(results)} | Invalid: {invalid} | Shown: {shown}")
    details = ", ".join(f"{name}: {n}" for name, n in counts.items() if n and name != "Ok")
    if details:
        print(f"[INFO] {details}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scan a folder and print one row per WAV file.

    Returns:
        int: Exit code.
    """
    args = parse_args(argv)
    cfg, config_path = effective_config(args.config, Path.cwd() / DEFAULT_SCAN_CONFIG)
    input_path, only_invalid, fmt, report_path = _resolve_options(args, cfg, config_path)

    print(f"[INFO] Scanning: {input_path}")
    try:
        results = scan(input_path)
    except InvalidInputError as exc:
        print(f"[ERR] {exc}", file=sys.stderr)
        return 2

    rows = filter_results(results, only_invalid)
    if rows:
        print(format_table(rows) if fmt == "table" else format_list(rows))

    if report_path:
        try:
            write_csv(report_path, rows)
        except OSError as exc:
            print(f"[ERR] Cannot write report {report_path}: {exc}", file=sys.stderr)
            return 2
        print(f"[INFO] Report: {report_path.resolve()}")

    _print_summary(results, len(rows))
    return 0


# --- milestone date difference --------------------------------------------------


def require_calendar_library() -> None:
    """Abort early when the calendar arithmetic library is missing."""
    if importlib.util.find_spec(REQUIRED_DATE_MODULE) is None:
        print(
            f"[ERR] '{REQUIRED_DATE_MODULE}' is not installed; run: pip install python-dateutil",
            file=sys.stderr,
        )
        raise SystemExit(1)


def parse_datediff_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse date-difference CLI arguments.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    p = argparse.ArgumentParser(description="Years, months and days since each milestone.")
    p.add_argument("--tz", type=str, help="IANA time zone used for 'today'.")
    p.add_argument("--today", type=str, help="Pin today's date (YYYY-MM-DD).")
    p.add_argument("--config", type=str, help=f"Optional JSON config (default: ./{DEFAULT_DATES_CONFIG}).")
    return p.parse_args(argv)


def datediff_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one years/months/days line per milestone.

    Returns:
        int: Exit code.
    """
    args = parse_datediff_args(argv)
    require_calendar_library()

    from . import dates

    cfg, _ = effective_config(args.config, Path.cwd() / DEFAULT_DATES_CONFIG)
    try:
        milestones = dates.parse_milestones(cfg["milestones"]) if "milestones" in cfg else dates.DEFAULT_MILESTONES
        if args.today:
            today = dates.parse_date(args.today)
        else:
            today = dates.today_in(args.tz or cfg.get("timezone", dates.DEFAULT_TIMEZONE))
    except ConfigError as exc:
        print(f"[ERR] {exc}", file=sys.stderr)
        return 2

    for line in dates.milestone_lines(milestones, today):
        print(line)
    return 0
