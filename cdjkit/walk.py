# cdjkit/walk.py

from __future__ import annotations
import os
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .errors import InvalidInputError
from .header import check_file
from .model import FileCheckResult

WAV_SUFFIX = ".wav"


def ensure_scan_root(root: Path) -> Path:
    """Validate the scan root before anything is read.

    Args:
        root (Path): Directory to scan.

    Returns:
        Path: The resolved directory.

    Raises:
        InvalidInputError: If the path is missing, not a directory, or not readable.
    """
    if not root.exists():
        raise InvalidInputError(f"Input not found: {root}")
    if not root.is_dir():
        raise InvalidInputError(f"Input is not a directory: {root}")
    if not os.access(root, os.R_OK | os.X_OK):
        raise InvalidInputError(f"Input is not readable: {root}")
    return root.resolve()


def _warn_unlistable(exc: OSError) -> None:
    print(f"[WARN] Skipping unreadable directory {exc.filename}: {exc.strerror or exc}", file=sys.stderr)


def iter_wav_files(root: Path, onerror: Optional[Callable[[OSError], None]] = None) -> Iterator[Path]:
    """Iterate over `.wav` entries under a directory, recursively.

    Matching is case-insensitive. Directories and their files are visited in
    sorted order, so repeated scans of an unchanged tree list files the same
    way. Any non-directory entry is kept, including dangling symlinks, so the
    caller can record it as unreadable.

    Args:
        root (Path): Directory to scan.
        onerror: Called with the OSError for each directory that cannot be listed.

    Yields:
        Path: Paths to each WAV entry found.
    """
    for dirpath, dirnames, filenames in os.walk(root, onerror=onerror):
        dirnames.sort()
        for name in sorted(filenames):
            if name.lower().endswith(WAV_SUFFIX):
                yield Path(dirpath) / name


def scan(root: Path) -> List[FileCheckResult]:
    """Check every WAV file under `root` and return results in traversal order.

    Subdirectories that cannot be listed are reported on stderr.
    """
    root = ensure_scan_root(root)
    return [check_file(fp) for fp in iter_wav_files(root, onerror=_warn_unlistable)]
