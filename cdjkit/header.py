# cdjkit/header.py

from __future__ import annotations
from pathlib import Path
import struct

from .model import FileCheckResult, Outcome, WavHeader

HEADER_SIZE = 44

# --- canonical layout -----------------------------------------------------------

# RIFF@0 size@4 WAVE@8 chunk@12 size@16 tag@20 ch@22 rate@24 bps@28
# align@32 bits@34 data@36 size@40
_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")

OFFSET_CONTAINER_ID = 0
OFFSET_FORM_ID = 8

SUPPORTED_BIT_DEPTHS = (16, 24)
FORMAT_TAG_EXTENSIBLE_LOW = 0xFE


def parse_header(head: bytes) -> WavHeader:
    """Unpack a 44-byte header into named fields.

    Raises:
        ValueError: If fewer than 44 bytes are supplied.
    """
    if len(head) < HEADER_SIZE:
        raise ValueError(f"need {HEADER_SIZE} header bytes, got {len(head)}")
    return WavHeader(*_LAYOUT.unpack_from(head, 0))


# --- checks ---------------------------------------------------------------------


def _classify_short(head: bytes) -> Outcome:
    """Outcome for a read shorter than the canonical header."""
    if len(head) >= 4 and head[OFFSET_CONTAINER_ID:OFFSET_CONTAINER_ID + 4] != b"RIFF":
        return Outcome.INVALID_CONTAINER
    if len(head) >= 12 and head[OFFSET_FORM_ID:OFFSET_FORM_ID + 4] != b"WAVE":
        return Outcome.INVALID_CONTAINER
    return Outcome.TRUNCATED


def _bit_depth_supported(hdr: WavHeader) -> bool:
    # low byte of the 16-bit field; only valid without JUNK padding
    return (hdr.bits_per_sample & 0xFF) in SUPPORTED_BIT_DEPTHS


def _is_extensible(hdr: WavHeader) -> bool:
    return (hdr.format_tag & 0xFF) == FORMAT_TAG_EXTENSIBLE_LOW


# --- public API -----------------------------------------------------------------


def classify(head: bytes) -> Outcome:
    """Classify the first bytes of a WAV file.

    Checks run in a fixed priority order and the first match wins, so a
    padded file with an odd bit depth reports only JunkPadding. Container
    markers are checked against whatever was read; any other short read is
    Truncated.
    """
    if len(head) < HEADER_SIZE:
        return _classify_short(head)

    hdr = parse_header(head)
    if hdr.container_id != b"RIFF" or hdr.form_id != b"WAVE":
        return Outcome.INVALID_CONTAINER
    if hdr.chunk_id == b"JUNK":
        return Outcome.JUNK_PADDING
    if not _bit_depth_supported(hdr):
        return Outcome.UNSUPPORTED_BIT_DEPTH
    if _is_extensible(hdr):
        return Outcome.UNSUPPORTED_FORMAT_EXTENSIBLE

    return Outcome.OK


def read_head(path: Path, size: int = HEADER_SIZE) -> bytes:
    """Read at most `size` bytes from the start of a file."""
    with path.open("rb") as f:
        return f.read(size)


def check_file(path: Path) -> FileCheckResult:
    """Read and classify one file, recording I/O failures as Unreadable."""
    try:
        head = read_head(path)
    except OSError as exc:
        return FileCheckResult.from_path(path, Outcome.UNREADABLE, f"{type(exc).__name__}: {exc}")
    return FileCheckResult.from_path(path, classify(head))
