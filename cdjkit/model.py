# cdjkit/model.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Outcome(str, Enum):
    """Classification of a single WAV header."""
    OK = "Ok"
    INVALID_CONTAINER = "InvalidContainer"
    JUNK_PADDING = "JunkPadding"
    UNSUPPORTED_BIT_DEPTH = "UnsupportedBitDepth"
    UNSUPPORTED_FORMAT_EXTENSIBLE = "UnsupportedFormatExtensible"
    TRUNCATED = "Truncated"
    UNREADABLE = "Unreadable"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WavHeader:
    """Named fields of the canonical 44-byte PCM header (little-endian)."""
    container_id: bytes   # "RIFF" at 0
    riff_size: int
    form_id: bytes        # "WAVE" at 8
    chunk_id: bytes       # "fmt " at 12, "JUNK" when padded
    chunk_size: int
    format_tag: int       # 1 = PCM, 0xFFFE = extensible
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_id: bytes
    data_size: int


@dataclass(frozen=True)
class FileCheckResult:
    """Represents the outcome of checking one file."""
    full_path: str
    file_name: str
    result: Outcome
    error: str = ""   # only set for Unreadable

    @classmethod
    def from_path(cls, path: Path, result: Outcome, error: str = "") -> FileCheckResult:
        # resolve the parent only; a symlinked file keeps its own name
        full = path.parent.resolve() / path.name
        return cls(full_path=str(full), file_name=full.name, result=result, error=error)

    @property
    def is_ok(self) -> bool:
        return self.result is Outcome.OK
