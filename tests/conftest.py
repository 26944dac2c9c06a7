"""Shared fixtures for building WAV headers on disk."""

import struct

import pytest


def make_header(
    *,
    container=b"RIFF",
    form=b"WAVE",
    chunk_id=b"fmt ",
    format_tag=1,
    channels=2,
    sample_rate=44100,
    bits=16,
):
    """Build a canonical 44-byte PCM header with the given overrides."""
    block_align = channels * max(bits, 8) // 8
    return struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        container,
        36,
        form,
        chunk_id,
        16,
        format_tag,
        channels,
        sample_rate,
        sample_rate * block_align,
        block_align,
        bits,
        b"data",
        0,
    )


@pytest.fixture
def write_wav(tmp_path):
    """Write raw bytes to a file under tmp_path and return its path."""

    def _write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def scenario_dir(tmp_path):
    """Directory holding one file per header outcome, a..e."""
    root = tmp_path / "crate"
    root.mkdir()
    (root / "a.wav").write_bytes(make_header(bits=16))
    (root / "b.wav").write_bytes(make_header(container=b"RIFX"))
    (root / "c.wav").write_bytes(make_header(chunk_id=b"JUNK"))
    (root / "d.wav").write_bytes(make_header(bits=32))
    (root / "e.wav").write_bytes(make_header(bits=16, format_tag=0xFFFE))
    return root
