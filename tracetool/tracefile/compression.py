# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Compression utilities for trace files.

Trace JSON files may be stored plain or Zstd-compressed. Compression is
detected from the Zstd frame magic number, so a compressed file is read
correctly whatever its extension.
"""

import io
from pathlib import Path
from typing import Union

import zstandard as zstd

# Zstd magic number (little-endian): 0xFD2FB528
ZSTD_MAGIC = b"\x28\xb5\x2f\xfd"

ZSTD_SUFFIX = ".zst"


def is_zstd(data: bytes) -> bool:
    return data[: len(ZSTD_MAGIC)] == ZSTD_MAGIC


def detect_compression(filepath: Union[str, Path]) -> str:
    """
    Detect compression format of a file from its leading bytes.

    Returns:
        Compression type: "zstd" or "none"

    Raises:
        FileNotFoundError: If file does not exist
    """
    with open(filepath, "rb") as f:
        head = f.read(len(ZSTD_MAGIC))
    return "zstd" if is_zstd(head) else "none"


def read_trace_bytes(filepath: Union[str, Path]) -> bytes:
    """
    Read the raw contents of a trace file, decompressing Zstd data.

    Decoding is left to the parser so that invalid UTF-8 surfaces as a
    parse error rather than an I/O error.

    Raises:
        FileNotFoundError: If file does not exist
        zstd.ZstdError: If the file starts with a Zstd frame that cannot
            be decompressed
    """
    data = Path(filepath).read_bytes()
    if not is_zstd(data):
        return data

    # Traces written by concatenating compressors hold several frames
    dctx = zstd.ZstdDecompressor()
    with dctx.stream_reader(io.BytesIO(data), read_across_frames=True) as reader:
        return reader.read()


def should_compress(filepath: Union[str, Path]) -> bool:
    """Whether an output path asks for Zstd compression by its suffix."""
    return Path(filepath).suffix.lower() == ZSTD_SUFFIX


def write_trace_file(
    filepath: Union[str, Path], content: str, compress: bool = False
) -> int:
    """
    Write text to a trace file, optionally Zstd-compressed.

    Parent directories are created as needed.

    Args:
        filepath: Destination path
        content: Text to write
        compress: Compress with Zstd

    Returns:
        Number of bytes written to disk
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    data = content.encode("utf-8")
    if compress:
        data = zstd.ZstdCompressor().compress(data)

    filepath.write_bytes(data)
    return len(data)
