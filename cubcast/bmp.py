"""Writing frames as 24-bit uncompressed BMP images."""

from __future__ import annotations

import os
import struct

from cubcast.raycaster import Frame

_HEADER_SIZE = 54
_INFO_SIZE = 40


def _row_padding(width: int) -> int:
    return (4 - (width * 3) % 4) % 4


def encode_bmp(frame: Frame) -> bytes:
    """Return *frame* encoded as a bottom-up 24-bit BMP file."""
    padding = bytes(_row_padding(frame.width))
    size = _HEADER_SIZE + (3 * frame.width + len(padding)) * frame.height
    header = b"BM" + struct.pack("<III", size, 0, _HEADER_SIZE)
    info = struct.pack("<IIIHH", _INFO_SIZE, frame.width, frame.height, 1, 24) + bytes(24)
    body = bytearray()
    for y in reversed(range(frame.height)):
        for color in frame.row(y):
            body += bytes((color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF))
        body += padding
    return header + info + bytes(body)


def save_bmp(path: str | os.PathLike[str], frame: Frame) -> None:
    """Write *frame* to *path* as a BMP file."""
    with open(path, "wb") as stream:
        stream.write(encode_bmp(frame))