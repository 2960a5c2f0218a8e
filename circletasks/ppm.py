"""Binary PPM (P6) output for iteration counts and RGBA images."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .image import Image, clamp


def _header(width: int, height: int) -> bytes:
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def iteration_ppm_bytes(data: Sequence[int], width: int, height: int,
                        max_iterations: int) -> bytes:
    """Encode per-pixel iteration counts as a grey P6 image.

    Counts are clamped to ``max_iterations``, scaled by 1/256 and raised
    to the power 0.5 to brighten low counts.
    """
    count = width * height
    if len(data) < count:
        raise ValueError(f"need {count} values, got {len(data)}")
    out = bytearray(_header(width, height))
    limit = float(max_iterations)
    for value in data[:count]:
        mapped = math.sqrt(max(0.0, min(limit, float(value))) / 256.0)
        level = int(255.0 * mapped) & 0xFF
        out += bytes((level, level, level))
    return bytes(out)


def write_iteration_ppm(data: Sequence[int], width: int, height: int,
                        filename: str, max_iterations: int) -> None:
    """Write iteration counts to ``filename`` as a grey P6 image."""
    payload = iteration_ppm_bytes(data, width, height, max_iterations)
    with open(filename, "wb") as fp:
        fp.write(payload)
    print(f"Wrote image file {filename}")


def image_ppm_bytes(image: Image) -> bytes:
    """Encode an RGBA float image as P6, top row first, alpha dropped."""
    out = bytearray(_header(image.width, image.height))
    data = image.data
    for y in reversed(range(image.height)):
        row = 4 * y * image.width
        for offset in range(row, row + 4 * image.width, 4):
            out += bytes(
                int(255.0 * clamp(channel, 0.0, 1.0))
                for channel in data[offset:offset + 3]
            )
    return bytes(out)


def write_ppm_image(image: Image, filename: str) -> None:
    """Write an RGBA float image to ``filename`` as P6."""
    payload = image_ppm_bytes(image)
    with open(filename, "wb") as fp:
        fp.write(payload)
    print(f"Wrote image file {filename}")