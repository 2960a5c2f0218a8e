"""RGBA float image and a clamping helper."""

from __future__ import annotations


def clamp(x, minimum, maximum):
    """Limit ``x`` to the closed range [minimum, maximum]."""
    return max(minimum, min(x, maximum))


class Image:
    """An RGBA image stored as a flat list of floats, four per pixel, row by row."""

    __slots__ = ("width", "height", "data")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.data: list[float] = [0.0] * (4 * width * height)

    def clear(self, r: float, g: float, b: float, a: float) -> None:
        """Set every pixel to the given colour."""
        self.data[:] = [r, g, b, a] * (self.width * self.height)

    def pixel(self, x: int, y: int) -> tuple[float, float, float, float]:
        """Return the (r, g, b, a) values of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = 4 * (y * self.width + x)
        r, g, b, a = self.data[offset:offset + 4]
        return (r, g, b, a)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"