"""Off-screen pixel images."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_ROW_PAD = 32
_BYTES_PER_PIXEL = 4


class ImageType(enum.IntEnum):
    """How an image's pixels are stored."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


@dataclass
class Image:
    """A 32-bit pixel buffer laid out in rows of ``size_line`` bytes."""

    width: int
    height: int
    data: bytearray
    bpp: int = 32
    size_line: int = 0
    endian: int = 0
    kind: ImageType = ImageType.XIMAGE

    @classmethod
    def new(cls, width: int, height: int) -> "Image":
        """Create a zero-filled image of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        data = bytearray((width + _ROW_PAD) * height * _BYTES_PER_PIXEL)
        return cls(
            width=width,
            height=height,
            data=data,
            bpp=_BYTES_PER_PIXEL * 8,
            size_line=width * _BYTES_PER_PIXEL,
        )

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); points outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            offset = y * self.size_line + x * (self.bpp // 8)
            self.data[offset : offset + 4] = (color & 0xFFFFFFFF).to_bytes(
                4, self._byteorder
            )

    def get_pixel(self, pixel: int) -> int:
        """Return the colour at linear index ``pixel``, or -1 when out of range."""
        if not 0 <= pixel < self.width * self.height:
            return -1
        offset = pixel * (self.bpp // 8)
        return _to_int32(
            int.from_bytes(self.data[offset : offset + 4], self._byteorder)
        )

    def set_row_pixel(self, y: int, x: int, color: int) -> None:
        """Write ``color`` into pixel ``x`` of row ``y`` in the image byte order."""
        opp = self.bpp // 8
        offset = y * self.size_line + x * opp
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset : offset + opp] = value.to_bytes(opp, self._byteorder)