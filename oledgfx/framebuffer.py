"""Page-organised monochrome framebuffer with dirty-region tracking."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["Color", "DirtyRegion", "FrameBuffer"]


class Color(enum.IntEnum):
    """Pixel colour for drawing operations."""

    BLACK = 0
    WHITE = 1
    INVERT = 2


@dataclass
class DirtyRegion:
    """Bounding box, in columns and pages, of what changed since the last update."""

    width: int
    height: int
    needs_update: bool = field(default=False, init=False)
    min_col: int = field(default=0, init=False)
    max_col: int = field(default=0, init=False)
    min_page: int = field(default=0, init=False)
    max_page: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Forget all changes; the bounds are inverted so any mark sets them."""
        self.needs_update = False
        self.min_col = self.width
        self.max_col = 0
        self.min_page = self.height // 8
        self.max_page = 0

    def mark(self, x: int, y: int, w: int, h: int) -> None:
        """Grow the region to cover the on-screen part of the given rectangle."""
        if x >= self.width or y >= self.height or x + w <= 0 or y + h <= 0:
            return
        x1 = max(x, 0)
        y1 = max(y, 0)
        x2 = min(x + w - 1, self.width - 1)
        y2 = min(y + h - 1, self.height - 1)
        self.min_col = min(self.min_col, x1)
        self.max_col = max(self.max_col, x2)
        self.min_page = min(self.min_page, y1 >> 3)
        self.max_page = max(self.max_page, y2 >> 3)
        self.needs_update = True


class FrameBuffer:
    """A width x height bitmap stored as pages of 8 vertical pixels per byte."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen dimensions must be positive")
        if height % 8:
            raise ValueError("screen height must be a multiple of 8")
        self.width = width
        self.height = height
        self.buffer = bytearray(width * height // 8)
        self.dirty = DirtyRegion(width, height)

    def _apply(self, index: int, mask: int, color: Color) -> None:
        if color == Color.WHITE:
            self.buffer[index] |= mask
        elif color == Color.BLACK:
            self.buffer[index] &= ~mask & 0xFF
        elif color == Color.INVERT:
            self.buffer[index] ^= mask

    def _on_screen(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether the pixel is lit; off-screen pixels read as unlit."""
        if not self._on_screen(x, y):
            return False
        return bool(self.buffer[x + (y >> 3) * self.width] >> (y & 7) & 1)

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        """Set, clear or toggle one pixel; off-screen pixels are ignored."""
        if not self._on_screen(x, y):
            return
        self._apply(x + (y >> 3) * self.width, 1 << (y & 7), color)
        self.dirty.mark(x, y, 1, 1)

    def draw_fast_vline(self, x: int, y: int, h: int, color: Color) -> None:
        """Draw a vertical line of height h (negative heights extend upward)."""
        if x < 0 or x >= self.width or h == 0:
            return
        if h < 0:
            y += h
            h = -h
        if y >= self.height:
            return
        y_end = min(y + h, self.height)
        y = max(y, 0)
        self.dirty.mark(x, y, 1, y_end - y)
        for row in range(y, y_end):
            self._apply(x + (row >> 3) * self.width, 1 << (row & 7), color)

    def draw_fast_hline(self, x: int, y: int, w: int, color: Color) -> None:
        """Draw a horizontal line of width w (negative widths extend leftward)."""
        if y < 0 or y >= self.height or w == 0:
            return
        if w < 0:
            x += w
            w = -w
        if x >= self.width:
            return
        x_end = min(x + w, self.width)
        x = max(x, 0)
        self.dirty.mark(x, y, x_end - x, 1)
        base = (y >> 3) * self.width
        mask = 1 << (y & 7)
        for col in range(x, x_end):
            self._apply(base + col, mask, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        if x0 == x1:
            self.draw_fast_vline(x0, y0, y1 - y0 + 1, color)
            return
        if y0 == y1:
            self.draw_fast_hline(x0, y0, x1 - x0 + 1, color)
            return
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx >> 1
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Draw the outline of a rectangle."""
        self.draw_fast_hline(x, y, w, color)
        self.draw_fast_hline(x, y + h - 1, w, color)
        self.draw_fast_vline(x, y, h, color)
        self.draw_fast_vline(x + w - 1, y, h, color)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Fill a rectangle."""
        if w <= 0 or h <= 0:
            return
        if x >= self.width or y >= self.height:
            return
        if x + w < 0 or y + h < 0:
            return
        x_end = min(x + w, self.width)
        x = max(x, 0)
        self.dirty.mark(x, y, x_end - x, h)
        for col in range(x, x_end):
            self.draw_fast_vline(col, y, h, color)

    def fill(self, color: Color) -> None:
        """Set every pixel: black clears, any other colour lights all pixels."""
        value = 0x00 if color == Color.BLACK else 0xFF
        self.buffer[:] = bytes([value]) * len(self.buffer)
        self.dirty.mark(0, 0, self.width, self.height)

    def clear(self) -> None:
        """Turn every pixel off."""
        self.fill(Color.BLACK)

    def shift(self, dx: int, dy: int, wrap: bool = False) -> None:
        """Move the whole image by (dx, dy), optionally wrapping around the edges."""
        if dx == 0 and dy == 0:
            return
        width, height = self.width, self.height
        size = len(self.buffer)

        if dy == 0 and not wrap:
            amount = abs(dx)
            if amount < width:
                if dx > 0:
                    self.buffer[dx:] = self.buffer[: size - dx]
                    self.buffer[:dx] = bytes(dx)
                else:
                    self.buffer[: size - amount] = self.buffer[amount:]
                    self.buffer[size - amount :] = bytes(amount)
            else:
                self.buffer[:] = bytes(size)
            self.dirty.mark(0, 0, width, height)
            return

        source = bytes(self.buffer)
        self.buffer[:] = bytes(size)
        for src_y in range(height):
            base = (src_y >> 3) * width
            bit = src_y & 7
            for src_x in range(width):
                if not source[base + src_x] >> bit & 1:
                    continue
                dst_x = src_x + dx
                dst_y = src_y + dy
                if wrap:
                    dst_x %= width
                    dst_y %= height
                if self._on_screen(dst_x, dst_y):
                    self.buffer[dst_x + (dst_y >> 3) * width] |= 1 << (dst_y & 7)
        self.dirty.mark(0, 0, width, height)

    def window_data(self) -> bytes:
        """Bytes of the dirty window, page by page, in the order sent to the panel."""
        region = self.dirty
        if not region.needs_update:
            return b""
        length = region.max_col - region.min_col + 1
        return b"".join(
            bytes(self.buffer[page * self.width + region.min_col :][:length])
            for page in range(region.min_page, region.max_page + 1)
        )