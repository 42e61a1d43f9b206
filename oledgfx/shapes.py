"""Shape, bitmap and polyline drawing on top of a framebuffer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import pairwise

from .framebuffer import Color, FrameBuffer

__all__ = [
    "draw_circle",
    "fill_circle",
    "draw_triangle",
    "fill_triangle",
    "draw_round_rect",
    "fill_round_rect",
    "draw_arc",
    "draw_polyline",
    "draw_bitmap",
    "draw_xbitmap",
]


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _circle_points(r: int):
    """Yield the (x, y) offsets of the midpoint circle walk for one octant."""
    f = 1 - r
    ddf_x = 1
    ddf_y = -2 * r
    x = 0
    y = r
    while x < y:
        if f >= 0:
            y -= 1
            ddf_y += 2
            f += ddf_y
        x += 1
        ddf_x += 2
        f += ddf_x
        yield x, y


def _draw_circle_helper(
    canvas: FrameBuffer, x0: int, y0: int, r: int, corners: int, color: Color
) -> None:
    for x, y in _circle_points(r):
        if corners & 0x4:
            canvas.draw_pixel(x0 + x, y0 + y, color)
            canvas.draw_pixel(x0 + y, y0 + x, color)
        if corners & 0x2:
            canvas.draw_pixel(x0 + x, y0 - y, color)
            canvas.draw_pixel(x0 + y, y0 - x, color)
        if corners & 0x8:
            canvas.draw_pixel(x0 - y, y0 + x, color)
            canvas.draw_pixel(x0 - x, y0 + y, color)
        if corners & 0x1:
            canvas.draw_pixel(x0 - y, y0 - x, color)
            canvas.draw_pixel(x0 - x, y0 - y, color)


def _fill_circle_helper(
    canvas: FrameBuffer,
    x0: int,
    y0: int,
    r: int,
    corners: int,
    delta: int,
    color: Color,
) -> None:
    px, py = 0, r
    delta += 1
    for x, y in _circle_points(r):
        if x < y + 1:
            if corners & 1:
                canvas.draw_fast_vline(x0 + x, y0 - y, 2 * y + delta, color)
            if corners & 2:
                canvas.draw_fast_vline(x0 - x, y0 - y, 2 * y + delta, color)
        if y != py:
            if corners & 1:
                canvas.draw_fast_vline(x0 + py, y0 - px, 2 * px + delta, color)
            if corners & 2:
                canvas.draw_fast_vline(x0 - py, y0 - px, 2 * px + delta, color)
            py = y
        px = x


def draw_circle(canvas: FrameBuffer, x0: int, y0: int, r: int, color: Color) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    canvas.draw_pixel(x0, y0 + r, color)
    canvas.draw_pixel(x0, y0 - r, color)
    canvas.draw_pixel(x0 + r, y0, color)
    canvas.draw_pixel(x0 - r, y0, color)
    for x, y in _circle_points(r):
        canvas.draw_pixel(x0 + x, y0 + y, color)
        canvas.draw_pixel(x0 - x, y0 + y, color)
        canvas.draw_pixel(x0 + x, y0 - y, color)
        canvas.draw_pixel(x0 - x, y0 - y, color)
        canvas.draw_pixel(x0 + y, y0 + x, color)
        canvas.draw_pixel(x0 - y, y0 + x, color)
        canvas.draw_pixel(x0 + y, y0 - x, color)
        canvas.draw_pixel(x0 - y, y0 - x, color)


def fill_circle(canvas: FrameBuffer, x0: int, y0: int, r: int, color: Color) -> None:
    """Draw a filled circle."""
    canvas.draw_fast_vline(x0, y0 - r, 2 * r + 1, color)
    _fill_circle_helper(canvas, x0, y0, r, 3, 0, color)


def draw_triangle(
    canvas: FrameBuffer,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
) -> None:
    """Draw the outline of a triangle."""
    canvas.draw_line(x0, y0, x1, y1, color)
    canvas.draw_line(x1, y1, x2, y2, color)
    canvas.draw_line(x2, y2, x0, y0, color)


def fill_triangle(
    canvas: FrameBuffer,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
) -> None:
    """Fill a triangle with horizontal scanlines; flat (zero-height) triangles draw nothing."""
    (x0, y0), (x1, y1), (x2, y2) = sorted(
        ((x0, y0), (x1, y1), (x2, y2)), key=lambda p: p[1]
    )
    if y0 == y2:
        return

    dx01, dy01 = x1 - x0, y1 - y0
    dx02, dy02 = x2 - x0, y2 - y0
    dx12, dy12 = x2 - x1, y2 - y1
    sa = sb = 0

    last = y1 if y1 == y2 else y1 - 1
    y = y0
    while y <= last:
        a = x0 + _tdiv(sa, dy01)
        b = x0 + _tdiv(sb, dy02)
        sa += dx01
        sb += dx02
        if a > b:
            a, b = b, a
        canvas.draw_fast_hline(a, y, b - a + 1, color)
        y += 1

    sa = dx12 * (y - y1)
    sb = dx02 * (y - y0)
    while y <= y2:
        a = x1 + _tdiv(sa, dy12)
        b = x0 + _tdiv(sb, dy02)
        sa += dx12
        sb += dx02
        if a > b:
            a, b = b, a
        canvas.draw_fast_hline(a, y, b - a + 1, color)
        y += 1


def _clamp_radius(w: int, h: int, r: int) -> int:
    return min(r, _tdiv(min(w, h), 2))


def draw_round_rect(
    canvas: FrameBuffer, x: int, y: int, w: int, h: int, r: int, color: Color
) -> None:
    """Draw a rectangle outline with rounded corners of radius r."""
    r = _clamp_radius(w, h, r)
    canvas.draw_fast_hline(x + r, y, w - 2 * r, color)
    canvas.draw_fast_hline(x + r, y + h - 1, w - 2 * r, color)
    canvas.draw_fast_vline(x, y + r, h - 2 * r, color)
    canvas.draw_fast_vline(x + w - 1, y + r, h - 2 * r, color)
    _draw_circle_helper(canvas, x + r, y + r, r, 1, color)
    _draw_circle_helper(canvas, x + w - r - 1, y + r, r, 2, color)
    _draw_circle_helper(canvas, x + w - r - 1, y + h - r - 1, r, 4, color)
    _draw_circle_helper(canvas, x + r, y + h - r - 1, r, 8, color)


def fill_round_rect(
    canvas: FrameBuffer, x: int, y: int, w: int, h: int, r: int, color: Color
) -> None:
    """Fill a rectangle with rounded corners of radius r."""
    r = _clamp_radius(w, h, r)
    canvas.fill_rect(x + r, y, w - 2 * r, h, color)
    _fill_circle_helper(canvas, x + w - r - 1, y + r, r, 1, h - 2 * r - 1, color)
    _fill_circle_helper(canvas, x + r, y + r, r, 2, h - 2 * r - 1, color)


def draw_arc(
    canvas: FrameBuffer,
    x0: int,
    y0: int,
    r: int,
    start_angle: int,
    end_angle: int,
    color: Color,
) -> None:
    """Draw an arc one pixel per degree; 0 degrees points right, angles grow clockwise on screen."""
    if r <= 0:
        return
    while end_angle < start_angle:
        end_angle += 360
    for angle in range(start_angle, end_angle + 1):
        rad = math.radians(angle)
        canvas.draw_pixel(x0 + int(r * math.cos(rad)), y0 + int(r * math.sin(rad)), color)


def draw_polyline(
    canvas: FrameBuffer, points: Iterable[tuple[int, int]], color: Color
) -> None:
    """Draw line segments joining consecutive (x, y) points; fewer than two points draw nothing."""
    for (xa, ya), (xb, yb) in pairwise(points):
        canvas.draw_line(xa, ya, xb, yb, color)


def _check_bitmap(bitmap: Sequence[int], w: int, h: int) -> int:
    byte_width = (w + 7) // 8
    if w > 0 and h > 0 and len(bitmap) < byte_width * h:
        raise ValueError("bitmap is too short for the given dimensions")
    return byte_width


def draw_bitmap(
    canvas: FrameBuffer,
    x: int,
    y: int,
    bitmap: Sequence[int],
    w: int,
    h: int,
    color: Color,
    bg_color: Color | None = None,
) -> None:
    """Draw an MSB-first monochrome bitmap.

    Set bits take ``color``; clear bits take ``bg_color``, or are left untouched
    when ``bg_color`` is None or equal to ``color``.
    """
    if bg_color is None:
        bg_color = color
    if x >= canvas.width or y >= canvas.height or x + w <= 0 or y + h <= 0:
        return
    byte_width = _check_bitmap(bitmap, w, h)
    draw_background = color != bg_color
    canvas.dirty.mark(x, y, w, h)
    for j in range(max(0, -y), min(h, canvas.height - y)):
        row = j * byte_width
        for i in range(max(0, -x), min(w, canvas.width - x)):
            if bitmap[row + i // 8] & (0x80 >> (i & 7)):
                canvas.draw_pixel(x + i, y + j, color)
            elif draw_background:
                canvas.draw_pixel(x + i, y + j, bg_color)


def draw_xbitmap(
    canvas: FrameBuffer,
    x: int,
    y: int,
    bitmap: Sequence[int],
    w: int,
    h: int,
    color: Color,
) -> None:
    """Draw an XBM (LSB-first) bitmap; clear bits are transparent."""
    byte_width = _check_bitmap(bitmap, w, h)
    for j in range(h):
        row = j * byte_width
        for i in range(w):
            if bitmap[row + i // 8] >> (i & 7) & 1:
                canvas.draw_pixel(x + i, y + j, color)