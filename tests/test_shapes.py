import math

import pytest

from oledgfx.framebuffer import Color, FrameBuffer
from oledgfx.shapes import (
    draw_arc,
    draw_bitmap,
    draw_circle,
    draw_polyline,
    draw_round_rect,
    draw_triangle,
    draw_xbitmap,
    fill_circle,
    fill_round_rect,
    fill_triangle,
)


def lit(fb):
    return {
        (x, y)
        for y in range(fb.height)
        for x in range(fb.width)
        if fb.get_pixel(x, y)
    }


@pytest.fixture
def fb():
    return FrameBuffer(32, 32)


def test_circle_radius_zero_is_single_pixel(fb):
    draw_circle(fb, 10, 10, 0, Color.WHITE)
    assert lit(fb) == {(10, 10)}


def test_circle_is_symmetric_and_on_radius(fb):
    draw_circle(fb, 16, 16, 7, Color.WHITE)
    pixels = lit(fb)
    for p in [(23, 16), (9, 16), (16, 23), (16, 9)]:
        assert p in pixels
    for x, y in pixels:
        assert (32 - x, y) in pixels
        assert (x, 32 - y) in pixels
        assert (y, x) in pixels
        assert abs(math.hypot(x - 16, y - 16) - 7) < 1


def test_circle_marks_dirty_region(fb):
    draw_circle(fb, 16, 16, 7, Color.WHITE)
    assert fb.dirty.needs_update
    assert fb.dirty.min_col == 9
    assert fb.dirty.max_col == 23


def test_fill_circle_contains_center_and_stays_inside(fb):
    fill_circle(fb, 16, 16, 6, Color.WHITE)
    pixels = lit(fb)
    assert (16, 16) in pixels
    assert (16, 10) in pixels and (16, 22) in pixels
    assert (22, 16) in pixels and (10, 16) in pixels
    for x, y in pixels:
        assert math.hypot(x - 16, y - 16) <= 6.5
        assert (32 - x, y) in pixels


def test_fill_circle_black_clears(fb):
    fb.fill(Color.WHITE)
    fill_circle(fb, 16, 16, 4, Color.BLACK)
    assert not fb.get_pixel(16, 16)
    assert fb.get_pixel(0, 0)


def test_draw_triangle_lights_vertices(fb):
    draw_triangle(fb, 2, 3, 20, 5, 10, 25, Color.WHITE)
    pixels = lit(fb)
    assert {(2, 3), (20, 5), (10, 25)} <= pixels


def test_fill_triangle_flat_draws_nothing(fb):
    fill_triangle(fb, 1, 5, 10, 5, 20, 5, Color.WHITE)
    assert lit(fb) == set()
    assert not fb.dirty.needs_update


def test_fill_triangle_vertices_and_interior(fb):
    fill_triangle(fb, 0, 0, 7, 0, 0, 7, Color.WHITE)
    pixels = lit(fb)
    assert {(0, 0), (7, 0), (0, 7), (1, 1)} <= pixels
    assert (7, 7) not in pixels
    for x, y in pixels:
        assert x + y <= 7


def test_fill_triangle_order_independent(fb):
    other = FrameBuffer(32, 32)
    fill_triangle(fb, 3, 2, 25, 10, 8, 28, Color.WHITE)
    fill_triangle(other, 8, 28, 3, 2, 25, 10, Color.WHITE)
    assert fb.buffer == other.buffer


def test_fill_triangle_covers_outline_vertices(fb):
    fill_triangle(fb, 4, 4, 28, 12, 12, 30, Color.WHITE)
    pixels = lit(fb)
    assert {(4, 4), (28, 12), (12, 30)} <= pixels


def test_round_rect_zero_radius_matches_rect(fb):
    other = FrameBuffer(32, 32)
    draw_round_rect(fb, 2, 3, 12, 9, 0, Color.WHITE)
    other.draw_rect(2, 3, 12, 9, Color.WHITE)
    assert fb.buffer == other.buffer


def test_fill_round_rect_zero_radius_matches_fill_rect(fb):
    other = FrameBuffer(32, 32)
    fill_round_rect(fb, 2, 3, 12, 9, 0, Color.WHITE)
    other.fill_rect(2, 3, 12, 9, Color.WHITE)
    assert fb.buffer == other.buffer


def test_round_rect_corners_are_cut(fb):
    draw_round_rect(fb, 2, 2, 20, 16, 4, Color.WHITE)
    pixels = lit(fb)
    assert (2, 2) not in pixels
    assert (21, 17) not in pixels
    assert (12, 2) in pixels
    assert (2, 10) in pixels


def test_fill_round_rect_corners_cut_center_filled(fb):
    fill_round_rect(fb, 2, 2, 20, 16, 4, Color.WHITE)
    pixels = lit(fb)
    assert (2, 2) not in pixels
    assert (21, 2) not in pixels
    assert (12, 10) in pixels
    assert (2, 10) in pixels


def test_round_rect_radius_clamped(fb):
    other = FrameBuffer(32, 32)
    draw_round_rect(fb, 2, 2, 10, 10, 50, Color.WHITE)
    draw_round_rect(other, 2, 2, 10, 10, 5, Color.WHITE)
    assert fb.buffer == other.buffer


def test_arc_single_angles(fb):
    draw_arc(fb, 8, 8, 5, 0, 0, Color.WHITE)
    assert lit(fb) == {(13, 8)}
    fb.clear()
    draw_arc(fb, 8, 8, 5, 90, 90, Color.WHITE)
    assert lit(fb) == {(8, 13)}


def test_arc_wraps_end_angle(fb):
    draw_arc(fb, 16, 16, 5, 350, 10, Color.WHITE)
    assert (21, 16) in lit(fb)


def test_arc_nonpositive_radius_draws_nothing(fb):
    draw_arc(fb, 16, 16, 0, 0, 360, Color.WHITE)
    assert lit(fb) == set()


def test_polyline_matches_lines(fb):
    other = FrameBuffer(32, 32)
    points = [(1, 1), (20, 5), (10, 25)]
    draw_polyline(fb, points, Color.WHITE)
    other.draw_line(1, 1, 20, 5, Color.WHITE)
    other.draw_line(20, 5, 10, 25, Color.WHITE)
    assert fb.buffer == other.buffer
    assert set(points) <= lit(fb)


def test_polyline_single_point_draws_nothing(fb):
    draw_polyline(fb, [(3, 3)], Color.WHITE)
    assert lit(fb) == set()


def test_bitmap_msb_first(fb):
    draw_bitmap(fb, 0, 0, bytes([0b10100000, 0xFF]), 8, 2, Color.WHITE)
    pixels = lit(fb)
    assert pixels == {(0, 0), (2, 0)} | {(i, 1) for i in range(8)}


def test_bitmap_transparent_keeps_background(fb):
    fb.fill(Color.WHITE)
    draw_bitmap(fb, 0, 0, bytes([0x00]), 8, 1, Color.BLACK)
    assert all(fb.get_pixel(i, 0) for i in range(8))


def test_bitmap_with_background_paints_clear_bits(fb):
    fb.fill(Color.WHITE)
    draw_bitmap(fb, 0, 0, bytes([0x80]), 8, 1, Color.WHITE, Color.BLACK)
    assert fb.get_pixel(0, 0)
    assert not any(fb.get_pixel(i, 0) for i in range(1, 8))


def test_bitmap_off_screen_untouched(fb):
    fb.dirty.reset()
    draw_bitmap(fb, 40, 0, bytes([0xFF]), 8, 1, Color.WHITE)
    assert lit(fb) == set()
    assert not fb.dirty.needs_update


def test_bitmap_clipped_at_left_edge(fb):
    draw_bitmap(fb, -4, 0, bytes([0b00001001]), 8, 1, Color.WHITE)
    assert lit(fb) == {(0, 0), (3, 0)}


def test_bitmap_too_short_raises(fb):
    with pytest.raises(ValueError):
        draw_bitmap(fb, 0, 0, bytes([0xFF]), 8, 2, Color.WHITE)


def test_xbitmap_lsb_first(fb):
    draw_xbitmap(fb, 2, 3, bytes([0b00000101]), 8, 1, Color.WHITE)
    assert lit(fb) == {(2, 3), (4, 3)}


def test_xbitmap_too_short_raises(fb):
    with pytest.raises(ValueError):
        draw_xbitmap(fb, 0, 0, b"", 8, 1, Color.WHITE)