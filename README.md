# oledgfx

Drawing and control for SSD1306 monochrome OLED displays (for example
128x64 and 128x32 panels).

The package keeps a page-organised framebuffer in memory (one byte holds
eight vertical pixels), tracks the rectangle of columns and pages that has
changed, and sends only that region to the panel. On top of the framebuffer
it draws lines, rectangles, circles, triangles, rounded rectangles, arcs,
polylines, MSB-first and XBM bitmaps, and text in GFX-format bitmap fonts
with scaling, wrapping and centring. Controller commands for initialisation,
scrolling, contrast, inversion, orientation, start line and power are built
as byte sequences and sent through a small bus interface.

## Install

```
pip install oledgfx
```

No third-party libraries are needed.

## Modules

- `oledgfx.framebuffer`: `Color` (`BLACK`, `WHITE`, `INVERT`),
  `DirtyRegion` and `FrameBuffer`. The framebuffer offers `get_pixel`,
  `draw_pixel`, `draw_fast_vline`, `draw_fast_hline`, `draw_line`,
  `draw_rect`, `fill_rect`, `fill`, `clear`, `shift` (move the image by
  `dx`, `dy`, with or without wrap-around) and `window_data` (the bytes of
  the changed region, page by page). Off-screen drawing is clipped.
- `oledgfx.shapes`: functions that take a framebuffer as their first
  argument: `draw_circle`, `fill_circle`, `draw_triangle`, `fill_triangle`,
  `draw_round_rect`, `fill_round_rect`, `draw_arc` (one pixel per degree,
  0 degrees pointing right), `draw_polyline` (a sequence of `(x, y)`
  points), `draw_bitmap` (MSB-first; clear bits are left untouched unless a
  different `bg_color` is given) and `draw_xbitmap` (LSB-first, transparent
  background).
- `oledgfx.fonts`: `Glyph` and `GFXFont`, a font as a packed bitmap, a glyph
  table, a character-code range and a line height. `GFXFont.glyph_for`
  returns the glyph for a character or code, or `None`.
- `oledgfx.text`: `TextRenderer`, cursor-based text output onto a
  framebuffer: `set_font`, `set_cursor`, `set_text_size`,
  `set_text_size_custom`, `set_text_color` (transparent background),
  `set_text_color_bg`, `set_text_wrap`, `write`, `print`, `draw_char`,
  `get_text_bounds` (returns `(x1, y1, w, h)`), `print_centered_h`,
  `print_screen_center` and `print_h`. The cursor's y is the text baseline;
  writing the first character at the origin moves the cursor down so the
  top of the glyph is not clipped.
- `oledgfx.commands`: the `Command` opcodes and builders `init_sequence`,
  `window_sequence`, `scroll_sequence`, `diagonal_scroll_sequence`,
  `orientation_sequence` and `start_line_command`. Out-of-range pages,
  speeds, offsets and lines raise `ValueError`.
- `oledgfx.transport`: the `Bus` protocol (any object with
  `write(address, data)` that raises `OSError` on failure), `RecordingBus`,
  an in-memory bus that records writes and can simulate failures, and
  `Transport`, which prefixes command and data streams with their control
  byte, retries failed command writes (three attempts by default) and raises
  `TransportError` when they keep failing.
- `oledgfx.display`: `DisplayConfig` (width, height and 7-bit address;
  defaults 128x64 at `0x3C`) and `Display`. Creating a `Display` sends the
  initialisation sequence and a cleared screen. Draw on `display.canvas`
  and `display.text`, then call `update_screen` to send the changed region.
  `Display` also has `invert_display`, `set_contrast`, `stop_scroll`,
  `start_scroll_right`, `start_scroll_left`,
  `start_scroll_diag_right_down`, `start_scroll_diag_left_up`,
  `display_on`, `display_off`, `set_orientation`, `set_display_start_line`
  and `close`, and can be used as a context manager; after closing, further
  operations raise `RuntimeError`.

## Example

```python
from oledgfx.display import Display, DisplayConfig
from oledgfx.fonts import GFXFont, Glyph
from oledgfx.framebuffer import Color
from oledgfx.shapes import draw_circle
from oledgfx.transport import RecordingBus

# A one-glyph font holding only "!".
font = GFXFont(
    bitmap=bytes([0xE8]),
    glyphs=(Glyph(bitmap_offset=0, width=1, height=5, x_advance=2, x_offset=0, y_offset=-5),),
    first=ord("!"),
    last=ord("!"),
    y_advance=7,
)

bus = RecordingBus()
with Display(bus, DisplayConfig(width=128, height=64), font=font) as display:
    display.canvas.draw_rect(0, 0, 128, 64, Color.WHITE)
    draw_circle(display.canvas, 64, 32, 20, Color.WHITE)
    display.text.print_screen_center("!!!")
    display.update_screen()

print(len(bus.writes))
```

## What it does not do

- It ships no fonts: text is drawn only after a `GFXFont` has been given to
  the `Display` or `TextRenderer`; without one, `write` and `print` draw
  nothing and return 0.
- It includes no driver for a physical I2C adapter. To drive a real panel,
  pass an object with a `write(address, data)` method that talks to your
  bus. `close` only marks the `Display` closed; it does not close the bus.
- There is no command-line program.

## Tests

```
pip install "oledgfx[test]"
pytest
```