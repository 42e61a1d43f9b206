"""Text rendering with GFX-format bitmap fonts onto a framebuffer."""

from __future__ import annotations

from .fonts import GFXFont, Glyph
from .framebuffer import Color, FrameBuffer

__all__ = ["TextRenderer"]


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return char


class TextRenderer:
    """Cursor-based text output onto a framebuffer.

    A background colour equal to the foreground colour means a transparent
    background: only the set bits of each glyph are drawn.
    """

    def __init__(self, canvas: FrameBuffer, font: GFXFont | None = None) -> None:
        self.canvas = canvas
        self.font = font
        self.cursor_x = 0
        self.cursor_y = 0
        self.text_size_x = 1
        self.text_size_y = 1
        self.text_color = Color.WHITE
        self.text_bg_color = Color.BLACK
        self.wrap = True

    def set_text_size(self, size: int) -> None:
        """Scale text by the same factor on both axes."""
        self.set_text_size_custom(size, size)

    def set_text_size_custom(self, size_x: int, size_y: int) -> None:
        """Scale text separately on each axis; factors below 1 become 1."""
        self.text_size_x = size_x if size_x > 0 else 1
        self.text_size_y = size_y if size_y > 0 else 1

    def set_font(self, font: GFXFont | None) -> None:
        """Select the font used for text."""
        self.font = font

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor (y is the baseline)."""
        self.cursor_x = x
        self.cursor_y = y

    def set_text_color(self, color: Color) -> None:
        """Set the text colour with a transparent background."""
        self.set_text_color_bg(color, color)

    def set_text_color_bg(self, color: Color, bg_color: Color) -> None:
        """Set the text and background colours."""
        self.text_color = color
        self.text_bg_color = bg_color

    def set_text_wrap(self, wrap: bool) -> None:
        """Enable or disable wrapping at the right screen edge."""
        self.wrap = wrap

    def _newline(self, font: GFXFont) -> None:
        self.cursor_x = 0
        self.cursor_y += self.text_size_y * font.y_advance

    def write(self, char: str | int) -> int:
        """Draw one character at the cursor and advance it; return 1, or 0 without a font."""
        font = self.font
        if font is None:
            return 0
        code = _code(char)
        if code == ord("\n"):
            self._newline(font)
            return 1
        if code == ord("\r"):
            return 1
        glyph = font.glyph_for(code)
        if glyph is None:
            return 1
        # Keep the first line from being clipped when starting at the origin.
        if self.cursor_x == 0 and self.cursor_y == 0 and glyph.y_offset < 0:
            self.cursor_y = -glyph.y_offset + 1
        if self.wrap and (
            self.cursor_x + self.text_size_x * (glyph.x_offset + glyph.width)
            > self.canvas.width
        ):
            self._newline(font)
        self.draw_char(
            self.cursor_x,
            self.cursor_y,
            code,
            self.text_color,
            self.text_bg_color,
            self.text_size_x,
            self.text_size_y,
        )
        self.cursor_x += glyph.x_advance * self.text_size_x
        return 1

    def print(self, text: str) -> int:
        """Write each character of text; return how many were written."""
        written = 0
        for char in text:
            if not self.write(char):
                break
            written += 1
        return written

    def draw_char(
        self,
        x: int,
        y: int,
        char: str | int,
        color: Color,
        bg_color: Color,
        size_x: int,
        size_y: int,
    ) -> None:
        """Draw one glyph with its origin (baseline) at (x, y), scaled by the size factors."""
        font = self.font
        if font is None:
            return
        glyph = font.glyph_for(_code(char))
        if glyph is None or glyph.width == 0 or glyph.height == 0:
            return
        canvas = self.canvas
        draw_background = color != bg_color
        xo, yo = glyph.x_offset, glyph.y_offset
        canvas.dirty.mark(
            x + xo * size_x, y + yo * size_y, glyph.width * size_x, glyph.height * size_y
        )
        scaled = not (size_x == 1 and size_y == 1)
        for bit_index, (yy, xx) in enumerate(
            (yy, xx) for yy in range(glyph.height) for xx in range(glyph.width)
        ):
            byte = font.bitmap[glyph.bitmap_offset + (bit_index >> 3)]
            if byte & (0x80 >> (bit_index & 7)):
                pixel_color = color
            elif draw_background:
                pixel_color = bg_color
            else:
                continue
            if scaled:
                canvas.fill_rect(
                    x + (xo + xx) * size_x,
                    y + (yo + yy) * size_y,
                    size_x,
                    size_y,
                    pixel_color,
                )
            else:
                canvas.draw_pixel(x + xo + xx, y + yo + yy, pixel_color)

    def _char_bounds(
        self, font: GFXFont, code: int, x: int, y: int, box: list[int]
    ) -> tuple[int, int]:
        if code == ord("\n"):
            return 0, y + self.text_size_y * font.y_advance
        if code == ord("\r"):
            return x, y
        glyph: Glyph | None = font.glyph_for(code)
        if glyph is None:
            return x, y
        sx, sy = self.text_size_x, self.text_size_y
        if self.wrap and x + (glyph.x_offset + glyph.width) * sx > self.canvas.width:
            x = 0
            y += sy * font.y_advance
        x1 = x + glyph.x_offset * sx
        y1 = y + glyph.y_offset * sy
        x2 = x1 + glyph.width * sx - 1
        y2 = y1 + glyph.height * sy - 1
        box[0] = min(box[0], x1)
        box[1] = min(box[1], y1)
        box[2] = max(box[2], x2)
        box[3] = max(box[3], y2)
        return x + glyph.x_advance * sx, y

    def get_text_bounds(self, text: str, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (x1, y1, w, h), the box text would cover if printed from (x, y)."""
        x1, y1, w, h = x, y, 0, 0
        font = self.font
        if font is None:
            return x1, y1, w, h
        box = [self.canvas.width, self.canvas.height, -1, -1]
        cx, cy = x, y
        for char in text:
            cx, cy = self._char_bounds(font, ord(char), cx, cy, box)
        min_x, min_y, max_x, max_y = box
        if max_x >= min_x:
            x1 = min_x
            w = max_x - min_x + 1
        if max_y >= min_y:
            y1 = min_y
            h = max_y - min_y + 1
        return x1, y1, w, h

    def print_centered_h(self, text: str, y: int) -> None:
        """Print text centred horizontally with its baseline at y."""
        _, _, w, _ = self.get_text_bounds(text, 0, 0)
        self.set_cursor(_tdiv(self.canvas.width - w, 2), y)
        self.print(text)

    def print_screen_center(self, text: str) -> None:
        """Print text centred horizontally and vertically on the screen."""
        _, _, w, h = self.get_text_bounds(text, 0, 0)
        x = _tdiv(self.canvas.width - w, 2)
        y = _tdiv(self.canvas.height + h, 2)
        self.set_cursor(x, y)
        self.print(text)

    def print_h(self, text: str, y: int) -> None:
        """Print text left-aligned with its baseline at y."""
        self.set_cursor(0, y)
        self.print(text)