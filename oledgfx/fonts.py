"""Bitmap fonts in the GFX glyph-table format."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Glyph", "GFXFont"]


@dataclass(frozen=True)
class Glyph:
    """Metrics of one character and where its bits start in the font bitmap."""

    bitmap_offset: int
    width: int
    height: int
    x_advance: int
    x_offset: int
    y_offset: int


@dataclass(frozen=True)
class GFXFont:
    """A font: packed row-major bitmap, glyph table, code range and line height."""

    bitmap: bytes
    glyphs: tuple[Glyph, ...]
    first: int
    last: int
    y_advance: int

    def __post_init__(self) -> None:
        if self.last < self.first:
            raise ValueError("last character code precedes the first")
        if len(self.glyphs) != self.last - self.first + 1:
            raise ValueError("glyph table does not match the character range")
        object.__setattr__(self, "bitmap", bytes(self.bitmap))
        object.__setattr__(self, "glyphs", tuple(self.glyphs))

    def glyph_for(self, code: int | str) -> Glyph | None:
        """Return the glyph for a character or code, or None if it is not in the font."""
        if isinstance(code, str):
            if len(code) != 1:
                raise ValueError("expected a single character")
            code = ord(code)
        if self.first <= code <= self.last:
            return self.glyphs[code - self.first]
        return None