"""Framebuffer drawing, GFX-font text, SSD1306 command sequences and bus framing for OLED displays."""

__version__ = "1.0.0"