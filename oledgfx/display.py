"""SSD1306 display: framebuffer, text renderer and controller commands over a bus."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from .commands import (
    Command,
    diagonal_scroll_sequence,
    init_sequence,
    orientation_sequence,
    scroll_sequence,
    start_line_command,
    window_sequence,
)
from .fonts import GFXFont
from .framebuffer import FrameBuffer
from .text import TextRenderer
from .transport import Bus, Transport

__all__ = ["DisplayConfig", "Display"]

_SCROLL_SETTLE_DELAY = 0.01


@dataclass(frozen=True)
class DisplayConfig:
    """Panel geometry and bus address."""

    width: int = 128
    height: int = 64
    address: int = 0x3C

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("screen dimensions must be positive")
        if self.width > 256 or self.height > 256:
            raise ValueError("screen dimensions must not exceed 256")


class Display:
    """An SSD1306 panel with a local framebuffer and partial screen updates.

    Drawing goes to ``canvas`` (and ``text`` for text); ``update_screen`` sends
    only the region that changed since the previous update.
    """

    def __init__(
        self,
        bus: Bus,
        config: DisplayConfig | None = None,
        font: GFXFont | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config if config is not None else DisplayConfig()
        self.canvas = FrameBuffer(self.config.width, self.config.height)
        self.text = TextRenderer(self.canvas, font)
        self.transport = Transport(bus, self.config.address, sleep=sleep)
        self._sleep = sleep
        self.closed = False

        self.transport.send_commands(init_sequence(self.config.height))
        self.canvas.dirty.reset()
        self.canvas.clear()
        self.update_screen()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("display is closed")

    def _send(self, commands: bytes | list[int]) -> None:
        self._check_open()
        self.transport.send_commands(commands)

    def update_screen(self) -> None:
        """Send the changed part of the framebuffer to the panel."""
        self._check_open()
        region = self.canvas.dirty
        if not region.needs_update:
            return
        self.transport.send_commands(
            window_sequence(
                region.min_col, region.max_col, region.min_page, region.max_page
            )
        )
        try:
            self.transport.send_data(self.canvas.window_data())
        finally:
            region.reset()

    def invert_display(self, invert: bool) -> None:
        """Invert the panel's colours in hardware, or restore normal display."""
        self._send([Command.INVERT_DISPLAY if invert else Command.DISPLAY_NORMAL])

    def set_contrast(self, contrast: int) -> None:
        """Set the panel contrast (0-255)."""
        if not 0 <= contrast <= 0xFF:
            raise ValueError("contrast must be between 0 and 255")
        self._send([Command.SET_CONTRAST, contrast])

    def stop_scroll(self) -> None:
        """Stop any hardware scrolling."""
        self._send([Command.DEACTIVATE_SCROLL])

    def _start_scroll(self, command: int, start_page: int, end_page: int) -> None:
        setup = scroll_sequence(command, start_page, end_page)
        self.stop_scroll()
        self._sleep(_SCROLL_SETTLE_DELAY)
        self._send(setup)
        self._send([Command.ACTIVATE_SCROLL])

    def start_scroll_right(self, start_page: int, end_page: int) -> None:
        """Scroll pages start_page..end_page to the right in hardware."""
        self._start_scroll(Command.RIGHT_HORIZONTAL_SCROLL, start_page, end_page)

    def start_scroll_left(self, start_page: int, end_page: int) -> None:
        """Scroll pages start_page..end_page to the left in hardware."""
        self._start_scroll(Command.LEFT_HORIZONTAL_SCROLL, start_page, end_page)

    def _start_diag_scroll(
        self, command: int, start_page: int, end_page: int, offset: int, speed: int
    ) -> None:
        area, scroll = diagonal_scroll_sequence(
            command, start_page, end_page, offset, speed, self.config.height
        )
        self.stop_scroll()
        self._sleep(_SCROLL_SETTLE_DELAY)
        self._send(area)
        self._send(scroll)
        self._send([Command.ACTIVATE_SCROLL])

    def start_scroll_diag_right_down(
        self, start_page: int, end_page: int, offset: int, speed: int
    ) -> None:
        """Scroll right and down by offset lines per step (speed 0-7, 0 fastest)."""
        self._start_diag_scroll(
            Command.VERTICAL_AND_RIGHT_HORIZONTAL_SCROLL,
            start_page,
            end_page,
            offset,
            speed,
        )

    def start_scroll_diag_left_up(
        self, start_page: int, end_page: int, offset: int, speed: int
    ) -> None:
        """Scroll left and up by offset lines per step (speed 0-7, 0 fastest)."""
        true_offset = (self.config.height - offset) & 0xFF
        self._start_diag_scroll(
            Command.VERTICAL_AND_LEFT_HORIZONTAL_SCROLL,
            start_page,
            end_page,
            true_offset,
            speed,
        )

    def display_on(self) -> None:
        """Wake the panel."""
        self._send([Command.DISPLAY_ON])

    def display_off(self) -> None:
        """Put the panel to sleep; its RAM is kept."""
        self._send([Command.DISPLAY_OFF])

    def set_orientation(self, rotation: int) -> None:
        """Flip the hardware scan: 0 normal, 1 horizontal, 2 vertical, 3 both.

        Moves the text cursor to match, then clears the screen.
        """
        seg, com = orientation_sequence(rotation)
        self._send([seg])
        self._send([com])
        text = self.text
        if rotation == 0:
            text.cursor_x = 0
            text.cursor_y = 0
        elif rotation == 1:
            text.cursor_x = self.config.width - 1 - text.cursor_x
        elif rotation == 2:
            text.cursor_y = self.config.height - 1 - text.cursor_y
        elif rotation == 3:
            text.cursor_x = self.config.width - 1 - text.cursor_x
            text.cursor_y = self.config.height - 1 - text.cursor_y
        self.canvas.clear()
        self.update_screen()

    def set_display_start_line(self, line: int) -> None:
        """Set the RAM line shown at the top of the panel (0-63)."""
        self._send([start_line_command(line)])

    def close(self) -> None:
        """Release the display; further operations raise RuntimeError."""
        self.closed = True

    def __enter__(self) -> Display:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()