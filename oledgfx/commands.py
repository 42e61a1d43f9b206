"""SSD1306 controller command bytes and the command sequences built from them."""

from __future__ import annotations

import enum

__all__ = [
    "Command",
    "init_sequence",
    "window_sequence",
    "scroll_sequence",
    "diagonal_scroll_sequence",
    "orientation_sequence",
    "start_line_command",
]


class Command(enum.IntEnum):
    """Single-byte SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    DISPLAY_RAM = 0xA4
    DISPLAY_NORMAL = 0xA6
    INVERT_DISPLAY = 0xA7
    DISPLAY_OFF = 0xAE
    DISPLAY_ON = 0xAF
    SET_MEMORY_ADDR_MODE = 0x20
    SET_COLUMN_RANGE = 0x21
    SET_PAGE_RANGE = 0x22
    SET_DISPLAY_START_LINE = 0x40
    SET_SEGMENT_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_SCAN_MODE = 0xC0
    SET_DISPLAY_OFFSET = 0xD3
    SET_DISPLAY_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_COM_PIN_MAP = 0xDA
    SET_VCOMH_DESELECT = 0xDB
    SET_CHARGE_PUMP = 0x8D
    DEACTIVATE_SCROLL = 0x2E
    ACTIVATE_SCROLL = 0x2F
    RIGHT_HORIZONTAL_SCROLL = 0x26
    LEFT_HORIZONTAL_SCROLL = 0x27
    VERTICAL_AND_RIGHT_HORIZONTAL_SCROLL = 0x29
    VERTICAL_AND_LEFT_HORIZONTAL_SCROLL = 0x2A
    SET_VERTICAL_SCROLL_AREA = 0xA3


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must fit in one byte, got {value}")


def _check_pages(start_page: int, end_page: int) -> None:
    if not 0 <= start_page <= 7 or not 0 <= end_page <= 7:
        raise ValueError("scroll pages must be between 0 and 7")
    if start_page > end_page:
        raise ValueError("start page must not be after end page")


def init_sequence(height: int) -> bytes:
    """Return the power-up configuration for a panel of the given height."""
    if height <= 0:
        raise ValueError("screen height must be positive")
    return bytes(
        [
            Command.DISPLAY_OFF,
            Command.SET_DISPLAY_CLK_DIV, 0x80,
            Command.SET_MUX_RATIO, (height - 1) & 0xFF,
            Command.SET_DISPLAY_OFFSET, 0x00,
            Command.SET_DISPLAY_START_LINE | 0x00,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_MEMORY_ADDR_MODE, 0x00,
            Command.SET_SEGMENT_REMAP | 0x01,
            Command.SET_COM_SCAN_MODE | 0x08,
            Command.SET_COM_PIN_MAP, 0x12 if height == 64 else 0x02,
            Command.SET_CONTRAST, 0xCF,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOMH_DESELECT, 0x40,
            Command.DISPLAY_RAM,
            Command.DISPLAY_NORMAL,
            Command.DEACTIVATE_SCROLL,
            Command.DISPLAY_ON,
        ]
    )


def window_sequence(min_col: int, max_col: int, min_page: int, max_page: int) -> bytes:
    """Return the commands that select the column and page range to be written."""
    for name, value in (
        ("min_col", min_col),
        ("max_col", max_col),
        ("min_page", min_page),
        ("max_page", max_page),
    ):
        _check_byte(name, value)
    return bytes(
        [
            Command.SET_COLUMN_RANGE, min_col, max_col,
            Command.SET_PAGE_RANGE, min_page, max_page,
        ]
    )


def scroll_sequence(command: int, start_page: int, end_page: int) -> bytes:
    """Return the setup bytes for a horizontal scroll over the given pages."""
    _check_byte("command", command)
    _check_pages(start_page, end_page)
    return bytes([command, 0x00, start_page, 0x00, end_page, 0x00, 0xFF])


def diagonal_scroll_sequence(
    command: int,
    start_page: int,
    end_page: int,
    offset: int,
    speed: int,
    height: int,
) -> tuple[bytes, bytes]:
    """Return (vertical scroll area setup, diagonal scroll setup) for a panel of the given height."""
    _check_byte("command", command)
    _check_pages(start_page, end_page)
    if not 0 <= speed <= 7:
        raise ValueError("scroll speed must be between 0 and 7")
    if not 1 <= offset <= 63:
        raise ValueError("vertical offset must be between 1 and 63")
    _check_byte("height", height)
    area = bytes([Command.SET_VERTICAL_SCROLL_AREA, 0, height])
    scroll = bytes([command, 0x00, start_page, speed, end_page, offset])
    return area, scroll


def orientation_sequence(rotation: int) -> bytes:
    """Return the segment-remap and COM-scan commands for a flip setting.

    Bit 0 of rotation flips horizontally, bit 1 flips vertically.
    """
    seg = Command.SET_SEGMENT_REMAP | (0x01 if rotation & 1 else 0x00)
    com = Command.SET_COM_SCAN_MODE | (0x08 if rotation & 2 else 0x00)
    return bytes([seg, com])


def start_line_command(line: int) -> int:
    """Return the command byte that sets the display RAM start line (0-63)."""
    if not 0 <= line <= 63:
        raise ValueError("start line must be between 0 and 63")
    return Command.SET_DISPLAY_START_LINE | line