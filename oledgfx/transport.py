"""I2C framing for SSD1306 commands and display data."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["Bus", "TransportError", "RecordingBus", "Transport"]

_CONTROL_COMMAND_STREAM = 0x00
_CONTROL_DATA_STREAM = 0x40


class Bus(Protocol):
    """An I2C bus able to write a byte string to a 7-bit device address."""

    def write(self, address: int, data: bytes) -> None:
        """Write data to the device; raise OSError on failure."""


class TransportError(Exception):
    """Raised when a transfer to the display fails."""


@dataclass
class RecordingBus:
    """An in-memory bus that records every successful write.

    The next ``fail_next`` writes raise OSError, which lets callers exercise
    error handling without hardware.
    """

    writes: list[tuple[int, bytes]] = field(default_factory=list)
    fail_next: int = 0
    attempts: int = 0

    def write(self, address: int, data: bytes) -> None:
        """Record the write, or fail if failures are still pending."""
        self.attempts += 1
        if self.fail_next > 0:
            self.fail_next -= 1
            raise OSError("simulated bus error")
        self.writes.append((address, bytes(data)))


class Transport:
    """Sends command and data streams to a display at one bus address."""

    def __init__(
        self,
        bus: Bus,
        address: int,
        retries: int = 3,
        retry_delay: float = 0.01,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not 0 <= address <= 0x7F:
            raise ValueError("I2C address must be a 7-bit value")
        if retries < 1:
            raise ValueError("at least one attempt is required")
        self.bus = bus
        self.address = address
        self.retries = retries
        self.retry_delay = retry_delay
        self._sleep = sleep

    def send_commands(self, commands: bytes | bytearray | list[int]) -> None:
        """Send a command stream, retrying briefly on bus errors."""
        payload = bytes([_CONTROL_COMMAND_STREAM]) + bytes(commands)
        last_error: OSError | None = None
        for attempt in range(self.retries):
            try:
                self.bus.write(self.address, payload)
                return
            except OSError as error:
                last_error = error
                if attempt + 1 < self.retries:
                    self._sleep(self.retry_delay)
        raise TransportError(
            f"command transfer failed after {self.retries} attempts"
        ) from last_error

    def send_data(self, data: bytes | bytearray) -> None:
        """Send a display-data stream in a single transfer."""
        payload = bytes([_CONTROL_DATA_STREAM]) + bytes(data)
        try:
            self.bus.write(self.address, payload)
        except OSError as error:
            raise TransportError("data transfer failed") from error