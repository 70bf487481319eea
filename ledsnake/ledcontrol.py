"""Driver model for MAX7219/MAX7221 LED controllers chained on one serial line."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

MAX_DEVICES = 8
ROWS_PER_DEVICE = 8

Transport = Callable[[bytes], None]


class Opcode(IntEnum):
    """Register addresses understood by the controller."""

    NOOP = 0
    DIGIT0 = 1
    DIGIT1 = 2
    DIGIT2 = 3
    DIGIT3 = 4
    DIGIT4 = 5
    DIGIT5 = 6
    DIGIT6 = 7
    DIGIT7 = 8
    DECODEMODE = 9
    INTENSITY = 10
    SCANLIMIT = 11
    SHUTDOWN = 12
    DISPLAYTEST = 15


DECIMAL_POINT = 0b10000000

# Segments lit for each ASCII character on a 7-segment display.
CHAR_TABLE: tuple[int, ...] = (
    0b01111110, 0b00110000, 0b01101101, 0b01111001, 0b00110011, 0b01011011, 0b01011111, 0b01110000,
    0b01111111, 0b01111011, 0b01110111, 0b00011111, 0b00001101, 0b00111101, 0b01001111, 0b01000111,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b10000000, 0b00000001, 0b10000000, 0b00000000,
    0b01111110, 0b00110000, 0b01101101, 0b01111001, 0b00110011, 0b01011011, 0b01011111, 0b01110000,
    0b01111111, 0b01111011, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b01110111, 0b00011111, 0b00001101, 0b00111101, 0b01001111, 0b01000111, 0b00000000,
    0b00110111, 0b00000000, 0b00000000, 0b00000000, 0b00001110, 0b00000000, 0b00000000, 0b00000000,
    0b01100111, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00001000,
    0b00000000, 0b01110111, 0b00011111, 0b00001101, 0b00111101, 0b01001111, 0b01000111, 0b00000000,
    0b00110111, 0b00000000, 0b00000000, 0b00000000, 0b00001110, 0b00000000, 0b00000000, 0b00000000,
    0b01100111, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
    0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000, 0b00000000,
)


class LedControl:
    """Keeps the LED state of up to eight chained controllers and emits their frames.

    Each command is turned into one frame of ``2 * device_count`` bytes in the
    order they are shifted out on the wire, and handed to ``transport``.
    Commands addressed to a device or position outside the valid range are
    ignored, as the hardware driver does.
    """

    def __init__(self, num_devices: int = 1, transport: Transport | None = None) -> None:
        if num_devices <= 0 or num_devices > MAX_DEVICES:
            num_devices = MAX_DEVICES
        self._max_devices = num_devices
        self._transport = transport
        self._status = bytearray(MAX_DEVICES * ROWS_PER_DEVICE)
        for addr in range(self._max_devices):
            self._transfer(addr, Opcode.DISPLAYTEST, 0)
            self.set_scan_limit(addr, 7)
            self._transfer(addr, Opcode.DECODEMODE, 0)
            self.clear_display(addr)
            self.shutdown(addr, True)

    @property
    def device_count(self) -> int:
        """Number of devices on the chain."""
        return self._max_devices

    def _valid(self, addr: int) -> bool:
        return 0 <= addr < self._max_devices

    def _transfer(self, addr: int, opcode: int, data: int) -> None:
        spidata = bytearray(self._max_devices * 2)
        offset = addr * 2
        spidata[offset + 1] = opcode & 0xFF
        spidata[offset] = data & 0xFF
        if self._transport is not None:
            self._transport(bytes(reversed(spidata)))

    def shutdown(self, addr: int, status: bool) -> None:
        """Put a device into power-down mode (True) or normal operation (False)."""
        if not self._valid(addr):
            return
        self._transfer(addr, Opcode.SHUTDOWN, 0 if status else 1)

    def set_scan_limit(self, addr: int, limit: int) -> None:
        """Set how many digits (rows) the device scans."""
        if not self._valid(addr):
            return
        self._transfer(addr, Opcode.SCANLIMIT, limit)

    def set_intensity(self, addr: int, intensity: int) -> None:
        """Set the brightness of a device."""
        if not self._valid(addr):
            return
        self._transfer(addr, Opcode.INTENSITY, intensity)

    def clear_display(self, addr: int) -> None:
        """Switch every LED of a device off."""
        if not self._valid(addr):
            return
        offset = addr * ROWS_PER_DEVICE
        for row in range(ROWS_PER_DEVICE):
            self._status[offset + row] = 0
            self._transfer(addr, row + 1, 0)

    def set_led(self, addr: int, row: int, col: int, state: bool) -> None:
        """Switch a single LED on or off."""
        if not self._valid(addr):
            return
        if not (0 <= row <= 7 and 0 <= col <= 7):
            return
        index = addr * ROWS_PER_DEVICE + row
        mask = 0b10000000 >> col
        if state:
            self._status[index] |= mask
        else:
            self._status[index] &= ~mask & 0xFF
        self._transfer(addr, row + 1, self._status[index])

    def set_row(self, addr: int, row: int, value: int) -> None:
        """Set all eight LEDs of a row from the bits of ``value``."""
        if not self._valid(addr):
            return
        if not 0 <= row <= 7:
            return
        index = addr * ROWS_PER_DEVICE + row
        self._status[index] = value & 0xFF
        self._transfer(addr, row + 1, self._status[index])

    def set_column(self, addr: int, col: int, value: int) -> None:
        """Set all eight LEDs of a column; the top row takes the highest bit."""
        if not self._valid(addr):
            return
        if not 0 <= col <= 7:
            return
        value &= 0xFF
        for row in range(ROWS_PER_DEVICE):
            self.set_led(addr, row, col, bool((value >> (7 - row)) & 0x01))

    def _write_digit(self, addr: int, digit: int, segments: int, dp: bool) -> None:
        if dp:
            segments |= DECIMAL_POINT
        self._status[addr * ROWS_PER_DEVICE + digit] = segments
        self._transfer(addr, digit + 1, segments)

    def set_digit(self, addr: int, digit: int, value: int, dp: bool) -> None:
        """Show a hexadecimal digit (0..15) on a 7-segment position."""
        if not self._valid(addr):
            return
        value &= 0xFF
        if not 0 <= digit <= 7 or value > 15:
            return
        self._write_digit(addr, digit, CHAR_TABLE[value], dp)

    def set_char(self, addr: int, digit: int, value: str | int, dp: bool) -> None:
        """Show a character on a 7-segment position; unknown characters show blank."""
        if not self._valid(addr):
            return
        if not 0 <= digit <= 7:
            return
        index = (ord(value) if isinstance(value, str) else value) & 0xFF
        if index > 127:
            index = ord(" ")
        self._write_digit(addr, digit, CHAR_TABLE[index], dp)

    def rows(self, addr: int) -> tuple[int, ...]:
        """Current row bytes of a device, top row first."""
        if not self._valid(addr):
            raise ValueError(f"no device at address {addr}")
        offset = addr * ROWS_PER_DEVICE
        return tuple(self._status[offset:offset + ROWS_PER_DEVICE])

    def is_lit(self, addr: int, row: int, col: int) -> bool:
        """Whether the LED at ``row``/``col`` of a device is on."""
        if not (0 <= row <= 7 and 0 <= col <= 7):
            raise ValueError(f"position ({row}, {col}) is outside the matrix")
        return bool(self.rows(addr)[row] & (0b10000000 >> col))