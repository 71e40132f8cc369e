"""Driver for the AW9523 16-pin I/O expander and LED driver."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .bus import I2CBus

REG_RESET = 0x7F
REG_ID = 0x10
REG_CONF = 0x11
REG_INPUT = 0x00
REG_OUTPUT = 0x02
REG_DIR = 0x04
REG_INTR = 0x06
REG_MODE = 0x12
REG_DIM = 0x20

VAL_RESET = 0x00
VAL_ID = 0x23

CFG_MASK = 0b00010011
PIN_COUNT = 16
DEFAULT_ADDRESS = 0x58

_DIM_MAP = (4, 5, 6, 7, 8, 9, 10, 11, 0, 1, 2, 3, 12, 13, 14, 15)


class PinMode(Enum):
    """IN and OUT are GPIO; LED is an output with current control (see ``dim``)."""

    IN = "in"
    OUT = "out"
    LED = "led"


class CurrentLimit(IntEnum):
    """LED drive current limit as a fraction of I_max (37 mA)."""

    IMAX = 0
    IMAX_3Q = 1
    IMAX_2Q = 2
    IMAX_1Q = 3


@dataclass
class _Registers:
    conf: int = 0
    dir: list[int] = field(default_factory=lambda: [0, 0])
    output: list[int] = field(default_factory=lambda: [0, 0])
    intr: list[int] = field(default_factory=lambda: [0, 0])
    mode: list[int] = field(default_factory=lambda: [0xFF, 0xFF])
    dim: list[int] = field(default_factory=lambda: [0] * PIN_COUNT)


def _port(pin: int) -> int:
    return 0 if pin <= 7 else 1


def _mask(pin: int) -> int:
    return 1 << (pin if pin <= 7 else pin - 8)


def _check_pin(pin: int) -> int:
    if not 0 <= pin < PIN_COUNT:
        raise ValueError(f"pin must be 0-{PIN_COUNT - 1}, got {pin}")
    return pin


def _set_bit(value: int, mask: int, state: bool) -> int:
    return (value | mask) if state else (value & ~mask & 0xFF)


class AW9523:
    """An AW9523 on an I2C bus; keeps a shadow copy of its writable registers."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS) -> None:
        self._bus = bus
        self._address = address
        self._regs = _Registers()

    @property
    def address(self) -> int:
        return self._address

    def begin(self) -> bool:
        """Reset the chip and report whether it identifies as an AW9523."""
        self.reset()
        return self._read_reg(REG_ID) == VAL_ID

    def reset(self) -> None:
        """Send a software reset, then wait 50 microseconds."""
        self._bus.write(self._address, bytes([REG_RESET, VAL_RESET]))
        self._regs = _Registers()
        time.sleep(50e-6)

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        _check_pin(pin)
        mode = PinMode(mode)
        port = _port(pin)
        mask = _mask(pin)
        regs = self._regs

        if mode is PinMode.LED:
            regs.mode[port] = _set_bit(regs.mode[port], mask, False)
            self._write_reg(REG_MODE + port, regs.mode[port])
            return

        regs.mode[port] = _set_bit(regs.mode[port], mask, True)
        self._write_reg(REG_MODE + port, regs.mode[port])
        regs.dir[port] = _set_bit(regs.dir[port], mask, mode is PinMode.IN)
        self._write_reg(REG_DIR + port, regs.dir[port])

    def read(self, pin: int) -> bool:
        """Input state of a pin: True for high."""
        _check_pin(pin)
        return bool(self._read_reg(REG_INPUT + _port(pin)) & _mask(pin))

    def write(self, pin: int, state: bool) -> None:
        """Drive an output pin high (True) or low (False)."""
        _check_pin(pin)
        port = _port(pin)
        self._regs.output[port] = _set_bit(self._regs.output[port], _mask(pin), state)
        self._write_reg(REG_OUTPUT + port, self._regs.output[port])

    def dim(self, pin: int, factor: int) -> None:
        """Set the LED dimming factor (0-255) of a pin."""
        _check_pin(pin)
        if not 0 <= factor <= 0xFF:
            raise ValueError(f"dimming factor must be 0-255, got {factor}")
        index = _DIM_MAP[pin]
        self._regs.dim[index] = factor
        self._write_reg(REG_DIM + index, factor)

    def set_interrupt(self, pin: int, enabled: bool) -> None:
        """Enable or disable interrupt triggering for a pin."""
        _check_pin(pin)
        port = _port(pin)
        self._regs.intr[port] = _set_bit(self._regs.intr[port], _mask(pin), enabled)
        self._write_reg(REG_INTR + port, self._regs.intr[port])

    def set_current_limit(self, limit: CurrentLimit) -> None:
        """Set the LED drive current limit for pins in LED mode."""
        limit = CurrentLimit(limit)
        mask = 0b11
        self._regs.conf = (self._regs.conf & ~mask & 0xFF) | (limit & mask)
        self._write_reg(REG_CONF, self._regs.conf & CFG_MASK)

    def _read_reg(self, register: int) -> int:
        return self._bus.read_register(self._address, register)

    def _write_reg(self, register: int, value: int) -> None:
        self._bus.write_register(self._address, register, value)