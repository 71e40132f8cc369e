"""Minimal I2C bus interface used by the device drivers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class I2CError(OSError):
    """A transfer on the I2C bus failed, for example because nothing answered."""

    def __init__(self, message: str, address: int | None = None) -> None:
        super().__init__(message)
        self.address = address


def _check_address(address: int) -> int:
    if not 0 <= address <= 0x7F:
        raise ValueError(f"I2C address must be 0x00-0x7F, got {address:#x}")
    return address


def _check_byte(value: int, what: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} must be 0-255, got {value}")
    return value


class I2CBus(ABC):
    """An I2C controller.

    Implementations provide raw :meth:`write` and :meth:`read` transfers and
    raise :class:`I2CError` when the addressed device does not respond.
    """

    @abstractmethod
    def write(self, address: int, data: bytes) -> None:
        """Send ``data`` to the device at ``address`` in one transaction."""

    @abstractmethod
    def read(self, address: int, count: int) -> bytes:
        """Read ``count`` bytes from the device at ``address``."""

    def write_register(self, address: int, register: int, data: int | Iterable[int]) -> None:
        """Write one byte or a run of bytes starting at ``register``."""
        _check_address(address)
        _check_byte(register, "register")
        payload = bytes([data]) if isinstance(data, int) else bytes(data)
        self.write(address, bytes([register]) + payload)

    def read_register(self, address: int, register: int) -> int:
        """Select ``register`` and read one byte from it."""
        _check_address(address)
        _check_byte(register, "register")
        self.write(address, bytes([register]))
        data = self.read(address, 1)
        if len(data) != 1:
            raise I2CError(
                f"expected 1 byte from register {register:#04x}, got {len(data)}", address
            )
        return data[0]