"""Driver for the IS31FL3731 16x9 charlieplexed LED matrix controller."""

from __future__ import annotations

import time

from .bus import I2CBus, I2CError
from .output import MatrixOutput
from .pixel import MatrixPixelData

REG_CONFIG = 0x00
REG_CONFIG_PICTUREMODE = 0x00
REG_PICTUREFRAME = 0x01
REG_SHUTDOWN = 0x0A
REG_AUDIOSYNC = 0x06
COMMAND_REGISTER = 0xFD
BANK_FUNCTION = 0x0B

PWM_START = 0x24
CHUNK = 77
WIDTH = 16
HEIGHT = 9
DEFAULT_ADDRESS = 0x74


class IS31FL3731(MatrixOutput):
    """A 16x9 monochrome LED matrix; pixel colour is averaged to a grey level."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS) -> None:
        super().__init__(WIDTH, HEIGHT)
        self._bus = bus
        self._address = address

    @property
    def address(self) -> int:
        return self._address

    def init(self) -> None:
        """Wake the controller, select picture mode, blank it and enable every LED."""
        try:
            self._bus.write(self._address, b"")
        except I2CError as exc:
            raise I2CError(
                f"no IS31FL3731 responding at {self._address:#04x}", self._address
            ) from exc

        self._write_register8(BANK_FUNCTION, REG_SHUTDOWN, 0x00)
        time.sleep(0.01)
        self._write_register8(BANK_FUNCTION, REG_SHUTDOWN, 0x01)
        self._write_register8(BANK_FUNCTION, REG_CONFIG, REG_CONFIG_PICTUREMODE)
        self._write_register8(BANK_FUNCTION, REG_PICTUREFRAME, 0)

        self.push(MatrixPixelData(WIDTH, HEIGHT))

        for bank in range(8):
            for register in range(18):
                self._write_register8(bank, register, 0xFF)

        self._audio_sync(False)

    def push(self, data: MatrixPixelData) -> None:
        """Send a frame as PWM values, in two transfers of 77 LEDs each."""
        self._select_bank(0)
        brightness = self.brightness
        for part in range(2):
            payload = bytearray([PWM_START + part * CHUNK])
            for index in range(part * CHUNK, (part + 1) * CHUNK):
                y, x = divmod(index, WIDTH)
                pix = data.get(x, y)
                value = (pix.r + pix.g + pix.b) // 3 * pix.i // 255
                payload.append(value * brightness // 255)
            self._bus.write(self._address, bytes(payload))

    def _audio_sync(self, sync: bool) -> None:
        self._write_register8(BANK_FUNCTION, REG_AUDIOSYNC, 0x1 if sync else 0x0)

    def _write_register8(self, bank: int, register: int, value: int) -> None:
        self._select_bank(bank)
        self._bus.write_register(self._address, register, value)

    def _read_register8(self, bank: int, register: int) -> int:
        self._select_bank(bank)
        return self._bus.read_register(self._address, register)

    def _select_bank(self, bank: int) -> None:
        self._bus.write_register(self._address, COMMAND_REGISTER, bank)