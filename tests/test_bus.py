import pytest

from circuitos.bus import I2CBus, I2CError


class FakeBus(I2CBus):
    def __init__(self, registers=None, short_read=False):
        self.writes = []
        self.registers = dict(registers or {})
        self.pointer = 0
        self.short_read = short_read

    def write(self, address, data):
        data = bytes(data)
        self.writes.append((address, data))
        if data:
            self.pointer = data[0]

    def read(self, address, count):
        if self.short_read:
            return b""
        return bytes(self.registers.get(self.pointer + k, 0) for k in range(count))


def test_write_register_single_byte():
    bus = FakeBus()
    I2CBus.write_register(bus, 0x58, 0x02, 0x08)
    assert bus.writes == [(0x58, bytes([0x02, 0x08]))]


def test_write_register_sequence():
    bus = FakeBus()
    I2CBus.write_register(bus, 0x74, 0x24, [1, 2, 3])
    assert bus.writes == [(0x74, bytes([0x24, 1, 2, 3]))]


def test_read_register_selects_then_reads():
    bus = FakeBus({0x10: 0x23})
    assert I2CBus.read_register(bus, 0x58, 0x10) == 0x23
    assert bus.writes == [(0x58, bytes([0x10]))]


def test_read_register_short_read_raises():
    bus = FakeBus(short_read=True)
    with pytest.raises(I2CError) as info:
        I2CBus.read_register(bus, 0x58, 0x00)
    assert info.value.address == 0x58


@pytest.mark.parametrize("address", [-1, 0x80])
def test_bad_address(address):
    with pytest.raises(ValueError):
        I2CBus.write_register(FakeBus(), address, 0, 0)


@pytest.mark.parametrize("register", [-1, 256])
def test_bad_register(register):
    with pytest.raises(ValueError):
        I2CBus.read_register(FakeBus(), 0x58, register)


def test_bad_data_byte():
    with pytest.raises(ValueError):
        I2CBus.write_register(FakeBus(), 0x58, 0, 300)