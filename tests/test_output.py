import pytest

from circuitos.output import MatrixOutput, MatrixOutputBuffer, MatrixPartOutput
from circuitos.pixel import MatrixPixel, MatrixPixelData


class RecordingOutput(MatrixOutput):
    def __init__(self, width=6, height=3):
        super().__init__(width, height)
        self.frames = []
        self.init_calls = 0

    def init(self):
        self.init_calls += 1

    def push(self, data):
        self.frames.append(data.copy())


class ShiftedPart(MatrixPartOutput):
    def map(self, x, y):
        return x + 2, y


def test_abstract_output_cannot_be_created():
    with pytest.raises(TypeError):
        MatrixOutput(2, 2)


def test_dimensions_and_default_brightness():
    out = RecordingOutput(6, 3)
    assert (out.width, out.height) == (6, 3)
    assert out.brightness == 255
    buf = MatrixOutputBuffer(out)
    assert (buf.width, buf.height) == (6, 3)
    assert buf.brightness == 255


def test_brightness_range_checked():
    out = RecordingOutput()
    buf = MatrixOutputBuffer(out)
    buf.brightness = 12
    assert buf.brightness == 12
    assert out.brightness == 12
    with pytest.raises(ValueError):
        buf.brightness = 256


def test_buffer_forwards_and_remembers():
    base = RecordingOutput()
    buf = MatrixOutputBuffer(base)
    assert (buf.width, buf.height) == (base.width, base.height)
    frame = MatrixPixelData(6, 3)
    frame.set(1, 1, MatrixPixel(1, 2, 3, 4))
    buf.push(frame)
    frame.set(0, 0, MatrixPixel(9, 9, 9, 9))
    assert base.frames[-1].get(1, 1) == MatrixPixel(1, 2, 3, 4)
    assert buf.data.get(0, 0) == MatrixPixel()
    buf.push_buffered()
    assert base.frames[-1] == buf.data
    assert len(base.frames) == 2


def test_buffer_init_and_brightness_forwarded():
    base = RecordingOutput()
    buf = MatrixOutputBuffer(base)
    buf.init()
    buf.brightness = 40
    assert base.init_calls == 1
    assert buf.brightness == 40
    assert base.brightness == 40


def test_part_output_places_pixels_through_map():
    base = RecordingOutput(6, 3)
    buf = MatrixOutputBuffer(base)
    part = ShiftedPart(buf, 2, 2)
    p = MatrixPixel(10, 20, 30, 200)
    local = MatrixPixelData(2, 2)
    local.set(0, 1, p)
    part.push(local)
    assert base.frames[-1].get(2, 1) == p
    assert buf.data.get(2, 1) == p


def test_part_output_keeps_rest_of_buffer():
    base = RecordingOutput(6, 3)
    buf = MatrixOutputBuffer(base)
    kept = MatrixPixel(7, 7, 7, 7)
    frame = MatrixPixelData(6, 3)
    frame.set(5, 2, kept)
    buf.push(frame)
    part = ShiftedPart(buf, 2, 2)
    part.push(MatrixPixelData(2, 2))
    assert base.frames[-1].get(5, 2) == kept


def test_part_output_scales_intensity_by_brightness():
    base = RecordingOutput(6, 3)
    buf = MatrixOutputBuffer(base)
    part = ShiftedPart(buf, 2, 2)
    part.brightness = 0
    local = MatrixPixelData(2, 2)
    local.set(0, 0, MatrixPixel(10, 20, 30, 200))
    part.push(local)
    assert base.frames[-1].get(2, 0) == MatrixPixel(10, 20, 30, 0)


def test_part_output_init_reaches_device():
    base = RecordingOutput()
    part = ShiftedPart(MatrixOutputBuffer(base), 2, 2)
    part.init()
    assert base.init_calls == 1