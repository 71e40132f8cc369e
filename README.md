# circuitos

Pure-Python building blocks for small embedded gadgets: byte buffers,
note frequencies, icon bitmaps, two bitmap fonts, drawing on an LED matrix,
and drivers for two I2C chips.

| Module | What it holds |
| --- | --- |
| `circuitos.buffers` | `DataBuffer`, `LazyDataBuffer`, `RingBuffer`, `FSBuffer` |
| `circuitos.notes` | `NOTES` table and `frequency(name)` |
| `circuitos.bitmaps` | `Bitmap`, the 18×18 icons `ARROW_RIGHT`, `CROSS`, `YES`, and `rows(bitmap)` |
| `circuitos.font5x7` | the fixed-width 5×7 font, `glyph_5x7(code)` |
| `circuitos.tomthumb` | `GfxGlyph`, `GfxFont` and the 3×5 `TOM_THUMB` font |
| `circuitos.pixel` | `MatrixPixel`, `MatrixPixelData`, `Column` |
| `circuitos.output` | `MatrixOutput`, `MatrixOutputBuffer`, `MatrixPartOutput` |
| `circuitos.anim` | the `MatrixAnim` base class |
| `circuitos.matrix` | `Matrix` and `Font` |
| `circuitos.bus` | the abstract `I2CBus` and `I2CError` |
| `circuitos.aw9523` | `AW9523`, `PinMode`, `CurrentLimit` |
| `circuitos.is31fl3731` | `IS31FL3731`, a `MatrixOutput` for that controller |

The package has no dependencies outside the standard library. Install it
with pip; the `test` extra adds pytest for running the tests in `tests/`.

## Buffers

```python
from circuitos.buffers import RingBuffer

ring = RingBuffer(8)
ring.write(b"hello")    # 5 bytes written
ring.read(3)            # b"hel"
ring.read_available()   # 2
ring.peek(2)            # b"lo", left in the buffer
```

`RingBuffer.write` stores as much as fits and returns the count. `DataBuffer`
and `LazyDataBuffer` hand out a writable `memoryview` from `write_data()`; you
fill it and commit with `write_move(n)`, then consume with `read_data()` and
`read_move(n)`. `DataBuffer` compacts unread bytes to the front on every
`write_data()`, `LazyDataBuffer` only on `relocate()`. `FSBuffer` reads ahead
from a binary file object with `refill()`. Moving a cursor past the data
raises `ValueError`.

## Notes and fonts

```python
from circuitos.notes import frequency
from circuitos.font5x7 import glyph_5x7
from circuitos.tomthumb import TOM_THUMB

frequency("A4")         # 440; "C#5", "cs5" and "NOTE_DS8" are accepted too
glyph_5x7("A")          # five column bytes, bit 0 is the top row
TOM_THUMB.glyph("A")    # GfxGlyph with offset, size, advance and offsets
TOM_THUMB.glyph_bitmap("A")
```

Tom Thumb covers printable ASCII, 0x20 to 0x7E.

## Drawing on a matrix

A `Matrix` draws into a frame and pushes it to a `MatrixOutput`. Any display
can be one: implement `init()` and `push(data)`.

```python
from circuitos.matrix import Font, Matrix
from circuitos.output import MatrixOutput
from circuitos.pixel import MatrixPixel


class Screen(MatrixOutput):
    def __init__(self):
        super().__init__(16, 9)
        self.frames = []

    def init(self):
        pass

    def push(self, data):
        self.frames.append(data.copy())


screen = Screen()
matrix = Matrix(screen)
matrix.begin()                      # clear and push a blank frame
matrix.draw_string(0, 1, "Hi", MatrixPixel(255, 255, 255, 255))
matrix.font = Font.SMALL            # 3x5 text, drawn from its baseline
matrix.draw_string(0, 8, "ok")
matrix.brightness = 128             # forwarded to the output
matrix.push()
```

Pixels off the matrix are ignored. `draw_bitmap` draws a row-major
intensity map in one colour, `draw_pixel_data` copies a `MatrixPixelData`.
`MatrixOutputBuffer` keeps the last frame pushed through it, and a
`MatrixPartOutput` subclass maps a smaller region onto such a buffer by
implementing `map(x, y)`.

Animations subclass `MatrixAnim` and implement `reset`, `on_start` and
`on_stop`; `Matrix.start_animation` stops any running animation first.

## Talking to chips

The drivers talk through an `I2CBus`. Subclass it and implement
`write(address, data)` and `read(address, count)`; `write_register` and
`read_register` build on those. A bus should raise `I2CError` when nothing
answers.

```python
from circuitos.aw9523 import AW9523, PinMode
from circuitos.bus import I2CBus


class RecordingBus(I2CBus):
    def __init__(self):
        self.sent = []

    def write(self, address, data):
        self.sent.append((address, bytes(data)))

    def read(self, address, count):
        return bytes([0x23]) * count   # what an AW9523 answers for its ID


expander = AW9523(RecordingBus())
if expander.begin():                   # resets and checks the chip ID
    expander.pin_mode(3, PinMode.OUT)
    expander.write(3, True)
```

`AW9523` raises `ValueError` for pins outside 0–15 and dimming factors
outside 0–255. `IS31FL3731` is a 16×9 `MatrixOutput`: `init()` raises
`I2CError` if nothing responds at its address, and `push()` sends each
pixel's averaged colour, scaled by its intensity and the global brightness.

## What it does not do

- There is no `I2CBus` for real hardware; you supply one for your platform
  or simulator.
- Nothing plays sound: `circuitos.notes` only gives frequencies.
- There are no ready-made animations, only the `MatrixAnim` base class.