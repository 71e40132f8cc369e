"""Byte buffers, note frequencies, bitmaps and fonts, LED matrix drawing, and AW9523 and IS31FL3731 drivers over an abstract I2C bus."""

__version__ = "0.1.0"

__all__ = [
    "anim",
    "aw9523",
    "bitmaps",
    "buffers",
    "bus",
    "font5x7",
    "is31fl3731",
    "matrix",
    "notes",
    "output",
    "pixel",
    "tomthumb",
]