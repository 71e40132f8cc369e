import pytest

from circuitos.bitmaps import ARROW_RIGHT, CROSS, YES, Bitmap, rows


def _flat(bitmap):
    return tuple(p for row in rows(bitmap) for p in row)


@pytest.mark.parametrize("bitmap", [ARROW_RIGHT, CROSS, YES])
def test_icons_hold_324_pixels(bitmap):
    assert len(bitmap.pixels) == 324
    assert set(bitmap.pixels) <= {0x0000, 0xFFFF}


@pytest.mark.parametrize("bitmap", [ARROW_RIGHT, CROSS, YES])
def test_rows_round_trip(bitmap):
    split = rows(bitmap)
    assert len(split) == bitmap.height
    assert all(len(row) == bitmap.width for row in split)
    assert tuple(p for row in split for p in row) == bitmap.pixels


def test_arrow_right_first_pixels_match_source():
    assert _flat(ARROW_RIGHT)[:6] == (0x0000, 0x0000, 0x0000, 0x0000, 0xFFFF, 0xFFFF)


def test_cross_padding_is_black():
    assert _flat(CROSS)[320:] == (0x0000,) * 4


def test_yes_source_pixels():
    flat = _flat(YES)
    assert flat[50] == 0xFFFF
    assert flat[48] == 0x0000


def test_bitmap_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Bitmap(2, 2, (0, 0, 0))


def test_rows_of_small_bitmap():
    bitmap = Bitmap(2, 3, (1, 2, 3, 4, 5, 6))
    assert rows(bitmap) == [(1, 2), (3, 4), (5, 6)]