"""Tom Thumb: a tiny proportional 3x5 pixel font in the GFX glyph format.

Only the printable ASCII range (0x20 to 0x7E) is included. Every glyph row
is stored as one byte, most significant bit leftmost.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GfxGlyph:
    """Placement and size of one glyph inside a font's bitmap."""

    bitmap_offset: int
    width: int
    height: int
    x_advance: int
    x_offset: int
    y_offset: int


@dataclass(frozen=True)
class GfxFont:
    """A bitmap font: concatenated glyph bitmaps plus a glyph table."""

    bitmap: bytes
    glyphs: tuple[GfxGlyph, ...]
    first: int
    last: int
    y_advance: int

    def __post_init__(self) -> None:
        if self.last < self.first:
            raise ValueError("last character code precedes the first")
        if len(self.glyphs) != self.last - self.first + 1:
            raise ValueError(
                f"expected {self.last - self.first + 1} glyphs, got {len(self.glyphs)}"
            )

    def __contains__(self, code: object) -> bool:
        try:
            index = _code_of(code)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return self.first <= index <= self.last

    def glyph(self, code: int | str) -> GfxGlyph:
        """The glyph for a character or character code."""
        index = _code_of(code)
        if not self.first <= index <= self.last:
            raise ValueError(f"no glyph for character code {index}")
        return self.glyphs[index - self.first]

    def glyph_bitmap(self, code: int | str) -> bytes:
        """The packed bitmap bytes of a glyph, rows top to bottom, MSB first."""
        g = self.glyph(code)
        count = (g.width * g.height + 7) // 8
        return self.bitmap[g.bitmap_offset:g.bitmap_offset + count]


def _code_of(code: int | str) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(
            f"character code must be an int or a character, not {type(code).__name__}"
        )
    return code


# (row bytes, x advance, y offset) for each code from 0x20 to 0x7E.
_TOM_THUMB_DATA: tuple[tuple[str, int, int], ...] = (
    ("00", 2, -5),                  # space
    ("8080800080", 2, -5),          # !
    ("A0A0", 4, -5),                # "
    ("A0E0A0E0A0", 4, -5),          # #
    ("60C060C040", 4, -5),          # $
    ("8020408020", 4, -5),          # %
    ("C0C0E0A060", 4, -5),          # &
    ("8080", 2, -5),                # '
    ("4080808040", 3, -5),          # (
    ("8040404080", 3, -5),          # )
    ("A040A0", 4, -5),              # *
    ("40E040", 4, -4),              # +
    ("4080", 3, -2),                # ,
    ("E0", 4, -3),                  # -
    ("80", 2, -1),                  # .
    ("2020408080", 4, -5),          # /
    ("60A0A0A0C0", 4, -5),          # 0
    ("40C0404040", 3, -5),          # 1
    ("C0204080E0", 4, -5),          # 2
    ("C0204020C0", 4, -5),          # 3
    ("A0A0E02020", 4, -5),          # 4
    ("E080C020C0", 4, -5),          # 5
    ("6080E0A0E0", 4, -5),          # 6
    ("E020408080", 4, -5),          # 7
    ("E0A0E0A0E0", 4, -5),          # 8
    ("E0A0E020C0", 4, -5),          # 9
    ("800080", 2, -4),              # :
    ("40004080", 3, -4),            # ;
    ("2040804020", 4, -5),          # <
    ("E000E0", 4, -4),              # =
    ("8040204080", 4, -5),          # >
    ("E020400040", 4, -5),          # ?
    ("40A0E08060", 4, -5),          # @
    ("40A0E0A0A0", 4, -5),          # A
    ("C0A0C0A0C0", 4, -5),          # B
    ("6080808060", 4, -5),          # C
    ("C0A0A0A0C0", 4, -5),          # D
    ("E080E080E0", 4, -5),          # E
    ("E080E08080", 4, -5),          # F
    ("6080E0A060", 4, -5),          # G
    ("A0A0E0A0A0", 4, -5),          # H
    ("E0404040E0", 4, -5),          # I
    ("202020A040", 4, -5),          # J
    ("A0A0C0A0A0", 4, -5),          # K
    ("80808080E0", 4, -5),          # L
    ("A0E0E0A0A0", 4, -5),          # M
    ("A0E0E0E0A0", 4, -5),          # N
    ("40A0A0A040", 4, -5),          # O
    ("C0A0C08080", 4, -5),          # P
    ("40A0A0E060", 4, -5),          # Q
    ("C0A0E0C0A0", 4, -5),          # R
    ("60804020C0", 4, -5),          # S
    ("E040404040", 4, -5),          # T
    ("A0A0A0A060", 4, -5),          # U
    ("A0A0A04040", 4, -5),          # V
    ("A0A0E0E0A0", 4, -5),          # W
    ("A0A040A0A0", 4, -5),          # X
    ("A0A0404040", 4, -5),          # Y
    ("E0204080E0", 4, -5),          # Z
    ("E0808080E0", 4, -5),          # [
    ("804020", 4, -4),              # backslash
    ("E0202020E0", 4, -5),          # ]
    ("40A0", 4, -5),                # ^
    ("E0", 4, -1),                  # _
    ("8040", 3, -5),                # `
    ("C060A0E0", 4, -4),            # a
    ("80C0A0A0C0", 4, -5),          # b
    ("60808060", 4, -4),            # c
    ("2060A0A060", 4, -5),          # d
    ("60A0C060", 4, -4),            # e
    ("2040E04040", 4, -5),          # f
    ("60A0E02040", 4, -4),          # g
    ("80C0A0A0A0", 4, -5),          # h
    ("8000808080", 2, -5),          # i
    ("20002020A040", 4, -5),        # j
    ("80A0C0C0A0", 4, -5),          # k
    ("C0404040E0", 4, -5),          # l
    ("E0E0E0A0", 4, -4),            # m
    ("C0A0A0A0", 4, -4),            # n
    ("40A0A040", 4, -4),            # o
    ("C0A0A0C080", 4, -4),          # p
    ("60A0A06020", 4, -4),          # q
    ("60808080", 4, -4),            # r
    ("60C060C0", 4, -4),            # s
    ("40E0404060", 4, -5),          # t
    ("A0A0A060", 4, -4),            # u
    ("A0A0E040", 4, -4),            # v
    ("A0E0E0E0", 4, -4),            # w
    ("A04040A0", 4, -4),            # x
    ("A0A0602040", 4, -4),          # y
    ("E060C0E0", 4, -4),            # z
    ("6040804060", 4, -5),          # {
    ("8080008080", 2, -5),          # |
    ("C0402040C0", 4, -5),          # }
    ("60C0", 4, -5),                # ~
)


def _build_tom_thumb() -> GfxFont:
    glyphs: list[GfxGlyph] = []
    chunks: list[bytes] = []
    offset = 0
    for rows_hex, advance, y_offset in _TOM_THUMB_DATA:
        rows = bytes.fromhex(rows_hex)
        glyphs.append(GfxGlyph(offset, 8, len(rows), advance, 0, y_offset))
        chunks.append(rows)
        offset += len(rows)
    return GfxFont(b"".join(chunks), tuple(glyphs), 0x20, 0x7E, 6)


TOM_THUMB: GfxFont = _build_tom_thumb()