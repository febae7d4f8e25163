"""core/colors.py — Colour value parsing.

Colours in ``tuning.toml`` may be written as CSS-style strings
(``"#fff"``, ``"#bf0000"``), as hex integers (``0xff0000``) or as
``[r, g, b]`` arrays.  Everything downstream works with RGB tuples.
"""

from __future__ import annotations


def parse_color(value) -> tuple[int, int, int]:
    """Return an (r, g, b) tuple for any supported colour notation.

    >>> parse_color("#f00")
    (255, 0, 0)
    >>> parse_color(0x4b0082)
    (75, 0, 130)
    """
    if isinstance(value, bool):
        raise ValueError(f"not a colour: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"colour out of range: {value:#x}")
        return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    if isinstance(value, str):
        s = value.strip().lstrip("#")
        if len(s) == 3:
            s = "".join(c * 2 for c in s)
        if len(s) != 6:
            raise ValueError(f"bad colour string: {value!r}")
        try:
            return parse_color(int(s, 16))
        except ValueError:
            raise ValueError(f"bad colour string: {value!r}") from None
    if isinstance(value, (list, tuple)) and len(value) == 3:
        r, g, b = (int(c) for c in value)
        return (r, g, b)
    raise ValueError(f"not a colour: {value!r}")
