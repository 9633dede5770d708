"""
Terminal color codes for colored output

Styles are written as "foreground+attributes:background+attributes", for
example "white+u:black" (underlined white on black) or "red+b:white".

Colors: black, red, green, yellow, blue, magenta, cyan, white, default
and 0...255 (256 colors).

Foreground attributes:
    b = bold, B = blink, u = underline, i = inverse, s = strikethrough,
    h = high intensity
Background attributes:
    h = high intensity
"""

from typing import List

from colorama import Fore, Style
from colorama.ansi import CSI

RESET = Style.RESET_ALL

WHITE = Fore.WHITE
BLUE = Fore.BLUE
YELLOW = Fore.YELLOW
RED = Fore.RED
LIGHT_BLACK = Fore.LIGHTBLACK_EX

COLOR_OFFSETS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

_ATTRIBUTE_CODES = [
    ("b", "1"),
    ("B", "5"),
    ("u", "4"),
    ("i", "7"),
    ("s", "9"),
]

_NORMAL_FG = 30
_HIGH_FG = 90
_NORMAL_BG = 40
_HIGH_BG = 100


class ColorStyleError(ValueError):
    """Raised when a color style string cannot be resolved"""

    pass


def _split_part(part: str) -> List[str]:
    name, _, attributes = part.partition("+")
    return [name, attributes]


def _color_param(name: str, base: int, extended: str, style: str) -> str:
    if name.isdigit():
        index = int(name)
        if index > 255:
            raise ColorStyleError(f"color index out of range in style {style!r}: {index}")
        return f"{extended};5;{index}"
    if name not in COLOR_OFFSETS:
        raise ColorStyleError(f"unknown color {name!r} in style {style!r}")
    return str(base + COLOR_OFFSETS[name])


def color_code(style: str) -> str:
    """
    Resolve a style string into a terminal escape sequence

    Args:
        style: Style such as "red", "blue+b", "208" or "white+u:black".
            "reset" yields the reset sequence, "" and "off" yield nothing.

    Returns:
        The escape sequence for the style

    Raises:
        ColorStyleError: If a color name or index is not recognised
    """
    if not style or style == "off":
        return ""
    if style == "reset":
        return RESET

    foreground, _, background = style.partition(":")
    fg_name, fg_attributes = _split_part(foreground)
    bg_name, bg_attributes = _split_part(background)

    params = [code for flag, code in _ATTRIBUTE_CODES if flag in fg_attributes]

    if fg_name:
        base = _HIGH_FG if "h" in fg_attributes else _NORMAL_FG
        params.append(_color_param(fg_name, base, "38", style))

    if bg_name:
        base = _HIGH_BG if "h" in bg_attributes else _NORMAL_BG
        params.append(_color_param(bg_name, base, "48", style))

    if not params:
        return ""
    return CSI + ";".join(params) + "m"
