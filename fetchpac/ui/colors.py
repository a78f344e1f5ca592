"""
Color utilities for terminal output.

Palette indices 0..15 map to the sixteen ANSI foreground colors, 16 maps to
the terminal's default foreground.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import re
from dataclasses import dataclass
from typing import Any, Dict

from colorama import Cursor, Fore, Style  # type: ignore[import-untyped]

from ..constants import TERMINAL_DEFAULT_INDEX
from ..models import Palette

# SGR sequence for each palette index (codes 30-37, 90-97, 39)
SGR_TABLE = (
    Fore.BLACK, Fore.RED, Fore.GREEN, Fore.YELLOW,
    Fore.BLUE, Fore.MAGENTA, Fore.CYAN, Fore.WHITE,
    Fore.LIGHTBLACK_EX, Fore.LIGHTRED_EX, Fore.LIGHTGREEN_EX, Fore.LIGHTYELLOW_EX,
    Fore.LIGHTBLUE_EX, Fore.LIGHTMAGENTA_EX, Fore.LIGHTCYAN_EX, Fore.LIGHTWHITE_EX,
    Fore.RESET,
)

BOLD = Style.BRIGHT
RESET = Style.RESET_ALL

_ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*[A-Za-z]')


def clamp_index(index: Any) -> int:
    """Map anything outside 0..16 to the terminal default."""
    if isinstance(index, bool) or not isinstance(index, int):
        return TERMINAL_DEFAULT_INDEX
    if 0 <= index <= TERMINAL_DEFAULT_INDEX:
        return index
    return TERMINAL_DEFAULT_INDEX


def sgr(index: Any) -> str:
    """Foreground color sequence for a palette index."""
    return SGR_TABLE[clamp_index(index)]


def bold(index: Any) -> str:
    """Bold attribute followed by the color."""
    return f"{BOLD}{sgr(index)}"


def plain(index: Any) -> str:
    """Reset attributes, then the color (no bold)."""
    return f"{RESET}{sgr(index)}"


def strip_ansi(text: str) -> str:
    """Remove SGR and cursor movement sequences."""
    return _ANSI_PATTERN.sub('', text)


def cursor_up(lines: int) -> str:
    return Cursor.UP(lines)


def cursor_forward(columns: int) -> str:
    return Cursor.FORWARD(columns)


def cursor_back(columns: int) -> str:
    return Cursor.BACK(columns)


@dataclass(frozen=True)
class EncodedPalette:
    """Escape sequences ready to be written for each color slot."""
    a1: str
    a2: str
    a3: str
    c1: str
    c2: str
    c3: str
    m1: str
    m2: str
    m3: str
    m4: str
    m5: str
    m6: str
    rs: str = RESET

    def template_tokens(self) -> Dict[str, str]:
        """Values for the ${a1} ${a2} ${a3} ${rs} template tokens."""
        return {"a1": self.a1, "a2": self.a2, "a3": self.a3, "rs": self.rs}


def encode_palette(palette: Palette) -> EncodedPalette:
    """
    Lower palette indices into escape sequences.

    Every slot is bold except c3, which resets attributes first.

    Args:
        palette: Resolved palette

    Returns:
        EncodedPalette
    """
    return EncodedPalette(
        a1=bold(palette.a1),
        a2=bold(palette.a2),
        a3=bold(palette.a3),
        c1=bold(palette.c1),
        c2=bold(palette.c2),
        c3=plain(palette.c3),
        m1=bold(palette.m1),
        m2=bold(palette.m2),
        m3=bold(palette.m3),
        m4=bold(palette.m4),
        m5=bold(palette.m5),
        m6=bold(palette.m6),
    )
