"""
Two-column panel: the ASCII design on the left, information on the right.

The design is printed first; the cursor is then moved back up by the
template height and every information row is pushed right by the template
width plus a gap. This only lines up when the template's declared height
and width match its body.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import sys
from typing import List, Optional, Sequence, TextIO

from ..constants import CURSOR_HOME_DISTANCE, TEXT_GAP
from ..models import SystemInfo, Template
from .ascii import substitute_tokens
from .colors import (
    RESET, SGR_TABLE, EncodedPalette,
    cursor_back, cursor_forward, cursor_up,
)

TAB_SIZE = 8
BLOCK = "█" * 3

PACKAGE_LABELS = (
    ("Total (T=E+D=F+N):", "total"),
    ("Explicit (E):", "explicit"),
    ("Dependency (D):", "dependency"),
    ("Native (N):", "native"),
    ("Foreign (F):", "foreign"),
    ("Orphan (O):", "orphan"),
)


def _next_tab_stop(column: int) -> int:
    return (column // TAB_SIZE + 1) * TAB_SIZE


def tab_align(labels: Sequence[str], start_column: int) -> List[str]:
    """
    Tabs to put after each label so that the values share one tab stop.

    Args:
        labels: Labels printed from start_column
        start_column: Terminal column the labels start at

    Returns:
        One string of tabs per label
    """
    target = _next_tab_stop(start_column + max(len(label) for label in labels))
    result = []
    for label in labels:
        column = start_column + len(label)
        tabs = 0
        while column < target:
            column = _next_tab_stop(column)
            tabs += 1
        result.append("\t" * tabs)
    return result


def color_block_rows() -> List[str]:
    """Two rows of eight blocks: the normal and the bright colors."""
    normal = "".join(f"{code}{BLOCK}" for code in SGR_TABLE[0:8])
    bright = "".join(f"{code}{BLOCK}" for code in SGR_TABLE[8:16])
    return [normal + RESET, bright + RESET]


def info_rows(info: SystemInfo, colors: EncodedPalette, start_column: int) -> List[str]:
    """
    Information rows for the right-hand column, without positioning.

    Args:
        info: Probed system information
        colors: Encoded palette
        start_column: Column the rows will be printed at (for tab alignment)

    Returns:
        Row strings
    """
    ident = info.identity
    pkgs = info.packages

    def labeled(label: str, value: str, sep: str = " ") -> str:
        return f"{colors.c2}{label}{sep}{colors.c3}{value}"

    rows = [
        f"{colors.c1}--- {ident.user}@{ident.hostname} ---",
        labeled("OS:", ident.distribution),
        labeled("Kernel:", ident.kernel),
        labeled("Device:", ident.device),
        labeled("Uptime:", ident.uptime.format()),
        "",
        f"{colors.c1}----- Packages -----",
    ]

    tabs = tab_align([label for label, _ in PACKAGE_LABELS], start_column)
    for (label, attr), sep in zip(PACKAGE_LABELS, tabs):
        rows.append(labeled(label, str(getattr(pkgs, attr)), sep))

    rows.extend([
        "",
        labeled("Cache size:", pkgs.cache_size),
        labeled("Latest -Sy:", pkgs.sync_time),
        labeled("Latest -Su:", pkgs.upgrade_time),
    ])
    return rows


class PanelRenderer:
    """Prints the ASCII design with the information column beside it."""

    def __init__(self, stream: Optional[TextIO] = None, gap: int = TEXT_GAP) -> None:
        """
        Initialize the renderer.

        Args:
            stream: Output stream, stdout by default
            gap: Columns between the design and the information
        """
        self.stream = stream
        self.gap = gap

    def render(self, info: SystemInfo, colors: EncodedPalette, template: Template) -> None:
        """
        Write the panel.

        Args:
            info: Probed system information
            colors: Encoded palette
            template: ASCII design
        """
        out = self.stream or sys.stdout
        text_padding = template.width + self.gap

        out.write(substitute_tokens(template.body, colors.template_tokens()))
        out.write(RESET + "\n")

        out.write(cursor_up(template.height) + cursor_back(CURSOR_HOME_DISTANCE))

        rows = info_rows(info, colors, text_padding)
        rows.append("")
        rows.extend(color_block_rows())
        for row in rows:
            out.write(cursor_forward(text_padding) + row.replace("\n", "") + "\n")

        out.write(RESET + "\n\n")
        out.flush()
