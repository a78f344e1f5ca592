"""
Minimal output: six short "KEY| value" lines without the ASCII design.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import sys
from typing import List, Optional, TextIO

from ..constants import CURSOR_HOME_DISTANCE, MINIMAL_INDENT, MINIMAL_RIGHT_COLUMN
from ..models import PackageStats
from .colors import RESET, EncodedPalette, cursor_back, cursor_forward


def _right_column() -> str:
    return cursor_back(CURSOR_HOME_DISTANCE) + cursor_forward(MINIMAL_RIGHT_COLUMN)


def minimal_rows(pkgs: PackageStats, colors: EncodedPalette) -> List[str]:
    """
    The six minimal lines, without the leading indent.

    Args:
        pkgs: Package statistics
        colors: Encoded palette

    Returns:
        Row strings
    """
    right = _right_column()
    return [
        f"{colors.m1}TOT| {pkgs.total}{right}{colors.m2}ORP| {pkgs.orphan}",
        f"{colors.m3}EXP| {pkgs.explicit}{right}DEP| {pkgs.dependency}",
        f"{colors.m4}NAT| {pkgs.native}{right}FOR| {pkgs.foreign}",
        f"{colors.m5}CAC| {pkgs.cache_size}",
        f"{colors.m6}-Sy| {pkgs.sync_time}",
        f"{colors.m6}-Su| {pkgs.upgrade_time}",
    ]


class MinimalRenderer:
    """Prints the package summary as a compact block."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def render(self, pkgs: PackageStats, colors: EncodedPalette) -> None:
        out = self.stream or sys.stdout
        indent = " " * MINIMAL_INDENT

        out.write("\n\n")
        for row in minimal_rows(pkgs, colors):
            out.write(indent + row.replace("\n", "") + RESET + "\n")
        out.write("\n\n")
        out.flush()
