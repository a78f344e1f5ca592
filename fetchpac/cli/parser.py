"""
Command line grammar for fetchpac.

Arguments are flag clusters ("-ac", "-m", "-d") each followed by a run of
operands (tokens not starting with "-"). Every letter of a cluster reads its
operands from the start of that run, so "-ac 7 8" sets a1=c1=7 and a2=c2=8.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import Config
from ..constants import APP_NAME, APP_VERSION, ASCII_SLOTS, INFO_SLOTS, MINIMAL_SLOTS
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Letters of one cluster are applied in this order
LETTER_ORDER = "rdacm"

USAGE = f"""\
{APP_NAME} {APP_VERSION} - system and package summary for pacman hosts

Usage: {APP_NAME} [-h] [-r] [-d DESIGN] [-a A1 [A2 [A3]]] [-c C1 [C2 [C3]]] [-m [M1 .. M6]]

  -h    show this help and exit
  -r    randomize all colors
  -d    ASCII design: Arch, Manjaro, Tux, DarkArch, DarkManjaro, DarkTux
  -a    ASCII art colors a1 a2 a3
  -c    information colors c1 c2 c3
  -m    minimal output, optionally with colors m1 .. m6

Colors are palette indices 0-15, or 16 for the terminal default.
Flags can be combined ("-ac 7 8"); later flags override earlier ones.

Config files: /etc/fetchpac/fetchpac.conf, ~/.config/fetchpac/fetchpac.conf
"""


@dataclass
class FlagCluster:
    """A "-xyz" token and the operands that follow it."""
    letters: str
    operands: List[str] = field(default_factory=list)


def split_clusters(argv: Sequence[str]) -> List[FlagCluster]:
    """
    Group argv into flag clusters with their operand runs.

    Args:
        argv: Arguments without the program name

    Returns:
        Clusters in argv order; operands before the first cluster are dropped
    """
    clusters: List[FlagCluster] = []
    for token in argv:
        if token.startswith("-"):
            clusters.append(FlagCluster(letters=token.lstrip("-")))
        elif clusters:
            clusters[-1].operands.append(token)
        else:
            logger.debug(f"Ignoring stray argument: {token}")
    return clusters


class CommandLine:
    """Parsed command line, applied as the last configuration layer."""

    def __init__(self, argv: Sequence[str]) -> None:
        """
        Initialize from arguments.

        Args:
            argv: Arguments without the program name
        """
        self.clusters = split_clusters(argv)

    @property
    def help_requested(self) -> bool:
        return any("h" in cluster.letters for cluster in self.clusters)

    def apply(self, config: Config, rng: Optional[random.Random] = None) -> None:
        """
        Apply every cluster to the configuration in argv order.

        Args:
            config: Configuration to update
            rng: Random source for "-r"
        """
        for cluster in self.clusters:
            for letter in LETTER_ORDER:
                if letter in cluster.letters:
                    self._apply_letter(config, letter, cluster.operands, rng)

    @staticmethod
    def _apply_letter(
        config: Config,
        letter: str,
        operands: List[str],
        rng: Optional[random.Random],
    ) -> None:
        if letter == "r":
            config.randomize(rng)
        elif letter == "d":
            if operands:
                config.set_design(operands[0])
            else:
                logger.warning("-d given without a design name")
        elif letter == "a":
            for slot, value in zip(ASCII_SLOTS, operands):
                config.set_slot(slot, value)
        elif letter == "c":
            for slot, value in zip(INFO_SLOTS, operands):
                config.set_slot(slot, value)
        elif letter == "m":
            config.set_minimal(True)
            for slot, value in zip(MINIMAL_SLOTS, operands):
                config.set_slot(slot, value)
