"""
Layered configuration for fetchpac.

Resolution order, each layer overriding the previous one: built-in defaults,
the design-dependent color tweak, the system config file, the user config
file and finally the command line flags.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import random
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .constants import (
    DEFAULT_PALETTE, PALETTE_SLOTS, RANDOM_INDEX_MAX,
    SYSTEM_CONFIG_PATH, TERMINAL_DEFAULT_INDEX, get_user_config_path,
)
from .exceptions import ConfigurationError
from .models import Palette, Settings
from .ui.colors import clamp_index
from .utils.logger import get_logger

logger = get_logger(__name__)

# Checked in order, first match wins. The dark variants contain the base
# names, so they must come first.
DESIGN_TWEAKS: Tuple[Tuple[Tuple[str, ...], Dict[str, int]], ...] = (
    (("darkarch", "darkmanjaro", "darktux"), {"a1": 0, "a2": 1, "a3": 1, "c1": 1, "c2": 0}),
    (("manjaro",), {"a3": 2, "c1": 2, "c2": 5}),
    (("tux",), {"a1": 0, "a3": 3, "c1": 3, "c2": 4}),
)

TRUE_VALUES = {"true", "1", "yes", "on"}


def parse_palette_index(value: Any) -> int:
    """
    Interpret a palette index given as text or integer.

    Args:
        value: Raw value

    Returns:
        Integer index, not yet range checked

    Raises:
        ConfigurationError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid palette index: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid palette index: {value!r}")


def design_tweak(design: str) -> Dict[str, int]:
    """
    Color overrides implied by a design name.

    Args:
        design: Design name, matched case-insensitively as a substring

    Returns:
        Slot overrides, empty when no rule matches
    """
    lowered = design.lower()
    for patterns, overrides in DESIGN_TWEAKS:
        if any(p in lowered for p in patterns):
            return dict(overrides)
    return {}


def parse_config_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse one shell-style assignment line.

    Args:
        line: Raw line, e.g. 'a1=3' or 'export ascii_design="Tux"  # mine'

    Returns:
        (key, value) or None for blank, comment and malformed lines
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):].lstrip()
    if "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip()
    if not key.isidentifier():
        return None

    value = value.strip()
    if value[:1] in ('"', "'"):
        end = value.find(value[0], 1)
        value = value[1:end] if end != -1 else value[1:]
    else:
        comment = value.find(" #")
        if comment != -1:
            value = value[:comment]
        value = value.strip()
    return key, value


class Config:
    """Accumulates configuration layers into the settings of one run."""

    def __init__(self, distribution: Optional[str] = None) -> None:
        """
        Initialize configuration with built-in defaults.

        Args:
            distribution: Probed distribution name, used as the default design
        """
        self._slots: Dict[str, int] = dict(DEFAULT_PALETTE)
        self.design: Optional[str] = None
        self.minimal = False
        self._default_design: Optional[str] = None

        if distribution:
            # Colors follow the distribution until a design is chosen
            self._default_design = distribution
            self._apply_tweak(distribution)

    @property
    def palette(self) -> Palette:
        return Palette.from_dict(self._slots)

    def set_slot(self, slot: str, value: Any) -> None:
        """
        Set one palette slot, degrading invalid values to the terminal default.

        Args:
            slot: Slot name (a1..a3, c1..c3, m1..m6)
            value: Palette index as text or integer
        """
        if slot not in PALETTE_SLOTS:
            raise KeyError(slot)
        try:
            index = parse_palette_index(value)
        except ConfigurationError as e:
            logger.warning(f"{e} for {slot}, using terminal default")
            index = TERMINAL_DEFAULT_INDEX
        if clamp_index(index) != index:
            logger.warning(f"Palette index {index} out of range for {slot}, using terminal default")
            index = TERMINAL_DEFAULT_INDEX
        self._slots[slot] = index

    def set_design(self, design: str) -> None:
        """
        Choose an ASCII design and apply its color tweak.

        Args:
            design: Design name
        """
        self.design = design
        self._apply_tweak(design)

    def _apply_tweak(self, design: str) -> None:
        overrides = design_tweak(design)
        if overrides:
            logger.debug(f"Applying color tweak for design {design}: {overrides}")
        self._slots.update(overrides)

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """
        Set every slot to a uniform random index in 0..15.

        Args:
            rng: Random source, the module-level generator by default
        """
        source = rng or random
        for slot in PALETTE_SLOTS:
            self._slots[slot] = source.randint(0, RANDOM_INDEX_MAX)

    def set_minimal(self, value: Union[bool, str]) -> None:
        if isinstance(value, str):
            value = value.strip().lower() in TRUE_VALUES
        self.minimal = bool(value)

    def apply_assignment(self, key: str, value: str) -> None:
        """
        Apply one key=value assignment from a config file.

        Args:
            key: flag_minimal, ascii_design or a palette slot; others are ignored
            value: Raw value
        """
        if key == "flag_minimal":
            self.set_minimal(value)
        elif key == "ascii_design":
            if value:
                self.set_design(value)
        elif key in PALETTE_SLOTS:
            self.set_slot(key, value)
        else:
            logger.debug(f"Ignoring unknown config key: {key}")

    def load_file(self, path: Union[str, Path]) -> bool:
        """
        Apply a config file, assignments taking effect in file order.

        Args:
            path: Config file path

        Returns:
            True if the file was read
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                content = f.read()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Cannot read config file {path}: {e}")
            return False

        for line in content.splitlines():
            parsed = parse_config_line(line)
            if parsed is not None:
                self.apply_assignment(*parsed)

        logger.debug(f"Loaded configuration from {path}")
        return True

    def load_files(
        self,
        system_path: Union[str, Path, None] = SYSTEM_CONFIG_PATH,
        user_path: Union[str, Path, None] = None,
    ) -> None:
        """
        Apply the system config file, then the user config file.

        Args:
            system_path: System-wide file, skipped when None or missing
            user_path: Per-user file, defaults to the XDG location
        """
        if system_path is not None:
            self.load_file(system_path)
        self.load_file(user_path if user_path is not None else get_user_config_path())

    def build(self) -> Settings:
        """Freeze the accumulated layers."""
        return Settings(
            palette=self.palette,
            design=self.design or self._default_design,
            minimal=self.minimal,
        )
