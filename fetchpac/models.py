"""
Data models for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field, fields
from typing import Dict, Optional

from .constants import DEFAULT_DESIGN, DEFAULT_PALETTE


@dataclass(frozen=True)
class Uptime:
    """Time since boot, split into the components shown to the user."""
    total_seconds: int = 0

    @property
    def days(self) -> int:
        return self.total_seconds // 86400

    @property
    def hours(self) -> int:
        return (self.total_seconds // 3600) % 24

    @property
    def minutes(self) -> int:
        return (self.total_seconds // 60) % 60

    def format(self) -> str:
        """
        Format as e.g. "2 days, 10 hours, 3 mins".

        Days and hours are omitted when zero, minutes are always present.
        """
        parts = []
        if self.days > 0:
            parts.append(f"{self.days} days, ")
        if self.hours > 0:
            parts.append(f"{self.hours} hours, ")
        parts.append(f"{self.minutes} mins")
        return "".join(parts)


@dataclass(frozen=True)
class Identity:
    """Who and what the host is."""
    user: str = ""
    hostname: str = ""
    distribution: str = ""
    kernel: str = ""
    device: str = ""
    uptime: Uptime = field(default_factory=Uptime)


@dataclass(frozen=True)
class PackageStats:
    """Package census, cache size and latest sync/upgrade dates."""
    total: int = 0
    explicit: int = 0
    dependency: int = 0
    native: int = 0
    foreign: int = 0
    orphan: int = 0
    cache_size: str = ""
    upgrade_time: str = ""
    sync_time: str = ""


@dataclass(frozen=True)
class SystemInfo:
    """Everything probed from the host for one run."""
    identity: Identity = field(default_factory=Identity)
    packages: PackageStats = field(default_factory=PackageStats)


@dataclass(frozen=True)
class Palette:
    """Palette index for each color slot (0..15, or 16 for terminal default)."""
    a1: int = DEFAULT_PALETTE["a1"]
    a2: int = DEFAULT_PALETTE["a2"]
    a3: int = DEFAULT_PALETTE["a3"]
    c1: int = DEFAULT_PALETTE["c1"]
    c2: int = DEFAULT_PALETTE["c2"]
    c3: int = DEFAULT_PALETTE["c3"]
    m1: int = DEFAULT_PALETTE["m1"]
    m2: int = DEFAULT_PALETTE["m2"]
    m3: int = DEFAULT_PALETTE["m3"]
    m4: int = DEFAULT_PALETTE["m4"]
    m5: int = DEFAULT_PALETTE["m5"]
    m6: int = DEFAULT_PALETTE["m6"]

    def to_dict(self) -> Dict[str, int]:
        """Convert to a slot -> index dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> 'Palette':
        """Create from a slot -> index dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one run."""
    palette: Palette = field(default_factory=Palette)
    design: Optional[str] = None
    minimal: bool = False

    @property
    def design_name(self) -> str:
        """Design key used for template selection."""
        return self.design or DEFAULT_DESIGN


@dataclass(frozen=True)
class Template:
    """An ASCII design body with its declared size."""
    name: str
    height: int
    width: int
    body: str
