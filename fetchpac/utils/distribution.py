"""
Distribution detection utilities.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Dict, Iterable, Optional

from ..constants import FALLBACK_DISTRIBUTION, OS_RELEASE_PATHS
from .logger import get_logger
from .subprocess_wrapper import SecureSubprocess

logger = get_logger(__name__)


class DistributionDetector:
    """Detects the human-readable name of the current distribution."""

    # Keys tried in order once a release file has been read
    NAME_KEYS = ("PRETTY_NAME", "NAME", "DISTRIB_DESCRIPTION")

    def __init__(self, release_files: Iterable[str] = OS_RELEASE_PATHS) -> None:
        """
        Initialize the distribution detector.

        Args:
            release_files: Release files to try, first readable one wins
        """
        self.release_files = tuple(release_files)

    def detect_distribution(self) -> str:
        """
        Detect the current Linux distribution.

        Returns:
            Distribution name, e.g. "Arch Linux"
        """
        name = self._from_lsb_release()
        if name:
            logger.debug(f"Detected {name} via lsb_release")
            return name

        for path in self.release_files:
            data = self._read_release_file(path)
            if data is None:
                continue
            for key in self.NAME_KEYS:
                if data.get(key):
                    logger.debug(f"Detected {data[key]} via {path}")
                    return data[key]
            # Only the first readable file is consulted
            break

        logger.debug("Could not detect distribution, assuming Arch Linux")
        return FALLBACK_DISTRIBUTION

    def _from_lsb_release(self) -> str:
        output = SecureSubprocess.output(["lsb_release", "-sd"])
        return self._unquote(output.strip())

    def _read_release_file(self, path: str) -> Optional[Dict[str, str]]:
        """
        Parse a KEY=value release file.

        Args:
            path: File path

        Returns:
            Parsed fields, or None when the file cannot be read
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError):
            return None

        data = {}
        for line in content.split("\n"):
            if "=" in line and not line.strip().startswith("#"):
                key, value = line.split("=", 1)
                data[key.strip()] = self._unquote(value.strip())
        return data

    @staticmethod
    def _unquote(value: str) -> str:
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            return value[1:-1]
        return value
