"""
Shared utility for querying pacman, its package cache and its log.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
from datetime import datetime
from typing import Dict, Iterator, Optional, Tuple

from ..constants import (
    LOG_DATE_FORMAT, LOG_READ_BLOCK_SIZE, PACMAN_CACHE_DIR,
    PACMAN_LOG_PATH, PACMAN_QUERIES, SYNC_MARKER, UPGRADE_MARKER,
)
from .logger import get_logger
from .subprocess_wrapper import SecureSubprocess

logger = get_logger(__name__)

# "[2020-07-30T12:34:56+0200] [PACMAN] ..." carries a 24 character timestamp
ISO_TIMESTAMP_WIDTH = 24
ISO_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
# Logs written before pacman 5.2 use "[2019-03-01 10:12] ..."
LEGACY_TIMESTAMP_WIDTH = 16
LEGACY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def read_lines_reversed(path: str, block_size: int = LOG_READ_BLOCK_SIZE) -> Iterator[str]:
    """
    Yield the lines of a file from last to first.

    Only the bytes present when the file is opened are read, so lines
    appended while scanning are not seen.

    Args:
        path: File to read
        block_size: Bytes read per step

    Yields:
        Decoded lines without their line terminator
    """
    with open(path, "rb") as f:
        f.seek(0, os.SEEK_END)
        position = f.tell()
        remainder = b""

        while position > 0:
            step = min(block_size, position)
            position -= step
            f.seek(position)
            chunk = f.read(step) + remainder
            lines = chunk.split(b"\n")
            # The first piece may continue in the previous block
            remainder = lines.pop(0)
            for raw in reversed(lines):
                if raw:
                    yield raw.decode("utf-8", errors="replace").rstrip("\r")

        if remainder:
            yield remainder.decode("utf-8", errors="replace").rstrip("\r")


def format_log_timestamp(line: str) -> str:
    """
    Reformat the timestamp at the start of a pacman log line.

    Args:
        line: Log line starting with "[timestamp]"

    Returns:
        Date as "Thu 30-Jul-2020", or "" when the timestamp is malformed
    """
    window = line[1:1 + ISO_TIMESTAMP_WIDTH]
    try:
        return datetime.strptime(window, ISO_TIMESTAMP_FORMAT).strftime(LOG_DATE_FORMAT)
    except ValueError:
        pass

    if line[1 + LEGACY_TIMESTAMP_WIDTH:2 + LEGACY_TIMESTAMP_WIDTH] == "]":
        window = line[1:1 + LEGACY_TIMESTAMP_WIDTH]
        try:
            return datetime.strptime(window, LEGACY_TIMESTAMP_FORMAT).strftime(LOG_DATE_FORMAT)
        except ValueError:
            pass

    logger.debug(f"Malformed log timestamp: {line[:32]!r}")
    return ""


class PacmanRunner:
    """Handles pacman queries and pacman log scanning."""

    def __init__(self, log_path: str = PACMAN_LOG_PATH, cache_dir: str = PACMAN_CACHE_DIR) -> None:
        self.log_path = log_path
        self.cache_dir = cache_dir

    @staticmethod
    def count_packages(flag: str) -> int:
        """
        Count the lines printed by a quiet pacman query.

        Args:
            flag: Query flag such as "-Qeq"

        Returns:
            Number of packages, 0 when pacman is unavailable
        """
        output = SecureSubprocess.output(["pacman", flag])
        return sum(1 for line in output.splitlines() if line.strip())

    def get_package_counts(self) -> Dict[str, int]:
        """Run every census query, keyed total/explicit/dependency/native/foreign/orphan."""
        return {name: self.count_packages(flag) for name, flag in PACMAN_QUERIES.items()}

    def get_cache_size(self) -> str:
        """
        Human readable size of the package cache as reported by du.

        Returns:
            Size such as "3.4G", or "" when du fails
        """
        output = SecureSubprocess.output(["du", "-sh", self.cache_dir])
        fields = output.split()
        return fields[0] if fields else ""

    def get_latest_times(self) -> Tuple[str, str]:
        """
        Find the latest full system upgrade and package list sync.

        Returns:
            (upgrade_time, sync_time), each "" when not found
        """
        upgrade_line: Optional[str] = None
        sync_line: Optional[str] = None

        try:
            for line in read_lines_reversed(self.log_path):
                lowered = line.lower()
                if upgrade_line is None and UPGRADE_MARKER in lowered:
                    upgrade_line = line
                elif sync_line is None and SYNC_MARKER in lowered:
                    sync_line = line
                if upgrade_line is not None and sync_line is not None:
                    break
        except OSError as e:
            logger.debug(f"Cannot read {self.log_path}: {e}")

        upgrade = format_log_timestamp(upgrade_line) if upgrade_line else ""
        sync = format_log_timestamp(sync_line) if sync_line else ""
        return upgrade, sync
