"""
Application constants for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
from pathlib import Path

# Application info
APP_NAME = "fetchpac"
APP_VERSION = "1.2.0"

# Environment switches
DEBUG_ENV_VAR = "FETCHPAC_DEBUG"
CONFIG_ENV_VAR = "FETCHPAC_CONFIG"

# Palette
TERMINAL_DEFAULT_INDEX = 16
RANDOM_INDEX_MAX = 15
ASCII_SLOTS = ("a1", "a2", "a3")
INFO_SLOTS = ("c1", "c2", "c3")
MINIMAL_SLOTS = ("m1", "m2", "m3", "m4", "m5", "m6")
PALETTE_SLOTS = ASCII_SLOTS + INFO_SLOTS + MINIMAL_SLOTS

DEFAULT_PALETTE = {
    "a1": 3,   # yellow
    "a2": 12,  # light blue
    "a3": 6,   # cyan
    "c1": 6,
    "c2": 2,
    "c3": TERMINAL_DEFAULT_INDEX,
    "m1": 6,
    "m2": 1,
    "m3": 4,
    "m4": 5,
    "m5": 3,
    "m6": 2,
}

DEFAULT_DESIGN = "Arch"
FALLBACK_DISTRIBUTION = "Arch Linux"
UNKNOWN_DEVICE = "Unknown"

# Layout
TEXT_GAP = 1
MINIMAL_INDENT = 4
MINIMAL_RIGHT_COLUMN = 14
# Large enough to reach column 0 on any terminal
CURSOR_HOME_DISTANCE = 9999

# Pacman
PACMAN_QUERIES = {
    "total": "-Qq",
    "explicit": "-Qeq",
    "dependency": "-Qdq",
    "native": "-Qnq",
    "foreign": "-Qmq",
    "orphan": "-Qdtq",
}
PACMAN_CACHE_DIR = "/var/cache/pacman/pkg/"
PACMAN_LOG_PATH = "/var/log/pacman.log"
UPGRADE_MARKER = "starting full system upgrade"
SYNC_MARKER = "synchronizing package lists"
LOG_DATE_FORMAT = "%a %d-%b-%Y"
LOG_READ_BLOCK_SIZE = 64 * 1024

# Subprocess timeouts (seconds)
DEFAULT_COMMAND_TIMEOUT = 30

# Host sources
PROC_UPTIME_PATH = "/proc/uptime"
DMI_PRODUCT_NAME_PATH = "/sys/devices/virtual/dmi/id/product_name"
DMI_PRODUCT_VERSION_PATH = "/sys/devices/virtual/dmi/id/product_version"
OS_RELEASE_PATHS = (
    "/etc/lsb-release",
    "/usr/lib/os-release",
    "/etc/os-release",
)

# Config files
SYSTEM_CONFIG_PATH = Path("/etc/fetchpac/fetchpac.conf")
USER_CONFIG_NAME = "fetchpac.conf"


def get_config_dir() -> Path:
    """Get the per-user configuration directory path under $HOME."""
    return Path(os.environ.get("HOME", str(Path.home()))) / ".config" / "fetchpac"


def get_user_config_path() -> Path:
    """
    Get the per-user configuration file path.

    FETCHPAC_CONFIG wins when set. A file under XDG_CONFIG_HOME is used when it
    exists, otherwise the $HOME/.config location.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        candidate = Path(xdg) / "fetchpac" / USER_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return get_config_dir() / USER_CONFIG_NAME
