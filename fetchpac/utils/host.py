"""
Host identity probes: user, host name, kernel, device and uptime.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import os
import platform
import pwd
import time

import psutil  # type: ignore[import-untyped]

from ..constants import (
    DMI_PRODUCT_NAME_PATH, DMI_PRODUCT_VERSION_PATH,
    PROC_UPTIME_PATH, UNKNOWN_DEVICE,
)
from ..models import Uptime
from .logger import get_logger
from .subprocess_wrapper import SecureSubprocess

logger = get_logger(__name__)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read().strip()


class HostProbe:
    """Reads the identity of the host, falling back step by step."""

    def __init__(
        self,
        uptime_path: str = PROC_UPTIME_PATH,
        product_name_path: str = DMI_PRODUCT_NAME_PATH,
        product_version_path: str = DMI_PRODUCT_VERSION_PATH,
    ) -> None:
        self.uptime_path = uptime_path
        self.product_name_path = product_name_path
        self.product_version_path = product_version_path

    def get_user(self) -> str:
        """USER, then the password database, then the basename of HOME."""
        user = os.environ.get("USER", "").strip()
        if user:
            return user

        try:
            return pwd.getpwuid(os.getuid()).pw_name
        except KeyError:
            logger.debug("No passwd entry for current uid")

        home = os.environ.get("HOME", "").rstrip("/")
        return os.path.basename(home)

    def get_hostname(self) -> str:
        """The hostname helper, then HOSTNAME, then the node name."""
        name = SecureSubprocess.output(["hostname"]).strip()
        if name:
            return name

        name = os.environ.get("HOSTNAME", "").strip()
        if name:
            return name

        return platform.node()

    def get_kernel(self) -> str:
        return platform.release()

    def get_device(self) -> str:
        """DMI product name and version, or "Unknown" when neither exists."""
        parts = []
        found = False
        for path in (self.product_name_path, self.product_version_path):
            try:
                parts.append(_read_text(path))
                found = True
            except OSError:
                continue

        if not found:
            return UNKNOWN_DEVICE
        return " ".join(p for p in parts if p).strip() or UNKNOWN_DEVICE

    def get_uptime(self) -> Uptime:
        """
        Time since boot.

        /proc/uptime is preferred; otherwise the boot time reported by psutil
        is subtracted from the current epoch.
        """
        try:
            first = _read_text(self.uptime_path).split()[0]
            return Uptime(int(float(first)))
        except (OSError, IndexError, ValueError) as e:
            logger.debug(f"Cannot read {self.uptime_path}: {e}")

        try:
            seconds = int(time.time() - psutil.boot_time())
        except (OSError, RuntimeError, psutil.Error) as e:
            logger.debug(f"Cannot determine boot time: {e}")
            return Uptime(0)
        return Uptime(max(seconds, 0))
