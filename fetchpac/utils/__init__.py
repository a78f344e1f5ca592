"""
Utils package for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from .logger import get_logger
from .distribution import DistributionDetector
from .host import HostProbe
from .pacman_runner import PacmanRunner
from .subprocess_wrapper import SecureSubprocess

__all__ = [
    "get_logger",
    "DistributionDetector",
    "HostProbe",
    "PacmanRunner",
    "SecureSubprocess",
]
