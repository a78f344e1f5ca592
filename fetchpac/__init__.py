"""
fetchpac - Package Summary Panel

Prints a compact system and package summary for Arch-family hosts: identity,
package census, cache size and the latest sync/upgrade dates, next to an
ASCII design or as a minimal block.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

__version__ = "1.2.0"
__author__ = "fetchpac contributors"
