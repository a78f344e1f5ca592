"""
Command line interface for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later
