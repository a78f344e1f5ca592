"""
Terminal rendering for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later
