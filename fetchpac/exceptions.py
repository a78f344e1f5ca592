"""
Custom exceptions for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later


class FetchpacError(Exception):
    """Base exception for all fetchpac errors."""

    pass


class ProbeError(FetchpacError):
    """Raised when a helper command cannot be used to probe the host."""

    def __init__(self, message: str, command: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.command = command

    def __str__(self) -> str:
        if self.command:
            return f"{self.args[0]} (command: {self.command})"
        return str(self.args[0])


class ConfigurationError(FetchpacError):
    """Raised when a configuration value cannot be interpreted."""

    pass


class TemplateError(FetchpacError):
    """Raised when an ASCII template does not fit its declared size."""

    pass
