"""
Secure subprocess wrapper for the helper commands used to probe the host.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import os
import shutil
import subprocess
from typing import Any, Dict, List, Optional

from ..constants import DEFAULT_COMMAND_TIMEOUT
from ..exceptions import ProbeError
from .logger import get_logger

logger = get_logger(__name__)


class SecureSubprocess:
    """Runs allow-listed helper commands without a shell and with the C locale."""

    # Helper commands fetchpac may run, and where to look for them
    ALLOWED_COMMANDS: Dict[str, Dict[str, Any]] = {
        'pacman': {
            'description': 'Package manager queries',
            'search_paths': ['/usr/bin', '/bin', '/usr/local/bin'],
        },
        'du': {
            'description': 'Package cache disk usage',
            'search_paths': ['/usr/bin', '/bin'],
        },
        'hostname': {
            'description': 'Host name lookup',
            'search_paths': ['/usr/bin', '/bin'],
        },
        'lsb_release': {
            'description': 'Distribution description',
            'search_paths': ['/usr/bin', '/usr/local/bin'],
        },
    }

    _command_path_cache: Dict[str, str] = {}

    @classmethod
    def _find_command_path(cls, command: str) -> Optional[str]:
        """
        Locate an allowed command in trusted directories, then on PATH.

        Args:
            command: Command name

        Returns:
            Absolute path or None when the command is not installed
        """
        if command in cls._command_path_cache:
            return cls._command_path_cache[command]

        spec = cls.ALLOWED_COMMANDS.get(command)
        if spec is None:
            return None

        for directory in spec['search_paths']:
            candidate = os.path.join(directory, command)
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                cls._command_path_cache[command] = candidate
                return candidate

        found = shutil.which(command)
        if found:
            cls._command_path_cache[command] = found
        return found

    @classmethod
    def clear_cache(cls) -> None:
        """Forget resolved command paths."""
        cls._command_path_cache.clear()

    @staticmethod
    def _c_locale_env() -> Dict[str, str]:
        env = os.environ.copy()
        env['LC_ALL'] = 'C'
        env['LANG'] = 'C'
        return env

    @classmethod
    def run(
        cls,
        cmd: List[str],
        timeout: Optional[int] = DEFAULT_COMMAND_TIMEOUT,
    ) -> subprocess.CompletedProcess:
        """
        Run an allowed command and capture its text output.

        Args:
            cmd: Command as list of arguments
            timeout: Timeout in seconds

        Returns:
            CompletedProcess instance

        Raises:
            ProbeError: If the command is not allowed or not installed
        """
        if not cmd:
            raise ProbeError("Empty command")

        name = os.path.basename(cmd[0])
        if name not in cls.ALLOWED_COMMANDS:
            raise ProbeError("Command not in allowed list", command=name)

        path = cls._find_command_path(name)
        if not path:
            raise ProbeError("Command not found", command=name)

        full_cmd = [path] + list(cmd[1:])
        logger.debug(f"Running command: {' '.join(full_cmd)}")

        result = subprocess.run(
            full_cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
            env=cls._c_locale_env(),
        )

        if result.returncode != 0:
            logger.debug(f"Command returned non-zero: {result.returncode}")

        return result

    @classmethod
    def output(cls, cmd: List[str], timeout: Optional[int] = DEFAULT_COMMAND_TIMEOUT) -> str:
        """
        Run a command and return its stdout, or an empty string on any failure.

        Args:
            cmd: Command as list of arguments
            timeout: Timeout in seconds

        Returns:
            Captured stdout
        """
        try:
            result = cls.run(cmd, timeout=timeout)
        except ProbeError as e:
            logger.debug(f"Skipping helper: {e}")
            return ""
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out after {timeout}s: {cmd[0]}")
            return ""
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Failed to run {cmd[0]}: {e}")
            return ""
        except ValueError as e:
            # Undecodable output
            logger.debug(f"Unusable output from {cmd[0]}: {e}")
            return ""

        return result.stdout or ""
