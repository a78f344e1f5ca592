"""
Orchestrates one fetchpac run: probe, configure, render.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import random
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from ..collector import InfoCollector
from ..config import Config
from ..constants import SYSTEM_CONFIG_PATH
from ..models import Identity, Settings, SystemInfo
from ..ui.ascii import DEFAULT_REGISTRY, AsciiRegistry
from ..ui.colors import encode_palette
from ..ui.minimal import MinimalRenderer
from ..ui.renderer import PanelRenderer
from ..utils.logger import get_logger
from .parser import USAGE, CommandLine

logger = get_logger(__name__)


class FetchpacCLI:
    """Main CLI application class."""

    def __init__(
        self,
        collector: Optional[InfoCollector] = None,
        stream: Optional[TextIO] = None,
        system_config_path: Union[str, Path, None] = SYSTEM_CONFIG_PATH,
        user_config_path: Union[str, Path, None] = None,
        registry: Optional[AsciiRegistry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the CLI.

        Args:
            collector: Probe runner
            stream: Output stream, stdout by default
            system_config_path: System config file, None to skip
            user_config_path: User config file, XDG location by default
            registry: ASCII design registry
            rng: Random source for "-r"
        """
        self.collector = collector or InfoCollector()
        self.stream = stream
        self.system_config_path = system_config_path
        self.user_config_path = user_config_path
        self.registry = registry or DEFAULT_REGISTRY
        self.rng = rng

    def resolve_settings(self, command_line: CommandLine, identity: Identity) -> Settings:
        """
        Fold defaults, design tweak, config files and flags into settings.

        Args:
            command_line: Parsed arguments
            identity: Probed identity, its distribution is the default design

        Returns:
            Settings
        """
        config = Config(distribution=identity.distribution)
        config.load_files(self.system_config_path, self.user_config_path)
        command_line.apply(config, self.rng)
        settings = config.build()
        logger.debug(f"Resolved settings: {settings}")
        return settings

    def run(self, argv: Sequence[str]) -> int:
        """
        Run the CLI with given arguments.

        Args:
            argv: Arguments without the program name

        Returns:
            Exit code
        """
        out = self.stream or sys.stdout
        command_line = CommandLine(argv)
        if command_line.help_requested:
            out.write(USAGE)
            out.flush()
            return 0

        identity = self.collector.collect_identity()
        settings = self.resolve_settings(command_line, identity)
        colors = encode_palette(settings.palette)

        if settings.minimal:
            packages = self.collector.collect_packages()
            MinimalRenderer(out).render(packages, colors)
            return 0

        template = self.registry.select(settings.design_name)
        packages = self.collector.collect_packages()
        info = SystemInfo(identity=identity, packages=packages)
        PanelRenderer(out).render(info, colors, template)
        return 0
