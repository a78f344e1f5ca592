"""
Collects host and package information for one run.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Optional

from .models import Identity, PackageStats
from .utils.distribution import DistributionDetector
from .utils.host import HostProbe
from .utils.logger import get_logger
from .utils.pacman_runner import PacmanRunner

logger = get_logger(__name__)


class InfoCollector:
    """Runs the probes and packs their results into immutable records."""

    def __init__(
        self,
        host: Optional[HostProbe] = None,
        distribution: Optional[DistributionDetector] = None,
        pacman: Optional[PacmanRunner] = None,
    ) -> None:
        """
        Initialize the collector.

        Args:
            host: Identity probe
            distribution: Distribution detector
            pacman: Pacman query runner
        """
        self.host = host or HostProbe()
        self.distribution = distribution or DistributionDetector()
        self.pacman = pacman or PacmanRunner()

    def collect_identity(self) -> Identity:
        """Probe user, host, distribution, kernel, device and uptime."""
        logger.debug("Probing host identity...")
        return Identity(
            user=self.host.get_user(),
            hostname=self.host.get_hostname(),
            distribution=self.distribution.detect_distribution(),
            kernel=self.host.get_kernel(),
            device=self.host.get_device(),
            uptime=self.host.get_uptime(),
        )

    def collect_packages(self) -> PackageStats:
        """Probe package counts, cache size and the latest sync/upgrade dates."""
        logger.debug("Querying pacman...")
        counts = self.pacman.get_package_counts()
        upgrade, sync = self.pacman.get_latest_times()
        return PackageStats(
            cache_size=self.pacman.get_cache_size(),
            upgrade_time=upgrade,
            sync_time=sync,
            **counts,
        )
