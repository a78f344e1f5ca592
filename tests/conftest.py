"""
Pytest configuration and shared fixtures.
"""

import pytest

from fetchpac.models import Identity, PackageStats, SystemInfo, Uptime
from fetchpac.utils.logger import reset_global_config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real HOME, config files and debug switch."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("FETCHPAC_CONFIG", raising=False)
    monkeypatch.delenv("FETCHPAC_DEBUG", raising=False)
    reset_global_config()
    yield home
    reset_global_config()


@pytest.fixture
def sample_identity():
    """Identity from the reference screenshot."""
    return Identity(
        user="sky",
        hostname="skyarch",
        distribution="Arch Linux",
        kernel="5.7.10-arch1-1",
        device="Inspiron 7590",
        uptime=Uptime(2 * 86400 + 10 * 3600 + 3 * 60),
    )


@pytest.fixture
def sample_packages():
    """Package statistics from the reference screenshot."""
    return PackageStats(
        total=903,
        explicit=203,
        dependency=700,
        native=897,
        foreign=6,
        orphan=2,
        cache_size="3.4G",
        upgrade_time="Thu 30-Jul-2020",
        sync_time="Thu 30-Jul-2020",
    )


@pytest.fixture
def sample_info(sample_identity, sample_packages):
    return SystemInfo(identity=sample_identity, packages=sample_packages)


class FakeCollector:
    """Collector returning canned records and counting calls."""

    def __init__(self, identity, packages):
        self.identity = identity
        self.packages = packages
        self.identity_calls = 0
        self.package_calls = 0

    def collect_identity(self):
        self.identity_calls += 1
        return self.identity

    def collect_packages(self):
        self.package_calls += 1
        return self.packages


@pytest.fixture
def fake_collector(sample_identity, sample_packages):
    return FakeCollector(sample_identity, sample_packages)
