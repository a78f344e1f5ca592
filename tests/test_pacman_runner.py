"""
Tests for the PacmanRunner utility.
"""

from unittest.mock import patch

import pytest

from fetchpac.utils.pacman_runner import (
    PacmanRunner, format_log_timestamp, read_lines_reversed,
)

LOG = """\
[2020-07-28T10:00:00+0200] [PACMAN] Running 'pacman -Syu'
[2020-07-28T10:00:00+0200] [PACMAN] synchronizing package lists
[2020-07-28T10:00:01+0200] [PACMAN] starting full system upgrade
[2020-07-30T09:00:00+0200] [PACMAN] Running 'pacman -Syu'
[2020-07-30T09:00:00+0200] [PACMAN] synchronizing package lists
[2020-07-30T09:00:05+0200] [PACMAN] starting full system upgrade
[2020-07-30T09:01:00+0200] [ALPM] upgraded linux (5.7.9.arch1-1 -> 5.7.10.arch1-1)
[2020-07-31T08:00:00+0200] [PACMAN] Running 'pacman -Sy'
[2020-07-31T08:00:00+0200] [PACMAN] synchronizing package lists
"""


@pytest.fixture
def pacman_log(tmp_path):
    path = tmp_path / "pacman.log"
    path.write_text(LOG)
    return path


class TestPackageCounts:
    """Test pacman census queries."""

    @patch('fetchpac.utils.pacman_runner.SecureSubprocess.output')
    def test_count_lines(self, mock_output):
        mock_output.return_value = "linux\npacman\nvim\n"

        assert PacmanRunner.count_packages("-Qq") == 3
        mock_output.assert_called_once_with(["pacman", "-Qq"])

    @patch('fetchpac.utils.pacman_runner.SecureSubprocess.output')
    def test_no_output_counts_zero(self, mock_output):
        """pacman -Qdtq exits 1 with no output when there are no orphans."""
        mock_output.return_value = ""
        assert PacmanRunner.count_packages("-Qdtq") == 0

    @patch('fetchpac.utils.pacman_runner.SecureSubprocess.output')
    def test_all_queries(self, mock_output):
        lines = {"-Qq": 5, "-Qeq": 2, "-Qdq": 3, "-Qnq": 4, "-Qmq": 1, "-Qdtq": 0}
        mock_output.side_effect = lambda cmd: "pkg\n" * lines[cmd[1]]

        counts = PacmanRunner().get_package_counts()

        assert counts == {
            "total": 5, "explicit": 2, "dependency": 3,
            "native": 4, "foreign": 1, "orphan": 0,
        }


class TestCacheSize:
    """Test package cache size lookup."""

    @patch('fetchpac.utils.pacman_runner.SecureSubprocess.output')
    def test_first_field(self, mock_output):
        mock_output.return_value = "3.4G\t/var/cache/pacman/pkg/\n"

        assert PacmanRunner().get_cache_size() == "3.4G"
        mock_output.assert_called_once_with(["du", "-sh", "/var/cache/pacman/pkg/"])

    @patch('fetchpac.utils.pacman_runner.SecureSubprocess.output')
    def test_du_missing(self, mock_output):
        mock_output.return_value = ""
        assert PacmanRunner().get_cache_size() == ""


class TestLogScan:
    """Test latest sync/upgrade lookup in the pacman log."""

    def test_latest_times(self, pacman_log):
        upgrade, sync = PacmanRunner(log_path=str(pacman_log)).get_latest_times()

        assert upgrade == "Thu 30-Jul-2020"
        assert sync == "Fri 31-Jul-2020"

    def test_case_insensitive(self, tmp_path):
        path = tmp_path / "pacman.log"
        path.write_text("[2020-07-30T09:00:05+0200] [PACMAN] Starting Full System Upgrade\n")

        upgrade, sync = PacmanRunner(log_path=str(path)).get_latest_times()
        assert upgrade == "Thu 30-Jul-2020"
        assert sync == ""

    def test_missing_log(self, tmp_path):
        runner = PacmanRunner(log_path=str(tmp_path / "absent.log"))
        assert runner.get_latest_times() == ("", "")

    def test_malformed_timestamp(self, tmp_path):
        path = tmp_path / "pacman.log"
        path.write_text("[yesterday] [PACMAN] synchronizing package lists\n")

        assert PacmanRunner(log_path=str(path)).get_latest_times() == ("", "")


class TestTimestamps:
    """Test log timestamp reformatting."""

    def test_iso_timestamp(self):
        line = "[2020-07-30T09:00:05+0200] [PACMAN] starting full system upgrade"
        assert format_log_timestamp(line) == "Thu 30-Jul-2020"

    def test_legacy_timestamp(self):
        line = "[2019-03-01 10:12] [PACMAN] starting full system upgrade"
        assert format_log_timestamp(line) == "Fri 01-Mar-2019"

    @pytest.mark.parametrize("line", ["", "[", "no bracket at all", "[2020-13-45T99:00:00+0200] x"])
    def test_malformed(self, line):
        assert format_log_timestamp(line) == ""


class TestReadLinesReversed:
    """Test the reverse line reader."""

    @pytest.mark.parametrize("block_size", [1, 5, 64, 4096])
    def test_matches_reversed_lines(self, pacman_log, block_size):
        expected = list(reversed(LOG.splitlines()))
        assert list(read_lines_reversed(str(pacman_log), block_size)) == expected

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "log"
        path.write_bytes(b"first\r\nsecond\nthird")
        assert list(read_lines_reversed(str(path), 4)) == ["third", "second", "first"]

    def test_ignores_appended_lines(self, tmp_path):
        path = tmp_path / "log"
        path.write_text("one\ntwo\n")

        lines = read_lines_reversed(str(path), 4)
        first = next(lines)
        with open(path, "a") as f:
            f.write("three\n")

        assert [first] + list(lines) == ["two", "one"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "log"
        path.write_text("")
        assert list(read_lines_reversed(str(path))) == []
