"""
Tests for the CLI orchestration and entry point.
"""

import io
import random
import re
from dataclasses import replace
from unittest.mock import Mock, patch

import pytest

from fetchpac.cli.main import FetchpacCLI
from fetchpac.cli.parser import CommandLine
from fetchpac.exceptions import FetchpacError
from fetchpac.main import main
from fetchpac.ui.colors import strip_ansi

CURSOR_UP = re.compile(r"\x1b\[(\d+)A")


@pytest.fixture
def make_cli(fake_collector, tmp_path):
    """Build a CLI writing to a buffer with config files under tmp_path."""

    def factory(collector=None, system_text=None, user_text=None, rng=None):
        system = tmp_path / "system.conf"
        user = tmp_path / "user.conf"
        if system_text is not None:
            system.write_text(system_text)
        if user_text is not None:
            user.write_text(user_text)
        stream = io.StringIO()
        cli = FetchpacCLI(
            collector=collector or fake_collector,
            stream=stream,
            system_config_path=system,
            user_config_path=user,
            rng=rng,
        )
        return cli, stream

    return factory


class TestFetchpacCLI:
    """Test the probe, configure, render sequence."""

    def test_panel(self, make_cli, fake_collector):
        cli, stream = make_cli()

        assert cli.run([]) == 0

        output = stream.getvalue()
        assert CURSOR_UP.findall(output) == ["21"]
        assert "Total (T=E+D=F+N):\t903" in strip_ansi(output)
        assert fake_collector.identity_calls == 1
        assert fake_collector.package_calls == 1

    def test_minimal(self, make_cli, fake_collector):
        cli, stream = make_cli()

        assert cli.run(["-m"]) == 0

        plain = strip_ansi(stream.getvalue())
        assert "    TOT| 903" in plain
        assert "    CAC| 3.4G" in plain
        assert not CURSOR_UP.search(stream.getvalue())
        assert "Total (T=E+D=F+N)" not in plain
        assert fake_collector.package_calls == 1

    def test_minimal_from_config_file(self, make_cli):
        cli, stream = make_cli(user_text="flag_minimal=true\n")

        cli.run([])
        assert "-Sy| Thu 30-Jul-2020" in strip_ansi(stream.getvalue())

    def test_help(self, make_cli):
        collector = Mock()
        cli, stream = make_cli(collector=collector)

        assert cli.run(["-rh"]) == 0
        assert "Usage: fetchpac" in stream.getvalue()
        collector.collect_identity.assert_not_called()
        collector.collect_packages.assert_not_called()

    def test_design_follows_distribution(self, make_cli, fake_collector):
        fake_collector.identity = replace(fake_collector.identity, distribution="Manjaro Linux")
        cli, stream = make_cli()

        cli.run([])
        assert "##########" in stream.getvalue()

    def test_design_flag_selects_template(self, make_cli):
        cli, stream = make_cli()

        cli.run(["-d", "DarkTux"])
        assert "_nnnn_" in stream.getvalue()

    def test_layer_order(self, make_cli, sample_identity):
        """defaults < system file < user file < command line"""
        cli, _ = make_cli(system_text="a1=1\na2=1\na3=1\n", user_text="a2=2\na3=2\n")

        settings = cli.resolve_settings(CommandLine(["-a", "9"]), sample_identity)
        palette = settings.palette
        assert (palette.a1, palette.a2, palette.a3) == (9, 2, 2)

    def test_randomize_uses_rng(self, make_cli, sample_identity):
        cli, _ = make_cli(rng=random.Random(5))
        first = cli.resolve_settings(CommandLine(["-r"]), sample_identity)

        cli.rng = random.Random(5)
        second = cli.resolve_settings(CommandLine(["-r"]), sample_identity)
        assert first == second


class TestMain:
    """Test exit codes of the entry point."""

    @patch('fetchpac.main.FetchpacCLI')
    def test_success(self, mock_cli):
        mock_cli.return_value.run.return_value = 0
        assert main(["-m"]) == 0
        mock_cli.return_value.run.assert_called_once_with(["-m"])

    @patch('fetchpac.main.FetchpacCLI')
    def test_write_error_is_fatal(self, mock_cli, capsys):
        mock_cli.return_value.run.side_effect = BrokenPipeError("closed")
        assert main([]) == 1
        assert "Error" in capsys.readouterr().err

    @patch('fetchpac.main.FetchpacCLI')
    def test_application_error(self, mock_cli):
        mock_cli.return_value.run.side_effect = FetchpacError("boom")
        assert main([]) == 1

    @patch('fetchpac.main.FetchpacCLI')
    def test_interrupt_resets_terminal(self, mock_cli, capsys):
        mock_cli.return_value.run.side_effect = KeyboardInterrupt
        assert main([]) == 130
        assert "\x1b[0m" in capsys.readouterr().out
