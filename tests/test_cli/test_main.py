# SPDX-License-Identifier: MIT
"""Tests for the forkver command line."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from forkver.cli.main import cli


class TestParseCommand:
    """Tests for forkver parse."""

    def test_parse_text(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test the text output."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2.0rc5-UNIQUE3.2b102"])

        assert result.exit_code == 0
        assert "v1.2.0rc5-UNIQUE3.2b102" in result.output
        assert "release-candidate" in result.output
        assert "UNIQUE: 3.2 (beta, build 102)" in result.output

    def test_parse_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test the JSON output."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "parse", "--json", "1.2.0-UNIQUE3.2a3-SNAPSHOT"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["numbers"] == [1, 2, 0]
        assert data["stage"] == "stable"
        assert data["build"] == 1
        assert data["subversions"] == [
            {
                "identifier": "UNIQUE",
                "numbers": [3, 2],
                "stage": "alpha",
                "build": 3,
                "snapshot": True,
            }
        ]

    def test_parse_json_from_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that the output format can come from [tool.forkver]."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "parse", "1.2.0-b5"])

        assert result.exit_code == 0
        assert json.loads(result.output)["build"] == 5

    def test_text_overrides_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that --text wins over the configured format."""
        result = cli_runner.invoke(cli, ["-C", str(temp_project), "parse", "--text", "1.2.0"])

        assert result.exit_code == 0
        assert "Version:  v1.2.0" in result.output

    def test_parse_invalid(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid version exits with an error."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2.x"])

        assert result.exit_code == 1
        assert "Invalid version input" in result.output

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that an invalid [tool.forkver] table is reported."""
        (tmp_path / "pyproject.toml").write_text('[tool.forkver]\noutput = "xml"\n')
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "parse", "1.2.0"])

        assert result.exit_code != 0


class TestRenderCommand:
    """Tests for forkver render."""

    def test_render(self, cli_runner: CliRunner) -> None:
        """Test printing the canonical form."""
        result = cli_runner.invoke(cli, ["render", "1.2.0-b5-SNAPSHOT"])

        assert result.exit_code == 0
        assert result.output.strip() == "v1.2.0-b5-SNAPSHOT"

    def test_render_plain(self, cli_runner: CliRunner) -> None:
        """Test printing only the root numbers."""
        result = cli_runner.invoke(cli, ["render", "--plain", "1.2.0rc5-UNIQUE3.2"])

        assert result.exit_code == 0
        assert result.output.strip() == "v1.2.0"


class TestCheckCommand:
    """Tests for forkver check."""

    def test_all_valid(self, cli_runner: CliRunner) -> None:
        """Test checking valid versions."""
        result = cli_runner.invoke(cli, ["check", "1.2.0", "1.2.0-b5-SNAPSHOT"])

        assert result.exit_code == 0
        assert "1.2.0: valid" in result.output

    def test_some_invalid(self, cli_runner: CliRunner) -> None:
        """Test that any invalid version fails the check."""
        result = cli_runner.invoke(cli, ["check", "1.2.0", "1.2.0b1-SNAPSHOT", "1.2.x"])

        assert result.exit_code == 1
        assert "1.2.0: valid" in result.output
        assert "1.2.0b1-SNAPSHOT:" in result.output


class TestCompareCommand:
    """Tests for forkver compare."""

    def test_less(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test an ordered comparison."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "1.2.0-UNIQUE3.2", "1.2.0-UNIQUE3.3"]
        )

        assert result.exit_code == 0
        assert "v1.2.0-UNIQUE3.2 < v1.2.0-UNIQUE3.3" in result.output

    def test_equal(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test equal versions."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "v1.0", "1.0"])

        assert result.exit_code == 0
        assert "v1.0 == v1.0" in result.output

    def test_greater(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test a greater version."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0-b3", "1.0-b2"])

        assert result.exit_code == 0
        assert "v1.0-b3 > v1.0-b2" in result.output

    def test_ignore_build(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that --ignore-build treats builds as equal."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "--ignore-build", "1.0-b3", "1.0-b2"]
        )

        assert result.exit_code == 0
        assert "==" in result.output

    def test_fork_mismatch(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that comparing different forks exits with 2."""
        result = cli_runner.invoke(
            cli, ["-C", str(tmp_path), "compare", "1.2.0-UNIQUE3.2", "1.2.0-OTHER3.3"]
        )

        assert result.exit_code == 2
        assert "not the same" in result.output

    def test_no_full_match(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that --no-full-match compares only the roots."""
        result = cli_runner.invoke(
            cli,
            ["-C", str(tmp_path), "compare", "--no-full-match", "1.2.0-UNIQUE3.2", "1.3.0-OTHER1"],
        )

        assert result.exit_code == 0
        assert "<" in result.output

    def test_full_match_from_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test that full-match = false in the config compares only the roots."""
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "compare", "1.2.0-UNIQUE3.2", "1.2.0-OTHER3.3"]
        )

        assert result.exit_code == 0
        assert "==" in result.output


class TestForkCommand:
    """Tests for forkver fork."""

    def test_same_fork(self, cli_runner: CliRunner) -> None:
        """Test two versions of one fork."""
        result = cli_runner.invoke(cli, ["fork", "1.2.0-UNIQUE3.2", "1.2.0-UNIQUE4.0"])

        assert result.exit_code == 0
        assert "same fork" in result.output

    def test_different_forks(self, cli_runner: CliRunner) -> None:
        """Test two versions of different forks."""
        result = cli_runner.invoke(cli, ["fork", "1.2.0-UNIQUE3.2", "1.2.0-OTHER3.2"])

        assert result.exit_code == 1
        assert "different forks" in result.output


class TestSortCommand:
    """Tests for forkver sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        """Test sorting versions."""
        result = cli_runner.invoke(cli, ["sort", "1.2.0-b5", "1.1.0", "1.2.0rc2"])

        assert result.exit_code == 0
        assert result.output.split() == ["v1.1.0", "v1.2.0rc2", "v1.2.0-b5"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        """Test sorting from newest to oldest."""
        result = cli_runner.invoke(cli, ["sort", "--reverse", "1.0", "2.0", "1.5"])

        assert result.exit_code == 0
        assert result.output.split() == ["v2.0", "v1.5", "v1.0"]

    def test_sort_invalid(self, cli_runner: CliRunner) -> None:
        """Test that an invalid version stops the sort."""
        result = cli_runner.invoke(cli, ["sort", "1.0", "nope"])

        assert result.exit_code == 1
