"""
Tests for the `txtype` click CLI.
"""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from config import AppConfig
from ethereum_tx_forks import get_forks
from ethereum_tx_logging import UTCFormatter

from ..txtype import txtype


@pytest.fixture
def runner():
    """Provides a Click CliRunner for invoking command-line interfaces."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each command in an empty directory and restore the root logger afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(AppConfig().ENV_FILE_VARIABLE, raising=False)
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    yield tmp_path
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, UTCFormatter):
            root_logger.removeHandler(handler)
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


def test_txtype_help(runner):
    """
    Test the `--help` option of the `txtype` command group.
    """
    result = runner.invoke(txtype, ["--help"])
    assert result.exit_code == 0
    for command in ("raw", "fields", "forks"):
        assert command in result.output


class TestRaw:
    """Test the `raw` command."""

    @pytest.mark.parametrize(
        "hex_string,expected",
        [
            ("0xc0", "0x0"),
            ("0xf86c098504a817c800825208", "0x0"),
            ("0x01f8", "0x1"),
            ("0x02f872", "0x2"),
            ("02f872", "0x2"),
            ("0x7f", "0x7f"),
        ],
    )
    def test_raw(self, runner, hex_string: str, expected: str):
        """Test detecting the type of serialized transactions."""
        result = runner.invoke(txtype, ["raw", hex_string])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    @pytest.mark.parametrize("hex_string", ["0x", "0xZZ"])
    def test_raw_invalid(self, runner, hex_string: str):
        """Test that empty and malformed input is rejected."""
        result = runner.invoke(txtype, ["raw", hex_string])
        assert result.exit_code == 2
        assert "HEX_STRING" in result.output


class TestFields:
    """Test the `fields` command."""

    @pytest.mark.parametrize(
        "tx,args,expected",
        [
            ({"gas": "0x5208", "gasPrice": "0x1"}, [], "0x0"),
            ({"maxFeePerGas": "0x2"}, [], "0x2"),
            ({"accessList": []}, [], "0x1"),
            ({"type": "0x7e"}, [], "0x7e"),
            ({"maxFeePerGas": "abc"}, [], "0x2"),
            ({"gas": 1.5, "gasPrice": "lots"}, ["--hardfork", "homestead"], "0x0"),
            ({"gasPrice": "0x1"}, [], "indeterminate"),
            ({"gasPrice": "0x1"}, ["--hardfork", "london"], "0x0"),
            ({"gasPrice": "0x1", "hardfork": "homestead"}, [], "indeterminate"),
            ({"gasPrice": "0x1", "hardfork": "homestead"}, ["--hardfork", "berlin"], "0x0"),
            ({}, ["--common-hardfork", "london"], "0x2"),
            ({"common": {"hardfork": "london"}}, [], "0x2"),
            ({"common": {"hardfork": "london"}}, ["--common-hardfork", "istanbul"], "indeterminate"),
        ],
    )
    def test_fields_stdin(self, runner, tx, args, expected: str):
        """Test detecting the type of a transaction read from stdin."""
        result = runner.invoke(txtype, ["fields", *args], input=json.dumps(tx))
        assert result.exit_code == 0, result.output
        assert result.stdout == f"{expected}\n"

    def test_fields_file(self, runner, isolated_env: Path):
        """Test detecting the type of a transaction read from a file."""
        tx_file = isolated_env / "tx.json"
        tx_file.write_text(json.dumps({"maxPriorityFeePerGas": "1 gwei"}))
        result = runner.invoke(txtype, ["fields", str(tx_file)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "0x2\n"

    def test_fields_env_file(self, runner, isolated_env: Path):
        """Test that the hardfork of the environment configuration is the fallback."""
        (isolated_env / "env.yaml").write_text("common_hardfork: berlin\n")
        result = runner.invoke(txtype, ["fields"], input="{}")
        assert result.exit_code == 0, result.output
        assert result.stdout == "0x0\n"

        custom = isolated_env / "custom.yaml"
        custom.write_text("common_hardfork: london\n")
        result = runner.invoke(txtype, ["fields", "--env-file", str(custom)], input="{}")
        assert result.stdout == "0x2\n"

    def test_fields_missing_env_file(self, runner, isolated_env: Path):
        """Test that an explicitly given environment file must exist."""
        missing = isolated_env / "missing.yaml"
        result = runner.invoke(txtype, ["fields", "--env-file", str(missing)], input="{}")
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_fields_invalid_env_file(self, runner, isolated_env: Path):
        """Test that an invalid environment file is reported."""
        (isolated_env / "env.yaml").write_text("common_hardfork: notAFork\n")
        result = runner.invoke(txtype, ["fields"], input="{}")
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    @pytest.mark.parametrize("access_list", [[], [{}], "0x"])
    def test_fields_incompatible(self, runner, access_list):
        """Test that incompatible fields are reported with their names."""
        tx = {"type": "0x0", "accessList": access_list}
        result = runner.invoke(txtype, ["fields"], input=json.dumps(tx))
        assert result.exit_code == 1
        assert "Invalid properties for transaction type 0x0: accessList" in result.output

    @pytest.mark.parametrize(
        "content,message",
        [
            ("{", "Invalid JSON"),
            ("[]", "Expected a JSON object"),
            ('{"type": "lots"}', "Invalid transaction"),
            ('{"hardfork": 15}', "Invalid transaction"),
        ],
    )
    def test_fields_invalid_input(self, runner, content: str, message: str):
        """Test that malformed transactions are reported."""
        result = runner.invoke(txtype, ["fields"], input=content)
        assert result.exit_code == 1
        assert message in result.output

    def test_fields_log_level(self, runner):
        """Test that verbose logging traces the deciding rule on stderr."""
        result = runner.invoke(
            txtype,
            ["fields", "--log-level", "VERBOSE"],
            input=json.dumps({"gas": 1, "gasPrice": 1}),
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines()[-1] == "0x0"
        assert "Rule legacy-fees detected transaction type 0x0" in result.output

    def test_fields_debug_log_level(self, runner, isolated_env: Path):
        """Test that debug logging from the environment file shows the parsed fields."""
        (isolated_env / "env.yaml").write_text("log_level: DEBUG\n")
        result = runner.invoke(txtype, ["fields"], input=json.dumps({"maxFeePerGas": 16}))
        assert result.exit_code == 0, result.output
        assert "Parsed transaction fields {'maxFeePerGas': '16'}" in result.output

    def test_fields_invalid_log_level(self, runner):
        """Test that unknown log levels are rejected."""
        result = runner.invoke(txtype, ["fields", "--log-level", "LOUD"], input="{}")
        assert result.exit_code == 2
        assert "Invalid log level" in result.output


class TestForks:
    """Test the `forks` command."""

    def test_forks(self, runner):
        """Test that every fork is listed in order with its rank."""
        result = runner.invoke(txtype, ["forks"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == len(get_forks())
        assert lines[0].split() == ["0", "chainstart", "0x0"]
        assert lines[10].split() == ["10", "muirGlacier", "0x0", "bomb-delay"]
        assert lines[11].split() == ["11", "berlin", "0x0,0x1", "typed"]
        assert lines[12].split() == ["12", "london", "0x0,0x1,0x2", "typed"]
        assert lines[14].split() == ["14", "arrowGlacier", "0x0,0x1,0x2", "typed,bomb-delay"]

    def test_forks_since(self, runner):
        """Test listing the forks starting at a given one."""
        result = runner.invoke(txtype, ["forks", "--since", "Shanghai"])
        assert result.exit_code == 0
        names = [line.split()[1] for line in result.stdout.splitlines()]
        assert names == ["shanghai", "cancun", "prague"]

    def test_forks_since_unknown(self, runner):
        """Test that an unknown fork is rejected."""
        result = runner.invoke(txtype, ["forks", "--since", "notAFork"])
        assert result.exit_code == 2
        assert "Unknown hardfork" in result.output
