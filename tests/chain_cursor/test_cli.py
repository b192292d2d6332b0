"""Tests for the command-line resolver."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

import pytest
import yaml

import chain_cursor.__main__ as cli
from chain_cursor.__main__ import ColoredFormatter, main, setup_logging
from chain_cursor.subspecs.chain import TESTNET_CHAIN_INFO

SHELLEY_START = "4492800,aa83acbf5904c0edfe4d79b3689d3d00fcfc553cf360fd2229b98d464c28e9de"


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep main() from installing handlers on the root logger."""
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False, no_color=False: None)


def run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, Any]:
    """Run the CLI and decode its JSON output."""
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, json.loads(out) if code == 0 else out


class TestResolve:
    """Successful resolutions."""

    def test_defaults(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No flags: mainnet from the tip."""
        code, resolved = run(capsys)

        assert code == 0
        assert resolved["magic"] == 764824073
        assert resolved["chain"]["address_hrp"] == "addr"
        assert resolved["intersect"] == {"type": "Tip"}
        assert resolved["cursor"] is None
        assert resolved["start_points"] == []

    def test_testnet_origin(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Keyword magic and origin intersect."""
        code, resolved = run(capsys, "--magic", "testnet", "--from-origin")

        assert code == 0
        assert resolved["magic"] == 1097911063
        assert resolved["chain"]["address_hrp"] == "addr_test"
        assert resolved["start_points"] == ["origin"]

    def test_point(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An explicit point is decoded into [slot, hash]."""
        code, resolved = run(capsys, "--point", SHELLEY_START)

        slot, hash_hex = SHELLEY_START.split(",")
        assert code == 0
        assert resolved["intersect"]["type"] == "Point"
        assert resolved["start_points"] == [[int(slot), hash_hex]]

    def test_fallbacks(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Repeated --fallback flags keep their order."""
        code, resolved = run(capsys, "--fallback", "20,ff", "--fallback", "origin")

        assert code == 0
        assert resolved["start_points"] == [[20, "ff"], "origin"]

    def test_cursor_wins(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A cursor replaces the intersect candidates."""
        code, resolved = run(capsys, "--from-origin", "--cursor", "5,0a0b")

        assert code == 0
        assert resolved["cursor"] == "5,0a0b"
        assert resolved["start_points"] == [[5, "0a0b"]]

    def test_config_file_with_override(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Flags override values read from the config file."""
        path = tmp_path / "follower.yaml"
        path.write_text("magic: testnet\nintersect: {type: Origin}\n", encoding="utf-8")

        code, resolved = run(capsys, "--config", str(path), "--point", "7,aa")

        assert code == 0
        assert resolved["magic"] == 1097911063
        assert resolved["start_points"] == [[7, "aa"]]


class TestFailures:
    """Resolutions that fail with exit status 1."""

    @pytest.mark.parametrize(
        "argv",
        [
            ["--magic", "12345"],
            ["--magic", "notanumber"],
            ["--point", "x,ab"],
            ["--point", "1,zz"],
            ["--config", "/nonexistent/follower.yaml"],
        ],
    )
    def test_exit_status(self, capsys: pytest.CaptureFixture[str], argv: list[str]) -> None:
        """Errors are logged and reported through the exit status."""
        code, out = run(capsys, *argv)

        assert code == 1
        assert out == ""

    def test_conflicting_strategies(self) -> None:
        """Only one intersect strategy may be given."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--point", "origin", "--from-tip"])
        assert exc_info.value.code == 2

    @pytest.mark.parametrize(
        "content",
        [
            b"- a\n",
            b"hello\n",
            b"42\n",
            b"magic: \xff\xfe\n",
            b"magic: [unclosed\n",
        ],
    )
    @pytest.mark.parametrize("flags", [[], ["--magic", "testnet"]])
    def test_malformed_config_file(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
        content: bytes,
        flags: list[str],
    ) -> None:
        """Non-mapping, non-UTF-8 and invalid YAML files fail with status 1, flags or not."""
        path = tmp_path / "follower.yaml"
        path.write_bytes(content)

        code, out = run(capsys, "--config", str(path), *flags)

        assert code == 1
        assert out == ""

    def test_chain_record_magic_mismatch(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A chain record for another network than --magic is rejected."""
        path = tmp_path / "follower.yaml"
        path.write_text(yaml.dump({"chain": TESTNET_CHAIN_INFO.model_dump(mode="json")}))

        code, _ = run(capsys, "--config", str(path), "--magic", "mainnet")

        assert code == 1


class TestSetupLogging:
    """Tests for the logging setup."""

    @pytest.fixture
    def root_logger(self) -> Iterator[logging.Logger]:
        """Root logger restored to its previous state afterwards."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield root
        root.handlers = handlers
        root.setLevel(level)

    def test_verbose_plain(self, root_logger: logging.Logger) -> None:
        """Verbose mode logs at DEBUG with the plain formatter."""
        setup_logging(verbose=True, no_color=True)

        handler = root_logger.handlers[-1]
        assert root_logger.level == logging.DEBUG
        assert not isinstance(handler.formatter, ColoredFormatter)

    def test_default_colored(self, root_logger: logging.Logger) -> None:
        """Default mode logs at INFO with colors."""
        setup_logging()

        assert root_logger.level == logging.INFO
        assert isinstance(root_logger.handlers[-1].formatter, ColoredFormatter)


def test_colored_formatter_includes_message() -> None:
    """Colored records still carry the logger name and message."""
    record = logging.LogRecord("chain_cursor", logging.INFO, __file__, 1, "hello %s", ("x",), None)
    formatted = ColoredFormatter().format(record)

    assert "chain_cursor" in formatted
    assert "hello x" in formatted


def test_colored_formatter_leaves_record_plain() -> None:
    """Coloring does not leak into the record seen by other handlers."""
    record = logging.LogRecord("chain_cursor", logging.ERROR, __file__, 1, "boom", (), None)
    formatted = ColoredFormatter().format(record)

    assert ColoredFormatter.LEVEL_COLORS[logging.ERROR] in formatted
    assert record.levelname == "ERROR"
    assert record.name == "chain_cursor"
