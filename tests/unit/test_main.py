from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from emoji_stripper.main import main
from emoji_stripper.processor.exceptions import ConfigurationError, FileReadError
from emoji_stripper.processor.models import RunOptions, RunReport


@pytest.fixture()
def orchestrator() -> Generator[MagicMock, None, None]:
    with patch("emoji_stripper.main.build_orchestrator") as build:
        instance = build.return_value
        instance.process_directory.return_value = RunReport()
        yield instance


class TestModeDispatch:
    def test_single_file_mode(self, orchestrator: MagicMock) -> None:
        exit_code = main(["-p", "a.md", "-o", "out.md", "-v"])

        assert exit_code == 0
        orchestrator.process_file.assert_called_once_with(
            Path("a.md"), RunOptions(verbose=True, output=Path("out.md"))
        )
        orchestrator.process_directory.assert_not_called()

    def test_recursive_mode(self, orchestrator: MagicMock) -> None:
        exit_code = main(["-p", "docs", "-r", "-b", "-d"])

        assert exit_code == 0
        orchestrator.process_directory.assert_called_once_with(
            Path("docs"), RunOptions(dry_run=True, backup=True)
        )

    def test_output_ignored_in_recursive_mode(self, orchestrator: MagicMock) -> None:
        main(["-p", "docs", "-r", "-o", "out.md"])

        options = orchestrator.process_directory.call_args.args[1]
        assert options.output is None

    def test_backup_ignored_in_single_file_mode(self, orchestrator: MagicMock) -> None:
        main(["-p", "a.md", "-b"])

        options = orchestrator.process_file.call_args.args[1]
        assert not options.backup


class TestExitStatus:
    def test_single_file_error_exits_non_zero(
        self, orchestrator: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        orchestrator.process_file.side_effect = FileReadError("Could not read file `a.md`")

        exit_code = main(["-p", "a.md"])

        assert exit_code == 1
        assert capsys.readouterr().err == "Error: Could not read file `a.md`\n"

    def test_configuration_error_exits_non_zero(
        self, orchestrator: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        orchestrator.process_directory.side_effect = ConfigurationError("not a directory")

        exit_code = main(["-p", "a.md", "-r"])

        assert exit_code == 1
        assert "Error: not a directory" in capsys.readouterr().err

    def test_recursive_run_with_file_errors_exits_zero(self, orchestrator: MagicMock) -> None:
        orchestrator.process_directory.return_value = RunReport(processed=4, errors=1)

        assert main(["-p", "docs", "-r"]) == 0

    def test_invalid_settings_exit_non_zero(
        self,
        orchestrator: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("EMOJI_STRIPPER_BACKUP_SUFFIX", "bak")

        exit_code = main(["-p", "docs", "-r"])

        assert exit_code == 1
        assert "invalid configuration" in capsys.readouterr().err
        orchestrator.process_directory.assert_not_called()
