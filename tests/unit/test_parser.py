from pathlib import Path

import pytest

from emoji_stripper import __version__
from emoji_stripper.cli.parser import build_parser


class TestParserDefaults:
    def test_only_path(self) -> None:
        args = build_parser().parse_args(["--path", "notes.md"])
        assert args.path == Path("notes.md")
        assert not args.recursive
        assert args.output is None
        assert not args.verbose
        assert not args.dry_run
        assert not args.backup


class TestParserFlags:
    def test_short_flags(self) -> None:
        args = build_parser().parse_args(["-p", "docs", "-r", "-v", "-d", "-b"])
        assert args.path == Path("docs")
        assert args.recursive
        assert args.verbose
        assert args.dry_run
        assert args.backup

    def test_output_is_path(self) -> None:
        args = build_parser().parse_args(["-p", "a.md", "-o", "out/clean.md"])
        assert args.output == Path("out/clean.md")

    def test_long_dry_run(self) -> None:
        args = build_parser().parse_args(["-p", "a.md", "--dry-run"])
        assert args.dry_run


class TestParserErrors:
    def test_path_is_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
