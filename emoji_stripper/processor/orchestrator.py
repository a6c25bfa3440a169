import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from emoji_stripper.cli.reporter import Reporter
from emoji_stripper.config.settings import Settings
from emoji_stripper.logging.logger import Log
from emoji_stripper.processor.exceptions import ConfigurationError, ProcessorError
from emoji_stripper.processor.file_store import FileStore, backup_file_path
from emoji_stripper.processor.models import (
    BackupResult,
    Document,
    FileOutcome,
    RunOptions,
    RunReport,
)
from emoji_stripper.transform.factory import EmojiStripperFactory
from emoji_stripper.transform.stripper import EmojiStripper


class FileOrchestrator:
    """Applies the emoji stripper to one file or to a tree of markdown files.

    Single-file mode: read -> strip -> preview | write to output | stdout.
    Recursive mode: walk -> (read -> strip -> preview | backup -> overwrite)
    per file, folding each outcome into a RunReport.
    """

    def __init__(
        self,
        stripper: EmojiStripper,
        file_store: FileStore,
        reporter: Reporter,
        settings: Settings,
    ) -> None:
        self._stripper = stripper
        self._file_store = file_store
        self._reporter = reporter
        self._settings = settings

    # ------------------------------------------------------------------
    # Single-file mode
    # ------------------------------------------------------------------

    def process_file(self, path: Path, options: RunOptions) -> Document:
        """Strip one file without touching it.

        Raises:
            FileReadError: if *path* cannot be read.
            FileWriteError: if ``options.output`` cannot be written.
        """
        document = self._load(path)

        if options.dry_run:
            self._reporter.line(f"[DRY RUN] Would process: {path}")
            if options.verbose:
                self._reporter.line(f"Original length: {document.original_length} bytes")
                self._reporter.line(f"Cleaned length: {document.cleaned_length} bytes")
            return document

        if options.output is not None:
            self._file_store.write_bytes(options.output, document.cleaned)
            if options.verbose:
                self._reporter.line(
                    f"Successfully stripped emojis and saved to {options.output}"
                )
        else:
            self._reporter.write(document.cleaned)
        return document

    # ------------------------------------------------------------------
    # Recursive mode
    # ------------------------------------------------------------------

    def process_directory(self, root: Path, options: RunOptions) -> RunReport:
        """Strip every markdown file under *root* in place.

        Per-file failures are reported and counted, never raised.

        Raises:
            ConfigurationError: if *root* is not an existing directory.
        """
        if not root.is_dir():
            raise ConfigurationError(
                f"Path must be a directory when using --recursive: `{root}`"
            )

        if options.verbose or options.dry_run:
            self._reporter.line(f"Scanning directory: {root}")
            self._reporter.line()

        report = RunReport()
        for outcome in self.iter_outcomes(self.iter_markdown_files(root), options):
            report.record(outcome)
            if not outcome.ok:
                self._reporter.error(f"✗ Error processing {outcome.path}: {outcome.error}")
            elif options.verbose and not options.dry_run:
                self._reporter.line(f"✓ Processed: {outcome.path}")

        self._reporter.line()
        self._reporter.line(report.summary())
        Log.info(report.summary(), processed=report.processed, errors=report.errors)
        return report

    def iter_markdown_files(self, root: Path) -> Iterator[Path]:
        """Yield files under *root* whose suffix is exactly the markdown suffix.

        Enumeration order is whatever the filesystem returns. Directories
        are never yielded, and symlinked directories are not descended into.
        """
        suffix = self._settings.markdown_suffix
        for dirpath, _dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            for name in filenames:
                path = Path(dirpath) / name
                if path.suffix == suffix:
                    yield path

    def iter_outcomes(self, paths: Iterable[Path], options: RunOptions) -> Iterator[FileOutcome]:
        """Process each path in place, yielding a success or a typed error."""
        for path in paths:
            try:
                document = self._process_in_place(path, options)
            except ProcessorError as exc:
                Log.debug(f"{path}: {type(exc).__name__}", path=str(path))
                yield FileOutcome(path=path, error=exc)
            else:
                yield FileOutcome(path=path, document=document)

    def backup(self, path: Path, document: Document) -> BackupResult:
        """Phase one of an in-place overwrite: a verified copy of *path*."""
        backup_path = backup_file_path(path, self._settings.backup_suffix)
        return self._file_store.create_backup(
            path,
            backup_path,
            expected=document.raw,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process_in_place(self, path: Path, options: RunOptions) -> Document:
        document = self._load(path)

        if options.dry_run:
            if options.verbose:
                self._reporter.line(
                    f"[DRY RUN] Would process: {path} "
                    f"({document.original_length} -> {document.cleaned_length} bytes)"
                )
            else:
                self._reporter.line(f"[DRY RUN] Would process: {path}")
            return document

        # The original is only rewritten once a verified backup exists.
        if options.backup:
            result = self.backup(path, document)
            if options.verbose:
                self._reporter.line(f"Created backup: {result.backup_path}")

        if document.changed:
            self._file_store.write_bytes(path, document.cleaned)
        else:
            Log.debug(f"Left {path} as is: no emoji", path=str(path))
        return document

    def _load(self, path: Path) -> Document:
        raw = self._file_store.read_bytes(path)
        text = self._file_store.decode(path, raw)
        cleaned = self._stripper.strip(text)
        document = Document(
            path=path,
            original_text=text,
            cleaned_text=cleaned,
            raw=raw,
            cleaned=raw if cleaned == text else self._file_store.encode(path, cleaned),
        )
        Log.debug(
            f"Stripped {path}: {document.original_length} -> {document.cleaned_length} bytes",
            path=str(path),
            changed=document.changed,
        )
        return document

    def _on_walk_error(self, exc: OSError) -> None:
        self._reporter.error(f"✗ Error scanning {exc.filename}: {exc.strerror or exc}")
        Log.warning(f"Skipped unreadable directory {exc.filename}", path=str(exc.filename))


def build_orchestrator(
    settings: Settings,
    reporter: Reporter | None = None,
) -> FileOrchestrator:
    """Build a FileOrchestrator with the default stripper and file store."""
    return FileOrchestrator(
        stripper=EmojiStripperFactory.create(),
        file_store=FileStore(encoding=settings.file_encoding),
        reporter=reporter if reporter is not None else Reporter(),
        settings=settings,
    )
