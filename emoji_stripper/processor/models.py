from dataclasses import dataclass
from pathlib import Path

from emoji_stripper.processor.exceptions import ProcessorError


@dataclass(frozen=True)
class RunOptions:
    """Flags shared by both operating modes."""

    dry_run: bool = False
    verbose: bool = False
    backup: bool = False  # recursive mode only
    output: Path | None = None  # single-file mode only


@dataclass
class Document:
    """A file's content before and after emoji removal.

    `raw` holds the exact bytes read from disk; `cleaned` the bytes to emit,
    which are `raw` itself when nothing was removed.
    """

    path: Path
    original_text: str
    cleaned_text: str = ""
    raw: bytes = b""
    cleaned: bytes = b""

    @property
    def original_length(self) -> int:
        return len(self.raw)

    @property
    def cleaned_length(self) -> int:
        return len(self.cleaned)

    @property
    def changed(self) -> bool:
        return self.original_text != self.cleaned_text


@dataclass(frozen=True)
class BackupResult:
    """First phase of backup-then-overwrite: a verified copy on disk."""

    source: Path
    backup_path: Path
    size_bytes: int


@dataclass(frozen=True)
class FileOutcome:
    """Result of processing one file in recursive mode."""

    path: Path
    document: Document | None = None
    error: ProcessorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunReport:
    """Processed/errored counters accumulated across a directory run."""

    processed: int = 0
    errors: int = 0

    def record(self, outcome: FileOutcome) -> None:
        if outcome.ok:
            self.processed += 1
        else:
            self.errors += 1

    def summary(self) -> str:
        return f"Completed: {self.processed} files processed, {self.errors} errors"
