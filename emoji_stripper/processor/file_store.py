import os
import shutil
from pathlib import Path

from emoji_stripper.logging.logger import Log
from emoji_stripper.processor.exceptions import BackupError, FileReadError, FileWriteError
from emoji_stripper.processor.models import BackupResult


def backup_file_path(path: Path, suffix: str) -> Path:
    """Build the sibling backup path: {name}{suffix}, e.g. notes.md -> notes.md.bak"""
    return path.with_name(f"{path.name}{suffix}")


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


class FileStore:
    """Whole-file byte I/O plus decoding in a fixed encoding.

    Callers keep the raw bytes they read, so unchanged content and backups
    are compared and written as the exact bytes found on disk.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_bytes(self, path: Path) -> bytes:
        """Read a whole file.

        Raises:
            FileReadError: if the path is missing, a directory or unreadable.
        """
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Could not read file `{path}`: {_describe(exc)}") from exc
        Log.debug(f"Read {len(data)} bytes from {path}", path=str(path), size_bytes=len(data))
        return data

    def decode(self, path: Path, data: bytes) -> str:
        """Decode bytes read from *path*.

        Raises:
            FileReadError: if *data* is not valid text in the configured encoding.
        """
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise FileReadError(
                f"Could not read file `{path}`: not valid {self._encoding} text "
                f"({exc.reason} at byte {exc.start})"
            ) from exc

    def encode(self, path: Path, text: str) -> bytes:
        """Encode text destined for *path*.

        Raises:
            FileWriteError: if *text* cannot be represented in the encoding.
        """
        try:
            return text.encode(self._encoding)
        except UnicodeEncodeError as exc:
            raise FileWriteError(f"Could not write to file `{path}`: {exc}") from exc

    def write_bytes(self, path: Path, data: bytes) -> int:
        """Create or truncate *path* with *data*. Returns the byte count written.

        Raises:
            FileWriteError: if the destination cannot be written.
        """
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise FileWriteError(f"Could not write to file `{path}`: {_describe(exc)}") from exc
        Log.debug(f"Wrote {len(data)} bytes to {path}", path=str(path), size_bytes=len(data))
        return len(data)

    def create_backup(self, path: Path, backup_path: Path, expected: bytes) -> BackupResult:
        """Copy *path* to *backup_path*, flush it to disk and verify its content.

        The copy must be byte-identical to *expected* (the raw content the
        caller read and is about to replace). A copy that fails verification
        is removed.

        Raises:
            BackupError: if the copy cannot be created, synced or verified.
        """
        try:
            shutil.copy2(path, backup_path)
            # copy2 carries the source mode over, which may be read-only.
            with open(backup_path, "rb") as fh:
                copied = fh.read()
                os.fsync(fh.fileno())
        except OSError as exc:
            raise BackupError(
                f"Could not create backup at `{backup_path}`: {_describe(exc)}"
            ) from exc

        if copied != expected:
            message = f"Could not create backup at `{backup_path}`: copy does not match `{path}`"
            try:
                backup_path.unlink(missing_ok=True)
            except OSError as exc:
                raise BackupError(f"{message}; removing it failed: {_describe(exc)}") from exc
            raise BackupError(message)

        Log.debug(
            f"Verified backup {backup_path} ({len(copied)} bytes)",
            path=str(backup_path),
            size_bytes=len(copied),
        )
        return BackupResult(source=path, backup_path=backup_path, size_bytes=len(copied))
