import sys
from typing import TextIO


class Reporter:
    """User-facing console output: results on stdout, errors on stderr.

    Streams default to whatever ``sys.stdout``/``sys.stderr`` are at write
    time, so redirection and test capture keep working.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def line(self, message: str = "") -> None:
        print(message, file=self.out)

    def write(self, data: bytes) -> None:
        """Emit document bytes verbatim on the binary layer of stdout.

        Bypasses the text layer so neither its encoding nor its newline
        translation touches the content.
        """
        self.out.flush()
        self.out.buffer.write(data)
        self.out.buffer.flush()

    def error(self, message: str) -> None:
        print(message, file=self.err)
