"""Signal-aware output writing for the dirbundle CLI."""

import errno
import os
import types
from pathlib import Path
from typing import IO, Optional, Type, Union

from dirbundle.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes text or raw bytes to a file descriptor or a file path.

    Writing stops with BrokenPipeError as soon as SIGPIPE or SIGINT has been received,
    or when the reader of a pipe has gone away.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, "os.PathLike[str]"]):
        """Initialize the safe writer.

        Args:
            file: A file descriptor, or a path that is opened (and truncated) for writing.

        Raises:
            TypeError: If file is neither a file descriptor nor a path.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[IO[bytes]] = None

        if isinstance(file, int):
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: Union[str, bytes]) -> None:
        """Write data, encoding text as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8") if isinstance(data, str) else data
        view = memoryview(payload)
        try:
            # os.write may accept fewer bytes than offered, e.g. on pipes
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it. Broken pipes on close are ignored."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
