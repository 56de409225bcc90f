"""Unit tests for the SafeWriter class in dirbundle CLI."""

import errno
import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dirbundle.cli.safe_writer import SafeWriter


@pytest.fixture
def mock_signals():
    """Patch the signal handler seen by SafeWriter; no signal received by default."""
    with patch("dirbundle.cli.safe_writer.signal_handler") as mock:
        mock.interrupted.return_value = False
        yield mock


@pytest.fixture
def pipe():
    """A real pipe as (read_fd, write_fd)."""
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def test_init_with_fd():
    writer = SafeWriter(3)

    assert writer.file == 3
    assert writer.fd == 3
    assert writer._file_obj is None
    assert not writer._closed


def test_init_with_path(tmp_path):
    path = tmp_path / "bundle.json"
    with SafeWriter(path) as writer:
        assert writer.file == path
        assert writer._file_obj is not None
        assert writer.fd == writer._file_obj.fileno()
    assert path.exists()


def test_init_with_invalid_type():
    with pytest.raises(TypeError) as excinfo:
        SafeWriter(42.0)  # type: ignore[arg-type]

    assert "Expected int, str, or PathLike" in str(excinfo.value)


def test_write_text_and_bytes_to_pipe(mock_signals, pipe):
    read_fd, write_fd = pipe
    writer = SafeWriter(write_fd)

    writer.write("héllo ")
    writer.write(b"\x00\xff")

    assert os.read(read_fd, 100) == "héllo ".encode("utf-8") + b"\x00\xff"


def test_write_retries_partial_writes(mock_signals):
    written = []

    def short_write(fd, data):
        chunk = bytes(data[:3])
        written.append(chunk)
        return len(chunk)

    with patch("os.write", side_effect=short_write):
        SafeWriter(3).write(b"abcdefgh")

    assert written == [b"abc", b"def", b"gh"]


def test_write_after_close():
    writer = SafeWriter(3)
    writer.close()

    with pytest.raises(ValueError) as excinfo:
        writer.write("data")

    assert "Cannot write to closed SafeWriter" in str(excinfo.value)


def test_write_after_signal(mock_signals):
    mock_signals.interrupted.return_value = True

    with patch("os.write") as mock_write:
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("data")

    mock_write.assert_not_called()


def test_write_with_epipe(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EPIPE, "Broken pipe")):
        with pytest.raises(BrokenPipeError):
            SafeWriter(3).write("data")


def test_write_with_other_os_error(mock_signals):
    with patch("os.write", side_effect=OSError(errno.EIO, "Input/output error")):
        with pytest.raises(OSError) as excinfo:
            SafeWriter(3).write("data")

    assert excinfo.value.errno == errno.EIO


def test_write_to_file(mock_signals, tmp_path):
    path = tmp_path / "out.bin"
    path.write_bytes(b"previous contents that are longer")

    with SafeWriter(str(path)) as writer:
        writer.write("Hello, 世界!\n")
        writer.write(b"\x01\x02")

    assert path.read_bytes() == "Hello, 世界!\n".encode("utf-8") + b"\x01\x02"


def test_close_fd_only_leaves_descriptor_open(pipe):
    read_fd, write_fd = pipe
    writer = SafeWriter(write_fd)
    writer.close()

    assert writer._closed
    os.write(write_fd, b"x")


def test_close_twice():
    mock_file = MagicMock()
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    writer.close()
    writer.close()

    mock_file.close.assert_called_once()
    assert writer._closed


def test_close_with_error():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    with pytest.raises(OSError) as excinfo:
        writer.close()

    assert excinfo.value.errno == errno.EIO


def test_close_with_broken_pipe():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EPIPE, "Broken pipe")
    writer = SafeWriter(3)
    writer._file_obj = mock_file

    writer.close()

    assert writer._closed


def test_context_manager_closes_after_exception():
    with pytest.raises(ValueError):
        with SafeWriter(3) as writer:
            raise ValueError("boom")

    assert writer._closed


def test_context_manager_prefers_block_exception():
    mock_file = MagicMock()
    mock_file.close.side_effect = OSError(errno.EIO, "I/O error")

    with pytest.raises(KeyError):
        with SafeWriter(3) as writer:
            writer._file_obj = mock_file
            raise KeyError("inner")


def test_path_like_is_accepted(tmp_path):
    with SafeWriter(Path(tmp_path, "x")) as writer:
        assert isinstance(writer.file, Path)
