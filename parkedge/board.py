"""Serial link to the lighting control board."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import BinaryIO

try:
    import fcntl
except ImportError:  # pragma: no cover - non-POSIX platforms
    fcntl = None  # type: ignore[assignment]

DEFAULT_DEVICE = "/dev/ttyUSB0"

COMMAND_ELEMENT_START = 0x02
COMMAND_ELEMENT_OPTION = 0x00
COMMAND_ELEMENT_END = 0x03
COMMAND_LENGTH = 18


def calculate_checksum(command: Iterable[int], start: int, end: int) -> int:
    """XOR of the bytes of ``command`` from ``start`` to ``end`` inclusive."""
    data = bytes(command)
    checksum = 0x00
    for byte in data[start : end + 1]:
        checksum ^= byte
    return checksum


class BoardController:
    """Writes fixed-size command frames to the control board.

    ``device`` is either a path to a serial device, which is opened and owned
    by the controller, or an already open binary stream, which is left open.
    """

    def __init__(self, device: str | os.PathLike | BinaryIO = DEFAULT_DEVICE) -> None:
        self._stream: BinaryIO | None = None
        self._fd: int | None = None
        self._closed = False

        if hasattr(device, "write"):
            self._stream = device  # type: ignore[assignment]
            return

        flags = (
            os.O_RDWR
            | getattr(os, "O_NOCTTY", 0)
            | getattr(os, "O_NDELAY", getattr(os, "O_NONBLOCK", 0))
        )
        fd = os.open(os.fspath(device), flags)  # type: ignore[arg-type]
        if fcntl is not None:
            # Switch back to blocking I/O once the port is open.
            fcntl.fcntl(fd, fcntl.F_SETFL, 0)
        self._fd = fd

    @property
    def closed(self) -> bool:
        return self._closed

    def write_command(self, command: Iterable[int]) -> None:
        """Send one command frame of exactly ``COMMAND_LENGTH`` bytes."""
        if self._closed:
            raise ValueError("board controller is closed")
        data = bytes(command)
        if len(data) != COMMAND_LENGTH:
            raise ValueError(
                f"command must be {COMMAND_LENGTH} bytes long, got {len(data)}"
            )
        if self._fd is not None:
            view = memoryview(data)
            while view:
                written = os.write(self._fd, view)
                view = view[written:]
        else:
            assert self._stream is not None
            self._stream.write(data)
            flush = getattr(self._stream, "flush", None)
            if flush is not None:
                flush()

    def close(self) -> None:
        """Close the device if the controller opened it."""
        if self._closed:
            return
        self._closed = True
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def __enter__(self) -> "BoardController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()