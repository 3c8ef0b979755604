"""Base types for queued messages, network handlers and camera settings."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class MessageData(ABC):
    """A message that can be queued, serialised and stored on disk."""

    def __init__(self, event_time: datetime | None = None) -> None:
        self.event_time = event_time

    @abstractmethod
    def to_string(self) -> str:
        """Human-readable description of the message."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for network communication."""

    @abstractmethod
    def save(self, folder: str) -> bool:
        """Store the message in ``folder``; return True on success."""

    @abstractmethod
    def load(self, path: str) -> bool:
        """Fill the message from a stored file; return True on success."""

    def __str__(self) -> str:
        return self.to_string()


class NetworkHandler(ABC):
    """A background worker that handles network communication."""

    def __init__(self) -> None:
        self.operation = True
        self.wait_seconds = 2
        self.destroy_seconds = 3
        self.handler_thread: threading.Thread | None = None

    @abstractmethod
    def destroy(self) -> None:
        """Stop the handler and release its thread."""

    @abstractmethod
    def run(self) -> None:
        """Main loop of the handling thread."""


@dataclass
class CameraInfo:
    """Desired capture settings of the camera."""

    frame_width: int = 0
    frame_height: int = 0
    fourcc: str = ""

    def __post_init__(self) -> None:
        if self.fourcc and len(self.fourcc) != 4:
            raise ValueError(f"FourCC code must have 4 characters: {self.fourcc!r}")