"""Object detectors used to decide spot occupancy and find plates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

OCCUPANCY_SIZE_DIVISOR = 4
PLATE_SIZE_DIVISOR = 8


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def area(self) -> int:
        return self.width * self.height


class GenericDetector(ABC):
    """Finds objects in an image."""

    @abstractmethod
    def detect(self, image: Any, size: int) -> list[Rect]:
        """Return the locations of objects found in ``image``.

        Objects smaller than the image dimensions divided by ``size`` are
        ignored.
        """


class OccupancyDetector:
    """Detects vehicles occupying a parking spot."""

    def __init__(self, detector: GenericDetector) -> None:
        self._detector = detector

    def detect(self, image: Any) -> list[Rect]:
        return list(self._detector.detect(image, OCCUPANCY_SIZE_DIVISOR))


class PlateDetector:
    """Detects licence plates."""

    def __init__(self, detector: GenericDetector) -> None:
        self._detector = detector

    def detect(self, image: Any) -> list[Rect]:
        return list(self._detector.detect(image, PLATE_SIZE_DIVISOR))