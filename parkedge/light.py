"""Light control commands sent through the board controller."""

from __future__ import annotations

from enum import IntEnum

from .board import (
    COMMAND_ELEMENT_END,
    COMMAND_ELEMENT_OPTION,
    COMMAND_ELEMENT_START,
    COMMAND_LENGTH,
    BoardController,
    calculate_checksum,
)

DIM1 = 0x00
DIM2 = 0x01
DATA_SIZE = 0x0C
COMMAND_NUMBER = 0x03
COMMAND_ELEMENT_RESERVED = 0x00
DATA_START_POSITION = 1
DATA_END_POSITION = 15
CHECKSUM_POSITION = 16


class LightState(IntEnum):
    OFF = 0x00
    ON_MINIMUM = 0x01
    ON_MAXIMUM = 0x02
    ON_DIM_DOWN = 0x03


def _clamp8(value: int) -> int:
    return min(value, 0xFF) & 0xFF


def _clamp16(value: int) -> int:
    return min(value, 0xFFFF)


class Light:
    """A dimmable light driven by command frames."""

    def __init__(self, controller: BoardController) -> None:
        self._controller = controller
        self._state = LightState.OFF
        self._brightness_max = 0xFF
        self._brightness_min = 30
        self._dim_time = 1000
        self._dim = DIM1

    @property
    def state(self) -> LightState:
        return self._state

    @property
    def brightness_max(self) -> int:
        return self._brightness_max

    @property
    def brightness_min(self) -> int:
        return self._brightness_min

    @property
    def dim_time(self) -> int:
        return self._dim_time

    def on_dim_down(self) -> None:
        self._switch(LightState.ON_DIM_DOWN)

    def on_maximum(self) -> None:
        self._switch(LightState.ON_MAXIMUM)

    def on_minimum(self) -> None:
        self._switch(LightState.ON_MINIMUM)

    def off(self) -> None:
        self._switch(LightState.OFF)

    def set_brightness_max(self, value: int) -> None:
        self._brightness_max = value
        if self._state is LightState.ON_MAXIMUM:
            self.on_maximum()

    def set_brightness_min(self, value: int) -> None:
        self._brightness_min = value
        if self._state is LightState.ON_MINIMUM:
            self.on_minimum()

    def set_dim_time(self, value: int) -> None:
        self._dim_time = value

    def build_command(self, state: LightState | int) -> bytes:
        """Return the full command frame, checksum included, for ``state``."""
        frame = bytearray(COMMAND_LENGTH)
        frame[0] = COMMAND_ELEMENT_START
        frame[1] = COMMAND_ELEMENT_OPTION
        frame[2] = DATA_SIZE
        frame[3] = COMMAND_NUMBER
        frame[4] = self._dim & 0xFF
        frame[5] = int(state) & 0xFF
        frame[6] = _clamp8(self._brightness_max)
        frame[7] = _clamp8(self._brightness_min)
        dim_time = _clamp16(self._dim_time)
        frame[8] = dim_time & 0xFF
        frame[9] = (dim_time >> 8) & 0xFF
        frame[10:16] = bytes([COMMAND_ELEMENT_RESERVED] * 6)
        frame[17] = COMMAND_ELEMENT_END
        frame[CHECKSUM_POSITION] = calculate_checksum(
            frame, DATA_START_POSITION, DATA_END_POSITION
        )
        return bytes(frame)

    def _switch(self, state: LightState) -> None:
        self._state = state
        self._controller.write_command(self.build_command(state))