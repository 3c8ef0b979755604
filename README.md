# parkedge

Building blocks for an edge device that watches parking spots through a camera:
deciding whether detected vehicles occupy a spot, checking foreground masks for
motion, and driving the lighting board over a serial link.

## Modules

- `parkedge.localizer`
  - `localizer_detect(cars, roi)` returns True when one of the vehicle boxes
    covers more than half of the spot `roi`. Boxes whose area is below 0.4 or
    above 1.5 times the spot's area are ignored. A spot with no area raises
    `ValueError`.
  - `parse_boxes(boxes)` turns `(x, y, width, height)` tuples into `Rect`s,
    raising `ValueError` for a box without four values and `TypeError` for
    non-integer values.
  - `is_video_source(name)` tells a video file name from a camera number: a
    name whose leading integer is non-zero, or that is exactly `"0"`, selects
    a camera.
- `parkedge.occupancy`
  - `Rect`, a frozen rectangle with `x`, `y`, `width`, `height` and `area()`.
  - `GenericDetector`, an abstract base whose `detect(image, size)` returns a
    list of `Rect`s.
  - `OccupancyDetector` and `PlateDetector` wrap a `GenericDetector` and call
    it with size divisors 4 and 8 respectively.
- `parkedge.motion`
  - `compute_target_size(width, height)` picks the working frame size from the
    aspect ratio (800x640, 1024x576, 960x600 or 800x600), or None for an empty
    size.
  - `MotionDetection(image_size)` takes foreground masks through `update(mask)`,
    resizes them to the working size and removes minor movements with a
    morphological opening. `is_motion_detected(frame_size, roi=None)` reports
    whether the moving area, over the whole frame or inside `roi`, is above
    the minimum and below 30 % of the area looked at.
- `parkedge.board`
  - `BoardController(device)` opens a serial device path (default
    `/dev/ttyUSB0`) or takes an open binary stream, and `write_command`
    sends exactly 18-byte frames. It is a context manager.
  - `calculate_checksum(command, start, end)` is the XOR of the bytes from
    `start` to `end` inclusive.
- `parkedge.light`
  - `LightState` (`OFF`, `ON_MINIMUM`, `ON_MAXIMUM`, `ON_DIM_DOWN`).
  - `Light(controller)` sends frames for `off()`, `on_minimum()`,
    `on_maximum()` and `on_dim_down()`, with `set_brightness_max`,
    `set_brightness_min` and `set_dim_time`; `build_command(state)` returns
    the frame without sending it.
- `parkedge.messages`
  - `MessageData`, an abstract base for messages with `to_string`, `to_dict`,
    `save` and `load`.
  - `NetworkHandler`, an abstract base for background network workers.
  - `CameraInfo`, a dataclass of frame width, height and a four-character
    FourCC code.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from parkedge.localizer import localizer_detect, parse_boxes
from parkedge.occupancy import Rect

spot = Rect(100, 100, 200, 100)
cars = parse_boxes([(110, 105, 190, 95)])
occupied = localizer_detect(cars, spot)  # True
```

```python
import io

from parkedge.board import BoardController
from parkedge.light import Light

stream = io.BytesIO()
with BoardController(stream) as board:
    Light(board).on_maximum()
frame = stream.getvalue()  # one 18-byte command frame
```

## What it does not do

- There is no command to run and no main loop: nothing here reads frames from
  a camera or video file.
- It ships no detector model. `GenericDetector` must be implemented by the
  caller, and `MotionDetection` expects foreground masks computed elsewhere.
- It does not send anything to a server. `MessageData` and `NetworkHandler`
  are bases only, with no concrete messages, message queue, on-disk message
  storage or network worker.