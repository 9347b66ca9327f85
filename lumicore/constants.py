"""Constants shared by several components."""

from __future__ import annotations

from enum import IntEnum

VERSION_STRING = "1.4.0"

# Minimum value that triggers an action in a node, in the range 0...1.
TRIGGER_THRESHOLD = 1.0 / 256

# Rate at which the engine updates the block logic, in Hz.
BLOCK_UPDATE_FPS = 50

DEFAULT_BACKGROUND_NAME = "blueprint_grey_tiled.jpg"


class GraphicalEffectsLevel(IntEnum):
    """Amount and complexity of graphical effects such as blur and shadows."""

    MIN_EFFECTS = 1
    MID_EFFECTS = 2
    MAX_EFFECTS = 3


GRAPHICAL_EFFECTS_LEVEL = GraphicalEffectsLevel.MID_EFFECTS