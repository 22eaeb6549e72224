# Glyphs used when rendering a row for diagnostics.
LIGHT_GLYPH = "L"
DARK_GLYPH = "D"
DISPLAY_SEPARATOR = " "

# Sorter names as registered in the default sorter registry.
ALGORITHM_LEFT_TO_RIGHT = "left_to_right"
ALGORITHM_LAWNMOWER = "lawnmower"
DEFAULT_ALGORITHM = ALGORITHM_LAWNMOWER

# Sweep directions reported with swap events.
DIRECTION_FORWARD = "forward"
DIRECTION_BACKWARD = "backward"

# esper world used by the batch layer unless a caller picks another one.
DEFAULT_WORLD_NAME = "disks"
