"""Colour of a single disk."""
from enum import Enum

from disks.constants import DARK_GLYPH, LIGHT_GLYPH


class DiskColor(Enum):
    LIGHT = LIGHT_GLYPH
    DARK = DARK_GLYPH

    @property
    def glyph(self) -> str:
        return self.value
