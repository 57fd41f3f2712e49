# renderer/color.py
import math
from typing import Tuple
from core.vector import Color

# Saturation bounds for channels that are not finite.
CHANNEL_MIN = -2**31
CHANNEL_MAX = 2**31 - 1

def to_byte(c: float) -> int:
    """
    Maps a linear channel value to an 8-bit integer with floor(255.999 * c).

    Out-of-range input is not clamped, so the result may fall outside [0, 255].
    NaN gives 0. Values beyond the 32-bit signed range, infinities included,
    saturate to its limits.
    """
    scaled = 255.999 * c
    if math.isnan(scaled):
        return 0
    if scaled >= CHANNEL_MAX:
        return CHANNEL_MAX
    if scaled <= CHANNEL_MIN:
        return CHANNEL_MIN
    return math.floor(scaled)

def quantize(color: Color) -> Tuple[int, int, int]:
    return to_byte(color.x), to_byte(color.y), to_byte(color.z)
