"""Rounding helpers used by the grid and the status readout."""

import math
import sys
from typing import Optional

# Largest lattice index whose grid lines still land within a small
# fraction of a pixel of their exact position
MAX_LATTICE_INDEX = 2.0**40


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties towards positive infinity.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_to(value: float, scale: float, resolution: float) -> float:
    """Round ``value`` to a multiple of ``scale / resolution``.

    ``resolution`` is a power of ten giving the number of decimals kept
    (e.g. 1000 keeps three). The epsilon nudge keeps values such as
    1.005 from rounding down because of their binary representation.
    Values too large to scale are returned unchanged.
    """
    scaled = ((value + sys.float_info.epsilon) * resolution) / scale
    if not math.isfinite(scaled):
        return value
    return round_half_up(round_half_up(scaled) * scale) / resolution


def is_positive_finite(*values: float) -> bool:
    """True if every value is a finite number greater than zero."""
    return all(math.isfinite(v) and v > 0 for v in values)


def lattice_index(value: float, scale: float) -> Optional[float]:
    """Index of the grid line nearest ``value`` for line spacing ``scale``.

    Returns None when the index is not finite or too large to step from.
    """
    index = round_half_up(value / scale)
    if not math.isfinite(index) or abs(index) > MAX_LATTICE_INDEX:
        return None
    return index
