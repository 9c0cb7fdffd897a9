"""Thermal front between displaced (cold N2) and resident warm gas.

Plug flow is approximated by a leader segment, the furthest segment the
cumulative N2 throughput has reached, and a trailer MIXING_ZONE_SEGMENTS
behind it. Segments behind the trailer get full heat removal, segments in
the band get a linearly blended fraction, segments ahead get none.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

MIXING_ZONE_SEGMENTS = 5


class FrontPosition(NamedTuple):
    leader: int    # clamped to [0, n]
    trailer: int   # clamped to [0, n]
    reach: int     # unclamped leader; keeps moving once the pipe has been swept


def front_position(
    throughput_nm3: float,
    inventory_nm3: float,
    n_segments: int,
    width: int = MIXING_ZONE_SEGMENTS,
) -> FrontPosition:
    if inventory_nm3 > 0:
        reach = math.floor(throughput_nm3 / inventory_nm3 * n_segments)
    else:
        reach = n_segments + width
    leader = min(max(reach, 0), n_segments)
    trailer = min(max(reach - width, 0), n_segments)
    return FrontPosition(leader, trailer, reach)


def mixing_factors(front: FrontPosition, n_segments: int, width: int = MIXING_ZONE_SEGMENTS) -> np.ndarray:
    """Fraction of the convective heat removal each segment receives.

    1 behind the trailer, (reach - i) / width inside the band, 0 ahead of the
    leader. Once throughput exceeds the inventory by the band width the band
    has left the pipe and every segment is at 1.
    """
    idx = np.arange(n_segments)
    if width <= 0:
        return (idx < front.reach).astype(float)
    return np.clip((front.reach - idx) / width, 0.0, 1.0)
