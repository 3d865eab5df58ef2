from __future__ import annotations

"""Ranking of image colors by suitability as a theme seed.

:func:`score` weighs each color by how much of the image is covered by
colors of a similar hue (its excited proportion) and by how close its
chroma is to a target. Colors that are too gray, too dark or too rare are
dropped, and only the best color within each 15 degree hue neighborhood is
kept.
"""

import logging
import math
from typing import Dict, List, Mapping, Optional, Tuple

from .appearance import AppearanceModel, default_model
from .settings import GOOGLE_BLUE

logger = logging.getLogger(__name__)

CUTOFF_CHROMA = 15.0
CUTOFF_EXCITED_PROPORTION = 0.01
CUTOFF_TONE = 10.0
TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
HUE_NEIGHBORHOOD = 15


def _hue_bucket(hue: float) -> int:
    # Round half up, then wrap into [0, 360).
    return int(math.floor(hue + 0.5)) % 360


def difference_degrees(a: float, b: float) -> float:
    """Return the smallest angle between two hues, in [0, 180]."""
    return 180.0 - abs(abs(a - b) % 360.0 - 180.0)


def score(
    population: Mapping[int, int],
    model: Optional[AppearanceModel] = None,
) -> List[int]:
    """Rank colors of an image for use as a theme seed.

    Parameters
    ----------
    population:
        Mapping of ARGB color to the number of pixels using it.
    model:
        AppearanceModel used to measure hue, chroma and tone.

    Returns
    -------
    list[int]
        Colors in descending score order, at most one per hue
        neighborhood. ``[GOOGLE_BLUE]`` when no color qualifies.
    """
    if model is None:
        model = default_model()

    total = float(sum(population.values()))
    cams: Dict[int, Tuple[float, float]] = {}
    hue_proportions = [0.0] * 360
    if total > 0:
        for color, count in population.items():
            hue, chroma = model.decompose(color)
            cams[color] = (hue, chroma)
            hue_proportions[_hue_bucket(hue)] += count / total

    excited: Dict[int, float] = {}
    for color, (hue, _) in cams.items():
        center = _hue_bucket(hue)
        excited[color] = sum(
            hue_proportions[j % 360]
            for j in range(center - HUE_NEIGHBORHOOD, center + HUE_NEIGHBORHOOD)
        )

    scored: List[Tuple[int, float]] = []
    for color, (hue, chroma) in cams.items():
        proportion = excited[color]
        if (
            chroma < CUTOFF_CHROMA
            or proportion < CUTOFF_EXCITED_PROPORTION
            or model.tone_of(color) < CUTOFF_TONE
        ):
            continue
        weight = WEIGHT_CHROMA_BELOW if chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        value = proportion * 100.0 * WEIGHT_PROPORTION + (chroma - TARGET_CHROMA) * weight
        scored.append((color, value))

    # sorted() is stable, so ties keep population order.
    scored.sort(key=lambda item: item[1], reverse=True)

    chosen: List[int] = []
    for color, _ in scored:
        hue = cams[color][0]
        if any(difference_degrees(hue, cams[c][0]) < HUE_NEIGHBORHOOD for c in chosen):
            continue
        chosen.append(color)

    if not chosen:
        logger.warning("no color of %d scored above the cutoffs, using fallback", len(cams))
        return [GOOGLE_BLUE]
    logger.debug("scored %d colors, kept %d", len(cams), len(chosen))
    return chosen


__all__ = [
    "CUTOFF_CHROMA",
    "CUTOFF_EXCITED_PROPORTION",
    "CUTOFF_TONE",
    "difference_degrees",
    "score",
]
