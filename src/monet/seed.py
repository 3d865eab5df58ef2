from __future__ import annotations

"""Seed color selection.

Picks the colors of an image (or wallpaper) that are usable as theme seeds.
Colors with a pixel population are ranked by :func:`monet.score.score`;
without one, the reported main colors are filtered by the same chroma and
tone cutoffs.
"""

import logging
from typing import Iterable, List, Mapping, Optional

from .appearance import AppearanceModel, default_model
from .score import CUTOFF_CHROMA, CUTOFF_TONE, score
from .settings import GOOGLE_BLUE

logger = logging.getLogger(__name__)


def is_usable(argb: int, model: Optional[AppearanceModel] = None) -> bool:
    """Return True if ``argb`` passes the chroma and tone cutoffs."""
    if model is None:
        model = default_model()
    _, chroma = model.decompose(argb)
    return chroma >= CUTOFF_CHROMA and model.tone_of(argb) >= CUTOFF_TONE


def good_colors(
    population: Mapping[int, int],
    main_colors: Iterable[int] = (),
    model: Optional[AppearanceModel] = None,
) -> List[int]:
    """Return the distinct colors usable as seeds, best first.

    Parameters
    ----------
    population:
        Mapping of ARGB color to the number of pixels using it.
    main_colors:
        Dominant colors reported alongside an empty population (e.g. live
        wallpapers); only consulted when the total population is zero.
    model:
        AppearanceModel used to measure hue, chroma and tone.

    Returns
    -------
    list[int]
        Distinct usable colors, or ``[GOOGLE_BLUE]`` when none qualify.
    """
    if model is None:
        model = default_model()

    if sum(population.values()) > 0:
        return score(population, model)

    candidates = list(dict.fromkeys(main_colors))
    usable = [c for c in candidates if is_usable(c, model)]
    if not usable:
        logger.warning("no usable seed among %d candidates, using fallback", len(candidates))
        return [GOOGLE_BLUE]
    return usable


def main_color(
    population: Mapping[int, int],
    main_colors: Iterable[int] = (),
    model: Optional[AppearanceModel] = None,
) -> int:
    """Return the best usable color (see :func:`good_colors`)."""
    return good_colors(population, main_colors, model)[0]


__all__ = ["CUTOFF_CHROMA", "CUTOFF_TONE", "good_colors", "is_usable", "main_color"]
