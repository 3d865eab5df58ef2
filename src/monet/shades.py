from __future__ import annotations

"""System shade ramps built from a :class:`~monet.core_palette.CorePalette`.

:class:`Monet` turns one seed color into the five 13-entry accent/neutral
shade lists used by system themes. Shades are composed directly through the
appearance model with a capped chroma, so they do not go through the
integer-tone caches of the core palettes.
"""

import logging
from typing import List, Optional

import numpy as np

from util.argb import argb_to_rgba01

from .appearance import AppearanceModel, ViewingConditions, default_model
from .core_palette import CorePalette
from .settings import MonetSettings, load_settings

logger = logging.getLogger(__name__)

# 49.6 instead of 50: the closest tone whose shade still gives a 4.5:1
# contrast ratio for normal text (WCAG 2.0 AA).
SHADE_TONES = (99.0, 95.0, 90.0, 80.0, 70.0, 60.0, 49.6, 40.0, 30.0, 20.0, 10.0, 0.0, -10.0)


def shades_from(
    hue: float,
    chroma: float,
    model: Optional[AppearanceModel] = None,
    viewing_conditions: Optional[ViewingConditions] = None,
    chroma_cap: float = 40.0,
) -> List[int]:
    """Compose one shade per entry of :data:`SHADE_TONES`.

    Chroma is capped at ``chroma_cap``, which mutes very saturated seeds.
    """
    if model is None:
        model = default_model()
    if viewing_conditions is None:
        viewing_conditions = ViewingConditions.DEFAULT
    capped = min(chroma, chroma_cap)
    return [model.compose(hue, capped, tone, viewing_conditions) for tone in SHADE_TONES]


class Monet:
    """Accent and neutral shade lists for one seed color.

    Parameters
    ----------
    color:
        Seed ARGB color. A fully transparent ``0`` is replaced by
        ``settings.fallback_seed``.
    model, viewing_conditions:
        Passed through to the core palette and to :func:`shades_from`.
    settings:
        MonetSettings; if None they are loaded from the YAML configuration.
    """

    def __init__(
        self,
        color: int,
        model: Optional[AppearanceModel] = None,
        viewing_conditions: Optional[ViewingConditions] = None,
        settings: Optional[MonetSettings] = None,
    ) -> None:
        if settings is None:
            settings = load_settings()
        if model is None:
            model = default_model()

        seed = color
        if color == 0:
            logger.warning("transparent seed color, falling back to %08x", settings.fallback_seed)
            seed = settings.fallback_seed

        self.seed = seed
        self.palette = CorePalette.of(seed, model, viewing_conditions)

        def shades(role: str) -> List[int]:
            p = getattr(self.palette, role)
            return shades_from(
                p.get_hue(),
                p.get_chroma(),
                model,
                viewing_conditions,
                settings.shade_chroma_cap,
            )

        self.accent1_shades = shades("a1")
        self.accent2_shades = shades("a2")
        self.accent3_shades = shades("a3")
        self.neutral1_shades = shades("n1")
        self.neutral2_shades = shades("n2")

    @property
    def all_accent_shades(self) -> List[int]:
        return [*self.accent1_shades, *self.accent2_shades, *self.accent3_shades]

    @property
    def all_neutral_shades(self) -> List[int]:
        return [*self.neutral1_shades, *self.neutral2_shades]

    def rgba_array(self) -> np.ndarray:
        """Return all shades (accents, then neutrals) as float32 RGBA in [0, 1].

        The result has shape ``(65, 4)``.
        """
        colors = self.all_accent_shades + self.all_neutral_shades
        return np.array([argb_to_rgba01(c) for c in colors], dtype=np.float32).reshape(-1, 4)


__all__ = ["Monet", "SHADE_TONES", "shades_from"]
