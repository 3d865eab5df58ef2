from __future__ import annotations

"""Color-appearance model boundary for tonal palettes.

This module defines the :class:`AppearanceModel` protocol through which
palettes decompose ARGB colors into (hue, chroma) and compose
(hue, chroma, tone) back into ARGB, and a default implementation backed by
the HCT space of ``coloraide``.
"""

import logging
import math
from dataclasses import dataclass
from typing import ClassVar, Protocol, Tuple

from coloraide import Color as _BaseColor
from coloraide.distance.delta_e_hct import DEHCT
from coloraide.gamut.fit_hct_chroma import HCTChroma
from coloraide.spaces.hct import HCT

from util.argb import argb_from_rgb, argb_to_rgba01

logger = logging.getLogger(__name__)

HueChroma = Tuple[float, float]


class HctColor(_BaseColor):
    """Project-local Color class with the HCT space registered."""


# hct-chroma fitting measures distance with the HCT delta E.
HctColor.register([HCT(), DEHCT(), HCTChroma()])


@dataclass(frozen=True)
class ViewingConditions:
    """Viewing-condition profile passed to :meth:`AppearanceModel.compose`.

    Attributes
    ----------
    space:
        Name of the perceptual space the model composes in. The default
        ``"hct"`` uses CAM16 under the standard Material environment
        (D65, 200 lux, L* 50 background, average surround). Other profiles
        are selected by registering an HCT subclass under a different name.
    gamut:
        Target RGB gamut the composed color is fitted into.
    """

    space: str = "hct"
    gamut: str = "srgb"

    DEFAULT: ClassVar["ViewingConditions"]


ViewingConditions.DEFAULT = ViewingConditions()


class AppearanceModel(Protocol):
    """Protocol abstracting the perceptual color model."""

    def decompose(self, argb: int) -> HueChroma: ...

    def compose(
        self,
        hue: float,
        chroma: float,
        tone: float,
        viewing_conditions: ViewingConditions,
    ) -> int: ...

    def tone_of(self, argb: int) -> float: ...


class HctModel:
    """Default implementation based on coloraide's HCT space."""

    def __init__(self, color_class: type[_BaseColor] = HctColor) -> None:
        self._color_class = color_class

    def _hct_coords(self, argb: int, space: str = "hct") -> Tuple[float, float, float]:
        r, g, b, _ = argb_to_rgba01(argb)
        color = self._color_class("srgb", [r, g, b]).convert(space)
        h, c, t = (float(v) for v in color.coords())
        # Achromatic colors carry an undefined (NaN) hue.
        if math.isnan(h):
            h = 0.0
        return h, c, t

    def decompose(self, argb: int) -> HueChroma:
        """Return the (hue, chroma) of an ARGB color."""
        h, c, _ = self._hct_coords(argb)
        return h, c

    def tone_of(self, argb: int) -> float:
        """Return the HCT tone (CIE L*) of an ARGB color."""
        return self._hct_coords(argb)[2]

    def compose(
        self,
        hue: float,
        chroma: float,
        tone: float,
        viewing_conditions: ViewingConditions = ViewingConditions.DEFAULT,
    ) -> int:
        """Compose an opaque ARGB color from hue, chroma and tone.

        Chroma is reduced until the color fits ``viewing_conditions.gamut``;
        hue and tone are kept.
        """
        color = self._color_class(viewing_conditions.space, [hue, chroma, tone])
        color.fit(viewing_conditions.gamut, method="hct-chroma")
        r, g, b = color.convert(viewing_conditions.gamut).coords()
        return argb_from_rgb(_channel(r), _channel(g), _channel(b))


def _channel(v: float) -> int:
    if math.isnan(v):
        return 0
    return int(round(max(0.0, min(1.0, v)) * 255))


_DEFAULT_MODEL: HctModel | None = None


def default_model() -> HctModel:
    """Return the shared default :class:`HctModel`."""
    global _DEFAULT_MODEL
    if _DEFAULT_MODEL is None:
        _DEFAULT_MODEL = HctModel()
        logger.debug("created default HCT appearance model")
    return _DEFAULT_MODEL


__all__ = [
    "AppearanceModel",
    "HctColor",
    "HctModel",
    "HueChroma",
    "ViewingConditions",
    "default_model",
]
