from __future__ import annotations

"""Tonal palettes: colors constant in hue and chroma, varying in tone.

A :class:`TonalPalette` owns one (hue, chroma) pair and maps integer tones
to ARGB colors through an :class:`~monet.appearance.AppearanceModel`.
Composed colors are memoized per instance: for a given tone the model's
``compose`` is called at most once, also when several threads request the
same tone concurrently. The cache is never evicted.
"""

import logging
from threading import RLock
from typing import Dict, List, Optional

from .appearance import AppearanceModel, ViewingConditions, default_model

logger = logging.getLogger(__name__)


class TonalPalette:
    """Colors sharing a hue and chroma, addressed by tone.

    Use :meth:`from_int` or :meth:`from_hue_and_chroma` to create instances.
    Hue and chroma are stored verbatim; neither they nor the tones passed to
    :meth:`tone` are range-checked.
    """

    __slots__ = ("_hue", "_chroma", "_model", "_viewing_conditions", "_cache", "_lock")

    def __init__(
        self,
        hue: float,
        chroma: float,
        model: AppearanceModel,
        viewing_conditions: ViewingConditions,
    ) -> None:
        self._hue = hue
        self._chroma = chroma
        self._model = model
        self._viewing_conditions = viewing_conditions
        self._cache: Dict[int, int] = {}
        self._lock = RLock()

    @classmethod
    def from_int(
        cls,
        argb: int,
        model: Optional[AppearanceModel] = None,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> "TonalPalette":
        """Create tones using the hue and chroma of an ARGB color.

        Parameters
        ----------
        argb:
            ARGB representation of a color.
        model:
            AppearanceModel used for decomposition and composition. If None,
            the shared default HCT model is used.
        viewing_conditions:
            Profile passed to every composition. If None,
            ``ViewingConditions.DEFAULT`` is used.
        """
        if model is None:
            model = default_model()
        hue, chroma = model.decompose(argb)
        return cls.from_hue_and_chroma(hue, chroma, model, viewing_conditions)

    @classmethod
    def from_hue_and_chroma(
        cls,
        hue: float,
        chroma: float,
        model: Optional[AppearanceModel] = None,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> "TonalPalette":
        """Create tones from a given hue and chroma."""
        if model is None:
            model = default_model()
        if viewing_conditions is None:
            viewing_conditions = ViewingConditions.DEFAULT
        return cls(hue, chroma, model, viewing_conditions)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def viewing_conditions(self) -> ViewingConditions:
        return self._viewing_conditions

    def get_hue(self) -> float:
        return self._hue

    def get_chroma(self) -> float:
        return self._chroma

    def tone(self, tone: int) -> int:
        """Return the ARGB color with this palette's hue/chroma and ``tone``.

        The first request for a tone composes the color and caches it under
        the literal ``tone`` key; later requests return the cached value.
        Errors raised by the model propagate and nothing is cached.
        """
        with self._lock:
            cached = self._cache.get(tone)
            if cached is not None:
                return cached
            argb = self._model.compose(self._hue, self._chroma, tone, self._viewing_conditions)
            self._cache[tone] = argb
        logger.debug(
            "composed tone=%s hue=%s chroma=%s -> %r", tone, self._hue, self._chroma, argb
        )
        return argb

    def cached_tones(self) -> List[int]:
        """Return the tones composed so far, in ascending order."""
        with self._lock:
            return sorted(self._cache)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self._hue!r}, chroma={self._chroma!r})"


__all__ = ["TonalPalette"]
