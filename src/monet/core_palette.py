from __future__ import annotations

"""Key tonal palettes derived from a single seed color.

This module defines :class:`CorePalette`, an intermediate concept between
the key color of a UI theme and a full color scheme. Five tonal palettes
are generated; all except one share the seed's hue, and all vary in
chroma.
"""

import logging
from typing import Iterator, Optional, Tuple

from .appearance import AppearanceModel, ViewingConditions, default_model
from .tonal_palette import TonalPalette

logger = logging.getLogger(__name__)

A1_MIN_CHROMA = 48.0
A2_CHROMA = 16.0
A3_CHROMA = 32.0
A3_HUE_OFFSET = 60.0
N1_CHROMA = 4.0
N2_CHROMA = 8.0

ROLES = ("a1", "a2", "a3", "n1", "n2")


class CorePalette:
    """Five role palettes derived from one seed decomposition.

    Attributes
    ----------
    a1, a2, a3:
        Accent palettes. ``a1`` keeps the seed chroma but never drops below
        48; ``a3`` rotates the seed hue by 60 degrees.
    n1, n2:
        Neutral palettes with a faint tint of the seed hue.

    Use :meth:`of` to create instances; the initializer is internal.
    """

    __slots__ = ("_a1", "_a2", "_a3", "_n1", "_n2")

    def __init__(
        self,
        *,
        _a1: TonalPalette,
        _a2: TonalPalette,
        _a3: TonalPalette,
        _n1: TonalPalette,
        _n2: TonalPalette,
    ) -> None:
        self._a1 = _a1
        self._a2 = _a2
        self._a3 = _a3
        self._n1 = _n1
        self._n2 = _n2

    @classmethod
    def of(
        cls,
        argb: int,
        model: Optional[AppearanceModel] = None,
        viewing_conditions: Optional[ViewingConditions] = None,
    ) -> "CorePalette":
        """Create key tones from a color.

        Parameters
        ----------
        argb:
            ARGB representation of the seed color. It is decomposed exactly
            once.
        model:
            AppearanceModel shared by the five palettes. If None, the
            shared default HCT model is used.
        viewing_conditions:
            Profile the palettes compose with. If None,
            ``ViewingConditions.DEFAULT`` is used.
        """
        if model is None:
            model = default_model()
        hue, chroma = model.decompose(argb)
        logger.debug("core palette seed=%08x hue=%s chroma=%s", argb & 0xFFFFFFFF, hue, chroma)

        def palette(h: float, c: float) -> TonalPalette:
            return TonalPalette.from_hue_and_chroma(h, c, model, viewing_conditions)

        # a3 hue is left unwrapped; the model handles periodicity.
        return cls(
            _a1=palette(hue, max(A1_MIN_CHROMA, chroma)),
            _a2=palette(hue, A2_CHROMA),
            _a3=palette(hue + A3_HUE_OFFSET, A3_CHROMA),
            _n1=palette(hue, N1_CHROMA),
            _n2=palette(hue, N2_CHROMA),
        )

    @property
    def a1(self) -> TonalPalette:
        return self._a1

    @property
    def a2(self) -> TonalPalette:
        return self._a2

    @property
    def a3(self) -> TonalPalette:
        return self._a3

    @property
    def n1(self) -> TonalPalette:
        return self._n1

    @property
    def n2(self) -> TonalPalette:
        return self._n2

    def palettes(self) -> Iterator[Tuple[str, TonalPalette]]:
        """Yield ``(role, palette)`` pairs in role order."""
        for role in ROLES:
            yield role, getattr(self, role)

    def __repr__(self) -> str:
        inner = ", ".join(f"{role}={p!r}" for role, p in self.palettes())
        return f"CorePalette({inner})"


__all__ = ["CorePalette", "ROLES"]
