from __future__ import annotations

"""Typed settings for shade generation, read from the YAML configuration.

The ``monet`` section of :func:`util.config.load_config` is mapped onto
:class:`MonetSettings`. Missing keys fall back to the built-in defaults.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from util.argb import argb_from_hex
from util.config import load_config

GOOGLE_BLUE = 0xFF4285F4


@dataclass(frozen=True)
class MonetSettings:
    """Settings consumed by :class:`monet.shades.Monet`.

    Attributes
    ----------
    fallback_seed:
        ARGB seed used in place of a fully transparent color.
    shade_chroma_cap:
        Upper bound applied to palette chroma before composing shades.
    log_level:
        Level applied to the ``monet`` logger by :func:`configure_logging`.
    """

    fallback_seed: int = GOOGLE_BLUE
    shade_chroma_cap: float = 40.0
    log_level: str = "WARNING"


def _parse_seed(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"fallback_seed must be an ARGB int or hex string: {value!r}")
    if isinstance(value, int):
        return value & 0xFFFFFFFF
    if isinstance(value, str):
        return argb_from_hex(value)
    raise ValueError(f"fallback_seed must be an ARGB int or hex string: {value!r}")


def load_settings(config: Optional[Mapping[str, Any]] = None) -> MonetSettings:
    """Build :class:`MonetSettings` from ``config`` (or :func:`load_config`)."""
    if config is None:
        config = load_config()
    section = config.get("monet") or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'monet' config section must be a mapping: {section!r}")

    defaults = MonetSettings()
    fallback_seed = defaults.fallback_seed
    if "fallback_seed" in section:
        fallback_seed = _parse_seed(section["fallback_seed"])

    cap = section.get("shade_chroma_cap", defaults.shade_chroma_cap)
    try:
        cap = float(cap)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"shade_chroma_cap must be a number: {cap!r}") from exc
    if cap < 0.0:
        raise ValueError(f"shade_chroma_cap must be non-negative: {cap!r}")

    log_level = str(section.get("log_level", defaults.log_level)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"unknown log_level: {log_level!r}")

    return MonetSettings(fallback_seed=fallback_seed, shade_chroma_cap=cap, log_level=log_level)


def configure_logging(settings: MonetSettings) -> None:
    """Apply ``settings.log_level`` to the ``monet`` package logger."""
    logging.getLogger("monet").setLevel(settings.log_level)


__all__ = ["GOOGLE_BLUE", "MonetSettings", "configure_logging", "load_settings"]
