from __future__ import annotations

"""Helpers for handing palette colors to external UIs.

This module exposes label/enum pairs for export formats and an
``export_shades`` helper converting ARGB integers into simple color lists
(ARGB/HEX/sRGB) that UI code can consume easily.
"""

from enum import Enum
from typing import Dict, Iterable, List

from util.argb import argb_to_hex, argb_to_rgba01, blue_from_argb, green_from_argb, red_from_argb


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    ARGB = "argb"
    HEX = "hex"
    SRGB_01 = "srgb_01"
    SRGB_255 = "srgb_255"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("ARGB", ExportFormat.ARGB),
    ("HEX", ExportFormat.HEX),
    ("sRGB (0-1)", ExportFormat.SRGB_01),
    ("sRGB (0-255)", ExportFormat.SRGB_255),
]

EXPORT_FORMAT_LABEL_MAP: Dict[str, ExportFormat] = {
    label: value for label, value in EXPORT_FORMAT_OPTIONS
}


def export_shades(colors: Iterable[int], fmt: ExportFormat | str) -> List[object]:
    """Convert ARGB colors to a list in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.ARGB:
        return [int(c) for c in colors]
    if export_fmt == ExportFormat.HEX:
        return [argb_to_hex(c) for c in colors]
    if export_fmt == ExportFormat.SRGB_01:
        return [argb_to_rgba01(c)[:3] for c in colors]
    if export_fmt == ExportFormat.SRGB_255:
        return [(red_from_argb(c), green_from_argb(c), blue_from_argb(c)) for c in colors]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "EXPORT_FORMAT_LABEL_MAP",
    "export_shades",
]
