"""Public entrypoint for the monet tonal palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``monet`` instead of individual
submodules.
"""

from .appearance import AppearanceModel, HctModel, ViewingConditions, default_model
from .tonal_palette import TonalPalette
from .core_palette import CorePalette
from .settings import GOOGLE_BLUE, MonetSettings, configure_logging, load_settings
from .shades import SHADE_TONES, Monet, shades_from
from .seed import good_colors, main_color
from .export import EXPORT_FORMAT_OPTIONS, ExportFormat, export_shades

__all__ = [
    "AppearanceModel",
    "HctModel",
    "ViewingConditions",
    "default_model",
    "TonalPalette",
    "CorePalette",
    "GOOGLE_BLUE",
    "MonetSettings",
    "configure_logging",
    "load_settings",
    "SHADE_TONES",
    "Monet",
    "shades_from",
    "good_colors",
    "main_color",
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "export_shades",
]
