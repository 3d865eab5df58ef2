"""
どこで: `util.argb`。
何を: 32bit ARGB 整数（0xAARRGGBB）の分解/合成と Hex 文字列との相互変換を一元化。
なぜ: 外観モデル/パレット/エクスポートで同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _clamp_u8(x: int) -> int:
    return 0 if x < 0 else 255 if x > 255 else int(x)


def argb_from_rgb(r: int, g: int, b: int, a: int = 255) -> int:
    """RGB(0–255) から ARGB 整数を返す（範囲外はクランプ）。"""
    return (
        (_clamp_u8(a) << 24) | (_clamp_u8(r) << 16) | (_clamp_u8(g) << 8) | _clamp_u8(b)
    )


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 0xFF


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 0xFF


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 0xFF


def blue_from_argb(argb: int) -> int:
    return argb & 0xFF


def argb_to_rgba01(argb: int) -> tuple[float, float, float, float]:
    """ARGB 整数を RGBA(0–1) へ変換する。"""
    return (
        red_from_argb(argb) / 255.0,
        green_from_argb(argb) / 255.0,
        blue_from_argb(argb) / 255.0,
        alpha_from_argb(argb) / 255.0,
    )


def argb_to_hex(argb: int, *, with_alpha: bool = False) -> str:
    """ARGB 整数を "#rrggbb"（with_alpha=True なら "#aarrggbb"）へ変換する。"""
    if with_alpha:
        return f"#{argb & 0xFFFFFFFF:08x}"
    return f"#{argb & 0xFFFFFF:06x}"


def argb_from_hex(s: str) -> int:
    """Hex 文字列から ARGB 整数を返す。

    受理形式: "#RRGGBB", "#AARRGGBB", "0xRRGGBB", "0xAARRGGBB", "RRGGBB", "AARRGGBB"。
    大文字/小文字は不問。アルファ省略時は不透明（0xFF）。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or AARRGGBB)")
    if not all(ch in _HEX_DIGITS for ch in t):
        raise ValueError(f"invalid hex color: '{s}'")
    value = int(t, 16)
    if len(t) == 6:
        value |= 0xFF000000
    return value


__all__ = [
    "argb_from_rgb",
    "alpha_from_argb",
    "red_from_argb",
    "green_from_argb",
    "blue_from_argb",
    "argb_to_rgba01",
    "argb_to_hex",
    "argb_from_hex",
]
