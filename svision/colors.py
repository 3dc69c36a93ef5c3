"""ARGB colour helpers: packing, blending, HSL conversion and gradients."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _tdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _lround(value: float) -> int:
    """Round to nearest, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def make_color(r: int, g: int, b: int, a: int = 255) -> int:
    """Pack channels into a 32-bit ARGB value."""
    return ((a & 0xFF) << 24 | (r & 0xFF) << 16 | (g & 0xFF) << 8 | (b & 0xFF)) & 0xFFFFFFFF


def get_alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def get_red(color: int) -> int:
    return (color >> 16) & 0xFF


def get_green(color: int) -> int:
    return (color >> 8) & 0xFF


def get_blue(color: int) -> int:
    return color & 0xFF


def get_bit(number: int, n: int) -> bool:
    return bool((number >> n) & 1)


def set_bit(number: int, n: int, on: bool) -> int:
    if on:
        return number | (1 << n)
    return number & ~(1 << n)


def toggle_bit(number: int, n: int) -> int:
    return number ^ (1 << n)


def blend_colors(foreground: int, background: int, alpha: int) -> int:
    """Mix two colours; ``alpha`` is the foreground weight (0-255). Result is opaque."""
    inv = 255 - alpha
    red = (get_red(foreground) * alpha + get_red(background) * inv) // 255
    green = (get_green(foreground) * alpha + get_green(background) * inv) // 255
    blue = (get_blue(foreground) * alpha + get_blue(background) * inv) // 255
    return make_color(red, green, blue)


@dataclass
class HSL:
    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741


def rgb_to_hsl(rgb: int) -> HSL:
    r = get_red(rgb) / 255.0
    g = get_green(rgb) / 255.0
    b = get_blue(rgb) / 255.0
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    hsl = HSL()

    if delta == 0:
        hsl.h = 0.0
    elif cmax == r:
        hsl.h = 60.0 * math.fmod((g - b) / delta, 6)
    elif cmax == g:
        hsl.h = 60.0 * ((b - r) / delta + 2)
    else:
        hsl.h = 60.0 * ((r - g) / delta + 4)

    hsl.l = 0.5 * (cmax + cmin)
    if delta != 0:
        hsl.s = delta / (1 - abs(2 * hsl.l - 1))
    return hsl


def hsl_to_rgb(hsl: HSL, alpha: int = 255) -> int:
    c = (1 - abs(2 * hsl.l - 1)) * hsl.s
    x = c * (1 - abs(math.fmod(hsl.h / 60.0, 2) - 1))
    m = hsl.l - 0.5 * c

    if hsl.h < 60:
        r, g, b = c, x, 0.0
    elif hsl.h < 120:
        r, g, b = x, c, 0.0
    elif hsl.h < 180:
        r, g, b = 0.0, c, x
    elif hsl.h < 240:
        r, g, b = 0.0, x, c
    elif hsl.h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return make_color(int((r + m) * 255), int((g + m) * 255), int((b + m) * 255), alpha)


def darker(color: int, percentage: float = 0.1) -> int:
    """Reduce lightness by ``percentage`` (0..1), keeping alpha."""
    hsl = rgb_to_hsl(color)
    hsl.l = max(0.0, hsl.l - percentage)
    return hsl_to_rgb(hsl, get_alpha(color))


def lighter(color: int, percentage: float = 0.1) -> int:
    """Increase lightness by ``percentage`` (0..1), keeping alpha."""
    hsl = rgb_to_hsl(color)
    hsl.l = min(1.0, max(0.0, hsl.l + percentage))
    return hsl_to_rgb(hsl, get_alpha(color))


class Gradient:
    """Steps linearly from one colour toward another in whole-number increments."""

    def __init__(self, color1: int, color2: int, steps: int) -> None:
        r_start, g_start, b_start = get_red(color1), get_green(color1), get_blue(color1)
        self.r_step = float(_tdiv(get_red(color2) - r_start, steps))
        self.g_step = float(_tdiv(get_green(color2) - g_start, steps))
        self.b_step = float(_tdiv(get_blue(color2) - b_start, steps))
        self.r_current = float(r_start)
        self.g_current = float(g_start)
        self.b_current = float(b_start)

    def advance(self) -> None:
        self.r_current += self.r_step
        self.g_current += self.g_step
        self.b_current += self.b_step

    def color(self) -> int:
        return make_color(
            _lround(self.r_current),
            _lround(self.g_current),
            _lround(self.b_current),
        )