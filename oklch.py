#!/usr/bin/env python3
"""
OKLCH color space conversions.

sRGB <-> linear RGB <-> OKLab <-> OKLCH, plus hex parsing and formatting.
Array functions accept a single color of shape (3,) or a batch of shape (n, 3).
"""

import math
import re
from dataclasses import dataclass

import numpy as np


# =============================================================================
# Constants
# =============================================================================

HEX_PATTERN = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE)

# sRGB transfer function
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4

# OKLab (Björn Ottosson). Rows produce l, m, s from linear RGB.
LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LINEAR_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


# =============================================================================
# Color Types
# =============================================================================

@dataclass(frozen=True)
class RgbColor:
    """sRGB color, each channel in [0, 1]."""
    r: float
    g: float
    b: float

    def to_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b])


@dataclass(frozen=True)
class OklchColor:
    """OKLCH color. Hue is kept in [0, 360) and chroma is never negative."""
    l: float  # Lightness 0-1
    c: float  # Chroma 0-~0.4
    h: float  # Hue 0-360

    def __post_init__(self):
        object.__setattr__(self, 'l', float(self.l))
        object.__setattr__(self, 'c', max(0.0, float(self.c)))
        object.__setattr__(self, 'h', normalize_hue(self.h))


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = float(h) % 360.0
    # A tiny negative angle wraps to exactly 360.0 in floating point
    if h >= 360.0:
        h = 0.0
    return h


# =============================================================================
# Hex
# =============================================================================

def hex_to_rgb(hex_color: str) -> RgbColor:
    """
    Parse '#RRGGBB' or 'RRGGBB' (any case) into channels in [0, 1].

    Anything that doesn't match resolves to black rather than raising.
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return RgbColor(0.0, 0.0, 0.0)
    r, g, b = (int(group, 16) / 255 for group in match.groups())
    return RgbColor(r, g, b)


def _channel_to_hex(c: float) -> str:
    c = float(c)
    if math.isnan(c):
        c = 0.0
    clamped = max(0.0, min(1.0, c))
    # Round half up, matching the usual 0-255 quantization
    return f"{int(math.floor(clamped * 255 + 0.5)):02X}"


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format sRGB channels (clamped to [0, 1]) as uppercase '#RRGGBB'."""
    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"


# =============================================================================
# Transfer Functions
# =============================================================================

def srgb_to_linear(c):
    """Decode gamma-encoded sRGB to linear light."""
    c = np.asarray(c, dtype=np.float64)
    linear = np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / 12.92,
        ((np.clip(c, 0, None) + 0.055) / 1.055) ** SRGB_GAMMA,
    )
    return linear if linear.ndim else float(linear)


def linear_to_srgb(c):
    """Encode linear light as gamma-encoded sRGB."""
    c = np.asarray(c, dtype=np.float64)
    srgb = np.where(
        c <= SRGB_ENCODE_THRESHOLD,
        12.92 * c,
        1.055 * np.power(np.clip(c, 0, None), 1 / SRGB_GAMMA) - 0.055,
    )
    return srgb if srgb.ndim else float(srgb)


# =============================================================================
# OKLab / OKLCH
# =============================================================================

def linear_rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """Convert linear RGB to OKLab (L, a, b)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = rgb @ LINEAR_RGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def oklab_to_linear_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert OKLab to linear RGB. Out-of-gamut colors yield values outside [0, 1]."""
    lab = np.asarray(lab, dtype=np.float64)
    lms = (lab @ OKLAB_TO_LMS.T) ** 3
    return lms @ LMS_TO_LINEAR_RGB.T


def oklab_to_oklch(lab: np.ndarray) -> OklchColor:
    L, a, b = (float(v) for v in lab)
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return OklchColor(L, c, h)


def oklch_to_oklab(oklch: OklchColor) -> np.ndarray:
    h_rad = math.radians(oklch.h)
    return np.array([oklch.l, oklch.c * math.cos(h_rad), oklch.c * math.sin(h_rad)])


def oklch_to_linear_rgb(oklch: OklchColor) -> np.ndarray:
    """Linear RGB for an OKLCH color, unclamped."""
    return oklab_to_linear_rgb(oklch_to_oklab(oklch))


def hex_to_oklch(hex_color: str) -> OklchColor:
    """Convert a hex string to OKLCH. Malformed input maps to black (0, 0, 0)."""
    linear = srgb_to_linear(hex_to_rgb(hex_color).to_array())
    return oklab_to_oklch(linear_rgb_to_oklab(linear))


def oklch_to_hex(oklch: OklchColor) -> str:
    """Convert OKLCH to hex, clamping channels that fall outside sRGB."""
    r, g, b = linear_to_srgb(oklch_to_linear_rgb(oklch))
    return rgb_to_hex(r, g, b)


def format_oklch(oklch: OklchColor) -> str:
    """Format for display, e.g. 'oklch(62.4% 0.091 250.3)'."""
    return f"oklch({oklch.l * 100:.1f}% {oklch.c:.3f} {oklch.h:.1f})"
