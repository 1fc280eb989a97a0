#!/usr/bin/env python3
"""
sRGB gamut checks and chroma search for OKLCH colors.

Both searches assume that, for a fixed lightness and hue, the in-gamut
chromas form a prefix [0, c_max]: once a chroma leaves the gamut every
larger chroma is outside too.
"""

import numpy as np

from oklch import OklchColor, oklch_to_linear_rgb


# =============================================================================
# Constants
# =============================================================================

MAX_CHROMA_SEARCH_HIGH = 0.4  # Above the sRGB chroma cusp for every hue
MAX_CHROMA_TOLERANCE = 1e-3  # ~9 bisection steps over [0, 0.4]
CLAMP_CHROMA_TOLERANCE = 1e-4  # ~13 bisection steps over [0, c]


# =============================================================================
# Gamut Search
# =============================================================================

def is_in_gamut(oklch: OklchColor) -> bool:
    """True when every linear RGB channel lies in [0, 1]."""
    rgb = oklch_to_linear_rgb(oklch)
    return bool(np.all((rgb >= 0) & (rgb <= 1)))


def find_max_chroma(lightness: float, hue: float) -> float:
    """
    Largest in-gamut chroma at this lightness and hue, to within
    MAX_CHROMA_TOLERANCE.

    low always stays in gamut and high always stays out of it.
    """
    low = 0.0
    high = MAX_CHROMA_SEARCH_HIGH

    while high - low > MAX_CHROMA_TOLERANCE:
        mid = (low + high) / 2
        if is_in_gamut(OklchColor(lightness, mid, hue)):
            low = mid
        else:
            high = mid

    return low


def clamp_chroma(oklch: OklchColor) -> OklchColor:
    """Reduce chroma until the color fits in sRGB. In-gamut colors pass through."""
    if is_in_gamut(oklch):
        return oklch

    low = 0.0
    high = oklch.c

    while high - low > CLAMP_CHROMA_TOLERANCE:
        mid = (low + high) / 2
        if is_in_gamut(OklchColor(oklch.l, mid, oklch.h)):
            low = mid
        else:
            high = mid

    return OklchColor(oklch.l, low, oklch.h)
