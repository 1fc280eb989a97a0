#!/usr/bin/env python3
"""
WCAG relative luminance and the shared per-step luminance curve.

Every generated ramp reproduces the luminance of a reference neutral ramp at
each step, so contrast against white is the same for every hue.
"""

from dataclasses import dataclass

import numpy as np

from oklch import hex_to_rgb, srgb_to_linear


# =============================================================================
# Constants
# =============================================================================

STEP_VALUES = (50, 100, 150, 200, 250, 350, 450, 550, 650, 750, 800, 850, 900, 950)

REFERENCE_NEUTRALS_HEX_BY_STEP = {
    50: '#FDFCFB',
    100: '#F7F4F2',
    150: '#EEECEB',
    200: '#D9D4D1',
    250: '#C4B9B4',
    350: '#AEA39D',
    450: '#978881',
    550: '#786A64',
    650: '#5F5550',
    750: '#4A4440',
    800: '#3A3632',
    850: '#2C2926',
    900: '#211F1D',
    950: '#151413',
}

LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


# =============================================================================
# Luminance & Contrast
# =============================================================================

def relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance of a hex color (0 = black, 1 = white)."""
    linear = srgb_to_linear(hex_to_rgb(hex_color).to_array())
    return float(linear @ LUMINANCE_WEIGHTS)


def contrast_ratio(hex1: str, hex2: str) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21."""
    l1 = relative_luminance(hex1)
    l2 = relative_luminance(hex2)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def contrast_with_white(hex_color: str) -> float:
    return contrast_ratio(hex_color, '#FFFFFF')


def wcag_level(ratio: float) -> str:
    """Conformance level for normal text at a given contrast ratio."""
    if ratio >= 7:
        return "AAA"
    elif ratio >= 4.5:
        return "AA"
    elif ratio >= 3:
        return "AA-large"
    return "fail"


# =============================================================================
# Luminance Curve
# =============================================================================

@dataclass(frozen=True, eq=False)
class LuminanceCurve:
    """Target relative luminance per step index, one entry per STEP_VALUES."""
    values: np.ndarray

    def __post_init__(self):
        values = np.array(self.values, dtype=np.float64)
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @classmethod
    def from_reference(cls, hex_by_step: dict) -> 'LuminanceCurve':
        """
        Build the curve from a reference ramp.

        Raises:
            ValueError: If the reference ramp is missing any step
        """
        missing = [step for step in STEP_VALUES if step not in hex_by_step]
        if missing:
            raise ValueError(f"Reference ramp is missing steps: {missing}")
        return cls(np.array([relative_luminance(hex_by_step[step]) for step in STEP_VALUES]))

    def __len__(self) -> int:
        return len(self.values)

    def target_luminance(self, step_index: int) -> float:
        """Target for a step index. Out-of-range indices saturate to the ends."""
        index = max(0, min(len(self.values) - 1, int(step_index)))
        return float(self.values[index])


DEFAULT_LUMINANCE_CURVE = LuminanceCurve.from_reference(REFERENCE_NEUTRALS_HEX_BY_STEP)
