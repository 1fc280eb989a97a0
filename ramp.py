#!/usr/bin/env python3
"""
Luminance-matched OKLCH color ramps.

Each step's OKLCH lightness is solved per hue so that the resulting sRGB color
hits the shared target luminance for that step. Equal OKLCH lightness does not
give equal luminance once chroma differs, so lightness is never shared across
hues.
"""

import math
import uuid
from dataclasses import dataclass
from typing import Optional

from gamut import find_max_chroma
from luminance import DEFAULT_LUMINANCE_CURVE, STEP_VALUES, LuminanceCurve, relative_luminance
from oklch import OklchColor, hex_to_oklch, hex_to_rgb, oklch_to_hex, rgb_to_hex


# =============================================================================
# Constants
# =============================================================================

LIGHTNESS_ITERATIONS = 26  # Fixed count, not a tolerance loop
CHROMA_SAFETY_MARGIN = 0.98  # Stay clear of the gamut boundary

# Bell curve for chroma across steps: peak around steps 450-650
CHROMA_PEAK = 0.45
CHROMA_SPREAD = 0.35
CHROMA_FLOOR = 0.25


# =============================================================================
# Data Types
# =============================================================================

@dataclass(frozen=True)
class ColorStep:
    """A single step of a ramp. hex and oklch describe the same color."""
    step: int
    hex: str
    oklch: OklchColor

    @classmethod
    def from_hex(cls, step: int, hex_color: str) -> 'ColorStep':
        """Normalize to uppercase '#RRGGBB'. Malformed input becomes black."""
        rgb = hex_to_rgb(hex_color)
        hex_color = rgb_to_hex(rgb.r, rgb.g, rgb.b)
        return cls(step=step, hex=hex_color, oklch=hex_to_oklch(hex_color))


@dataclass(frozen=True)
class ColorRamp:
    """A named ramp of 14 steps, ordered as STEP_VALUES."""
    id: str
    name: str
    base_hex: str
    steps: tuple
    is_saved: bool = False

    def hex_by_step(self) -> dict:
        return {s.step: s.hex for s in self.steps}


# =============================================================================
# Solver
# =============================================================================

def chroma_multiplier(step_index: int, total_steps: int = len(STEP_VALUES)) -> float:
    """Fraction of the base chroma to aim for at a step (0.25 at the ends, 1.0 at the peak)."""
    normalized = step_index / (total_steps - 1)
    bell_curve = math.exp(-(((normalized - CHROMA_PEAK) / CHROMA_SPREAD) ** 2))
    return CHROMA_FLOOR + (1 - CHROMA_FLOOR) * bell_curve


def _bounded_chroma(lightness: float, hue: float, target_chroma: float) -> float:
    return min(target_chroma, find_max_chroma(lightness, hue) * CHROMA_SAFETY_MARGIN)


def solve_for_target_luminance(target_luminance: float, hue: float,
                               target_chroma: float) -> OklchColor:
    """
    Find the OKLCH color at this hue whose sRGB luminance matches the target.

    Bisects lightness for LIGHTNESS_ITERATIONS rounds. Chroma at each candidate
    is the target chroma, capped just inside the gamut. Assumes luminance
    rises with lightness for a fixed hue and bounded chroma.
    """
    low = 0.0
    high = 1.0

    for _ in range(LIGHTNESS_ITERATIONS):
        mid = (low + high) / 2
        c = _bounded_chroma(mid, hue, target_chroma)
        lum = relative_luminance(oklch_to_hex(OklchColor(mid, c, hue)))

        if lum > target_luminance:
            high = mid
        else:
            low = mid

    l = (low + high) / 2
    return OklchColor(l, _bounded_chroma(l, hue, target_chroma), hue)


# =============================================================================
# Ramp Builder
# =============================================================================

def _reference_chroma_by_step(reference_steps) -> dict:
    """Chroma hints keyed by step, from a {step: hex} mapping or (step, hex) pairs."""
    if not reference_steps:
        return {}
    if isinstance(reference_steps, dict):
        pairs = reference_steps.items()
    else:
        pairs = [(s.step, s.hex) if isinstance(s, ColorStep) else tuple(s)
                 for s in reference_steps]
    return {int(step): hex_to_oklch(hex_color).c for step, hex_color in pairs}


def _solve_steps(base: OklchColor, curve: LuminanceCurve,
                 reference_chroma: Optional[dict] = None,
                 overrides: Optional[dict] = None) -> tuple:
    reference_chroma = reference_chroma or {}
    overrides = overrides or {}
    steps = []

    for i, step in enumerate(STEP_VALUES):
        if step in overrides:
            steps.append(ColorStep.from_hex(step, overrides[step]))
            continue

        if step in reference_chroma:
            chroma_hint = reference_chroma[step]
        else:
            chroma_hint = base.c * chroma_multiplier(i)

        solved = solve_for_target_luminance(curve.target_luminance(i), base.h, chroma_hint)
        steps.append(ColorStep(step=step, hex=oklch_to_hex(solved), oklch=solved))

    return tuple(steps)


def generate_ramp(name: str, base_hex: str, reference_steps=None,
                  overrides: Optional[dict] = None,
                  curve: LuminanceCurve = DEFAULT_LUMINANCE_CURVE,
                  is_saved: bool = False,
                  ramp_id: Optional[str] = None) -> ColorRamp:
    """
    Generate a 14-step ramp from a base color.

    Args:
        name: Display name of the ramp
        base_hex: Base color; supplies hue and the chroma the bell curve scales
        reference_steps: Optional {step: hex} (or (step, hex) pairs) whose chroma
            is used as the target for those exact steps
        overrides: Optional {step: hex} pinned as given (normalized to #RRGGBB), bypassing the solver
        curve: Target luminance per step
        is_saved: Persistence flag carried on the ramp
        ramp_id: Keep an existing id instead of generating one

    Returns:
        A new ColorRamp
    """
    base = hex_to_oklch(base_hex)
    steps = _solve_steps(base, curve, _reference_chroma_by_step(reference_steps), overrides)
    return ColorRamp(
        id=ramp_id or str(uuid.uuid4()),
        name=name,
        base_hex=base_hex,
        steps=steps,
        is_saved=is_saved,
    )


def regenerate_ramp_from_base(name: str, new_base_hex: str, original_ramp: ColorRamp,
                              curve: LuminanceCurve = DEFAULT_LUMINANCE_CURVE) -> ColorRamp:
    """
    Re-derive a ramp from a new base color, keeping the original's id.

    The whole ramp moves to the new hue family; nothing of the old ramp's hue,
    chroma or pinned steps is carried over.
    """
    base = hex_to_oklch(new_base_hex)
    return ColorRamp(
        id=original_ramp.id,
        name=name,
        base_hex=new_base_hex,
        steps=_solve_steps(base, curve),
        is_saved=original_ramp.is_saved,
    )


def generate_new_ramp(name: str, base_hex: str) -> ColorRamp:
    return generate_ramp(name, base_hex)


def restore_ramp(ramp_id: str, name: str, base_hex: str, step_pairs,
                 is_saved: bool) -> ColorRamp:
    """Rebuild a stored ramp from (step, hex) pairs. OKLCH is always re-derived from hex."""
    return ColorRamp(
        id=ramp_id,
        name=name,
        base_hex=base_hex,
        steps=tuple(ColorStep.from_hex(int(step), hex_color) for step, hex_color in step_pairs),
        is_saved=is_saved,
    )
