#!/usr/bin/env python3
"""
Built-in ramps.

Each reference ramp only contributes per-step chroma; lightness always comes
from the shared luminance curve. Pink keeps its 450 brand token exactly.
"""

from ramp import ColorRamp, generate_ramp


# =============================================================================
# Reference Ramps
# =============================================================================

# name -> (base hex, reference hex per step, pinned steps)
# Every listed step's chroma is used as its target, the extremes (50, 100,
# 900, 950) included, so those steps follow the reference ramp rather than the
# bell curve over the base chroma.
DEFAULT_RAMP_REFERENCES = {
    # Warm gray
    'Neutrals': ('#978881', {
        50: '#FBF9F8', 100: '#F7F4F2', 150: '#EEECEB', 200: '#D9D4D1',
        250: '#C4B9B4', 350: '#AEA39D', 450: '#978881', 550: '#786A64',
        650: '#5F5550', 750: '#4A4440', 800: '#3A3632', 850: '#2C2926',
        900: '#211F1D', 950: '#151413',
    }, None),
    # Periwinkle blue-violet
    'Very Peri': ('#7A90EF', {
        50: '#F8F9FF', 100: '#F0F2FF', 150: '#E5E8FD', 200: '#CED2FA',
        250: '#B3B8F6', 350: '#989EF3', 450: '#7A90EF', 550: '#5B5AEA',
        650: '#4D4CD4', 750: '#3F30AA', 800: '#302E80', 850: '#252360',
        900: '#1A1940', 950: '#100E28',
    }, None),
    'Blue': ('#5C8FBF', {
        50: '#F0F6FC', 100: '#E0EEF9', 150: '#C5E0F5', 200: '#9DCFEF',
        250: '#7DBDE6', 350: '#6DAAE3', 450: '#5C8FBF', 550: '#487096',
        650: '#3A5A7A', 750: '#2D4760', 800: '#233648', 850: '#1A2834',
        900: '#121C24', 950: '#0A1016',
    }, None),
    'Green': ('#389C70', {
        50: '#F0FDF6', 100: '#DFFAEC', 150: '#C0F2DA', 200: '#9CE3C4',
        250: '#6DD4A8', 350: '#4FC08C', 450: '#389C70', 550: '#2C7A58',
        650: '#236344', 750: '#1A4D34', 800: '#133A26', 850: '#0D2A1C',
        900: '#081E13', 950: '#04120A',
    }, None),
    # Warm golden yellow
    'Yellow': ('#A68741', {
        50: '#FEFBF3', 100: '#FDF5E3', 150: '#FAEBCA', 200: '#F4D89A',
        250: '#EBC46E', 350: '#D4A854', 450: '#A68741', 550: '#836A33',
        650: '#675428', 750: '#4E401E', 800: '#3A3016', 850: '#28220F',
        900: '#1C170A', 950: '#100D05',
    }, None),
    'Orange': ('#F15900', {
        50: '#FFF6F0', 100: '#FFEBD9', 150: '#FFDCC0', 200: '#FFC4A0',
        250: '#FFA876', 350: '#FF8239', 450: '#F15900', 550: '#C44800',
        650: '#993800', 750: '#722A00', 800: '#541F00', 850: '#3A1500',
        900: '#260E00', 950: '#150800',
    }, None),
    'Red': ('#E53935', {
        50: '#FFF5F5', 100: '#FFE8E8', 150: '#FFD5D5', 200: '#FFBDBD',
        250: '#FFA0A0', 350: '#F87070', 450: '#E53935', 550: '#C62828',
        650: '#A11F1F', 750: '#7C1818', 800: '#5C1212', 850: '#400D0D',
        900: '#2A0808', 950: '#180404',
    }, None),
    'Pink': ('#C27390', {
        50: '#FDF5F8', 100: '#FCEAF0', 150: '#F9D8E5', 200: '#F4C0D4',
        250: '#EDA4C0', 350: '#DE8AAC', 450: '#C27390', 550: '#9E5C74',
        650: '#7E495C', 750: '#603846', 800: '#462932', 850: '#301C22',
        900: '#1F1216', 950: '#110A0C',
    }, {450: '#C27390'}),
}


def get_default_palettes() -> list[ColorRamp]:
    """Build the built-in ramps, marked as saved."""
    return [
        generate_ramp(name, base_hex, reference_steps=references,
                      overrides=pinned, is_saved=True)
        for name, (base_hex, references, pinned) in DEFAULT_RAMP_REFERENCES.items()
    ]
