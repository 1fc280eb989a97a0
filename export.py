#!/usr/bin/env python3
"""
Export ramps as JSON, CSS custom properties, an HTML report, or a swatch image.
"""

import json
import re

from PIL import Image, ImageDraw

from luminance import contrast_with_white, wcag_level
from oklch import format_oklch, hex_to_rgb
from ramp import ColorRamp


# =============================================================================
# Constants
# =============================================================================

EXPORT_VERSION = '1.0'
DARK_TEXT_LIGHTNESS = 0.6  # OKLCH lightness above which labels switch to dark text


# =============================================================================
# Text Formats
# =============================================================================

def export_json(ramps: list[ColorRamp]) -> str:
    data = {
        'version': EXPORT_VERSION,
        'ramps': [
            {
                'name': ramp.name,
                'baseHex': ramp.base_hex,
                'steps': [{'step': s.step, 'hex': s.hex} for s in ramp.steps],
            }
            for ramp in ramps
        ],
    }
    return json.dumps(data, indent=2)


def css_prefix(name: str) -> str:
    """'Very Peri' -> 'very-peri'"""
    return re.sub(r'\s+', '-', name.lower())


def export_css(ramps: list[ColorRamp]) -> str:
    """Render ramps as CSS custom properties, e.g. --blue-450: #5C8FBF;"""
    css = ':root {\n'
    for ramp in ramps:
        prefix = css_prefix(ramp.name)
        for step in ramp.steps:
            css += f"  --{prefix}-{step.step}: {step.hex};\n"
        css += '\n'
    css += '}'
    return css


def render_text(ramps: list[ColorRamp]) -> str:
    """Plain-text table per ramp: step, hex, OKLCH, contrast vs white."""
    lines = []
    for ramp in ramps:
        lines.append(f"{ramp.name} ({ramp.base_hex})")
        for step in ramp.steps:
            ratio = contrast_with_white(step.hex)
            lines.append(
                f"  {step.step:>4}  {step.hex}  {format_oklch(step.oklch):<26}"
                f"  {ratio:5.2f}:1  {wcag_level(ratio)}"
            )
        lines.append('')
    return '\n'.join(lines)


# =============================================================================
# HTML
# =============================================================================

def text_color_for_step(lightness: float) -> str:
    """Return black or white text color based on swatch lightness."""
    return "#000" if lightness > DARK_TEXT_LIGHTNESS else "#fff"


def render_html(ramps: list[ColorRamp], title: str = 'OKLCH Palette') -> str:
    """Render ramps as a standalone HTML page."""
    from html import escape

    css = """
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: system-ui, -apple-system, sans-serif;
            background: #f5f5f5;
            color: #333;
            line-height: 1.5;
            padding: 2rem;
            max-width: 1200px;
            margin: 0 auto;
        }
        h1 { font-size: 1.5rem; margin-bottom: 0.5rem; }
        h2 { font-size: 1.2rem; margin: 2rem 0 1rem; border-bottom: 1px solid #ddd; padding-bottom: 0.5rem; }
        .meta { color: #666; font-size: 0.9rem; font-weight: normal; }
        .ramp-strip {
            display: grid;
            grid-template-columns: repeat(14, 1fr);
            border-radius: 8px;
            overflow: hidden;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }
        .ramp-strip .swatch {
            min-height: 110px;
            padding: 0.5rem;
            font-size: 0.65rem;
            display: flex;
            flex-direction: column;
            justify-content: flex-end;
        }
        .swatch .step { font-weight: 600; font-size: 0.8rem; }
    """

    sections = []
    for ramp in ramps:
        swatches = []
        for step in ramp.steps:
            ratio = contrast_with_white(step.hex)
            swatches.append(
                f'<div class="swatch" style="background: {step.hex}; '
                f'color: {text_color_for_step(step.oklch.l)}" '
                f'title="{escape(ramp.name)} {step.step}">'
                f'<span class="step">{step.step}</span>'
                f'<span>{step.hex}</span>'
                f'<span>{format_oklch(step.oklch)}</span>'
                f'<span>{ratio:.2f}:1 {wcag_level(ratio)}</span>'
                f'</div>'
            )
        sections.append(
            f'<h2>{escape(ramp.name)} <span class="meta">{escape(ramp.base_hex)}</span></h2>\n'
            f'<div class="ramp-strip">{"".join(swatches)}</div>'
        )

    body = '\n'.join(sections)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>{css}</style>
</head>
<body>
<h1>{escape(title)}</h1>
<p class="meta">{len(ramps)} ramps. Contrast is measured against white.</p>
{body}
</body>
</html>
"""


# =============================================================================
# Image
# =============================================================================

def visualize_ramps(ramps: list[ColorRamp], output_path: str) -> None:
    """Save a swatch grid: one row per ramp, one column per step."""
    swatch_size = 60
    padding = 10
    text_height = 20
    label_width = 100

    max_steps = max((len(r.steps) for r in ramps), default=0)
    img_width = label_width + max_steps * (swatch_size + padding) + padding
    img_height = len(ramps) * (swatch_size + text_height + padding) + padding

    img = Image.new('RGB', (img_width, img_height), (240, 240, 240))
    draw = ImageDraw.Draw(img)

    for row, ramp in enumerate(ramps):
        y = padding + row * (swatch_size + text_height + padding)

        # Ramp label
        draw.text((padding, y + swatch_size // 2 - 5), ramp.name, fill=(0, 0, 0))

        for col, step in enumerate(ramp.steps):
            x = label_width + col * (swatch_size + padding)
            rgb = hex_to_rgb(step.hex)
            fill = tuple(round(v * 255) for v in (rgb.r, rgb.g, rgb.b))
            draw.rectangle([x, y, x + swatch_size, y + swatch_size], fill=fill)

            # Step label
            draw.text((x + 2, y + swatch_size + 2), str(step.step), fill=(100, 100, 100))

    img.save(output_path)
    print(f"Saved visualization to {output_path}")
