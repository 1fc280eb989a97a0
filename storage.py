#!/usr/bin/env python3
"""
Save and load ramps as a JSON file.

Only hex values are persisted; OKLCH is re-derived on load so stored ramps
don't drift when solver constants change.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ramp import ColorRamp, restore_ramp


# =============================================================================
# Constants
# =============================================================================

STORAGE_KEY = 'oklch-color-ramps'
DEFAULT_STORAGE_PATH = Path(f"{STORAGE_KEY}.json")
STORAGE_VERSION = '1.0'


# =============================================================================
# Storage
# =============================================================================

def save_ramps(ramps: list[ColorRamp], path: Path = DEFAULT_STORAGE_PATH) -> None:
    """
    Write saved ramps to disk. Ramps with is_saved=False are skipped.

    Raises:
        OSError: If the file can't be written
    """
    data = {
        'version': STORAGE_VERSION,
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'ramps': [
            {
                'id': ramp.id,
                'name': ramp.name,
                'baseHex': ramp.base_hex,
                'isSaved': ramp.is_saved,
                'steps': [{'step': s.step, 'hex': s.hex} for s in ramp.steps],
            }
            for ramp in ramps if ramp.is_saved
        ],
    }
    Path(path).write_text(json.dumps(data))


def load_ramps(path: Path = DEFAULT_STORAGE_PATH) -> Optional[list[ColorRamp]]:
    """
    Load ramps written by save_ramps.

    Returns:
        List of ramps, or None if nothing is stored or the file can't be read
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        data = json.loads(path.read_text())
        if not isinstance(data, dict) or not isinstance(data.get('ramps'), list):
            return None

        return [
            restore_ramp(
                ramp['id'],
                ramp['name'],
                ramp['baseHex'],
                [(s['step'], s['hex']) for s in ramp['steps']],
                ramp.get('isSaved', True),
            )
            for ramp in data['ramps']
        ]
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        print(f"Failed to load ramps from {path}: {e}", file=sys.stderr)
        return None


def clear_saved_ramps(path: Path = DEFAULT_STORAGE_PATH) -> None:
    Path(path).unlink(missing_ok=True)
