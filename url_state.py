#!/usr/bin/env python3
"""
Encode ramps into a shareable URL query parameter and back.

Format: compact JSON, percent-encoded like JavaScript's encodeURIComponent,
then base64. Steps travel as [step, hex] pairs; OKLCH is re-derived on read.
"""

import base64
import binascii
import json
import sys
import uuid
from typing import Optional
from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit, urlunsplit

from ramp import ColorRamp, restore_ramp


# =============================================================================
# Constants
# =============================================================================

URL_PARAM = 'palettes'
URI_COMPONENT_SAFE = "-_.!~*'()"  # Characters encodeURIComponent leaves alone

DEFAULT_RAMP_NAME = 'Ramp'
DEFAULT_BASE_HEX = '#000000'


# =============================================================================
# Encoding
# =============================================================================

def serialize_ramps(ramps: list[ColorRamp]) -> str:
    compact = [
        {
            'id': ramp.id,
            'name': ramp.name,
            'baseHex': ramp.base_hex,
            'isSaved': ramp.is_saved,
            'steps': [[s.step, s.hex] for s in ramp.steps],
        }
        for ramp in ramps
    ]
    text = json.dumps(compact, separators=(',', ':'))
    return base64.b64encode(quote(text, safe=URI_COMPONENT_SAFE).encode('ascii')).decode('ascii')


def deserialize_ramps(encoded: str) -> Optional[list[ColorRamp]]:
    """
    Decode ramps produced by serialize_ramps. Missing fields get defaults.

    Returns:
        List of ramps, or None if the payload can't be decoded
    """
    try:
        text = unquote(base64.b64decode(encoded, validate=True).decode('ascii'))
        data = json.loads(text)
        if not isinstance(data, list):
            return None

        return [
            restore_ramp(
                ramp.get('id') or str(uuid.uuid4()),
                ramp.get('name') or DEFAULT_RAMP_NAME,
                ramp.get('baseHex') or DEFAULT_BASE_HEX,
                ramp.get('steps') or [],
                ramp.get('isSaved') or False,
            )
            for ramp in data
        ]
    except (binascii.Error, UnicodeDecodeError, ValueError, TypeError, AttributeError) as e:
        print(f"Failed to read palettes from URL: {e}", file=sys.stderr)
        return None


# =============================================================================
# URL Helpers
# =============================================================================

def _with_query(url: str, params: list[tuple[str, str]]) -> str:
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query=urlencode(params)))


def read_ramps_from_url(url: str) -> Optional[list[ColorRamp]]:
    params = dict(parse_qsl(urlsplit(url).query))
    encoded = params.get(URL_PARAM)
    if not encoded:
        return None
    return deserialize_ramps(encoded)


def write_ramps_to_url(url: str, ramps: list[ColorRamp]) -> str:
    """Return url with the palettes parameter set, keeping other parameters."""
    params = [(k, v) for k, v in parse_qsl(urlsplit(url).query) if k != URL_PARAM]
    params.append((URL_PARAM, serialize_ramps(ramps)))
    return _with_query(url, params)


def clear_ramps_from_url(url: str) -> str:
    params = [(k, v) for k, v in parse_qsl(urlsplit(url).query) if k != URL_PARAM]
    return _with_query(url, params)
