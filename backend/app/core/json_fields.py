"""Encode/decode for the nested hike fields kept as JSON text columns.

Decoders never raise. A malformed value degrades to the field's empty
default (no photos, no coordinates) so one bad column cannot hide the
rest of the record.
"""
import json
import logging
import math

logger = logging.getLogger(__name__)


def encode_photos(photos) -> str:
    return json.dumps(list(photos or []))


def decode_photos(raw) -> list[str]:
    if raw is None or raw == "":
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Discarding unreadable photos value", extra={"raw_value": raw})
        return []
    if not isinstance(value, list):
        logger.warning("Discarding non-list photos value", extra={"raw_value": raw})
        return []
    return [p for p in value if isinstance(p, str)]


def encode_coords(coords) -> str | None:
    """Serialize a (latitude, longitude) pair; accepts a mapping or an object."""
    if coords is None:
        return None
    if isinstance(coords, dict):
        lat, lon = coords["latitude"], coords["longitude"]
    else:
        lat, lon = coords.latitude, coords.longitude
    return json.dumps({"latitude": float(lat), "longitude": float(lon)})


def _as_degrees(value):
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def decode_coords(raw) -> dict | None:
    if raw is None or raw == "":
        return None
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Discarding unreadable locationCoords value", extra={"raw_value": raw})
        return None
    if not isinstance(value, dict):
        logger.warning("Discarding non-object locationCoords value", extra={"raw_value": raw})
        return None

    lat = _as_degrees(value.get("latitude"))
    lon = _as_degrees(value.get("longitude"))
    if lat is None or lon is None or not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
        logger.warning("Discarding out-of-range locationCoords value", extra={"raw_value": raw})
        return None
    return {"latitude": lat, "longitude": lon}
