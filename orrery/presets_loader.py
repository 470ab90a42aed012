#!/usr/bin/env python3
"""
System definition loading utilities.

This module converts plain nested data (the built-in dataset or a JSON file) into validated
CelestialBody records.

Schema
======
System JSON (systems/*.json):
{
  "name": "Human-friendly system name",
  "description": "Optional description",
  "bodies": [
    {
      "key": "sun",                      # optional; must equal the key derived from the name
      "name": "Sun",
      "radius": 54.5,
      "distance": 0,
      "rotation_period": 27,
      "orbit_period": 0,
      "tilt": 7.25,                      # optional, default 0
      "eccentricity": 0.017,             # optional, absent = circular
      "color": "#ffff00",                # or [255, 255, 0] or 16776960
      "has_rings": false,                # optional
      "description": "...",              # optional
      "moons": [ { ...same fields, no moons... } ]
    }
  ]
}

Users can add their own JSON files into the systems/ folder and load them with --system.
Unlike a lenient preset loader, a bad entry is an invariant violation: it raises
MalformedBody instead of being skipped.
"""
import json
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .data_models import CelestialBody
from .errors import MalformedBody
from .logging_utils import get_logger

SYSTEMS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "systems")

log = get_logger(__name__)

REQUIRED_FIELDS = ("name", "radius", "distance", "rotation_period", "orbit_period")


def _read_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def coerce_color(c: Any, name: str = "body") -> Tuple[int, int, int]:
    """Accept 0xRRGGBB ints, "#rrggbb" strings or [r, g, b] lists; clamp channels to 0-255."""
    if isinstance(c, int) and not isinstance(c, bool):
        return ((c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF)
    if isinstance(c, str):
        s = c.strip().lstrip("#")
        if len(s) == 3:
            s = "".join(ch * 2 for ch in s)
        if len(s) == 6:
            try:
                return coerce_color(int(s, 16), name)
            except ValueError:
                pass
        _bad_color(name, c)
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError):
        _bad_color(name, c)
    r = max(0, min(255, r)); g = max(0, min(255, g)); b = max(0, min(255, b))
    return (r, g, b)


def _bad_color(name: str, c: Any) -> None:
    raise MalformedBody(name, f"invalid color {c!r}")


def _number(data: Dict[str, Any], key: str, name: str, default: Optional[float] = None) -> Optional[float]:
    if key not in data or data[key] is None:
        return default
    try:
        return float(data[key])
    except (TypeError, ValueError):
        raise MalformedBody(name, f"{key} must be a number, got {data[key]!r}") from None


def body_from_dict(data: Dict[str, Any], is_moon: bool = False) -> CelestialBody:
    """Build one validated CelestialBody (with its moons) from plain data."""
    name = str(data.get("name") or "Body")
    missing = [k for k in REQUIRED_FIELDS if k not in data]
    if missing:
        raise MalformedBody(name, f"missing fields: {', '.join(missing)}")
    moons_data = data.get("moons") or []
    if is_moon and moons_data:
        raise MalformedBody(name, "moons cannot have moons of their own")
    return CelestialBody(
        name=name,
        radius=_number(data, "radius", name),
        distance=_number(data, "distance", name),
        rotation_period=_number(data, "rotation_period", name),
        orbit_period=_number(data, "orbit_period", name),
        axial_tilt=_number(data, "tilt", name, 0.0),
        eccentricity=_number(data, "eccentricity", name),
        color=coerce_color(data.get("color", [200, 200, 255]), name),
        has_rings=bool(data.get("has_rings", False)),
        description=str(data.get("description", "")),
        moons=tuple(body_from_dict(m, is_moon=True) for m in moons_data),
    )


def bodies_from_entries(entries: Sequence[Dict[str, Any]]) -> List[Tuple[Optional[str], CelestialBody]]:
    """Convert a list of body dicts into (explicit key or None, body) pairs."""
    return [(entry.get("key"), body_from_dict(entry)) for entry in entries]


def list_systems() -> List[str]:
    """List JSON files available in the systems directory."""
    if not os.path.isdir(SYSTEMS_DIR):
        return []
    return sorted([fn for fn in os.listdir(SYSTEMS_DIR) if fn.lower().endswith(".json")])


def load_system(path: str) -> Tuple[str, List[Tuple[Optional[str], CelestialBody]]]:
    """
    Load a system JSON by path (or by file name inside SYSTEMS_DIR).

    Returns (display_name, [(key or None, body), ...]).
    Raises OSError/json.JSONDecodeError for unreadable files and MalformedBody for bad entries.
    """
    if not os.path.exists(path):
        candidate = os.path.join(SYSTEMS_DIR, path)
        if os.path.exists(candidate):
            path = candidate
    data = _read_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("bodies"), list):
        raise MalformedBody(os.path.basename(path), "system file must contain a 'bodies' list")
    display_name = data.get("name") or os.path.splitext(os.path.basename(path))[0]
    entries = bodies_from_entries(data["bodies"])
    log.info("Loaded system '%s' (%d bodies) from %s", display_name, len(entries), path)
    return display_name, entries
