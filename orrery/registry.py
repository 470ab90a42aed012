#!/usr/bin/env python3
"""
Celestial body registry.

Holds the ordered, read-only set of bodies keyed by lookup key. Keys follow a public
name -> key rule because selection from a picked object depends on it:

- the central star's key is literal "sun";
- any other body's key is the lowercase of the first whitespace-delimited token of its name,
  so "Pluto (Dwarf Planet)" -> "pluto".

All invariants that involve more than one body (exactly one star, no duplicate keys) are
checked here, once, at construction time.
"""
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .constants import STAR_KEY
from .data_models import CelestialBody
from .errors import LookupFailure, MalformedBody
from .logging_utils import get_logger
from .presets_loader import bodies_from_entries, load_system
from .solar_system import SOLAR_SYSTEM_BODIES

log = get_logger(__name__)

Entry = Union[CelestialBody, Tuple[Optional[str], CelestialBody]]


def body_key(name: str, is_star: bool = False) -> str:
    """Derive the lookup key for a display name."""
    if is_star:
        return STAR_KEY
    tokens = name.split()
    if not tokens:
        raise MalformedBody(repr(name), "name must not be empty")
    return tokens[0].lower()


class BodyRegistry:
    """
    Ordered mapping of key -> CelestialBody, immutable after construction.

    Entries may be bare bodies (key derived from the name) or (key, body) pairs; a None key
    is also derived, and an explicit key must equal the derived one.
    """

    def __init__(self, entries: Iterable[Entry], name: str = "Solar System"):
        self.name = name
        self._bodies = {}
        star_keys = []
        for entry in entries:
            key, body = entry if isinstance(entry, tuple) else (None, entry)
            derived = body_key(body.name, body.is_star)
            if key is None:
                key = derived
            if body.is_star:
                if star_keys:
                    raise MalformedBody(body.name, "distance 0 is reserved for the central star")
                if key != STAR_KEY:
                    raise MalformedBody(body.name, f"the star's key must be '{STAR_KEY}', got '{key}'")
                star_keys.append(key)
            elif key == STAR_KEY:
                raise MalformedBody(body.name, f"only the central star (distance 0) may use the key '{STAR_KEY}'")
            elif key != derived:
                # Picking resolves keys from display names, so keys must follow the name.
                raise MalformedBody(body.name, f"key '{key}' does not match the name-derived key '{derived}'")
            if key in self._bodies:
                raise MalformedBody(body.name, f"duplicate key '{key}'")
            self._bodies[key] = body
        if not star_keys:
            raise MalformedBody(name, "no central star (a body with distance 0)")
        log.info("Registry '%s' loaded with %d bodies", name, len(self._bodies))

    @classmethod
    def from_file(cls, path: str) -> "BodyRegistry":
        display_name, entries = load_system(path)
        return cls(entries, name=display_name)

    def get_all(self) -> List[Tuple[str, CelestialBody]]:
        return list(self._bodies.items())

    def get(self, key: str) -> CelestialBody:
        try:
            return self._bodies[key]
        except KeyError:
            raise LookupFailure(key) from None

    def keys(self) -> List[str]:
        return list(self._bodies)

    def resolve_key(self, name: str) -> str:
        """
        Map a picked body's display name to its key.

        Raises LookupFailure when the derived key is not registered.
        """
        star = self.star
        key = body_key(name, is_star=(name == star.name)) if name.strip() else name
        if key not in self._bodies:
            raise LookupFailure(name)
        return key

    @property
    def star_key(self) -> str:
        return STAR_KEY

    @property
    def star(self) -> CelestialBody:
        return self._bodies[STAR_KEY]

    def __contains__(self, key: object) -> bool:
        return key in self._bodies

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Tuple[str, CelestialBody]]:
        return iter(self._bodies.items())


def default_registry(entries: Optional[Sequence[dict]] = None) -> BodyRegistry:
    """Registry built from the built-in dataset (or the given plain entries)."""
    return BodyRegistry(bodies_from_entries(SOLAR_SYSTEM_BODIES if entries is None else entries))
