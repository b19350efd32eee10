"""Per-type connection colors.

Each connection type string gets a color derived from an md5 hash of the
type name, retried with a decreasing seed until the candidate is far
enough from every color already handed out. Colors are cached, so the
first caller to ask for a type fixes its color for the lifetime of the
assigner.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Iterator, Mapping, Sequence, Union

from textual.color import Color, ColorParseError

logger = logging.getLogger(__name__)

HASH_SEED = 50
MIN_DISTANCE = 2000
HUE_RANGE = 0xFF

ColorLike = Union[Color, str, Sequence[int]]


def to_color(value: ColorLike) -> Color:
    """Convert a color string, RGB sequence or Color to a Color.

    Raises ValueError if the value can't be read as a color.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color.parse(value)
        except ColorParseError as e:
            raise ValueError(f"invalid color {value!r}") from e
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"invalid color {value!r}")
    channels = list(value)
    if len(channels) != 3:
        raise ValueError(f"expected 3 color channels, got {len(channels)}")
    try:
        r, g, b = (int(c) for c in channels)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color channels {channels!r}") from e
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"color channels out of range 0..255: {channels!r}")
    return Color(r, g, b)


def stable_hash(type_id: str, seed: int) -> int:
    """Hash a type name with a seed, reproducible across processes."""
    digest = hashlib.md5(seed.to_bytes(4, "little") + type_id.encode()).digest()
    return int.from_bytes(digest[:8], "big")


def color_distance(a: Color, b: Color) -> int:
    """Squared per-channel RGB distance."""
    return (a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2


@dataclass(frozen=True)
class Candidate:
    """One attempt at a color for a type."""

    seed: int
    hue: int
    saturation: int
    lightness: int
    color: Color


def candidate_for(type_id: str, seed: int) -> Candidate:
    """Derive the candidate color for a type at a given seed.

    Hue is in degrees but only covers 0..254. Saturation and lightness
    are on a 0..255 scale, kept to 120..248 and 140..179 respectively.
    """
    h = stable_hash(type_id, seed)
    hue = h % HUE_RANGE
    saturation = 120 + h % 129
    lightness = 160 + (h % 40 - 20)
    color = Color.from_hsl(hue / 360, saturation / 255, lightness / 255)
    return Candidate(seed, hue, saturation, lightness, color)


class TypeColorAssigner:
    """Hands out a distinct, cached color for each connection type.

    Not thread safe; callers sharing one assigner between threads must
    serialize access.
    """

    def __init__(
        self,
        initial: Mapping[str, ColorLike] | None = None,
        *,
        seed_max: int = HASH_SEED,
        min_distance: int = MIN_DISTANCE,
    ) -> None:
        if seed_max < 0:
            raise ValueError("seed_max must not be negative")
        self.seed_max = seed_max
        self.min_distance = min_distance
        self._colors: dict[str, Color] = {}
        self._exhausted: set[str] = set()
        for type_id, value in (initial or {}).items():
            self._colors[type_id] = to_color(value)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def items(self) -> list[tuple[str, Color]]:
        return list(self._colors.items())

    @property
    def exhausted(self) -> frozenset[str]:
        """Types that were given a colliding color after all seeds failed."""
        return frozenset(self._exhausted)

    def lookup(self, type_id: str) -> Color | None:
        """Return the color already assigned to type_id, if any."""
        return self._colors.get(type_id)

    def candidates(self, type_id: str) -> Iterator[Candidate]:
        """Yield every candidate for type_id, from seed_max down to 0."""
        for seed in range(self.seed_max, -1, -1):
            yield candidate_for(type_id, seed)

    def _is_distinct(self, color: Color) -> bool:
        return all(color_distance(color, taken) > self.min_distance for taken in self._colors.values())

    def assign(self, type_id: str) -> Color:
        """Return type_id's color, assigning and caching one if it has none.

        Adds exactly one entry to the registry when type_id is new. The
        search always ends: if no seed gives a distinct color, the last
        candidate is used anyway and type_id is recorded in exhausted.
        """
        existing = self._colors.get(type_id)
        if existing is not None:
            return existing

        candidate = None
        for candidate in self.candidates(type_id):
            if self._is_distinct(candidate.color):
                break
        else:
            self._exhausted.add(type_id)
            logger.debug("no distinct color for %r, using %s", type_id, candidate.color.hex)

        self._colors[type_id] = candidate.color
        logger.debug("assigned %s to %r (seed %d)", candidate.color.hex, type_id, candidate.seed)
        return candidate.color

    def color_for(self, type_id: str) -> Color:
        """Cached color for type_id, assigned on first request."""
        color = self.lookup(type_id)
        if color is None:
            color = self.assign(type_id)
        return color
