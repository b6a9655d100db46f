"""Zone grid: square map keyed by town-relative coordinates."""

from __future__ import annotations

from collections.abc import Iterator

from zombiesim.core.models import Zone

# (dx, dy, is_direct)
ORTHOGONAL_OFFSETS: tuple[tuple[int, int, bool], ...] = (
    (-1, 0, True),
    (0, -1, True),
    (0, 1, True),
    (1, 0, True),
)
ALL_OFFSETS: tuple[tuple[int, int, bool], ...] = (
    (-1, -1, False), (-1, 0, True), (-1, 1, False),
    (0, -1, True),                  (0, 1, True),
    (1, -1, False),  (1, 0, True),  (1, 1, False),
)


def cell_range(size: int) -> range:
    """Logical cell indices along one axis, centred on 0."""
    offset = size // 2
    return range(-offset, size - offset)


class ZoneGrid:
    """Mapping from (x, y) to Zone covering a size x size square.

    The origin shift is baked into the zone coordinates at construction;
    the grid never re-applies it.
    """

    __slots__ = ("size", "origin_x", "origin_y", "_zones")

    def __init__(self, size: int, origin_x: int = 0, origin_y: int = 0) -> None:
        self.size = size
        self.origin_x = origin_x
        self.origin_y = origin_y
        self._zones: dict[tuple[int, int], Zone] = {}
        for i in cell_range(size):
            for j in cell_range(size):
                zone = Zone(i - origin_x, j - origin_y)
                self._zones[zone.coords] = zone

    # -- access --

    def get(self, x: int, y: int) -> Zone | None:
        return self._zones.get((x, y))

    def put(self, zone: Zone) -> None:
        """Replace the zone at the zone's own coordinates (must already exist)."""
        if zone.coords in self._zones:
            self._zones[zone.coords] = zone

    def keys(self) -> list[tuple[int, int]]:
        return list(self._zones)

    def items(self) -> Iterator[tuple[tuple[int, int], Zone]]:
        return iter(self._zones.items())

    def __contains__(self, coords: object) -> bool:
        return coords in self._zones

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones.values())

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def town(self) -> Zone | None:
        return self._zones.get((0, 0))

    def neighbors(self, zone: Zone, include_diagonal: bool = True) -> Iterator[tuple[Zone, bool]]:
        """Yield ``(neighbor, is_direct)`` for every on-grid neighbor."""
        offsets = ALL_OFFSETS if include_diagonal else ORTHOGONAL_OFFSETS
        for dx, dy, direct in offsets:
            neighbor = self._zones.get((zone.x + dx, zone.y + dy))
            if neighbor is not None:
                yield neighbor, direct

    # -- aggregates --

    def total_zombies(self) -> int:
        return sum(z.zombies for z in self._zones.values())

    def zombie_counts(self) -> dict[tuple[int, int], int]:
        return {coords: z.zombies for coords, z in self._zones.items()}

    # -- copy --

    def copy(self) -> ZoneGrid:
        new = ZoneGrid.__new__(ZoneGrid)
        new.size = self.size
        new.origin_x = self.origin_x
        new.origin_y = self.origin_y
        new._zones = {coords: z.copy() for coords, z in self._zones.items()}
        return new
