"""
core/ecs.py — Entity store for the level

Entities are ints, components are dataclass instances stored by type.
Level-wide singletons (the physics world, score, event bus) are
resources: they sit in the same stores under the ``RES`` slot and never
show up in queries.

    for eid, pos, body in world.query(Position, Body):
        ...
    pw = world.res(PhysicsWorld)

Killed entities stay in their stores until ``purge()`` at the end of
the frame; ``clear()`` wipes everything before the level is rebuilt.
"""

from __future__ import annotations
from typing import Any, Iterator

RES = -1          # eid slot holding a resource


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._dead: set[int] = set()

    def _store(self, comp_type: type) -> dict[int, Any]:
        return self._stores.setdefault(comp_type, {})

    # -- Entities --

    def spawn(self) -> int:
        # ids are never reused, even across clear()
        self._next_id += 1
        return self._next_id

    def kill(self, eid: int):
        self._dead.add(eid)

    def alive(self, eid: int) -> bool:
        return eid not in self._dead

    def purge(self):
        """Drop killed entities from every store.  End of frame."""
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    def clear(self):
        """Drop every entity and resource."""
        self._stores.clear()
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._store(type(comp))[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return eid in self._stores.get(comp_type, {})

    def remove(self, eid: int, comp_type: type):
        self._stores.get(comp_type, {}).pop(eid, None)

    # -- Queries --

    def _live(self, eid: int) -> bool:
        return eid != RES and eid not in self._dead

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for live entities holding every type."""
        stores = [self._stores.get(t, {}) for t in types]
        if not stores:
            return
        smallest = min(stores, key=len)
        for eid in list(smallest):
            if self._live(eid) and all(eid in s for s in stores):
                yield (eid, *(s[eid] for s in stores))

    def query_one(self, *types: type) -> tuple | None:
        return next(self.query(*types), None)

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield (eid, component) for every live entity with this type."""
        for eid, comp in list(self._stores.get(comp_type, {}).items()):
            if self._live(eid):
                yield eid, comp

    def count(self, comp_type: type) -> int:
        return sum(1 for _ in self.all_of(comp_type))

    # -- Resources --

    def set_res(self, resource: Any):
        self._store(type(resource))[RES] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(RES)
