# loot/pile.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

CACHE_KEY = "LootStore"


@dataclass
class Loot:
    name: str = ""
    value: int = 0
    rarity: str = "common"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Loot":
        return Loot(
            name=str(data.get("name", "")),
            value=int(data.get("value", 0)),
            rarity=str(data.get("rarity", "common")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class LootPile:
    """
    Reward items kept as one list under a single cache key.
    Starts with a single empty Loot entry. Mutations report success as a bool.
    """
    def __init__(self, cache: Optional[Dict[str, List[Loot]]] = None):
        self._cache = cache if cache is not None else {}
        if self._cache.get(CACHE_KEY) is None:
            self._cache[CACHE_KEY] = [Loot()]

    def all_loot(self) -> List[Loot]:
        items = self._cache.get(CACHE_KEY)
        if items is None:
            return [Loot()]
        return list(items)

    def add(self, loot: Loot) -> bool:
        items = self._cache.get(CACHE_KEY)
        if items is None:
            return False
        self._cache[CACHE_KEY] = items + [loot]
        return True

    def change(self, old: Loot, new: Loot) -> bool:
        """Swap the first entry equal to ``old`` for ``new``."""
        items = self._cache.get(CACHE_KEY)
        if items is None:
            return False
        for i, entry in enumerate(items):
            if entry == old:
                updated = list(items)
                updated[i] = new
                self._cache[CACHE_KEY] = updated
                return True
        return False

    def remove(self, loot: Loot) -> bool:
        """Drop the first entry equal to ``loot``."""
        items = self._cache.get(CACHE_KEY)
        if items is None or loot not in items:
            return False
        updated = list(items)
        updated.remove(loot)
        self._cache[CACHE_KEY] = updated
        return True

    def clear(self):
        self._cache.pop(CACHE_KEY, None)
