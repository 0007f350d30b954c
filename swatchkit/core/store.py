"""In-memory palette collection.

PaletteStore is the only thing that mutates palette items. Codecs and the
rasteriser work from snapshot_sorted_by_index(), which hands out copies.
"""

import re
import uuid
from collections.abc import Iterable, Iterator
from dataclasses import replace

from swatchkit.core.colour import normalize_hex
from swatchkit.core.types import PaletteEntry, PaletteItem

_SLUG_RE = re.compile(r'[^a-z0-9]+')


def make_id() -> str:
    return uuid.uuid4().hex


def slugify(name: str) -> str:
    """Lowercase, hyphen-separated render key for a name. Never used as identity."""
    slug = _SLUG_RE.sub('-', name.lower()).strip('-')
    return slug or 'color'


class PaletteStore:
    """Ordered collection of PaletteItems, insertion order preserved."""

    def __init__(self, items: Iterable[PaletteItem] = ()):
        self._items: list[PaletteItem] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PaletteItem]:
        return iter(list(self._items))

    def get(self, item_id: str) -> PaletteItem | None:
        return next((it for it in self._items if it.id == item_id), None)

    def find_by_index(self, index: int) -> PaletteItem | None:
        return next((it for it in self._items if it.index == index), None)

    def add_or_update(self, name: str, index: int, hex_raw: str) -> str:
        """Overwrite the item at `index` in place, or append a new one.

        Returns 'updated' or 'added'.
        """
        hex_value = normalize_hex(hex_raw)
        existing = self.find_by_index(index)
        if existing is not None:
            existing.name = name
            existing.hex = hex_value
            return 'updated'
        self._items.append(PaletteItem(id=make_id(), name=name, index=index, hex=hex_value))
        return 'added'

    def remove_by_id(self, item_id: str) -> None:
        self._items = [it for it in self._items if it.id != item_id]

    def replace(self, entries: Iterable[PaletteEntry]) -> None:
        """Discard the collection and rebuild it from decoded entries."""
        self._items = [
            PaletteItem(id=make_id(), name=e.name, index=e.index, hex=normalize_hex(e.hex)) for e in entries
        ]

    def reset(self) -> None:
        self._items = []

    def next_index(self) -> int:
        """Index to propose for the next add."""
        return len(self._items)

    def snapshot_sorted_by_index(self) -> list[PaletteItem]:
        """Ascending-index copy; ties keep insertion order."""
        return [replace(it) for it in sorted(self._items, key=lambda it: it.index)]
