"""Tests for swatchkit.core.store — add/update/remove, snapshots and slugs."""

from swatchkit.core.store import PaletteStore, slugify
from swatchkit.core.types import PaletteEntry


class TestAddOrUpdate:
    def test_add_appends(self):
        store = PaletteStore()
        assert store.add_or_update('Red', 0, '#ff0000') == 'added'
        assert len(store) == 1
        assert store.find_by_index(0).hex == '#FF0000'

    def test_same_index_updates_in_place(self):
        store = PaletteStore()
        store.add_or_update('Red', 5, '#ff0000')
        item_id = store.find_by_index(5).id

        assert store.add_or_update('Crimson', 5, '#dc143c') == 'updated'
        assert len(store) == 1
        item = store.find_by_index(5)
        assert item.id == item_id
        assert item.name == 'Crimson'
        assert item.hex == '#DC143C'

    def test_invalid_hex_stored_as_black(self):
        store = PaletteStore()
        store.add_or_update('Oops', 0, 'tomato')
        assert store.find_by_index(0).hex == '#000000'

    def test_ids_are_unique(self):
        store = PaletteStore()
        store.add_or_update('A', 0, '#000000')
        store.add_or_update('A', 1, '#000000')
        assert len({it.id for it in store}) == 2


class TestRemoveById:
    def test_removes_only_that_item(self):
        store = PaletteStore()
        store.add_or_update('A', 0, '#111111')
        store.add_or_update('B', 1, '#222222')
        store.remove_by_id(store.find_by_index(0).id)
        assert [it.name for it in store] == ['B']

    def test_unknown_id_is_noop(self):
        store = PaletteStore()
        store.add_or_update('A', 0, '#111111')
        store.remove_by_id('missing')
        assert len(store) == 1


class TestReplaceAndReset:
    def test_replace_assigns_fresh_ids(self):
        store = PaletteStore()
        store.add_or_update('Old', 0, '#111111')
        old_id = store.find_by_index(0).id
        store.replace([PaletteEntry('New', 0, '#abcdef'), PaletteEntry('Dup', 0, 'bad')])
        assert len(store) == 2
        assert store.find_by_index(0).id != old_id
        assert [it.hex for it in store] == ['#ABCDEF', '#000000']

    def test_reset_empties(self):
        store = PaletteStore()
        store.add_or_update('A', 0, '#111111')
        store.reset()
        assert len(store) == 0
        assert store.next_index() == 0

    def test_next_index_is_length(self):
        store = PaletteStore()
        store.add_or_update('A', 10, '#111111')
        store.add_or_update('B', 20, '#111111')
        assert store.next_index() == 2


class TestSnapshot:
    def test_sorted_ascending_by_index(self):
        store = PaletteStore()
        store.add_or_update('C', 9, '#000000')
        store.add_or_update('A', 1, '#000000')
        store.add_or_update('B', 4, '#000000')
        assert [it.index for it in store.snapshot_sorted_by_index()] == [1, 4, 9]

    def test_live_order_is_insertion_order(self):
        store = PaletteStore()
        store.add_or_update('C', 9, '#000000')
        store.add_or_update('A', 1, '#000000')
        assert [it.name for it in store] == ['C', 'A']

    def test_snapshot_is_detached(self):
        store = PaletteStore()
        store.add_or_update('A', 0, '#111111')
        snap = store.snapshot_sorted_by_index()
        store.add_or_update('Changed', 0, '#222222')
        assert snap[0].name == 'A'
        assert snap[0].hex == '#111111'

    def test_duplicate_indices_keep_insertion_order(self):
        store = PaletteStore()
        store.replace([PaletteEntry('first', 3, '#000000'), PaletteEntry('second', 3, '#000000')])
        assert [it.name for it in store.snapshot_sorted_by_index()] == ['first', 'second']


class TestSlugify:
    def test_basic(self):
        assert slugify('Sky Blue') == 'sky-blue'

    def test_runs_collapse(self):
        assert slugify('  Deep -- Red!! 2 ') == 'deep-red-2'

    def test_empty_falls_back(self):
        assert slugify('') == 'color'
        assert slugify('***') == 'color'

    def test_non_ascii_is_separator(self):
        assert slugify('Café Noir') == 'caf-noir'
