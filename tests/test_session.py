"""Tests for swatchkit.core.session — status messages and error containment."""

import io

from PIL import Image
from swatchkit.core.session import READY, Session
from swatchkit.core.types import RenderSettings

GPL = b'GIMP Palette\nName: X\n#\n255   0   0\tRed\n  0   0 255\tBlue\n'


class TestLoad:
    def test_initial_status(self):
        assert Session().status == READY

    def test_load_gpl(self):
        session = Session()
        assert session.load('palette.gpl', GPL) is True
        assert session.status == 'Loaded 2 colors from GPL'
        assert len(session.store) == 2

    def test_load_json(self):
        session = Session()
        assert session.load('p.json', b'{"kind":"palette.v1","items":[{"name":"A","index":4,"hex":"#abcdef"}]}')
        assert session.status == 'Loaded 1 colors from JSON'
        assert session.store.find_by_index(4).hex == '#ABCDEF'

    def test_failed_load_leaves_store_untouched(self):
        session = Session()
        session.load('palette.gpl', GPL)
        before = [(it.id, it.name, it.index, it.hex) for it in session.store]

        assert session.load('palette.json', b'{"kind":"not.palette","items":[]}') is False
        assert session.ok is False
        assert session.status == 'Load error: Unknown JSON format'
        assert [(it.id, it.name, it.index, it.hex) for it in session.store] == before

    def test_huge_index_is_clamped(self):
        session = Session()
        doc = '{"kind":"palette.v1","items":[{"name":"A","index":1' + '0' * 400 + ',"hex":"#000000"}]}'
        assert session.load('p.json', doc.encode('utf-8')) is True
        assert session.store.find_by_index(999999).name == 'A'

    def test_oversized_integer_literal_is_load_error(self):
        session = Session()
        session.add_or_update('Keep', 0, '#123456')
        doc = '{"kind":"palette.v1","items":[{"index":1' + '0' * 5000 + '}]}'
        assert session.load('p.json', doc.encode('utf-8')) is False
        assert session.status.startswith('Load error: Invalid JSON')
        assert [it.name for it in session.store] == ['Keep']

    def test_malformed_json_is_load_error(self):
        session = Session()
        session.load('palette.json', b'{oops')
        assert session.status.startswith('Load error: Invalid JSON')


class TestEditing:
    def test_add_then_update(self):
        session = Session()
        assert session.add_or_update('  Red  ', '3', '#ff0000') == 'added'
        assert session.status == 'Added index 3'
        assert session.store.find_by_index(3).name == 'Red'

        assert session.add_or_update('Crimson', 3, '#dc143c') == 'updated'
        assert session.status == 'Updated index 3'
        assert len(session.store) == 1

    def test_index_clamped(self):
        session = Session()
        session.add_or_update('Big', 5_000_000, '#000000')
        assert session.status == 'Added index 999999'

    def test_remove(self):
        session = Session()
        session.add_or_update('A', 0, '#000000')
        assert session.remove(0) is True
        assert session.status == 'Removed index 0'
        assert len(session.store) == 0

    def test_remove_missing(self):
        session = Session()
        assert session.remove(7) is False
        assert session.status == 'No color at index 7'

    def test_select(self):
        session = Session()
        session.add_or_update('Sky', 2, '#87ceeb')
        assert session.select(2) is True
        assert session.status == 'Loaded "Sky"'

    def test_reset(self):
        session = Session()
        session.add_or_update('A', 0, '#000000')
        session.reset()
        assert len(session.store) == 0
        assert session.status == 'Reset.'


class TestSaveAndRender:
    def test_save_gpl(self):
        session = Session()
        session.load('palette.gpl', GPL)
        filename, data = session.save('gpl')
        assert filename == 'palette.gpl'
        assert data == b'GIMP Palette\nName: Palette\n#\n255   0   0\tRed\n  0   0 255\tBlue\n'
        assert session.status == 'Saved palette.gpl'

    def test_save_with_filename(self):
        session = Session()
        session.save('json', 'mine.json')
        assert session.status == 'Saved mine.json'

    def test_geometry(self):
        settings = RenderSettings(swatch_width=94, swatch_height=62, gap_h=2, gap_v=2)
        assert Session().geometry(settings) == 'Swatch Block Size is 96 x 64'

    def test_render(self):
        session = Session()
        session.load('palette.gpl', GPL)
        data = session.finish_render(session.render_png(RenderSettings(row_len=2, scale=2)))
        assert session.status == 'Rendered palette.png'
        assert Image.open(io.BytesIO(data)).size == (2 * 96 * 2, 64 * 2)

    def test_render_not_affected_by_later_mutation(self):
        session = Session()
        session.load('palette.gpl', GPL)
        future = session.render_png(RenderSettings(row_len=1))
        session.reset()
        data = session.finish_render(future)
        assert Image.open(io.BytesIO(data)).size == (96, 2 * 64)

    def test_render_error_becomes_status(self):
        session = Session()
        session.add_or_update('A', 0, '#000000')
        data = session.finish_render(session.render_png(RenderSettings(row_len=256, swatch_width=1024, scale=16)))
        assert data is None
        assert session.ok is False
        assert session.status.startswith('PNG error: ')
        assert len(session.store) == 1
