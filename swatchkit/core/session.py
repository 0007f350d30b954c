"""Command-style façade over one palette.

A Session owns its PaletteStore and the status line shown to the user.
Each operation catches FormatError / RenderError exactly once and turns it
into the status text; the store is only replaced after a decode succeeds.
"""

from concurrent.futures import Executor, Future

from swatchkit.core import codec, raster
from swatchkit.core.errors import FormatError, RenderError
from swatchkit.core.store import PaletteStore
from swatchkit.core.types import MAX_INDEX, RenderSettings, clamp, coerce_int

READY = 'Ready.'


class Session:
    def __init__(self, store: PaletteStore | None = None, executor: Executor | None = None):
        self.store = store if store is not None else PaletteStore()
        self.executor = executor
        self.status = READY
        self.ok = True

    def set_status(self, status: str, ok: bool = True) -> bool:
        self.status = status
        self.ok = ok
        return ok

    def load(self, filename: str, data: bytes) -> bool:
        """Replace the palette with the decoded contents of a file."""
        try:
            fmt, entries = codec.decode_bytes(filename, data)
        except FormatError as e:
            return self.set_status(f'Load error: {e}', ok=False)
        self.store.replace(entries)
        return self.set_status(f'Loaded {len(self.store)} colors from {fmt.upper()}')

    def save(self, fmt: str, filename: str | None = None) -> tuple[str, bytes]:
        """Encode the palette; returns (filename, bytes)."""
        default_name, data = codec.encode(self.store.snapshot_sorted_by_index(), fmt)
        filename = filename or default_name
        self.set_status(f'Saved {filename}')
        return filename, data

    def add_or_update(self, name: str, index: object, hex_raw: str) -> str:
        idx = clamp(coerce_int(index, 0), 0, MAX_INDEX)
        outcome = self.store.add_or_update((name or '').strip(), idx, hex_raw)
        self.set_status(f'{outcome.capitalize()} index {idx}')
        return outcome

    def remove(self, index: object) -> bool:
        idx = clamp(coerce_int(index, 0), 0, MAX_INDEX)
        item = self.store.find_by_index(idx)
        if item is None:
            return self.set_status(f'No color at index {idx}', ok=False)
        self.store.remove_by_id(item.id)
        return self.set_status(f'Removed index {idx}')

    def select(self, index: object) -> bool:
        """Look up an item for editing."""
        idx = clamp(coerce_int(index, 0), 0, MAX_INDEX)
        item = self.store.find_by_index(idx)
        if item is None:
            return self.set_status(f'No color at index {idx}', ok=False)
        return self.set_status(f'Loaded "{item.name}"')

    def reset(self) -> None:
        self.store.reset()
        self.set_status('Reset.')

    def geometry(self, settings: RenderSettings) -> str:
        bw = settings.swatch_width + settings.gap_h
        bh = settings.swatch_height + settings.gap_v
        self.set_status(f'Swatch Block Size is {bw} x {bh}')
        return self.status

    def render_png(self, settings: RenderSettings) -> 'Future[bytes]':
        """Start a render of the current palette; mutations after this call are not seen."""
        return raster.render_async(self.store.snapshot_sorted_by_index(), settings, self.executor)

    def finish_render(self, future: 'Future[bytes]') -> bytes | None:
        """Wait for a render started by render_png(); None on failure."""
        try:
            data = future.result()
        except RenderError as e:
            self.set_status(f'PNG error: {e}', ok=False)
            return None
        self.set_status('Rendered palette.png')
        return data
