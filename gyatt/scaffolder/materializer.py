"""Turn manifest entries into files on disk."""

from __future__ import annotations

import os
from pathlib import Path

from gyatt.errors import MaterializeError, RenderError
from gyatt.scaffolder.manifest import ManifestEntry, Mode
from gyatt.scaffolder.store import ResourceStore
from gyatt.scaffolder.templates import SubstitutionContext, TemplateRenderer


class Materializer:
    """Writes rendered or raw blobs to destination paths.

    Parent directories are expected to exist already; the generator creates
    them up front so a missing directory shows up as a write failure here.
    """

    def __init__(
        self,
        store: ResourceStore,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.store = store
        self.renderer = renderer or TemplateRenderer()

    def write(self, destination: str | Path, data: bytes, mode: int | None = None) -> Path:
        """Create or truncate *destination* and write *data* to it.

        Args:
            destination: File to write.  Its parent must already exist.
            data: Exact bytes to write.
            mode: Optional permission bits applied after the write.

        Raises:
            MaterializeError: If the file cannot be opened, written or chmod-ed.
        """
        out = Path(destination)
        try:
            with open(out, "wb") as fh:
                fh.write(data)
            if mode is not None:
                os.chmod(out, mode)
        except OSError as exc:
            raise MaterializeError(out, exc.strerror or str(exc)) from exc
        return out

    def produce(self, entry: ManifestEntry, context: SubstitutionContext | None) -> bytes:
        """Return the bytes *entry* should contain, rendering if required."""
        data = self.store.read(entry.source_path)
        if entry.mode is Mode.RAW_COPY:
            return data
        if context is None:
            raise RenderError(entry.source_name, "no substitution context supplied")
        return self.renderer.render(data, context, name=entry.source_name)

    def materialize(
        self,
        entry: ManifestEntry,
        root: str | Path,
        context: SubstitutionContext | None = None,
    ) -> Path:
        """Produce *entry* under *root* and return the written path."""
        data = self.produce(entry, context)
        return self.write(Path(root) / entry.destination, data)
