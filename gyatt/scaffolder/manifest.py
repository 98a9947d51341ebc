"""Ordered write-lists for ``init`` and ``add-dependency``.

A :class:`Manifest` says which embedded blobs end up where in the target
tree, and whether each one is rendered or copied byte-for-byte.  Manifests
are rebuilt for every invocation and consumed once, in order.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gyatt.errors import UnknownDependencyError
from gyatt.scaffolder.store import ResourceStore, Tree


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class Mode(str, Enum):
    """How a manifest entry is materialized."""

    RENDER = "render"
    RAW_COPY = "raw-copy"


class ManifestEntry(BaseModel):
    """One file to produce: blob ``store/source_name`` -> ``destination``."""

    model_config = ConfigDict(frozen=True)

    source_name: str = Field(..., min_length=1)
    destination: Path
    store: Tree
    mode: Mode

    @field_validator("destination")
    @classmethod
    def _relative_destination(cls, value: Path) -> Path:
        if value.is_absolute() or ".." in value.parts:
            raise ValueError(f"destination must stay inside the project: {value}")
        return value

    @property
    def source_path(self) -> str:
        """Path of the source blob inside the resource store."""
        return ResourceStore.key(self.store, self.source_name)


class Manifest(BaseModel):
    """An ordered, duplicate-free list of entries plus the directories they need."""

    model_config = ConfigDict(frozen=True)

    operation: str
    entries: tuple[ManifestEntry, ...] = ()
    directories: tuple[Path, ...] = ()

    @model_validator(mode="after")
    def _unique_destinations(self) -> "Manifest":
        seen: set[Path] = set()
        for entry in self.entries:
            if entry.destination in seen:
                raise ValueError(f"duplicate destination in manifest: {entry.destination}")
            seen.add(entry.destination)
        return self

    def required_directories(self) -> list[Path]:
        """Return every directory that must exist before the first write.

        Explicit directories come first, in declaration order, followed by any
        destination parent not already listed.
        """
        dirs: list[Path] = []
        for directory in (*self.directories, *(e.destination.parent for e in self.entries)):
            if directory != Path(".") and directory not in dirs:
                dirs.append(directory)
        return dirs


# ---------------------------------------------------------------------------
# Project initialization
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: tuple[str, ...] = ("handler", "db", "ui/layouts", "static")

# (template name, destination) in write order.  The module bootstrap comes
# before anything the dependency sync step has to resolve.
INIT_FILES: tuple[tuple[str, str], ...] = (
    ("gitignore.j2", ".gitignore"),
    ("main.go.j2", "main.go"),
    ("handler.go.j2", "handler/handler.go"),
    ("db.go.j2", "db/db.go"),
    ("styles.css.j2", "static/styles.css"),
    ("Makefile.j2", "Makefile"),
    ("go.sum.j2", "go.sum"),
    ("base.templ.j2", "ui/layouts/base.templ"),
    ("index.templ.j2", "ui/index.templ"),
)


def resolve_init() -> Manifest:
    """Return the fixed manifest used by ``init``; every entry is rendered."""
    return Manifest(
        operation="init",
        directories=tuple(Path(d) for d in PROJECT_DIRECTORIES),
        entries=tuple(
            ManifestEntry(
                source_name=source,
                destination=Path(destination),
                store=Tree.TEMPLATES,
                mode=Mode.RENDER,
            )
            for source, destination in INIT_FILES
        ),
    )


# ---------------------------------------------------------------------------
# Dependency bundles
# ---------------------------------------------------------------------------

STATIC_DIR = "static"

DEPENDENCIES: dict[str, tuple[str, ...]] = {
    "htmx": ("htmx.js",),
    "alpine": ("alpine.js",),
    "toastify": ("toastify.css", "toastify.js"),
}


def known_dependencies() -> list[str]:
    return sorted(DEPENDENCIES)


def resolve_dependency(name: str) -> Manifest:
    """Return the raw-copy manifest for dependency *name*.

    Raises:
        UnknownDependencyError: If *name* is not a bundled dependency.
    """
    try:
        files = DEPENDENCIES[name]
    except KeyError:
        raise UnknownDependencyError(name, known_dependencies()) from None

    return Manifest(
        operation=f"add-dependency {name}",
        directories=(Path(STATIC_DIR),),
        entries=tuple(
            ManifestEntry(
                source_name=filename,
                destination=Path(STATIC_DIR) / filename,
                store=Tree.RESOURCES,
                mode=Mode.RAW_COPY,
            )
            for filename in files
        ),
    )
