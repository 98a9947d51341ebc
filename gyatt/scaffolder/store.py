"""Read-only store of the blobs shipped inside the gyatt package.

Two trees are embedded: ``templates`` (Jinja2 sources rendered during
``init``) and ``resources`` (static assets copied verbatim by
``add-dependency`` and ``setup``).  Blobs are addressed by slash-separated
paths such as ``"templates/main.go.j2"`` or ``"resources/htmx.js"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from gyatt.errors import ResourceNotFoundError


_DEFAULT_EMBED_DIR = Path(__file__).resolve().parent.parent / "embed"


class Tree(str, Enum):
    """The two logical trees inside the store."""

    TEMPLATES = "templates"
    RESOURCES = "resources"


class ResourceStore:
    """Immutable mapping of blob path -> bytes.

    The mapping is copied on construction and exposed read-only, so a store
    can be shared freely.  Tests build small in-memory stores directly; the
    CLI uses :func:`default_store`, which loads the package's ``embed/``
    directory once.
    """

    def __init__(self, blobs: Mapping[str, bytes]) -> None:
        self._blobs: Mapping[str, bytes] = MappingProxyType(dict(blobs))

    @classmethod
    def from_directory(cls, root: str | Path) -> "ResourceStore":
        """Load every file under ``root/templates`` and ``root/resources``."""
        root = Path(root)
        blobs: dict[str, bytes] = {}
        for tree in Tree:
            tree_dir = root / tree.value
            if not tree_dir.is_dir():
                continue
            for path in sorted(tree_dir.rglob("*")):
                if path.is_file():
                    blobs[path.relative_to(root).as_posix()] = path.read_bytes()
        return cls(blobs)

    # -- Lookup ------------------------------------------------------------

    @staticmethod
    def key(tree: Tree, name: str) -> str:
        """Return the store path of *name* inside *tree*."""
        return f"{tree.value}/{name}"

    def read(self, path: str) -> bytes:
        """Return the full blob stored at *path*.

        Raises:
            ResourceNotFoundError: If no blob exists at *path*.
        """
        try:
            return self._blobs[path]
        except KeyError:
            tree, _, name = path.partition("/")
            raise ResourceNotFoundError(tree, name) from None

    def read_from(self, tree: Tree, name: str) -> bytes:
        """Shorthand for ``read(key(tree, name))``."""
        return self.read(self.key(tree, name))


@lru_cache(maxsize=1)
def default_store() -> ResourceStore:
    """Return the process-wide store backed by the package's embedded files."""
    return ResourceStore.from_directory(_DEFAULT_EMBED_DIR)
