"""gyatt scaffolder -- materializes embedded templates and assets.

This package resolves an ordered manifest for ``init`` or
``add-dependency``, renders or copies each embedded blob, and writes the
result into the current working directory.

Quick usage::

    from gyatt.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    result = await generator.init_project("example.com/todo")
    if not result.ok:
        ...
"""

from gyatt.scaffolder.generator import ProjectGenerator, ScaffoldResult, ScaffoldState
from gyatt.scaffolder.manifest import Manifest, ManifestEntry, Mode
from gyatt.scaffolder.store import ResourceStore, Tree
from gyatt.scaffolder.templates import SubstitutionContext, TemplateRenderer

__all__ = [
    "Manifest",
    "ManifestEntry",
    "Mode",
    "ProjectGenerator",
    "ResourceStore",
    "ScaffoldResult",
    "ScaffoldState",
    "SubstitutionContext",
    "TemplateRenderer",
    "Tree",
]
