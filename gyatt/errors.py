"""Exceptions raised while materializing a project or a dependency bundle.

Every component raises a subclass of :class:`ScaffoldError`; the generator
catches them at the per-entry seam, reports them once and stops.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ResourceNotFoundError(ScaffoldError):
    """Raised when an embedded blob is missing from the resource store."""

    def __init__(self, store: str, name: str) -> None:
        self.store = store
        self.name = name
        super().__init__(f"Embedded {store} blob not found: {name}")


class RenderError(ScaffoldError):
    """Raised when a template fails to parse or to render."""

    def __init__(self, template_name: str, message: str) -> None:
        self.template_name = template_name
        super().__init__(f"Failed to render {template_name}: {message}")


class MaterializeError(ScaffoldError):
    """Raised when a destination file cannot be created or written."""

    def __init__(self, destination: Path, message: str) -> None:
        self.destination = destination
        super().__init__(f"Failed to write {destination}: {message}")


class DirectoryCreationError(ScaffoldError):
    """Raised when a project directory cannot be created."""

    def __init__(self, directory: Path, message: str) -> None:
        self.directory = directory
        super().__init__(f"Failed to create folder {directory}: {message}")


class CommandError(ScaffoldError):
    """Raised when an external command cannot be launched or exits non-zero."""

    def __init__(self, argv: list[str], returncode: int | None, message: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        detail = message or f"exit status {returncode}"
        super().__init__(f"Command `{' '.join(self.argv)}` failed: {detail}")


class UnknownDependencyError(ScaffoldError):
    """Raised when a dependency name is not one of the bundled dependencies."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = list(known)
        super().__init__(
            f"Unknown dependency '{name}' (available: {', '.join(self.known)})"
        )


class PrivilegeError(ScaffoldError):
    """Raised when the installer runs without elevated privilege."""
