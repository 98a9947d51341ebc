"""Main scaffolding orchestrator.

Drives ``init`` and ``add-dependency``: runs the bootstrap commands, creates
every directory a manifest needs, then materializes the manifest entries in
order.  The first failure stops the operation; files already written are
left in place.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from gyatt.config import Config
from gyatt.errors import CommandError, DirectoryCreationError, ScaffoldError
from gyatt.scaffolder.manifest import Manifest, resolve_dependency, resolve_init
from gyatt.scaffolder.materializer import Materializer
from gyatt.scaffolder.store import ResourceStore, default_store
from gyatt.scaffolder.templates import SubstitutionContext, TemplateRenderer
from gyatt.utils import ensure_dir, print_error, print_step, run_checked


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldState(str, Enum):
    IDLE = "idle"
    DIRECTORIES_CREATED = "directories-created"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


class ScaffoldResult(BaseModel):
    """Outcome of one ``init`` or ``add-dependency`` run."""

    operation: str
    state: ScaffoldState = ScaffoldState.IDLE
    directories: list[Path] = Field(default_factory=list)
    written: list[Path] = Field(default_factory=list)
    failed_destination: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.state is ScaffoldState.DONE


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolding orchestrator bound to one working directory.

    ``init`` produces:
    - a git repository and a Go module named after the project
    - the ``handler/``, ``db/``, ``ui/layouts/`` and ``static/`` directories
    - rendered sources, build files and templ layouts
    and then runs the dependency sync and build commands.

    ``add-dependency`` copies a bundled static asset set into ``static/``.
    """

    def __init__(
        self,
        config: Config | None = None,
        store: ResourceStore | None = None,
        root: str | Path | None = None,
    ) -> None:
        self.config = config or Config()
        self.store = store or default_store()
        self.root = Path(root) if root is not None else Path.cwd()
        self.materializer = Materializer(self.store, TemplateRenderer())

    # -- Public API --------------------------------------------------------

    async def init_project(self, project_name: str) -> ScaffoldResult:
        """Initialize a new project named *project_name* in :attr:`root`."""
        result = ScaffoldResult(operation="init")
        try:
            context = SubstitutionContext(project_name=project_name)
        except ValidationError:
            return self._fail(result, f"Invalid project name: {project_name!r}")

        try:
            print_step("Initializing git repository")
            await run_checked(self.config.vcs_init_command, cwd=self.root)
            print_step(f"Initializing Go module {project_name}")
            await run_checked(self.config.module_init_for(project_name), cwd=self.root)
        except CommandError as exc:
            return self._fail(result, str(exc))

        manifest = resolve_init()
        if not self._create_directories(manifest, result):
            return result
        if not self._write_manifest(manifest, result, context):
            return result

        if self.config.run_post_init:
            for cmd in self.config.post_init_commands:
                print_step(f"Running {' '.join(cmd)}")
                try:
                    await run_checked(cmd, cwd=self.root)
                except CommandError as exc:
                    return self._fail(result, str(exc))

        result.state = ScaffoldState.DONE
        return result

    async def add_dependency(self, name: str) -> ScaffoldResult:
        """Copy the static files of dependency *name* into ``static/``.

        Raises:
            UnknownDependencyError: If *name* is not a bundled dependency.
        """
        manifest = resolve_dependency(name)
        result = ScaffoldResult(operation=manifest.operation)
        if not self._create_directories(manifest, result):
            return result
        if not self._write_manifest(manifest, result, context=None):
            return result
        result.state = ScaffoldState.DONE
        return result

    # -- Steps -------------------------------------------------------------

    def _create_directories(self, manifest: Manifest, result: ScaffoldResult) -> bool:
        """Create every directory *manifest* needs before anything is written."""
        for directory in manifest.required_directories():
            try:
                ensure_dir(self.root / directory)
            except OSError as exc:
                err = DirectoryCreationError(directory, exc.strerror or str(exc))
                self._fail(result, str(err))
                return False
            result.directories.append(directory)
        result.state = ScaffoldState.DIRECTORIES_CREATED
        return True

    def _write_manifest(
        self,
        manifest: Manifest,
        result: ScaffoldResult,
        context: SubstitutionContext | None,
    ) -> bool:
        """Materialize entries in order, stopping at the first failure."""
        result.state = ScaffoldState.WRITING
        for entry in manifest.entries:
            try:
                self.materializer.materialize(entry, self.root, context)
            except ScaffoldError as exc:
                result.failed_destination = entry.destination
                self._fail(result, str(exc))
                return False
            result.written.append(entry.destination)
        return True

    @staticmethod
    def _fail(result: ScaffoldResult, message: str) -> ScaffoldResult:
        print_error(message)
        result.state = ScaffoldState.FAILED
        result.error = message
        return result
