"""Install the bundled command-line tools onto the host.

``gyatt setup`` copies two launchers from the embedded resources tree into
a directory on the executable search path.  It needs root because the
default destination is ``/usr/local/bin``.
"""

from __future__ import annotations

import os
from pathlib import Path

from gyatt.config import Config
from gyatt.errors import PrivilegeError
from gyatt.scaffolder.materializer import Materializer
from gyatt.scaffolder.store import ResourceStore, Tree, default_store
from gyatt.utils import print_step

# (resource blob, installed file name)
TOOLS: tuple[tuple[str, str], ...] = (
    ("bin/templ", "templ"),
    ("bin/tailwindcss", "tailwindcss"),
)

EXECUTABLE_MODE = 0o755


def is_privileged() -> bool:
    """Return ``True`` when running with an effective uid of 0."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0


class ToolInstaller:
    """Copies the bundled tools into :attr:`Config.bin_dir`."""

    def __init__(
        self,
        config: Config | None = None,
        store: ResourceStore | None = None,
    ) -> None:
        self.config = config or Config()
        self.materializer = Materializer(store or default_store())

    def destinations(self) -> list[Path]:
        """Return the install path of every tool, in install order."""
        return [self.config.bin_dir / name for _, name in TOOLS]

    def install(self, privileged: bool | None = None) -> list[Path]:
        """Write every tool with executable permission.

        Args:
            privileged: Override for the privilege check (defaults to
                :func:`is_privileged`).

        Returns:
            The installed paths, in install order.

        Raises:
            PrivilegeError: If the process is not privileged.  Nothing is
                written in that case.
            ResourceNotFoundError, MaterializeError: On the first tool that
                cannot be read or written.
        """
        if privileged is None:
            privileged = is_privileged()
        if not privileged:
            raise PrivilegeError("setup must be run as root (try: sudo gyatt setup)")

        installed: list[Path] = []
        for (blob, _), target in zip(TOOLS, self.destinations()):
            data = self.materializer.store.read_from(Tree.RESOURCES, blob)
            print_step(f"Installing {target}")
            installed.append(self.materializer.write(target, data, mode=EXECUTABLE_MODE))
        return installed
