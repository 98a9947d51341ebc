"""gyatt configuration.

Typed configuration for every command.  Settings use a Pydantic v2 model so
they are validated at construction time and can be overridden from the
environment without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_TRUTHY = ("1", "true", "yes", "on")


class Config(BaseModel):
    """Global gyatt configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the generator and the installer.
    """

    bin_dir: Path = Field(
        default=Path("/usr/local/bin"),
        description="Where `setup` installs the bundled tools",
    )
    legacy_exit_codes: bool = Field(
        default=False,
        description="Exit 0 on every outcome and report failures only as text",
    )
    run_post_init: bool = Field(
        default=True,
        description="Run the dependency sync and build commands after `init`",
    )

    vcs_init_command: list[str] = Field(default_factory=lambda: ["git", "init"])
    module_init_command: list[str] = Field(default_factory=lambda: ["go", "mod", "init"])
    post_init_commands: list[list[str]] = Field(
        default_factory=lambda: [["go", "mod", "tidy", "-e"], ["make", "build"]],
        description="Run in order once every project file has been written",
    )

    @field_validator("bin_dir")
    @classmethod
    def _bin_dir_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"bin_dir must be an absolute path, got {str(value)!r}")
        return value

    def module_init_for(self, project_name: str) -> list[str]:
        """Return the module bootstrap command for *project_name*."""
        return [*self.module_init_command, project_name]

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GYATT_BIN_DIR, GYATT_LEGACY_EXIT_CODES, GYATT_SKIP_BUILD.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GYATT_BIN_DIR"):
            kwargs["bin_dir"] = Path(os.environ["GYATT_BIN_DIR"])
        if os.environ.get("GYATT_LEGACY_EXIT_CODES"):
            kwargs["legacy_exit_codes"] = (
                os.environ["GYATT_LEGACY_EXIT_CODES"].strip().lower() in _TRUTHY
            )
        if os.environ.get("GYATT_SKIP_BUILD"):
            kwargs["run_post_init"] = (
                os.environ["GYATT_SKIP_BUILD"].strip().lower() not in _TRUTHY
            )
        return cls(**kwargs)
