"""Shared pytest fixtures for the gyatt test suite.

Provides reusable fixtures for:
- Small in-memory resource stores (complete and with a broken template)
- Configs that skip or keep the post-init tooling commands
- Mock subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from gyatt.config import Config
from gyatt.scaffolder.manifest import DEPENDENCIES, INIT_FILES
from gyatt.scaffolder.store import ResourceStore


# ---------------------------------------------------------------------------
# Resource stores
# ---------------------------------------------------------------------------

def _fixture_blobs() -> dict[str, bytes]:
    """Every blob the manifests reference, with tiny but recognisable content."""
    blobs: dict[str, bytes] = {}
    for source, destination in INIT_FILES:
        blobs[f"templates/{source}"] = (
            f"// {destination} for {{{{ project_name }}}}\n".encode("utf-8")
        )
    for files in DEPENDENCIES.values():
        for filename in files:
            blobs[f"resources/{filename}"] = f"/* {filename} {{{{ raw }}}} */\n".encode("utf-8")
    blobs["resources/bin/templ"] = b"#!/bin/sh\necho templ\n"
    blobs["resources/bin/tailwindcss"] = b"#!/bin/sh\necho tailwindcss\n"
    return blobs


@pytest.fixture
def fixture_blobs() -> dict[str, bytes]:
    """Raw mapping behind :func:`memory_store`, for building variants."""
    return _fixture_blobs()


@pytest.fixture
def memory_store(fixture_blobs: dict[str, bytes]) -> ResourceStore:
    """In-memory store covering every init, dependency and installer blob."""
    return ResourceStore(fixture_blobs)


@pytest.fixture
def broken_template_store(fixture_blobs: dict[str, bytes]) -> ResourceStore:
    """Store whose fourth init template (db.go.j2) does not parse."""
    blobs = dict(fixture_blobs)
    blobs["templates/db.go.j2"] = b"package db {{ project_name "
    return ResourceStore(blobs)


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Default config with the post-init tooling commands enabled."""
    return Config()


@pytest.fixture
def config_no_build() -> Config:
    """Config that stops after writing files."""
    return Config(run_post_init=False)


# ---------------------------------------------------------------------------
# Mock Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_checked():
    """Patch the generator's command runner with an ``AsyncMock``.

    Usage:
        async def test_init(mock_run_checked):
            with mock_run_checked as run:
                ...
                assert run.await_count == 4
    """
    return patch("gyatt.scaffolder.generator.run_checked", new_callable=AsyncMock)


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with a
    configurable return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory



def snapshot_tree(root: Path) -> set[str]:
    """Return every path under *root* as a posix string relative to *root*."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def tree_snapshot():
    """Expose :func:`snapshot_tree` to tests."""
    return snapshot_tree
