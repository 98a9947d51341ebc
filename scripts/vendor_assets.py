#!/usr/bin/env python3
"""Replace the bundled static-asset loaders with the pinned upstream builds.

The files under ``gyatt/embed/resources/`` that ``add-dependency`` copies
into a project are, by default, small loaders that pull the pinned release
from unpkg at page load.  Running this script downloads the releases
themselves so generated projects work offline.

Usage:
    python scripts/vendor_assets.py              # every asset
    python scripts/vendor_assets.py htmx.js      # only the named files
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from gyatt.utils import print_error, print_step, print_success  # noqa: E402

RESOURCES_DIR = ROOT / "gyatt" / "embed" / "resources"

# Keep in step with the URL in each loader.
UPSTREAM: dict[str, str] = {
    "htmx.js": "https://unpkg.com/htmx.org@2.0.3/dist/htmx.min.js",
    "alpine.js": "https://unpkg.com/alpinejs@3.14.1/dist/cdn.min.js",
    "toastify.js": "https://unpkg.com/toastify-js@1.12.0/src/toastify.js",
    "toastify.css": "https://unpkg.com/toastify-js@1.12.0/src/toastify.css",
}


async def vendor(
    filenames: list[str],
    dest_dir: Path = RESOURCES_DIR,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Path]:
    """Download each of *filenames* into *dest_dir*.

    Every file is fetched before any is written, so a failed download leaves
    the existing assets untouched.

    Raises:
        KeyError: For a name missing from :data:`UPSTREAM`.
        httpx.HTTPError: On a connection failure or non-2xx response.
    """
    urls = [UPSTREAM[name] for name in filenames]
    bodies: list[bytes] = []
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        transport=transport,
    ) as client:
        for url in urls:
            print_step(f"GET {url}")
            response = await client.get(url)
            response.raise_for_status()
            bodies.append(response.content)

    written: list[Path] = []
    for name, body in zip(filenames, bodies):
        target = dest_dir / name
        target.write_bytes(body)
        written.append(target)
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("files", nargs="*", help="Assets to download (default: all)")
    args = parser.parse_args(argv)
    unknown = sorted(set(args.files) - set(UPSTREAM))
    if unknown:
        choices = ", ".join(sorted(UPSTREAM))
        parser.error(f"unknown assets: {', '.join(unknown)} (choose from {choices})")

    try:
        written = asyncio.run(vendor(args.files or sorted(UPSTREAM)))
    except httpx.HTTPError as exc:
        print_error(f"download failed: {exc}")
        return 1
    for path in written:
        print_success(f"Vendored {path.relative_to(ROOT)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
