"""Async filesystem primitives used by the export pipeline.

Blocking calls run in a worker thread. Errors are raised as the OSError
the operating system reports.
"""

import asyncio
from pathlib import Path


def directory_exists(path: str | Path) -> bool:
    """Check whether path is an existing directory."""
    return Path(path).is_dir()


async def make_directories(path: str | Path) -> None:
    """Create path and any missing parents."""
    await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)


async def write_text(path: str | Path, content: str) -> None:
    """Write content to path as UTF-8, replacing any existing file.

    The write is not atomic: a failure part way through can leave a
    truncated file behind.
    """
    await asyncio.to_thread(_write, Path(path), content)


def _write(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
