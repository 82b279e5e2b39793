# workflow_validator/utils/files.py
from __future__ import annotations

"""Async filesystem helpers
--------------------------
Every suspension point of a scan goes through here: directory listing,
file reads and existence checks.
"""

import os
from pathlib import Path

import aiofiles
import aiofiles.os


async def read_text(path: Path | str) -> str:
    async with aiofiles.open(path, "r", encoding="utf-8") as f:
        return await f.read()


async def exists(path: Path | str) -> bool:
    return await aiofiles.os.path.exists(path)


async def list_regular_files(folder: Path | str) -> list[str]:
    """
    Names of the regular files directly under `folder`, sorted by name.
    Subdirectories (including the properties folder) and symlinks are skipped.
    Raises FileNotFoundError / NotADirectoryError / PermissionError as-is.
    """
    entries: list[os.DirEntry] = list(await aiofiles.os.scandir(folder))
    return sorted(e.name for e in entries if e.is_file(follow_symlinks=False))
