"""Filesystem listing helpers for dirdiff."""

from __future__ import annotations

import os
from pathlib import Path

from .verdicts import DirectoryEntry, FileEntry


def list_directories(path: Path) -> list[DirectoryEntry]:
    """List immediate subdirectories of ``path``, sorted by name.

    Errors from ``os.scandir`` (missing path, access denied) propagate.
    """
    entries: list[DirectoryEntry] = []
    with os.scandir(path) as it:
        for child in it:
            if child.is_dir():
                entries.append(DirectoryEntry(child.name, Path(child.path)))
    entries.sort(key=lambda entry: entry.name)
    return entries


def list_files(path: Path) -> list[FileEntry]:
    """List immediate regular files of ``path`` with their sizes, sorted by name.

    Entries that are neither directories nor regular files (sockets, FIFOs,
    dangling links) are skipped.
    """
    entries: list[FileEntry] = []
    with os.scandir(path) as it:
        for child in it:
            if child.is_file():
                size = child.stat().st_size
                entries.append(FileEntry(child.name, Path(child.path), size))
    entries.sort(key=lambda entry: entry.name)
    return entries
