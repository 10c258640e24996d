"""Lock-step walk of two directory trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from .compare import SamplingComparator
from .fs import list_directories, list_files
from .verdicts import (
    Different,
    FileEntry,
    LeftOnly,
    RightOnly,
    Verdict,
    match_entries,
)


class TreeDiffer:
    """Walk two trees depth-first and yield a verdict per mismatch.

    At each level subdirectories are handled before files. A directory that
    exists on one side only is reported once, at its root. With ``jobs > 1``
    the common files of a level are compared in a thread pool, but verdicts
    are still yielded in traversal order.
    """

    def __init__(
        self,
        comparator: Optional[SamplingComparator] = None,
        jobs: int = 1,
        on_directory: Optional[Callable[[Path, Path], None]] = None,
    ) -> None:
        if jobs < 1:
            raise ValueError("jobs must be >= 1")
        if comparator is None:
            comparator = SamplingComparator()
        self.comparator = comparator
        self.jobs = jobs
        self.on_directory = on_directory

    def diff(self, left: Path, right: Path) -> Iterator[Verdict]:
        if self.jobs == 1:
            yield from self._walk(Path(left), Path(right), None)
            return
        pool = ThreadPoolExecutor(max_workers=self.jobs)
        finished = False
        try:
            yield from self._walk(Path(left), Path(right), pool)
            finished = True
        finally:
            # a consumer that stops early must not wait for queued file pairs
            pool.shutdown(wait=finished, cancel_futures=not finished)

    def _walk(
        self, left: Path, right: Path, pool: Optional[ThreadPoolExecutor]
    ) -> Iterator[Verdict]:
        if self.on_directory is not None:
            self.on_directory(left, right)

        dirs = match_entries(list_directories(left), list_directories(right))
        for entry in dirs.left_only:
            yield LeftOnly(entry.path)
        for entry in dirs.right_only:
            yield RightOnly(entry.path)
        for left_dir, right_dir in dirs.common:
            yield from self._walk(left_dir.path, right_dir.path, pool)

        files = match_entries(list_files(left), list_files(right))
        for entry in files.left_only:
            yield LeftOnly(entry.path)
        for entry in files.right_only:
            yield RightOnly(entry.path)
        yield from self._compare_files(files.common, pool)

    def _compare_files(
        self,
        pairs: Sequence[tuple[FileEntry, FileEntry]],
        pool: Optional[ThreadPoolExecutor],
    ) -> Iterator[Verdict]:
        if pool is None:
            for left_file, right_file in pairs:
                if not self.comparator.files_equal(left_file, right_file):
                    yield Different(left_file.path, right_file.path)
            return

        futures = [
            (left_file, right_file, pool.submit(self.comparator.files_equal, left_file, right_file))
            for left_file, right_file in pairs
        ]
        for left_file, right_file, future in futures:
            if not future.result():
                yield Different(left_file.path, right_file.path)


def diff_directories(
    left: Path,
    right: Path,
    jobs: int = 1,
    comparator: Optional[SamplingComparator] = None,
    on_directory: Optional[Callable[[Path, Path], None]] = None,
) -> Iterator[Verdict]:
    """Yield verdicts for every path that differs between ``left`` and ``right``."""
    differ = TreeDiffer(comparator=comparator, jobs=jobs, on_directory=on_directory)
    return differ.diff(left, right)
