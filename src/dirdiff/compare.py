"""File content comparison for dirdiff.

Small files are compared in full. Larger files are sampled: one block is
compared, the next ``skip_ratio`` blocks are skipped, and so on, with the
trailing block always checked last. The sampled subset is deterministic so
repeated runs over unchanged files give the same answer.

Above the full-compare threshold a difference that lies only inside skipped
blocks is not detected.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Optional, Union

from .verdicts import FileEntry

BLOCK_SIZE = 16 * 1024 * 1024
CHUNK_SIZE = 4096

# (upper size bound in blocks, skip ratio), checked in order
SKIP_TIERS = ((64, 3), (256, 7))
LARGEST_SKIP_RATIO = 15


Buffer = Union[bytes, bytearray, memoryview]


def bytes_equal(left: Buffer, right: Buffer, length: int) -> bool:
    """Return True if the first ``length`` bytes of both buffers match."""
    return memoryview(left)[:length] == memoryview(right)[:length]


def skip_ratio_for(size: int, block_size: int = BLOCK_SIZE) -> Optional[int]:
    """Return the skip ratio for a file of ``size`` bytes.

    ``None`` means the file is small enough to be compared in full.
    """
    if size <= block_size:
        return None
    for limit, ratio in SKIP_TIERS:
        if size <= limit * block_size:
            return ratio
    return LARGEST_SKIP_RATIO


class _StreamPair:
    """Two open files read side by side into private reusable buffers."""

    def __init__(
        self,
        stream1: BinaryIO,
        stream2: BinaryIO,
        reader: ThreadPoolExecutor,
        chunk_size: int,
    ) -> None:
        self.stream1 = stream1
        self.stream2 = stream2
        self.reader = reader
        self.chunk_size = chunk_size
        self.view1 = memoryview(bytearray(chunk_size))
        self.view2 = memoryview(bytearray(chunk_size))

    def seek(self, offset: int) -> None:
        self.stream1.seek(offset)
        self.stream2.seek(offset)

    def read_both(self, count: int) -> tuple[int, int]:
        """Read up to ``count`` bytes from each stream, overlapping the reads."""
        future1 = self.reader.submit(self.stream1.readinto, self.view1[:count])
        future2 = self.reader.submit(self.stream2.readinto, self.view2[:count])
        return future1.result(), future2.result()

    def compare_block(self, block_size: int) -> bool:
        """Compare the next ``block_size`` bytes of both streams.

        Stops early at end of file; the unread remainder counts as equal.
        """
        remaining = block_size
        while remaining > 0:
            count = min(self.chunk_size, remaining)
            read1, read2 = self.read_both(count)
            if read1 == 0 or read2 == 0:
                break
            if read1 != read2:
                return False
            if not bytes_equal(self.view1, self.view2, read1):
                return False
            remaining -= read1
        return True


class SamplingComparator:
    """Decide whether two files of known size have equal contents."""

    def __init__(self, block_size: int = BLOCK_SIZE, chunk_size: int = CHUNK_SIZE) -> None:
        if block_size < 1 or chunk_size < 1:
            raise ValueError("block_size and chunk_size must be >= 1")
        self.block_size = block_size
        self.chunk_size = chunk_size

    def files_equal(self, left: FileEntry, right: FileEntry) -> bool:
        """Return True if ``left`` and ``right`` compare equal.

        Files of different sizes are rejected without being opened. Read
        errors propagate; no answer is given for a pair that could not be
        read.
        """
        if left.size != right.size:
            return False
        size = left.size
        skip_ratio = skip_ratio_for(size, self.block_size)

        with open(left.path, "rb") as stream1, open(right.path, "rb") as stream2:
            # one reader pool per pair; its threads start on the first read,
            # so tiny files pay a thread spawn per side
            with ThreadPoolExecutor(max_workers=2) as reader:
                pair = _StreamPair(stream1, stream2, reader, self.chunk_size)
                if skip_ratio is None:
                    # a single block covers the whole file, tail included
                    return pair.compare_block(self.block_size)
                return self._compare_with_skip(pair, size, skip_ratio)

    def _compare_with_skip(self, pair: _StreamPair, size: int, skip_ratio: int) -> bool:
        stride = self.block_size * (skip_ratio + 1)
        position = 0
        while position < size:
            pair.seek(position)
            if not pair.compare_block(self.block_size):
                return False
            position += stride

        pair.seek(max(0, size - self.block_size))
        return pair.compare_block(self.block_size)


_default_comparator = SamplingComparator()


def files_equal(left: FileEntry, right: FileEntry) -> bool:
    """Compare two files with the default block and chunk sizes."""
    return _default_comparator.files_equal(left, right)
