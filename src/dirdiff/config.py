"""Environment-driven defaults for dirdiff."""

from __future__ import annotations

import os

DEFAULT_JOBS = 1
DEFAULT_CHUNK_SIZE = 4096


def _positive_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed < 1:
        raise ValueError(f"{name} must be >= 1, got {parsed}")
    return parsed


def get_jobs() -> int:
    """Return the default worker count from DIRDIFF_JOBS (1 if unset)."""
    return _positive_int_env("DIRDIFF_JOBS", DEFAULT_JOBS)


def get_chunk_size() -> int:
    """Return the read sub-chunk size from DIRDIFF_CHUNK_SIZE.

    Defaults to 4 KiB. Larger values trade memory for fewer read calls on
    big files.
    """
    return _positive_int_env("DIRDIFF_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)


def color_enabled_by_default() -> bool:
    """Color is on unless NO_COLOR is set to a non-empty value."""
    return not os.getenv("NO_COLOR")
