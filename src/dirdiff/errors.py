"""Exceptions raised by the dirdiff command line."""

from __future__ import annotations

import click


class CompareError(click.ClickException):
    """A comparison aborted on a filesystem error.

    Uses exit code 2 so callers can tell it apart from "differences found".
    """

    exit_code = 2
