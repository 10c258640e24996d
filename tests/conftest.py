from __future__ import annotations

from pathlib import Path
from typing import Callable, Union

import pytest

TreeLayout = dict[str, Union[bytes, str, None]]


def _build(root: Path, layout: TreeLayout) -> Path:
    """Create files (bytes/str values) and empty directories (None values)."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in layout.items():
        target = root / rel
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        target.write_bytes(content)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, TreeLayout], Path]:
    def factory(name: str, layout: TreeLayout) -> Path:
        return _build(tmp_path / name, layout)

    return factory
