"""Shared utilities for jpack-analyzer."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from jpack_analyzer.errors import PathResolutionError

T = TypeVar("T")

# Extension of files holding captured jdeps output
JDEPS_SUFFIX = ".jdeps"


def add_unique(items: list[T], item: T) -> bool:
    """Append item unless already present. Returns True if it was added."""
    if item in items:
        return False
    items.append(item)
    return True


def canonical_path(path: Path | str) -> str:
    """Absolute, symlink-resolved form of path."""
    try:
        return str(Path(path).resolve())
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"error getting canonical path of {path}: {e}") from e


def jdeps_output_name(jar_name: str) -> str:
    """Name of the file jdeps output for jar_name is captured in.

    Everything from the last '-' on is dropped, so ``foo-core-2.1.3.jar``
    becomes ``foo-core.jdeps``. Names without a '-' (or with a leading one
    only) lose their extension instead.
    """
    i = jar_name.rfind("-")
    if i <= 0:
        return Path(jar_name).stem + JDEPS_SUFFIX
    return jar_name[:i] + JDEPS_SUFFIX
