"""Build jdeps argument lists.

The argument order is fixed:
    [--class-path <paths>] [--module-path <paths>]
    --print-module-deps --ignore-missing-deps <source jar>
Path lists use ':' as separator and canonical paths throughout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from jpack_analyzer.utils import canonical_path


def colon_separated(paths: Iterable[Path | str]) -> str:
    return ":".join(canonical_path(p) for p in paths)


def build_jdeps_command(
    source_file: Path,
    *,
    class_path_elements: Iterable[Path] = (),
    module_dir: Path | None = None,
    automatic_dir: Path | None = None,
) -> list[str]:
    """Arguments for one jdeps run over source_file, without the executable."""
    args: list[str] = []

    class_path = list(class_path_elements)
    if class_path:
        args += ["--class-path", colon_separated(class_path)]

    module_path = [d for d in (module_dir, automatic_dir) if d is not None]
    if module_path:
        args += ["--module-path", colon_separated(module_path)]

    args += ["--print-module-deps", "--ignore-missing-deps"]
    args.append(canonical_path(source_file))
    return args
