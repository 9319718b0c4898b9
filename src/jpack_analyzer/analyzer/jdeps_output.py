"""Parse captured ``jdeps --print-module-deps`` output into the registry."""

from __future__ import annotations

import logging
from pathlib import Path

from jpack_analyzer.analyzer.registry import ModuleRegistry, NodeDeps
from jpack_analyzer.errors import JdepsOutputError
from jpack_analyzer.utils import add_unique

log = logging.getLogger(__name__)

WARNING_PREFIX = "Warning:"
ERROR_PREFIX = "Error:"


def parse_jdeps_output(path: Path, node_string: str, registry: ModuleRegistry) -> NodeDeps:
    """Read one .jdeps file and merge what it reports for node_string.

    The node's map entries are reset to empty lists before anything is read,
    so they stay valid if reading fails halfway through.
    """
    deps = registry.seed_node(node_string)

    try:
        with open(path, encoding="utf-8", errors="replace") as fh:
            for raw in fh:
                _handle_line(raw.rstrip("\r\n"), deps, registry)
    except OSError as e:
        raise JdepsOutputError(
            f"i/o error reading jdeps output {path} for {node_string}"
        ) from e

    registry.store_node(node_string, deps)
    log.debug(
        "%s: %d module deps (%d system, %d automatic, %d linked)",
        node_string, len(deps.all), len(deps.linked_system),
        len(deps.automatic), len(deps.linked),
    )
    return deps


def _handle_line(line: str, deps: NodeDeps, registry: ModuleRegistry) -> None:
    if line.startswith(WARNING_PREFIX):
        add_unique(registry.warnings, line)
        return
    if line.startswith(ERROR_PREFIX):
        add_unique(registry.errors, line)
        return

    for name in line.split(","):
        name = name.strip()
        if not name:
            continue
        add_unique(deps.all, name)
        add_unique(registry.all_modules, name)

        if registry.is_system_module(name):
            add_unique(registry.linked_system_modules, name)
            add_unique(deps.linked_system, name)
        elif registry.is_automatic_module(name):
            # automatic status only comes from classification, never from here
            add_unique(deps.automatic, name)
        else:
            add_unique(registry.linked_modules, name)
            add_unique(deps.linked, name)
