"""ModuleRegistry: the mutable state shared by every step of one run.

All sequences behave as ordered sets: membership is checked before insert and
insertion order is kept. A registry is owned by a single classifier and is
read through to_report() once the traversal is finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jpack_analyzer.analyzer.models import JPackReport
from jpack_analyzer.utils import add_unique


@dataclass
class NodeDeps:
    """Per-node dependency lists, shared by reference with the registry maps."""
    all: list[str] = field(default_factory=list)
    linked: list[str] = field(default_factory=list)
    automatic: list[str] = field(default_factory=list)
    linked_system: list[str] = field(default_factory=list)


@dataclass
class ModuleRegistry:
    system_modules: tuple[str, ...] = ()

    linked_system_modules: list[str] = field(default_factory=list)
    all_modules: list[str] = field(default_factory=list)
    linked_modules: list[str] = field(default_factory=list)
    automatic_modules: list[str] = field(default_factory=list)

    node_strings: list[str] = field(default_factory=list)
    class_path_elements: list[Path] = field(default_factory=list)
    jars_on_class_path: list[str] = field(default_factory=list)

    all_modules_map: dict[str, list[str]] = field(default_factory=dict)
    linked_modules_map: dict[str, list[str]] = field(default_factory=dict)
    automatic_modules_map: dict[str, list[str]] = field(default_factory=dict)
    linked_system_modules_map: dict[str, list[str]] = field(default_factory=dict)

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    # ── Classification bookkeeping ───────────────────────────────────────

    def add_node_string(self, node_string: str) -> bool:
        return add_unique(self.node_strings, node_string)

    def add_class_path_element(self, target: Path, jar_name: str) -> bool:
        """Register a jar destined for the class path, keyed by its target path."""
        if not add_unique(self.class_path_elements, target):
            return False
        self.jars_on_class_path.append(jar_name)
        return True

    def is_system_module(self, name: str) -> bool:
        return name in self.system_modules

    def is_automatic_module(self, name: str) -> bool:
        return name in self.automatic_modules

    # ── Per-node maps ────────────────────────────────────────────────────

    def seed_node(self, node_string: str) -> NodeDeps:
        """Replace the node's entries with fresh empty lists and return them."""
        deps = NodeDeps()
        self.store_node(node_string, deps)
        return deps

    def ensure_node(self, node_string: str) -> None:
        """Give the node an (empty) entry in every map without touching existing ones."""
        self.all_modules_map.setdefault(node_string, [])
        self.linked_modules_map.setdefault(node_string, [])
        self.automatic_modules_map.setdefault(node_string, [])
        self.linked_system_modules_map.setdefault(node_string, [])

    def store_node(self, node_string: str, deps: NodeDeps) -> None:
        self.all_modules_map[node_string] = deps.all
        self.linked_modules_map[node_string] = deps.linked
        self.automatic_modules_map[node_string] = deps.automatic
        self.linked_system_modules_map[node_string] = deps.linked_system

    def node_deps(self, node_string: str) -> NodeDeps:
        return NodeDeps(
            all=self.all_modules_map[node_string],
            linked=self.linked_modules_map[node_string],
            automatic=self.automatic_modules_map[node_string],
            linked_system=self.linked_system_modules_map[node_string],
        )

    # ── Snapshot ─────────────────────────────────────────────────────────

    def to_report(self) -> JPackReport:
        return JPackReport(
            node_strings=list(self.node_strings),
            system_modules=list(self.system_modules),
            linked_system_modules=list(self.linked_system_modules),
            all_modules=list(self.all_modules),
            linked_modules=list(self.linked_modules),
            automatic_modules=list(self.automatic_modules),
            class_path_elements=[str(p) for p in self.class_path_elements],
            jars_on_class_path=list(self.jars_on_class_path),
            all_modules_map={k: list(v) for k, v in self.all_modules_map.items()},
            linked_modules_map={k: list(v) for k, v in self.linked_modules_map.items()},
            automatic_modules_map={k: list(v) for k, v in self.automatic_modules_map.items()},
            linked_system_modules_map={
                k: list(v) for k, v in self.linked_system_modules_map.items()
            },
            warnings=list(self.warnings),
            errors=list(self.errors),
        )
