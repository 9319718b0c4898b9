"""Pydantic models for graph input, run configuration and the final report."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ── Graph input ─────────────────────────────────────────────────────────────

class ModuleDescriptor(BaseModel):
    """JPMS view of a jar. automatic=False means an explicit module-info."""
    model_config = ConfigDict(frozen=True)

    name: str
    automatic: bool = False


class ArtifactNode(BaseModel):
    """One artifact as visited by the dependency graph traversal."""
    model_config = ConfigDict(frozen=True)

    node_string: str
    file: Path
    descriptor: ModuleDescriptor | None = None


# ── Configuration ───────────────────────────────────────────────────────────

class AnalyzerConfig(BaseModel):
    jdeps_executable: str = "jdeps"
    java_executable: str | None = None
    # None means "ask java --list-modules" when java_executable is set
    system_modules: list[str] | None = None

    output_directory_modules: Path | None = None
    output_directory_automatic_jars: Path | None = None
    output_directory_classpath_jars: Path | None = None

    generate_module_jdeps: bool = True
    generate_automatic_jdeps: bool = True
    generate_classpath_jdeps: bool = True

    copy_artifacts: bool = False
    jdeps_timeout: float | None = None

    def output_directories(self) -> list[Path]:
        return [
            d for d in (
                self.output_directory_modules,
                self.output_directory_automatic_jars,
                self.output_directory_classpath_jars,
            )
            if d is not None
        ]


# ── Report ──────────────────────────────────────────────────────────────────

class NodeModules(BaseModel):
    """Module dependencies jdeps reported for a single node."""
    all: list[str] = Field(default_factory=list)
    linked: list[str] = Field(default_factory=list)
    automatic: list[str] = Field(default_factory=list)
    linked_system: list[str] = Field(default_factory=list)


class JPackReport(BaseModel):
    """Read-only snapshot of a finished run."""
    node_strings: list[str] = Field(default_factory=list)

    system_modules: list[str] = Field(default_factory=list)
    linked_system_modules: list[str] = Field(default_factory=list)
    all_modules: list[str] = Field(default_factory=list)
    linked_modules: list[str] = Field(default_factory=list)
    automatic_modules: list[str] = Field(default_factory=list)

    class_path_elements: list[str] = Field(default_factory=list)
    jars_on_class_path: list[str] = Field(default_factory=list)

    all_modules_map: dict[str, list[str]] = Field(default_factory=dict)
    linked_modules_map: dict[str, list[str]] = Field(default_factory=dict)
    automatic_modules_map: dict[str, list[str]] = Field(default_factory=dict)
    linked_system_modules_map: dict[str, list[str]] = Field(default_factory=dict)

    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    def node_modules(self, node_string: str) -> NodeModules:
        return NodeModules(
            all=self.all_modules_map.get(node_string, []),
            linked=self.linked_modules_map.get(node_string, []),
            automatic=self.automatic_modules_map.get(node_string, []),
            linked_system=self.linked_system_modules_map.get(node_string, []),
        )
