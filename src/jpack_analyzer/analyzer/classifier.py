"""Sort artifacts into module buckets and collect their jdeps module deps.

Buckets:
    module      explicit module-info, goes on the module path
    automatic   Automatic-Module-Name (descriptor or manifest), module path
    classpath   everything else, goes on the class path

Nodes must be processed one at a time in traversal order: how a jdeps
dependency line is bucketed depends on the automatic modules registered by
earlier nodes.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from jpack_analyzer.analyzer.command import build_jdeps_command
from jpack_analyzer.analyzer.jdeps_output import parse_jdeps_output
from jpack_analyzer.analyzer.manifest import automatic_module_name
from jpack_analyzer.analyzer.models import AnalyzerConfig, ArtifactNode, ModuleDescriptor
from jpack_analyzer.analyzer.registry import ModuleRegistry
from jpack_analyzer.analyzer.runner import JdepsRunner
from jpack_analyzer.utils import add_unique, jdeps_output_name

log = logging.getLogger(__name__)


class ModuleClassifier:
    """Classifies artifact nodes into a ModuleRegistry it owns for one run."""

    def __init__(
        self,
        registry: ModuleRegistry,
        config: AnalyzerConfig,
        runner: JdepsRunner,
    ) -> None:
        self.registry = registry
        self.config = config
        self.runner = runner

    def process_all(self, nodes: Iterable[ArtifactNode]) -> None:
        for node in nodes:
            self.process(node)

    def process(self, node: ArtifactNode) -> None:
        self.registry.add_node_string(node.node_string)
        self.registry.ensure_node(node.node_string)

        descriptor = node.descriptor
        if descriptor is not None and not descriptor.automatic:
            self._handle_module_jar(node, descriptor)
        else:
            self._handle_non_module_jar(node, descriptor)

    # ── Buckets ──────────────────────────────────────────────────────────

    def _handle_module_jar(self, node: ArtifactNode, descriptor: ModuleDescriptor) -> None:
        log.debug("module jar %s (%s)", node.file, descriptor.name)
        target = self.config.output_directory_modules

        if not node.file.is_file():
            log.debug("%s is not a regular file, not analysing it", node.file)
        elif target is None:
            if self.config.generate_module_jdeps:
                log.error(
                    "no module output directory configured, cannot run jdeps on %s",
                    node.file,
                )
        else:
            if self.config.generate_module_jdeps:
                self.generate_jdeps(node, target)
            self._collect(node.file, target)

        add_unique(self.registry.linked_modules, descriptor.name)
        add_unique(self.registry.all_modules, descriptor.name)

    def _handle_non_module_jar(
        self, node: ArtifactNode, descriptor: ModuleDescriptor | None,
    ) -> None:
        log.debug("non-module jar %s", node.file)
        is_regular = node.file.is_file()

        name = descriptor.name if descriptor is not None and descriptor.automatic else None
        if name is None and is_regular:
            name = automatic_module_name(node.file)

        if not is_regular:
            log.debug("%s is not a regular file, not analysing it", node.file)
        elif name is not None:
            target = self.config.output_directory_automatic_jars
            if target is not None:
                if self.config.generate_automatic_jdeps:
                    self.generate_jdeps(node, target)
                self._collect(node.file, target)
        else:
            target = self.config.output_directory_classpath_jars
            if target is not None:
                if self.config.generate_classpath_jdeps:
                    self.generate_jdeps(node, target)
                self._collect(node.file, target)
                self.registry.add_class_path_element(target / node.file.name, node.file.name)

        if name is not None:
            add_unique(self.registry.automatic_modules, name)
            add_unique(self.registry.all_modules, name)

    # ── jdeps ────────────────────────────────────────────────────────────

    def jdeps_command(self, source_file: Path) -> list[str]:
        return [self.config.jdeps_executable] + build_jdeps_command(
            source_file,
            class_path_elements=self.registry.class_path_elements,
            module_dir=self.config.output_directory_modules,
            automatic_dir=self.config.output_directory_automatic_jars,
        )

    def generate_jdeps(self, node: ArtifactNode, target_dir: Path) -> None:
        """Run jdeps on node.file, capture output in target_dir and parse it."""
        cmd = self.jdeps_command(node.file)
        output = target_dir / jdeps_output_name(node.file.name)

        # seeded up front so a failed run still leaves valid (empty) entries
        self.registry.seed_node(node.node_string)

        try:
            with open(output, "w") as fout:
                self.runner.run(cmd, fout)
        except OSError as e:
            log.error("error creating .jdeps file %s: %s", output, e)
            return

        parse_jdeps_output(output, node.node_string, self.registry)

    def _collect(self, jar: Path, target_dir: Path) -> None:
        if not self.config.copy_artifacts:
            return
        dest = target_dir / jar.name
        if dest.exists():
            return
        log.debug("copying %s to %s", jar, target_dir)
        try:
            shutil.copy2(jar, dest)
        except OSError as e:
            log.error("error copying %s to %s: %s", jar, target_dir, e)
