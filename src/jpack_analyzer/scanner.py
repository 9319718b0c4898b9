"""Unified scanner: load the graph, classify every node, return the report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jpack_analyzer.analyzer.classifier import ModuleClassifier
from jpack_analyzer.analyzer.descriptor import DescriptorProvider, JarDescriptorProvider
from jpack_analyzer.analyzer.graph import load_dependency_graph
from jpack_analyzer.analyzer.models import AnalyzerConfig, JPackReport
from jpack_analyzer.analyzer.registry import ModuleRegistry
from jpack_analyzer.analyzer.runner import (
    JdepsRunner,
    SubprocessJdepsRunner,
    list_system_modules,
)

log = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Report of one run plus what it was run on."""
    report: JPackReport
    graph_path: Path
    config: AnalyzerConfig


def scan(
    graph_path: Path,
    config: AnalyzerConfig | None = None,
    *,
    runner: JdepsRunner | None = None,
    descriptors: DescriptorProvider | None = None,
) -> ScanResult:
    """Run the full pipeline over the dependency graph at graph_path.

    Args:
        graph_path: YAML/JSON dependency graph document.
        config: Run configuration. Defaults to AnalyzerConfig().
        runner: jdeps runner. Defaults to a blocking subprocess runner.
        descriptors: Descriptor lookup for nodes without one.
                     Defaults to reading module-info.class from the jar.

    Returns:
        ScanResult holding the final JPackReport.
    """
    config = config or AnalyzerConfig()
    graph_path = graph_path.resolve()
    log.info("Scanning %s", graph_path)

    nodes = load_dependency_graph(graph_path, descriptors or JarDescriptorProvider())

    for d in config.output_directories():
        d.mkdir(parents=True, exist_ok=True)

    registry = ModuleRegistry(system_modules=tuple(_system_modules(config)))
    classifier = ModuleClassifier(
        registry, config, runner or SubprocessJdepsRunner(timeout=config.jdeps_timeout),
    )
    classifier.process_all(nodes)

    report = registry.to_report()
    log.info(
        "Scan complete: %d nodes, %d linked, %d automatic, %d on class path, "
        "%d warnings, %d errors",
        len(report.node_strings), len(report.linked_modules),
        len(report.automatic_modules), len(report.class_path_elements),
        len(report.warnings), len(report.errors),
    )
    return ScanResult(report=report, graph_path=graph_path, config=config)


def _system_modules(config: AnalyzerConfig) -> list[str]:
    if config.system_modules is not None:
        return config.system_modules
    if config.java_executable:
        return list_system_modules(config.java_executable, timeout=config.jdeps_timeout)
    log.warning("No system modules configured, every module dependency counts as linked")
    return []
