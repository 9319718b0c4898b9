"""Tests for the markdown report renderer."""

from pathlib import Path

from jpack_analyzer.analyzer.models import AnalyzerConfig, JPackReport
from jpack_analyzer.render.markdown import render_markdown
from jpack_analyzer.scanner import ScanResult


def _make_result(report: JPackReport) -> ScanResult:
    return ScanResult(report=report, graph_path=Path("/tmp/graph.yaml"), config=AnalyzerConfig())


def test_empty_report():
    md = render_markdown(_make_result(JPackReport()))
    assert md.startswith("# Module Report: graph.yaml")
    assert "- **Artifacts**: 0" in md
    assert "## Module Dependencies" not in md
    assert "## jdeps Diagnostics" not in md


def test_full_report():
    report = JPackReport(
        node_strings=["g:a:jar:1.0", "g:b:jar:1.0"],
        linked_system_modules=["java.base"],
        linked_modules=["mod.a"],
        automatic_modules=["mod.b"],
        class_path_elements=["/out/classpath/c-1.0.jar"],
        jars_on_class_path=["c-1.0.jar"],
        all_modules_map={"g:a:jar:1.0": ["java.base", "mod.b"], "g:b:jar:1.0": []},
        linked_system_modules_map={"g:a:jar:1.0": ["java.base"]},
        automatic_modules_map={"g:a:jar:1.0": ["mod.b"]},
        warnings=["Warning: split package"],
        errors=["Error: missing dependency"],
    )
    md = render_markdown(_make_result(report))

    assert "## Linked Modules\n" in md
    assert "`mod.a`" in md
    assert "- `/out/classpath/c-1.0.jar`" in md
    assert "| `g:a:jar:1.0` | java.base | - | mod.b |" in md
    # nodes without module deps are left out of the table
    assert "`g:b:jar:1.0`" not in md
    assert "- Error: missing dependency" in md
    assert "- Warning: split package" in md
