"""Render scan results as a Markdown report."""

from __future__ import annotations

from jpack_analyzer.scanner import ScanResult


def render_markdown(result: ScanResult) -> str:
    """Produce a full Markdown report from a ScanResult."""
    sections: list[str] = []
    r = result.report

    # ── Title ────────────────────────────────────────────────────────────
    sections.append(f"# Module Report: {result.graph_path.name}\n")

    # ── Summary box ──────────────────────────────────────────────────────
    summary_lines = [
        f"- **Graph**: `{result.graph_path}`",
        f"- **Artifacts**: {len(r.node_strings)}",
        f"- **Linked modules**: {len(r.linked_modules)}",
        f"- **Automatic modules**: {len(r.automatic_modules)}",
        f"- **System modules used**: {len(r.linked_system_modules)}",
        f"- **Jars on class path**: {len(r.jars_on_class_path)}",
        f"- **jdeps diagnostics**: {len(r.warnings)} warnings, {len(r.errors)} errors",
    ]
    sections.append("\n".join(summary_lines) + "\n")

    # ── Modules ──────────────────────────────────────────────────────────
    for title, names in (
        ("System Modules", r.linked_system_modules),
        ("Linked Modules", r.linked_modules),
        ("Automatic Modules", r.automatic_modules),
    ):
        if names:
            sections.append(f"## {title}\n")
            sections.append(", ".join(f"`{n}`" for n in names) + "\n")

    # ── Class path ───────────────────────────────────────────────────────
    if r.class_path_elements:
        sections.append("## Class Path\n")
        sections.append("\n".join(f"- `{p}`" for p in r.class_path_elements) + "\n")

    # ── Per-node dependencies ────────────────────────────────────────────
    rows = []
    for node in r.node_strings:
        deps = r.node_modules(node)
        if not deps.all:
            continue
        rows.append(
            f"| `{node}` | {_names(deps.linked_system)} | {_names(deps.linked)} "
            f"| {_names(deps.automatic)} |"
        )
    if rows:
        sections.append("## Module Dependencies\n")
        sections.append("| Artifact | System | Linked | Automatic |")
        sections.append("|---|---|---|---|")
        sections.append("\n".join(rows) + "\n")

    # ── Diagnostics ──────────────────────────────────────────────────────
    if r.errors or r.warnings:
        sections.append("## jdeps Diagnostics\n")
        lines = [f"- {e}" for e in r.errors] + [f"- {w}" for w in r.warnings]
        sections.append("\n".join(lines) + "\n")

    return "\n".join(sections)


def _names(names: list[str]) -> str:
    return ", ".join(names) if names else "-"
