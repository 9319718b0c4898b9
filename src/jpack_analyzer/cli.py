"""CLI entry point for jpack-analyzer."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import yaml

from jpack_analyzer import __version__
from jpack_analyzer.analyzer.models import AnalyzerConfig
from jpack_analyzer.config import load_config
from jpack_analyzer.errors import JPackAnalyzerError
from jpack_analyzer.scanner import ScanResult, scan


@click.command()
@click.argument("graph", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "-c", "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML config file. Command line options override its values.",
)
@click.option("--jdeps", "jdeps_executable", default=None, help="jdeps executable (default: jdeps).")
@click.option("--java", "java_executable", default=None,
              help="java executable used to list system modules.")
@click.option(
    "--system-module", "system_modules", multiple=True,
    help="System module name (repeatable). Skips java --list-modules.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, resolve_path=True),
    default=None,
    help="Root for the modules/, automatic/ and classpath/ output directories.",
)
@click.option("--copy/--no-copy", "copy_artifacts", default=None,
              help="Copy jars into their output directory.")
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["md", "json", "yaml"], case_sensitive=False),
    default="md",
    help="Output format (default: md).",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, resolve_path=True),
    default=None,
    help="Output file path. Defaults to stdout.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=__version__)
def main(
    graph: str,
    config_path: str | None,
    jdeps_executable: str | None,
    java_executable: str | None,
    system_modules: tuple[str, ...],
    output_dir: str | None,
    copy_artifacts: bool | None,
    fmt: str,
    output: str | None,
    verbose: bool,
) -> None:
    """Classify the jars of a dependency GRAPH into modules and class path entries."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(Path(config_path)) if config_path else AnalyzerConfig()
        config = _apply_overrides(
            config,
            jdeps_executable=jdeps_executable,
            java_executable=java_executable,
            system_modules=system_modules,
            output_dir=output_dir,
            copy_artifacts=copy_artifacts,
        )
        result = scan(Path(graph), config)
    except JPackAnalyzerError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "json":
        _write(_as_json(result), output)
    elif fmt == "yaml":
        _write(_as_yaml(result), output)
    else:
        from jpack_analyzer.render.markdown import render_markdown
        _write(render_markdown(result), output)


def _apply_overrides(
    config: AnalyzerConfig,
    *,
    jdeps_executable: str | None,
    java_executable: str | None,
    system_modules: tuple[str, ...],
    output_dir: str | None,
    copy_artifacts: bool | None,
) -> AnalyzerConfig:
    updates: dict = {}
    if jdeps_executable:
        updates["jdeps_executable"] = jdeps_executable
    if java_executable:
        updates["java_executable"] = java_executable
    if system_modules:
        updates["system_modules"] = list(system_modules)
    if output_dir:
        root = Path(output_dir)
        updates["output_directory_modules"] = root / "modules"
        updates["output_directory_automatic_jars"] = root / "automatic"
        updates["output_directory_classpath_jars"] = root / "classpath"
    if copy_artifacts is not None:
        updates["copy_artifacts"] = copy_artifacts
    return config.model_copy(update=updates)


def _as_json(result: ScanResult) -> str:
    return json.dumps(result.report.model_dump(mode="json"), indent=2)


def _as_yaml(result: ScanResult) -> str:
    return yaml.dump(result.report.model_dump(mode="json"), default_flow_style=False, sort_keys=False)


def _write(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text)
        click.echo(f"Report written to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
