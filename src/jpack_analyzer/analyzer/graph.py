"""Load a dependency graph document into ArtifactNodes.

Expected shape (YAML or JSON), nodes in traversal order:

    nodes:
      - id: "com.example:mod-a:jar:1.0:compile"
        file: libs/mod-a-1.0.jar
        descriptor:            # optional
          name: com.example.mod.a
          automatic: false
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from jpack_analyzer.analyzer.descriptor import DescriptorProvider
from jpack_analyzer.analyzer.models import ArtifactNode, ModuleDescriptor
from jpack_analyzer.errors import GraphLoadError

log = logging.getLogger(__name__)


class GraphEntry(BaseModel):
    id: str
    file: Path
    descriptor: ModuleDescriptor | None = None


class GraphDocument(BaseModel):
    nodes: list[GraphEntry] = Field(default_factory=list)


def load_dependency_graph(
    path: Path,
    descriptors: DescriptorProvider | None = None,
) -> list[ArtifactNode]:
    """Read the graph at path. Missing descriptors are looked up via *descriptors*."""
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise GraphLoadError(f"could not read dependency graph {path}: {e}") from e

    try:
        doc = GraphDocument.model_validate(data or {})
    except ValidationError as e:
        raise GraphLoadError(f"invalid dependency graph {path}: {e}") from e

    base = path.parent
    nodes: list[ArtifactNode] = []
    for entry in doc.nodes:
        file = entry.file if entry.file.is_absolute() else base / entry.file
        descriptor = entry.descriptor
        if descriptor is None and descriptors is not None and file.is_file():
            descriptor = descriptors.describe(file)
        nodes.append(ArtifactNode(node_string=entry.id, file=file, descriptor=descriptor))

    log.info("Loaded %d nodes from %s", len(nodes), path)
    return nodes
