"""Graph package initialization.

Exposes the workflow graph model, the builder that populates it from a
workflow document, connectivity checks and the DOT exporter.
"""

from amflow.core.graph.base import UnresolvedReference, WorkflowGraph
from amflow.core.graph.builder import WorkflowBuilder, build_workflow
from amflow.core.graph.edges import (
    ChainChoiceEdge,
    Edge,
    EdgeKind,
    ExitCodeEdge,
    FallbackEdge,
    PlainEdge,
    VariablePullEdge,
    VirtualMoveBridgeEdge,
)
from amflow.core.graph.nodes import (
    INITIATOR_AMID,
    ChainLinkVertex,
    InitiatorVertex,
    LinkVertex,
    Vertex,
    VertexKind,
    WatchedDirectoryVertex,
)
from amflow.core.graph.topology import (
    component_count,
    connected_components,
    has_multiple_components,
)
from amflow.core.graph.viz import GraphVisualizer, render, serialize

__all__ = [
    # Core classes
    "WorkflowGraph",
    "WorkflowBuilder",
    "GraphVisualizer",
    "UnresolvedReference",

    # Vertices
    "Vertex",
    "VertexKind",
    "LinkVertex",
    "ChainLinkVertex",
    "WatchedDirectoryVertex",
    "InitiatorVertex",
    "INITIATOR_AMID",

    # Edges
    "Edge",
    "EdgeKind",
    "PlainEdge",
    "FallbackEdge",
    "ExitCodeEdge",
    "ChainChoiceEdge",
    "VariablePullEdge",
    "VirtualMoveBridgeEdge",

    # Helpers
    "build_workflow",
    "connected_components",
    "component_count",
    "has_multiple_components",
    "serialize",
    "render",
]
