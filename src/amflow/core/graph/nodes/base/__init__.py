"""Base vertex definitions."""

from amflow.core.graph.nodes.base.node import Vertex, VertexKind

__all__ = ["Vertex", "VertexKind"]
