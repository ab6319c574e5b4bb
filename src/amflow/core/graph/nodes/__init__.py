"""Node package initialization.

Exposes the vertex variants of the workflow graph.
"""

from amflow.core.graph.nodes.base.node import Vertex, VertexKind
from amflow.core.graph.nodes.vertices import (
    INITIATOR_AMID,
    ChainLinkVertex,
    InitiatorVertex,
    LinkVertex,
    WatchedDirectoryVertex,
)

__all__ = [
    # Base vertex types
    "Vertex",
    "VertexKind",

    # Variants
    "LinkVertex",
    "ChainLinkVertex",
    "WatchedDirectoryVertex",
    "InitiatorVertex",
    "INITIATOR_AMID",
]
