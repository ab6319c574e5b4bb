"""Edge variants for the workflow graph.

This module provides:
1. EdgeKind: the closed set of connection rules an edge can come from
2. Edge: base model holding the source and destination identities
3. One subclass per kind carrying that kind's metadata
4. EDGE_TYPES: kind -> model lookup used by WorkflowGraph.connect()
"""

from enum import Enum
from typing import Dict, Literal, Optional, Type

from pydantic import BaseModel, Field


class EdgeKind(str, Enum):
    """Edge variants."""
    PLAIN = "plain"
    FALLBACK = "fallback"
    EXIT_CODE = "exit_code"
    CHAIN_CHOICE = "chain_choice"
    VARIABLE_PULL = "variable_pull"
    VIRTUAL_MOVE_BRIDGE = "virtual_move_bridge"


class Edge(BaseModel):
    """
    Directed edge between two vertex identities.

    Attributes:
        source: Identity of the source vertex
        destination: Identity of the destination vertex
        kind: Variant tag
    """
    source: int
    destination: int
    kind: EdgeKind

    def __str__(self) -> str:
        return f"{self.source} --[{self.kind.value}]--> {self.destination}"


class PlainEdge(Edge):
    """Explicit reference between records."""
    kind: Literal[EdgeKind.PLAIN] = EdgeKind.PLAIN


class FallbackEdge(Edge):
    """Successor taken when the operation fails in an unspecified way."""
    kind: Literal[EdgeKind.FALLBACK] = EdgeKind.FALLBACK
    status: Optional[str] = Field(default=None, description="Resulting job status")


class ExitCodeEdge(Edge):
    """Successor taken for a specific exit code.

    ``has_fallback`` is advisory rendering metadata: a Fallback edge joins the
    same pair of vertices as well.
    """
    kind: Literal[EdgeKind.EXIT_CODE] = EdgeKind.EXIT_CODE
    code: int
    status: Optional[str] = None
    has_fallback: bool = False


class ChainChoiceEdge(Edge):
    """One branch of a multi-way chain choice."""
    kind: Literal[EdgeKind.CHAIN_CHOICE] = EdgeKind.CHAIN_CHOICE


class VariablePullEdge(Edge):
    """Jump driven by a unit variable set elsewhere in the workflow."""
    kind: Literal[EdgeKind.VARIABLE_PULL] = EdgeKind.VARIABLE_PULL


class VirtualMoveBridgeEdge(Edge):
    """Inferred hand-off through a filesystem move into a watched directory."""
    kind: Literal[EdgeKind.VIRTUAL_MOVE_BRIDGE] = EdgeKind.VIRTUAL_MOVE_BRIDGE


EDGE_TYPES: Dict[EdgeKind, Type[Edge]] = {
    EdgeKind.PLAIN: PlainEdge,
    EdgeKind.FALLBACK: FallbackEdge,
    EdgeKind.EXIT_CODE: ExitCodeEdge,
    EdgeKind.CHAIN_CHOICE: ChainChoiceEdge,
    EdgeKind.VARIABLE_PULL: VariablePullEdge,
    EdgeKind.VIRTUAL_MOVE_BRIDGE: VirtualMoveBridgeEdge,
}
