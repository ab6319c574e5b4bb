"""Graph Base Classes

This module defines the graph that models every control-flow path of a
workflow document. The graph provides a lightweight way to:
1. Insert vertices, assigning each a dense integer identity
2. Connect vertices with typed edges (several edges may join one pair)
3. Look vertices up by identity or by AMID
4. Collect non-fatal diagnostics gathered while the graph was built

Example:
    ```python
    graph = WorkflowGraph()
    chain = graph.insert(ChainLinkVertex(amid="c1", chain=Chain(link_id="l1")))
    link = graph.insert(LinkVertex(amid="l1", link=Link()))
    graph.connect(chain, link)

    assert graph.vertex_by_amid("l1").id == 1
    ```
"""

import logging
from typing import Dict, Iterator, List, Optional

import networkx as nx
from pydantic import BaseModel, Field, PrivateAttr

from amflow.core.errors import DuplicateAMIDError
from amflow.core.graph.edges import EDGE_TYPES, Edge, EdgeKind
from amflow.core.graph.nodes import (
    InitiatorVertex,
    Vertex,
    VertexKind,
    WatchedDirectoryVertex,
)
from amflow.core.logging import LogComponent, get_logger, log_verbose


class UnresolvedReference(BaseModel):
    """A cross-reference that did not resolve to a vertex.

    Attributes:
        source: AMID of the record holding the reference
        target: The AMID (or path) that was not found
        rule: Connection rule that attempted the lookup
    """
    source: str
    target: str
    rule: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.rule})"


class WorkflowGraph(BaseModel):
    """A directed multigraph of workflow vertices.

    The graph manages:
    - Identity assignment and AMID indexing
    - Typed edges stored on an underlying networkx MultiDiGraph
    - Diagnostics about references skipped during construction

    Attributes:
        unresolved_references: References the builder could not resolve
    """
    unresolved_references: List[UnresolvedReference] = Field(default_factory=list)

    _graph: nx.MultiDiGraph = PrivateAttr(default_factory=nx.MultiDiGraph)
    _by_id: Dict[int, Vertex] = PrivateAttr(default_factory=dict)
    _by_amid: Dict[str, Vertex] = PrivateAttr(default_factory=dict)
    _initiator: Optional[InitiatorVertex] = PrivateAttr(default=None)
    _next_id: int = PrivateAttr(default=0)
    _logger: logging.Logger = PrivateAttr()

    def __init__(self, **data):
        super().__init__(**data)
        self._logger = get_logger(LogComponent.GRAPH)

    def insert(self, vertex: Vertex) -> Vertex:
        """Insert a vertex, assigning it the next identity.

        The initiator is kept out of the AMID index, so its reserved AMID never
        collides with a document record.

        Args:
            vertex: Vertex that has not been inserted in any graph yet

        Returns:
            The same vertex, with its ``id`` set

        Raises:
            DuplicateAMIDError: If a vertex with the same AMID exists
            ValueError: If the vertex already carries an identity, or a
                second initiator is inserted
        """
        is_initiator = vertex.kind == VertexKind.INITIATOR
        if is_initiator:
            if self._initiator is not None:
                raise ValueError("Graph already has an initiator")
        elif vertex.amid in self._by_amid:
            raise DuplicateAMIDError(vertex.amid)
        if vertex.is_inserted:
            raise ValueError(f"Vertex {vertex.amid} was already inserted as {vertex.id}")

        vertex.id = self._next_id
        self._next_id += 1

        self._graph.add_node(vertex.id, vertex=vertex)
        self._by_id[vertex.id] = vertex
        if is_initiator:
            self._initiator = vertex
        else:
            self._by_amid[vertex.amid] = vertex
        self._logger.debug(f"Inserted vertex: {vertex}")
        return vertex

    def connect(
        self,
        source: Vertex,
        destination: Vertex,
        kind: EdgeKind = EdgeKind.PLAIN,
        **metadata
    ) -> Edge:
        """Add a directed edge between two inserted vertices.

        Args:
            source: Source vertex
            destination: Destination vertex
            kind: Edge variant
            **metadata: Variant-specific fields (e.g. ``code`` for exit codes)

        Returns:
            The created edge
        """
        edge = EDGE_TYPES[kind](
            source=source.id,
            destination=destination.id,
            **metadata
        )
        self._graph.add_edge(source.id, destination.id, edge=edge)
        log_verbose(self._logger, f"Added edge: {source.amid} --[{kind.value}]--> {destination.amid}")
        return edge

    def vertex_by_amid(self, amid: str) -> Optional[Vertex]:
        """Return the document vertex with the given AMID, or None."""
        return self._by_amid.get(amid)

    def vertex_by_id(self, vertex_id: int) -> Optional[Vertex]:
        """Return the vertex with the given identity, or None."""
        return self._by_id.get(vertex_id)

    def vertices(self, kind: Optional[VertexKind] = None) -> List[Vertex]:
        """Vertices in identity order, optionally restricted to one kind."""
        return [
            vertex for vertex in self._by_id.values()
            if kind is None or vertex.kind == kind
        ]

    def edges(self) -> Iterator[Edge]:
        """Iterate edges grouped by source vertex, in insertion order."""
        for _, _, edge in self._graph.edges(data="edge"):
            yield edge

    def edges_between(self, source_id: int, destination_id: int) -> List[Edge]:
        """All edges from ``source_id`` to ``destination_id``."""
        data = self._graph.get_edge_data(source_id, destination_id)
        if not data:
            return []
        return [attrs["edge"] for attrs in data.values()]

    def has_edge(
        self,
        source_id: int,
        destination_id: int,
        kind: Optional[EdgeKind] = None
    ) -> bool:
        """Check whether an edge (of the given kind) joins the pair."""
        return any(
            kind is None or edge.kind == kind
            for edge in self.edges_between(source_id, destination_id)
        )

    def successors(self, vertex_id: int) -> List[Vertex]:
        """Distinct vertices reachable over one outgoing edge."""
        if vertex_id not in self._by_id:
            return []
        return [self._by_id[i] for i in self._graph.successors(vertex_id)]

    def watched_directories(self) -> List[WatchedDirectoryVertex]:
        return self.vertices(VertexKind.WATCHED_DIRECTORY)

    @property
    def initiator(self) -> Optional[InitiatorVertex]:
        return self._initiator

    @property
    def number_of_vertices(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def get_nx_graph(self) -> nx.MultiDiGraph:
        """Return the underlying networkx graph for read-only analysis.

        Nodes are vertex identities; each edge stores its model under the
        ``edge`` attribute. Mutate the graph through insert() and connect().
        """
        return self._graph
