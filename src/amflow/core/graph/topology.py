"""Connectivity checks for workflow graphs.

Archivematica workflows are expected to form a single connected component.
This is a property observed in existing workflow documents rather than a rule,
so a violation is reported and never repaired.
"""

from typing import List, Set

import networkx as nx

from amflow.core.graph.base import WorkflowGraph
from amflow.core.logging import LogComponent, get_logger

logger = get_logger(LogComponent.TOPOLOGY)


def connected_components(graph: WorkflowGraph) -> List[Set[int]]:
    """Components of the undirected view, ordered by their lowest identity."""
    components = nx.weakly_connected_components(graph.get_nx_graph())
    return sorted(components, key=min)


def component_count(graph: WorkflowGraph) -> int:
    return nx.number_weakly_connected_components(graph.get_nx_graph())


def has_multiple_components(graph: WorkflowGraph) -> bool:
    """Determine whether some vertex is unreachable from another, ignoring direction."""
    count = component_count(graph)
    if count > 1:
        logger.debug(f"Graph has {count} connected components")
    return count > 1
