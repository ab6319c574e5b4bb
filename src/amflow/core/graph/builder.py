"""Workflow Builder

This module turns a WorkflowData document into a WorkflowGraph. The document
never states the graph directly; it uses six addressing schemes that are
reconciled in a fixed sequence of passes, because later rules look up
vertices inserted by earlier ones:

1. Insert links
2. Insert chains, connecting each to its entry link
3. Insert watched directories, connecting each to its chain
4. Index unit variable producers by variable name
5. Wire links: fallbacks, exit codes, chain choices, variable pulls and
   virtual move bridges
6. Insert the initiator and connect it to every initiator directory

Links and chains are visited in AMID order and watched directories in document
order, so the same document always produces the same graph. A reference that
does not resolve is skipped and recorded in
``WorkflowGraph.unresolved_references``.

Example:
    ```python
    graph = build_workflow(load_workflow_data("workflow.json"))
    for ref in graph.unresolved_references:
        print(ref)
    ```
"""

from typing import Dict, List, Optional

from amflow.core.document import (
    DEFAULT_LANGUAGE,
    MANAGER_DIRECTORIES,
    MANAGER_UNIT_VARIABLE_PULL,
    MODEL_CHAIN_CHOICE,
    MODEL_SET_UNIT_VARIABLE,
    WorkflowData,
)
from amflow.core.graph.base import UnresolvedReference, WorkflowGraph
from amflow.core.graph.edges import EdgeKind
from amflow.core.graph.nodes import (
    ChainLinkVertex,
    InitiatorVertex,
    LinkVertex,
    Vertex,
    WatchedDirectoryVertex,
)
from amflow.core.graph.rules import virtual_move_destinations
from amflow.core.graph.topology import component_count
from amflow.core.logging import LogComponent, get_logger, log_verbose

logger = get_logger(LogComponent.BUILDER)


class WorkflowBuilder:
    """Builds a WorkflowGraph from a workflow document.

    Each call to build() produces an independent graph; the document is only
    read.

    Attributes:
        data: The workflow document
        language: Locale used to read link descriptions
    """

    def __init__(self, data: WorkflowData, language: str = DEFAULT_LANGUAGE):
        self.data = data
        self.language = language

    def build(self) -> WorkflowGraph:
        """Run every construction pass.

        Returns:
            The populated graph

        Raises:
            DuplicateAMIDError: If two records share an AMID
        """
        graph = WorkflowGraph()

        links = self._insert_links(graph)
        chains = self._insert_chains(graph, links)
        directories = self._insert_watched_directories(graph, chains)
        producers = self._index_variable_producers(graph, links)

        for vertex in links.values():
            self._connect_link(graph, vertex, links, chains, directories, producers)

        self._insert_initiator(graph, directories)

        logger.info(
            f"Built workflow graph: {graph.number_of_vertices} vertices, "
            f"{graph.number_of_edges} edges"
        )
        if graph.unresolved_references:
            logger.info(f"Skipped {len(graph.unresolved_references)} unresolved references")
            for ref in graph.unresolved_references:
                log_verbose(logger, f"Unresolved reference: {ref}")

        count = component_count(graph)
        if count > 1:
            logger.warning(f"Workflow graph has {count} connected components")

        return graph

    def _insert_links(self, graph: WorkflowGraph) -> Dict[str, LinkVertex]:
        links = {}
        for amid in sorted(self.data.links):
            links[amid] = graph.insert(LinkVertex(amid=amid, link=self.data.links[amid]))
        return links

    def _insert_chains(
        self,
        graph: WorkflowGraph,
        links: Dict[str, LinkVertex]
    ) -> Dict[str, ChainLinkVertex]:
        chains = {}
        for amid in sorted(self.data.chains):
            chain = self.data.chains[amid]
            vertex = graph.insert(ChainLinkVertex(amid=amid, chain=chain))
            chains[amid] = vertex
            target = self._resolve(graph, links, vertex, chain.link_id, "chain_entry")
            if target is not None:
                graph.connect(vertex, target)
        return chains

    def _insert_watched_directories(
        self,
        graph: WorkflowGraph,
        chains: Dict[str, ChainLinkVertex]
    ) -> Dict[str, WatchedDirectoryVertex]:
        directories = {}
        for directory in self.data.watched_directories:
            vertex = graph.insert(WatchedDirectoryVertex(amid=directory.path, directory=directory))
            directories[directory.path] = vertex
            target = self._resolve(graph, chains, vertex, directory.chain_id, "watched_directory_chain")
            if target is not None:
                graph.connect(vertex, target)
        return directories

    def _index_variable_producers(
        self,
        graph: WorkflowGraph,
        links: Dict[str, LinkVertex]
    ) -> Dict[str, List[LinkVertex]]:
        """Map each unit variable name to the links its producers point at."""
        producers: Dict[str, List[LinkVertex]] = {}
        for vertex in links.values():
            config = vertex.config
            if config.model != MODEL_SET_UNIT_VARIABLE:
                continue
            target = self._resolve(graph, links, vertex, config.chain_id, "variable_producer")
            if target is None:
                continue
            candidates = producers.setdefault(config.variable, [])
            if all(candidate.id != target.id for candidate in candidates):
                candidates.append(target)
        return producers

    def _connect_link(
        self,
        graph: WorkflowGraph,
        vertex: LinkVertex,
        links: Dict[str, LinkVertex],
        chains: Dict[str, ChainLinkVertex],
        directories: Dict[str, WatchedDirectoryVertex],
        producers: Dict[str, List[LinkVertex]]
    ) -> None:
        link = vertex.link
        config = link.config

        # Fallback
        target = self._resolve(graph, links, vertex, link.fallback_link_id, "fallback")
        if target is not None:
            graph.connect(vertex, target, EdgeKind.FALLBACK, status=link.fallback_job_status)

        # Exit codes
        for code in sorted(link.exit_codes):
            exit_code = link.exit_codes[code]
            target = self._resolve(graph, links, vertex, exit_code.link_id, "exit_code")
            if target is None:
                continue
            has_fallback = graph.has_edge(vertex.id, target.id, EdgeKind.FALLBACK)
            graph.connect(
                vertex,
                target,
                EdgeKind.EXIT_CODE,
                code=code,
                status=exit_code.job_status,
                has_fallback=has_fallback,
            )

        if config.model == MODEL_CHAIN_CHOICE and config.chain_choices:
            for amid in config.chain_choices:
                target = self._resolve(graph, chains, vertex, amid, "chain_choice")
                if target is not None:
                    graph.connect(vertex, target, EdgeKind.CHAIN_CHOICE)

        elif config.manager == MANAGER_UNIT_VARIABLE_PULL:
            if config.variable and config.variable not in producers:
                self._record_unresolved(graph, vertex, config.variable, "variable_pull")
            for target in producers.get(config.variable, []):
                graph.connect(vertex, target, EdgeKind.VARIABLE_PULL)
            target = self._resolve(graph, links, vertex, config.chain_id, "variable_pull_default")
            if target is not None:
                graph.connect(vertex, target)

        elif config.manager == MANAGER_DIRECTORIES:
            amids = virtual_move_destinations(
                config.execute,
                config.arguments,
                link.get_description(self.language),
                directories,
            )
            for amid in amids:
                target = graph.vertex_by_amid(amid)
                if target is None:
                    self._record_unresolved(graph, vertex, amid, "virtual_move")
                    continue
                graph.connect(vertex, target, EdgeKind.VIRTUAL_MOVE_BRIDGE)

    def _insert_initiator(
        self,
        graph: WorkflowGraph,
        directories: Dict[str, WatchedDirectoryVertex]
    ) -> InitiatorVertex:
        initiator = graph.insert(InitiatorVertex())
        for vertex in directories.values():
            if vertex.is_initiator:
                graph.connect(initiator, vertex)
        return initiator

    def _resolve(
        self,
        graph: WorkflowGraph,
        index: Dict[str, Vertex],
        source: Vertex,
        amid: Optional[str],
        rule: str
    ) -> Optional[Vertex]:
        """Look ``amid`` up in ``index``; empty references are not recorded."""
        if not amid:
            return None
        target = index.get(amid)
        if target is None:
            self._record_unresolved(graph, source, amid, rule)
        return target

    @staticmethod
    def _record_unresolved(graph: WorkflowGraph, source: Vertex, amid: str, rule: str) -> None:
        graph.unresolved_references.append(
            UnresolvedReference(source=source.amid, target=amid, rule=rule)
        )


def build_workflow(data: WorkflowData, language: str = DEFAULT_LANGUAGE) -> WorkflowGraph:
    """Build the graph of a workflow document."""
    return WorkflowBuilder(data, language=language).build()
