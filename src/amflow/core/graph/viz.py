"""Graph visualization tools.

Serializes a WorkflowGraph into a DOT document and pipes that document
through Graphviz to obtain an image. Every vertex kind gets its own styling:

- Links: boxes labelled with an HTML table (description, AMID, group,
  manager, model, command and a hint about how the command runs)
- Chains: boxes labelled with their description and AMID
- Watched directories: diamonds, green for initiators and yellow otherwise
- Initiator: a filled circle

Vertices whose AMID is excluded are dropped together with every edge that
touches them.
"""

import html
from typing import Dict, Iterable, Optional

import graphviz

from amflow.core.config import ExportConfig
from amflow.core.document import MANAGER_DIRECTORIES, MANAGER_FILES, MODEL_STANDARD_TASK
from amflow.core.errors import RenderFailure, SerializationFailure
from amflow.core.graph.base import WorkflowGraph
from amflow.core.graph.edges import Edge, EdgeKind
from amflow.core.graph.nodes import (
    ChainLinkVertex,
    LinkVertex,
    Vertex,
    VertexKind,
    WatchedDirectoryVertex,
)
from amflow.core.logging import LogComponent, get_logger

logger = get_logger(LogComponent.EXPORT)

NOT_AVAILABLE = "N/A"

MANAGER_HINTS = {
    MANAGER_DIRECTORIES: "Run the command once.",
    MANAGER_FILES: "Run the command once for each file.",
}

LINK_LABEL = """<
<table border="0" cellborder="1" cellspacing="0">
	<tr><td colspan="2" bgcolor="{caption_color}" width="500"><font color="black"><b>{description}</b></font></td></tr>
	<tr><td align="left">Type</td><td align="left">Link</td></tr>
	<tr><td align="left">ID</td><td align="left">{amid}</td></tr>
	<tr><td align="left">Group</td><td align="left">{group}</td></tr>
	<tr><td align="left">Manager</td><td align="left">{manager}</td></tr>
	<tr><td align="left">Model</td><td align="left">{model}</td></tr>
	<tr><td align="left">Execute</td><td align="left">{execute}</td></tr>
	<tr><td align="left">Information</td><td align="left">{info}</td></tr>
</table>>"""

CHAIN_LABEL = """<
<table border="0" cellborder="1" cellspacing="0">
	<tr><td colspan="2" bgcolor="orange" width="500"><font color="black"><b>{description}</b></font></td></tr>
	<tr><td align="left">Type</td><td align="left">Chain</td></tr>
	<tr><td align="left">ID</td><td align="left">{amid}</td></tr>
</table>>"""


def escape_html(value: Optional[str]) -> str:
    """Escape text for an HTML-like label cell; empty cells get a space."""
    if not value:
        return "&nbsp;"
    return html.escape(value)


class GraphVisualizer:
    """Serialize and render workflow graphs.

    Attributes:
        config: Export configuration (naming, exclusions, rendering engine)
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def serialize(self, graph: WorkflowGraph, excluded_amids: Optional[Iterable[str]] = None) -> str:
        """Render the graph as a DOT document.

        Args:
            graph: The workflow graph; it is not modified
            excluded_amids: AMIDs to leave out, defaults to the configured set

        Returns:
            DOT source text

        Raises:
            SerializationFailure: If the DOT encoder rejects a value
        """
        excluded = self.config.excluded_amids if excluded_amids is None else set(excluded_amids)
        # Exclusions name document records; the initiator is governed by drop_unused_initiator
        vertices = [
            v for v in graph.vertices()
            if v.kind == VertexKind.INITIATOR or v.amid not in excluded
        ]
        kept = {v.id for v in vertices}
        edges = [
            e for e in graph.edges()
            if e.source in kept and e.destination in kept
        ]

        initiator = graph.initiator
        if (
            self.config.drop_unused_initiator
            and initiator is not None
            and initiator.id in kept
            and not any(e.source == initiator.id for e in edges)
        ):
            vertices = [v for v in vertices if v.id != initiator.id]
            edges = [e for e in edges if initiator.id not in (e.source, e.destination)]

        dot = graphviz.Digraph(
            name=self.config.graph_name,
            strict=False,
            graph_attr={
                "rankdir": self.config.rankdir,
                "labelloc": self.config.labelloc,
            },
        )
        try:
            for vertex in vertices:
                dot.node(str(vertex.id), **self.vertex_attributes(vertex))
            for edge in edges:
                dot.edge(str(edge.source), str(edge.destination), **self.edge_attributes(edge))
            source = dot.source
        except (TypeError, ValueError) as e:
            raise SerializationFailure(str(e)) from e

        logger.info(
            f"Serialized {len(vertices)} vertices and {len(edges)} edges "
            f"({graph.number_of_vertices - len(vertices)} vertices left out)"
        )
        return source

    def render(self, source: str) -> bytes:
        """Pipe DOT source through the configured Graphviz engine.

        Args:
            source: DOT document, usually from serialize()

        Returns:
            The rendered image bytes (SVG by default)

        Raises:
            RenderFailure: If the engine is missing or exits non-zero
        """
        try:
            return graphviz.Source(source, engine=self.config.engine).pipe(
                format=self.config.format,
                quiet=True,
            )
        except graphviz.ExecutableNotFound as e:
            logger.error(f"Graphviz executable not found: {e}")
            raise RenderFailure(None, str(e).encode("utf-8")) from e
        except OSError as e:
            logger.error(f"Graphviz could not be started: {e}")
            raise RenderFailure(None, str(e).encode("utf-8")) from e
        except graphviz.CalledProcessError as e:
            output = (e.stdout or b"") + (e.stderr or b"")
            logger.error(f"Graphviz exited with status {e.returncode}")
            raise RenderFailure(e.returncode, output) from e

    def render_graph(self, graph: WorkflowGraph, excluded_amids: Optional[Iterable[str]] = None) -> bytes:
        """Serialize and render a graph in one step."""
        return self.render(self.serialize(graph, excluded_amids))

    def vertex_attributes(self, vertex: Vertex) -> Dict[str, str]:
        """DOT attributes for a vertex, chosen by its kind."""
        if vertex.kind == VertexKind.LINK:
            return self._link_attributes(vertex)
        if vertex.kind == VertexKind.CHAIN_LINK:
            return self._chain_attributes(vertex)
        if vertex.kind == VertexKind.WATCHED_DIRECTORY:
            return self._watched_directory_attributes(vertex)
        if vertex.kind == VertexKind.INITIATOR:
            return {
                "label": "Start",
                "shape": "circle",
                "style": "filled",
                "color": "black",
                "fillcolor": "black",
                "fontcolor": "white",
            }
        raise SerializationFailure(f"Unsupported vertex kind: {vertex.kind}")

    def edge_attributes(self, edge: Edge) -> Dict[str, str]:
        """DOT attributes for an edge, chosen by its kind."""
        if edge.kind == EdgeKind.PLAIN:
            return {}
        if edge.kind == EdgeKind.FALLBACK:
            label = f"fallback: {edge.status}" if edge.status else "fallback"
            return {"label": graphviz.nohtml(label), "color": "red", "fontcolor": "red"}
        if edge.kind == EdgeKind.EXIT_CODE:
            attrs = {"label": str(edge.code)}
            # The fallback edge between the same pair already ranks the target
            if edge.has_fallback:
                attrs["constraint"] = "false"
            return attrs
        if edge.kind == EdgeKind.CHAIN_CHOICE:
            return {"style": "dashed", "color": "orange"}
        if edge.kind == EdgeKind.VARIABLE_PULL:
            return {"style": "dotted", "color": "blue"}
        if edge.kind == EdgeKind.VIRTUAL_MOVE_BRIDGE:
            return {"label": "move", "style": "dashed", "color": "darkgreen", "fontcolor": "darkgreen"}
        raise SerializationFailure(f"Unsupported edge kind: {edge.kind}")

    def _link_attributes(self, vertex: LinkVertex) -> Dict[str, str]:
        config = vertex.config
        language = self.config.language

        caption_color = "gray"
        execute = config.execute
        if config.model != MODEL_STANDARD_TASK:
            caption_color = "aliceblue"
            execute = NOT_AVAILABLE

        color = "pink" if vertex.amid in self.config.highlighted_amids else "gray"

        label = LINK_LABEL.format(
            caption_color=caption_color,
            description=escape_html(vertex.description(language)),
            amid=escape_html(vertex.amid),
            group=escape_html(vertex.group(language)),
            manager=escape_html(config.manager),
            model=escape_html(config.model),
            execute=escape_html(execute),
            info=escape_html(MANAGER_HINTS.get(config.manager, NOT_AVAILABLE)),
        )
        return {"shape": "box", "color": color, "margin": "0", "label": label}

    def _chain_attributes(self, vertex: ChainLinkVertex) -> Dict[str, str]:
        label = CHAIN_LABEL.format(
            description=escape_html(vertex.description(self.config.language)),
            amid=escape_html(vertex.amid),
        )
        return {"shape": "box", "color": "black", "margin": "0", "label": label}

    def _watched_directory_attributes(self, vertex: WatchedDirectoryVertex) -> Dict[str, str]:
        return {
            "label": graphviz.nohtml(vertex.amid),
            "shape": "diamond",
            "style": "filled",
            "color": "black",
            "margin": "0.2",
            "fillcolor": "green" if vertex.is_initiator else "yellow",
        }


def serialize(
    graph: WorkflowGraph,
    excluded_amids: Optional[Iterable[str]] = None,
    config: Optional[ExportConfig] = None
) -> str:
    """Render ``graph`` as DOT text."""
    return GraphVisualizer(config).serialize(graph, excluded_amids)


def render(source: str, config: Optional[ExportConfig] = None) -> bytes:
    """Pipe DOT text through Graphviz."""
    return GraphVisualizer(config).render(source)
