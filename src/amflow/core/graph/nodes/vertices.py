"""
Workflow vertex variants.

Each variant wraps the document record it was created from:
- LinkVertex: a processing step (Link record)
- ChainLinkVertex: a chain entry point (Chain record)
- WatchedDirectoryVertex: a watched location (WatchedDirectory record)
- InitiatorVertex: the synthetic start of the workflow
"""

from typing import Literal

from amflow.core.document import Chain, Link, WatchedDirectory
from amflow.core.graph.nodes.base.node import Vertex, VertexKind

# Reserved AMID of the synthetic start vertex
INITIATOR_AMID = "__initiator__"


class LinkVertex(Vertex):
    """A single executable workflow step."""
    kind: Literal[VertexKind.LINK] = VertexKind.LINK
    link: Link

    @property
    def config(self):
        return self.link.config

    def description(self, language: str = "en") -> str:
        return self.link.get_description(language)

    def group(self, language: str = "en") -> str:
        return self.link.get_group(language)


class ChainLinkVertex(Vertex):
    """A named entry point into a sequence of links."""
    kind: Literal[VertexKind.CHAIN_LINK] = VertexKind.CHAIN_LINK
    chain: Chain

    def description(self, language: str = "en") -> str:
        return self.chain.get_description(language)


class WatchedDirectoryVertex(Vertex):
    """A watched directory; its AMID is the directory path."""
    kind: Literal[VertexKind.WATCHED_DIRECTORY] = VertexKind.WATCHED_DIRECTORY
    directory: WatchedDirectory

    @property
    def path(self) -> str:
        return self.directory.path

    @property
    def is_initiator(self) -> bool:
        return self.directory.initiator


class InitiatorVertex(Vertex):
    """The logical start of every workflow run."""
    amid: str = INITIATOR_AMID
    kind: Literal[VertexKind.INITIATOR] = VertexKind.INITIATOR
