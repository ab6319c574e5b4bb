"""Tests for workflow vertex variants."""

import pytest
from pydantic import ValidationError

from amflow.core.document import Chain, Link, LinkConfig, WatchedDirectory
from amflow.core.graph.nodes import (
    INITIATOR_AMID,
    ChainLinkVertex,
    InitiatorVertex,
    LinkVertex,
    VertexKind,
    WatchedDirectoryVertex,
)


@pytest.fixture
def link_vertex() -> LinkVertex:
    """Fixture providing a link vertex with localized texts."""
    return LinkVertex(
        amid="l1",
        link=Link(
            config=LinkConfig(manager="linkTaskManagerFiles", model="StandardTaskConfig"),
            description={"en": "Scan for viruses", "es": "Buscar virus"},
            group={"en": "Scan"},
        ),
    )


class TestVertexBase:
    """Test behaviour shared by every vertex."""

    def test_not_inserted(self, link_vertex: LinkVertex):
        """Test vertices start without an identity."""
        assert link_vertex.id is None
        assert not link_vertex.is_inserted

    def test_amid_required(self):
        """Test an empty AMID is rejected."""
        with pytest.raises(ValidationError):
            ChainLinkVertex(amid="", chain=Chain())

    def test_kind_fixed(self):
        """Test a variant cannot carry another variant's kind."""
        with pytest.raises(ValidationError):
            LinkVertex(amid="l1", link=Link(), kind=VertexKind.CHAIN_LINK)

    def test_str(self, link_vertex: LinkVertex):
        """Test the readable form."""
        link_vertex.id = 3
        assert str(link_vertex) == "link[3] l1"


class TestLinkVertex:
    """Test link vertex accessors."""

    def test_kind(self, link_vertex: LinkVertex):
        assert link_vertex.kind == VertexKind.LINK

    def test_config(self, link_vertex: LinkVertex):
        """Test the operation configuration is exposed."""
        assert link_vertex.config.manager == "linkTaskManagerFiles"

    def test_localized_texts(self, link_vertex: LinkVertex):
        """Test descriptions and groups by language."""
        assert link_vertex.description() == "Scan for viruses"
        assert link_vertex.description("es") == "Buscar virus"
        assert link_vertex.group() == "Scan"

    def test_missing_language(self, link_vertex: LinkVertex):
        """Test an absent translation reads as empty text."""
        assert link_vertex.description("fr") == ""
        assert link_vertex.group("es") == ""


class TestOtherVertices:
    """Test chain, directory and initiator vertices."""

    def test_chain(self):
        """Test chain vertices read their description."""
        vertex = ChainLinkVertex(amid="c1", chain=Chain(description={"en": "Approve"}))
        assert vertex.kind == VertexKind.CHAIN_LINK
        assert vertex.description() == "Approve"

    def test_watched_directory(self):
        """Test directory vertices expose path and initiator flag."""
        vertex = WatchedDirectoryVertex(
            amid="/a",
            directory=WatchedDirectory(path="/a", initiator=True),
        )
        assert vertex.kind == VertexKind.WATCHED_DIRECTORY
        assert vertex.path == "/a"
        assert vertex.is_initiator

    def test_initiator(self):
        """Test the initiator uses the reserved AMID."""
        vertex = InitiatorVertex()
        assert vertex.amid == INITIATOR_AMID
        assert vertex.kind == VertexKind.INITIATOR
