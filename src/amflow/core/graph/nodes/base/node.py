"""Base vertex class for the workflow graph.

This module defines the Vertex abstraction. A Vertex represents one record of
the workflow document (a link, a chain or a watched directory) or the
synthetic initiator. Every vertex carries:

    - id: process-local integer identity, assigned by the graph on insertion
    - amid: stable external identifier used for cross-referencing
    - kind: the variant tag, used for dispatch instead of type inspection
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class VertexKind(str, Enum):
    """Vertex variants."""
    LINK = "link"
    CHAIN_LINK = "chain_link"
    WATCHED_DIRECTORY = "watched_directory"
    INITIATOR = "initiator"


class Vertex(BaseModel):
    """
    Base vertex for the workflow graph.

    Attributes:
        id: Identity within the owning graph, None until inserted
        amid: External identifier, unique within the graph
        kind: Variant tag
    """
    id: Optional[int] = Field(default=None, description="Identity assigned on insertion")
    amid: str = Field(..., description="Stable external identifier")
    kind: VertexKind

    @model_validator(mode='after')
    def validate_vertex(self) -> 'Vertex':
        """Validate vertex configuration."""
        if not self.amid:
            raise ValueError("Vertex must have an AMID")
        return self

    @property
    def is_inserted(self) -> bool:
        return self.id is not None

    def __str__(self) -> str:
        return f"{self.kind.value}[{self.id}] {self.amid}"
