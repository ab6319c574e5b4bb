"""Export configuration.

Holds the knobs of the DOT exporter: graph naming and layout, which vertices
are left out of the drawing, and how the rendering engine is invoked.
"""

import os
from typing import Dict, Set

import graphviz
from pydantic import BaseModel, Field, ValidationError, field_validator

from amflow.core.logging import LogComponent, get_logger

logger = get_logger(LogComponent.CONFIG)

# Vertices that slow rendering down significantly without adding information.
DEFAULT_EXCLUDED_AMIDS: Dict[str, str] = {
    "61c316a6-0a50-4f65-8767-1f44b1eeb6dd": "Link - Email fail report",
    "7d728c39-395f-4892-8193-92f086c0546f": "Link - Email fail report",
    "333532b9-b7c2-4478-9415-28a3056d58df": "Link - Move to the rejected directory",
    "19c94543-14cb-4158-986b-1d2b55723cd8": "Link - Cleanup rejected SIP",
    "1b04ec43-055c-43b7-9543-bd03c6a778ba": "Chain - Reject transfer",
    "e780473a-0c10-431f-bab6-5d7238b2b70b": "(descendant)",
    "377f8ebb-7989-4a68-9361-658079ff8138": "(descendant)",
    "b2ef06b9-bca4-49da-bc5c-866d7b3c4bb1": "(descendant)",
    "828528c2-2eb9-4514-b5ca-dfd1f7cb5b8c": "(descendant)",
    "3467d003-1603-49e3-b085-e58aa693afed": "(descendant)",
    "ae5cdd0d-2f81-4935-a380-d5c6f1337d93": "(descendant)",
}

RANK_DIRECTIONS = ("TB", "LR", "BT", "RL")

ENV_PREFIX = "AMFLOW_"


class ExportConfig(BaseModel):
    """Configuration for the graph exporter.

    Attributes:
        graph_name: Name given to the DOT digraph
        rankdir: Layout direction
        labelloc: Graph label location attribute
        excluded_amids: AMIDs left out of the output, with their touching edges
        highlighted_amids: Link AMIDs drawn with a highlight border
        drop_unused_initiator: Omit the initiator when it has no edge left
        language: Locale used for descriptions and groups
        engine: Graphviz layout engine used by render()
        format: Output format used by render()
    """
    graph_name: str = Field(default="Archivematica workflow")
    rankdir: str = Field(default="TB")
    labelloc: str = Field(default="Workflow")
    excluded_amids: Set[str] = Field(
        default_factory=lambda: set(DEFAULT_EXCLUDED_AMIDS)
    )
    highlighted_amids: Set[str] = Field(default_factory=set)
    drop_unused_initiator: bool = Field(default=True)
    language: str = Field(default="en")
    engine: str = Field(default="dot")
    format: str = Field(default="svg")

    model_config = {"validate_assignment": True}

    @field_validator("rankdir")
    @classmethod
    def _check_rankdir(cls, value: str) -> str:
        value = value.upper()
        if value not in RANK_DIRECTIONS:
            raise ValueError(f"rankdir must be one of {', '.join(RANK_DIRECTIONS)}")
        return value

    @field_validator("graph_name")
    @classmethod
    def _check_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("graph_name must not be empty")
        return value

    @field_validator("engine")
    @classmethod
    def _check_engine(cls, value: str) -> str:
        if value not in graphviz.ENGINES:
            raise ValueError(f"Unknown layout engine: {value}")
        return value

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in graphviz.FORMATS:
            raise ValueError(f"Unknown output format: {value}")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "ExportConfig":
        """Build a config from ``AMFLOW_*`` environment variables.

        Recognised variables are ``AMFLOW_GRAPH_NAME``, ``AMFLOW_RANKDIR``,
        ``AMFLOW_ENGINE`` and ``AMFLOW_FORMAT``. Invalid values are logged as
        warnings and the default is kept. Keyword overrides take precedence.
        """
        config = cls(**overrides)
        for field in ("graph_name", "rankdir", "engine", "format"):
            if field in overrides:
                continue
            value = os.environ.get(f"{ENV_PREFIX}{field.upper()}")
            if value is None:
                continue
            try:
                setattr(config, field, value)
            except ValidationError as e:
                logger.warning(
                    f"Ignoring {ENV_PREFIX}{field.upper()}={value!r}, keeping "
                    f"{getattr(config, field)!r}: {e.errors()[0]['msg']}"
                )
        return config
