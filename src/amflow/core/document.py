"""Workflow document models.

This module describes the input consumed by the workflow builder, using the
field names of Archivematica's ``workflow.json``:

1. WorkflowData: top-level container of links, chains and watched directories
2. Link / LinkConfig / ExitCode: a single processing step and its successors
3. Chain: a named entry point into a sequence of links
4. WatchedDirectory: a filesystem location that triggers a chain

Example:
    ```python
    data = load_workflow_data("workflow.json")
    graph = build_workflow(data)
    ```
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from amflow.core.logging import LogComponent, get_logger

logger = get_logger(LogComponent.DOCUMENT)

# Task models and managers the builder gives special meaning to
MODEL_STANDARD_TASK = "StandardTaskConfig"
MODEL_SET_UNIT_VARIABLE = "TaskConfigSetUnitVariable"
MODEL_CHAIN_CHOICE = "MicroServiceChainChoice"
MANAGER_UNIT_VARIABLE_PULL = "linkTaskManagerUnitVariableLinkPull"
MANAGER_DIRECTORIES = "linkTaskManagerDirectories"
MANAGER_FILES = "linkTaskManagerFiles"

DEFAULT_LANGUAGE = "en"


def _translate(texts: Dict[str, str], language: str = DEFAULT_LANGUAGE) -> str:
    return texts.get(language) or ""


class ExitCode(BaseModel):
    """Successor taken when a link's command exits with a given code."""
    job_status: Optional[str] = None
    link_id: Optional[str] = None


class LinkConfig(BaseModel):
    """Operation configuration of a link.

    Attributes:
        manager: Task manager name (``@manager``)
        model: Task configuration model name (``@model``)
        execute: Command text
        arguments: Argument text, may contain placeholders
        chain_choices: Chain AMIDs offered by a chain choice link
        variable: Unit variable name set or pulled by the link
        chain_id: Link AMID associated with the variable
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    manager: str = Field(default="", alias="@manager")
    model: str = Field(default="", alias="@model")
    execute: str = ""
    arguments: str = ""
    chain_choices: List[str] = Field(default_factory=list)
    variable: str = ""
    chain_id: str = ""

    @field_validator("manager", "model", "execute", "arguments", "variable", "chain_id", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("chain_choices", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


class Link(BaseModel):
    """A single executable workflow step."""
    config: LinkConfig = Field(default_factory=LinkConfig)
    description: Dict[str, str] = Field(default_factory=dict)
    group: Dict[str, str] = Field(default_factory=dict)
    exit_codes: Dict[int, ExitCode] = Field(default_factory=dict)
    fallback_job_status: Optional[str] = None
    fallback_link_id: Optional[str] = None

    def get_description(self, language: str = DEFAULT_LANGUAGE) -> str:
        return _translate(self.description, language)

    def get_group(self, language: str = DEFAULT_LANGUAGE) -> str:
        return _translate(self.group, language)


class Chain(BaseModel):
    """A named entry point into a sequence of links."""
    description: Dict[str, str] = Field(default_factory=dict)
    link_id: Optional[str] = None

    def get_description(self, language: str = DEFAULT_LANGUAGE) -> str:
        return _translate(self.description, language)


class WatchedDirectory(BaseModel):
    """A watched location whose activity triggers a chain.

    Initiators are directories where a workflow run can start without an
    earlier link moving a package into them.
    """
    path: str = Field(..., min_length=1)
    chain_id: Optional[str] = None
    only_dirs: bool = False
    unit_type: Optional[str] = None
    initiator: bool = False


class WorkflowData(BaseModel):
    """The complete workflow document."""
    links: Dict[str, Link] = Field(default_factory=dict)
    chains: Dict[str, Chain] = Field(default_factory=dict)
    watched_directories: List[WatchedDirectory] = Field(default_factory=list)

    @field_validator("links", "chains")
    @classmethod
    def _check_amids(cls, value: Dict[str, BaseModel]) -> Dict[str, BaseModel]:
        if "" in value:
            raise ValueError("AMIDs must not be empty")
        return value


def load_workflow_data(path: Union[str, Path]) -> WorkflowData:
    """Read a ``workflow.json`` document from disk.

    Args:
        path: Location of the JSON document

    Returns:
        The validated WorkflowData

    Raises:
        pydantic.ValidationError: If the document does not match the models
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    data = WorkflowData.model_validate(raw)
    logger.info(
        f"Loaded {path.name}: {len(data.links)} links, {len(data.chains)} chains, "
        f"{len(data.watched_directories)} watched directories"
    )
    return data
