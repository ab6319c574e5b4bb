"""Core modules for amflow."""

from amflow.core.config import ExportConfig
from amflow.core.document import WorkflowData, load_workflow_data
from amflow.core.errors import (
    DuplicateAMIDError,
    RenderFailure,
    SerializationFailure,
    WorkflowGraphError,
)
from amflow.core.logging import configure_logging, LogLevel, LogComponent

__all__ = [
    'ExportConfig',
    'WorkflowData',
    'load_workflow_data',
    'WorkflowGraphError',
    'DuplicateAMIDError',
    'RenderFailure',
    'SerializationFailure',
    'configure_logging',
    'LogLevel',
    'LogComponent'
]
