"""amflow - Archivematica workflow graphs."""

from amflow.core import (
    DuplicateAMIDError,
    ExportConfig,
    LogComponent,
    LogLevel,
    RenderFailure,
    SerializationFailure,
    WorkflowData,
    WorkflowGraphError,
    configure_logging,
    load_workflow_data,
)
from amflow.core.graph import GraphVisualizer, WorkflowGraph, build_workflow

__all__ = [
    'WorkflowData',
    'WorkflowGraph',
    'GraphVisualizer',
    'ExportConfig',
    'build_workflow',
    'load_workflow_data',
    'WorkflowGraphError',
    'DuplicateAMIDError',
    'RenderFailure',
    'SerializationFailure',
    'configure_logging',
    'LogLevel',
    'LogComponent'
]
