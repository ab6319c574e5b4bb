"""
Error types raised while building and exporting workflow graphs.
"""
from typing import Optional


class WorkflowGraphError(Exception):
    """Base error for workflow graph operations."""
    pass


class DuplicateAMIDError(WorkflowGraphError, ValueError):
    """Two vertices share one external identifier."""

    def __init__(self, amid: str):
        self.amid = amid
        super().__init__(f"Duplicate AMID: {amid}")


class SerializationFailure(WorkflowGraphError):
    """The graph could not be encoded as a DOT document."""
    pass


class RenderFailure(WorkflowGraphError):
    """The rendering engine failed or could not be started.

    Attributes:
        exit_status: Process exit status, or None when it never started
        output: Combined stdout/stderr captured from the process
    """

    def __init__(self, exit_status: Optional[int], output: bytes = b""):
        self.exit_status = exit_status
        self.output = output
        detail = output.decode("utf-8", errors="replace").strip()
        super().__init__(f"Rendering failed (exit status {exit_status}): {detail}")
