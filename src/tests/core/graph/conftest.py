"""Shared workflow document fixtures for graph tests.

Documents are written as raw ``workflow.json``-shaped dictionaries and
validated through WorkflowData, the same way a loaded file would be.
"""

import pytest
from typing import Any, Dict

from amflow.core.document import WorkflowData


def link(
    description: str = "",
    manager: str = "linkTaskManagerFiles",
    model: str = "StandardTaskConfig",
    exit_codes: Dict[int, Any] = None,
    fallback_link_id: str = None,
    fallback_job_status: str = "Failed",
    group: str = "Test",
    **config
) -> Dict[str, Any]:
    """Raw link record with sensible defaults."""
    return {
        "config": {"@manager": manager, "@model": model, **config},
        "description": {"en": description},
        "group": {"en": group},
        "exit_codes": {
            str(code): {"job_status": "Completed successfully", "link_id": target}
            for code, target in (exit_codes or {}).items()
        },
        "fallback_link_id": fallback_link_id,
        "fallback_job_status": fallback_job_status,
    }


@pytest.fixture
def scenario_document() -> WorkflowData:
    """One initiator directory feeding one chain feeding one link."""
    return WorkflowData.model_validate({
        "links": {
            "L1": link("Only step", exit_codes={0: None}),
        },
        "chains": {
            "C1": {"description": {"en": "Start"}, "link_id": "L1"},
        },
        "watched_directories": [
            {"path": "/watched/A", "chain_id": "C1", "initiator": True},
        ],
    })


@pytest.fixture
def variable_document() -> WorkflowData:
    """Two producers of variable X and one link pulling it."""
    return WorkflowData.model_validate({
        "links": {
            "A": link("Chain A start"),
            "B": link("Chain B start"),
            "set-a": link(
                "Set X for A",
                manager="linkTaskManagerSetUnitVariable",
                model="TaskConfigSetUnitVariable",
                variable="X",
                chain_id="A",
            ),
            "set-b": link(
                "Set X for B",
                manager="linkTaskManagerSetUnitVariable",
                model="TaskConfigSetUnitVariable",
                variable="X",
                chain_id="B",
            ),
            "pull": link(
                "Pull X",
                manager="linkTaskManagerUnitVariableLinkPull",
                model="TaskConfigUnitVariableLinkPull",
                variable="X",
            ),
        },
    })


@pytest.fixture
def full_document() -> WorkflowData:
    """A small document exercising every connection rule."""
    return WorkflowData.model_validate({
        "links": {
            "approve": link(
                "Approve transfer",
                manager="linkTaskManagerChoice",
                model="MicroServiceChainChoice",
                chain_choices=["chain-sip", "chain-reject", "chain-missing"],
            ),
            "check": link(
                "Check for viruses",
                exit_codes={0: "move-sip", 1: "failure"},
                fallback_link_id="failure",
            ),
            "create-sip": link(
                "Create SIP from transfer objects",
                manager="linkTaskManagerDirectories",
                execute="createSIPfromTransferObjects_v0.0",
            ),
            "failure": link("Email fail report", exit_codes={0: None}),
            "move-sip": link(
                "Move to SIP creation",
                manager="linkTaskManagerDirectories",
                execute="moveTransfer_v0.0",
                arguments='"%SIPDirectory%" "%sharedPath%watchedDirectories/system/createSIP/" ',
                exit_codes={0: "create-sip"},
            ),
            "pull": link(
                "Determine processing path",
                manager="linkTaskManagerUnitVariableLinkPull",
                model="TaskConfigUnitVariableLinkPull",
                variable="process",
                chain_id="failure",
            ),
            "set": link(
                "Set processing path",
                manager="linkTaskManagerSetUnitVariable",
                model="TaskConfigSetUnitVariable",
                variable="process",
                chain_id="check",
            ),
        },
        "chains": {
            "chain-reject": {"description": {"en": "Reject transfer"}, "link_id": "failure"},
            "chain-sip": {"description": {"en": "Create SIP"}, "link_id": "set"},
            "chain-standard": {"description": {"en": "Standard transfer"}, "link_id": "approve"},
            "chain-auto": {"description": {"en": "Auto process"}, "link_id": "pull"},
        },
        "watched_directories": [
            {"path": "/activeTransfers/standardTransfer", "chain_id": "chain-standard", "initiator": True},
            {"path": "/system/createSIP/", "chain_id": "chain-sip"},
            {"path": "/system/autoProcessSIP", "chain_id": "chain-auto"},
        ],
    })
