"""
Render Workflow Example

This example demonstrates:
1. Loading a workflow document (or using a small inline one)
2. Building the workflow graph
3. Serializing it to DOT and rendering an SVG with Graphviz

Usage:
    python 01_render_workflow.py [workflow.json] [output.svg]
"""

import sys
from pathlib import Path

from amflow import (
    ExportConfig,
    GraphVisualizer,
    RenderFailure,
    WorkflowData,
    build_workflow,
    load_workflow_data,
)
from amflow.core.logging import (
    configure_logging,
    LogLevel,
    LogComponent,
    Colors,
    get_logger
)

SAMPLE_DOCUMENT = {
    "links": {
        "scan": {
            "config": {
                "@manager": "linkTaskManagerFiles",
                "@model": "StandardTaskConfig",
                "execute": "archivematicaClamscan_v0.0",
            },
            "description": {"en": "Scan for viruses"},
            "group": {"en": "Scan for viruses"},
            "exit_codes": {"0": {"job_status": "Completed successfully", "link_id": "move"}},
            "fallback_job_status": "Failed",
            "fallback_link_id": "fail",
        },
        "move": {
            "config": {
                "@manager": "linkTaskManagerDirectories",
                "@model": "StandardTaskConfig",
                "execute": "moveTransfer_v0.0",
                "arguments": '"%SIPDirectory%" "%sharedPath%watchedDirectories/system/createSIP/"',
            },
            "description": {"en": "Move to SIP creation directory"},
            "group": {"en": "Create SIP from Transfer"},
        },
        "fail": {
            "config": {"@manager": "linkTaskManagerFiles", "@model": "StandardTaskConfig"},
            "description": {"en": "Move to the failed directory"},
            "group": {"en": "Failed transfer"},
        },
    },
    "chains": {
        "start": {"description": {"en": "Standard transfer"}, "link_id": "scan"},
        "sip": {"description": {"en": "Create SIP"}, "link_id": None},
    },
    "watched_directories": [
        {"path": "/activeTransfers/standardTransfer", "chain_id": "start", "initiator": True},
        {"path": "/system/createSIP/", "chain_id": "sip"},
    ],
}


def main():
    configure_logging(
        default_level=LogLevel.INFO,
        component_levels={LogComponent.GRAPH: LogLevel.WARNING}
    )
    logger = get_logger(LogComponent.EXPORT)

    if len(sys.argv) > 1:
        data = load_workflow_data(sys.argv[1])
    else:
        data = WorkflowData.model_validate(SAMPLE_DOCUMENT)
    output = Path(sys.argv[2] if len(sys.argv) > 2 else "workflow.svg")

    graph = build_workflow(data)
    for ref in graph.unresolved_references:
        print(f"{Colors.WARNING}Unresolved:{Colors.RESET} {ref}")

    config = ExportConfig.from_env(highlighted_amids={"scan"})
    visualizer = GraphVisualizer(config)
    source = visualizer.serialize(graph)

    try:
        output.write_bytes(visualizer.render(source))
    except RenderFailure as e:
        logger.error(f"Rendering failed: {e}")
        output.with_suffix(".dot").write_text(source, encoding="utf-8")
        print(f"DOT source written to {output.with_suffix('.dot')}")
        raise

    print(f"\n{Colors.INFO}Workflow written to{Colors.RESET} {output}")


if __name__ == "__main__":
    main()
