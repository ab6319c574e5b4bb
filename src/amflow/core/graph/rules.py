"""Virtual move bridge heuristics.

Links run by the directory task manager hand packages over to other parts of
the workflow by moving them into watched directories. The document never
names the destination explicitly, so it is inferred from the command text:

1. ``move`` commands whose arguments embed a watched directory path through
   one of the two placeholder conventions
2. SIP creation steps, which always feed the auto-processing SIP directory
"""

from typing import Iterable, List, Optional, Tuple

MOVE_COMMAND_PREFIX = "move"

WATCHED_DIRECTORIES_PLACEHOLDER = "%watchedDirectories"
WATCH_DIRECTORY_PATH_PLACEHOLDER = "%watchDirectoryPath%"

AUTO_PROCESS_SIP_AMID = "/system/autoProcessSIP"

SIP_CREATION_DESCRIPTIONS = frozenset({
    "Create SIP from transfer objects",
    "Create SIPs from TRIM transfer containers",
})


def move_placeholders(path: str) -> Tuple[str, str]:
    """Both spellings a watched directory path can take in argument text.

    ``/system/autoProcessSIP`` appears either as
    ``%watchedDirectories/system/autoProcessSIP`` (the tail of
    ``%sharedPath%watchedDirectories/...``) or as
    ``%watchDirectoryPath%system/autoProcessSIP``.
    """
    return (
        f"{WATCHED_DIRECTORIES_PLACEHOLDER}{path}",
        f"{WATCH_DIRECTORY_PATH_PLACEHOLDER}{path[1:]}",
    )


def match_move_destinations(execute: str, arguments: str, paths: Iterable[str]) -> List[str]:
    """Watched directory paths referenced by a ``move`` command.

    Args:
        execute: Command text of the link
        arguments: Argument text of the link
        paths: Known watched directory paths, in the order to report them

    Returns:
        Every matching path; empty when the command is not a move
    """
    if not execute.startswith(MOVE_COMMAND_PREFIX):
        return []
    matches = []
    for path in paths:
        if any(placeholder in arguments for placeholder in move_placeholders(path)):
            matches.append(path)
    return matches


def sip_creation_destination(description: str) -> Optional[str]:
    """AMID fed by a SIP creation step, or None for any other description."""
    if description in SIP_CREATION_DESCRIPTIONS:
        return AUTO_PROCESS_SIP_AMID
    return None


def virtual_move_destinations(
    execute: str,
    arguments: str,
    description: str,
    paths: Iterable[str]
) -> List[str]:
    """AMIDs a directory task manager link implicitly moves packages into.

    Move commands are matched against ``paths``; other commands only bridge
    when the link is a known SIP creation step.
    """
    if execute.startswith(MOVE_COMMAND_PREFIX):
        return match_move_destinations(execute, arguments, paths)
    destination = sip_creation_destination(description)
    return [destination] if destination else []
