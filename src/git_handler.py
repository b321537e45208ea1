# -
# #%L
# dotnet format Action
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security’s commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

from pathlib import Path
from typing import List, Optional
from src.utils import run_command, debug_log, log, CommandResult


def get_working_tree_status(repo_root: Optional[Path] = None) -> CommandResult:
    """Runs `git status -s` against the working tree. Never raises on a non-zero exit code."""
    return run_command(["git", "status", "-s"], cwd=str(repo_root) if repo_root else None)


def has_working_tree_changes(repo_root: Optional[Path] = None) -> bool:
    """
    Checks if the working tree has any modified, added, deleted or untracked files.

    Errors reported by git are logged but do not stop detection; the decision is
    made on whatever stdout was captured.

    Returns:
        bool: True if `git status -s` reported anything
    """
    status = get_working_tree_status(repo_root)

    if status.stderr:
        log(f"Errors while checking git status for changed files. Error: {status.stderr}", is_error=True)

    if not status.stdout:
        log("Did not find any changed files")
        return False

    debug_log(f"Changed files: {get_changed_files_from_status(status.stdout)}")
    log("Found changed files")
    return True


def get_changed_files_from_status(status_output: str) -> List[str]:
    """Extracts file paths from short-format `git status` output.

    Renames (``R  old -> new``) resolve to the new path.
    """
    changed_files = []
    for line in status_output.splitlines():
        # The status column may have lost its leading space when output was stripped
        parts = line.strip().split(None, 1)
        if len(parts) < 2:
            continue
        path = parts[1]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        changed_files.append(path)
    return changed_files
