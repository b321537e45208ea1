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

"""
Formatter Module

Runs dotnet format and decides whether the run produced changes.
"""

from pathlib import Path
from typing import Callable, List, Optional

from src import git_handler
from src import github_api
from src.config import get_config
from src.utils import debug_log, log, find_executable, run_command
from src.dotnet_format.command import build_format_command
from src.dotnet_format.options import FormatOptions
from src.dotnet_format.scope import resolve_scope


def format_code(options: FormatOptions, event_name: str,
                list_changed_files: Optional[Callable[[], List[str]]] = None,
                repo_root: Optional[Path] = None) -> bool:
    """
    Runs dotnet format for the given options.

    In check mode the formatter's exit code is the verdict. In apply mode the
    formatter may rewrite files and still exit 0, so the working tree is
    inspected with `git status` instead.

    Args:
        options: The run's options
        event_name: Name of the event that triggered the workflow
        list_changed_files: Lists the pull request's changed files; defaults to the GitHub API
        repo_root: Directory to run in; defaults to the configured workspace

    Returns:
        bool: True if formatting changes were found

    Raises:
        ToolNotFoundError: If the dotnet executable is not on PATH
    """
    config = get_config()
    list_changed_files = list_changed_files or github_api.get_pull_request_files
    repo_root = repo_root or config.REPO_ROOT

    scope = resolve_scope(options.only_changed_files, event_name, list_changed_files)
    if scope.is_empty:
        debug_log("No files found for formatting")
        return False

    format_args = build_format_command(options, scope)

    dotnet_path = find_executable(config.FORMATTER_EXECUTABLE)
    log(f"\n--- Running dotnet {' '.join(format_args)} ---")
    format_result = run_command([dotnet_path, *format_args], capture_output=False, cwd=str(repo_root))

    if not options.dry_run:
        log("Checking changed files")
        return git_handler.has_working_tree_changes(repo_root)

    log(f"dotnet format return code {format_result.return_code}")
    return bool(format_result.return_code)
