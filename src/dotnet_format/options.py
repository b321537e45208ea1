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
Format Options

Typed configuration for a single dotnet format invocation, built once from the
raw action inputs.
"""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class FormatOptions:
    """
    Options for one dotnet format run.

    Optional string fields are None when the input was absent or empty; they are
    never an empty string. `dry_run` is set by the entry point, None means apply.
    """
    only_changed_files: bool
    fix_whitespace: bool
    workspace_is_folder: bool = False
    verify_no_changes: bool = False
    dry_run: Optional[bool] = None
    workspace: Optional[str] = None
    include: Optional[str] = None
    exclude: Optional[str] = None
    log_level: Optional[str] = None
    fix_analyzers_level: Optional[str] = None
    fix_style_level: Optional[str] = None


def _optional_input(get_input: Callable[[str], Optional[str]], name: str) -> Optional[str]:
    value = get_input(name)
    if value is None or value == "":
        return None
    return value


def build_options(get_input: Callable[[str], Optional[str]]) -> FormatOptions:
    """
    Builds FormatOptions from raw action inputs.

    Args:
        get_input: Returns the raw string for an input name, or None/"" when unset

    Returns:
        FormatOptions: Never raises; anything missing or malformed disables the feature
    """
    return FormatOptions(
        only_changed_files=get_input("only-changed-files") == "true",
        # workspaceIsFolder and fix-whitespace are enabled by the literal "false"
        workspace_is_folder=get_input("workspaceIsFolder") == "false",
        fix_whitespace=get_input("fix-whitespace") == "false",
        verify_no_changes=get_input("verify-no-changes") == "true",
        workspace=_optional_input(get_input, "workspace"),
        include=_optional_input(get_input, "include"),
        exclude=_optional_input(get_input, "exclude"),
        log_level=_optional_input(get_input, "log-level"),
        fix_analyzers_level=_optional_input(get_input, "fix-analyzers-level"),
        fix_style_level=_optional_input(get_input, "fix-style-level"),
    )
