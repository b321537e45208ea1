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

from typing import Iterable, List, Tuple

from src.dotnet_format.options import FormatOptions
from src.dotnet_format.scope import ResolvedScope, ScopeKind


def join_include_files(files: Iterable[str]) -> str:
    """Joins the include list into the single space-separated argument dotnet format receives.

    Paths containing spaces are not quoted.
    """
    return " ".join(files)


def build_format_command(options: FormatOptions, scope: ResolvedScope) -> Tuple[str, ...]:
    """
    Builds the dotnet format arguments for a run.

    The order is fixed; a field being unset is the only thing that drops its flag.

    Args:
        options: The run's options
        scope: Resolved changed-file scope

    Returns:
        Tuple[str, ...]: Arguments following the `dotnet` executable
    """
    args: List[str] = ["format"]

    if options.workspace:
        if options.workspace_is_folder:
            args.append("-f")
        args.append(options.workspace)

    if options.dry_run:
        args.append("--check")

    if scope.kind is ScopeKind.SCOPED and scope.files:
        args.extend(["--include", join_include_files(scope.files)])

    if options.exclude:
        args.extend(["--exclude", options.exclude])

    if options.fix_whitespace:
        args.append("--fix-whitespace")

    if options.fix_analyzers_level:
        args.extend(["--fix-analyzers", options.fix_analyzers_level])

    if options.fix_style_level:
        args.extend(["--fix-style", options.fix_style_level])

    if options.log_level:
        args.extend(["--verbosity", options.log_level])

    if options.verify_no_changes:
        args.append("--verify-no-changes")

    return tuple(args)
