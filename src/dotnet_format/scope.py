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

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

from src.utils import log

# Events that carry a pull request to list changed files from
SCOPED_EVENTS = ("issue_comment", "pull_request")


class ScopeKind(Enum):
    NOT_SCOPED = "not_scoped"
    SCOPED = "scoped"
    SCOPED_EMPTY = "scoped_empty"


@dataclass(frozen=True)
class ResolvedScope:
    """Which files a run is restricted to."""
    kind: ScopeKind
    files: Tuple[str, ...] = ()

    @classmethod
    def not_scoped(cls) -> "ResolvedScope":
        return cls(ScopeKind.NOT_SCOPED)

    @classmethod
    def from_files(cls, files: List[str]) -> "ResolvedScope":
        if not files:
            return cls(ScopeKind.SCOPED_EMPTY)
        return cls(ScopeKind.SCOPED, tuple(files))

    @property
    def is_empty(self) -> bool:
        return self.kind is ScopeKind.SCOPED_EMPTY


def can_scope_to_changed_files(only_changed_files: bool, event_name: str) -> bool:
    """Checks whether changed-file scoping is requested and possible for the triggering event."""
    if not only_changed_files:
        return False

    if event_name in SCOPED_EVENTS:
        return True

    log("Formatting only changed files is available on the issue_comment and pull_request events only", is_warning=True)
    return False


def resolve_scope(only_changed_files: bool, event_name: str,
                  list_changed_files: Callable[[], List[str]]) -> ResolvedScope:
    """
    Resolves the set of files a format run should be restricted to.

    Args:
        only_changed_files: Whether scoping was requested
        event_name: Name of the event that triggered the workflow
        list_changed_files: Returns the paths changed by the pull request under review

    Returns:
        ResolvedScope: NOT_SCOPED, SCOPED with the files, or SCOPED_EMPTY when there is nothing to format
    """
    if not can_scope_to_changed_files(only_changed_files, event_name):
        return ResolvedScope.not_scoped()

    files_to_check = [path for path in list_changed_files() if path]
    log(f"Checking {len(files_to_check)} files")
    return ResolvedScope.from_files(files_to_check)
