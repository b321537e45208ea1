"""dotnet format orchestration

Turns action inputs into a dotnet format invocation and decides whether the
run produced formatting changes.

Key Components:
- FormatOptions / build_options: typed options built from raw inputs
- resolve_scope: restricts a run to the pull request's changed files
- build_format_command: ordered dotnet format arguments
- format_code: runs the formatter and detects changes
"""

from src.dotnet_format.options import FormatOptions, build_options
from src.dotnet_format.scope import ResolvedScope, ScopeKind, resolve_scope
from src.dotnet_format.command import build_format_command, join_include_files
from src.dotnet_format.formatter import format_code

__all__ = [
    "FormatOptions",
    "build_options",
    "ResolvedScope",
    "ScopeKind",
    "resolve_scope",
    "build_format_command",
    "join_include_files",
    "format_code",
]
