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

import os
import shutil
import subprocess
import sys
import platform
from dataclasses import dataclass
from typing import Optional
from src.config import get_config


def tail_string(text: str, max_length: int, prefix: str = "...[Content truncated]...\n") -> str:
    """Tail a string to a maximum length, keeping the end portion.

    Args:
        text: The string to truncate
        max_length: Maximum length of the resulting string
        prefix: Optional prefix to add when truncating (default: "...[Content truncated]...\n")

    Returns:
        str: The original string if within max_length, or truncated string with prefix indicator
    """
    if len(text) <= max_length:
        return text

    remaining_length = max_length - len(prefix)
    if remaining_length <= 0:
        return prefix[:max_length]

    return prefix + text[-remaining_length:]

# Unicode to ASCII fallback mappings for Windows


UNICODE_FALLBACKS = {
    '❌': 'X',  # ❌ -> X
    '✅': '',  # ✅ -> ''
    '✨': '*',  # ✨ -> *
    '⚠️': '!',  # ⚠️ -> !
}


def safe_print(message, file=None, flush=True):
    """Safely print message, handling encoding issues on Windows."""
    try:
        print(message, file=file, flush=flush)
    except UnicodeEncodeError:
        # On Windows, replace Unicode chars with ASCII equivalents
        for unicode_char, ascii_fallback in UNICODE_FALLBACKS.items():
            message = message.replace(unicode_char, ascii_fallback)

        # Replace any remaining problematic Unicode characters with '?'
        if platform.system() == 'Windows':
            message = ''.join([c if ord(c) < 128 else '?' for c in message])

        print(message, file=file, flush=flush)


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints a message to stdout/stderr. Warnings are emitted as workflow annotations."""
    if is_error:
        safe_print(message, file=sys.stderr, flush=True)
    elif is_warning:
        safe_print(f"::warning::{message}", flush=True)
    else:
        safe_print(message, flush=True)


def debug_log(*args, **kwargs):
    """Prints only if DEBUG_MODE is True."""
    config = get_config()
    if config.DEBUG_MODE:
        message = " ".join(map(str, args))
        safe_print(message, flush=True)


class ToolNotFoundError(Exception):
    """Raised when a required executable cannot be located on PATH."""
    def __init__(self, tool_name: str):
        super().__init__(f"Unable to locate executable file: {tool_name}")
        self.tool_name = tool_name


@dataclass(frozen=True)
class CommandResult:
    """Exit code and captured output of a finished command."""
    return_code: int
    stdout: str = ""
    stderr: str = ""


def find_executable(tool_name: str) -> str:
    """
    Resolves an executable name to its full path using PATH.

    Raises:
        ToolNotFoundError: If the executable is not found
    """
    tool_path = shutil.which(tool_name)
    if not tool_path:
        raise ToolNotFoundError(tool_name)
    debug_log(f"Resolved {tool_name} to {tool_path}")
    return tool_path


def _mask_command(command, token: Optional[str]):
    if not token:
        return command
    return [part.replace(token, "***") if token in part else part for part in command]


def run_command(command, env=None, capture_output=True, cwd=None) -> CommandResult:
    """
    Runs a command and returns its exit code and output.
    A non-zero exit code is returned, never raised; callers decide what it means.
    Prints command, stdout/stderr based on DEBUG_MODE.

    Args:
        command: List of command and arguments to run
        env: Optional environment variables dictionary
        capture_output: When False the command writes straight to the job log
            and the returned stdout/stderr are empty
        cwd: Optional working directory for the command

    Returns:
        CommandResult: Exit code plus stripped stdout and stderr
    """
    try:
        config = get_config()
        masked_command = _mask_command(command, config.GITHUB_TOKEN)
        debug_log(f"::group::Running command: {' '.join(masked_command)}")
        debug_log(f"  Options: capture_output={capture_output}, cwd={cwd}")

        # Merge with current environment to preserve essential variables like PATH
        full_env = os.environ.copy()
        if env:
            full_env.update(env)

        if capture_output:
            process = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                check=False,  # We'll handle errors ourselves
                env=full_env,
                cwd=cwd
            )
        else:
            process = subprocess.run(command, check=False, env=full_env, cwd=cwd)

        stdout_text = process.stdout.strip() if capture_output and process.stdout else ""
        stderr_text = process.stderr.strip() if capture_output and process.stderr else ""

        debug_log(f"  Return Code: {process.returncode}")
        if stdout_text:
            if len(stdout_text) > 1000:
                debug_log(f"  Command stdout (truncated):\n---\n{stdout_text[:500]}...\n...{stdout_text[-500:]}\n---")
            else:
                debug_log(f"  Command stdout:\n---\n{stdout_text}\n---")
        if stderr_text:
            debug_log(f"  Command stderr:\n---\n{tail_string(stderr_text, 1000)}\n---")

        return CommandResult(return_code=process.returncode, stdout=stdout_text, stderr=stderr_text)
    finally:
        debug_log("::endgroup::")


def set_output(name: str, value: str):
    """
    Publishes a step output.

    Appends ``name=value`` to the file named by GITHUB_OUTPUT, or falls back to
    the legacy ``::set-output`` workflow command when no output file is provided.
    """
    config = get_config()
    debug_log(f"Setting output {name}={value}")
    if config.GITHUB_OUTPUT:
        with open(config.GITHUB_OUTPUT, "a", encoding="utf-8") as output_file:
            output_file.write(f"{name}={value}{os.linesep}")
    else:
        safe_print(f"::set-output name={name}::{value}", flush=True)
