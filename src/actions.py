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

from dataclasses import replace
from typing import Optional

from src.config import get_config, Config
from src.utils import set_output
from src.dotnet_format import build_options, format_code

HAS_CHANGES_OUTPUT = "has-changes"


class FormattingIssuesError(Exception):
    """Raised by check when formatting issues are found and fail-fast is enabled."""
    pass


def check(config: Optional[Config] = None) -> bool:
    """Runs dotnet format in check mode and publishes the has-changes output.

    Raises:
        FormattingIssuesError: If changes were found and fail-fast is enabled
    """
    config = config or get_config()
    fail_fast = config.get_input("fail-fast") == "true"

    format_options = replace(build_options(config.get_input), dry_run=True)

    result = format_code(format_options, config.GITHUB_EVENT_NAME)

    set_output(HAS_CHANGES_OUTPUT, str(result).lower())

    # fail fast will cause the workflow to stop on this job
    if result and fail_fast:
        raise FormattingIssuesError("Formatting issues found")

    return result


def fix(config: Optional[Config] = None) -> bool:
    """Runs dotnet format in apply mode and publishes the has-changes output."""
    config = config or get_config()

    format_options = replace(build_options(config.get_input), dry_run=False)

    result = format_code(format_options, config.GITHUB_EVENT_NAME)

    set_output(HAS_CHANGES_OUTPUT, str(result).lower())
    return result
