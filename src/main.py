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

import sys
from datetime import datetime

from src.config import get_config, ConfigurationError
from src.utils import debug_log, log, ToolNotFoundError
from src.github_api import GitHubApiError
from src.actions import check, fix, FormattingIssuesError

ACTIONS = {
    "check": check,
    "fix": fix,
}


def main():
    """Main orchestration logic."""

    start_time = datetime.now()
    log("--- Starting dotnet format Action ---")
    debug_log(f"Start time: {start_time.strftime('%Y-%m-%d %H:%M:%S')}")

    config = get_config()
    log(f"Running dotnet format {config.ACTION}")

    try:
        run_action = ACTIONS.get(config.ACTION)
        if run_action is None:
            raise ConfigurationError(f"Invalid action '{config.ACTION}'. Must be one of {list(ACTIONS)}.")
        run_action(config)
    except (FormattingIssuesError, ToolNotFoundError, GitHubApiError, ConfigurationError) as e:
        log(f"::error::{e}")
        sys.exit(1)

    debug_log(f"Elapsed time: {datetime.now() - start_time}")
    log("--- dotnet format Action finished ---")


if __name__ == "__main__":
    main()
