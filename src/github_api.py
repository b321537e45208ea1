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

import json
import os
from typing import List, Optional

import requests

from src.config import get_config, Config, ConfigurationError
from src.utils import debug_log, log

# Files dotnet format can act on
FORMATTABLE_EXTENSIONS = (".cs", ".vb")
FILES_PER_PAGE = 100


class GitHubApiError(Exception):
    """Raised when the GitHub REST API cannot be reached or returns an error."""
    pass


def get_pull_request_number(event_path: Optional[str]) -> Optional[int]:
    """Reads the pull request number from the webhook payload of the triggering event.

    Works for both `pull_request` and `issue_comment` payloads; comments on pull
    requests carry the number on the `issue` object.

    Args:
        event_path: Path to the event payload JSON file (GITHUB_EVENT_PATH)

    Returns:
        int: The pull request number, or None if the payload has none

    Raises:
        ConfigurationError: If the payload cannot be read or is not valid JSON
    """
    if not event_path or not os.path.exists(event_path):
        debug_log(f"Event payload not found at {event_path}")
        return None

    try:
        with open(event_path, encoding="utf-8") as event_file:
            payload = json.load(event_file)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error: Could not read the event payload at {event_path}: {e}") from e

    for key in ("pull_request", "issue"):
        number = (payload.get(key) or {}).get("number")
        if number is not None:
            return int(number)
    return payload.get("number")


def _get_headers(config: Config) -> dict:
    return {
        "Authorization": f"Bearer {config.GITHUB_TOKEN}",
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "User-Agent": config.USER_AGENT
    }


def _is_formattable(file_entry: dict) -> bool:
    if file_entry.get("status") == "removed":
        return False
    return os.path.splitext(file_entry.get("filename", ""))[1].lower() in FORMATTABLE_EXTENSIONS


def get_pull_request_files(config: Optional[Config] = None) -> List[str]:
    """Lists the formattable files changed by the pull request that triggered the workflow.

    Pages through `GET /repos/{owner}/{repo}/pulls/{number}/files`, dropping removed
    files and anything dotnet format cannot handle.

    Returns:
        List[str]: Repository-relative paths in the order GitHub returns them

    Raises:
        ConfigurationError: If the token, repository or pull request number is missing
        GitHubApiError: If the API request fails
    """
    config = config or get_config()

    if not config.GITHUB_TOKEN:
        raise ConfigurationError("Error: A repo-token is required to list the files changed by the pull request.")
    if not config.GITHUB_REPOSITORY:
        raise ConfigurationError("Error: Required environment variable GITHUB_REPOSITORY is not set.")

    pr_number = get_pull_request_number(config.GITHUB_EVENT_PATH)
    if pr_number is None:
        raise ConfigurationError("Error: Could not determine the pull request number from the event payload.")

    api_url = f"{config.GITHUB_API_URL.rstrip('/')}/repos/{config.GITHUB_REPOSITORY}/pulls/{pr_number}/files"
    debug_log(f"API URL: {api_url}")

    files = []
    page = 1
    try:
        while True:
            debug_log(f"Making GET request to: {api_url} (page {page})")
            response = requests.get(
                api_url,
                headers=_get_headers(config),
                params={"per_page": FILES_PER_PAGE, "page": page},
                timeout=30
            )
            response.raise_for_status()
            debug_log(f"Pull request files API response status code: {response.status_code}")

            page_entries = response.json()
            files.extend(entry["filename"] for entry in page_entries if _is_formattable(entry))

            if len(page_entries) < FILES_PER_PAGE:
                break
            page += 1
    except requests.exceptions.HTTPError as e:
        log(f"HTTP error listing files for pull request #{pr_number}: {e.response.status_code} - {e.response.text}", is_error=True)
        raise GitHubApiError(f"Failed to list files for pull request #{pr_number}") from e
    except requests.exceptions.JSONDecodeError as e:
        log(f"Error decoding JSON response when listing files for pull request #{pr_number}.", is_error=True)
        raise GitHubApiError(f"Failed to list files for pull request #{pr_number}") from e
    except requests.exceptions.RequestException as e:
        log(f"Request error listing files for pull request #{pr_number}: {e}", is_error=True)
        raise GitHubApiError(f"Failed to list files for pull request #{pr_number}") from e

    debug_log(f"Pull request #{pr_number} formattable files: {files}")
    return files
