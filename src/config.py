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
import sys
from pathlib import Path
from typing import Optional, Any, Dict


def _log_config_message(message: str, is_error: bool = False, is_warning: bool = False):
    """A minimal logger for use only within the config module before full logging is set up."""
    # This function should have no dependencies on other project modules
    if is_error or is_warning:
        print(message, file=sys.stderr)
    else:
        print(message)


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""
    pass


def input_env_name(name: str) -> str:
    """Returns the environment variable the Actions runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


class Config:
    """
    A centralized, object-oriented class to manage all configuration settings.
    It reads action inputs and the GitHub context from environment variables
    upon instantiation and provides typed settings as attributes.
    """
    def __init__(self, env: Dict[str, str] = os.environ, testing: bool = False):
        self.env = env
        self.testing = testing

        # --- Preset ---
        self.VERSION = "v1.0.0"
        self.USER_AGENT = f"dotnet-format-action {self.VERSION}"
        self.FORMATTER_EXECUTABLE = "dotnet"

        # --- Core Settings ---
        self.DEBUG_MODE = self._get_bool_env("DEBUG_MODE", default=False) or self.env.get("RUNNER_DEBUG") == "1"
        self.ACTION = self._get_action()

        # --- GitHub Context ---
        self.GITHUB_EVENT_NAME = self._get_env_var("GITHUB_EVENT_NAME", required=False, default="")
        self.GITHUB_EVENT_PATH = self._get_env_var("GITHUB_EVENT_PATH", required=False)
        self.GITHUB_API_URL = self._get_env_var("GITHUB_API_URL", required=False, default="https://api.github.com")
        self.GITHUB_OUTPUT = self._get_env_var("GITHUB_OUTPUT", required=False)

        # The token is only needed when changed files are listed, so it is never required here
        token = self._get_input("repo-token") or self._get_env_var("GITHUB_TOKEN", required=False)
        if testing:
            self.GITHUB_TOKEN = token or "mock-token-for-testing"
            self.GITHUB_REPOSITORY = self._get_env_var("GITHUB_REPOSITORY", required=False, default="mock/repo-for-testing")
        else:
            self.GITHUB_TOKEN = token
            self.GITHUB_REPOSITORY = self._get_env_var("GITHUB_REPOSITORY", required=False)

        # --- Paths ---
        self.REPO_ROOT = Path(self._get_env_var("GITHUB_WORKSPACE", required=False, default=os.getcwd())).resolve()

        if not testing:
            self._log_initial_settings()

    def get_input(self, name: str) -> str:
        """
        Returns the raw value of an action input, or an empty string when it is not set.

        Mirrors the runner's input marshalling: the name is upper-cased, spaces
        become underscores and surrounding whitespace is trimmed from the value.
        """
        return self._get_input(name)

    def _get_input(self, name: str) -> str:
        return (self.env.get(input_env_name(name)) or "").strip()

    def _get_env_var(self, var_name: str, required: bool = True, default: Optional[Any] = None) -> Optional[str]:
        value = self.env.get(var_name)
        if required and not value:
            raise ConfigurationError(f"Error: Required environment variable {var_name} is not set.")
        return value if value else default

    def _get_bool_env(self, var_name: str, default: bool = False) -> bool:
        return self._get_env_var(var_name, required=False, default=str(default)).lower() == "true"

    def _get_action(self) -> str:
        # Validated by the entry point so an unknown action is reported as a job error
        return (self._get_input("action") or "check").lower()

    def _log_initial_settings(self):
        if not self.DEBUG_MODE:
            return
        _log_config_message(f"Repository Root: {self.REPO_ROOT}")
        _log_config_message(f"Debug Mode: {self.DEBUG_MODE}")
        _log_config_message(f"Action: {self.ACTION}")
        _log_config_message(f"Event Name: {self.GITHUB_EVENT_NAME}")
        _log_config_message(f"Repository: {self.GITHUB_REPOSITORY}")
        _log_config_message(f"GitHub API URL: {self.GITHUB_API_URL}")

# --- Global Singleton Instance ---
# This is the single source of truth for configuration in the application.


_config_instance: Optional[Config] = None


def get_config(testing: bool = False) -> Config:
    """
    Returns the singleton Config instance, creating it if necessary.
    This function ensures that the Config is instantiated only when first needed,
    which is crucial for testing environments where environment variables are
    patched at runtime.

    Args:
        testing: If True, uses testing defaults for missing environment variables.
                This should only be used in tests.
    """
    global _config_instance
    if _config_instance is None:
        try:
            _config_instance = Config(testing=testing)
        except ConfigurationError as e:
            _log_config_message(str(e), is_error=True)
            sys.exit(1)
    return _config_instance


def reset_config():
    """For testing purposes only. Resets the config singleton."""
    global _config_instance
    _config_instance = None
