import io
import os
import contextlib
import unittest
import tempfile
from unittest.mock import patch

# Test setup imports (path is set up by conftest.py)
from src.config import reset_config
from src.main import main


class TestDotnetFormatAction(unittest.TestCase):

    def setUp(self):
        # Create a temporary directory for the workspace
        self.temp_home = tempfile.mkdtemp()

        # Set up mock environment variables for testing
        self.env_patcher = patch.dict('os.environ', {
            'HOME': self.temp_home,
            'GITHUB_WORKSPACE': self.temp_home,
            'GITHUB_REPOSITORY': 'mock/repository',
            'GITHUB_EVENT_NAME': 'pull_request',
            'INPUT_ONLY-CHANGED-FILES': 'true',
            'INPUT_REPO-TOKEN': 'mock-github-token',
        }, clear=True)
        self.env_patcher.start()
        reset_config()

        # Mock the pull request file listing to prevent network access
        self.files_patcher = patch('src.github_api.get_pull_request_files')
        self.mock_files = self.files_patcher.start()
        self.mock_files.return_value = []

        # Mock subprocess to prevent actual command execution
        self.subprocess_patcher = patch('subprocess.run')
        self.mock_subprocess_run = self.subprocess_patcher.start()

        # Mock sys.exit to prevent test termination
        self.exit_patcher = patch('sys.exit')
        self.mock_exit = self.exit_patcher.start()

    def tearDown(self):
        # Clean up all patches
        self.env_patcher.stop()
        self.files_patcher.stop()
        self.subprocess_patcher.stop()
        self.exit_patcher.stop()
        reset_config()

        # Clean up temp directory if it exists
        if hasattr(self, 'temp_home') and os.path.exists(self.temp_home):
            import shutil
            shutil.rmtree(self.temp_home, ignore_errors=True)

    def test_main_output(self):
        # An empty pull request never runs the formatter
        with io.StringIO() as stdout, contextlib.redirect_stdout(stdout):
            main()
            output = stdout.getvalue().strip()
        self.assertIn("--- Starting dotnet format Action ---", output)
        self.assertIn("Checking 0 files", output)
        self.assertIn("::set-output name=has-changes::false", output)
        self.mock_subprocess_run.assert_not_called()
        self.mock_exit.assert_not_called()


if __name__ == '__main__':
    unittest.main()
