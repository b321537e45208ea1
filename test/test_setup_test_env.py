#!/usr/bin/env python3
"""Tests for test environment setup helper."""

import json
import unittest

# Test setup imports (path is set up by conftest.py)
from setup_test_env import (
    create_temp_repo_dir,
    cleanup_temp_dir,
    write_event_payload
)


class TestSetupTestEnv(unittest.TestCase):
    """Test cases for test environment setup helper."""

    def test_create_and_cleanup_temp_dir(self):
        """Test temporary directory creation and cleanup."""
        # Create temp directory
        temp_dir = create_temp_repo_dir()

        # Should exist and be a directory
        self.assertTrue(temp_dir.exists())
        self.assertTrue(temp_dir.is_dir())

        # Clean up
        cleanup_temp_dir(temp_dir)

        # Should no longer exist
        self.assertFalse(temp_dir.exists())

    def test_write_event_payload(self):
        """Test the event payload is written as JSON inside the temp directory."""
        temp_dir = create_temp_repo_dir()
        try:
            event_path = write_event_payload(temp_dir, {"pull_request": {"number": 7}})

            with open(event_path, encoding="utf-8") as event_file:
                self.assertEqual(json.load(event_file), {"pull_request": {"number": 7}})
        finally:
            cleanup_temp_dir(temp_dir)


if __name__ == '__main__':
    unittest.main()
