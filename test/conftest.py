import os
import sys

# Make the `src` package and the test helpers importable without installing the project
_TEST_DIR = os.path.dirname(os.path.abspath(__file__))
_REPO_ROOT = os.path.dirname(_TEST_DIR)

for path in (_REPO_ROOT, _TEST_DIR):
    if path not in sys.path:
        sys.path.insert(0, path)
