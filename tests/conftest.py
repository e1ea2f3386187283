import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def worked_example():
    """Source text used by the command-line driver when no input is given."""
    from main import DEFAULT_EXPRESSION

    return DEFAULT_EXPRESSION
