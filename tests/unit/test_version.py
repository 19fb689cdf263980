"""Test basic package functionality."""

import tofupilot
from tofupilot.http_client import USER_AGENT


def test_version():
    """Test that package version is defined."""
    assert hasattr(tofupilot, "__version__")
    assert tofupilot.__version__ == "0.1.0"


def test_user_agent_carries_version():
    assert USER_AGENT == f"tofupilot-python/{tofupilot.__version__}"
