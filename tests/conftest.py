"""Shared fixtures for launcher tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Ensure project root and backend are importable
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "backend"))


# ---------------------------------------------------------------------------
# Subprocess mock fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Patch subprocess.run in the launcher with a configurable MagicMock.

    The mock returns returncode=0 by default. Tests can override via
    mock_subprocess.return_value or side_effect.
    """
    mock_result = MagicMock()
    mock_result.returncode = 0

    with patch("run.subprocess.run", return_value=mock_result) as mock_run:
        yield mock_run
