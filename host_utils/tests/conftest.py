import sys
from pathlib import Path

import pytest

# Ensure the host_utils package is importable when running tests from a checkout
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from host_utils import debug_utils


@pytest.fixture(autouse=True)
def reset_debug_utils(monkeypatch):
    """Every test starts with console output at the default level and no log file."""
    monkeypatch.setattr(debug_utils, "_console_verbosity_level", debug_utils.DEFAULT_CONSOLE_VERBOSITY)
    monkeypatch.setattr(debug_utils, "_log_verbosity_level", debug_utils.DEFAULT_LOG_VERBOSITY)
    monkeypatch.setattr(debug_utils, "_log_dir", debug_utils.DEFAULT_LOG_DIR)
    monkeypatch.setattr(debug_utils, "_log_file_enabled", False)
    monkeypatch.setattr(debug_utils, "_current_log_filepath", None)
