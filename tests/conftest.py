import importlib
import sys
from pathlib import Path

import pytest

# Ensure the src layout is importable as top-level `pla`
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_ROOT = PROJECT_ROOT / "src"
if SRC_ROOT.exists() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # `pla.config` is the context manager once the package is imported.
    config_mod = importlib.import_module("pla.config")

    monkeypatch.delenv("PLA_MAX_ITERATIONS", raising=False)
    monkeypatch.delenv("PLA_LOG_EVERY", raising=False)
    monkeypatch.setattr(config_mod, "_global_settings", config_mod.Settings())
