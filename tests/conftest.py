import sys
from pathlib import Path

import pytest

# Add the repository root to sys.path so we can import 'passdigest'
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PASSDIGEST_SALT_LENGTH", "PASSDIGEST_ALGORITHM", "PASSDIGEST_DEBUG"):
        monkeypatch.delenv(name, raising=False)
