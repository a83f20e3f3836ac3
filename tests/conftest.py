import pytest

from rdcalc.config import ALLOW_TRAILING_VAR, MAX_DEPTH_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against the default settings unless it sets its own."""
    monkeypatch.delenv(MAX_DEPTH_VAR, raising=False)
    monkeypatch.delenv(ALLOW_TRAILING_VAR, raising=False)
