from __future__ import annotations

import pytest

from casekit import engine, styles
from casekit.config import NULL_POLICY_ENV


@pytest.fixture(autouse=True)
def clean_registry(monkeypatch):
    monkeypatch.delenv(NULL_POLICY_ENV, raising=False)
    snapshot = dict(styles._registry)
    engine.reset_engine()
    yield
    styles._registry.clear()
    styles._registry.update(snapshot)
    engine.reset_engine()
