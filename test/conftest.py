from __future__ import annotations

from collections.abc import Iterator

import pytest

from adt_dsl import tracing


@pytest.fixture(autouse=True)
def reset_tracing(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Tracing starts off, and forced flags never leak between tests."""
    monkeypatch.delenv(tracing.ENV_FLAG, raising=False)
    tracing._forced_state = None
    tracing.default_recorder().clear()
    yield
    tracing._forced_state = None
    tracing.default_recorder().clear()
