from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch) -> None:
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
