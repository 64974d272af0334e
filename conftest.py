import os

import pytest


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep ``USTX_PITCH_*`` variables from the shell out of the tests."""

    for key in list(os.environ):
        if key.startswith("USTX_PITCH_"):
            monkeypatch.delenv(key)
