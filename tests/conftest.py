"""Root test configuration: isolate tests from the caller's environment"""

import os

import pytest

from mdcontainer.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDCONTAINER_* variables so settings come from each test alone."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
