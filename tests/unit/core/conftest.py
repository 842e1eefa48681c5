"""Shared fixtures for core unit tests"""

import pytest

from mdcontainer.core.models import Fence


@pytest.fixture(name="fence3")
def fence3_fixture():
    return Fence(3)


@pytest.fixture(name="fence4")
def fence4_fixture():
    return Fence(4)
