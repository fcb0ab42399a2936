"""Shared pytest fixtures for lazywire tests."""

import pytest

from lazywire.container import Container
from lazywire.lock_mode import LockMode
from lazywire.validators import RegistrationValidator


@pytest.fixture()
def container() -> Container:
    """Default container with thread locking."""
    return Container()


@pytest.fixture()
def container_unlocked() -> Container:
    """Container with lock_mode=LockMode.NONE."""
    return Container(lock_mode=LockMode.NONE)


@pytest.fixture()
def registration_validator() -> RegistrationValidator:
    """RegistrationValidator instance."""
    return RegistrationValidator()
