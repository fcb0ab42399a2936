from lazywire.container import Container
from lazywire.exceptions import (
    LazyWireAliasNotRegisteredError,
    LazyWireError,
    LazyWireInvalidAliasError,
    LazyWireInvalidFactoryError,
    LazyWireInvalidRegistrationError,
)
from lazywire.lazy import LazyHandle
from lazywire.lock_mode import LockMode

__all__ = [
    "Container",
    "LazyHandle",
    "LazyWireAliasNotRegisteredError",
    "LazyWireError",
    "LazyWireInvalidAliasError",
    "LazyWireInvalidFactoryError",
    "LazyWireInvalidRegistrationError",
    "LockMode",
]
