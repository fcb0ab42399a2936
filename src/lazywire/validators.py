from __future__ import annotations

import inspect
from typing import Any

from lazywire.exceptions import LazyWireInvalidAliasError, LazyWireInvalidFactoryError


class RegistrationValidator:
    """Validates aliases and factories before a registration is stored."""

    def validate_alias(self, alias: object) -> None:
        """Validate that an alias is a non-empty string."""
        if not isinstance(alias, str):
            msg = f"Alias must be a string, got {alias!r}."
            raise LazyWireInvalidAliasError(msg)

        if not alias:
            msg = "Alias must not be empty."
            raise LazyWireInvalidAliasError(msg)

    def validate_factory(self, factory: Any) -> None:
        """Validate that a factory is callable with no arguments."""
        if not callable(factory):
            msg = f"Factory must be callable, got {factory!r}."
            raise LazyWireInvalidFactoryError(msg)

        try:
            factory_signature = inspect.signature(factory)
        except (TypeError, ValueError):
            # Some builtins expose no signature; they are accepted as-is.
            return

        try:
            factory_signature.bind()
        except TypeError as error:
            name = getattr(factory, "__qualname__", repr(factory))
            msg = f"Factory '{name}' must be callable without arguments: {error}."
            raise LazyWireInvalidFactoryError(msg) from error
