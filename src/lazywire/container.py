from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Literal, TypeVar, overload

from typing_extensions import Self

from lazywire.exceptions import LazyWireAliasNotRegisteredError
from lazywire.lazy import LazyHandle
from lazywire.lock_mode import LockMode
from lazywire.validators import RegistrationValidator

F = TypeVar("F", bound=Callable[[], Any])

logger = logging.getLogger(__name__)
_MISSING: Any = object()


class Container:
    """Map string aliases to lazily constructed values.

    ``register`` stores a factory behind an alias without calling it. ``get``
    returns the ``LazyHandle`` for an alias; the factory runs the first time an
    operation is forwarded through that handle. Factories may close over the
    container and call ``get`` for other aliases, so registration order does
    not matter as long as every alias exists by the time it is first used.

    An alias registered with ``immutable=True`` is locked: every later
    ``register`` call for it is rejected by returning ``False``. Other aliases
    can be overwritten freely; code that already holds the previous handle
    keeps using it, while new ``get`` calls return the replacement.
    """

    def __init__(self, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        """Initialize an empty container.

        Args:
            lock_mode: ``LockMode.THREAD`` makes ``register`` atomic and passes
                thread locking to every handle. ``LockMode.NONE`` disables both.
        """
        self._entries: dict[str, LazyHandle[Any]] = {}
        self._locked: set[str] = set()
        self._lock_mode = lock_mode
        self._lock: AbstractContextManager[Any] = (
            threading.Lock() if lock_mode is LockMode.THREAD else nullcontext()
        )
        self._validator = RegistrationValidator()

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    @overload
    def register(
        self,
        alias: str,
        factory: Callable[[], Any],
        immutable: bool = False,
    ) -> Self | Literal[False]: ...

    @overload
    def register(
        self,
        alias: str,
        *,
        immutable: bool = False,
    ) -> Callable[[F], F]: ...

    def register(
        self,
        alias: str,
        factory: Callable[[], Any] = _MISSING,
        immutable: bool = False,
    ) -> Self | Literal[False] | Callable[[F], F]:
        """Register ``factory`` under ``alias`` without calling it.

        Supports direct calls and decorator usage. When ``factory`` is omitted,
        returns a decorator that registers the decorated callable and returns it
        unchanged. The decorator form cannot report a rejected registration of a
        locked alias to the caller; the rejection is only logged.

        Args:
            alias: Non-empty string naming the dependency.
            factory: Zero-argument callable producing the value.
            immutable: Lock the alias so every later registration is rejected.

        Returns:
            The container itself on success, so calls can be chained, or
            ``False`` when ``alias`` is locked. A rejected call changes nothing
            and does not raise; check the result when it matters.

        Raises:
            LazyWireInvalidAliasError: If ``alias`` is not a non-empty string.
            LazyWireInvalidFactoryError: If ``factory`` cannot be called without
                arguments.
        """
        self._validator.validate_alias(alias)

        if factory is _MISSING:

            def decorator(decorated: F) -> F:
                if self.register(alias, decorated, immutable) is False:
                    logger.debug("Decorated factory %r was not registered", decorated)
                return decorated

            return decorator

        with self._lock:
            if alias in self._locked:
                logger.debug("Rejected registration of locked alias %r", alias)
                return False

            self._entries[alias] = LazyHandle(factory, lock_mode=self._lock_mode)
            if immutable:
                self._locked.add(alias)

        logger.debug("Registered alias %r (immutable=%s)", alias, immutable)
        return self

    def get(self, alias: str) -> LazyHandle[Any] | None:
        """Return the handle registered under ``alias``, or ``None`` if absent.

        The same handle object is returned on every call until the alias is
        overwritten, so all holders share one materialized value.
        """
        return self._entries.get(alias)

    def resolve(self, alias: str) -> Any:
        """Return the materialized value for ``alias``.

        Raises:
            LazyWireAliasNotRegisteredError: If ``alias`` is not registered.
        """
        handle = self._entries.get(alias)
        if handle is None:
            raise LazyWireAliasNotRegisteredError(alias)
        return handle.resolve()

    def is_locked(self, alias: str) -> bool:
        """Return whether ``alias`` was registered with ``immutable=True``."""
        return alias in self._locked

    def __contains__(self, alias: object) -> bool:
        return alias in self._entries
