"""Lazy handles that build their value on first use.

A ``LazyHandle`` wraps a zero-argument factory. Nothing is constructed when the
handle is created; the first forwarded operation calls the factory, stores the
result, and every later operation reuses that stored value.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Generic, TypeVar

from lazywire.lock_mode import LockMode
from lazywire.validators import RegistrationValidator

T = TypeVar("T")

logger = logging.getLogger(__name__)
_MISSING: Any = object()
_validator = RegistrationValidator()


class LazyHandle(Generic[T]):
    """Defer construction of a value until an operation is forwarded to it.

    Operations reach the value in three ways:

    * attribute access on the handle (``handle.hello()``), for any name the
      handle itself does not define;
    * ``invoke(name, *args, **kwargs)`` for name-based dispatch;
    * ``resolve()`` to obtain the value itself for typed use.

    Each of them materializes the value first. The factory runs at most once
    per handle; if it raises, the handle stays unmaterialized and the error
    propagates to the caller.
    """

    __slots__ = ("_factory", "_instance", "_lock")

    def __init__(
        self,
        factory: Callable[[], T],
        *,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Wrap ``factory`` without calling it.

        Args:
            factory: Zero-argument callable producing the value.
            lock_mode: ``LockMode.THREAD`` makes first materialization safe under
                concurrent callers. ``LockMode.NONE`` skips locking.

        Raises:
            LazyWireInvalidFactoryError: If ``factory`` is not callable without
                arguments.
        """
        _validator.validate_factory(factory)
        self._factory = factory
        self._instance: Any = _MISSING
        # Reentrant so a factory that resolves its own handle recurses instead of deadlocking.
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if lock_mode is LockMode.THREAD else nullcontext()
        )

    @property
    def is_materialized(self) -> bool:
        """Return whether the factory has already produced the value."""
        return self._instance is not _MISSING

    def resolve(self) -> T:
        """Return the value, calling the factory on first use."""
        instance = self._instance
        if instance is not _MISSING:
            return instance

        with self._lock:
            if self._instance is _MISSING:
                logger.debug("Materializing lazy value from %r", self._factory)
                self._instance = self._factory()
            return self._instance

    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Call operation ``name`` on the value and return its result unchanged.

        An ``AttributeError`` from a value that lacks ``name`` is not translated.
        """
        return getattr(self.resolve(), name)(*args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name in LazyHandle.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return getattr(self.resolve(), name)

    def __repr__(self) -> str:
        return f"<LazyHandle factory={self._factory!r} materialized={self.is_materialized}>"
