from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for registration and lazy materialization.

    Use these values for the container-level ``lock_mode`` or when building a
    ``LazyHandle`` directly. Handles created by ``Container.register`` inherit
    the container setting.
    """

    THREAD = "thread"
    """Guard registration and first materialization with ``threading`` locks."""

    NONE = "none"
    """Disable locking; use only when every call happens on one thread."""
