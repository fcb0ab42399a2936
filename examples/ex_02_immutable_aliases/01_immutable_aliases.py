"""Immutable aliases and plain overwrites.

``immutable=True`` locks an alias: later ``register`` calls return ``False``
and leave the original factory in place. Aliases registered without the flag
can be replaced, and the replacement gets a fresh, unbuilt handle.
"""

from __future__ import annotations

from lazywire import Container


def main() -> None:
    container = Container()

    container.register("dsn", lambda: "postgresql://prod/app", immutable=True)
    rejected = container.register("dsn", lambda: "sqlite://")
    print(f"rejected={rejected}")  # => rejected=False
    print(f"dsn={container.resolve('dsn')}")  # => dsn=postgresql://prod/app
    print(f"locked={container.is_locked('dsn')}")  # => locked=True

    container.register("mode", lambda: "debug")
    old_handle = container.get("mode")
    container.register("mode", lambda: "release")
    print(f"mode={container.resolve('mode')}")  # => mode=release
    print(f"old_handle={old_handle.resolve() if old_handle else None}")  # => old_handle=debug

    chained = container.register("a", lambda: 1)
    print(f"chained={chained is container}")  # => chained=True


if __name__ == "__main__":
    main()
