"""Errors and absent values.

``get`` and a rejected ``register`` report problems through return values.
Invalid registrations and the strict ``resolve`` accessor raise
``LazyWireError`` subclasses. Errors from the built object itself pass
through unchanged.
"""

from __future__ import annotations

from lazywire import (
    Container,
    LazyWireAliasNotRegisteredError,
    LazyWireInvalidFactoryError,
)


class Clock:
    def now(self) -> str:
        return "12:00"


def main() -> None:
    container = Container()

    print(f"absent={container.get('clock')}")  # => absent=None

    try:
        container.resolve("clock")
    except LazyWireAliasNotRegisteredError as error:
        print(f"strict={error.alias}")  # => strict=clock

    try:
        container.register("clock", Clock())  # type: ignore[arg-type]
    except LazyWireInvalidFactoryError:
        print("invalid_factory=rejected")  # => invalid_factory=rejected

    container.register("clock", Clock)
    clock = container.get("clock")
    assert clock is not None
    try:
        clock.invoke("tomorrow")
    except AttributeError:
        print("unsupported=AttributeError")  # => unsupported=AttributeError
    print(f"now={clock.now()}")  # => now=12:00


if __name__ == "__main__":
    main()
