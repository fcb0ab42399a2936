"""Quickstart: register factories by alias and use them lazily.

Nothing is built at registration time. The first method call on a handle runs
its factory; later calls reuse the same object.
"""

from __future__ import annotations

from lazywire import Container, LazyHandle


class Greeter:
    def say(self) -> str:
        return "I say: "

    def hello(self) -> str:
        return "Hello"

    def world(self) -> str:
        return ", World!"


class Status:
    def __init__(self, greeter: LazyHandle[Greeter] | None) -> None:
        self.greeter = greeter

    def working(self) -> str:
        if self.greeter is None:
            return "no greeter"
        return self.greeter.say() + "Yep!"


def main() -> None:
    container = Container()
    container.register("greeter", Greeter)
    container.register("status", lambda: Status(container.get("greeter")))

    greeter = container.get("greeter")
    assert greeter is not None
    print(f"built_before_use={greeter.is_materialized}")  # => built_before_use=False

    print(greeter.say() + greeter.hello() + greeter.world())  # => I say: Hello, World!
    print(f"built_after_use={greeter.is_materialized}")  # => built_after_use=True

    status = container.get("status")
    assert status is not None
    print(status.working())  # => I say: Yep!

    print(f"invoke={greeter.invoke('hello')}")  # => invoke=Hello
    print(f"missing={container.get('missing')}")  # => missing=None


if __name__ == "__main__":
    main()
