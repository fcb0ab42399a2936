"""Lock modes for concurrent first use.

1. Default ``LockMode.THREAD`` builds each value once, even when many threads
   hit an unbuilt handle at the same moment.
2. ``LockMode.NONE`` removes locking for single-threaded programs.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from lazywire import Container, LockMode


def _first_use_calls(container: Container) -> int:
    calls = 0
    calls_lock = threading.Lock()

    def factory() -> object:
        nonlocal calls
        with calls_lock:
            calls += 1
        time.sleep(0.05)
        return object()

    container.register("service", factory)
    handle = container.get("service")
    assert handle is not None

    with ThreadPoolExecutor(max_workers=4) as executor:
        list(executor.map(lambda _: handle.resolve(), range(4)))
    return calls


def main() -> None:
    print(f"thread_calls={_first_use_calls(Container())}")  # => thread_calls=1

    single = Container(lock_mode=LockMode.NONE)
    single.register("value", lambda: 42)
    print(f"none_value={single.resolve('value')}")  # => none_value=42
    print(f"none_mode={single.lock_mode.value}")  # => none_mode=none


if __name__ == "__main__":
    main()
