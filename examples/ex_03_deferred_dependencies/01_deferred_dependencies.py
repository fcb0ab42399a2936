"""Deferred dependencies between aliases.

A factory can close over the container and look up other aliases. Lookup
happens when the factory runs, so an alias may depend on one registered
after it.
"""

from __future__ import annotations

from lazywire import Container


class Database:
    def __init__(self, url: str) -> None:
        self.url = url

    def query(self, sql: str) -> str:
        return f"{self.url} <- {sql}"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database

    def find(self, user_id: int) -> str:
        return self.database.query(f"SELECT * FROM users WHERE id = {user_id}")


def main() -> None:
    container = Container()

    @container.register("users")
    def build_users() -> UserRepository:
        print("building users")  # => building users
        return UserRepository(container.resolve("database"))

    container.register("database", lambda: Database("postgresql://prod/app"))

    users = container.get("users")
    assert users is not None
    print(users.find(42))  # => postgresql://prod/app <- SELECT * FROM users WHERE id = 42
    print(users.find(7))  # => postgresql://prod/app <- SELECT * FROM users WHERE id = 7


if __name__ == "__main__":
    main()
