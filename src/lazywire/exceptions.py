class LazyWireError(Exception):
    """Represent a base class for all lazywire-specific failures.

    Catch this type when you want to handle any lazywire error path without
    matching each concrete exception class individually.
    """


class LazyWireInvalidRegistrationError(LazyWireError):
    """Signal invalid registration arguments.

    Raised by ``Container.register`` and ``LazyHandle`` construction before
    anything is stored, so a failed call leaves the container unchanged.
    """


class LazyWireInvalidFactoryError(LazyWireInvalidRegistrationError):
    """Signal a factory that cannot be called without arguments.

    Typical fixes include passing the callable itself instead of its result,
    or wrapping a constructor that needs arguments in a ``lambda`` or
    ``functools.partial``.
    """


class LazyWireInvalidAliasError(LazyWireInvalidRegistrationError):
    """Signal an alias that is not a non-empty string."""


class LazyWireAliasNotRegisteredError(LazyWireError):
    """Signal that an alias has no registered factory.

    Raised only by the strict ``Container.resolve`` accessor. ``Container.get``
    reports the same condition by returning ``None``.
    """

    def __init__(self, alias: str) -> None:
        self.alias = alias
        super().__init__(f"Alias {alias!r} is not registered.")
