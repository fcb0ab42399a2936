import functools

import pytest

from lazywire.exceptions import LazyWireInvalidAliasError, LazyWireInvalidFactoryError
from lazywire.validators import RegistrationValidator


def test_validate_alias_accepts_non_empty_string(
    registration_validator: RegistrationValidator,
) -> None:
    registration_validator.validate_alias("db.primary")


@pytest.mark.parametrize("alias", ["", b"db", 1, None])
def test_validate_alias_rejects_invalid(
    registration_validator: RegistrationValidator,
    alias: object,
) -> None:
    with pytest.raises(LazyWireInvalidAliasError):
        registration_validator.validate_alias(alias)


def test_validate_factory_accepts_partial(registration_validator: RegistrationValidator) -> None:
    def build(host: str, port: int = 5432) -> str:
        return f"{host}:{port}"

    registration_validator.validate_factory(functools.partial(build, "localhost"))


def test_validate_factory_accepts_varargs(registration_validator: RegistrationValidator) -> None:
    def build(*args: object, **kwargs: object) -> None:
        return None

    registration_validator.validate_factory(build)


def test_validate_factory_accepts_builtin_types(
    registration_validator: RegistrationValidator,
) -> None:
    registration_validator.validate_factory(dict)
    registration_validator.validate_factory(object)


def test_validate_factory_rejects_required_keyword(
    registration_validator: RegistrationValidator,
) -> None:
    def build(*, host: str) -> str:
        return host

    with pytest.raises(LazyWireInvalidFactoryError, match="'.*build' must be callable"):
        registration_validator.validate_factory(build)


def test_validate_factory_rejects_bound_method_with_arguments(
    registration_validator: RegistrationValidator,
) -> None:
    class Builder:
        def build(self, name: str) -> str:
            return name

    with pytest.raises(LazyWireInvalidFactoryError):
        registration_validator.validate_factory(Builder().build)
