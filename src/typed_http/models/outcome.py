"""Resultado tipado de uma requisição."""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from .errors import HttpCoreError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Sucesso: valor decodificado."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Error:
    """Falha: causa classificada."""

    cause: HttpCoreError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.cause


Outcome = Result[T] | Error
