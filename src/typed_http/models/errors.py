"""Taxonomia de erros."""

from dataclasses import dataclass


class HttpCoreError(Exception):
    """Base dos erros recuperáveis entregues dentro de um Outcome."""


@dataclass
class TransportError(HttpCoreError):
    """Falha de rede ou protocolo reportada pelo transporte."""

    error: BaseException

    def __str__(self) -> str:
        return f"transport error: {self.error!r}"


@dataclass
class DecodeError(HttpCoreError):
    """Corpo da resposta não corresponde ao tipo esperado."""

    message: str

    def __str__(self) -> str:
        return f"decode error: {self.message}"


@dataclass
class UnknownError(HttpCoreError):
    """Transporte não devolveu dados nem erro."""

    def __str__(self) -> str:
        return "unknown error: transport returned neither data nor error"


@dataclass
class RequestCancelled(Exception):
    """Operação cancelada antes de concluir."""

    inner: BaseException | None = None


class InvalidRequestError(ValueError):
    """URL ou corpo inválido ao construir a requisição (erro de programação)."""


class TransportContractWarning(RuntimeWarning):
    """Transporte violou o contrato de devolver dados ou erro."""
