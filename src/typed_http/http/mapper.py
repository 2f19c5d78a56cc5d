"""Mapeamento da resposta bruta do transporte para um Outcome tipado."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import TypeVar

import httpx
from pydantic import ValidationError

from ..models import (
    DecodeError,
    Error,
    Outcome,
    Result,
    TransportContractWarning,
    TransportError,
    UnknownError,
)
from ..utils import get_logger
from .codec import type_adapter
from .transport import is_cancelled

logger = get_logger(__name__)

T = TypeVar("T")

ResponseMapperFn = Callable[
    [bytes | None, httpx.Response | None, BaseException | None], Outcome[T]
]


class ResponseMapper:
    """Converte o trio (dados, resposta, erro) em Result ou Error."""

    def map(
        self,
        data: bytes | None,
        response: httpx.Response | None,
        error: BaseException | None,
        target_type: type[T],
        override: ResponseMapperFn[T] | None = None,
    ) -> Outcome[T] | None:
        """
        Aplica a política de decodificação.

        Args:
            data: Corpo bruto da resposta
            response: Metadados da resposta HTTP
            error: Erro reportado pelo transporte
            target_type: Tipo em que o corpo JSON é decodificado
            override: Função que substitui integralmente esta política

        Returns:
            Outcome a ser entregue, ou None se a requisição foi cancelada
        """
        if override is not None:
            return override(data, response, error)

        if error is not None:
            if is_cancelled(error):
                return None
            logger.warning(f"Erro de transporte: {error!r}")
            return Error(TransportError(error))

        if data is not None:
            return self.decode(data, target_type)

        logger.error("Transporte não devolveu dados nem erro")
        warnings.warn(
            "transport returned neither data nor error",
            TransportContractWarning,
            stacklevel=2,
        )
        return Error(UnknownError())

    @staticmethod
    def decode(data: bytes, target_type: type[T]) -> Outcome[T]:
        """Decodifica JSON em target_type, devolvendo DecodeError em caso de falha."""
        type_name = getattr(target_type, "__name__", repr(target_type))
        try:
            value = type_adapter(target_type).validate_json(data, strict=True)
        except ValidationError as e:
            logger.debug(f"Falha ao decodificar {type_name}: {e}")
            return Error(
                DecodeError(f"could not decode response as {type_name}: {e}")
            )
        return Result(value)
