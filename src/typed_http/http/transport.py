"""Capacidade de transporte: envia o descritor e reporta (dados, resposta, erro)."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol

import httpx

from ..core.config import ClientConfig
from ..models import RequestCancelled, RequestDescriptor
from ..utils import get_logger

logger = get_logger(__name__)

CompletionHandler = Callable[
    [bytes | None, httpx.Response | None, BaseException | None], None
]


def is_cancelled(error: BaseException) -> bool:
    """Indica se o erro reportado representa um cancelamento."""
    return isinstance(error, (RequestCancelled, asyncio.CancelledError))


class Transport(Protocol):
    async def perform(
        self, request: RequestDescriptor, completion: CompletionHandler
    ) -> None: ...


class HttpxTransport:
    """Transporte baseado em httpx.AsyncClient."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ):
        """
        Args:
            client: Cliente httpx compartilhado (um por requisição se None)
            config: Configuração com os timeouts
        """
        self.client = client
        self.config = config or ClientConfig()

    async def perform(
        self, request: RequestDescriptor, completion: CompletionHandler
    ) -> None:
        """
        Executa a requisição e chama completion exatamente uma vez.

        Em caso de cancelamento, reporta RequestCancelled e propaga o
        cancelamento para a task.
        """
        try:
            response = await self._send(request)
        except asyncio.CancelledError as e:
            logger.debug(f"Requisição cancelada: {request!r}")
            completion(None, None, RequestCancelled(e))
            raise
        except httpx.HTTPError as e:
            completion(None, None, e)
            return

        logger.debug(f"Resposta de {request.url} - Status: {response.status_code}")
        completion(response.content, response, None)

    async def _send(self, request: RequestDescriptor) -> httpx.Response:
        if self.client is not None:
            return await self._send_with(self.client, request)

        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            return await self._send_with(client, request)

    async def _send_with(
        self, client: httpx.AsyncClient, request: RequestDescriptor
    ) -> httpx.Response:
        return await client.request(
            request.method.value,
            request.url,
            headers=dict(request.headers),
            content=request.body,
            timeout=self.config.timeout,
        )
