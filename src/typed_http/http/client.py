"""Orquestração: executa descritores e entrega o Outcome no loop de callback."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.config import ClientConfig
from ..models import HttpMethod, Outcome, RequestDescriptor
from ..utils import get_logger, setup_logging
from .builder import RequestBuilder
from .mapper import ResponseMapper, ResponseMapperFn
from .transport import HttpxTransport, Transport

logger = get_logger(__name__)

T = TypeVar("T")


class HttpClient:
    """
    Cliente JSON tipado.

    Cada execução roda como uma task asyncio; o callback do chamador é
    sempre reagendado no loop de callback, nunca executado dentro da task.
    Não há retry.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        config: ClientConfig | None = None,
        mapper: ResponseMapper | None = None,
        callback_loop: asyncio.AbstractEventLoop | None = None,
    ):
        """
        Args:
            transport: Transporte (usa HttpxTransport se None)
            config: Configuração do cliente
            mapper: Mapeador de respostas padrão
            callback_loop: Loop onde os callbacks são entregues
                (padrão: loop em execução no momento do execute)
        """
        self.config = config or ClientConfig()
        if self.config.log_level is not None:
            setup_logging(self.config.log_level, log_file=self.config.log_file)

        self.transport = transport or HttpxTransport(config=self.config)
        self.builder = RequestBuilder(default_user_agent=self.config.user_agent)
        self.mapper = mapper or ResponseMapper()
        self.callback_loop = callback_loop
        self._tasks: set[asyncio.Task] = set()

    def __repr__(self) -> str:
        return f"<HttpClient transport={type(self.transport).__name__}>"

    def build_request(
        self,
        url: str,
        method: HttpMethod = HttpMethod.GET,
        body: Any = None,
        user_agent: str | None = None,
    ) -> RequestDescriptor:
        """Atalho para RequestBuilder.build."""
        return self.builder.build(url, method, body=body, user_agent=user_agent)

    def execute(
        self,
        request: RequestDescriptor,
        target_type: type[T],
        on_complete: Callable[[Outcome[T]], None],
        response_mapper: ResponseMapperFn[T] | None = None,
    ) -> asyncio.Task:
        """
        Inicia a requisição imediatamente e retorna sem aguardá-la.

        Args:
            request: Descritor da requisição
            target_type: Tipo em que o corpo é decodificado
            on_complete: Callback chamado uma vez com o Outcome
                (nunca chamado se a requisição for cancelada)
            response_mapper: Substitui o mapeamento padrão nesta chamada

        Returns:
            Task da operação (cancelá-la suprime o callback)
        """
        loop = asyncio.get_running_loop()
        callback_loop = self.callback_loop or loop

        task = loop.create_task(
            self._run(request, target_type, on_complete, response_mapper, callback_loop)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def fetch(
        self,
        request: RequestDescriptor,
        target_type: type[T],
        response_mapper: ResponseMapperFn[T] | None = None,
    ) -> Outcome[T]:
        """
        Executa a requisição e aguarda o Outcome entregue.

        Raises:
            asyncio.CancelledError: Se a requisição for cancelada
        """
        loop = asyncio.get_running_loop()
        delivered: asyncio.Future = loop.create_future()

        def resolve(outcome: Outcome[T]) -> None:
            if not delivered.done():
                delivered.set_result(outcome)

        def on_complete(outcome: Outcome[T]) -> None:
            loop.call_soon_threadsafe(resolve, outcome)

        scheduled = await self.execute(
            request, target_type, on_complete, response_mapper
        )
        if not scheduled:
            raise asyncio.CancelledError(f"Requisição cancelada: {request!r}")
        return await delivered

    async def _run(
        self,
        request: RequestDescriptor,
        target_type: type[T],
        on_complete: Callable[[Outcome[T]], None],
        response_mapper: ResponseMapperFn[T] | None,
        callback_loop: asyncio.AbstractEventLoop,
    ) -> bool:
        """Retorna True se um Outcome foi agendado para entrega."""
        scheduled = False

        def completion(data, response, error) -> None:
            nonlocal scheduled
            outcome = self.mapper.map(
                data, response, error, target_type, override=response_mapper
            )
            if outcome is None:
                return
            logger.debug(
                f"{request.method.value} {request.url} -> {type(outcome).__name__}"
            )
            callback_loop.call_soon_threadsafe(on_complete, outcome)
            scheduled = True

        logger.debug(f"Enviando {request!r}")
        await self.transport.perform(request, completion)
        return scheduled
