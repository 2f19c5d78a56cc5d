"""Construção de requisições JSON."""

from types import MappingProxyType
from typing import Any

import httpx

from ..core.config import ClientConfig
from ..models import HttpMethod, InvalidRequestError, RequestDescriptor
from ..utils import get_logger
from .codec import ensure_finite, type_adapter

logger = get_logger(__name__)


class RequestBuilder:
    """Monta descritores de requisição com headers JSON fixos."""

    ALLOWED_SCHEMES = ("http", "https")

    def __init__(self, default_user_agent: str | None = None):
        """
        Args:
            default_user_agent: User-Agent usado quando a chamada não informa um
        """
        self.default_user_agent = default_user_agent

    def build(
        self,
        url: str,
        method: HttpMethod = HttpMethod.GET,
        body: Any = None,
        user_agent: str | None = None,
    ) -> RequestDescriptor:
        """
        Cria o descritor de uma requisição. Não faz nenhuma operação de rede.

        Args:
            url: URL absoluta (http ou https)
            method: Verbo HTTP (padrão: GET)
            body: Objeto serializável em JSON (None omite o corpo)
            user_agent: User-Agent desta requisição

        Returns:
            RequestDescriptor imutável

        Raises:
            InvalidRequestError: URL inválida ou corpo não serializável
        """
        self._validate_url(url)

        headers = {
            "Content-Type": ClientConfig.JSON_CONTENT_TYPE,
            "Accept": ClientConfig.JSON_CONTENT_TYPE,
        }
        agent = user_agent if user_agent is not None else self.default_user_agent
        if agent is not None:
            headers["User-Agent"] = agent

        payload = self._serialize(body) if body is not None else None

        request = RequestDescriptor(
            url=url,
            method=method,
            headers=MappingProxyType(headers),
            body=payload,
        )
        logger.debug(f"Requisição construída: {request!r}")
        return request

    def _validate_url(self, url: str) -> None:
        """Garante que a URL é absoluta e usa um esquema suportado."""
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidRequestError(f"URL inválida: {url!r}") from e

        if parsed.scheme not in self.ALLOWED_SCHEMES or not parsed.host:
            raise InvalidRequestError(f"URL inválida: {url!r}")

    @staticmethod
    def _serialize(body: Any) -> bytes:
        """Serializa o corpo em JSON conforme o tipo declarado do objeto."""
        try:
            adapter = type_adapter(type(body))
            payload = adapter.dump_json(body)
            ensure_finite(adapter.dump_python(body))
        # PydanticSchemaGenerationError é TypeError; PydanticSerializationError é ValueError
        except (TypeError, ValueError) as e:
            raise InvalidRequestError(
                f"Corpo não serializável em JSON ({type(body).__name__}): {e}"
            ) from e
        return payload
