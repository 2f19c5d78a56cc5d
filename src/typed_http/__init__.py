"""Camada fina de requisições JSON tipadas sobre httpx."""

from .core import ClientConfig
from .http import (
    HttpClient,
    HttpxTransport,
    RequestBuilder,
    ResponseMapper,
    is_cancelled,
)
from .models import (
    DecodeError,
    Error,
    HttpCoreError,
    HttpMethod,
    InvalidRequestError,
    Outcome,
    RequestCancelled,
    RequestDescriptor,
    Result,
    TransportError,
    UnknownError,
)

__version__ = "0.1.0"

__all__ = [
    # Cliente
    "HttpClient",
    "RequestBuilder",
    "ResponseMapper",
    "HttpxTransport",
    "is_cancelled",
    # Configuração
    "ClientConfig",
    # Modelos
    "HttpMethod",
    "RequestDescriptor",
    "Outcome",
    "Result",
    "Error",
    # Erros
    "HttpCoreError",
    "TransportError",
    "DecodeError",
    "UnknownError",
    "InvalidRequestError",
    "RequestCancelled",
]
