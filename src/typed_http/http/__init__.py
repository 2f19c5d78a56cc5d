"""Módulo HTTP: construção, execução e mapeamento de requisições."""

from .builder import RequestBuilder
from .client import HttpClient
from .mapper import ResponseMapper, ResponseMapperFn
from .transport import CompletionHandler, HttpxTransport, Transport, is_cancelled

__all__ = [
    "RequestBuilder",
    "ResponseMapper",
    "ResponseMapperFn",
    "HttpClient",
    "Transport",
    "HttpxTransport",
    "CompletionHandler",
    "is_cancelled",
]
