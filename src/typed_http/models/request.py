"""Descritor imutável de uma requisição."""

from collections.abc import Mapping
from dataclasses import dataclass

from .method import HttpMethod


@dataclass(frozen=True)
class RequestDescriptor:
    """Requisição pronta para ser entregue ao transporte."""

    url: str
    method: HttpMethod
    headers: Mapping[str, str]
    body: bytes | None = None

    def __repr__(self) -> str:
        size = len(self.body) if self.body is not None else 0
        return f"<RequestDescriptor {self.method.value} {self.url} body={size}B>"
