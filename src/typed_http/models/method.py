"""Métodos HTTP suportados."""

from enum import Enum


class HttpMethod(Enum):
    """Verbos HTTP aceitos pelo construtor de requisições."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    HEAD = "HEAD"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
