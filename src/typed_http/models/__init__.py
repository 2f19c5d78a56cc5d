"""Modelos de dados das requisições e respostas."""

from .errors import (
    DecodeError,
    HttpCoreError,
    InvalidRequestError,
    RequestCancelled,
    TransportContractWarning,
    TransportError,
    UnknownError,
)
from .method import HttpMethod
from .outcome import Error, Outcome, Result
from .request import RequestDescriptor

__all__ = [
    "HttpMethod",
    "RequestDescriptor",
    "Outcome",
    "Result",
    "Error",
    "HttpCoreError",
    "TransportError",
    "DecodeError",
    "UnknownError",
    "InvalidRequestError",
    "RequestCancelled",
    "TransportContractWarning",
]
