"""Pytest configuration and fixtures for typed_http tests."""

import httpx
import pytest

from typed_http import RequestBuilder


@pytest.fixture
def builder() -> RequestBuilder:
    return RequestBuilder()


@pytest.fixture
def users_url() -> str:
    return "https://api.example.com/users"


@pytest.fixture
def json_response():
    """Fábrica de handlers do MockTransport que devolvem JSON fixo."""

    def factory(payload, status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)

        return handler

    return factory
