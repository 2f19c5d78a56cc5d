"""Módulo core do cliente."""

from .config import ClientConfig

__all__ = ["ClientConfig"]
