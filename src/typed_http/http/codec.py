"""Adaptadores pydantic compartilhados para codificar e decodificar JSON."""

import math
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter


@lru_cache(maxsize=256)
def type_adapter(target_type: Any) -> TypeAdapter:
    return TypeAdapter(target_type)


def ensure_finite(value: Any) -> None:
    """
    Rejeita NaN e infinito em qualquer nível do valor já convertido.

    Raises:
        ValueError: Se algum float não for finito
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"float não finito não representável em JSON: {value}")
    elif isinstance(value, dict):
        for item in value.values():
            ensure_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            ensure_finite(item)
