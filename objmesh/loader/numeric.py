# objmesh/loader/numeric.py
"""
Преобразование токенов в числа (float32 / int32 диапазоны).
"""

import re

import numpy as np

from objmesh.loader.errors import MalformedNumber, NumberOutOfRange

_INT32 = np.iinfo(np.int32)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INF_SPELLINGS = ("inf", "infinity")


def to_float(token: str) -> float:
    """Токен → float, значение обязано помещаться во float32."""
    # float() принимает "1_000" и не‑ASCII цифры, а формат – нет
    if "_" in token or not token.isascii():
        raise MalformedNumber(token)
    try:
        value = float(token)
    except ValueError:
        raise MalformedNumber(token) from None

    if np.isnan(value):
        return value
    if np.isinf(value):
        if token.strip().lstrip("+-").lower() in _INF_SPELLINGS:
            return value
        raise NumberOutOfRange(token)

    # округление до float32, как у stof: переполнение → inf, потеря → 0
    with np.errstate(over="ignore", under="ignore"):
        narrowed = np.float32(value)
    if np.isinf(narrowed) or (value != 0.0 and narrowed == 0.0):
        raise NumberOutOfRange(token)
    return value


def to_int(token: str) -> int:
    """Токен → int, значение обязано помещаться в int32."""
    if not _INT_RE.fullmatch(token):
        raise MalformedNumber(token, "an integer")
    value = int(token)
    if value < _INT32.min or value > _INT32.max:
        raise NumberOutOfRange(token, "an integer")
    return value
