# objmesh/loader/tokenizer.py
"""
Разбиение строки на токены по символу‑разделителю.
"""

from typing import List, Optional


def _is_separator(ch: str, separator: Optional[str]) -> bool:
    if separator is None:
        return ch.isspace()
    return ch == separator


def tokenize(line: str, separator: Optional[str] = None, allow_empty: bool = False) -> List[str]:
    """
    Разбить `line` на токены.

    * `separator=None` – любой пробельный символ (пробел, таб, '\\r'…).
    * `allow_empty=False` – подряд идущие разделители схлопываются.

    Последний токен добавляется только если он непустой – флаг
    `allow_empty` на него не влияет: ",a," → ["", "a"], а не ["", "a", ""].
    """
    if separator is not None and len(separator) != 1:
        raise ValueError("separator must be a single character")

    tokens = []
    start = 0
    length = 0
    for i, ch in enumerate(line):
        if _is_separator(ch, separator):
            if length > 0 or allow_empty:
                tokens.append(line[start:start + length])
            start = i + 1
            length = 0
        else:
            length += 1
    if length > 0:
        tokens.append(line[start:start + length])
    return tokens
