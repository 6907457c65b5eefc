# objmesh/loader/errors.py
"""
Иерархия ошибок загрузчика.

Любая ошибка прерывает загрузку целиком – частичного результата нет.
Ошибки формата (ObjParseError) создаются без контекста, а оркестратор
дописывает имя файла и номер строки через `locate()`.
"""

from typing import Optional


class ObjLoadError(Exception):
    """Базовый класс всех ошибок загрузки."""


class SourceUnavailable(ObjLoadError):
    """Файл нельзя открыть или чтение оборвалось на середине."""

    def __init__(self, source, reason: str):
        self.source = str(source)
        self.reason = reason
        super().__init__(f'Cannot read file "{self.source}": {reason}.')


class ObjParseError(ObjLoadError):
    """Ошибка формата. `filename`/`line_number` заполняются оркестратором."""

    def __init__(self, detail: str):
        self.detail = detail
        self.filename: Optional[str] = None
        self.line_number: Optional[int] = None
        super().__init__(detail)

    def locate(self, filename: str, line_number: Optional[int] = None) -> "ObjParseError":
        self.filename = filename
        self.line_number = line_number
        self.args = (str(self),)
        return self

    def __str__(self) -> str:
        if self.filename is None:
            return self.detail
        if self.line_number is None:
            return f'Error while parsing "{self.filename}": {self.detail}'
        return f'Error while parsing "{self.filename}", line {self.line_number}: {self.detail}'


class InvalidFieldCount(ObjParseError):
    def __init__(self, keyword: str, expected: str, found: int):
        self.keyword = keyword
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} in {keyword}-entry, got {found}.")


class MalformedNumber(ObjParseError):
    def __init__(self, token: str, kind: str = "a floating point number"):
        self.token = token
        super().__init__(f'Value "{token}" cannot be parsed as {kind}.')


class NumberOutOfRange(ObjParseError):
    def __init__(self, token: str, kind: str = "a float"):
        self.token = token
        super().__init__(f'Value "{token}" is out of the range that can be represented by {kind}.')


class AttributeCountMismatch(ObjParseError):
    """Inlined‑раскладка требует одинакового числа v и vn (строки нет)."""

    def __init__(self, positions: int, normals: int):
        self.positions = positions
        self.normals = normals
        super().__init__(
            f"Mismatch between number of vertices ({positions}) and normals ({normals})."
        )


class FaceIndexOutOfRange(ObjParseError):
    def __init__(self, index: int, vertex_count: int):
        # index – как в исходном тексте (1‑based)
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"Face references vertex {index}, but only {vertex_count} vertices are defined."
        )
