# objmesh/loader/records.py
"""
Записи OBJ‑файла (v / vn / f) и их разбор.

Каждому ключевому слову соответствует RecordType: допустимое число
полей + декодер. Проверка количества полей живёт в одном месте
(`RecordType.check`), поэтому правило N ∈ {3, 4, 6, 7} для `v`
тестируется отдельно от самих декодеров.
"""

from typing import Callable, Iterator, Optional, Sequence, Tuple

from objmesh.loader.errors import InvalidFieldCount
from objmesh.loader.numeric import to_float, to_int


class _Record:
    """Неизменяемый кортеж значений одной строки."""

    __slots__ = ("_values",)

    def __init__(self, values):
        self._values = tuple(values)

    @property
    def values(self) -> tuple:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __getitem__(self, i):
        return self._values[i]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._values}"


class PositionRecord(_Record):
    """x, y, z, w (+ r, g, b, если цвет загружается)."""

    __slots__ = ()

    @property
    def x(self) -> float:
        return self._values[0]

    @property
    def y(self) -> float:
        return self._values[1]

    @property
    def z(self) -> float:
        return self._values[2]

    @property
    def w(self) -> float:
        return self._values[3]

    @property
    def color(self) -> Optional[Tuple[float, float, float]]:
        """(r, g, b) или None."""
        if len(self._values) == 7:
            return self._values[4:7]
        return None


class NormalRecord(_Record):
    __slots__ = ()

    @property
    def x(self) -> float:
        return self._values[0]

    @property
    def y(self) -> float:
        return self._values[1]

    @property
    def z(self) -> float:
        return self._values[2]


class FaceRecord(_Record):
    """Три 0‑based порядковых номера вершин треугольника."""

    __slots__ = ()

    @property
    def indices(self) -> Tuple[int, int, int]:
        return self._values


# ----------------------------------------------------------------------
# Декодеры: получают поля без ключевого слова, число уже проверено
# ----------------------------------------------------------------------
def _decode_position(fields: Sequence[str], load_color_data: bool) -> PositionRecord:
    n = len(fields)
    values = [to_float(fields[i]) for i in range(3)]
    i = 3

    # w
    if n in (3, 6):
        values.append(1.0)
    else:
        values.append(to_float(fields[i]))
        i += 1

    # r, g, b – конвертируются всегда, сохраняются только по флагу
    color = [to_float(token) for token in fields[i:]]
    if load_color_data:
        values.extend(color)

    return PositionRecord(values)


def _decode_normal(fields: Sequence[str], load_color_data: bool) -> NormalRecord:
    return NormalRecord(to_float(token) for token in fields)


def _decode_face(fields: Sequence[str], load_color_data: bool) -> FaceRecord:
    # OBJ индексирует вершины с единицы
    return FaceRecord(to_int(token) - 1 for token in fields)


class RecordType:
    """Ключевое слово + допустимые количества полей + декодер."""

    __slots__ = ("keyword", "counts", "expected", "decoder")

    def __init__(self, keyword: str, counts: Tuple[int, ...], expected: str,
                 decoder: Callable[[Sequence[str], bool], _Record]):
        self.keyword = keyword
        self.counts = counts
        self.expected = expected
        self.decoder = decoder

    def check(self, n: int) -> None:
        if n not in self.counts:
            raise InvalidFieldCount(self.keyword, self.expected, n)

    def parse(self, n: int, tokens: Sequence[str], load_color_data: bool = False) -> _Record:
        """`tokens[0]` – ключевое слово, `n` – число остальных токенов."""
        self.check(n)
        return self.decoder(tokens[1:n + 1], load_color_data)


POSITION = RecordType("v", (3, 4, 6, 7), "three, four, six or seven values", _decode_position)
NORMAL = RecordType("vn", (3,), "three values", _decode_normal)
FACE = RecordType("f", (3,), "three values", _decode_face)

RECORD_TYPES = {rt.keyword: rt for rt in (POSITION, NORMAL, FACE)}


def parse_position(n: int, tokens: Sequence[str], load_color_data: bool = False) -> PositionRecord:
    return POSITION.parse(n, tokens, load_color_data)


def parse_normal(n: int, tokens: Sequence[str]) -> NormalRecord:
    return NORMAL.parse(n, tokens)


def parse_face(n: int, tokens: Sequence[str]) -> FaceRecord:
    return FACE.parse(n, tokens)


def parse_record(tokens: Sequence[str], load_color_data: bool = False) -> Optional[_Record]:
    """Разобрать уже токенизированную строку.

    Возвращает None для неизвестного ключевого слова.
    """
    record_type = RECORD_TYPES.get(tokens[0])
    if record_type is None:
        return None
    return record_type.parse(len(tokens) - 1, tokens, load_color_data)
