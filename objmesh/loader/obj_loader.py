# -*- coding: utf-8 -*-
"""
Загрузчик OBJ‑подмножества: v / vn / f (только треугольники).

Загрузка идёт в два этапа:

1️⃣  **Скан** – файл читается построчно; пустые строки и строки,
    начинающиеся с '#', пропускаются (но номер строки растёт).
    Остальные строки токенизируются и разбираются по таблице
    RECORD_TYPES.  Неизвестные ключевые слова молча игнорируются.
    Первая же ошибка прерывает загрузку.

2️⃣  **Сборка** – записи v / vn укладываются в плоский float32‑буфер
    (inlined или segmented), индексы граней – в uint32‑буфер.

Всё состояние одной загрузки живёт в `_LoadState`, который создаётся
заново при каждом вызове, поэтому один ObjLoader можно переиспользовать.
"""

from collections import Counter
from pathlib import Path
from typing import Iterable, Optional

from objmesh.loader.assembler import VertexLayout, assemble_indices, assemble_vertex_data
from objmesh.loader.errors import FaceIndexOutOfRange, ObjLoadError, ObjParseError, SourceUnavailable
from objmesh.loader.records import FaceRecord, NormalRecord, PositionRecord, parse_record
from objmesh.loader.tokenizer import tokenize
from objmesh.mesh.mesh import Mesh
from objmesh.utils import Profiler, logger

COMMENT_MARKER = "#"


class ParseContext:
    """Где мы сейчас: имя файла + номер строки (1‑based)."""

    __slots__ = ("filename", "line_number")

    def __init__(self, filename: str):
        self.filename = filename
        self.line_number = 0

    def __repr__(self) -> str:
        return f"ParseContext({self.filename!r}, line={self.line_number})"


class _LoadState:
    """Накопленные записи одной загрузки."""

    def __init__(self, filename: str):
        self.ctx = ParseContext(filename)
        self.positions = []
        self.normals = []
        self.faces = []
        self.face_lines = []
        self.ignored = Counter()


class ObjLoader:
    """
    Загрузчик OBJ → Mesh.

    Параметры фиксируются при создании:

    * layout           – VertexLayout.INLINED (v,n,v,n…) или SEGMENTED (v…,n…)
    * load_color_data  – сохранять ли r,g,b из строк `v`
    * validate_indices – проверять ли, что грани ссылаются на существующие вершины
    * inline_normals   – булев синоним layout (True → INLINED)
    """

    def __init__(self,
                 layout=VertexLayout.INLINED,
                 load_color_data: bool = False,
                 validate_indices: bool = True,
                 inline_normals: Optional[bool] = None):
        if inline_normals is not None:
            layout = VertexLayout.INLINED if inline_normals else VertexLayout.SEGMENTED
        self.layout = VertexLayout.from_name(layout)
        self.load_color_data = bool(load_color_data)
        self.validate_indices = bool(validate_indices)

    @classmethod
    def from_config(cls, config) -> "ObjLoader":
        """Создать загрузчик из objmesh.utils.Config."""
        return cls(**config.loader_options())

    @property
    def inline_normals(self) -> bool:
        return self.layout is VertexLayout.INLINED

    # -----------------------------------------------------------------
    # Публичный API
    # -----------------------------------------------------------------
    def load(self, path) -> Mesh:
        """Прочитать файл и вернуть Mesh. Файл закрывается при любом исходе."""
        path = Path(path)
        filename = str(path)
        with Profiler(f"ObjLoader.load({filename})"):
            try:
                try:
                    with path.open("r", encoding="utf-8", newline="\n") as f:
                        state = self._scan(f, filename)
                except OSError as exc:
                    raise SourceUnavailable(filename, exc.strerror or str(exc)) from exc
                except UnicodeDecodeError as exc:
                    raise SourceUnavailable(filename, str(exc)) from exc
                return self._assemble(state, name=path.stem)
            except ObjLoadError as exc:
                logger.error(f"[ObjLoader] {exc}")
                raise

    def loads(self, text: str, name: str = "<string>") -> Mesh:
        """То же самое для текста в памяти."""
        try:
            state = self._scan(text.split("\n"), name)
            return self._assemble(state, name=name)
        except ObjLoadError as exc:
            logger.error(f"[ObjLoader] {exc}")
            raise

    # -----------------------------------------------------------------
    # Этап 1: скан
    # -----------------------------------------------------------------
    def _scan(self, lines: Iterable[str], filename: str) -> _LoadState:
        state = _LoadState(filename)
        for line in lines:
            state.ctx.line_number += 1
            line = line.rstrip("\r\n")
            if not line or line[0] == COMMENT_MARKER:
                continue
            try:
                self._parse_line(line, state)
            except ObjParseError as exc:
                raise exc.locate(state.ctx.filename, state.ctx.line_number)
        return state

    def _parse_line(self, line: str, state: _LoadState) -> None:
        tokens = tokenize(line)
        if not tokens:
            return

        record = parse_record(tokens, self.load_color_data)
        if isinstance(record, PositionRecord):
            state.positions.append(record)
        elif isinstance(record, NormalRecord):
            state.normals.append(record)
        elif isinstance(record, FaceRecord):
            state.faces.append(record)
            state.face_lines.append(state.ctx.line_number)
        else:
            state.ignored[tokens[0]] += 1

    # -----------------------------------------------------------------
    # Этап 2: сборка
    # -----------------------------------------------------------------
    def _assemble(self, state: _LoadState, name: str) -> Mesh:
        filename = state.ctx.filename
        if self.validate_indices:
            self._check_face_indices(state)

        try:
            vertex_data = assemble_vertex_data(state.positions, state.normals, self.layout)
        except ObjParseError as exc:
            raise exc.locate(filename)
        indices = assemble_indices(state.faces)

        if state.ignored:
            skipped = ", ".join(f"{k} x{n}" for k, n in sorted(state.ignored.items()))
            logger.debug(f"[ObjLoader] {filename}: ignored records: {skipped}")
        logger.info(
            f"[ObjLoader] Loaded {filename}: {len(state.positions)} vertices, "
            f"{len(state.normals)} normals, {len(state.faces)} triangles "
            f"({self.layout.value})"
        )
        return Mesh(vertex_data, indices, name=name)

    @staticmethod
    def _check_face_indices(state: _LoadState) -> None:
        count = len(state.positions)
        for face, line_number in zip(state.faces, state.face_lines):
            for index in face:
                if not 0 <= index < count:
                    raise FaceIndexOutOfRange(index + 1, count).locate(state.ctx.filename, line_number)
