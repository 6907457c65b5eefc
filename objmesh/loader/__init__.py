"""
Пакет loader – разбор OBJ‑подмножества (v / vn / f) в буферы для рендера.
"""

from objmesh.loader.errors import (
    ObjLoadError,
    SourceUnavailable,
    ObjParseError,
    InvalidFieldCount,
    MalformedNumber,
    NumberOutOfRange,
    AttributeCountMismatch,
    FaceIndexOutOfRange,
)
from objmesh.loader.tokenizer import tokenize
from objmesh.loader.numeric import to_float, to_int
from objmesh.loader.records import (
    PositionRecord,
    NormalRecord,
    FaceRecord,
    RecordType,
    RECORD_TYPES,
    parse_position,
    parse_normal,
    parse_face,
    parse_record,
)
from objmesh.loader.assembler import VertexLayout, assemble_vertex_data, assemble_indices
from objmesh.loader.obj_loader import ObjLoader, ParseContext

__all__ = [
    "ObjLoader",
    "ParseContext",
    "VertexLayout",
    "tokenize",
    "to_float",
    "to_int",
    "PositionRecord",
    "NormalRecord",
    "FaceRecord",
    "RecordType",
    "RECORD_TYPES",
    "parse_position",
    "parse_normal",
    "parse_face",
    "parse_record",
    "assemble_vertex_data",
    "assemble_indices",
    "ObjLoadError",
    "SourceUnavailable",
    "ObjParseError",
    "InvalidFieldCount",
    "MalformedNumber",
    "NumberOutOfRange",
    "AttributeCountMismatch",
    "FaceIndexOutOfRange",
]
