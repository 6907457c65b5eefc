"""
objmesh – загрузчик OBJ‑подмножества (v / vn / f) в буферы,
готовые к выгрузке в GPU.
"""

from objmesh.utils import logger, Config
from objmesh.loader import (
    ObjLoader,
    VertexLayout,
    ObjLoadError,
    SourceUnavailable,
    ObjParseError,
    InvalidFieldCount,
    MalformedNumber,
    NumberOutOfRange,
    AttributeCountMismatch,
    FaceIndexOutOfRange,
)
from objmesh.mesh import Mesh
from objmesh.graphics import BufferBackend

__version__ = "1.0.0"


def load_obj(path, **options) -> Mesh:
    """Короткий путь: `objmesh.load_obj("cube.obj", layout="segmented")`."""
    return ObjLoader(**options).load(path)


__all__ = [
    "load_obj",
    "ObjLoader",
    "VertexLayout",
    "Mesh",
    "Config",
    "BufferBackend",
    "ObjLoadError",
    "SourceUnavailable",
    "ObjParseError",
    "InvalidFieldCount",
    "MalformedNumber",
    "NumberOutOfRange",
    "AttributeCountMismatch",
    "FaceIndexOutOfRange",
]
