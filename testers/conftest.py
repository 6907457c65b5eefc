# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бэкенд для Mesh.upload() и фикстура,
записывающая OBJ‑текст во временный файл.
"""

import ctypes
from typing import Any, Tuple
import pytest

from objmesh.graphics.backend import BufferBackend


# ----------------------------------------------------------------------
# MockBackend – реализует BufferBackend, записывая вызовы.
# ----------------------------------------------------------------------
class MockBackend(BufferBackend):
    """Каждый метод только записывает вызов в `self.calls`."""

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        self._resources: list[Any] = []

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        self._record("create_buffer", data, usage)
        ptr = ctypes.c_void_p(0xB0B0 + len(self._resources))
        self._resources.append(ptr)
        return ptr

    def release_resource(self, resource: Any) -> None:
        self._record("release_resource", resource)
        self._resources.remove(resource)

    # -----------------------------------------------------------------
    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """Сколько раз был вызван метод `name`."""
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


# ----------------------------------------------------------------------
TRIANGLE_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
vn 0 0 1
vn 0 0 1
f 1 2 3
"""


@pytest.fixture
def obj_file(tmp_path):
    """Фабрика: obj_file(text, name="mesh.obj") → путь к файлу."""
    def _write(text: str, name: str = "mesh.obj"):
        path = tmp_path / name
        # builtin open (not Path.open), so tests that track Path.open
        # only see the loader's own opens
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path
    return _write


@pytest.fixture
def triangle_obj(obj_file):
    return obj_file(TRIANGLE_OBJ, "triangle.obj")
