"""
OpenGL‑бекенд: создаёт VBO/EBO через PyOpenGL.
Контекст OpenGL должен быть создан вызывающей стороной.
"""

from typing import Any

from OpenGL import GL

from objmesh.graphics.backend import BufferBackend
from objmesh.utils.logger import logger, gl_check_error

_TARGETS = {
    "vertex": GL.GL_ARRAY_BUFFER,
    "index": GL.GL_ELEMENT_ARRAY_BUFFER,
    "default": GL.GL_ARRAY_BUFFER,
}


class GLBuffer:
    """GL‑имя буфера + цель привязки."""

    __slots__ = ("name", "target", "size")

    def __init__(self, name: int, target: int, size: int):
        self.name = name
        self.target = target
        self.size = size

    def __repr__(self) -> str:
        return f"GLBuffer(name={self.name}, size={self.size})"


class GLBackend(BufferBackend):
    """Выгружает буферы Mesh в GL_STATIC_DRAW‑буферы."""

    def __init__(self):
        self._buffers = []

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        try:
            target = _TARGETS[usage]
        except KeyError:
            raise ValueError(f"[GLBackend] Unknown buffer usage: {usage}") from None

        name = GL.glGenBuffers(1)
        GL.glBindBuffer(target, name)
        GL.glBufferData(target, len(data), data, GL.GL_STATIC_DRAW)
        GL.glBindBuffer(target, 0)
        if not gl_check_error(f"create_buffer({usage})", GL):
            raise RuntimeError(f"[GLBackend] Failed to create {usage} buffer")

        buf = GLBuffer(int(name), target, len(data))
        self._buffers.append(buf)
        logger.debug(f"[GLBackend] Created {usage} buffer {buf}")
        return buf

    def release_resource(self, resource: Any) -> None:
        if resource in self._buffers:
            self._buffers.remove(resource)
        GL.glDeleteBuffers(1, [resource.name])

    def shutdown(self) -> None:
        """Удалить все ещё живые буферы."""
        for buf in list(self._buffers):
            self.release_resource(buf)
