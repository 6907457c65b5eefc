"""
Графический слой – точка передачи буферов Mesh рендеру.

GLBackend импортируется явно (`objmesh.graphics.gl_backend`), чтобы
пакет работал и там, где нет libGL.
"""

from objmesh.graphics.backend import BufferBackend

__all__ = ["BufferBackend"]
