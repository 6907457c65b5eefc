"""
Пакет mesh – геометрия, готовая к передаче рендеру.
"""

from objmesh.mesh.mesh import Mesh

__all__ = ["Mesh"]
