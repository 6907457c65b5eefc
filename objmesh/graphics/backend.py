"""
Абстрактный интерфейс бекенда, которому Mesh отдаёт свои буферы.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class BufferBackend(ABC):
    """Минимум, нужный Mesh.upload()/Mesh.release()."""

    @abstractmethod
    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        """usage: "vertex" | "index" | "default"."""
        pass

    @abstractmethod
    def release_resource(self, resource: Any) -> None:
        pass
