"""A named collection of meshes."""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np

from yukiengine.mesh import Mesh


class Model:
    """Meshes grouped under one name; they are created with the model."""

    def __init__(self, name: str, meshes: Mapping[str, Optional[Mesh]]) -> None:
        self.name = name
        self.meshes: dict[str, Optional[Mesh]] = dict(meshes)
        self.model_matrix = np.identity(4)
        self.create()

    def get_mesh(self, name: str) -> Optional[Mesh]:
        """The mesh called ``name``, or None."""
        return self.meshes.get(name)

    def create(self) -> None:
        for mesh in self.meshes.values():
            if mesh is not None:
                mesh.create()

    def destroy(self) -> None:
        for mesh in self.meshes.values():
            if mesh is not None:
                mesh.destroy()

    def __enter__(self) -> Model:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()