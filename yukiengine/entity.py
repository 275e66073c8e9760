"""Scene entities with overridable life-cycle hooks."""

from __future__ import annotations

from collections import Counter
from typing import Any, Optional

import numpy as np

from yukiengine.mesh import Mesh
from yukiengine.model import Model


class Entity:
    """A named object in a scene, optionally drawn with a model.

    The life-cycle methods run the matching ``on_*`` hook, which subclasses
    override, and then do the entity's own work. The default hooks count how
    often each stage has run in ``hook_counts``.
    """

    def __init__(self, name: str, model: Optional[Model] = None) -> None:
        self._name = name
        self.model = model
        self.position = np.zeros(3)
        self.hook_counts: Counter[str] = Counter()

    @property
    def name(self) -> str:
        return self._name

    def create(self) -> None:
        """Run the create hook, then create the model's meshes."""
        self.on_create()
        if self.model is not None:
            self.model.create()

    def awake(self) -> None:
        self.on_awake()

    def update(self) -> None:
        self.on_update()

    def render(self, camera: Any) -> list[Mesh]:
        """Run the render hook and return the model's meshes drawn with ``camera``."""
        self.on_render()
        if self.model is None:
            return []
        return [mesh for mesh in self.model.meshes.values() if mesh is not None]

    def destroy(self) -> None:
        self.on_destroy()

    def on_create(self) -> None:
        """Called when the entity is created."""
        self.hook_counts["create"] += 1

    def on_awake(self) -> None:
        """Called when the entity wakes up."""
        self.hook_counts["awake"] += 1

    def on_update(self) -> None:
        """Called once per frame."""
        self.hook_counts["update"] += 1

    def on_render(self) -> None:
        """Called before the entity is drawn."""
        self.hook_counts["render"] += 1

    def on_destroy(self) -> None:
        """Called when the entity is destroyed."""
        self.hook_counts["destroy"] += 1