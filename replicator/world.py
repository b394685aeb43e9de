"""Scene graph of objects with optional meshes, shaders and transforms."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from replicator.mesh import Mesh

logger = logging.getLogger(__name__)

ObjectId = int


@dataclass(eq=False)
class SceneObject:
    """Node of the world tree.

    ``model_transform`` is ``None`` when the object adds no transform of its own.
    """

    parent: ObjectId
    children: list[ObjectId] = field(default_factory=list)
    mesh: Mesh | None = None
    shader_program: Any = None
    model_transform: np.ndarray | None = None

    def __post_init__(self) -> None:
        if self.model_transform is not None:
            self.model_transform = self._as_matrix(self.model_transform)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "model_transform" and value is not None:
            value = self._as_matrix(value)
        super().__setattr__(name, value)

    @staticmethod
    def _as_matrix(value) -> np.ndarray:
        matrix = np.asarray(value, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError("model transform must be a 4x4 matrix")
        return matrix.copy()

    @property
    def drawable(self) -> bool:
        """True when the object has both a mesh and a shader program."""
        return self.mesh is not None and self.shader_program is not None


class World:
    """Tree of scene objects rooted at an object that is its own parent."""

    def __init__(self) -> None:
        self._objects: dict[ObjectId, SceneObject] = {}
        self._next_id: ObjectId = 0
        self._root_id = self._allocate(SceneObject(parent=self._next_id))
        self.projection_matrix: np.ndarray = np.eye(4)
        self.camera: ObjectId | None = None
        self._warn_no_camera = True

    def _allocate(self, obj: SceneObject) -> ObjectId:
        obj_id = self._next_id
        self._objects[obj_id] = obj
        self._next_id += 1
        return obj_id

    def create_object(self, parent: ObjectId) -> ObjectId:
        """Create a child of ``parent`` and return its id."""
        parent_obj = self.get_object(parent)
        obj_id = self._allocate(SceneObject(parent=parent))
        parent_obj.children.append(obj_id)
        return obj_id

    def get_object(self, obj_id: ObjectId) -> SceneObject:
        """Return the object with the given id; raises KeyError if unknown."""
        try:
            return self._objects[obj_id]
        except KeyError:
            raise KeyError(f"no object with id {obj_id}") from None

    def root(self) -> ObjectId:
        """Id of the root object."""
        return self._root_id

    def view_matrix(self) -> np.ndarray:
        """Inverse of the camera's accumulated transform, identity without a camera."""
        view = np.eye(4)
        if self.camera is not None:
            current = self.camera
            while current != self._root_id:
                obj = self.get_object(current)
                if obj.model_transform is not None:
                    view = view @ obj.model_transform
                current = obj.parent
            self._warn_no_camera = True
        elif self._warn_no_camera:
            logger.warning("No camera set!")
            self._warn_no_camera = False
        return np.linalg.inv(view)

    def drawables(self) -> Iterator[tuple[ObjectId, SceneObject, np.ndarray]]:
        """Yield ``(id, object, model matrix)`` for drawable objects, depth first.

        Children are visited last-added first; objects without a transform
        get the identity matrix.
        """
        stack = [self._root_id]
        while stack:
            obj_id = stack.pop()
            obj = self._objects[obj_id]
            if obj.drawable:
                transform = (
                    np.eye(4) if obj.model_transform is None else obj.model_transform
                )
                yield obj_id, obj, transform
            stack.extend(obj.children)