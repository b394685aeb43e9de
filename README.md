# replicator

Building blocks for a small 3D engine, written on top of numpy.

## Modules

- `replicator.matrix_op` – 4×4 matrices: `scale` (one factor or three),
  `translation`, `rotate_x`, `rotate_y`, `rotate_z`, `rotate` (any axis,
  normalised first; a zero axis raises `ValueError`), `orthographic`,
  `perspective`, and `format_matrix`, which renders a matrix one row per
  line as `[ 1 0 0 0 ]`.
- `replicator.transform` – `Transform`, holding a translation, a rotation
  quaternion and per-axis scale factors. It offers `local_matrix()`
  (translation × rotation × scale), local rotations (`rotate_x`,
  `rotate_y`, `rotate_z`, `rotate`), global rotations (`rotate_x_global`,
  `rotate_y_global`, `rotate_z_global`, `rotate_global`), `translate`
  (along the rotated axes), `translate_global` and `scale`. These methods
  return the transform, so calls can be chained. A `global_matrix`
  attribute holds the last computed world matrix. Quaternion helpers
  ordered `(w, x, y, z)`: `quat_multiply`, `angle_axis`, `quat_to_matrix`.
- `replicator.mesh` – `MeshBuilder` collects vertices, colours, normals,
  texture coordinates and indices (`add_vertex`, `add_color`,
  `add_normal`, `add_texcoord`, `add_index`, and the `clear_*` methods).
  It adds the primitives `rect`, `cube`, `circle`, `cylinder` and
  `icosphere`. `build()` produces a `Mesh`; when no indices were added,
  every vertex is used in order. `bounding_box(transform)` returns a
  `Box` around the transformed vertices. A `Mesh` holds numpy arrays.
  Attribute counts that differ from the vertex count, other than zero,
  raise `MeshCreationError`.
- `replicator.geometry` – axis-aligned `Box` (`min`, `max`, `width()`,
  `height()`, `length()`, `scale(s)`) and `Plane` (`position`, `normal`).
  `Box()` with no corners is the reversed infinite box.
- `replicator.material` – `Material` with ambient, diffuse and specular
  colours, shininess, a `twosided` flag and ambient, diffuse and specular
  texture lists. `Material.from_color` scales one base colour per
  component.
- `replicator.lights` – `LightType`, `ShaderLight`, `LightColor`,
  `DirectionalLight`, `PointLight` and `Spotlight`. A `Spotlight`'s inner
  angle defaults to its outer angle.
- `replicator.input` – the `Key`, `MouseButton` and `InputEventType`
  enumerations.
- `replicator.action` – `ActionType` and `ActionEvent`.
- `replicator.state` – the `State` base class, whose callbacks
  (`on_start`, `update`, `on_close`, `on_action`, `on_mouse_move`) return a
  `Transition`. There is also `DeltaTime`.
- `replicator.world` – a `World` tree of `SceneObject`s, with
  `create_object`, `get_object` and `root`. The `projection_matrix` and
  `camera` attributes are set directly. `view_matrix()` returns the inverse
  of the camera's accumulated transform; with no camera set, it logs a
  warning and returns the identity. `drawables()` yields
  `(id, object, model matrix)` for objects that have both a mesh and a
  shader program, depth first.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from replicator.matrix_op import perspective, format_matrix
from replicator.mesh import MeshBuilder
from replicator.transform import Transform

builder = MeshBuilder()
builder.cube(2.0, (0.0, 0.0, 0.0))
builder.icosphere(1.0, 2, (3.0, 0.0, 0.0))
mesh = builder.build()

transform = Transform()
transform.scale(2.0).rotate_y(0.5).translate_global(1.0, 0.0, -5.0)
print(format_matrix(transform.local_matrix()))

box = builder.bounding_box(transform.local_matrix())
print(box.width(), box.height(), box.length())

projection = perspective(1.0, 16 / 9, -0.1, -100.0)
```

Angles are in radians. Matrices are numpy arrays of shape `(4, 4)`
indexed `[row, column]`, so a point `p` is transformed with `matrix @ p`.

## What it does not do

This package computes geometry and scene data only. It does not open
windows, read keyboard or mouse input, or run an engine loop. It does not
talk to a graphics API. Meshes are not uploaded to a GPU, shaders are not
compiled, textures are not loaded from image files, and model files are
not imported. `World.drawables()` and `World.view_matrix()` supply what a
renderer would need, but no renderer is included.