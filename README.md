# ecsengine

A compact entity-component-system (ECS) engine core for simulations and games,
written in pure Python with no third-party dependencies.

## What it contains

- `ecsengine.vector`: immutable `Vector3` (with `length`, `normalized`, `dot`,
  `cross`, `copy`, arithmetic with vectors and scalars, and the constants
  `ZERO`, `RIGHT`, `LEFT`, `UP`, `DOWN`, `BACKWARD`, `FORWARD`) and `Vector2`.
- `ecsengine.angle`: `Angle`, stored in degrees, with `as_degrees()`,
  `as_radians()`, comparison and addition with plain numbers, and `deg(value)`.
- `ecsengine.quaternion`: `Quaternion` (identity by default) and
  `Quaternion.from_axis_angle(axis, angle)`, where the angle is an `Angle` or a
  number of degrees.
- `ecsengine.matrix4`: an immutable row-major `Matrix4` using the row-vector
  convention. Matrices multiply with `@`. Builders: `identity`, `from_position`,
  `from_rotation`, `from_scale`, `from_transform`, `from_perspective`,
  `from_look_at`. Also `inverted()`, `transform_point(vector)` and `to_list()`.
- `ecsengine.components`: `Component` base class and the components
  `Transform`, `Camera`, `Collider`, `Mesh`, `Physics`, `Parent`, `Matrices` and
  `Spin`. `Mesh.create_triangle`, `Mesh.create_cube` and `Mesh.create_skybox`
  build ready-made geometry (interleaved position, normal, colour and texture
  coordinates; the skybox holds positions only).
- `ecsengine.color`: `Color`, an RGBA colour with 8-bit channels (values outside
  0..255 raise `ValueError`), named constants such as `Color.RED` and
  `Color.TRANSPARENT`, and `normalized()` giving channels in 0..1.
- `ecsengine.registry`: `Registry`, `System`, `Clock` and `State`.
- `ecsengine.input`: `Keyboard` and `Mouse` state, plus the `Key` and `Action`
  enums.
- Systems:
  - `ecsengine.collision.Collision` tests every pair of entities that have a
    `Transform` and a `Collider` with the GJK algorithm and stores the
    intersecting ordered pairs in its `colliding` attribute. The module also
    exposes `gjk`, `support_point`, `furthest_point`, `same_direction` and the
    `Simplex` helper.
  - `ecsengine.gravity.Gravity(constant)` accelerates entities with a
    `Transform` and a `Physics` component downwards.
  - `ecsengine.transformer.Transformer` writes a `Matrices` component (local and
    world matrix, taking a `Parent`'s world matrix into account) for every
    entity with a `Transform`. It also sets the rotation of entity `2` around
    the x axis from the elapsed time.
  - `ecsengine.movement.Movement(keyboard, mouse)` moves the active camera with
    the W, A, S and D keys and turns it from mouse movement, with pitch limited
    to ±89 degrees.
  - `ecsengine.rotation.Rotation` sets the rotation of every entity with a
    `Spin` component from `speed * elapsed_time` degrees around its axis.
- `ecsengine.game`: the `Application` frame loop, the demo `Game` scene and the
  `main` command.

## Installation

```
pip install .
```

## The registry

Entities are plain integers. A registry keeps at most one component of each
type per entity; adding a second one of the same type keeps the first.

```python
from ecsengine.collision import Collision
from ecsengine.components import Collider, Transform
from ecsengine.registry import Clock, Registry, State
from ecsengine.vector import Vector3

registry = Registry()
cube = [Vector3(x, y, z) for x in (-.5, .5) for y in (-.5, .5) for z in (-.5, .5)]

registry.add(0, Transform())
registry.add(0, Collider(vertices=cube))
registry.add(1, Transform(position=Vector3(0.5, 0, 0)))
registry.add(1, Collider(vertices=cube))

print(registry.view(Transform, Collider))   # {0, 1}

registry.activate(Collision)
registry.run(State(), Clock())
```

`get(entity, component_type)` raises `KeyError` when the entity lacks that
component; `has`, `remove`, `activate` and `deactivate` do what their names say.
`Registry.run` runs every active system once, in activation order.

Testing two colliders directly:

```python
from ecsengine.collision import gjk
from ecsengine.matrix4 import Matrix4

a = Matrix4.from_transform(registry.get(0, Transform))
b = Matrix4.from_transform(registry.get(1, Transform))
print(gjk(registry.get(0, Collider), registry.get(1, Collider), a, b))  # True
```

## Frame loop

`Application` owns a `Registry`, a `Clock`, a `State`, a `Keyboard` and a
`Mouse`. `step(now)` advances the clock to `now` seconds and runs the systems;
`run(frames)` steps that many frames timed by the wall clock; `title()` returns
a string such as `Game [60 fps]` for the last frame.

Input is fed by the caller: `Keyboard.handle_key(key, action)` records a key
event (any action other than `Action.RELEASE` marks the key as pressed) and
`Mouse.handle_cursor(x, y)` records the cursor position.

## Running the demo scene

The demo `Game` places a player entity with a camera and a cube collider, a
triangle mesh with a `Physics` component, and a cube mesh that spins around the
y axis; it activates the `Movement`, `Rotation` and `Collision` systems. The
command runs it for a number of frames (600 by default) and prints the last
title:

```
ecsengine
ecsengine --frames 120
```

## What it does not do

There is no window, no rendering and no device input. Meshes, colours and the
perspective and look-at matrices are data for a renderer to use, but the
package draws nothing. `Keyboard` and `Mouse` only hold the state that the
caller gives them, so in the `ecsengine` command the camera stays where it
starts.

## Tests

```
pip install .[test]
pytest
```