# qmapkit

Helpers for working with Quake-style maps made in TrenchBroom. The package is pure Python and has no dependencies.

## Modules

### `qmapkit.mathutil`

- **`Vec3`** is a frozen three-component vector. It supports `+`, `-`, unary `-`, and scaling by a number.
  - `trenchbroom_to_bevy()` converts from TrenchBroom axes (forward X, right -Y, up Z) to engine axes (forward -Z, right X, up Y).
  - `bevy_to_trenchbroom()` converts the other way.
  - Constants: `Vec3.X`, `Vec3.Y`, `Vec3.Z`, `Vec3.NEG_X`, `Vec3.NEG_Y`, `Vec3.NEG_Z`, `Vec3.ZERO` and `Vec3.ONE`.
- **`Quat`** is a rotation quaternion `(x, y, z, w)`.
  - Constructors: `from_rotation_x/y/z(angle)`, and `from_euler(order, a, b, c)` with an `EulerRot` order. Plain orders are intrinsic; `...Ex` orders are extrinsic.
  - `quat * quat` composes two rotations.
  - `quat * vec3` rotates a vector.
  - `Quat.IDENTITY` is the identity rotation.
- **`Aabb`** is a box stored as a center and half extents. It has `from_min_max(minimum, maximum)`, `min()` and `max()`.
- **Entity rotation properties.** Angles are in degrees:
  - `angle_to_quat(angle)` turns around the Y axis. `-1` means up and `-2` means down.
  - `angles_to_quat(angles)` takes negative pitch, yaw and negative roll.
  - `mangle_to_quat(mangle)` takes yaw, pitch and roll, as used by light entities.
- **Other helpers:**
  - `almost_eq(a, b, margin)` works on numbers, `Vec3` or `Quat`.
  - `convert_zero_to_one(value)` replaces zero with one, for a number, a `Vec3` or a tuple.
  - `quake_light_to_lux(light)` gives a rough estimate, `light / 50000`.

### `qmapkit.entities`

- **`QuakeMapEntity(properties, brushes)`** holds one entity's property map and its brushes.
  - `classname()` returns the entity's class name.
  - `get(key, parser)` parses a property with `parser`.
  - `get_or(key, parser, default)` does the same, but returns `default` when the property is missing.
- **`QuakeMapEntities`** is a list of entities. `worldspawn()` returns the first entity whose classname is `worldspawn`, or `None`.
- **Errors** all derive from `QuakeEntityError`:
  - `RequiredPropertyNotFound` is raised when a property is missing.
  - `PropertyParseError` is raised when the parser raises `ValueError`, `TypeError`, `LookupError` or `ArithmeticError`.
  - `DefinitionNotFound` and `InvalidBase` are also defined.

### `qmapkit.special_textures`

- **Name tests:**
  - `is_liquid_texture(name)` checks for a leading `*`.
  - `is_sky_texture(name)` checks for a leading `sky`.
  - `is_animated_texture(name)` checks for a leading `+`.
- **`liquid_base_color(water_alpha)`** returns `(1, 1, 1, water_alpha)` when the alpha is below 1. Otherwise it returns `None`.
- **`RgbaImage(width, height, data)`** is an 8-bit RGBA image. `pixel(x, y)` returns a pixel's `(r, g, b, a)` values.
- **`split_sky_image(image, foreground)`** cuts a sky texture in half.
  - With `foreground=True` it returns the left half, with opaque black made fully transparent.
  - With `foreground=False` it returns the right half, unchanged.
  - The image width must be even.
- **`sky_layer_labels(name, prefix)`** returns `("FG_<prefix><name>", "BG_<prefix><name>")`.
- **`animation_frames(name, available)`** handles a `+N...` name.
  - It gathers `+0...`, `+1...` and so on from `available`, up to the first missing frame.
  - It returns `(starting_frame, frames)`. The starting frame is `N - 1`, wrapped as an unsigned 32-bit value.
- **Material settings:**
  - `LiquidMaterialExt` holds `magnitude` and `cycles`.
  - `QuakeSkyMaterial` holds the scroll speeds, texture scale, sphere scale, layers and `cull_mode`.
  - `QuakeSkyKey.from_material(material)` builds a key from a sky material.
  - `Face` is the side of a mesh to cull.

## What it does not do

- It does not parse `.map` or `.bsp` files.
- It does not build brush geometry or meshes.
- It does not load textures from disk.
- It does not render anything. The material classes only hold settings, and no shaders are included.

You create entities and images yourself, from data that you have parsed elsewhere.

## Installation

```
pip install qmapkit
```

To run the tests:

```
pip install "qmapkit[test]"
pytest
```

## Example

```python
from qmapkit.mathutil import Vec3, angle_to_quat
from qmapkit.entities import QuakeMapEntity, QuakeMapEntities, RequiredPropertyNotFound

forward = Vec3(1.0, 0.0, 0.0).trenchbroom_to_bevy()   # Vec3(-0.0, 0.0, -1.0)
turned = angle_to_quat(90.0) * Vec3.NEG_Z              # roughly Vec3(-1, 0, 0)

world = QuakeMapEntity({"classname": "worldspawn", "water_alpha": "0.5"})
entities = QuakeMapEntities([world])

alpha = entities.worldspawn().get("water_alpha", float)       # 0.5
gravity = world.get_or("gravity", float, 800.0)                # 800.0, property absent

try:
    world.get("message", str)
except RequiredPropertyNotFound as err:
    print(err)   # required property `message` not found
```