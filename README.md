# planegfx

A small toolkit for 2D graphics work. It covers the maths and data side of a
renderer: vectors, matrices, cameras, meshes, vertex buffers, images and text
layout. None of it needs a window or a GPU.

## Modules

- `planegfx.vec2`, `planegfx.vec3`: the vector types `Vec2` and `Vec3`, with
  `+`, `-`, `*` and `/` by a number, negation, and equality within
  single-precision epsilon. `Vec2.splat(v)` and `Vec3.splat(v)` repeat one value
  in every component. The helpers are `dot_product`, `magnitude_squared`,
  `magnitude`, `distance_between`, `angle_between` and `normalize`. `vec2` adds
  `rotate_by`, and `vec3` adds `cross_product`. Normalizing a zero-length vector,
  or asking for an angle that involves one, raises `ValueError`.
- `planegfx.mat3`: `Mat3`, a column-major 3x3 matrix indexed as `m[col, row]`.
  You can build one as `Mat3()` (all zeros), `Mat3(v)` (a repeated value), from
  three `Vec3` columns or from nine numbers. It also has `Mat3.from_columns`,
  `Mat3.filled`, `Mat3.identity` and `column(i)`. The module provides
  `build_translation`, `build_rotation`, `build_scaling` and `transpose`.
  `build_translation` and `build_scaling` apply to both axes when given one
  argument.
- `planegfx.angle`: `PI`, `TWO_PI` and `degree_to_radian`.
- `planegfx.color`: `Color4f` clamps its channels to 0..1. `ColorInChar` uses
  8-bit channels and raises `ValueError` outside 0..255. Each has a `gray`
  constructor. `to4f` converts a `ColorInChar` into a `Color4f`.
- `planegfx.camera`: `Camera`, which has a `center` and `up` and `right` axes.
  It supports `reset_up`, `move_up`, `move_right` and `rotate`, and produces the
  matrices `world_to_camera()` and `camera_to_world()`.
- `planegfx.camera_view`: `FrameOfReference`, `build_to_ndc` and `CameraView`.
  `CameraView` holds a viewport size (`set_view_size`), a `zoom` and a
  `frame_of_reference`, and keeps `camera_to_ndc` up to date.
- `planegfx.transform`: `Transform` holds `translation`, `scale`, `rotation`,
  `depth` and an optional `parent`. Its methods are `model_to_world()`,
  `world_to_model()` and `world_depth()`.
- `planegfx.mesh`: `Mesh` stores points, colours, texture coordinates and a
  `ShapePattern`. The shape builders are `create_rectangle`, `create_ellipse`,
  `create_quad`, `create_line` and `create_triangle`.
- `planegfx.vertices`: `AttributeType`, `TypeDescription` and
  `VerticesDescription`. `VerticesDescription` gives the vertex size and an
  `attribute_layout()` that yields the index, component count, stride and
  offset of each attribute. `pack_mesh` interleaves a mesh's data into
  little-endian float32 bytes.
- `planegfx.image`: `Image`, a grid of `ColorInChar` pixels. `Image.load`
  reads any file Pillow can open and puts the bottom row first. The other
  methods are `save_png`, `pixel_bytes`, `resize_pixels` and `flip_vertically`.
- `planegfx.bitmap_font`: `BitmapFont` parses text-format `.fnt` descriptions
  into a `FontInformation` and per-glyph `Character` entries. `load_from_file`
  also loads the page images, from `asset_dir` or, if that is not given, from the
  font file's directory.
- `planegfx.text`: `Text` lays a string out with a `BitmapFont`. It handles
  spaces, tabs (four spaces wide) and newlines. `page_meshes()` returns one
  textured triangle mesh per font page that is in use.
- `planegfx.animation`: `SpriteSheet` and `Animation`. `animate(dt)` advances
  the time and returns the frame index to draw. `change_animation` changes the
  number of frames along x.
- `planegfx.clock`: `Clock` measures time between `update()` calls. It uses
  `time.perf_counter` unless you pass another timer.
- `planegfx.events`: `KeyboardButton`, `MouseButton` and `EventHandler`. The
  default `EventHandler` callbacks record which keys are held, the cursor
  position, whether the left button is down and whether the window was asked to
  close.
- `planegfx.demo`: `Demo`, an abstract base with a `camera` and a `view`.
  Subclasses implement `initialize`, `update` and `reset_camera`. `Demo` handles
  resize, focus and scroll-wheel zoom, with the zoom clamped to 0.1..2.0.

## Installation

```
pip install .
```

## Example

```python
from planegfx.vec2 import Vec2
from planegfx.camera import Camera
from planegfx.camera_view import CameraView
from planegfx.transform import Transform
from planegfx.mesh import create_rectangle
from planegfx.vertices import AttributeType, VerticesDescription, pack_mesh

view = CameraView()
view.set_view_size(1280, 720)
camera = Camera()

transform = Transform()
transform.translation = Vec2(50.0, 0.0)
transform.scale = Vec2.splat(100.0)

to_ndc = view.camera_to_ndc * camera.world_to_camera() * transform.model_to_world()
square = create_rectangle(Vec2.splat(0.0), Vec2.splat(1.0))
layout = VerticesDescription(AttributeType.POINT, AttributeType.TEXTURE_COORDINATE)
buffer = pack_mesh(square, layout)
print(len(square), len(buffer), to_ndc)
```

## What it does not do

The package has no window, input loop, shader compiler or draw calls. It builds
matrices, meshes and packed vertex bytes, but never sends them to a GPU.
`EventHandler` and `Demo` only receive events that your own code passes to them.
There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```