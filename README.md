# softgl

Pure-Python building blocks for a software renderer. It needs Python 3.10 or
later, with `numpy` and `pillow`.

## Modules

- `softgl.auxmath`: tolerant float comparisons (`is_zero`, `abs_equal`,
  `rel_equal`, `less_than`, `greater_than`, `less_than_equal`,
  `greater_than_equal`), `binary_gcd`, `round_away_from_zero`,
  `mapped_value`, `to_percent` and `lerp`.
- `softgl.buffer`: 2D element grids. `Buffer` stores elements row by row,
  `TiledBuffer` in 4×4 tiles and `MortonBuffer` in 32×32 tiles in Z-curve
  order. `make_layout(width, height, BufferLayout.…)` creates and allocates
  one. `encode16_morton2` interleaves two 8-bit values.
- `softgl.geometry`: `BoundingBox` (corners, transform by a 4×4 matrix,
  overlap test, merge), `Plane` and `Frustum` with tests against boxes,
  points, segments and triangles, plus `PlaneIntersects` and
  `FrustumClipMask`.
- `softgl.image`: `read_image_rgba` loads a file into a `Buffer` of
  `(r, g, b, a)` tuples, or returns `None` if it cannot be decoded.
  `write_image` saves packed 8-bit pixels with 1 to 4 channels as PNG.
  `convert_float_image` turns a float depth map into grey RGBA pixels.
- `softgl.threadpool`: `ThreadPool` runs queued tasks as
  `task(thread_id, *args)`. It can be paused, and it is a context manager that
  waits for the tasks and joins the workers on exit.
- `softgl.glsl`: `ProgramSource` and `ShaderSource` assemble GLSL text with a
  `#version 330 core` header and `#define` lines. `preprocess_vertex` and
  `preprocess_fragment` strip the `layout` qualifiers that GLSL 3.30 does not
  accept. They produce source text only and compile nothing.
- `softgl.pbr`: GGX distribution, Schlick-GGX and Smith geometry, Schlick
  Fresnel (with a roughness variant), the analytic environment BRDF,
  Hammersley points, GGX importance sampling and `prefilter` for environment
  maps.
- `softgl.skybox`: `sample_spherical_map`, `skybox_clip_position` and the
  hemisphere `irradiance` convolution.
- `softgl.lighting`: `blinn_phong` shading for one point light and
  `shadow_factor`, a 3×3 percentage-closer shadow test.
- `softgl.fxaa`: `rgb2luma`, `quality` and `fxaa` for a single fragment.
- Utilities: `softgl.logger` (levelled logging with an optional sink),
  `softgl.timer` (`Timer`, `ScopedTimer`), `softgl.hashutils`
  (`hash_combine`, `murmur3`, `hash_combine_murmur`, `md5_hex`),
  `softgl.fileutils`, `softgl.strutils`, `softgl.ids` (`Identified`, with
  sequential ids per class) and `softgl.config` (`Config`, `AAType`,
  `cube_vertices`).

The shading functions take texture reads as callables. For example,
`fxaa(sample, uv, screen_size)` calls `sample(uv)`, and `prefilter` calls
`sample_lod(direction, lod)`. You can plug in any texture source.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from softgl.auxmath import binary_gcd, to_percent
from softgl.buffer import BufferLayout, make_layout

binary_gcd(48, 18)        # 6
to_percent(5, 0, 10)      # 50.0

buf = make_layout(8, 8, BufferLayout.TILED)
buf.set(3, 5, 42)
buf.get(3, 5)             # 42
buf.get(9, 0)             # None (out of range)
```

```python
from softgl.geometry import Plane, PlaneIntersects

plane = Plane()
plane.set((0.0, 1.0, 0.0), (0.0, 0.0, 0.0))
plane.intersects_point((0.0, 2.0, 0.0)) is PlaneIntersects.FRONT   # True
```

```python
from softgl.glsl import ProgramSource

program = ProgramSource()
program.add_define("ALBEDO_MAP")
vs, fs = program.build(vs_body, fs_body)   # composed GLSL 330 source strings
```

```python
from softgl.threadpool import ThreadPool

results = []
with ThreadPool(4) as pool:
    for n in range(10):
        pool.push_task(lambda thread_id, n: results.append(n * n), n)
```

```python
from softgl.timer import ScopedTimer

with ScopedTimer("load") as t:
    ...
t.elapsed_millis   # also logged at debug level
```

## What it does not do

softgl has no rasterization pipeline, no render passes, no model or scene
loading, no window or viewer, no GPU back end and no command-line program. It
provides the pieces that such a renderer is built from. `Config` only holds
settings and nothing in the package reads them.