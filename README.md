# orrery

An interactive 3D solar system. The Sun sits at the centre, and eight textured
planets orbit and spin around it. Each orbit is drawn as a line, and a star-field
sky sphere lies behind everything. A free-flying camera lets you move through
the scene. Rendering uses pyglet with an OpenGL 3.3 context.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running

```
orrery
```

By default the viewer looks for its `shaders/` and `resources/` folders in the
current directory. Use `--root` to point it at another directory:

```
orrery --root /path/to/assets
```

The viewer expects these files under that directory:

- `shaders/planet_vertex.glsl`, `shaders/planet_fragment.glsl`
- `shaders/sun_vertex.glsl`, `shaders/sun_fragment.glsl`
- `shaders/line_vert.glsl`, `shaders/line_frag.glsl`
- `shaders/background_vert.glsl`, `shaders/background_frag.glsl`
- `resources/2k_sun.jpg`, `resources/8k_stars_milky_way.jpg`, and one texture
  per planet, such as `resources/2k_earth_daymap.jpg`

If a shader file can't be read or a program fails to build, the command prints
the error and exits with status 1. If a texture fails to load, the viewer prints
a message and draws that body without a texture.

### Controls

| Key / input     | Action                                       |
|-----------------|----------------------------------------------|
| Mouse           | Look around (yaw and pitch)                  |
| Up / Down       | Move forward / backward                      |
| Left / Right    | Strafe left / right                          |
| W / S           | Move up / down                               |
| Space           | Pause or resume orbital revolution           |
| R               | Pause or resume planet rotation              |
| L               | Print the camera position                    |
| D               | Capture the mouse cursor                     |
| A               | Release the mouse cursor                     |
| Enter           | Quit                                         |

When you press Space or R, the viewer prints the new state flags. Bit 0 is set
while the planets revolve and bit 1 while they rotate. At start-up the planets
revolve but do not rotate.

## What is not included

The package does not ship any GLSL shaders or texture images. The viewer only
runs when you supply them as described above.

## Using the library

You can use the geometry, camera and simulation pieces without opening a window:

```python
from orrery.geometry import generate_sphere, generate_circle
from orrery.camera import Camera, Movement
from orrery.planets import default_planets, SimulationState

sphere = generate_sphere(1.0, 32, 32)   # Mesh: position, normal, texcoord
orbit = generate_circle(10.0, 128)      # Mesh: 2D points joined as line segments

camera = Camera()
camera.process_keyboard(Movement.FORWARD, 0.016)
camera.process_mouse_movement(5.0, -3.0, True)
view = camera.view_matrix()

state = SimulationState()
state.toggle_rotation()
state.advance(0.016)
for planet in default_planets():
    model = planet.model_matrix(state.animation_time, state.rotation_time)
```

The modules are:

- `orrery.transforms`: `perspective`, `look_at`, `translation`, `scaling`,
  `rotation` and `normalize`. These return 4x4 numpy matrices in row-major
  mathematical layout, for use as `matrix @ point`. Transpose them before you
  hand them to an API that expects column-major storage.
- `orrery.camera`: `Camera`, an Euler-angle camera with angles in degrees, and
  the `Movement` enum. Pitch can be clamped to ±89°, and scroll zoom stays
  within 1° to 45°.
- `orrery.geometry`: `Mesh`, with interleaved float32 `vertices`, uint32
  `indices`, a `layout`, and the properties `vertex_count`, `index_count`,
  `stride`, `attributes` and `positions`. Build meshes with `generate_sphere`
  and `generate_circle`. `generate_sphere` raises `ValueError` for fewer than 3
  slices, fewer than 2 stacks or a radius that is not positive.
- `orrery.planets`: `Planet`, `default_planets()` for the eight planets in order
  from the Sun, and `SimulationState` for the revolution and rotation clocks.
- `orrery.shader`: `read_sources` and `ShaderProgram`, which build a program
  from a vertex file and a fragment file. Failures raise `ShaderError`. You can
  pass a custom `builder` to construct the program object.
- `orrery.app`: `main`, the viewer command, plus `MouseTracker` and
  `movement_for_key`.

## Tests

```
pytest
```