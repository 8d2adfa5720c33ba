"""Interactive solar-system viewer."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import numpy as np

from .camera import Camera, Movement
from .geometry import Mesh, generate_circle, generate_sphere
from .planets import SimulationState, default_planets
from .shader import ShaderError, ShaderProgram
from .transforms import perspective, scaling, translation

__all__ = ["MouseTracker", "movement_for_key", "main"]

WINDOW_WIDTH = 1280 * 2
WINDOW_HEIGHT = 720 * 2
WINDOW_TITLE = "Test Engine"

START_POSITION = (12.146158, 7.960372, 28.563208)
START_YAW = -117.0
START_PITCH = -14.0

LIGHT_POSITION = (0.0, 0.0, 0.0)
LIGHT_COLOR = (1.0, 1.0, 1.0)
SUN_SCALE = 10.0
SUN_TEXTURE = "resources/2k_sun.jpg"
BACKGROUND_TEXTURE = "resources/8k_stars_milky_way.jpg"

SPHERE_SEGMENTS = 32
BACKGROUND_SEGMENTS = 8
ORBIT_SEGMENTS = 128

_SHADERS = {
    "planet": ("shaders/planet_vertex.glsl", "shaders/planet_fragment.glsl"),
    "sun": ("shaders/sun_vertex.glsl", "shaders/sun_fragment.glsl"),
    "orbit": ("shaders/line_vert.glsl", "shaders/line_frag.glsl"),
    "background": ("shaders/background_vert.glsl", "shaders/background_frag.glsl"),
}


class _Key(IntEnum):
    """Key symbols as delivered by the window's keyboard events."""

    SPACE = 0x20
    A = ord("a")
    D = ord("d")
    L = ord("l")
    R = ord("r")
    S = ord("s")
    W = ord("w")
    ENTER = 0xFF0D
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54


_MOVEMENT_KEYS = {
    _Key.W: Movement.UP,
    _Key.S: Movement.DOWN,
    _Key.UP: Movement.FORWARD,
    _Key.DOWN: Movement.BACKWARD,
    _Key.RIGHT: Movement.RIGHT,
    _Key.LEFT: Movement.LEFT,
}


def movement_for_key(symbol: int) -> Movement | None:
    """The camera movement a held key asks for, if any."""
    return _MOVEMENT_KEYS.get(symbol)


@dataclass
class MouseTracker:
    """Turns absolute cursor positions (y growing downwards) into look offsets."""

    last_x: float = 640.0
    last_y: float = 360.0
    first: bool = True

    def offsets(self, x: float, y: float) -> tuple[float, float]:
        """Horizontal and vertical offsets since the previous position."""
        if self.first:
            self.last_x, self.last_y = x, y
            self.first = False
        xoffset = x - self.last_x
        yoffset = self.last_y - y
        self.last_x, self.last_y = x, y
        return xoffset, yoffset


def _gl_matrix(matrix: np.ndarray) -> tuple[float, ...]:
    """Column-major flattening expected by matrix uniforms."""
    return tuple(float(v) for v in np.asarray(matrix, dtype=np.float64).flatten(order="F"))


def _load_texture(path: Path):
    import pyglet
    from pyglet import gl
    from pyglet.image.codecs import ImageDecodeException

    try:
        image = pyglet.image.load(str(path))
    except (OSError, ImageDecodeException):
        print(f"Texture failed to load at path: {path}")
        return None
    texture = image.get_texture()
    gl.glBindTexture(texture.target, texture.id)
    gl.glGenerateMipmap(texture.target)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
    return texture


def _bind_texture(texture) -> None:
    from pyglet import gl

    gl.glActiveTexture(gl.GL_TEXTURE0)
    gl.glBindTexture(gl.GL_TEXTURE_2D, texture.id if texture is not None else 0)


def _upload(mesh: Mesh, shader: ShaderProgram, mode: int):
    """Indexed vertex list feeding each shader attribute from the mesh column at its location."""
    program = shader.program.native
    blocks = np.split(mesh.vertices, np.cumsum(mesh.layout)[:-1], axis=1)
    data = {}
    for name, info in program.attributes.items():
        location = info["location"]
        if location >= len(blocks):
            continue
        block = blocks[location]
        count = info["count"]
        filled = np.zeros((mesh.vertex_count, count), dtype=np.float32)
        width = min(count, block.shape[1])
        filled[:, :width] = block[:, :width]
        data[name] = ("f", filled.ravel().tolist())
    return program.vertex_list_indexed(
        mesh.vertex_count, mode, mesh.indices.tolist(), **data
    )


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="orrery", description="Fly around an animated model of the solar system."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="directory holding the shaders/ and resources/ folders",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the viewer window and run until it is closed."""
    args = _parse_args(argv)

    import pyglet
    from pyglet import gl

    config = gl.Config(major_version=3, minor_version=3, depth_size=24, double_buffer=True)
    try:
        window = pyglet.window.Window(
            WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True, config=config
        )
    except pyglet.window.NoSuchConfigException:
        print("unable to create window")
        return 1

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_LINE_SMOOTH)
    gl.glHint(gl.GL_LINE_SMOOTH_HINT, gl.GL_NICEST)
    gl.glClearColor(1.0, 0.0, 0.0, 1.0)

    root = args.root
    try:
        shaders = {
            name: ShaderProgram(root / vert, root / frag).compile()
            for name, (vert, frag) in _SHADERS.items()
        }
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1
    planet_shader = shaders["planet"]
    sun_shader = shaders["sun"]
    orbit_shader = shaders["orbit"]
    background_shader = shaders["background"]

    sun_texture = _load_texture(root / SUN_TEXTURE)
    background_texture = _load_texture(root / BACKGROUND_TEXTURE)

    camera = Camera(
        position=START_POSITION, world_up=(0.0, 1.0, 0.0), yaw=START_YAW, pitch=START_PITCH
    )
    projection = _gl_matrix(
        perspective(math.radians(45.0), WINDOW_WIDTH / WINDOW_HEIGHT, 0.1, 1000.0)
    )
    identity = _gl_matrix(np.identity(4))

    sphere = generate_sphere(1.0, SPHERE_SEGMENTS, SPHERE_SEGMENTS)
    sun_mesh = _upload(sphere, sun_shader, gl.GL_TRIANGLES)
    planet_mesh = _upload(sphere, planet_shader, gl.GL_TRIANGLES)
    background_mesh = _upload(
        generate_sphere(1.0, BACKGROUND_SEGMENTS, BACKGROUND_SEGMENTS),
        background_shader,
        gl.GL_TRIANGLES,
    )

    planets = default_planets()
    planet_textures = [_load_texture(root / planet.texture) for planet in planets]
    orbits = [
        _upload(generate_circle(planet.orbit_radius(), ORBIT_SEGMENTS), orbit_shader, gl.GL_LINE_LOOP)
        for planet in planets
    ]
    state = SimulationState()

    planet_shader.set_int("material.diffuse", 0)
    planet_shader.set_int("material.specular", 1)
    sun_shader.set_int("diffuse", 0)
    background_shader.set_int("equirectangularMap", 0)

    key_state = pyglet.window.key.KeyStateHandler()
    window.push_handlers(key_state)
    tracker = MouseTracker()

    def update(delta_time: float) -> None:
        state.advance(delta_time)
        if key_state[_Key.ENTER]:
            window.close()
            return
        for symbol, movement in _MOVEMENT_KEYS.items():
            if key_state[symbol]:
                camera.process_keyboard(movement, delta_time)

    @window.event
    def on_resize(width, height):
        gl.glViewport(0, 0, *window.get_framebuffer_size())
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_key_press(symbol, modifiers):
        if symbol == _Key.SPACE:
            print(state.toggle_revolution())
        elif symbol == _Key.R:
            print(state.toggle_rotation())
        elif symbol == _Key.L:
            x, y, z = camera.position
            print(f"{x:f}, {y:f}, {z:f}")
        elif symbol == _Key.D:
            window.set_exclusive_mouse(True)
        elif symbol == _Key.A:
            window.set_exclusive_mouse(False)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        if tracker.first:
            position = (x, window.height - y)
        else:
            position = (tracker.last_x + dx, tracker.last_y - dy)
        camera.process_mouse_movement(*tracker.offsets(*position), True)

    @window.event
    def on_draw():
        window.clear()

        view = camera.view_matrix()
        sky_view = view.copy()
        sky_view[:3, 3] = 0.0
        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDepthMask(gl.GL_FALSE)
        background_shader.use()
        background_shader["view"] = _gl_matrix(sky_view)
        background_shader["projection"] = projection
        _bind_texture(background_texture)
        background_mesh.draw(gl.GL_TRIANGLES)
        gl.glDepthMask(gl.GL_TRUE)
        gl.glEnable(gl.GL_DEPTH_TEST)

        view_uniform = _gl_matrix(view)
        planet_shader.use()
        planet_shader["viewPos"] = tuple(float(v) for v in camera.position)
        planet_shader["light.position"] = LIGHT_POSITION
        planet_shader["light.ambient"] = (0.2, 0.2, 0.2)
        planet_shader["light.diffuse"] = (0.5, 0.5, 0.5)
        planet_shader["light.specular"] = (1.0, 1.0, 1.0)
        planet_shader.set_float("material.shininess", 64.0)
        planet_shader["view"] = view_uniform
        planet_shader["projection"] = projection

        for planet, texture, orbit in zip(planets, planet_textures, orbits):
            planet_shader.use()
            planet_shader["model"] = _gl_matrix(
                planet.model_matrix(state.animation_time, state.rotation_time)
            )
            _bind_texture(texture)
            planet_mesh.draw(gl.GL_TRIANGLES)

            orbit_shader.use()
            orbit_shader["view"] = view_uniform
            orbit_shader["projection"] = projection
            orbit_shader["model"] = identity
            orbit.draw(gl.GL_LINE_LOOP)

        sun_shader.use()
        sun_shader["view"] = view_uniform
        sun_shader["projection"] = projection
        sun_shader["Color"] = LIGHT_COLOR
        sun_shader["model"] = _gl_matrix(
            translation(LIGHT_POSITION) @ scaling((SUN_SCALE, SUN_SCALE, SUN_SCALE))
        )
        _bind_texture(sun_texture)
        sun_mesh.draw(gl.GL_TRIANGLES)

    pyglet.clock.schedule(update)
    pyglet.app.run()
    return 0