"""Interactive 3D solar system viewer: transforms, camera, meshes, planets and shaders."""

__version__ = "0.1.0"