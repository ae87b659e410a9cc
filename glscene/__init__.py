"""Interactive OpenGL scenes: a pulsing Bresenham circle and keyboard-driven 3D meshes."""

__version__ = "0.1.0"