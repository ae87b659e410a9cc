[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glscene"
version = "0.1.0"
description = "Small OpenGL scenes: a pulsing Bresenham circle and a set of 3D meshes driven by keyboard input"
requires-python = ">=3.10"
keywords = ["opengl", "graphics", "mesh", "bresenham", "pyglet", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glscene = "glscene.cli:main"
glscene-circle = "glscene.cli:main_circle"
glscene-shapes = "glscene.cli:main_shapes"
glscene-cube = "glscene.cli:main_cube"

[tool.hatch.build.targets.wheel]
packages = ["glscene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
