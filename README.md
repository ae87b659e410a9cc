# glscene

Small interactive OpenGL scenes built on pyglet and numpy.

The package offers a simple frame loop in which figures are updated and
drawn each frame, and input processors react to the keyboard. Three scenes
come with it:

- **circle**: a blue circle outline rasterised with Bresenham's algorithm,
  whose radius pulses over time, in an 800×800 window with pixel
  coordinates (origin at the top-left). Up and Down change the base radius
  by 5; a non-positive base radius is ignored.
- **shapes**: a cube, a pyramid, a cylinder and two spheres. Keys 0 and 1
  select a sphere, and the arrow keys move the selected sphere by 0.1 per
  frame. The scene needs a vertex and a fragment shader file.
- **cube**: a single blue cube drawn with the shaders `vertex_shader.glsl`
  and `fragment_shader.glsl` from the current directory.

In every scene, Escape or Q closes the window.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the scenes

```
glscene-circle
glscene-shapes path/to/vertex.glsl path/to/fragment.glsl
glscene-cube
```

`glscene` is a single entry point for the same scenes: `glscene circle`,
`glscene shapes VERTEX FRAGMENT` or `glscene cube`. Without a known scene
name it prints a usage line and exits with status 2.

`glscene-shapes` given anything other than two paths prints
`Error: enter shader source pathes` and exits. In the shapes and cube
scenes, errors raised while setting up or running are printed to standard
error as `Error: ...`. Each loaded shader source is echoed to standard
output, and compile errors are reported on standard error.

## Writing shaders for the mesh scenes

The package ships no shader files. `MeshDrawer` feeds the shader:

- vertex attribute 0: position (three floats);
- vertex attribute 1: colour (three floats);
- `mat4` uniforms `model`, `view` and `proj`.

The window asks for an OpenGL 3.3 core context with depth testing.

## Using the library

Mesh geometry can be produced without a window, which is handy for
inspection or for feeding other renderers:

```python
from glscene.meshes import cube_vertices, cube_indices

vertices = cube_vertices((0.0, 0.0, -10.0), (0.0, 1.0, 0.0))
indices = cube_indices()
print(len(vertices), len(indices))   # 8 36
```

`glscene.meshes` also has `pyramid_*`, `cylinder_*` and `sphere_*`
generators, the `Cube`, `Pyramid`, `Cylinder` and `Sphere` figures, and
`Mesh.vertex_data()` / `Mesh.index_data()` returning numpy arrays
(float32 rows of `x, y, z, r, g, b`, and uint32 indices).

Rasterising a circle yields the points that Bresenham's algorithm visits,
eight per step:

```python
from glscene.circle import bresenham_points

points = bresenham_points(400, 400, 50)
```

The matrix helpers in `glscene.transforms` (`identity`, `translate`,
`rotate`, `perspective`, `look_at`, `ortho`) return 4×4 numpy arrays in
mathematical row/column layout, acting on column vectors as `m @ v`;
transpose them before uploading as column-major OpenGL data.

A custom scene is built from `glscene.figure.Figure` objects, each with an
optional `FigureDrawer` and `FigureUpdater`, and `InputProcessor` objects,
all passed to `glscene.application.WindowApplication` together with a
`glscene.window.Window`; calling `launch()` runs the loop until the window
is asked to close. Each frame takes one nanosecond timestamp from
`glscene.timing.Timer`, runs every input processor, then updates and draws
every figure in order.

Window setup failures raise `glscene.errors.WindowInitError` or
`WindowCreateError`, both subclasses of `SceneError`.