# yukiengine

The core of a small 3D engine. The package includes error reporting, a file logger, clock helpers, a camera with its matrix math, in-memory images, input state tracking, meshes and models, scene entities and the application loop. It does not draw anything itself.

## Modules

- `yukiengine.errors`: `ErrorCode` lists every failure the engine reports. `EngineError` is a `RuntimeError` that carries a code, a file and a line. `error_message()` formats the report, and `push_error_message(logger)` sends the report to any object with a `push_error_message` method. There is one subclass per code, for example `AppCreatedError` or `InputCallbackExistsError`. `raise_error(error_class)` raises one of them and stamps it with the caller's file and line.
- `yukiengine.chrono`: `Clock` has static methods `current_time_nanos()`, `current_time_millis()`, `current_time_point()` (an aware UTC `datetime`), `current_time_struct()` (a UTC `time.struct_time`) and `date_time_string(format=None)`. `DateTimeFormat` is a frozen dataclass of strftime parts. Its `pattern()` joins those parts. The default pattern is `%Y-%m-%d %H.%M.%S`.
- `yukiengine.logger`
  - `Logger(directory=None, echo=False)` writes reports to a file named after the UTC time at which `create()` ran, with the extension `.ylg`. The file goes in `directory`, or in the current directory if none is given.
  - `push_debug_message`, `push_warning_message` and `push_error_message` write a message under that `Priority`. `push_message(message, priority)` takes the priority directly.
  - Writing before `create()` or after `destroy()` raises `CreateLogFileError`.
  - With `echo=True`, every report is also printed.
  - The `path` property gives the file's location.
  - A `Logger` is also a context manager.
- `yukiengine.camera`
  - `Camera` holds `position`, `direction`, `top`, `fov`, `aspect_ratio`, `near` and `far`.
  - It can be moved (`move`), aimed (`look_at_point`, `set_direction`, `rotate_direction`) and rolled around Z (`rotate_viewport`).
  - `update()` recomputes `view_matrix` and `projection_matrix`.
  - The functions `look_at`, `perspective` and `rotate_vector` are available on their own.
- `yukiengine.images`: `Image(data, width, height, channels)` holds 1 to 4 channels of 8-bit pixels as a `(height, width, channels)` numpy array. `Image.from_file(path, flip=False)` loads any file Pillow can read as RGBA; its rows are reversed unless `flip` is set. `copy()` and `tobytes()` do what their names say. `create_solid_color_image(color, size=(10, 10))` fills an image with a colour given as 1 to 4 floats in [0, 1].
- `yukiengine.input`
  - `InputController(set_cursor_pos=None)` records key events (`execute_key_callbacks`) and cursor moves (`execute_cursor_callbacks`).
  - It runs named keyboard and cursor callbacks in name order.
  - Key state is available through `key_status(key)`. Cursor state is available through `mouse_position()` and `mouse_velocity()`.
  - `horizontal_axis()` and `vertical_axis()` report -1, 0 or 1 from A/D/arrow keys and S/W/arrow keys.
  - While the mouse is locked with `lock_mouse(x, y)`, each cursor move calls `set_cursor_pos` with the lock position.
  - Also defines `KeyCode`, `KeyState`, `KeyStatus`, `MouseStatus` and `MouseLock`.
- `yukiengine.mesh`
  - `Mesh(vertices, indices, name="", texture=None, material=None)` keeps `MeshVertex` data, `MeshIndexData` and a model `matrix`.
  - The matrix is changed with `translate`, `rotate` and `scale`, or set outright with `set_translation`, `set_rotation` and `set_scale`.
  - `renormal_matrix` is the inverse of `matrix` as of the last transform.
  - `transformation_info()` and `decompose(matrix)` split a matrix into scale, rotation quaternion (w, x, y, z), translation and skew.
  - `vertex_buffer()` packs the vertices as interleaved float32 data, and `index_buffer()` packs the indices as uint32.
  - `generate_solid_material(ambient, specular, diffuse)` builds a `Material` from solid-colour images.
- `yukiengine.model`: `Model(name, meshes)` groups meshes by name. Its meshes are created when the model is constructed. `get_mesh(name)` returns a mesh or `None`, and `destroy()` destroys them all. A `Model` can also be used as a context manager.
- `yukiengine.entity`: `Entity(name, model=None)` is a base class with `create`, `awake`, `update`, `render(camera)` and `destroy`. Each of these runs the matching `on_*` hook, which you override. `render` returns the model's meshes. The default hooks count their calls in `hook_counts`.
- `yukiengine.application`
  - `Application` runs the create / awake / update / destroy loop over its parts until `terminate()` is called. `reload()` tears the parts down and creates them again.
  - Every part other than the logger is optional. Parts are called by duck typing:
    - window: `create`, `awake`, `update`, `should_close`, `destroy`
    - graphics: `create`, `awake`, `render`, `destroy`
    - worker pool: `start`, `wait_for_pool_ready`, `notify_workers`, `terminate`, `join`
    - system: `create`
    - input controller: `create`, `destroy`
    - scene: `awake`, `is_ready`, `create`, `update`, `destroy`
  - `on_frame(app)` is called at the end of each update.
  - An `EngineError` raised in the loop is written to the logger and ends the loop.
  - `create_app(**kwargs)` makes the single global application and raises `AppCreatedError` if one already exists. `get_app()` returns it, and `reset_app()` forgets it.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from yukiengine.camera import Camera
from yukiengine.input import InputController, KeyCode, KeyState
from yukiengine.application import Application
from yukiengine.logger import Logger

camera = Camera()
camera.move(np.array([0.0, 0.0, -3.0]))
camera.look_at_point(np.array([0.0, 0.0, 0.0]))
camera.update()

inputs = InputController()
inputs.create()
inputs.execute_key_callbacks(KeyCode.KEY_D, 0, KeyState.PRESS, 0)
print(inputs.horizontal_axis())  # 1

# One frame, then stop; the log file is written to /tmp.
app = Application(logger=Logger("/tmp"), on_frame=lambda a: a.terminate())
app.run()
```

## What it does not do

The package has no renderer. It does not use a GPU, it has no window and no shaders, and it makes no draw calls. Its parts compute matrices and pixel and vertex data for a renderer to use.

It also does not provide the following:

- loading of 3D model files
- a scene class
- timers
- a worker thread pool
- a window or graphics back end

`Application` only calls such parts when you supply them. There is no command-line program.