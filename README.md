# blocky

The runtime core of a small 2D game engine, kept apart from any window, sound
or graphics library. Anything that would touch such a library, such as a
drawing surface, a sound mixer or a source of raw input events, is an object
you pass in. Every part can therefore run headless and be tested.

The package has no third-party dependencies.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Modules

### `blocky.logger`

`BLogger(filename="logfile.txt", to_console=True, to_file=True)` writes lines
of the form

```
HH:MM:SS.mmm   LEVEL   Name             message
```

to standard output and to the file. The file is truncated when it is opened.
If it cannot be opened, an error is printed to standard error and only the
console is used. Pass `filename=None` to use no file at all. `log(level,
func_name, message)` writes one line and also returns it. `BLogger` can be used
as a context manager, and `close()` closes the file.

The helpers that build each line:

- `level_to_string(level)` turns a `LogLevel` (`INFO`, `DEBUG`, `WARN`,
  `ERROR`) into a five-character name. Any other value gives `"UNKNOWN"`.
- `format_function_name(func_name)` cuts a qualified signature such as
  `"void Foo::bar(int)"` down to `"Foo"`. It drops the arguments, the last
  `::` part and the return type, then pads the result to 15 characters.
- `format_message(message)` leaves a string unchanged. It writes a number as
  `(1.500000)` and a pair as `(1.000000, 2.000000)`. Any other type raises
  `TypeError`.
- `make_timestamp(now=None)` formats a `datetime`, or the current local time,
  as `HH:MM:SS.mmm`.

### `blocky.timeutil`

`TimeUtil(clock=None, logger=None)` measures frame times. It uses the `clock`
callable you pass, or `time.perf_counter` if you pass none.

- `calculate_delta_time()` measures the time since the previous call and
  returns it multiplied by the game speed. It also stores the result as
  `scaled_delta_time`.
- `elapsed_time` is the time since creation or the last `reset()`. `fps` is
  worked out from the last unscaled delta, and is 0 before any frame.
- The game speed steps through the presets `0.125, 0.25, 0.5, 1, 1.5, 2, 5,
  10` with `increase_game_speed()` and `decrease_game_speed()`. These stop at
  either end. `reset_game_speed()` returns to 1x.
- `set_game_speed(speed)` sets any positive speed and raises `ValueError`
  otherwise.
- `toggle_fps_counter()` flips `fps_counter_enabled`.
- `TimeUtil.create_instance(...)` and `TimeUtil.get_instance()` manage one
  shared instance. `get_instance()` raises `RuntimeError` if none has been
  created.

Speed changes and toggles are logged at DEBUG level. By default they go to a
console-only `BLogger`.

### `blocky.camera`

`Camera(position=(0, 0), boundary=(100, 100))` holds a position that
`translate(x, y)` and `set_position(x, y)` keep inside `[-boundary,
+boundary]` on each axis. `set_boundary(x, y)` changes the limits but does not
move the camera back inside them.

### `blocky.modules`

`ModuleWrapper` is the abstract base class for modules. Each module implements
`update(delta)`. `ModuleManager(modules=())` holds one module per exact type:

- `register(module)` adds a module, or replaces one of the same type.
- `get_module(SomeModule)` returns the module of that type. It raises
  `ModuleMissingError`, a `LookupError`, if there is none, and `TypeError` for
  a type that is not a `ModuleWrapper`.
- `update(delta)` calls every module in the order they were registered.
- `create_instance` and `get_instance` manage a shared instance.

### `blocky.keys`

This module holds the enums `KeyInput`, `KeyState`, `MouseInput` and
`MouseButtonState`, the frozen dataclasses `KeyEvent` and `MouseEvent`, and the
SDL keycode and button constants (for example `SDLK_ESCAPE` and
`SDL_BUTTON_LEFT`).

- `sdl_key_to_key_input(keycode)` maps a keycode to a key, and gives
  `KEY_UNKNOWN` for any code it does not recognise.
- `sdl_button_to_mouse_input(button)` treats any button it does not recognise
  as the left button.

### `blocky.input`

`InputModule(time_util=None, on_quit=None, logger=None)` takes raw events of
three kinds:

- `KeyboardEvent(keycode, pressed)`
- `MouseButtonEvent(button, pressed, x, y)`
- `QuitEvent()`

`process_event(event)` passes a key or button event to the listeners
registered for that key or button, in the order they were added. It returns
the resulting `KeyEvent` or `MouseEvent`. `poll_events(events)` does the same
for each event in an iterable and returns a list of the results.

Listeners are added with `add_key_listener(key, owner, fn)` and
`add_mouse_listener(button, owner, fn)`.
`remove_key_listener` and `remove_mouse_listener` remove the first listener of
that owner.

Key presses also trigger these built-in hotkeys on the `TimeUtil`. If none was
passed, they use the shared instance.

| Key | Action |
| --- | --- |
| End | toggle the FPS counter |
| Page Up | increase the game speed |
| Page Down | decrease the game speed |
| Home | reset the game speed |
| Escape | request quit |

A `QuitEvent` also requests quit. A quit request sets `quit_requested` and
calls `on_quit` if one was given.

### `blocky.scenes`

`Scene(tag, active=True, children=(), on_update=None)` is a tree node. It has
`add_child`, `clone` (a deep copy), `set_active` and `update(delta,
recalculation_list)`. `update` runs the node's hook and then its children, but
only while the node is active.

`SceneManager(logger=None)` stores scene templates with `add_scene` and
`remove_scene(tag)`.

- `switch_scene(tag)` takes effect at the start of the next `update(delta)`.
  At that point a fresh clone of the template becomes `active_scene` and is
  activated.
- An unknown tag is logged as an error, and the current scene is kept.
- After the scene has been updated, every object in the recalculation list
  whose `marked_for_recalculation` is true has its
  `recalculate_world_matrix()` called. The list is then cleared.

### `blocky.audio`

`AudioModule(mixer, logger=None)` works through a `Mixer` that you implement,
with the methods `load(path)`, `play(chunk, loops)` and `halt(channel)`.

- `add_audio(tag, path, volume=100, looping=False)` loads a sound once per
  tag, and counts further adds as extra instances. It raises `AudioLoadError`
  if the mixer cannot load the file.
- `remove_audio(tag)` takes away one instance, and unloads the sound when no
  instances are left.
- `play_audio(tag, loops=0)` plays the sound. A sound added as looping always
  plays forever.
- `stop_audio(tag)` halts the channel the sound was last started on.
- `fragment(tag)` returns the `AudioFragment` kept for a tag.

### `blocky.gui`

`GuiRenderingModule(begin_frame=None, end_frame=None)` keeps UI callbacks by
tag, with `add_component`, `remove_component` and `tags`. `render()` calls
`begin_frame`, then every callback, then `end_frame`.

### `blocky.rendering`

`RenderingModule(canvas, time_util=None, camera=None, logger=None)` draws
`Renderable` objects onto a `Canvas` that you implement. A `Renderable` is a
rectangle, ellipse, sprite, animated sprite or text.

- `add_renderable` and `remove_renderable` manage the registered renderables.
  Removing from a layer that does not exist raises `KeyError`.
- `render()` draws the active renderables layer by layer, lowest layer first,
  offset by the camera.
- Sprite textures are loaded once for each `sprite_tag` and then reused.
- When the FPS counter is enabled, `render()` also draws an FPS label and a
  speed label in the top-right corner.

The calculations are exposed as pure functions: `rectangle_points`,
`ellipse_geometry`, `texture_dest_rect`, `fps_color` and `speed_text`.

## What it does not do

blocky opens no window, and it does not play sound, read devices or draw
pixels itself. All of that is done by the `Canvas`, the `Mixer` and the event
source that you provide.

It has no physics, no game-object or component system and no main loop. It
has no command-line program either: you build the frame loop yourself out of
these pieces.

## Example

```python
from blocky.camera import Camera
from blocky.logger import BLogger
from blocky.timeutil import TimeUtil

camera = Camera((0.0, 0.0), (100.0, 100.0))
camera.translate(250.0, -30.0)
print(camera.position)          # (100.0, -30.0)

clock = TimeUtil.create_instance(logger=BLogger(None, to_console=False))
clock.increase_game_speed()
print(clock.game_speed)         # 1.5
```

## Tests

```
pytest
```