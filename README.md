# cubscene

This pure Python library provides the building blocks of a small grid-based
raycasting game:

- **Scene files** (`.cub`): wall textures, floor and ceiling colours, and a
  tile map that walls must close (`cubscene.cubfile`).
- **XPM textures**: XPM images read from text, from a list of strings or from
  a file into pixel buffers (`cubscene.xpm`).
- **Images**: 32-bit pixel buffers that can be written and read
  (`cubscene.image`).
- **Colours**: named X11 colours, RGB packing and conversion to shallow visuals
  (`cubscene.colornames`, `cubscene.colors`).
- **Events**: windows with one hook per event type, an event queue, and a loop
  that sends each event to its hook (`cubscene.events`).

The library uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Loading a scene

```python
from cubscene.cubfile import load_scene, CubError

try:
    scene = load_scene("maps/level.cub")
except CubError as err:
    print("Error:", err)
```

`load_scene` works through a scene file in this order:

1. It checks that the path ends in `.cub`.
2. It opens the file.
3. It reads the `NO`, `SO`, `WE` and `EA` texture lines and loads each texture with `xpm_file_to_image`.
4. It reads the `F` and `C` colour lines, which have the form `r,g,b`. Each channel is clamped to 0..255.
5. It reads the map.

`load_scene` raises `CubError` in any of these cases:

- The extension is wrong or the file cannot be opened.
- An element is missing or repeated, or a texture or colour line comes after the map.
- A colour is malformed.
- A texture cannot be loaded.
- The map has an invalid character.
- The map is not closed.

The result is a `Scene`. It holds:

- the four textures (`north`, `south`, `west`, `east`)
- the `floor` and `ceiling` colours as `0xRRGGBB`
- the `grid`: rows of `EMPTY` (0), `WALL` (1) and `VOID` (2), padded with `VOID` to `width`
- `height`
- the player's `start_x`, `start_y` and `orientation` (`N`, `S`, `E` or `W`)

To pass in the lines yourself and choose how textures are loaded, call
`parse_scene(lines, texture_loader)`. The loader receives the path from each
texture line. You can also feed a `SceneParser` one line at a time with
`parse_line` and call `finish` at the end.

These helpers can also be used on their own:

- `check_format(path)`
- `is_number(text)`
- `parse_color(line)`
- `check_map(grid, orientation)`

## Textures and images

```python
from cubscene.xpm import xpm_file_to_image, XpmError
from cubscene.image import Image

texture = xpm_file_to_image("textures/wall.xpm")
color = texture.get_pixel(0)

canvas = Image.new(320, 200)
canvas.put_pixel(10, 20, 0xFF0000)
```

The XPM functions take different kinds of input:

- `xpm_text_to_image` reads XPM source text. It first blanks out C-style comments and then takes the quoted strings.
- `xpm_to_image` takes a sequence of strings and drops the last character of each one.
- `parse_xpm` takes the header, colour and pixel lines as they are.

All of them raise `XpmError` on malformed input.

Pixels behave as follows:

- Pixels that use the `None` colour are stored as `0xFF000000`.
- Pixels whose code names no colour are stored as 0.
- `put_pixel` ignores coordinates outside the image.
- `get_pixel` takes a linear index and returns `-1` outside the image.

## Colours

```python
from cubscene.colornames import lookup_color
from cubscene.colors import rgb_to_int, mask_shifts, good_color

lookup_color("light", "blue")   # 0xadd8e6
lookup_color("#ff8000", None)   # 0xff8000
lookup_color("none")            # -1
rgb_to_int(300, -5, 128)        # 0xff0080, each channel clamped to 0..255

shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
good_color(0xFFFFFF, 16, shifts)  # pixel value for a 16-bit visual
```

`lookup_color` ignores case. It returns 0 for names it does not know.
`good_color` returns the colour unchanged for depths of 24 bits or more.

## Events

```python
from cubscene.events import Display, Event, EventType

display = Display()
window = display.new_window(640, 480, "demo")
window.key_hook(lambda key, param: print("key", key), None)
display.post(window, Event(EventType.KEY_RELEASE, key=0xFF1B))
display.loop_hook(lambda param: display.loop_end(), None)
display.loop()
```

Each hook receives the arguments that belong to its event type:

| Event type | Hook arguments |
| --- | --- |
| Key events | `(key, param)` |
| Button events | `(button, x, y, param)` |
| Motion | `(x, y, param)` |
| Everything else | `(param)` |

Two event types have special handling:

- An expose event calls its hook only when its `count` is 0.
- A `CLIENT_MESSAGE` event with `close_request=True` calls the window's `DESTROY_NOTIFY` hook.

`key_hook`, `mouse_hook` and `expose_hook` install hooks for key release,
button press and expose. `hook` installs a hook for any event type.

A new window gets an expose event queued. `loop` returns when any of these
happens:

- `loop_end` is called.
- Every window has been destroyed.
- The queue is empty and no loop hook is set.

## What it does not do

- It does not open real windows and draws nothing on screen. A `Display` is an in-memory event queue, and you post events to it yourself.
- It does not cast rays, render walls, move a player or draw a minimap. It reads scenes, textures and colours and dispatches events, and a game can be built on top of that.
- It installs no command-line program.