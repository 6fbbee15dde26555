# fractview

`fractview` holds the state and navigation logic of an interactive
fractal explorer, together with the small pieces it leans on: an XPM
image reader, the X11 colour-name table, a buffered line reader and a
set of C-style string, memory and character helpers.

It has no dependencies beyond the Python standard library and supports
Python 3.10 and later.

## What it does not do

The package keeps track of what a fractal view shows and how input
changes it, but it does not draw anything. There is no window, no
rendering of the fractals themselves and no command to run: a program
that wants a picture reads `Viewer.kernel_parameters()` and renders it
itself, and feeds key and mouse events into the viewer.

## Fractals

`fractview.view.FractalKind` names five fractals; `parse_fractal`
picks one from a list of command-line arguments:

| argument      | `FractalKind`  |
|---------------|----------------|
| `mandelbrot`  | `MANDELBROT`   |
| `julia`       | `JULIA`        |
| `Burningship` | `BURNING_SHIP` |
| `Mandelbar`   | `MANDELBAR`    |
| `tanhjulia`   | `TANH_JULIA`   |

`parse_fractal` raises `UsageError` unless it is given exactly one
argument and that argument is one of these names (case matters).

## Driving a viewer

```python
from fractview.view import FractalKind, QuitRequested, Viewer

viewer = Viewer(FractalKind.JULIA)

viewer.handle_mouse_move(960, 540)        # remember the pointer position
viewer.handle_mouse_button(4, 960, 540)   # wheel up: zoom towards it
viewer.handle_key(124)                    # right arrow: pan

floats, ints = viewer.kernel_parameters()
for x, y, text in viewer.help_lines():
    print(x, y, text)
```

The view covers a 1920 × 1080 window. It starts on the region from
−4 to 4 on the real axis, with the imaginary span from −2 set by the
aspect ratio, 50 iterations, the constant −0.9 + 0.3i and the colour
weights red 16, green 8, blue 0. `reset()` restores all of these.

`kernel_parameters()` returns two tuples: minimum imaginary, minimum
real, maximum imaginary, maximum real, constant real and constant
imaginary; then blue, green, red, iteration limit, fractal number,
width and height.

`handle_key` takes macOS key codes and always returns `True`:

| code      | key                | action                                          |
|-----------|--------------------|-------------------------------------------------|
| 24 / 27   | `=` (`+`) / `-`    | zoom in / out around the last pointer position  |
| 123–126   | arrows             | move the view                                   |
| 67 / 75   | keypad `*` / `/`   | one more / one fewer iteration                  |
| 83, 84, 85| keypad 1, 2, 3     | raise red, green, blue (up to 16)               |
| 86, 87, 88| keypad 4, 5, 6     | lower red, green, blue (down to 0)              |
| 15        | `R`                | reset the view                                  |
| 116       | Page Up            | switch to the next fractal and reset            |
| 49        | Space              | on the two Julia sets, toggle following the pointer |
| 53        | Escape             | raises `QuitRequested`                          |

`handle_mouse_button(button, x, y)` zooms in for button 4 and out for
button 5, always about the position last given to `handle_mouse_move`;
events with a negative coordinate are ignored and return `False`.
`handle_mouse_move(x, y)` stores the position clamped to the window;
while following the pointer it also sets the constant from the
position and returns `True`.

## XPM images

```python
from fractview.xpm import XpmError, parse_xpm_file

try:
    image = parse_xpm_file("icon.xpm")
except XpmError as exc:
    print("not a usable XPM file:", exc)
else:
    print(image.width, image.height, hex(image.pixels[0][0]))
```

`parse_xpm_file` drops comments outside quotes (`strip_comments`) and
decodes the quoted strings; `parse_xpm_lines` decodes a sequence of
already-extracted XPM strings. The result is an `XpmImage` with
`width`, `height` and `pixels`, a list of rows of 32-bit values.
Colours may be written as `#rrggbb` or by X11 name, and unknown names
give 0; `None` gives the transparent value `0xFF000000`.

`fractview.colors.lookup(name)` returns a named colour (ASCII case is
ignored, `none` is −1, unknown names give `None`), and
`text_to_rgb(name, end)` parses a full colour specification.
`NAMED_COLORS` is the read-only table itself.

## Utilities

* `fractview.lines.LineReader` reads a text or binary stream line by
  line through a small fixed-size buffer; `read_line()` returns `None`
  at the end, and the reader can be iterated.
* `fractview.words.split_words` splits on spaces and tabs; `find` and
  `find_unquoted` locate a pattern, the latter skipping double-quoted
  text.
* `fractview.lists.LinkedList` is a singly linked list with
  `push_front`, `pop_front`, `clear`, `for_each` and `map`.
* `fractview.ctype` classifies ASCII characters; `fractview.numbers`
  has `atoi`, `itoa`, `exact_sqrt` and `swap` with 32-bit integer
  behaviour; `fractview.search` finds and compares within strings and
  bytes; `fractview.strings` builds, trims and splits strings;
  `fractview.memory` fills, copies and moves bytes in a `bytearray`;
  `fractview.output` writes characters, strings and numbers to a
  stream or standard output.

## Tests

The test suite uses pytest; install the `test` extra to get it.