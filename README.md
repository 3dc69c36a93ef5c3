# svision

This package is the drawing and layout core of a small software-rendered widget toolkit.
It is written in plain Python. Pillow is used only to decode image files.

## Modules

- `svision.geometry` holds the `Position`, `Size` and `LayoutParams` value types.
  - `Size.centered`, `Size.centered_x` and `Size.centered_y` work out where to place one size inside another.
  - `Size.padded_center_x` and `Size.padded_center_y` do the same job but take the padding as a `LayoutParams`.
- `svision.colors` has helpers for 32-bit ARGB colours:
  - `make_color`, `get_red`, `get_green`, `get_blue` and `get_alpha`
  - `blend_colors`, `lighter` and `darker`
  - `rgb_to_hsl` and `hsl_to_rgb`, which use the `HSL` dataclass
  - the bit helpers `get_bit`, `set_bit` and `toggle_bit`
  - `Gradient`, which steps from one colour to another
- `svision.bitmap` provides `Bitmap`, a row-major buffer of ARGB pixels. It can:
  - get, put and blend single pixels
  - draw lines, with `line` and `line_thickness`
  - draw rectangles, circles, ellipses and quadratic Bézier curves
  - fill rectangles, gradients, circles and ellipses
  - resize and rescale (nearest neighbour), and flood fill
  - draw one bitmap onto another, with optional alpha blending

  The rounded-rectangle methods currently draw square corners.
- `svision.buttonstates` provides `AbstractButtonState`. This is the state machine behind a clickable widget. It moves between these `ButtonStates`:
  - `NORMAL`
  - `HOVERED`
  - `CLICKED_INSIDE`
  - `CLICKED_OUTSIDE`

  The module also defines the `EventMouse` and `EventKeyboard` events and the `KeyCodes`, `MouseEvents` and `EventPropagation` enumerations.
- `svision.mousecursors` defines the `MouseCursor` enumeration.
- `svision.layout` has `HorizontalLayout`, `VerticalLayout`, `HorizontalSpacer` and `VerticalSpacer`, all based on `LayoutItem`. The two layouts share space between their items using each item's size hint and weight.
- `svision.loaders` provides `ImageLoader`. It tries each registered `ImageDecoder` in turn. A `PillowImageDecoder` is registered by default.

## Installing

```
pip install .
```

## Example

```python
from svision.bitmap import Bitmap
from svision.colors import make_color, lighter
from svision.geometry import Position

canvas = Bitmap()
canvas.resize(64, 64)
canvas.fill(make_color(0, 0, 0))

red = make_color(255, 0, 0)
canvas.line(0, 0, 63, 63, red)
canvas.draw_circle(32, 32, 20, lighter(red, 0.2))

sprite = Bitmap()
sprite.resize(8, 8)
sprite.fill(make_color(0, 255, 0, 128))
canvas.draw(Position(10, 10), sprite, True)
```

This example loads an image file into a bitmap:

```python
from svision.bitmap import Bitmap
from svision.loaders import ImageLoader

image = Bitmap()
if ImageLoader().load_file("picture.png", image):
    print(image.size)
```

This example walks a button through a press:

```python
from svision.buttonstates import AbstractButtonState, ButtonStates, EventMouse

state = AbstractButtonState()
state.on_mouse_enter()
state.on_mouse_click(EventMouse(pressed=True, button=1, is_local=True))
assert state.state is ButtonStates.CLICKED_INSIDE
```

## What it does not do

This package has no widgets, windows, themes or event loop. It also has no font rendering and no platform back end for showing a bitmap on screen. It draws into memory, computes layouts and tracks button state. Putting pixels on a display is left to the application.

## Running the tests

```
pip install .[test]
pytest
```