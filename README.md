# coordpicker

A small desktop tool for working out screen coordinates while laying out a
2D application. Pick a target resolution, hover over the canvas to read the
position under the cursor, and click to drop markers whose coordinates you can
copy to the clipboard.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library. The window is
drawn with Tkinter, which ships with most Python builds; without it,
`coordpicker.gui.PickerWindow` raises `RuntimeError`, while the rest of the
package still works.

## Running

```
coordpicker
```

Options:

- `--width N` – initial window width (default 1280, at least 800).
- `--height N` – initial window height (default 800, at least 600).
- `--light` – start in light mode instead of dark mode.

### Controls

- Click to place a marker (only on the canvas area).
- Right-click to remove a marker near the cursor position.
- Select a marker in the "Saved Markers" list and use "Copy" to copy its
  coordinates or "Delete" to remove it.
- "Copy All Coordinates" copies every marker as a numbered list.
- Middle-click drag or Alt+drag to pan.
- Scroll to zoom in and out (10% per step, between 10% and 1000%; the view
  starts at 50%). "Reset View" returns to the starting pan and zoom.
- "Clear Markers" removes all markers.
- With grid snapping on, the cursor position snaps to the nearest grid
  intersection; positions within half a cell of a canvas edge snap onto that
  edge.

### Settings

- **Resolution**: HD (1280x720), Full HD (1920x1080), 4K (3840x2160),
  iPhone (390x844), iPad (810x1080), or Custom, with a size from 100 to 10000
  pixels on each side.
- **Grid**: show or hide it, set a cell size from 5 to 100 pixels, and turn
  snapping on or off.
- **Coordinate system**: origin at the top-left or the bottom-left corner.
  Existing markers are recalculated when the origin changes, unless that
  option is turned off.
- **Markers**: the colour of new markers.
- **Appearance**: dark or light mode.

## Using it from Python

The model behind the window, `coordpicker.picker.CoordinatePicker`, can be
driven without a display:

```python
from coordpicker.geometry import Point, Rect
from coordpicker.picker import CoordinatePicker

picker = CoordinatePicker()
view = Rect.from_center_size(Point(640, 400), Point(1280, 800).to_vector())

picker.hover(Point(700, 420), view)
print(picker.current_position_text())

picker.place_marker(Point(700, 420), view)
print(picker.all_coordinates_text())
```

Other methods select resolutions (`select_resolution`, `set_custom_size`),
change the grid (`update_grid`), move the origin (`set_origin_top_left`),
remove markers (`remove_marker_at`, `remove_nearby_marker`, `delete_marker`,
`clear_markers`) and give the screen positions of grid lines and the origin
(`grid_lines`, `origin_point`).

The building blocks live in their own modules:

- `coordpicker.geometry` – `Vector`, `Point` and `Rect`.
- `coordpicker.canvas` – `Canvas`, with pan, zoom and conversion between
  screen and canvas coordinates.
- `coordpicker.coordinate` – `CoordinateSystem`, converting between canvas
  coordinates and a top-left or bottom-left origin.
- `coordpicker.grid` – `Grid` and its `snap` method.
- `coordpicker.marker` – `Color` and `Marker`.
- `coordpicker.state` – `UiState`, the current settings and cursor position.

## What it does not do

Markers and settings live only for as long as the window is open: nothing is
saved to or loaded from disk.

## Tests

```
pip install .[test]
pytest
```