# ispdexa

`ispdexa` presents the results of simulating a distributed computing system:
machines and links whose use is recorded in a `results.json` file. It reads
that file and produces text reports, a resource table, chart data and SVG
pictures in which every machine or link is a circle sized by its work. It also
holds the geometry and selection state of the icons used to draw such a system.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
ispdexa [DIRECTORY] [--hue H]
```

`DIRECTORY` (default: the current directory) must contain `results.json`.
The command:

1. prints four sections: `Global`, `Tasks`, `Users` and `Resources`. The
   resource rows are separated by tabs.
2. writes `machine_values.txt` (Mflops per machine) and `link_values.txt`
   (Mbits per link) into the directory.
3. draws `output.svg` from the link values and `output_2.svg` from the machine
   values, and prints `wrote <path>` for each. When a file has no values to
   draw, it prints `<file>: nothing to draw` to standard error instead.

`--hue` sets the hue of the first circle, a number in `[0, 1)`. Without it the
hue is chosen at random. If `results.json` is missing or does not hold a JSON
object, the command prints an error and exits with status 1.

## Reading results

```python
from ispdexa.results import (
    global_report,
    load_results,
    resources_table,
    tasks_report,
    users_report,
    write_value_files,
)

data = load_results("results.json")       # ValueError unless it is a JSON object
for line in global_report(data):
    print(line)
tasks_report(data)                          # list of lines
users_report(data)                          # one block of lines per user
rows = resources_table(data)                # (label, owner, processing, communication)
machine_path, link_path = write_value_files(data, ".")
```

- `global_report` gives the total simulated time, satisfaction, idleness of
  processing and of communication resources, and efficiency. It ends with
  `Efficiency GOOD` (above 70), `Efficiency MEDIUM` (above 40) or
  `Efficiency BAD`.
- `resources_table` lists the machines first and then the links. Links have
  `---` as their owner.
- `write_value_files` writes one `value_label` line per machine or link.
- `format_number` renders numbers in the short general form used throughout
  (`f"{value:g}"`).

Missing or wrongly typed fields are read as 0 or as an empty string.

## Chart data

`ispdexa.plots` prepares data for plotting but does not draw anything itself.

- `computing_power_series(items)` returns one `Series` per user, machine or
  task. Each series holds its `name`, the `time` values as `xs` and the `rate`
  values as `ys`, and an HSL colour. The hues are spread evenly round the
  colour wheel, and saturation and lightness are chosen at random.
- `scatter_points(data)` returns a `ScatterPlot`. Its `points` give the Mflops
  of each machine against the machine's id. Its `legend` has one
  `("Scheme N", color)` entry per scheme, sorted by scheme. `x_range` and
  `y_range` run from 0 to 1.1 times the largest value.
- `scheme_color(scheme)` gives the HSV colour `(hue, 255, 255)` for a scheme,
  with `hue = scheme * 150 mod 360`.

## Circle packing

```python
from ispdexa.bubbles import pack_file

svg = pack_file("machine_values.txt", "output_2.svg", 0.3)
```

`pack_file` handles each line of the value file as follows:

- The leading whole number is the value, and the circle's area equals it.
- The text after the first underscore is the label.
- Lines that are a single character, or whose value is 0, are skipped.

Colours step round the hue circle by the golden ratio, starting at the hue you
pass in. If no line holds a value, `pack_file` raises `ValueError`.

The building blocks can also be used on their own:

- `ispdexa.bubbles.parse_values(lines, hue)` returns a list of
  `ispdexa.packing.Circle`.
- `ispdexa.packing.place_circles(circles, bounds, debug=False)` lays the
  circles out side by side around the origin. It grows the given `Bounds` as
  it goes and returns a circle on the outer front chain.
- `ispdexa.bubbles.render_svg(circles, front, bounds, debug=False)` returns the
  SVG text. It centres the circles on the middle of `bounds`, moving them in
  place. With `debug`, it also draws the front chain as lines.
- `ispdexa.packing` also provides `place`, `intersects`, `distance` and
  `hsv_to_rgb`.

## Icons

`ispdexa.icons` models what is drawn on an editing table without using any
GUI toolkit:

- `Rect` is an axis-aligned rectangle with `from_corners`, `contains_point`,
  `contains_rect` and `united` (also available as `|`).
- `PixmapIcon` is a movable, selectable icon. It has `set_pos`, `middle`,
  `scene_bounding_rect` and `toggle_chosen`. A `press` followed by `release`
  counts as a click and toggles the selection; a press with `drag_to` in
  between does not. Dragging calls `update_position`, which redraws every link
  in the owner's `connected_links`.
- `LinkIcon` is the line between the icons of `owner.connections.begin` and
  `owner.connections.end`. It has `draw`, `update_positions`, `arrow_head`,
  `scene_bounding_rect` and `toggle_chosen`.
- `machine_icon`, `schema_icon` and `switch_icon` create a `PixmapIcon` with
  the matching pair of images.

## What this package does not do

- It does not run simulations. It only reads the results that a simulator has
  written.
- It has no graphical editor, and no way to build or save a system's
  description. `ispdexa.icons` leaves the objects that own the icons to the
  caller.
- The chart data is not plotted, and nothing opens a window.