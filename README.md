# graphemu

graphemu opens a window with a Cartesian plane on it. The plane has a grey
grid, red axes and numbered ticks. Click anywhere on the plane to plot a
blue point there.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Running

```
graphemu
```

This opens an 800×600 window titled "Graph emulator". The grid is 30 pixels
per unit and the origin sits at pixel (390, 300). Each mouse click adds a
point at the graph coordinates under the cursor; the coordinates are
truncated to whole units before the point is stored. For every click the
pixel position and the graph position (to one decimal place) are printed to
standard output. The window is redrawn every 200 ms. Close the window to
quit.

Tick labels are drawn with the font at `res/dina.ttf`, relative to the
working directory. If that file is missing, pygame raises an error when the
program starts.

The command takes no options.

## Using it as a library

The graph model in `graphemu.graph` needs no window:

```python
from graphemu.graph import Graph, screen_to_graph

graph = Graph(30)
x, y = screen_to_graph(480, 240)   # pixel position -> graph units: (3.0, 2.0)
point = graph.set_point(x, y)
print(point.info)                  # the point's coordinates as text

for rect in graph.point_rects():
    print(rect)                    # Rect(x, y, w, h) in pixels
```

In `graphemu.graph`:

- `Grid.lines()`: the grid line rectangles, vertical lines first.
- `Graph.set_point(x, y)`: adds a `Point` (with `x`, `y` and an `info`
  string) to `Graph.points` and returns it.
- `Graph.ruler_rects()`: the two axes followed by their tick marks.
- `Graph.ruler_labels()`: the tick numbers as `Label(text, x, y)`.
- `Graph.point_rects()`: a 4×4 pixel square for each plotted point.
- `screen_to_graph(mouse_x, mouse_y)`: window pixels to graph units.
- The window size, scale and origin as `WIN_WIDTH`, `WIN_HEIGHT`,
  `GRAPH_SCALE`, `ORIGIN_X` and `ORIGIN_Y`.

In `graphemu.font`, `Text(font_path, size, color)` wraps a pygame font;
`Text.render(string)` returns a surface and `Text.draw(surface, string, x, y)`
blits the text onto another surface.

In `graphemu.state`, `draw_graph(surface, graph)` draws a whole graph onto a
pygame surface. `State(title, width, height)` owns the window:
`init()` opens it, `handle_event(event)` handles one pygame event (returning
`False` on quit), `draw()` redraws, `update()` runs the event loop and
`close()` shuts pygame down. `State` can also be used as a context manager,
which opens the window on entry and closes it on exit. `main()` is the
entry point of the `graphemu` command.

`graphemu.utils` holds the number formatting used for the labels and point
text: `i_toa`, `f_toa` (which drops the sign of its argument) and `power`,
along with `get_random(upper, lower)`, which raises `ValueError` when
`upper` is below `lower`.

## What it does not do

Points cannot be removed, moved or saved; they last only while the window
is open. The window size and scale are fixed, and there is no zooming or
panning.

## Tests

```
pip install .[test]
pytest
```