import pytest

from graphemu.graph import (
    GRAPH_SCALE,
    ORIGIN_X,
    ORIGIN_Y,
    POINT_SIZE,
    WIN_HEIGHT,
    WIN_WIDTH,
    Graph,
    Grid,
    Rect,
    screen_to_graph,
)


def test_origin_lies_on_grid():
    lines = Grid(GRAPH_SCALE).lines()
    columns = WIN_WIDTH // GRAPH_SCALE
    vertical_xs = {line.x for line in lines[:columns]}
    horizontal_ys = {line.y for line in lines[columns:]}
    assert ORIGIN_X in vertical_xs
    assert ORIGIN_Y in horizontal_ys


def test_screen_to_graph_origin():
    x, y = screen_to_graph(ORIGIN_X, ORIGIN_Y)
    assert x == 0
    assert y == 0


def test_screen_to_graph_axis_directions():
    x, y = screen_to_graph(ORIGIN_X + 2 * GRAPH_SCALE, ORIGIN_Y - 3 * GRAPH_SCALE)
    assert (x, y) == (2.0, 3.0)


def test_grid_line_count_and_sizes():
    lines = Grid(GRAPH_SCALE).lines()
    columns = WIN_WIDTH // GRAPH_SCALE
    rows = WIN_HEIGHT // GRAPH_SCALE
    assert len(lines) == columns + rows
    assert all(line.h == WIN_HEIGHT for line in lines[:columns])
    assert all(line.w == WIN_WIDTH for line in lines[columns:])
    assert lines[0].x == GRAPH_SCALE


def test_set_point_truncates_and_describes():
    graph = Graph(GRAPH_SCALE)
    point = graph.set_point(2.9, 3.2)
    assert (point.x, point.y) == (2.0, 3.0)
    assert point.info == "2.0,3.0"
    assert graph.points == [point]


def test_set_point_truncates_towards_zero():
    graph = Graph(GRAPH_SCALE)
    point = graph.set_point(-1.7, -0.4)
    assert (point.x, point.y) == (-1.0, 0.0)


def test_click_round_trip_to_rect():
    graph = Graph(GRAPH_SCALE)
    sx = ORIGIN_X + 4 * GRAPH_SCALE
    sy = ORIGIN_Y + 2 * GRAPH_SCALE
    graph.set_point(*screen_to_graph(sx, sy))
    assert graph.point_rects() == [Rect(sx, sy, POINT_SIZE, POINT_SIZE)]


def test_ruler_axes_through_origin():
    rects = Graph(GRAPH_SCALE).ruler_rects()
    assert rects[0] == Rect(ORIGIN_X, 0, 3, WIN_HEIGHT)
    assert rects[1] == Rect(0, ORIGIN_Y, WIN_WIDTH, 3)
    ticks = WIN_WIDTH // GRAPH_SCALE + WIN_HEIGHT // GRAPH_SCALE
    assert len(rects) == 2 + ticks


def test_ruler_labels_zero_at_origin():
    labels = Graph(GRAPH_SCALE).ruler_labels()
    zeros = [label for label in labels if label.text == "0"]
    assert len(zeros) == 1
    assert (zeros[0].x, zeros[0].y) == (ORIGIN_X + 4, ORIGIN_Y + 5)


@pytest.mark.parametrize("units", [1, 3, -2])
def test_ruler_labels_match_tick_positions(units):
    labels = Graph(GRAPH_SCALE).ruler_labels()
    x_labels = {label.text: label.x for label in labels if label.y == ORIGIN_Y + 9}
    assert x_labels[str(units)] == ORIGIN_X + units * GRAPH_SCALE
    y_labels = {label.text: label.y for label in labels if label.x == ORIGIN_X + 9}
    assert y_labels[str(units)] == ORIGIN_Y - units * GRAPH_SCALE