from utils import pmts

from chart_viewport.structure import DataBoundaries, Viewport


NUMBER = (int, float)


class ChartViewportNote(object):
    pass


class RecomputeContentArea(ChartViewportNote):
    """The host's size or padding changed. Resets the content rect to the fixed internal margin, i.e. any margins set
    by other notes (axis margins included) must be set again afterwards."""

    def __init__(self, width, height, padding_left, padding_top, padding_right, padding_bottom):
        for v in [width, height, padding_left, padding_top, padding_right, padding_bottom]:
            pmts(v, int)

        self.width = width
        self.height = height
        self.padding_left = padding_left
        self.padding_top = padding_top
        self.padding_right = padding_right
        self.padding_bottom = padding_bottom


class SetUniformMargin(ChartViewportNote):
    def __init__(self, margin):
        pmts(margin, int)
        self.margin = margin


class SetMargins(ChartViewportNote):
    def __init__(self, left, top, right, bottom):
        for v in [left, top, right, bottom]:
            pmts(v, int)

        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom


class SetAxisMargins(ChartViewportNote):
    """Reserves room for axis labels drawn on the chart: `x_axis_margin` at the bottom, `y_axis_margin` at the left.

    Unlike the other margins, this one eats into the content rect with margins as well, and it accumulates: playing it
    twice reserves the room twice. Play RecomputeContentArea first to start from scratch.
    """

    def __init__(self, x_axis_margin, y_axis_margin):
        pmts(x_axis_margin, int)
        pmts(y_axis_margin, int)
        self.x_axis_margin = x_axis_margin
        self.y_axis_margin = y_axis_margin


class RecomputeViewport(ChartViewportNote):
    """The data changed; `boundaries` is its new extent. Both the maximum and the current viewport are reset to it, so
    any zooming or panning is forgotten."""

    def __init__(self, boundaries):
        pmts(boundaries, DataBoundaries)
        self.boundaries = boundaries


class ClampViewport(ChartViewportNote):
    pass


class SetViewportOrigin(ChartViewportNote):
    """Pan: put the bottom-left corner of the current viewport at data position (x, y), keeping its size."""

    def __init__(self, x, y):
        pmts(x, NUMBER)
        pmts(y, NUMBER)
        self.x = x
        self.y = y


class SetCurrentViewport(ChartViewportNote):
    """Zoom: replace the current viewport as-is. Follow up with ClampViewport or SetViewportOrigin to bring it within
    bounds."""

    def __init__(self, viewport):
        pmts(viewport, Viewport)
        self.viewport = viewport
