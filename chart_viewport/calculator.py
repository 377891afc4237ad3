from kivy.logger import Logger

from chart_viewport.clef import (
    ClampViewport,
    RecomputeContentArea,
    RecomputeViewport,
    SetAxisMargins,
    SetCurrentViewport,
    SetMargins,
    SetUniformMargin,
    SetViewportOrigin,
)
from chart_viewport.construct import play_chart_viewport_note
from chart_viewport.layout_constants import default_margin
from chart_viewport.structure import ChartViewportStructure
from chart_viewport.utils import (
    contains_pixel,
    scroll_surface_size,
    to_data_point,
    to_pixel_x,
    to_pixel_y,
)


class ViewportCalculator(object):
    """Owns a ChartViewportStructure and replaces it as notes are played on it.

    `data_provider` is anything with a `get_boundaries()` method that returns the DataBoundaries of the charted data;
    it's only consulted on recompute_viewport().

    Everything returned by this class is an immutable snapshot; holding on to one is safe, but it won't reflect later
    changes.
    """

    def __init__(self, data_provider, margin=None):
        if margin is None:
            margin = default_margin()

        self.data_provider = data_provider
        self.structure = ChartViewportStructure.empty(margin)

    def play(self, note):
        self.structure = play_chart_viewport_note(note, self.structure)

    @property
    def margin(self):
        return self.structure.margin

    @property
    def content_rect(self):
        return self.structure.content_rect

    @property
    def content_rect_with_margins(self):
        return self.structure.content_rect_with_margins

    @property
    def current_viewport(self):
        return self.structure.current_viewport

    @property
    def maximum_viewport(self):
        return self.structure.maximum_viewport

    def recompute_content_area(self, width, height, padding_left, padding_top, padding_right, padding_bottom):
        """Call when the host's dimensions or padding change; margins other than the common one must be reapplied.

        All arguments are whole pixels (ints). Kivy widgets report their size and padding as floats; convert them,
        e.g. `int(widget.width)`, before passing them in.
        """
        self.play(RecomputeContentArea(width, height, padding_left, padding_top, padding_right, padding_bottom))
        Logger.debug("ChartViewport: content rect is %s (with margins: %s)",
                     self.content_rect, self.content_rect_with_margins)

    def set_uniform_margin(self, margin):
        self.play(SetUniformMargin(margin))

    def set_margins(self, left, top, right, bottom):
        self.play(SetMargins(left, top, right, bottom))

    def set_axis_margins(self, x_axis_margin, y_axis_margin):
        """Cumulative; see SetAxisMargins."""
        self.play(SetAxisMargins(x_axis_margin, y_axis_margin))

    def recompute_viewport(self):
        """Call when the data changes; resets any zoom or pan."""
        self.play(RecomputeViewport(self.data_provider.get_boundaries()))
        Logger.debug("ChartViewport: maximum viewport is %s", self.maximum_viewport)

    def clamp_viewport(self):
        self.play(ClampViewport())

    def set_viewport_origin(self, x, y):
        self.play(SetViewportOrigin(x, y))

    def set_current_viewport(self, viewport):
        self.play(SetCurrentViewport(viewport))

    def to_pixel_x(self, data_x):
        return to_pixel_x(self.structure.content_rect, self.structure.current_viewport, data_x)

    def to_pixel_y(self, data_y):
        return to_pixel_y(self.structure.content_rect, self.structure.current_viewport, data_y)

    def to_pixel(self, data_x, data_y):
        return self.to_pixel_x(data_x), self.to_pixel_y(data_y)

    def to_data_point(self, pixel_x, pixel_y):
        """Returns (data_x, data_y), or None if the pixel is outside the content rect."""
        return to_data_point(self.structure.content_rect, self.structure.current_viewport, pixel_x, pixel_y)

    def scroll_surface_size(self):
        return scroll_surface_size(
            self.structure.content_rect, self.structure.current_viewport, self.structure.maximum_viewport)

    def contains_pixel(self, x, y):
        return contains_pixel(self.structure.content_rect, x, y)
