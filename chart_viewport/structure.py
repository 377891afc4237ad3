from collections import namedtuple

from utils import pmts


class PixelRect(namedtuple('PixelRect', ('left', 'top', 'right', 'bottom'))):
    """Integer rectangle in pixel space (y grows downwards)."""

    __slots__ = ()

    def width(self):
        return self.right - self.left

    def height(self):
        return self.bottom - self.top

    def contains(self, x, y):
        """Inclusive on all edges."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class Viewport(namedtuple('Viewport', ('left', 'top', 'right', 'bottom'))):
    """Float rectangle in data space; `top` is the smaller Y value, `bottom` the larger one."""

    __slots__ = ()

    @property
    def y_min(self):
        return self.top

    @property
    def y_max(self):
        return self.bottom

    def width(self):
        return self.right - self.left

    def height(self):
        return self.bottom - self.top


class DataBoundaries(namedtuple('DataBoundaries', ('left', 'top', 'right', 'bottom'))):
    """The extent of a data set, in the usual orientation: `top` is the largest Y value, `bottom` the smallest."""

    __slots__ = ()

    def as_viewport(self):
        return Viewport(self.left, self.bottom, self.right, self.top)


EMPTY_PIXEL_RECT = PixelRect(0, 0, 0, 0)
EMPTY_VIEWPORT = Viewport(0.0, 0.0, 0.0, 0.0)


class ChartViewportStructure(object):

    def __init__(self, margin, content_rect_with_margins, content_rect, current_viewport, maximum_viewport):
        pmts(margin, int)
        pmts(content_rect_with_margins, PixelRect)
        pmts(content_rect, PixelRect)
        pmts(current_viewport, Viewport)
        pmts(maximum_viewport, Viewport)

        self.margin = margin
        self.content_rect_with_margins = content_rect_with_margins
        self.content_rect = content_rect
        self.current_viewport = current_viewport
        self.maximum_viewport = maximum_viewport

    @classmethod
    def empty(cls, margin):
        return cls(margin, EMPTY_PIXEL_RECT, EMPTY_PIXEL_RECT, EMPTY_VIEWPORT, EMPTY_VIEWPORT)

    def replace(self, **kwargs):
        attributes = {
            'margin': self.margin,
            'content_rect_with_margins': self.content_rect_with_margins,
            'content_rect': self.content_rect,
            'current_viewport': self.current_viewport,
            'maximum_viewport': self.maximum_viewport,
        }
        attributes.update(kwargs)
        return ChartViewportStructure(**attributes)

    def __eq__(self, other):
        return isinstance(other, ChartViewportStructure) and self._as_tuple() == other._as_tuple()

    def __hash__(self):
        return hash(self._as_tuple())

    def _as_tuple(self):
        return (self.margin, self.content_rect_with_margins, self.content_rect, self.current_viewport,
                self.maximum_viewport)

    def __repr__(self):
        return "ChartViewport(%s, %s, %s, %s, %s)" % (
            self.margin, self.content_rect_with_margins, self.content_rect, self.current_viewport,
            self.maximum_viewport)
