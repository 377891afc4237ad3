"""
Pure coordinate math between pixel space (PixelRect) and data space (Viewport).

Pixel positions are returned as floats; rounding to whole pixels is left to whoever draws. The only exceptions are the
hit test (which truncates towards zero before comparing, as integer pixel grids do) and the scroll surface size.

Nothing here guards against degenerate rectangles (e.g. the viewport of a data set with a single point, or a content
rect that was never sized): dividing by their zero width or height yields inf, -inf or nan, as floats do elsewhere, and
those values simply propagate to the caller.

Most examples below show the data range 0..10 (X) by 0..20 (Y) on a content rect of 100 by 200 pixels.
"""
import math
import sys

from chart_viewport.structure import PixelRect, Viewport


MAX_PIXELS = sys.maxsize


def next_float_above(x):
    """
    The smallest float that's strictly larger than x.

    >>> next_float_above(1.0) > 1.0
    True
    >>> next_float_above(0.0)
    5e-324
    """
    return math.nextafter(x, math.inf)


def divided(numerator, denominator):
    """
    Float division that yields inf, -inf or nan for a zero denominator, rather than raising.

    >>> divided(1, 4)
    0.25
    >>> divided(3.0, 0), divided(-3.0, 0), divided(3.0, -0.0)
    (inf, -inf, -inf)
    >>> divided(0.0, 0)
    nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def whole_pixels(value):
    """
    Truncates towards zero; nan becomes 0 and the infinities become the largest (or smallest) int we draw with.

    >>> whole_pixels(2.9), whole_pixels(-2.9), whole_pixels(math.nan)
    (2, -2, 0)
    >>> whole_pixels(math.inf) == MAX_PIXELS, whole_pixels(-math.inf) == -MAX_PIXELS
    (True, True)
    """
    if math.isnan(value):
        return 0

    if math.isinf(value):
        return MAX_PIXELS if value > 0 else -MAX_PIXELS

    return int(value)


def inset(rect, left, top, right, bottom):
    """
    >>> inset(PixelRect(0, 0, 100, 100), 10, 10, 10, 10)
    PixelRect(left=10, top=10, right=90, bottom=90)
    >>> inset(PixelRect(0, 0, 100, 100), 1, 2, 3, 4)
    PixelRect(left=1, top=2, right=97, bottom=96)
    """
    return PixelRect(rect.left + left, rect.top + top, rect.right - right, rect.bottom - bottom)


def bounded(lower, upper, value):
    """Like min/max-bounding in the obvious way; if the bounds cross, `lower` takes precedence.

    >>> bounded(0, 10, 5)
    5
    >>> bounded(0, 10, 15)
    10
    >>> bounded(0, -10, 5)
    0
    """
    return max(lower, min(value, upper))


def clamped_viewport(current_viewport, maximum_viewport):
    """
    Returns the current viewport, bounded by the maximum viewport on each edge.

    >>> data_range = Viewport(0.0, 0.0, 10.0, 20.0)

    In-bounds, no effect is achieved by clamping:
    >>> clamped_viewport(Viewport(2.0, 4.0, 6.0, 8.0), data_range)
    Viewport(left=2.0, top=4.0, right=6.0, bottom=8.0)

    A viewport that's too large is cut off at each of the edges:
    >>> clamped_viewport(Viewport(-5.0, -1.0, 20.0, 30.0), data_range)
    Viewport(left=0.0, top=0.0, right=10.0, bottom=20.0)

    The right and bottom edges are never allowed to end up at (or before) the left and top edges: a viewport without
    width or height cannot be mapped onto pixels. Even when the current viewport lies entirely outside the maximum, we
    keep a minimal (but positive) width:
    >>> clamped = clamped_viewport(Viewport(15.0, 0.0, 18.0, 20.0), data_range)
    >>> clamped.left, clamped.right > clamped.left, clamped.width() > 0
    (15.0, True, True)
    """
    left = max(maximum_viewport.left, current_viewport.left)
    top = max(maximum_viewport.top, current_viewport.top)
    bottom = max(next_float_above(top), min(maximum_viewport.bottom, current_viewport.bottom))
    right = max(next_float_above(left), min(maximum_viewport.right, current_viewport.right))
    return Viewport(left, top, right, bottom)


def viewport_with_origin(current_viewport, maximum_viewport, x, y):
    """
    Moves the current viewport such that its bottom-left corner (in data terms: lowest X, highest Y) ends up at (x, y),
    without changing its size. The scroll range is the maximum viewport minus the current viewport's size; e.g. for a
    data range of 0 to 10 and a viewport width of 4 the left edge may be anywhere from 0 to 6.

    >>> data_range = Viewport(0.0, 0.0, 10.0, 20.0)
    >>> small = Viewport(0.0, 0.0, 4.0, 5.0)
    >>> viewport_with_origin(small, data_range, 3.0, 12.0)
    Viewport(left=3.0, top=7.0, right=7.0, bottom=12.0)

    Scrolling past the edges is not possible:
    >>> viewport_with_origin(small, data_range, 100.0, -100.0)
    Viewport(left=6.0, top=0.0, right=10.0, bottom=5.0)

    The size is carried over as a difference, not re-derived from the new position. A viewport that clamped_viewport
    shrank to a single step above its left (or top) edge therefore loses that step when moved to a larger coordinate,
    where floats are further apart; its width (or height) becomes 0. Reset such a viewport (e.g. with
    recompute_viewport) rather than panning it.
    >>> huge = Viewport(0.0, 0.0, 1e6, 1e6)
    >>> tiny = clamped_viewport(Viewport(0.0, 0.0, 0.0, 0.0), huge)
    >>> tiny.width() > 0
    True
    >>> viewport_with_origin(tiny, huge, 5e5, 5e5).width()
    0.0
    """
    width = current_viewport.width()
    height = current_viewport.height()

    x = bounded(maximum_viewport.left, maximum_viewport.right - width, x)
    y = bounded(maximum_viewport.top + height, maximum_viewport.bottom, y)

    return Viewport(x, y - height, x + width, y)


def to_pixel_x(content_rect, current_viewport, data_x):
    """
    >>> rect, data_range = PixelRect(0, 0, 100, 200), Viewport(0.0, 0.0, 10.0, 20.0)
    >>> to_pixel_x(rect, data_range, 5)
    50.0
    >>> to_pixel_x(rect, data_range, 0)
    0.0
    """
    return content_rect.left + divided(
        (data_x - current_viewport.left) * content_rect.width(), current_viewport.width())


def to_pixel_y(content_rect, current_viewport, data_y):
    """
    Higher data values end up higher on the screen, i.e. at lower pixel values:

    >>> rect, data_range = PixelRect(0, 0, 100, 200), Viewport(0.0, 0.0, 10.0, 20.0)
    >>> to_pixel_y(rect, data_range, 10)
    100.0
    >>> to_pixel_y(rect, data_range, 20)
    0.0
    """
    return content_rect.bottom - divided(
        (data_y - current_viewport.top) * content_rect.height(), current_viewport.height())


def contains_pixel(content_rect, x, y):
    """
    >>> rect = PixelRect(0, 0, 100, 200)
    >>> contains_pixel(rect, 0, 0), contains_pixel(rect, 100, 200), contains_pixel(rect, -1, 0)
    (True, True, False)
    """
    return content_rect.contains(x, y)


def to_data_point(content_rect, current_viewport, pixel_x, pixel_y):
    """
    The inverse of to_pixel_x and to_pixel_y; returns an (x, y) tuple in data space, or None if the pixel is outside
    the content rect.

    >>> rect, data_range = PixelRect(0, 0, 100, 200), Viewport(0.0, 0.0, 10.0, 20.0)
    >>> to_data_point(rect, data_range, 50, 100)
    (5.0, 10.0)
    >>> to_data_point(rect, data_range, 0, 0)
    (0.0, 20.0)
    >>> to_data_point(rect, data_range, -1, 50) is None
    True

    The bounds check is done on whole pixels (truncating), so a fraction of a pixel outside is still a hit:
    >>> to_data_point(rect, data_range, -0.5, 100)
    (-0.05, 10.0)
    """
    if not contains_pixel(content_rect, int(pixel_x), int(pixel_y)):
        return None

    data_x = current_viewport.left + divided(
        (pixel_x - content_rect.left) * current_viewport.width(), content_rect.width())
    data_y = current_viewport.top + divided(
        (pixel_y - content_rect.bottom) * current_viewport.height(), -content_rect.height())
    return data_x, data_y


def scroll_surface_size(content_rect, current_viewport, maximum_viewport):
    """
    The size (in pixels) the whole maximum viewport would take at the current zoom level.

    >>> rect, data_range = PixelRect(0, 0, 100, 200), Viewport(0.0, 0.0, 10.0, 20.0)

    When everything is visible that's just the size of the content rect:
    >>> scroll_surface_size(rect, data_range, data_range)
    (100, 200)

    Zoomed in 200% in both directions:
    >>> scroll_surface_size(rect, Viewport(0.0, 0.0, 5.0, 10.0), data_range)
    (200, 400)
    """
    return (whole_pixels(divided(maximum_viewport.width() * content_rect.width(), current_viewport.width())),
            whole_pixels(divided(maximum_viewport.height() * content_rect.height(), current_viewport.height())))
