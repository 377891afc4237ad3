"""
The 'chart_viewport' implements the mapping between a chart's data space and the pixels of the surface it's drawn on.

Two rectangles live in pixel space: the content rect with margins (the host's area minus its padding) and the content
rect (the former, further inset by internal margins; this is where data is actually drawn). Two rectangles live in data
space: the maximum viewport (the full extent of the data) and the current viewport (the part of the data that's
presently visible).

The data-space rectangles follow an inverted convention: their `top` is the _smaller_ Y value, their `bottom` the larger
one. Data Y values grow upwards on screen while pixel Y values grow downwards; the inversion means that the "top" of a
viewport is drawn at the bottom of the content rect. Don't "fix" this: all Y-axis arithmetic below depends on it. The
aliases `y_min` and `y_max` on Viewport exist to make call sites readable.

Panning and zooming are expressed by changing the current viewport; it is kept inside the maximum viewport by bounding
(see `clamp_viewport` and `set_viewport_origin`), and is never allowed to collapse to a zero width or height.

The state is modelled as an immutable structure on which notes are played (see clef and construct); ViewportCalculator
is the mutable owner of such a structure for hosts that prefer calling methods.
"""
