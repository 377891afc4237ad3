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

from chart_viewport.structure import PixelRect
from chart_viewport.utils import (
    clamped_viewport,
    inset,
    viewport_with_origin,
)


def play_chart_viewport_note(note, structure):
    if isinstance(note, RecomputeContentArea):
        content_rect_with_margins = PixelRect(
            note.padding_left,
            note.padding_top,
            note.width - note.padding_right,
            note.height - note.padding_bottom)

        margin = structure.margin
        return structure.replace(
            content_rect_with_margins=content_rect_with_margins,
            content_rect=inset(content_rect_with_margins, margin, margin, margin, margin))

    elif isinstance(note, SetUniformMargin):
        return structure.replace(content_rect=inset(
            structure.content_rect_with_margins, note.margin, note.margin, note.margin, note.margin))

    elif isinstance(note, SetMargins):
        return structure.replace(content_rect=inset(
            structure.content_rect_with_margins, note.left, note.top, note.right, note.bottom))

    elif isinstance(note, SetAxisMargins):
        # The y axis is drawn on the left, the x axis at the bottom; both rects shrink by the same amounts.
        return structure.replace(
            content_rect_with_margins=inset(
                structure.content_rect_with_margins, note.y_axis_margin, 0, 0, note.x_axis_margin),
            content_rect=inset(structure.content_rect, note.y_axis_margin, 0, 0, note.x_axis_margin))

    elif isinstance(note, RecomputeViewport):
        # top & bottom swap here: from the data's orientation to the viewport's.
        maximum_viewport = note.boundaries.as_viewport()

        return structure.replace(
            maximum_viewport=maximum_viewport,
            current_viewport=maximum_viewport)

    elif isinstance(note, ClampViewport):
        return structure.replace(current_viewport=clamped_viewport(
            structure.current_viewport, structure.maximum_viewport))

    elif isinstance(note, SetViewportOrigin):
        return structure.replace(current_viewport=viewport_with_origin(
            structure.current_viewport, structure.maximum_viewport, note.x, note.y))

    elif isinstance(note, SetCurrentViewport):
        return structure.replace(current_viewport=note.viewport)

    raise Exception("Illegal note (programming error): %s" % note)
