"""Draw fills, borders and separators."""

from contextlib import contextmanager

from ..rect import SIDES

# Dash patterns, in units of stroke thickness
DASH_PATTERNS = {
    'solid': None,
    'dotted': (1, 2),
    'densely-dotted': (1, 1),
    'loosely-dotted': (1, 4),
    'dashed': (3, 3),
    'densely-dashed': (3, 2),
    'loosely-dashed': (3, 6),
    'dash-dotted': (3, 2, 1, 2),
    'densely-dash-dotted': (3, 1, 1, 1),
    'loosely-dash-dotted': (3, 4, 1, 4),
}


@contextmanager
def stacked(stream):
    """Save and restore stream state when used with the ``with`` keyword."""
    stream.push_state()
    try:
        yield
    finally:
        stream.pop_state()


def dash_array(dash, thickness):
    """Return the PDF dash array of ``dash`` for a stroke of ``thickness``."""
    if isinstance(dash, tuple):
        return list(dash)
    pattern = DASH_PATTERNS[dash]
    if pattern is None:
        return None
    return [length * thickness for length in pattern]


def rounded_box(stream, frame, radii):
    """Draw the path of a box with rounded corners."""
    x, y, w, h = frame
    # Radii can't be larger than half of the box
    limit = max(0, min(w, h) / 2)
    tl, tr, br, bl = (min(radius, limit) for radius in radii)

    if tl == tr == br == bl == 0:
        # No radius, draw a rectangle
        stream.rectangle(x, y, w, h)
        return

    r = 0.45

    stream.move_to(x + tl, y)
    stream.line_to(x + w - tr, y)
    stream.curve_to(x + w - tr * r, y, x + w, y + tr * r, x + w, y + tr)
    stream.line_to(x + w, y + h - br)
    stream.curve_to(
        x + w, y + h - br * r, x + w - br * r, y + h, x + w - br, y + h)
    stream.line_to(x + bl, y + h)
    stream.curve_to(x + bl * r, y + h, x, y + h - bl * r, x, y + h - bl)
    stream.line_to(x, y + tl)
    stream.curve_to(x, y + tl * r, x + tl * r, y, x + tl, y)
    stream.close()


def draw_fill(stream, frame, radii, color):
    """Fill ``frame`` with rounded ``radii``."""
    if color is None or color.alpha == 0 or frame[2] <= 0 or frame[3] <= 0:
        return
    with stacked(stream):
        stream.set_color(color)
        rounded_box(stream, frame, radii)
        stream.fill()


def draw_line(stream, x1, y1, x2, y2, stroke):
    """Draw a horizontal or vertical ``stroke``."""
    assert x1 == x2 or y1 == y2  # Only works for vertical or horizontal lines
    if stroke.paint is None or stroke.thickness <= 0:
        return
    with stacked(stream):
        stream.set_color(stroke.paint, stroke=True)
        stream.set_line_width(stroke.thickness)
        dashes = dash_array(stroke.dash, stroke.thickness)
        if dashes:
            stream.set_dash(dashes, 0)
        stream.move_to(x1, y1)
        stream.line_to(x2, y2)
        stream.stroke()


def draw_strokes(stream, frame, strokes, radii):
    """Draw the strokes of the four sides of ``frame``.

    Strokes are centered on the edges. When all strokes are the same, the
    rounded path is stroked at once. Otherwise, sides are drawn one by one
    between the corners.

    """
    if all(stroke.thickness <= 0 or stroke.paint is None for stroke in strokes):
        return

    if all(stroke == strokes.top for stroke in strokes):
        stroke = strokes.top
        with stacked(stream):
            stream.set_color(stroke.paint, stroke=True)
            stream.set_line_width(stroke.thickness)
            dashes = dash_array(stroke.dash, stroke.thickness)
            if dashes:
                stream.set_dash(dashes, 0)
            rounded_box(stream, frame, radii)
            stream.stroke()
        return

    x, y, w, h = frame
    tl, tr, br, bl = radii
    lines = {
        'top': (x + tl, y, x + w - tr, y),
        'right': (x + w, y + tr, x + w, y + h - br),
        'bottom': (x + bl, y + h, x + w - br, y + h),
        'left': (x, y + tl, x, y + h - bl),
    }
    for side in SIDES:
        draw_line(stream, *lines[side], getattr(strokes, side))
