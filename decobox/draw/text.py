"""Draw text content."""

from .border import stacked

#: Line height, relative to the font size.
LINE_HEIGHT = 1.2

# Baseline position in a line, relative to the font size
BASELINE = 0.95


def font_name(weight):
    """Return the name of the font resource used for ``weight``."""
    return 'bold' if weight >= 600 else 'regular'


def draw_text(stream, frame, content, style, line_widths):
    """Draw the lines of ``content`` in ``frame`` minus ``style.inset``.

    ``line_widths`` gives the measured width of each line, used to align
    lines.

    """
    if style.color is None or not content:
        return
    x, y, width, _ = frame
    inset = style.inset
    x += inset.left
    y += inset.top
    width -= inset.left + inset.right
    size = style.font_size
    with stacked(stream):
        stream.set_color(style.color)
        stream.begin_text()
        stream.set_font_size(font_name(style.weight), size)
        for index, (line, line_width) in enumerate(
                zip(content.split('\n'), line_widths)):
            if style.align == 'center':
                line_x = x + (width - line_width) / 2
            elif style.align == 'right':
                line_x = x + width - line_width
            else:
                line_x = x
            baseline = y + (index * LINE_HEIGHT + BASELINE) * size
            # Text is upside-down in our flipped coordinates
            stream.set_text_matrix(1, 0, 0, -1, line_x, baseline)
            stream.show_text_string(line)
        stream.end_text()
