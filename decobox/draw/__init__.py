"""Lay out a render plan vertically and draw it onto a pydyf stream.

Hosts give the size of text content, the regions are then stacked from top
to bottom. Frames are stored in a mapping owned by the host, the plan itself
is never modified.

"""

from collections import namedtuple

from ..host import percentage
from ..plan import (
    BodyRegion, ContentRegion, FooterRegion, ItemRegion, OuterRegion,
    SeparatorRegion, ShadowRegion, SpacerRegion, TitleRegion)
from ..rect import ZERO_CORNERS, ZERO_SIDES
from .border import draw_fill, draw_line, draw_strokes, stacked
from .text import draw_text

Frame = namedtuple('Frame', ['x', 'y', 'width', 'height'])


def lay_out_plan(plan, measure, x, y, available_width):
    """Return the frames of the regions of ``plan``.

    ``measure`` is the :meth:`decobox.host.Host.measure` method of the host.
    The box is aligned in ``available_width``, starting at ``(x, y)``.

    """
    frames = {}
    root = plan.root
    width = percentage(root.width, available_width)
    if width is None:
        width = available_width
    if root.align == 'center':
        box_x = x + (available_width - width) / 2
    elif root.align == 'right':
        box_x = x + available_width - width
    else:
        box_x = x
    above, below = root.above or 0, root.below or 0
    height = lay_out_stack(root.children, frames, measure, box_x, y + above, width)
    frames[root] = Frame(x, y, available_width, above + height + below)
    return frames


def lay_out_stack(regions, frames, measure, x, y, width):
    """Stack ``regions`` from top to bottom, return their total height."""
    position_y = y
    for region in regions:
        position_y += lay_out_region(region, frames, measure, x, position_y, width)
    return position_y - y


def lay_out_region(region, frames, measure, x, y, width):
    """Set the frame of ``region`` and its descendants, return its height."""
    if isinstance(region, SpacerRegion):
        height = region.height
    elif isinstance(region, ShadowRegion):
        height = lay_out_stack(region.children, frames, measure, x, y, width)
    elif isinstance(region, BodyRegion):
        height = lay_out_stack(region.children, frames, measure, x, y, width)
        if region.overlay is not None:
            lay_out_overlay(region.overlay, frames, x, y, width)
    elif isinstance(region, TitleRegion) and region.boxed:
        # Inline boxed title, in the content flow
        chip_width, height = region.measurement
        x += region.placement.position(width, chip_width)
        width = chip_width
    elif isinstance(region, (TitleRegion, FooterRegion)):
        height = measure(region.content, region.style).height
    elif isinstance(region, ContentRegion):
        inset = region.inset
        height = inset.vertical + lay_out_stack(
            region.children, frames, measure, x + inset.left, y + inset.top,
            width - inset.horizontal)
    elif isinstance(region, ItemRegion):
        style = region.style._replace(inset=ZERO_SIDES)
        height = measure(region.content, style).height
    elif isinstance(region, SeparatorRegion):
        height = region.height
    else:
        raise TypeError(f'unexpected region {region!r}')
    frames[region] = Frame(x, y, width, height)
    return height


def lay_out_overlay(overlay, frames, body_x, body_y, body_width):
    """Set the frame of a title overlaid on the top border of the body."""
    if isinstance(overlay, ShadowRegion):
        chip, = overlay.children
        lay_out_overlay(chip, frames, body_x, body_y, body_width)
        frames[overlay] = frames[chip]
        return
    placement = overlay.placement
    width, height = overlay.measurement
    frames[overlay] = Frame(
        body_x + placement.position(body_width, width),
        body_y + placement.dy, width, height)


def draw_plan(stream, plan, frames, line_widths):
    """Draw ``plan`` on ``stream``.

    ``line_widths`` is a function returning the widths of the lines of a
    given content with a given style.

    """
    with stacked(stream):
        draw_region(stream, plan.root, frames, line_widths)


def draw_region(stream, region, frames, line_widths):
    frame = frames[region]
    if isinstance(region, ShadowRegion):
        draw_shadow(stream, region, frame)
        for child in region.children:
            draw_region(stream, child, frames, line_widths)
    elif isinstance(region, BodyRegion):
        draw_fill(stream, frame, region.radii, region.fill)
        for child in region.children:
            draw_region(stream, child, frames, line_widths)
        # The border is drawn over the title and footer bands
        draw_strokes(stream, frame, region.strokes, region.radii)
        if region.overlay is not None:
            draw_region(stream, region.overlay, frames, line_widths)
    elif isinstance(region, (TitleRegion, FooterRegion)):
        draw_fill(stream, frame, region.radii, region.fill)
        draw_strokes(stream, frame, region.strokes, region.radii)
        draw_text(
            stream, frame, region.content, region.style,
            line_widths(region.content, region.style))
    elif isinstance(region, ItemRegion):
        style = region.style._replace(inset=ZERO_SIDES)
        draw_text(
            stream, frame, region.content, style,
            line_widths(region.content, style))
    elif isinstance(region, SeparatorRegion):
        line_y = frame.y + region.gutter + region.stroke.thickness / 2
        draw_line(
            stream, frame.x, line_y, frame.x + frame.width, line_y,
            region.stroke)
    elif isinstance(region, (OuterRegion, ContentRegion)):
        for child in region.children:
            draw_region(stream, child, frames, line_widths)


def draw_shadow(stream, region, frame):
    """Draw the shadow of ``region``, inflated by its outset."""
    outset = region.outset
    radii = next((
        child.radii for child in region.children
        if isinstance(child, (BodyRegion, TitleRegion))), ZERO_CORNERS)
    shadow_frame = Frame(
        frame.x - outset.left, frame.y - outset.top,
        frame.width + outset.horizontal, frame.height + outset.vertical)
    draw_fill(stream, shadow_frame, radii, region.fill)
