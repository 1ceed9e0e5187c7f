"""Assemble the regions of a box into a render plan."""

from ..host import MeasurementUnavailable, TextStyle
from ..logger import LOGGER
from ..plan import (
    BodyRegion, ContentRegion, FooterRegion, ItemRegion, OuterRegion,
    RenderPlan, SeparatorRegion, ShadowRegion, SpacerRegion, TitleRegion)
from .insets import section_insets
from .shadow import compute_outset, compute_title_outset
from .strokes import Stroke, build_strokes
from .title import place_title


def title_text_style(config, inset):
    style = config.title_style
    return TextStyle(style.color, style.weight, style.align, inset, config.font_size)


def needs_measurement(config, title):
    """Whether the title of the box has to be measured before layout."""
    return bool(title) and config.title_style.boxed


def compose_box(config, body=(), title='', footer='', measurement=None,
                width=None, align='left', breakable=False, spacing=None,
                above=None, below=None):
    """Return the :class:`RenderPlan` of a box.

    :param config: The resolved :class:`decobox.config.Config`.
    :param body: The body items, opaque content given to the host.
    :param title: The title content, nothing is drawn for an empty title.
    :param footer: The footer content, nothing is drawn for an empty footer.
    :param measurement: The :class:`decobox.host.Measurement` of the title,
        required for boxed titles.

    The other parameters are given as is to the host.

    """
    frame = config.frame
    title_style = config.title_style
    shadow = config.shadow
    insets = section_insets(frame)
    body_strokes = build_strokes(frame)

    title_region = inline_title = overlay = placement = None
    if title:
        text_style = title_text_style(config, insets.title)
        if title_style.boxed:
            if measurement is None:
                raise MeasurementUnavailable(
                    'A measurement of the boxed title is required')
            placement = place_title(
                measurement.height, title_style.anchor, title_style.offset)
            LOGGER.debug('Boxed title placed at %r', placement)
            chip = TitleRegion(
                title, frame.title_color, build_strokes(frame),
                title_style.radius, insets.title, text_style, boxed=True,
                placement=placement, measurement=measurement)
            if not placement.overlay:
                inline_title = chip
            elif shadow is None:
                overlay = chip
            else:
                overlay = ShadowRegion((chip,), shadow.color, compute_title_outset(
                    shadow.offset, measurement.height, insets.body.top,
                    body_strokes.top.thickness, title_style.anchor.y))
        else:
            title_region = TitleRegion(
                title, frame.title_color,
                build_strokes(frame, {'bottom': title_style.sep_thickness}),
                frame.radius.top_only(), insets.title, text_style)

    body_style = TextStyle(
        config.body_style.color, 400, config.body_style.align, insets.body,
        config.font_size)
    sep = config.sep
    sep_stroke = Stroke(frame.border_color, sep.dash, sep.thickness)
    items = [] if inline_title is None else [inline_title]
    for index, content in enumerate(body):
        if index:
            items.append(SeparatorRegion(sep_stroke, sep.gutter))
        items.append(ItemRegion(content, body_style))

    children = [] if title_region is None else [title_region]
    children.append(ContentRegion(items, insets.body, body_style))
    if footer:
        footer_style = config.footer_style
        children.append(FooterRegion(
            footer, frame.footer_color,
            build_strokes(frame, {'top': footer_style.sep_thickness}),
            frame.radius.bottom_only(), insets.footer,
            TextStyle(
                footer_style.color, footer_style.weight, footer_style.align,
                insets.footer, config.font_size)))

    stack = []
    if placement is not None and placement.reserved:
        stack.append(SpacerRegion(placement.reserved))
    stack.append(BodyRegion(
        children, frame.body_color, body_strokes, frame.radius, breakable,
        overlay))

    if shadow is not None:
        boxed = placement is not None
        outset = compute_outset(
            shadow.offset, boxed, measurement.height if boxed else 0,
            insets.body.top, title_style.anchor.y)
        LOGGER.debug('Shadow outset is %r', outset)
        stack = [ShadowRegion(stack, shadow.color, outset)]

    root = OuterRegion(stack, width, align, spacing, above, below)
    return RenderPlan(root, breakable)
