"""Resolve box configurations.

A configuration is a nested mapping, given by the user with only the values
they care about. :func:`resolve_config` materializes every default once and
validates every value, giving immutable named tuples that the layout code
can use without any further lookup.

Keys can be written with hyphens or underscores: ``'title-color'`` and
``'title_color'`` are the same key.

"""

from collections import namedtuple
from collections.abc import Mapping

from ..logger import LOGGER
from .utils import (
    ALIGNS, ConfigurationError, normalize_mapping, parse_corners, parse_dash,
    parse_keyword, parse_length, parse_offset, parse_paint, parse_sides,
    parse_weight)

Anchor = namedtuple('Anchor', ['x', 'y'])

ANCHORS_X = ('left', 'center', 'right')
ANCHORS_Y = ('top', 'horizon', 'bottom')

Frame = namedtuple('Frame', [
    'title_color', 'body_color', 'footer_color', 'border_color', 'radius',
    'thickness', 'dash', 'inset', 'title_inset', 'body_inset', 'footer_inset'])
TitleStyle = namedtuple('TitleStyle', [
    'color', 'weight', 'align', 'sep_thickness', 'boxed', 'anchor', 'offset',
    'radius'])
BodyStyle = namedtuple('BodyStyle', ['color', 'align'])
FooterStyle = namedtuple('FooterStyle', [
    'color', 'weight', 'align', 'sep_thickness'])
Separator = namedtuple('Separator', ['thickness', 'dash', 'gutter'])
Shadow = namedtuple('Shadow', ['color', 'offset'])
Config = namedtuple('Config', [
    'frame', 'title_style', 'body_style', 'footer_style', 'sep', 'shadow',
    'font_size'])

#: Default font size, in points, used to resolve ``em`` lengths.
DEFAULT_FONT_SIZE = 11

# Default values, resolved with the same validators as user values.
INITIAL_VALUES = {
    'frame': {
        'title_color': 'black',
        'body_color': 'white',
        'footer_color': 'rgb(220 220 220)',
        'border_color': 'black',
        'radius': '5pt',
        'thickness': '1pt',
        'dash': 'solid',
        'inset': {'x': '1em', 'y': '0.65em'},
        'title_inset': None,
        'body_inset': None,
        'footer_inset': None,
    },
    'title_style': {
        'color': 'white',
        'weight': 'bold',
        'align': 'left',
        'sep_thickness': '1pt',
        'boxed_style': None,
    },
    'boxed_style': {
        'anchor': {'x': 'left', 'y': 'horizon'},
        'offset': {'x': 0, 'y': 0},
        'radius': '5pt',
    },
    'body_style': {
        'color': 'black',
        'align': 'left',
    },
    'footer_style': {
        'color': 'rgb(85 85 85)',
        'weight': 'regular',
        'align': 'left',
        'sep_thickness': '1pt',
    },
    'sep': {
        'thickness': '1pt',
        'dash': 'solid',
        'gutter': '0.65em',
    },
    'shadow': {
        'color': 'rgb(200 200 200)',
        'offset': '4pt',
    },
}


def _paint(value, name, font_size):
    return parse_paint(value, name)


def _align(value, name, font_size):
    return parse_keyword(value, name, ALIGNS)


def _weight(value, name, font_size):
    return parse_weight(value, name)


def _thickness(value, name, font_size):
    return parse_length(value, name, font_size, negative=False)


def _optional_sides(value, name, font_size):
    return parse_sides(value, name, font_size)


def parse_anchor(value, name='anchor'):
    """Parse a ``{x, y}`` mapping or a ``(x, y)`` pair into an anchor."""
    if isinstance(value, Mapping):
        mapping = normalize_mapping(value, name)
        unknown = set(mapping) - {'x', 'y'}
        if unknown:
            raise ConfigurationError(
                f'{name}: unknown axes {", ".join(sorted(unknown))}')
        default = INITIAL_VALUES['boxed_style']['anchor']
        x, y = mapping.get('x', default['x']), mapping.get('y', default['y'])
    elif isinstance(value, (list, tuple)) and len(value) == 2:
        x, y = value
    else:
        raise ConfigurationError(f'{name}: invalid anchor {value!r}')
    return Anchor(
        parse_keyword(x, f'{name}.x', ANCHORS_X),
        parse_keyword(y, f'{name}.y', ANCHORS_Y))


def _anchor(value, name, font_size):
    return parse_anchor(value, name)


# Validators of each section, taking a value, its dotted name and the font
# size, returning the resolved value or raising ConfigurationError.
VALIDATORS = {
    'frame': {
        'title_color': _paint,
        'body_color': _paint,
        'footer_color': _paint,
        'border_color': _paint,
        'radius': parse_corners,
        'thickness': parse_sides,
        'dash': parse_dash,
        'inset': parse_sides,
        'title_inset': _optional_sides,
        'body_inset': _optional_sides,
        'footer_inset': _optional_sides,
    },
    'title_style': {
        'color': _paint,
        'weight': _weight,
        'align': _align,
        'sep_thickness': _thickness,
    },
    'boxed_style': {
        'anchor': _anchor,
        'offset': parse_offset,
        'radius': parse_corners,
    },
    'body_style': {
        'color': _paint,
        'align': _align,
    },
    'footer_style': {
        'color': _paint,
        'weight': _weight,
        'align': _align,
        'sep_thickness': _thickness,
    },
    'sep': {
        'thickness': _thickness,
        'dash': parse_dash,
        'gutter': _thickness,
    },
    'shadow': {
        'color': _paint,
        'offset': parse_offset,
    },
}


def resolve_section(section, values, font_size, prefix=''):
    """Merge ``values`` with the defaults of ``section`` and validate them.

    Unknown keys are ignored with a warning.

    """
    name = prefix + section.replace('_', '-')
    values = normalize_mapping(values, name)
    resolved = {}
    for key, value in values.items():
        if key not in INITIAL_VALUES[section]:
            LOGGER.warning('Ignored unknown key %r in %s', key, name)
    for key, default in INITIAL_VALUES[section].items():
        value = values.get(key, default)
        validator = VALIDATORS[section].get(key)
        if validator is not None:
            value = validator(value, f'{name}.{key.replace("_", "-")}', font_size)
        resolved[key] = value
    return resolved


def resolve_boxed_style(value, font_size):
    """Return the resolved boxed style of a title, or ``None``."""
    if value is None or value is False:
        return None
    if value is True:
        value = {}
    resolved = resolve_section(
        'boxed_style', value, font_size, prefix='title-style.')
    anchor, offset = resolved['anchor'], resolved['offset']
    if anchor.x != 'center' and offset.x < 0:
        raise ConfigurationError(
            'title-style.boxed-style.offset: negative horizontal offset '
            f'{offset.x!r} with {anchor.x!r} anchor, offsets go away from '
            'the anchored edge')
    return resolved


def resolve_config(config=None, font_size=DEFAULT_FONT_SIZE):
    """Return a :class:`Config` with all defaults and validated values.

    :param config: A mapping with the optional ``frame``, ``title-style``,
        ``body-style``, ``footer-style``, ``sep`` and ``shadow`` sections.
    :param font_size: The font size in points, used for ``em`` lengths.
    :raises ConfigurationError: If any value is malformed.

    """
    config = normalize_mapping(config, 'configuration')
    for key in config:
        if key not in VALIDATORS or key == 'boxed_style':
            LOGGER.warning('Ignored unknown configuration section %r', key)

    frame = resolve_section('frame', config.get('frame'), font_size)

    title = resolve_section('title_style', config.get('title_style'), font_size)
    boxed = resolve_boxed_style(title.pop('boxed_style'), font_size)
    if boxed is None:
        boxed = resolve_section('boxed_style', {}, font_size)
        title['boxed'] = False
    else:
        title['boxed'] = True
    title.update(boxed)

    body = resolve_section('body_style', config.get('body_style'), font_size)
    footer = resolve_section(
        'footer_style', config.get('footer_style'), font_size)
    sep = resolve_section('sep', config.get('sep'), font_size)

    shadow = config.get('shadow')
    if shadow is not None and shadow is not False:
        shadow = Shadow(**resolve_section(
            'shadow', {} if shadow is True else shadow, font_size))
    else:
        shadow = None

    return Config(
        Frame(**frame), TitleStyle(**title), BodyStyle(**body),
        FooterStyle(**footer), Separator(**sep), shadow, font_size)
