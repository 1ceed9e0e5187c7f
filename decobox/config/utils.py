"""Utils for configuration values validation."""

from collections import namedtuple
from collections.abc import Mapping

import tinycss2
from tinycss2.color4 import Color, parse_color

from ..rect import CORNERS, SIDES, Corners, Offset

Dimension = namedtuple('Dimension', ['value', 'unit'])

# Length units, with their size in points
LENGTHS_TO_POINTS = {
    'pt': 1,
    'px': 0.75,
    'pc': 12,
    'in': 72,
    'cm': 72 / 2.54,
    'mm': 72 / 25.4,
    'q': 72 / 101.6,
}

# Font-relative units, their size depends on the box font size
FONT_UNITS = {'em'}

ALIGNS = ('left', 'center', 'right')

WEIGHTS = {'regular': 400, 'normal': 400, 'medium': 500, 'bold': 700}

# Dash names, stored as is: patterns depend on the stroke thickness and are
# computed when painting
DASHES = {
    'solid', 'dotted', 'densely-dotted', 'loosely-dotted', 'dashed',
    'densely-dashed', 'loosely-dashed', 'dash-dotted',
    'densely-dash-dotted', 'loosely-dash-dotted'}

AXES = {'left': 'x', 'right': 'x', 'top': 'y', 'bottom': 'y'}

#: A length given for every direction.
Scalar = namedtuple('Scalar', ['value'])
#: Lengths given for the horizontal and vertical axes.
PerAxis = namedtuple('PerAxis', ['x', 'y'])
#: Lengths given for each side.
PerSide = namedtuple('PerSide', SIDES)


class ConfigurationError(ValueError):
    """Invalid value in a box configuration."""


def normalize_key(key):
    """Return configuration ``key`` with underscores instead of hyphens."""
    if not isinstance(key, str):
        raise ConfigurationError(f'configuration keys must be strings, got {key!r}')
    return key.replace('-', '_').lower()


def normalize_mapping(mapping, name):
    """Return a copy of ``mapping`` with normalized keys."""
    if mapping is None:
        return {}
    if not isinstance(mapping, Mapping):
        raise ConfigurationError(f'{name} must be a mapping, got {mapping!r}')
    return {normalize_key(key): value for key, value in mapping.items()}


def get_length(token, font_size, negative=True, percentage=False):
    """Parse a length token, return points or a percentage ``Dimension``."""
    if percentage and token.type == 'percentage':
        if negative or token.value >= 0:
            return Dimension(token.value, '%')
    if token.type == 'dimension':
        unit = token.lower_unit
        if negative or token.value >= 0:
            if unit in LENGTHS_TO_POINTS:
                return token.value * LENGTHS_TO_POINTS[unit]
            elif unit in FONT_UNITS:
                return token.value * font_size
    if token.type == 'number' and token.value == 0:
        return 0


def parse_length(value, name, font_size, negative=True, percentage=False):
    """Parse a number of points, a length string or a ``Dimension``.

    Raise :exc:`ConfigurationError` when ``value`` can't be parsed.

    """
    if isinstance(value, bool):
        raise ConfigurationError(f'{name}: {value!r} is not a length')
    if isinstance(value, (int, float)):
        if negative or value >= 0:
            return value
        raise ConfigurationError(f'{name}: negative length {value!r}')
    if isinstance(value, Dimension):
        if value.unit == '%':
            if percentage:
                return value
        elif value.unit is None and value.value == 0:
            return 0
        else:
            value = f'{value.value}{value.unit}'
    if isinstance(value, str):
        token = tinycss2.parse_one_component_value(value, skip_comments=True)
        length = get_length(token, font_size, negative, percentage)
        if length is not None:
            return length
    raise ConfigurationError(f'{name}: invalid length {value!r}')


def parse_paint(value, name):
    """Parse a color, ``None`` and ``'none'`` meaning no paint."""
    if value is None:
        return None
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        if value.strip().lower() == 'none':
            return None
        color = parse_color(value)
        if isinstance(color, Color):
            return color
    raise ConfigurationError(f'{name}: invalid color {value!r}')


def parse_keyword(value, name, keywords):
    if isinstance(value, str) and value.lower() in keywords:
        return value.lower()
    raise ConfigurationError(
        f'{name}: {value!r} is not one of {", ".join(keywords)}')


def parse_weight(value, name):
    """Parse a font weight into a number between 100 and 900."""
    if isinstance(value, str) and value.lower() in WEIGHTS:
        return WEIGHTS[value.lower()]
    if isinstance(value, int) and not isinstance(value, bool):
        if 100 <= value <= 900:
            return value
    raise ConfigurationError(f'{name}: invalid font weight {value!r}')


def parse_dash(value, name, font_size):
    """Parse a dash name or a sequence of lengths."""
    if isinstance(value, str):
        if value.lower() in DASHES:
            return value.lower()
        raise ConfigurationError(f'{name}: unknown dash {value!r}')
    if isinstance(value, (list, tuple)) and value:
        return tuple(
            parse_length(length, name, font_size, negative=False)
            for length in value)
    raise ConfigurationError(f'{name}: invalid dash {value!r}')


def parse_sides(value, name, font_size, negative=False):
    """Parse a scalar or a mapping of lengths into a side specification.

    Mappings holding only ``x`` and ``y`` give a :class:`PerAxis` value.
    Mappings holding at least one side give a :class:`PerSide` value, where
    each missing side takes the value of its axis, then the ``rest`` value.

    """
    if value is None:
        return None
    if isinstance(value, (Scalar, PerAxis, PerSide)):
        return value
    if isinstance(value, Mapping):
        mapping = normalize_mapping(value, name)
        unknown = set(mapping) - {*SIDES, 'x', 'y', 'rest'}
        if unknown:
            raise ConfigurationError(
                f'{name}: unknown sides {", ".join(sorted(unknown))}')
        lengths = {
            key: parse_length(length, f'{name}.{key}', font_size, negative)
            for key, length in mapping.items()}
        if set(lengths) <= {'x', 'y'}:
            return PerAxis(lengths.get('x'), lengths.get('y'))
        return PerSide(*(
            lengths.get(side, lengths.get(AXES[side], lengths.get('rest')))
            for side in SIDES))
    if isinstance(value, (int, float, str, Dimension)):
        return Scalar(parse_length(value, name, font_size, negative))
    raise ConfigurationError(
        f'{name}: expected a length or a mapping of lengths, got {value!r}')


def parse_corners(value, name, font_size):
    """Parse a scalar or a mapping of radii into :class:`Corners`."""
    if isinstance(value, Corners):
        return value
    if isinstance(value, Mapping):
        mapping = normalize_mapping(value, name)
        unknown = set(mapping) - {
            *CORNERS, *SIDES, 'rest'}
        if unknown:
            raise ConfigurationError(
                f'{name}: unknown corners {", ".join(sorted(unknown))}')
        radii = {
            key: parse_length(radius, f'{name}.{key}', font_size, negative=False)
            for key, radius in mapping.items()}
        corners = []
        for corner in CORNERS:
            vertical, horizontal = corner.split('_')
            for key in (corner, vertical, horizontal, 'rest'):
                if key in radii:
                    corners.append(radii[key])
                    break
            else:
                corners.append(0)
        return Corners(*corners)
    return Corners.uniform(parse_length(value, name, font_size, negative=False))


def parse_offset(value, name, font_size):
    """Parse a scalar, a ``(x, y)`` pair or a ``{x, y}`` mapping."""
    if isinstance(value, Offset):
        return value
    if isinstance(value, Dimension):
        # Dimensions are tuples, but are one length for both axes
        length = parse_length(value, name, font_size)
        return Offset(length, length)
    if isinstance(value, Mapping):
        mapping = normalize_mapping(value, name)
        unknown = set(mapping) - {'x', 'y'}
        if unknown:
            raise ConfigurationError(
                f'{name}: unknown axes {", ".join(sorted(unknown))}')
        return Offset(*(
            parse_length(mapping.get(axis, 0), f'{name}.{axis}', font_size)
            for axis in ('x', 'y')))
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise ConfigurationError(
                f'{name}: expected a (x, y) pair, got {len(value)} values')
        x, y = value
        return Offset(
            parse_length(x, f'{name}.x', font_size),
            parse_length(y, f'{name}.y', font_size))
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        length = parse_length(value, name, font_size)
        return Offset(length, length)
    raise ConfigurationError(f'{name}: unsupported offset {value!r}')
