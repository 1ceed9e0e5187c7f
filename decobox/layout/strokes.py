"""Build the strokes drawn on the sides of regions."""

from collections import namedtuple
from collections.abc import Mapping

from ..config import DEFAULT_FONT_SIZE
from ..config.utils import (
    ConfigurationError, Dimension, PerAxis, PerSide, Scalar, normalize_key,
    parse_length, parse_sides)
from ..rect import SIDES, Sides
from .insets import resolve_inset

Stroke = namedtuple('Stroke', ['paint', 'dash', 'thickness'])


def thickness_spec(thickness, font_size=DEFAULT_FONT_SIZE):
    """Return ``thickness`` as a side specification.

    Raw lengths and mappings are parsed, other shapes are refused.

    """
    if thickness is None or isinstance(thickness, (Scalar, PerAxis, PerSide)):
        return thickness
    if isinstance(thickness, (int, float, str, Dimension, Mapping)):
        return parse_sides(thickness, 'thickness', font_size)
    raise ConfigurationError(
        'thickness: expected a length or a mapping of sides, '
        f'got {thickness!r}')


def build_strokes(frame, overrides=None):
    """Return the :class:`Sides` of :class:`Stroke` objects of ``frame``.

    Sides missing in a per-side thickness get a zero thickness, so that the
    four strokes are always available. ``overrides`` maps side names to
    thicknesses that replace the configured ones.

    """
    spec = thickness_spec(frame.thickness)
    if spec is None:
        spec = Scalar(0)
    elif isinstance(spec, Scalar):
        pass
    else:
        # Missing sides of mappings are invisible
        spec = PerSide(*(resolve_inset(side, spec, 0) for side in SIDES))
    strokes = {
        side: Stroke(frame.border_color, frame.dash, resolve_inset(side, spec))
        for side in SIDES}
    for side, thickness in (overrides or {}).items():
        side = normalize_key(side)
        if side not in strokes:
            raise ConfigurationError(f'overrides: unknown side {side!r}')
        thickness = parse_length(
            thickness, f'overrides.{side}', DEFAULT_FONT_SIZE, negative=False)
        strokes[side] = strokes[side]._replace(thickness=thickness)
    return Sides(**strokes)
