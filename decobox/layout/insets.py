"""Resolve insets of the box sections."""

from collections import namedtuple

from ..config import DEFAULT_FONT_SIZE
from ..config.utils import (
    AXES, ConfigurationError, PerAxis, PerSide, Scalar, parse_sides)
from ..rect import SIDES, Sides

SectionInsets = namedtuple('SectionInsets', ['title', 'body', 'footer'])


def resolve_inset(direction, spec, fallback=0):
    """Return the length of ``spec`` for ``direction``.

    The value given for the side wins, then the value given for the matching
    axis (``x`` for left and right, ``y`` for top and bottom), then a value
    given for all directions. ``fallback`` is only returned when ``spec``
    gives nothing for ``direction``. Raw lengths and mappings are parsed
    first.

    """
    if direction not in AXES:
        raise ConfigurationError(f'unknown direction {direction!r}')
    if spec is None:
        return fallback
    if not isinstance(spec, (Scalar, PerAxis, PerSide)):
        spec = parse_sides(spec, 'inset', DEFAULT_FONT_SIZE)
    if isinstance(spec, PerSide):
        value = getattr(spec, direction)
    elif isinstance(spec, PerAxis):
        value = getattr(spec, AXES[direction])
    else:
        value = spec.value
    return fallback if value is None else value


def resolve_insets(spec, fallback=None):
    """Return the :class:`Sides` of ``spec``.

    ``fallback`` is a :class:`Sides` giving the value of each missing
    direction, zero for all directions if not given.

    """
    if fallback is None:
        fallback = Sides.uniform(0)
    return Sides(*(
        resolve_inset(side, spec, getattr(fallback, side)) for side in SIDES))


def section_insets(frame):
    """Return the title, body and footer insets of ``frame``.

    Each section uses its own inset first, then the global inset, then 0,
    direction by direction.

    """
    default = resolve_insets(frame.inset)
    return SectionInsets(
        resolve_insets(frame.title_inset, default),
        resolve_insets(frame.body_inset, default),
        resolve_insets(frame.footer_inset, default))
