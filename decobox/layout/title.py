"""Place boxed titles.

A boxed title is anchored horizontally on the left edge, the center or the
right edge of the body, and vertically:

- ``top``: fully above the top border, the title height is reserved above
  the body;
- ``horizon``: across the top border, half of the title is above the body
  and half of the title height is reserved;
- ``bottom``: fully inside the body, as its first child, with nothing
  reserved and no overlay.

Horizontal offsets go away from the anchored edge. Centered titles ignore
the horizontal offset.

"""

from collections import namedtuple
from collections.abc import Mapping

from ..config import ANCHORS_X, ANCHORS_Y, Anchor, parse_anchor
from ..config.utils import ConfigurationError
from ..rect import ZERO_OFFSET


class Placement(namedtuple('Placement', ['dx', 'dy', 'reserved', 'overlay', 'anchor'])):
    """Offsets of a boxed title relative to the body origin."""

    def position(self, container_width, title_width):
        """Return the x position of the title left edge in the body."""
        if self.anchor.x == 'left':
            return self.dx
        elif self.anchor.x == 'right':
            return container_width - title_width + self.dx
        return (container_width - title_width) / 2


def check_anchor(anchor):
    """Return ``anchor`` as an :class:`Anchor`, fail if it's invalid."""
    if isinstance(anchor, Anchor):
        if anchor.x in ANCHORS_X and anchor.y in ANCHORS_Y:
            return anchor
        raise ConfigurationError(f'invalid anchor {tuple(anchor)!r}')
    if isinstance(anchor, (Mapping, list, tuple)):
        return parse_anchor(anchor)
    raise ConfigurationError(f'invalid anchor {anchor!r}')


def place_title(title_height, anchor, offset=ZERO_OFFSET):
    """Return the :class:`Placement` of a title of height ``title_height``."""
    anchor = check_anchor(anchor)
    if anchor.x == 'left':
        if offset.x < 0:
            raise ConfigurationError(
                f'negative offset {offset.x!r} for left anchored title')
        dx = offset.x
    elif anchor.x == 'right':
        if offset.x < 0:
            raise ConfigurationError(
                f'negative offset {offset.x!r} for right anchored title')
        dx = -offset.x
    else:
        dx = 0

    if anchor.y == 'top':
        return Placement(dx, -title_height + offset.y, title_height, True, anchor)
    elif anchor.y == 'horizon':
        half = title_height / 2
        return Placement(dx, -half + offset.y, half, True, anchor)
    return Placement(dx, 0, 0, False, anchor)
