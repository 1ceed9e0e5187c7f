"""Compute the outsets of shadows.

Shadows are painted as the region they wrap, inflated by an outset: positive
values grow the region, negative values shrink it. A shadow offset of
``(x, y)`` moves the shadow by shrinking one side and growing the opposite
one.

When a boxed title is drawn above the top border, the block wrapped by the
shadow starts with the space reserved for the title. The top outset is then
corrected so that the shadow starts at the body, not at the reserved space.

"""

from ..config import ANCHORS_Y, DEFAULT_FONT_SIZE
from ..config.utils import ConfigurationError, parse_offset
from ..rect import Offset, Sides


def normalize_offset(offset, font_size=DEFAULT_FONT_SIZE):
    """Return ``offset`` as an :class:`Offset` pair."""
    if isinstance(offset, Offset):
        return offset
    return parse_offset(offset, 'shadow.offset', font_size)


def base_outset(offset):
    """Return the outset moving a shadow by ``offset``."""
    offset = normalize_offset(offset)
    return Sides(top=-offset.y, right=offset.x, bottom=offset.y, left=-offset.x)


def compute_outset(offset, boxed=False, title_height=0, body_top_inset=0,
                   anchor_y='horizon'):
    """Return the :class:`Sides` outset of the body shadow.

    ``title_height`` is the measured height of the boxed title block,
    ``body_top_inset`` the top inset of the body.

    """
    outset = base_outset(offset)
    if not boxed:
        return outset
    if anchor_y not in ANCHORS_Y:
        raise ConfigurationError(f'invalid vertical anchor {anchor_y!r}')
    offset = normalize_offset(offset)
    if anchor_y == 'horizon':
        top = -(offset.y + title_height / 2 + body_top_inset)
    elif anchor_y == 'top':
        top = -(offset.y + title_height + body_top_inset)
    else:
        return outset
    return outset.replace(top=top)


def compute_title_outset(offset, title_height, body_top_inset, thickness,
                         anchor_y='horizon'):
    """Return the outset of the shadow of a boxed title, or ``None``.

    The bottom of the title shadow is pulled inwards, so that it stays above
    the border seam and doesn't bleed into the body shadow. Titles anchored
    at the bottom are inside the body and have no shadow on their own.

    """
    if anchor_y not in ANCHORS_Y:
        raise ConfigurationError(f'invalid vertical anchor {anchor_y!r}')
    if anchor_y == 'bottom':
        return None
    bottom = -(title_height / 2 + body_top_inset + thickness / 2)
    return base_outset(offset).replace(bottom=bottom)
