"""Named tuples for per-side and per-corner values.

They let the rest of the code use values easily without remembering which
position in a tuple is top, bottom, left or right.

"""

from collections import namedtuple

SIDES = ('top', 'right', 'bottom', 'left')
CORNERS = ('top_left', 'top_right', 'bottom_right', 'bottom_left')


class Sides(namedtuple('Sides', SIDES)):
    """Values for the four sides of a region, in CSS order."""

    @classmethod
    def uniform(cls, value):
        return cls(value, value, value, value)

    def replace(self, **sides):
        return self._replace(**sides)

    @property
    def horizontal(self):
        return self.left + self.right

    @property
    def vertical(self):
        return self.top + self.bottom


class Corners(namedtuple('Corners', CORNERS)):
    """Radii for the four corners of a region."""

    @classmethod
    def uniform(cls, value):
        return cls(value, value, value, value)

    def top_only(self):
        """Keep the top radii, used by bands stuck to the top of a box."""
        return self._replace(bottom_right=0, bottom_left=0)

    def bottom_only(self):
        """Keep the bottom radii, used by bands stuck to the bottom."""
        return self._replace(top_left=0, top_right=0)


Offset = namedtuple('Offset', ('x', 'y'))

ZERO_SIDES = Sides.uniform(0)
ZERO_CORNERS = Corners.uniform(0)
ZERO_OFFSET = Offset(0, 0)
