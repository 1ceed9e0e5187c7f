"""Classes for the regions of a render plan.

A render plan is a tree of regions, ready to be painted by a host:

* OuterRegion: the root, with the alignment and spacing options of the box
* SpacerRegion: vertical space reserved above the body for a boxed title
* ShadowRegion: a shadow wrapping another region
* BodyRegion: the filled and stroked body
* TitleRegion: the title, as a band at the top of the body or as a chip
* ContentRegion: the body items, inside the body inset
* ItemRegion: one body item
* SeparatorRegion: the line between two body items
* FooterRegion: the footer band at the bottom of the body

Regions are built by :func:`decobox.layout.compose_box` and are not modified
once the plan is given to a host. Lengths are in points.

"""

from .rect import ZERO_CORNERS, ZERO_SIDES


class Region:
    """Abstract base class for all regions."""
    kind = None

    fill = None
    strokes = None
    radii = ZERO_CORNERS
    inset = ZERO_SIDES

    def __init__(self, children=()):
        self.children = tuple(children)

    def __repr__(self):
        return f'<{type(self).__name__}>'

    def all_children(self):
        return self.children

    def descendants(self):
        """A flat generator for a region, its children and descendants."""
        yield self
        for child in self.all_children():
            yield from child.descendants()


class OuterRegion(Region):
    """Root region, aligning the box in its container."""
    kind = 'outer'

    def __init__(self, children, width, align, spacing=None, above=None,
                 below=None):
        super().__init__(children)
        self.width = width
        self.align = align
        self.spacing = spacing
        self.above = above
        self.below = below


class SpacerRegion(Region):
    """Empty vertical space."""
    kind = 'spacer'

    def __init__(self, height):
        super().__init__()
        self.height = height

    def __repr__(self):
        return f'<{type(self).__name__} {self.height}>'


class ShadowRegion(Region):
    """Shadow painted behind its children, inflated by ``outset``.

    The shadow covers the vertical stack of its children.

    """
    kind = 'shadow'

    def __init__(self, children, fill, outset):
        super().__init__(children)
        self.fill = fill
        self.outset = outset


class BodyRegion(Region):
    """Body of the box.

    ``overlay`` is the boxed title placed over the top border, possibly
    wrapped in its shadow, painted after the other children.

    """
    kind = 'body'

    def __init__(self, children, fill, strokes, radii, breakable=False,
                 overlay=None):
        super().__init__(children)
        self.fill = fill
        self.strokes = strokes
        self.radii = radii
        self.breakable = breakable
        self.overlay = overlay

    def all_children(self):
        if self.overlay is None:
            return self.children
        return (*self.children, self.overlay)


class BandRegion(Region):
    """Abstract class for regions with a fill, strokes and some content."""

    def __init__(self, content, fill, strokes, radii, inset, style):
        super().__init__()
        self.content = content
        self.fill = fill
        self.strokes = strokes
        self.radii = radii
        self.inset = inset
        self.style = style

    def __repr__(self):
        return f'<{type(self).__name__} {self.content!r}>'


class TitleRegion(BandRegion):
    """Title of the box.

    Boxed titles have a ``placement``, and a ``measurement`` when they are
    overlaid on the top border.

    """
    kind = 'title'

    def __init__(self, content, fill, strokes, radii, inset, style,
                 boxed=False, placement=None, measurement=None):
        super().__init__(content, fill, strokes, radii, inset, style)
        self.boxed = boxed
        self.placement = placement
        self.measurement = measurement


class FooterRegion(BandRegion):
    """Footer of the box."""
    kind = 'footer'


class ContentRegion(Region):
    """Body items and separators, laid out inside the body inset."""
    kind = 'content'

    def __init__(self, children, inset, style):
        super().__init__(children)
        self.inset = inset
        self.style = style


class ItemRegion(Region):
    """One body item, opaque content given to the host."""
    kind = 'item'

    def __init__(self, content, style):
        super().__init__()
        self.content = content
        self.style = style

    def __repr__(self):
        return f'<{type(self).__name__} {self.content!r}>'


class SeparatorRegion(Region):
    """Horizontal line spanning the content width, with gutters around."""
    kind = 'separator'

    def __init__(self, stroke, gutter):
        super().__init__()
        self.stroke = stroke
        self.gutter = gutter

    @property
    def height(self):
        return 2 * self.gutter + self.stroke.thickness


class RenderPlan:
    """Fully resolved description of one box, ready to be painted."""

    def __init__(self, root, breakable=False):
        self.root = root
        self.breakable = breakable

    def __repr__(self):
        return f'<{type(self).__name__} {self.regions!r}>'

    @property
    def regions(self):
        """All regions, in paint order."""
        return list(self.root.descendants())

    def regions_of(self, kind):
        """Regions of the given ``kind``."""
        return [region for region in self.root.descendants() if region.kind == kind]

    def find(self, kind):
        """First region of the given ``kind``, or ``None``."""
        return next(
            (region for region in self.root.descendants() if region.kind == kind),
            None)

    @property
    def reserved(self):
        """Vertical space reserved above the body."""
        return sum(spacer.height for spacer in self.regions_of('spacer'))
