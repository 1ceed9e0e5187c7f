"""Turn resolved configurations and measurements into render plans.

Boxed titles need a two-pass layout: the host measures the title first,
then the geometry depending on the title height is computed.

"""

from .compositor import compose_box, needs_measurement  # noqa: F401
from .insets import resolve_inset, resolve_insets, section_insets  # noqa: F401
from .shadow import compute_outset, compute_title_outset  # noqa: F401
from .strokes import Stroke, build_strokes  # noqa: F401
from .title import Placement, check_anchor, place_title  # noqa: F401
