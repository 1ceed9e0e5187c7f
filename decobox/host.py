"""Interface of the renderers measuring and painting boxes."""

from abc import ABC, abstractmethod
from collections import namedtuple

Measurement = namedtuple('Measurement', ['width', 'height'])

#: Styling context given to :meth:`Host.measure`. ``inset`` is the
#: :class:`decobox.rect.Sides` padding included in the measured block.
TextStyle = namedtuple(
    'TextStyle', ['color', 'weight', 'align', 'inset', 'font_size'])


class MeasurementUnavailable(RuntimeError):  # noqa: N818
    """The host can't measure some content."""


def percentage(value, refer_to):
    """Return the percentage of the reference value, or the value unchanged.

    ``refer_to`` is the length for 100%.

    """
    if value is None or isinstance(value, (int, float)):
        return value
    assert value.unit == '%'
    return refer_to * value.value / 100


class Host(ABC):
    """Renderer used to measure and paint boxes.

    Hosts provide text rendering, painting and page breaking, that are not
    handled by the layout code.

    """

    @abstractmethod
    def measure(self, content, style):
        """Return the :class:`Measurement` of ``content`` with ``style``.

        The measured block includes ``style.inset``. Measuring has no side
        effect on the document.

        :raises MeasurementUnavailable: If ``content`` can't be sized.

        """

    @abstractmethod
    def paint(self, plan):
        """Paint the given :class:`decobox.plan.RenderPlan`."""
