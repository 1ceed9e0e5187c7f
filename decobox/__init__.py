"""Decorated boxes, with titles, footers, separators and shadows.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for the options of :class:`Box`.
#:
#: :param width:
#:     Width of the box, a length or a percentage of the available width.
#: :param str align:
#:     Alignment of the box in its container, ``left``, ``center`` or
#:     ``right``.
#: :param bool breakable:
#:     Whether the host is allowed to break the body across pages.
#: :param spacing:
#:     Space above and below the box, overridden by ``above`` and ``below``.
#: :param above:
#:     Space above the box.
#: :param below:
#:     Space below the box.
#: :param font_size:
#:     Font size in points, used to resolve ``em`` lengths.
DEFAULT_OPTIONS = {
    'width': '100%',
    'align': 'left',
    'breakable': False,
    'spacing': None,
    'above': None,
    'below': None,
    'font_size': 11,
}

__all__ = [
    'DEFAULT_OPTIONS', 'VERSION', 'Box', 'ConfigurationError', 'Host',
    'Measurement', 'MeasurementUnavailable', 'RenderPlan', '__version__']


# Import after setting the version, as the version is used in other modules
from .config import resolve_config  # noqa: I001, E402
from .config.utils import (  # noqa: E402
    ALIGNS, ConfigurationError, parse_keyword, parse_length)
from .host import Host, Measurement, MeasurementUnavailable  # noqa: E402
from .layout import compose_box, needs_measurement  # noqa: E402
from .layout.insets import section_insets  # noqa: E402
from .layout.compositor import title_text_style  # noqa: E402
from .logger import LOGGER, PROGRESS_LOGGER  # noqa: E402
from .plan import RenderPlan  # noqa: E402


class Box:
    """Decorated box.

    You can just create an instance with body items as positional arguments:
    ``box = Box({'shadow': {}}, 'First item', 'Second item', title='Hello')``

    The configuration is resolved and validated when the box is created.

    :param config: A mapping with the optional ``frame``, ``title-style``,
        ``body-style``, ``footer-style``, ``sep`` and ``shadow`` sections.
    :param body: Body items, opaque content given to the host.
    :param title: Title content, no title is drawn if empty.
    :param footer: Footer content, no footer is drawn if empty.
    :param options: The options of :data:`DEFAULT_OPTIONS`.
    :raises ConfigurationError: If the configuration or the options are
        malformed.

    """
    def __init__(self, config=None, *body, title='', footer='', **options):
        for option in options:
            if option not in DEFAULT_OPTIONS:
                raise TypeError(f'unexpected option {option!r}')
        options = {**DEFAULT_OPTIONS, **options}
        font_size = parse_length(
            options['font_size'], 'font-size', 11, negative=False)

        self.config = resolve_config(config, font_size)
        self.body = body
        self.title = title
        self.footer = footer
        self.width = parse_length(
            options['width'], 'width', font_size, negative=False,
            percentage=True)
        self.align = parse_keyword(options['align'], 'align', ALIGNS)
        self.breakable = bool(options['breakable'])
        spacing = options['spacing']
        if spacing is not None:
            spacing = parse_length(spacing, 'spacing', font_size)
        self.spacing = spacing
        self.above, self.below = (
            spacing if value is None else parse_length(value, name, font_size)
            for name, value in (
                ('above', options['above']), ('below', options['below'])))

    def __repr__(self):
        return f'<{type(self).__name__} {self.title!r}>'

    def measure_title(self, host):
        """Return the title :class:`Measurement` needed by :meth:`layout`.

        Return ``None`` when the box has no boxed title.

        :raises MeasurementUnavailable: If ``host`` can't measure the title.

        """
        if not needs_measurement(self.config, self.title):
            return None
        insets = section_insets(self.config.frame)
        measurement = host.measure(
            self.title, title_text_style(self.config, insets.title))
        LOGGER.debug('Title %r measured as %r', self.title, measurement)
        return measurement

    def layout(self, measurement=None):
        """Return the :class:`RenderPlan` of the box.

        :param measurement: The value returned by :meth:`measure_title`.

        """
        return compose_box(
            self.config, self.body, self.title, self.footer, measurement,
            self.width, self.align, self.breakable, self.spacing, self.above,
            self.below)

    def render(self, host):
        """Measure, lay out and paint the box with ``host``.

        Return what :meth:`Host.paint` returns.

        """
        PROGRESS_LOGGER.info('Step 1 - Measuring title')
        measurement = self.measure_title(host)
        PROGRESS_LOGGER.info('Step 2 - Laying out box')
        plan = self.layout(measurement)
        PROGRESS_LOGGER.info('Step 3 - Painting box')
        return host.paint(plan)

    def write_pdf(self, target=None, **options):
        """Paint the box on a PDF page.

        :param target:
            A filename, file-like object, or :obj:`None`.
        :param options:
            The options of :class:`decobox.pdf.PDFHost`.
        :returns:
            The PDF as :obj:`bytes` if ``target`` is not provided or
            :obj:`None`, otherwise :obj:`None` (the PDF is written to
            ``target``).

        """
        return self.render(PDFHost(target, **options))


# Work around circular imports.
from .pdf import PDFHost  # noqa: I001, E402
