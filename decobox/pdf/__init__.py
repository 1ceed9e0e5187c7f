"""Reference host, painting boxes on PDF pages.

Text is measured with Pillow fonts and drawn with the standard Helvetica
fonts. No text is wrapped: lines are split on newline characters only. The
box is drawn on one page whose height fits the box, pages are never broken.

"""

import io

import pydyf
from PIL import ImageFont

from .. import VERSION
from ..draw import draw_plan, lay_out_plan
from ..draw.text import LINE_HEIGHT, font_name
from ..host import Host, Measurement, MeasurementUnavailable
from ..logger import LOGGER
from .stream import Stream

#: Standard fonts used to draw text, by resource name.
FONTS = {'regular': 'Helvetica', 'bold': 'Helvetica-Bold'}

#: Version written in the PDF header.
PDF_VERSION = b'1.7'


class PDFHost(Host):
    """Host measuring text with Pillow and painting boxes with pydyf.

    :type target:
        :class:`str`, :class:`pathlib.Path` or :term:`file object`
    :param target:
        A filename where the PDF file is generated, a file object, or
        :obj:`None`.
    :param float page_width: The page width, in points.
    :param float margin: The page margins, in points.
    :param str font_path: A TrueType or OpenType font file used to measure
        regular text, Pillow's default font is used if not given.
    :param str bold_font_path: The font file used to measure bold text,
        ``font_path`` is used if not given.
    :param bool uncompressed_pdf: Whether PDF content should be compressed.

    """
    def __init__(self, target=None, page_width=595, margin=36, font_path=None,
                 bold_font_path=None, uncompressed_pdf=False):
        self.target = target
        self.page_width = page_width
        self.margin = margin
        self.font_paths = {
            'regular': font_path, 'bold': bold_font_path or font_path}
        self.uncompressed_pdf = uncompressed_pdf
        self._fonts = {}

    def _font(self, weight, size):
        name = font_name(weight)
        key = (name, size)
        if key not in self._fonts:
            path = self.font_paths[name]
            try:
                if path is None:
                    font = ImageFont.load_default(size)
                else:
                    font = ImageFont.truetype(path, size)
            except OSError as exception:
                raise MeasurementUnavailable(
                    f'Unable to load font {path!r}: {exception}') from exception
            self._fonts[key] = font
        return self._fonts[key]

    def line_widths(self, content, style):
        """Return the widths of the lines of ``content``."""
        if not isinstance(content, str):
            raise MeasurementUnavailable(
                f'Unable to measure content of type {type(content).__name__}')
        font = self._font(style.weight, style.font_size)
        return [font.getlength(line) for line in content.split('\n')]

    def measure(self, content, style):
        widths = self.line_widths(content, style)
        inset = style.inset
        return Measurement(
            max(widths) + inset.horizontal,
            len(widths) * LINE_HEIGHT * style.font_size + inset.vertical)

    def paint(self, plan):
        """Paint ``plan`` on a new PDF page.

        :returns:
            The PDF as :obj:`bytes` if ``target`` is not provided or
            :obj:`None`, otherwise :obj:`None` (the PDF is written to
            ``target``).

        """
        available_width = self.page_width - 2 * self.margin
        frames = lay_out_plan(
            plan, self.measure, self.margin, self.margin, available_width)
        page_height = frames[plan.root].height + 2 * self.margin
        if plan.breakable:
            LOGGER.debug('Breakable box drawn on a single page')

        pdf = self.generate_pdf(plan, frames, page_height)
        compress = not self.uncompressed_pdf
        if self.target is None:
            output = io.BytesIO()
            pdf.write(output, pdf.version, compress=compress)
            return output.getvalue()

        if hasattr(self.target, 'write'):
            pdf.write(self.target, pdf.version, compress=compress)
        else:
            with open(self.target, 'wb') as fd:
                pdf.write(fd, pdf.version, compress=compress)

    def generate_pdf(self, plan, frames, page_height):
        """Return a :class:`pydyf.PDF` with ``plan`` drawn on one page."""
        pdf = pydyf.PDF()
        pdf.version = PDF_VERSION
        pdf.info['Producer'] = pydyf.String(f'decobox {VERSION}')

        fonts = pydyf.Dictionary()
        for name, base_font in FONTS.items():
            font = pydyf.Dictionary({
                'Type': '/Font',
                'Subtype': '/Type1',
                'BaseFont': f'/{base_font}',
                'Encoding': '/WinAnsiEncoding',
            })
            pdf.add_object(font)
            fonts[name] = font.reference
        resources = pydyf.Dictionary({
            'ExtGState': pydyf.Dictionary(),
            'Font': fonts,
        })
        pdf.add_object(resources)

        stream = Stream(resources, compress=not self.uncompressed_pdf)
        # Draw from the top-left corner
        stream.set_matrix(1, 0, 0, -1, 0, page_height)
        draw_plan(stream, plan, frames, self.line_widths)
        pdf.add_object(stream)

        page = pydyf.Dictionary({
            'Type': '/Page',
            'Parent': pdf.pages.reference,
            'MediaBox': pydyf.Array([0, 0, self.page_width, page_height]),
            'Contents': stream.reference,
            'Resources': resources.reference,
        })
        pdf.add_page(page)
        return pdf
