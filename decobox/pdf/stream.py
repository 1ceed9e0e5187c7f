"""PDF stream."""

import pydyf

from ..logger import LOGGER


def winansi_string(text):
    """Return ``text`` as a literal PDF string in WinAnsi encoding.

    Characters missing in the encoding are replaced by question marks.

    """
    data = text.encode('cp1252', errors='replace')
    if data.count(b'?') != text.count('?'):
        LOGGER.warning(
            'Characters of %r missing in WinAnsi encoding are replaced', text)
    escaped = ''.join(
        f'\\{byte:03o}' if byte < 32 or byte > 126 or byte in b'()\\'
        else chr(byte) for byte in data)
    return f'({escaped})'.encode('ascii')


class Stream(pydyf.Stream):
    """PDF stream object with color and alpha caches."""
    def __init__(self, resources, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._resources = resources
        self._current_color = self._current_color_stroke = None
        self._current_alpha = self._current_alpha_stroke = None

    def pop_state(self):
        super().pop_state()
        self._current_color = self._current_color_stroke = None
        self._current_alpha = self._current_alpha_stroke = None

    def set_color(self, color, stroke=False):
        """Set fill or stroke color from a tinycss2 color."""
        self.set_alpha(color.alpha, stroke)
        if color.space not in ('srgb', 'hsl', 'hwb'):
            LOGGER.warning('Unsupported color space %s, use sRGB instead', color.space)
        channels = tuple(
            min(1, max(0, channel)) for channel in color.to('srgb').coordinates)

        if stroke:
            if channels == self._current_color_stroke:
                return
            self._current_color_stroke = channels
        else:
            if channels == self._current_color:
                return
            self._current_color = channels
        self.set_color_rgb(*channels, stroke)

    def show_text_string(self, text):
        # Standard fonts use WinAnsi, not the UTF-16 strings of pydyf
        self.stream.append(winansi_string(text) + b' Tj')

    def set_alpha(self, alpha, stroke=False):
        if stroke:
            if alpha == self._current_alpha_stroke:
                return
            self._current_alpha_stroke = alpha
        else:
            if alpha == self._current_alpha:
                return
            self._current_alpha = alpha

        key = f'{"A" if stroke else "a"}{alpha}'
        if key not in self._resources['ExtGState']:
            self._resources['ExtGState'][key] = pydyf.Dictionary(
                {'CA' if stroke else 'ca': alpha})
        self.set_state(key)
