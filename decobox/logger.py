"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Logging levels are used for specific purposes:

- warnings are used in ``LOGGER`` for ignored configuration keys and for
  colors the reference host cannot paint faithfully;
- debug messages are used in ``LOGGER`` for resolved geometry;
- infos are used in ``PROGRESS_LOGGER`` to advertise rendering steps.

"""

import contextlib
import logging

LOGGER = logging.getLogger('decobox')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())

PROGRESS_LOGGER = logging.getLogger('decobox.progress')


class ListHandler(logging.Handler):
    """A logging handler keeping formatted messages in a list.

    Rendering steps are dropped unless ``progress`` is true.

    """
    def __init__(self, level=logging.NOTSET, progress=False):
        super().__init__(level)
        self.progress = progress
        self.messages = []

    def emit(self, record):
        if record.name == PROGRESS_LOGGER.name and not self.progress:
            return
        self.messages.append(f'{record.levelname}: {record.getMessage()}')


@contextlib.contextmanager
def capture_logs(logger=LOGGER.name, level=logging.INFO, progress=False):
    """Capture the messages of ``logger`` logged in the ``with`` block.

    Yield the list of messages, formatted as ``'LEVEL: message'``.

    """
    logger = logging.getLogger(logger)
    handler = ListHandler(level, progress)
    previous_handlers, previous_level = logger.handlers, logger.level
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    try:
        yield handler.messages
    finally:
        logger.handlers = previous_handlers
        logger.setLevel(previous_level)
