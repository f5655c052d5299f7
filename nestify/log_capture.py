"""
Captures log output produced while a test runs, so it can be replayed
alongside the test if it fails.

Not threadsafe.
"""
import logging
import pprint
from contextlib import contextmanager


CAPTURE_FORMAT = '%(levelname)-8s %(name)s: %(message)s'


class LogCaptureBuffer(object):
    """Ordered lines of text logged during the current test."""

    def __init__(self):
        self._lines = []

    def append(self, *args):
        if not args:
            return
        parts = [str(args[0])]
        parts.extend(pprint.pformat(arg) for arg in args[1:])
        # an empty message still logs one (empty) line
        self._lines.extend(' '.join(parts).splitlines() or [''])

    def drain(self, print_line):
        """Hand every buffered line to print_line, oldest first, then forget them."""
        lines, self._lines = self._lines, []
        for line in lines:
            print_line(line)

    def reset(self):
        self._lines = []

    @property
    def lines(self):
        return list(self._lines)

    def __iter__(self):
        return iter(list(self._lines))

    def __len__(self):
        return len(self._lines)

    def __bool__(self):
        return bool(self._lines)


class LogCaptureHandler(logging.Handler):
    """Logging handler that feeds formatted records into a LogCaptureBuffer"""

    def __init__(self, buffer, *args, **kwargs):
        logging.Handler.__init__(self, *args, **kwargs)
        self.buffer = buffer
        self.setFormatter(logging.Formatter(CAPTURE_FORMAT))
        # our own chatter is not part of anybody's test output
        self.addFilter(lambda record: not (record.name == 'nestify' or record.name.startswith('nestify.')))

    def emit(self, record):
        self.buffer.append(self.format(record))


class LogCapture(object):
    """Swaps a logger's handlers for a single LogCaptureHandler, and back.

    By default the root logger is captured, which catches everything that
    propagates.
    """

    def __init__(self, buffer, logger_name=None):
        self.buffer = buffer
        self.logger = logging.getLogger(logger_name or '')
        self.handler = LogCaptureHandler(buffer)
        self._saved = None

    @property
    def installed(self):
        return self._saved is not None

    def install(self):
        if self.installed:
            return
        self._saved = (self.logger.handlers[:], self.logger.propagate)
        # other captures already in place keep receiving records
        captures = [handler for handler in self.logger.handlers if isinstance(handler, LogCaptureHandler)]
        self.logger.handlers = captures + [self.handler]
        self.logger.propagate = False

    def restore(self):
        """Put back whatever install() replaced. Only the first call after install() does anything."""
        if not self.installed:
            return
        handlers, propagate = self._saved
        self._saved = None
        self.logger.handlers = handlers
        self.logger.propagate = propagate


@contextmanager
def capture_logging(buffer=None, logger_name=None):
    """Capture logging into a buffer for the duration of the block.

    Yields the LogCaptureBuffer.
    """
    capture = LogCapture(buffer if buffer is not None else LogCaptureBuffer(), logger_name)
    capture.install()
    try:
        yield capture.buffer
    finally:
        capture.restore()
