"""Drives reporters from a recorded stream of run lifecycle events."""
import json
import logging
import time

from nestify import exit
from nestify import test_result
from nestify.exceptions import ReplayError, SuiteFailed
from nestify.test_context import Context, Test


log = logging.getLogger('nestify')

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


class EventReplay(object):
    """Loads one-JSON-event-per-line and plays each event through the given reporters.

    The reporters must already be initialized (see TestReporter.init).
    """

    def __init__(self, lines, test_reporters):
        self.events = self.loadlines(lines)
        self.test_reporters = test_reporters

        self.contexts = []
        self.current = None
        self.results = []
        self.started = None
        self.finished = False

    @classmethod
    def from_file(cls, path, test_reporters):
        with open(path) as f:
            return cls(f.readlines(), test_reporters)

    def loadlines(self, lines):
        events = []
        for number, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                event = json.loads(line)
            except ValueError:
                raise ReplayError("Invalid JSON on line %d: %r" % (number, line.strip()))
            if not isinstance(event, dict) or 'event' not in event:
                raise ReplayError("Line %d is not an event: %r" % (number, line.strip()))
            events.append(event)
        return events

    def run(self):
        """Replays every event. Returns an exit code from nestify.exit."""
        log.debug("replaying %d events to %d reporters", len(self.events), len(self.test_reporters))
        try:
            for event in self.events:
                handler = getattr(self, 'on_%s' % event['event'], None)
                if handler is None:
                    raise ReplayError("Unknown event %r" % event['event'])
                handler(event)
            if not self.finished:
                raise ReplayError("Incomplete run detected")
        except SuiteFailed:
            return exit.TESTS_FAILED
        finally:
            # captures stack on the root logger, so unwind them last-in first-out
            for reporter in reversed(self.test_reporters):
                reporter.logger.restore_logging()
        return exit.OK

    def _broadcast(self, hook, *args):
        for reporter in self.test_reporters:
            getattr(reporter, hook)(*args)

    def _text(self, event, name, required=True):
        value = event.get(name)
        if value is None and not required:
            return None
        if not isinstance(value, str):
            raise ReplayError("%s event needs a string %r, got %r" % (event['event'], name, value))
        return value

    def on_suite_begin(self, event):
        self.started = time.time()
        self._broadcast('suite_begin')

    def on_context_begin(self, event):
        parent = self.contexts[-1] if self.contexts else None
        context = Context(
            self._text(event, 'description'),
            skip_reason=self._text(event, 'skip_reason', required=False),
            parent=parent,
        )
        self.contexts.append(context)
        self._broadcast('context_begin', context)

    def on_context_end(self, event):
        if not self.contexts:
            raise ReplayError("context_end without a matching context_begin")
        self._broadcast('context_end', self.contexts.pop())

    def on_test_begin(self, event):
        test = Test(self._text(event, 'description'), self.contexts[-1] if self.contexts else None)
        self.current = test_result.TestResult(test)
        self.current.start()
        self._broadcast('test_begin', self.current)

    def on_log(self, event):
        name = self._text(event, 'level') if 'level' in event else 'info'
        level = LOG_LEVELS.get(name.lower())
        if level is None:
            raise ReplayError("Unknown log level %r" % name)
        logger = logging.getLogger(self._text(event, 'logger', required=False))
        logger.log(level, event.get('message', ''))

    def on_test_end(self, event):
        if self.current is None:
            raise ReplayError("test_end without a matching test_begin")
        result, self.current = self.current, None

        outcome = event.get('outcome')
        if outcome == test_result.OK:
            result.end_in_success()
        elif outcome == test_result.FAILED:
            result.end_in_failure(event.get('error', ''))
        elif outcome == test_result.SKIPPED:
            result.end_in_skip(event.get('reason'))
        else:
            raise ReplayError("Unknown test outcome %r" % outcome)

        self.results.append(result)
        self._broadcast('test_end', result)

    def on_suite_end(self, event):
        duration = event.get('duration')
        if duration is not None and (isinstance(duration, bool) or not isinstance(duration, (int, float))):
            raise ReplayError("suite_end duration must be a number, got %r" % (duration,))
        if duration is None:
            duration = time.time() - (self.started or time.time())
        summary = test_result.RunSummary.from_results(self.results, duration)
        self.finished = True

        failed = False
        for reporter in reversed(self.test_reporters):
            try:
                reporter.suite_end(summary)
            except SuiteFailed:
                failed = True
        if failed:
            raise SuiteFailed()
