import io
import json
import logging

import pytest

from nestify import exit
from nestify.backends.html import HtmlReporter
from nestify.backends.text import TextReporter
from nestify.event_replay import EventReplay
from nestify.exceptions import ReplayError


def lines(*events):
    return [json.dumps(event) + '\n' for event in events]


SCENARIO = lines(
    {'event': 'suite_begin'},
    {'event': 'context_begin', 'description': 'math'},
    {'event': 'test_begin', 'description': 'test1'},
    {'event': 'test_end', 'outcome': 'ok'},
    {'event': 'test_begin', 'description': 'test2'},
    {'event': 'log', 'level': 'warning', 'logger': 'calc', 'message': 'dividing'},
    {'event': 'test_end', 'outcome': 'failed', 'error': 'boom'},
    {'event': 'test_begin', 'description': 'test3'},
    {'event': 'test_end', 'outcome': 'skipped', 'reason': 'slow'},
    {'event': 'context_end'},
    {'event': 'suite_end', 'duration': 0.5},
)


class EventReplayTest(object):

    def setup_method(self):
        self.stream = io.StringIO()
        self.reporter = TextReporter({'color': False}, stream=self.stream)
        self.root = logging.getLogger()
        self.previous_handlers = self.root.handlers[:]

    def teardown_method(self):
        self.root.handlers = self.previous_handlers

    def test_failing_run(self):
        replay = EventReplay(SCENARIO, [self.reporter])
        assert replay.run() == exit.TESTS_FAILED

        output = self.stream.getvalue()
        assert 'test1' not in output
        assert 'test3' not in output
        assert "  test2 ... FAILED 'math test2'\n  | boom\n" in output
        assert '  WARNING  calc: dividing\n' in output
        assert 'Ran 3 tests. 1 failed, 1 skipped, 1 passed (in 0.5s)\n' in output
        assert output.endswith('FAILED\n')
        assert self.root.handlers == self.previous_handlers

    def test_passing_run(self):
        events = lines(
            {'event': 'suite_begin'},
            {'event': 'context_begin', 'description': 'strings', 'skip_reason': None},
            {'event': 'test_begin', 'description': 'join'},
            {'event': 'test_end', 'outcome': 'ok'},
            {'event': 'context_end'},
            {'event': 'suite_end'},
        )
        assert EventReplay(events, [self.reporter]).run() == exit.OK
        assert 'Ran 1 test. 1 passed' in self.stream.getvalue()

    def test_results_are_collected(self):
        replay = EventReplay(SCENARIO, [self.reporter])
        replay.run()
        assert [result.outcome for result in replay.results] == ['ok', 'failed', 'skipped']
        assert replay.results[1].test.full_description() == 'math test2'

    def test_several_reporters(self):
        document = io.StringIO()
        html_reporter = HtmlReporter({}, document=document)
        assert EventReplay(SCENARIO, [self.reporter, html_reporter]).run() == exit.TESTS_FAILED

        assert 'WARNING  calc: dividing' in self.stream.getvalue()
        assert 'WARNING  calc: dividing' in document.getvalue()
        assert self.root.handlers == self.previous_handlers

    def test_blank_lines_ignored(self):
        replay = EventReplay(['\n'] + SCENARIO + ['   \n'], [self.reporter])
        assert len(replay.events) == len(SCENARIO)

    def test_invalid_json(self):
        with pytest.raises(ReplayError):
            EventReplay(['{"event": '], [self.reporter])

    def test_not_an_event(self):
        with pytest.raises(ReplayError):
            EventReplay(['[1, 2]'], [self.reporter])

    @pytest.mark.parametrize('events', [
        lines({'event': 'suite_begin'}, {'event': 'explode'}),
        lines({'event': 'suite_begin'}, {'event': 'context_end'}),
        lines({'event': 'suite_begin'}, {'event': 'test_end', 'outcome': 'ok'}),
        lines({'event': 'suite_begin'}, {'event': 'test_begin', 'description': 't'}, {'event': 'test_end'}),
        lines({'event': 'suite_begin'}, {'event': 'log', 'level': 'loud', 'message': 'x'}),
        lines({'event': 'suite_begin'}, {'event': 'context_begin'}),
        lines({'event': 'suite_begin'}, {'event': 'context_begin', 'description': 7}),
        lines({'event': 'suite_begin'}, {'event': 'test_begin'}),
        lines({'event': 'suite_begin'}, {'event': 'log', 'level': None, 'message': 'x'}),
        lines({'event': 'suite_begin'}, {'event': 'log', 'level': 30, 'message': 'x'}),
        lines({'event': 'suite_begin'}, {'event': 'suite_end', 'duration': 'soon'}),
        lines({'event': 'suite_begin'}),
    ])
    def test_malformed_runs_restore_logging(self, events):
        with pytest.raises(ReplayError):
            EventReplay(events, [self.reporter]).run()
        assert self.root.handlers == self.previous_handlers

    def test_log_level_defaults_to_info(self):
        logging.getLogger('calc').setLevel(logging.INFO)
        try:
            events = lines(
                {'event': 'suite_begin'},
                {'event': 'test_begin', 'description': 'divides'},
                {'event': 'log', 'logger': 'calc', 'message': 'dividing'},
                {'event': 'test_end', 'outcome': 'failed', 'error': 'boom'},
                {'event': 'suite_end', 'duration': 1},
            )
            assert EventReplay(events, [self.reporter]).run() == exit.TESTS_FAILED
        finally:
            logging.getLogger('calc').setLevel(logging.NOTSET)
        assert 'INFO     calc: dividing' in self.stream.getvalue()
