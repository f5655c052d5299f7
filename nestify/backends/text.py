# Copyright 2009 Yelp
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.



"""A backend writing plain lines of text, optionally with ANSI colors, to a stream."""

import os
import shlex
import subprocess
import sys

from nestify import test_reporter
from nestify.exceptions import ReporterConfigurationError


class TextReporter(test_reporter.TestReporter):

    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(30, 38)
    BOLD, DIM = 1, 2

    STYLES = {
        'black': BLACK,
        'red': RED,
        'green': GREEN,
        'yellow': YELLOW,
        'blue': BLUE,
        'magenta': MAGENTA,
        'cyan': CYAN,
        'white': WHITE,
        'bold': BOLD,
        'dim': DIM,
    }

    command = 'nestify'

    def __init__(self, options=None, stream=sys.stdout):
        self.stream = stream
        super(TextReporter, self).__init__(options)

    def init(self, options):
        if self.stream is None:
            raise ReporterConfigurationError('%s needs a stream to write to' % type(self).__name__)
        return super(TextReporter, self).init(options)

    def detect_color(self, preference):
        if preference is not None:
            return preference

        # Checking for color support isn't as fun as we might hope.  We're
        # going to use the command 'tput colors' to get a list of colors
        # supported by the shell. But of course we if this fails terribly,
        # we'll want to just fall back to no colors
        isatty = getattr(self.stream, 'isatty', None)
        if not (isatty and isatty()) or 'TERM' not in os.environ:
            return False
        try:
            output = subprocess.check_output(('tput', 'colors'))
            return int(output.strip()) >= 8
        except (OSError, ValueError, subprocess.CalledProcessError) as e:
            self.log.debug("Failed to find color support: %r", e)
            return False

    def write(self, message):
        """Write a message to the output stream, no trailing newline"""
        self.stream.write(message.decode('UTF-8') if isinstance(message, bytes) else message)
        self.stream.flush()

    def print(self, message, append_newline=True):
        self.write(message)
        if append_newline:
            self.write('\n')

    def color(self, spec, text, append_newline=False):
        codes = self._style_codes(spec)
        if self.use_color and codes:
            text = '\033[%sm%s\033[m' % (';'.join(str(code) for code in codes), text)
        if append_newline:
            text += '\n'
        return text

    def link_to_test(self, test_id, inline=False):
        if inline:
            return self.color('blue', shlex.quote(test_id))
        return '%s %s --grep %s' % (
            self.command,
            shlex.quote(self.options.base or '.'),
            shlex.quote(test_id),
        )

    def _style_codes(self, spec):
        names = (spec,) if isinstance(spec, str) else tuple(spec or ())
        try:
            return [self.STYLES[name] for name in names]
        except KeyError as e:
            raise ValueError('unknown style %s in %r' % (e, spec))


class ColorlessTextReporter(TextReporter):
    def detect_color(self, preference):
        return False

# vim: set ts=4 sts=4 sw=4 et:
