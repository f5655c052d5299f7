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



"""A backend building an HTML document, one <div> per line of output."""

import html
from urllib.parse import quote

from nestify import test_reporter
from nestify.exceptions import ReporterConfigurationError


STYLESHEET = """<style>
.nestify-line { white-space: pre; font-family: monospace; }
.nestify-red { color: #c0392b; }
.nestify-green { color: #27ae60; }
.nestify-yellow { color: #b7950b; }
.nestify-blue { color: #2471a3; }
.nestify-cyan { color: #148f77; }
.nestify-magenta { color: #884ea0; }
.nestify-bold { font-weight: bold; }
.nestify-dim { opacity: 0.6; }
</style>
"""


class HtmlFragment(str):
    """Text that is already markup and must not be escaped again."""


def slugify(test_id):
    return 'test-' + quote(test_id.replace(' ', '-'), safe='-')


class HtmlReporter(test_reporter.TestReporter):

    STYLES = frozenset(('red', 'green', 'yellow', 'blue', 'cyan', 'magenta', 'bold', 'dim'))

    def __init__(self, options=None, document=None):
        self.document = document
        self._line = []
        super(HtmlReporter, self).__init__(options)

    def init(self, options):
        if self.document is None:
            raise ReporterConfigurationError('%s needs a document to write to' % type(self).__name__)
        return super(HtmlReporter, self).init(options)

    def detect_color(self, preference):
        # styling is up to the stylesheet, and there is always one
        return preference is not False

    def suite_begin(self):
        self._line = []
        self.document.write(STYLESHEET)

    def print(self, message, append_newline=True):
        if not isinstance(message, HtmlFragment):
            message = html.escape(message)
        self._line.append(message)
        if append_newline:
            self.document.write('<div class="nestify-line">%s</div>\n' % ''.join(self._line))
            self._line = []
            self.document.flush()

    def color(self, spec, text, append_newline=False):
        names = (spec,) if isinstance(spec, str) else tuple(spec or ())
        unknown = [name for name in names if name not in self.STYLES]
        if unknown:
            raise ValueError('unknown style %s in %r' % (unknown[0], spec))

        body = text if isinstance(text, HtmlFragment) else html.escape(text)
        if self.use_color and names:
            classes = ' '.join('nestify-%s' % name for name in names)
            body = '<span class="%s">%s</span>' % (classes, body)
        if append_newline:
            body += '<br>'
        return HtmlFragment(body)

    def link_to_test(self, test_id, inline=False):
        if inline:
            return HtmlFragment('<a href="#%s">%s</a>' % (slugify(test_id), html.escape(test_id)))
        return HtmlFragment('<a id="%s" href="?grep=%s">%s</a>' % (
            slugify(test_id),
            quote(test_id),
            html.escape(test_id),
        ))

# vim: set ts=4 sts=4 sw=4 et:
