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


"""Bookkeeping for which contexts are open and which have had their headers written.

Nothing in here renders anything; TestLogger decides what to print based on
what this tells it.
"""


def _index_of(contexts, context):
    for index, candidate in enumerate(contexts):
        if candidate is context:
            return index
    return -1


class ContextStack(object):
    """Two stacks of contexts.

    active  -- the chain of contexts currently open, outermost first.
    printed -- the contexts whose header has been written. In verbose runs
               this is always equal to active. In quiet runs it lags behind,
               and only catches up when reveal_pending() is called.
    """

    def __init__(self):
        self._active = []
        self._printed = []

    @property
    def active(self):
        return list(self._active)

    @property
    def printed(self):
        return list(self._printed)

    @property
    def depth(self):
        return len(self._active)

    def is_printed(self, context):
        return _index_of(self._printed, context) >= 0

    def enter(self, context, printed):
        self._active.append(context)
        if printed:
            self._printed.append(context)

    def exit(self):
        """Pop the innermost open context. Returns True if its header had been written."""
        context = self._active.pop()
        if self._printed and self._printed[-1] is context:
            self._printed.pop()
            return True
        return self.is_printed(context)

    def pending_headers(self):
        """Contexts whose headers would have to be written to show the innermost one, outermost first."""
        for context in reversed(self._printed):
            position = _index_of(self._active, context)
            if position >= 0:
                return self._active[position + 1:]
        return list(self._active)

    def reveal_pending(self):
        pending = self.pending_headers()
        self._printed = list(self._active)
        return pending

    def clear(self):
        self._active = []
        self._printed = []
