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


"""Layering shared hook implementations on top of an object's own.

A hook table maps hook names to callables. Installing it on a target (a
class or an instance) leaves any same-named hook the target already has in
place, running it first, and the shared implementation after it, with the
same arguments.
"""

# The table entry that performs the installation; never installed itself.
INSTALLER = 'install'


def sequence(original, shared):
    """Return a callable running original, then shared. Only shared's return value is kept."""
    def hook(*args, **kwargs):
        original(*args, **kwargs)
        return shared(*args, **kwargs)

    hook.__name__ = getattr(shared, '__name__', 'hook')
    hook.__doc__ = getattr(shared, '__doc__', None)
    hook.original = original
    hook.shared = shared
    return hook


def install_hooks(target, table):
    for name, shared in table.items():
        if name == INSTALLER:
            continue
        original = getattr(target, name, None)
        if callable(original):
            setattr(target, name, sequence(original, shared))
        else:
            setattr(target, name, shared)
    return target


def hook_table(obj, names):
    """Build a table of obj's named methods, with an entry that installs them on a target."""
    table = dict((name, getattr(obj, name)) for name in names)
    table[INSTALLER] = lambda target: install_hooks(target, table)
    return table
