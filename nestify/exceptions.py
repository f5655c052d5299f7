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


class NestifyError(Exception):
    pass


class ReporterConfigurationError(NestifyError):
    """Raised while initializing a reporter with options it can't honor."""


class SuiteFailed(NestifyError):
    """Raised by suite_end once everything is reported, if any test failed.

    Carries no detail: the failures have already been written out.
    """

    def __init__(self, message='test run failed'):
        super(SuiteFailed, self).__init__(message)


class ReplayError(NestifyError):
    """The lifecycle event stream handed to the replay driver is malformed."""
