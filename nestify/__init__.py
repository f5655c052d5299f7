# Copyright 2009-2011 Yelp
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

"""Incremental reporting for hierarchical test runs.

The basic components of this system are:

    - TestLogger
        the reporting policy. It follows contexts being entered and left and
        tests starting and finishing, and decides what to print and when. In
        quiet mode nothing is printed for passing work; a failing test brings
        out the headers of the contexts around it, each exactly once.

    - TestReporter
        base class for output backends (TextReporter, HtmlReporter). A backend
        knows how to print, color and link; init() layers a TestLogger onto it
        so the run's lifecycle hooks can be called on the backend itself.

    - LogCaptureBuffer
        holds what was logged during a test, to show it next to the test if
        it fails.
"""
# flake8: noqa
from .test_context import Context, Test
from .test_result import TestResult, RunSummary
from .test_logger import TestLogger, format_report
from .test_reporter import TestReporter
from .backends import TextReporter, ColorlessTextReporter, HtmlReporter
from .exceptions import NestifyError, ReporterConfigurationError, SuiteFailed, ReplayError
__version__ = "0.1.0"
