from .text import TextReporter, ColorlessTextReporter  # noqa: F401
from .html import HtmlReporter  # noqa: F401
