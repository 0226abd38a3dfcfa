"""simpletab: compile simplified tab notation into ASCII guitar tablature."""

__version__ = "0.1.0"

from simpletab.errors import ConfigError, ParseError, SemanticError, TabSyntaxError
from simpletab.tab_models import Configuration, Document, Track
from simpletab.tab_renderers import render
from simpletab.track_resolver import parse

__all__ = [
    "__version__",
    "parse",
    "render",
    "Configuration",
    "Document",
    "Track",
    "ParseError",
    "ConfigError",
    "TabSyntaxError",
    "SemanticError",
]
