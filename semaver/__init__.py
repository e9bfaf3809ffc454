"""
semaver

Parsing, comparison, incrementing and serialization of Semantic Versioning
2.0.0 version numbers.
"""

import logging

__version__ = "1.0.0"
__author__ = "semaver contributors"

# The library never configures logging; the CLI does
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .exceptions import ConfigurationError, MalformedVersion, SemaverError
from .models import NUMERIC_MAX, Level, Ordering, Version
from .parser import ParseResult, is_valid, parse, try_parse
from .comparator import (
    SemanticVersionComparator,
    compare,
    compare_identifiers,
    equal,
    greater,
    greater_equal,
    less,
    less_equal,
    not_equal,
    sort_versions,
)


def get_version():
    """Get the current version of semaver."""
    return __version__


def main(argv=None):
    """Run the semaver command line tool."""
    # Imported here so the library does not load argparse and PyYAML
    from .cli import main as cli_main
    return cli_main(argv)


__all__ = [
    'ConfigurationError',
    'Level',
    'MalformedVersion',
    'NUMERIC_MAX',
    'Ordering',
    'ParseResult',
    'SemanticVersionComparator',
    'SemaverError',
    'Version',
    'compare',
    'compare_identifiers',
    'equal',
    'get_version',
    'greater',
    'greater_equal',
    'is_valid',
    'less',
    'less_equal',
    'main',
    'not_equal',
    'parse',
    'sort_versions',
    'try_parse',
]
