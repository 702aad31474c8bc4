"""Parsing subsystem for the qtpl item parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `NameScanningMixin`: Tag names glued from adjacent tokens
- `DirectiveParsingMixin`: Brace groups into directive items

Example:
    >>> from qtpl.parsing import (
    ...     TokenNavigationMixin,
    ...     NameScanningMixin,
    ...     DirectiveParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, NameScanningMixin, DirectiveParsingMixin):
    ...     pass

"""

from qtpl.parsing.directive import DirectiveParsingMixin
from qtpl.parsing.names import NameScanningMixin
from qtpl.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "NameScanningMixin",
    "DirectiveParsingMixin",
]
