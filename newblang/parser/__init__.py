"""Parser package for NEWB.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from .parser import MAX_NESTED_DEPTH, MAX_NESTING, Parser
from .stream import TokenStream

__all__ = ["MAX_NESTED_DEPTH", "MAX_NESTING", "Parser", "TokenStream"]
