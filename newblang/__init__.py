"""NEWB syntax checker.

Scanner and recursive descent parser for the NEWB teaching language
(``newb ... endb`` blocks, ``cin``/``cout`` console statements).


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from newblang.checker import CheckResult, check_file, check_lines, check_source

__version__ = "0.1.1"

__all__ = ["CheckResult", "check_file", "check_lines", "check_source", "__version__"]
