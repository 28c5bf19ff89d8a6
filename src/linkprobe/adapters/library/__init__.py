"""Greeting library adapter - the externally provided ``my_lib`` functions.

Contents:
    * :func:`.my_lib.print_greeting` - Write the library greeting to stdout
    * :func:`.my_lib.get_answer` - Return the library's answer constant
"""

from __future__ import annotations

from .my_lib import ANSWER, GREETING, get_answer, print_greeting

__all__ = ["ANSWER", "GREETING", "get_answer", "print_greeting"]
