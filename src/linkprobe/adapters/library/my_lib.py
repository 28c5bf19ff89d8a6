"""The greeting library linked into the main application.

Stateless and infallible: one procedure that prints, one function that
returns a constant.
"""

from __future__ import annotations

GREETING = "Hello from my_lib!"
ANSWER = 42


def print_greeting() -> None:
    """Write the library greeting to standard output.

    Example:
        >>> print_greeting()
        Hello from my_lib!
    """
    print(GREETING, flush=True)


def get_answer() -> int:
    """Return the answer defined by the library.

    Example:
        >>> get_answer()
        42
    """
    return ANSWER


__all__ = ["ANSWER", "GREETING", "get_answer", "print_greeting"]
