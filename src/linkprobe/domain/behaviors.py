"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

START_MESSAGE = "Starting the main application."
ANSWER_TEMPLATE = "The retrieved answer is: {answer}"


def build_start_message() -> str:
    r"""Return the line announcing the start of the main application.

    Returns:
        The fixed start message.

    Example:
        >>> build_start_message()
        'Starting the main application.'
    """
    return START_MESSAGE


def format_answer(answer: int) -> str:
    """Render the answer obtained from the greeting library.

    Args:
        answer: Integer returned by the library's ``get_answer``.

    Returns:
        The answer line in decimal notation.

    Example:
        >>> format_answer(42)
        'The retrieved answer is: 42'
        >>> format_answer(-7)
        'The retrieved answer is: -7'
    """
    return ANSWER_TEMPLATE.format(answer=int(answer))


__all__ = [
    "ANSWER_TEMPLATE",
    "START_MESSAGE",
    "build_start_message",
    "format_answer",
]
