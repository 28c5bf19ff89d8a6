"""In-memory stand-in for the greeting library.

Lets tests link the main application against a library with a different
greeting or answer and observe how often each function was called.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class LibrarySpy:
    """Greeting library double recording every call.

    Example:
        >>> spy = LibrarySpy(greeting="stub greeting", answer=7)
        >>> spy.print_greeting()
        stub greeting
        >>> spy.get_answer()
        7
        >>> spy.calls
        ['print_greeting', 'get_answer']
    """

    greeting: str = "Hello from the in-memory library!"
    answer: int = 42
    calls: list[str] = field(default_factory=list)

    def print_greeting(self) -> None:
        self.calls.append("print_greeting")
        print(self.greeting, flush=True)

    def get_answer(self) -> int:
        self.calls.append("get_answer")
        return self.answer


__all__ = ["LibrarySpy"]
