"""Exception hierarchy for font selection."""

from __future__ import annotations


class FontSelectionError(RuntimeError):
    """Base exception for font selection failures."""


class InvalidArgumentError(FontSelectionError, ValueError):
    """Raised when a caller supplies inputs no selection can be built from."""


class InvalidStateError(FontSelectionError):
    """Raised when a required field is read before it was ever set."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "FontSelectionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "exception_hint",
    "exception_messages",
]
