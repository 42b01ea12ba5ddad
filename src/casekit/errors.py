from __future__ import annotations

from typing import Iterable


class CaseKitError(Exception):
    """Base class for errors raised by the conversion engine."""


class InvalidInputType(CaseKitError, TypeError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Expected a string, but received {type(value).__name__}")


class UnknownStyle(CaseKitError, LookupError):
    def __init__(self, style: object, available: Iterable[str] = ()):
        self.style = style
        self.available = tuple(sorted(available))
        known = ", ".join(self.available) or "none"
        super().__init__(f"Unknown case style {style!r} (available: {known})")


__all__ = ["CaseKitError", "InvalidInputType", "UnknownStyle"]
