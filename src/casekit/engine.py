from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .config import EngineConfig, NullPolicy
from .errors import InvalidInputType, UnknownStyle
from .styles import CaseStyle, on_registry_change, registry_snapshot, render
from .tokens import tokenize as _tokenize


class CaseEngine:
    """
    Entry point that validates input, picks a style by name and runs the
    tokenize/render pipeline.

    The style table is copied when the engine is built and is read-only from
    then on, so one engine can be shared between threads freely.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        styles: Mapping[str, CaseStyle] | None = None,
    ):
        self.config = config or EngineConfig()
        table = registry_snapshot() if styles is None else styles
        self._styles: Mapping[str, CaseStyle] = MappingProxyType(dict(table))

    @property
    def null_policy(self) -> NullPolicy:
        return self.config.null_policy

    @property
    def styles(self) -> tuple[str, ...]:
        return tuple(sorted(self._styles))

    def style(self, name: str) -> CaseStyle:
        try:
            return self._styles[name]
        except (KeyError, TypeError):
            raise UnknownStyle(name, self._styles) from None

    def tokenize(self, value: object) -> list[str]:
        if value is None and self.null_policy is NullPolicy.LENIENT:
            return []
        if not isinstance(value, str):
            raise InvalidInputType(value)
        return _tokenize(value)

    def convert(self, value: object, style: str) -> str:
        descriptor = self.style(style)
        return render(self.tokenize(value), descriptor)

    def __repr__(self) -> str:
        return f"CaseEngine(null_policy={self.null_policy.value!r}, styles={list(self.styles)!r})"


_default_engine: CaseEngine | None = None


def get_engine() -> CaseEngine:
    """Return the process default engine, configured from the environment."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CaseEngine(EngineConfig.from_env())
    return _default_engine


def reset_engine() -> None:
    global _default_engine
    _default_engine = None


on_registry_change(reset_engine)


def convert(value: object, style: str) -> str:
    return get_engine().convert(value, style)


def tokenize(value: object) -> list[str]:
    return get_engine().tokenize(value)


__all__ = ["CaseEngine", "convert", "get_engine", "reset_engine", "tokenize"]
